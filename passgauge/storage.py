import json
import os
import tempfile
from typing import Any, Dict


def ensure_parent_dir(path: str) -> None:
    d = os.path.dirname(path)
    if d:
        os.makedirs(d, exist_ok=True)


def atomic_write_bytes(path: str, data: bytes) -> None:
    """
    Replace 'path' with 'data' in one rename so readers never see a
    half-written pattern file. The temp file is removed if anything fails.
    """
    ensure_parent_dir(path)
    fd, tmp = tempfile.mkstemp(prefix=".passgauge-", suffix=".tmp", dir=os.path.dirname(path) or ".")
    try:
        with os.fdopen(fd, "wb") as f:
            f.write(data)
            f.flush()
            os.fsync(f.fileno())
        os.replace(tmp, path)
    except BaseException:
        os.unlink(tmp)
        raise


def read_bytes(path: str) -> bytes:
    with open(path, "rb") as f:
        return f.read()


def read_json_bytes(b: bytes) -> Any:
    return json.loads(b.decode("utf-8"))


def dump_json_bytes(obj: Dict[str, Any]) -> bytes:
    # indented: pattern files are meant to be edited by hand
    return (json.dumps(obj, ensure_ascii=False, indent=2) + "\n").encode("utf-8")
