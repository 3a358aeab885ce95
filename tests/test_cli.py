import logging

from passgauge.cli import main
from passgauge.config import default_config, load_config


def _run(capsys, tmp_path, *argv):
    # point at a missing file so a user's own pattern file never leaks in
    code = main(["--config", str(tmp_path / "patterns.json"), *argv])
    return code, capsys.readouterr().out


def test_score_strong(capsys, tmp_path):
    code, out = _run(capsys, tmp_path, "score", "Gh7!kP2#wQ9z")
    assert code == 0
    assert "Strong" in out
    assert "Great password!" in out
    assert "(recommended)" in out


def test_score_json(capsys, tmp_path):
    code, out = _run(capsys, tmp_path, "score", "password", "--json")
    assert code == 0
    assert '"label": "Weak"' in out
    assert "This is a commonly used password" in out


def test_suggest_copies(capsys, tmp_path):
    code, out = _run(capsys, tmp_path, "suggest", "--copies", "3", "--check")
    assert code == 0
    assert out.count("Suggestion #") == 3


def test_suggest_rejects_zero(capsys, tmp_path):
    code, _ = _run(capsys, tmp_path, "suggest", "--copies", "0")
    assert code == 2


def test_requirements(capsys, tmp_path):
    code, out = _run(capsys, tmp_path, "requirements")
    assert code == 0
    assert "Password must:" in out


def test_patterns_export(capsys, tmp_path):
    target = tmp_path / "exported.json"
    code, out = _run(capsys, tmp_path, "patterns", "export", "--output", str(target))
    assert code == 0
    assert "Wrote pattern config" in out
    assert load_config(str(target)) == default_config()


def test_bad_config_exits_2(capsys, tmp_path):
    bad = tmp_path / "bad.json"
    bad.write_text("[1, 2", encoding="utf-8")
    code = main(["--config", str(bad), "score", "whatever"])
    out = capsys.readouterr().out
    assert code == 2
    assert "cannot read pattern file" in out


def test_verbose_enables_debug_logging(capsys, tmp_path, monkeypatch):
    calls = []
    monkeypatch.setattr(logging, "basicConfig", lambda **kw: calls.append(kw))
    code, out = _run(capsys, tmp_path, "--verbose", "requirements")
    assert code == 0
    assert "Password must:" in out
    assert calls and calls[0]["level"] == logging.DEBUG
