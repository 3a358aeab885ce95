"""
passgauge.report

Value types returned by the evaluator. Both are frozen; a report is built
fresh for every call and owned by the caller.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Tuple

from .score import StrengthLabel


@dataclass(frozen=True)
class Requirement:
    label: str
    met: bool
    optional: bool = False

    def as_dict(self) -> Dict[str, Any]:
        return {"label": self.label, "met": self.met, "optional": self.optional}


@dataclass(frozen=True)
class StrengthReport:
    score: float  # 0..4
    label: StrengthLabel
    feedback: Tuple[str, ...]
    requirements: Tuple[Requirement, ...]
    color: str = field(init=False)

    def __post_init__(self):
        # color always follows the label
        object.__setattr__(self, "color", self.label.color)

    def as_dict(self) -> Dict[str, Any]:
        """JSON-ready form used by the CLI and the web API."""
        return {
            "score": self.score,
            "label": self.label.value,
            "color": self.color,
            "feedback": list(self.feedback),
            "requirements": [r.as_dict() for r in self.requirements],
        }
