"""
passgauge.suggestions

Turn an evaluation into something a form or terminal can show: the policy
text, whether the required checks pass, and example suggestions from the
generator.
"""

from typing import Any, Dict, List, Optional

from .config import PatternConfig
from .evaluator import evaluate
from .generator import suggest_many
from .report import StrengthReport
from .score import StrengthLabel


def requirements_text() -> str:
    return (
        "Password must:\n"
        "• Be at least 8 characters long\n"
        "• Contain uppercase and lowercase letters\n"
        "• Contain at least one number\n"
        "• Avoid common passwords and patterns\n"
        "• Special characters recommended (!@#$%^&*)"
    )


def is_acceptable(report: StrengthReport) -> bool:
    """True when every non-optional requirement is met."""
    return all(r.met for r in report.requirements if not r.optional)


def missing_requirements(report: StrengthReport) -> List[str]:
    return [r.label for r in report.requirements if not r.met and not r.optional]


def suggest_improvements(
    password: str,
    config: Optional[PatternConfig] = None,
    examples: int = 1,
) -> Dict[str, Any]:
    """
    Evaluate 'password' and attach presentation extras:
    {
        "score": float, "label": str, "color": str,
        "feedback": [str], "requirements": [dict],
        "acceptable": bool,
        "missing": [str],      # labels of unmet required checks
        "examples": [str]      # generated suggestions; one extra when the password is weak
    }
    The password itself is not echoed back.
    """
    report = evaluate(password, config)
    result = report.as_dict()
    result["acceptable"] = is_acceptable(report)
    result["missing"] = missing_requirements(report)

    count = examples
    if report.label in (StrengthLabel.VERY_WEAK, StrengthLabel.WEAK):
        count += 1
    result["examples"] = suggest_many(count) if count > 0 else []
    return result
