"""
passgauge.evaluator

Password strength evaluator:
- check_requirements(password): the five policy checks, in fixed order
- detectors: common password, keyboard pattern, repeated and sequential runs
- StrengthEvaluator(config).evaluate(password): score (0-4), label, color,
  feedback and requirements as a StrengthReport

evaluate() is total: every string, including "", yields a report.
"""

import re
from typing import List, Optional, Tuple

from .config import PatternConfig, default_config
from .report import Requirement, StrengthReport
from .score import StrengthLabel, classify

SPECIAL_CHARS = '!@#$%^&*(),.?":{}|<>'

ALPHABET_SEQUENCE = "abcdefghijklmnopqrstuvwxyz"
DIGIT_SEQUENCE = "0123456789"

MIN_LENGTH = 8
MAX_SCORE = 4.0

# feedback messages, in the order the checks fire
MSG_REQUIRED = "Password is required"
MSG_TOO_SHORT = "Password is too short"
MSG_MIN_LENGTH = "Password should be at least 8 characters"
MSG_ADD_UPPER = "Add uppercase letters"
MSG_ADD_LOWER = "Add lowercase letters"
MSG_ADD_DIGITS = "Add numbers"
MSG_COMMON = "This is a commonly used password"
MSG_KEYBOARD = "Avoid keyboard patterns"
MSG_REPEATED = "Avoid repeated characters"
MSG_SEQUENTIAL = "Avoid sequential characters"
MSG_GREAT = "Great password!"
MSG_FALLBACK = "Consider a longer or more varied password"

_UPPER_RE = re.compile(r"[A-Z]")
_LOWER_RE = re.compile(r"[a-z]")
_DIGIT_RE = re.compile(r"[0-9]")
_SPECIAL_RE = re.compile("[" + re.escape(SPECIAL_CHARS) + "]")
_REPEAT_RE = re.compile(r"(.)\1{2,}", re.DOTALL)


def character_classes(password: str) -> Tuple[bool, bool, bool, bool]:
    """(has_upper, has_lower, has_digit, has_special); ASCII letters and digits only."""
    return (
        bool(_UPPER_RE.search(password)),
        bool(_LOWER_RE.search(password)),
        bool(_DIGIT_RE.search(password)),
        bool(_SPECIAL_RE.search(password)),
    )


def check_requirements(password: str) -> Tuple[Requirement, ...]:
    has_upper, has_lower, has_digit, has_special = character_classes(password)
    return (
        Requirement("At least 8 characters", len(password) >= MIN_LENGTH),
        Requirement("Contains uppercase letter", has_upper),
        Requirement("Contains lowercase letter", has_lower),
        Requirement("Contains number", has_digit),
        Requirement("Contains special character (!@#$%^&*)", has_special, optional=True),
    )


def length_contribution(length: int) -> Tuple[float, Optional[str]]:
    if length < 6:
        return 0.0, MSG_TOO_SHORT
    if length < MIN_LENGTH:
        return 0.5, MSG_MIN_LENGTH
    if length < 12:
        return 1.0, None
    return 1.5, None


def is_common_password(password: str, common_passwords) -> bool:
    """Case-insensitive exact match against the denylist."""
    return password.lower() in common_passwords


def detect_keyboard_pattern(password: str, patterns) -> Optional[str]:
    """Return the first keyboard pattern found in the password, or None."""
    lower = password.lower()
    for pattern in patterns:
        if pattern in lower:
            return pattern
    return None


def has_repeated_chars(password: str) -> bool:
    """True if any character occurs 3+ times in a row ('aaa', '111')."""
    return _REPEAT_RE.search(password) is not None


def has_sequential_chars(password: str) -> bool:
    """
    True if any 3-character window is an ascending run of the alphabet or the
    digits ('abc', 'XYZ', '789'). Descending runs are not flagged.
    """
    lower = password.lower()
    for seq in (ALPHABET_SEQUENCE, DIGIT_SEQUENCE):
        for i in range(len(lower) - 2):
            if lower[i:i + 3] in seq:
                return True
    return False


class StrengthEvaluator:
    """Scores passwords against an immutable PatternConfig."""

    def __init__(self, config: Optional[PatternConfig] = None):
        self.config = config or default_config()

    def evaluate(self, password: str) -> StrengthReport:
        requirements = check_requirements(password)

        if not password:
            return StrengthReport(
                score=0.0,
                label=StrengthLabel.VERY_WEAK,
                feedback=(MSG_REQUIRED,),
                requirements=requirements,
            )

        feedback: List[str] = []
        length = len(password)

        score, length_msg = length_contribution(length)
        if length_msg:
            feedback.append(length_msg)

        has_upper, has_lower, has_digit, has_special = character_classes(password)
        if not has_upper:
            feedback.append(MSG_ADD_UPPER)
        if not has_lower:
            feedback.append(MSG_ADD_LOWER)
        if not has_digit:
            feedback.append(MSG_ADD_DIGITS)
        variety_count = sum((has_upper, has_lower, has_digit, has_special))
        score += variety_count * 0.5

        if is_common_password(password, self.config.common_passwords):
            score = min(score, 1.0)
            feedback.append(MSG_COMMON)

        if detect_keyboard_pattern(password, self.config.keyboard_patterns) is not None:
            score = min(score, 1.5)
            feedback.append(MSG_KEYBOARD)

        # one penalty each, however many runs there are
        if has_repeated_chars(password):
            score -= 0.5
            feedback.append(MSG_REPEATED)

        if has_sequential_chars(password):
            score -= 0.5
            feedback.append(MSG_SEQUENTIAL)

        if variety_count >= 3 and length >= 10:
            score += 0.5

        score = max(0.0, min(MAX_SCORE, score))

        if not feedback:
            if score >= 3:
                feedback.append(MSG_GREAT)
            elif self.config.neutral_fallback:
                feedback.append(MSG_FALLBACK)

        label, _ = classify(score)
        return StrengthReport(
            score=score,
            label=label,
            feedback=tuple(feedback),
            requirements=requirements,
        )


_default_evaluator = StrengthEvaluator()


def evaluate(password: str, config: Optional[PatternConfig] = None) -> StrengthReport:
    """Evaluate with the built-in patterns, or with 'config' when given."""
    if config is None:
        return _default_evaluator.evaluate(password)
    return StrengthEvaluator(config).evaluate(password)
