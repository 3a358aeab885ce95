"""
passgauge.score

Strength labels and their display colors.
classify(score) bins a clamped 0-4 score into exactly one label.
"""

from enum import Enum
from typing import Tuple


class StrengthLabel(Enum):
    VERY_WEAK = "Very Weak"
    WEAK = "Weak"
    FAIR = "Fair"
    GOOD = "Good"
    STRONG = "Strong"

    @property
    def color(self) -> str:
        return LABEL_COLORS[self]


LABEL_COLORS = {
    StrengthLabel.VERY_WEAK: "#FF3B30",  # red
    StrengthLabel.WEAK: "#FF9500",       # orange
    StrengthLabel.FAIR: "#FFCC00",       # yellow
    StrengthLabel.GOOD: "#34C759",       # green
    StrengthLabel.STRONG: "#00C851",     # dark green
}


def classify(score: float) -> Tuple[StrengthLabel, str]:
    """
    Map a score to (label, color). Lower bounds are inclusive:
    1 is Weak, 2 is Fair, 3 is Good, 3.5 is Strong.
    """
    if score < 1:
        label = StrengthLabel.VERY_WEAK
    elif score < 2:
        label = StrengthLabel.WEAK
    elif score < 3:
        label = StrengthLabel.FAIR
    elif score < 3.5:
        label = StrengthLabel.GOOD
    else:
        label = StrengthLabel.STRONG
    return label, label.color
