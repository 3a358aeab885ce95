"""
passgauge.generator
Memorable password suggestions using Python's secrets module.
"""

from secrets import choice, randbelow
from typing import List

ADJECTIVES = ("Swift", "Bright", "Cosmic", "Crystal", "Mystic", "Thunder")
NOUNS = ("Phoenix", "Dragon", "Falcon", "Tiger", "Eagle", "Wolf")
SUGGESTION_SYMBOLS = "!@#$*"


def suggest() -> str:
    """
    Return an Adjective + Noun + 3-digit number + symbol suggestion,
    e.g. 'CosmicFalcon472#'. The result is not run through the evaluator.
    """
    number = 100 + randbelow(900)
    return f"{choice(ADJECTIVES)}{choice(NOUNS)}{number}{choice(SUGGESTION_SYMBOLS)}"


def suggest_many(count: int) -> List[str]:
    if count <= 0:
        raise ValueError("count must be > 0")
    return [suggest() for _ in range(count)]
