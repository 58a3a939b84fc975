"""
Coarse password strength estimation.

Scores one point each for reaching 8 and 12 characters, and for containing
an uppercase letter, a digit, and a non-alphanumeric character.
"""

import math
import re
from typing import NamedTuple, Optional

WEAK = "Weak"
MEDIUM = "Medium"
STRONG = "Strong"

MAX_SCORE = 5

_UPPER_PATTERN = re.compile(r"[A-Z]")
_DIGIT_PATTERN = re.compile(r"[0-9]")
_SYMBOL_PATTERN = re.compile(r"[^A-Za-z0-9]")


class StrengthReport(NamedTuple):
    """Result of a strength check."""
    score: int
    label: str
    entropy_bits: float


def score_password(password: str) -> int:
    """
    Score a password from 0 to MAX_SCORE.

    Args:
        password: Password to score

    Returns:
        Integer score
    """
    score = 0

    if len(password) >= 8:
        score += 1
    if len(password) >= 12:
        score += 1
    if _UPPER_PATTERN.search(password):
        score += 1
    if _DIGIT_PATTERN.search(password):
        score += 1
    if _SYMBOL_PATTERN.search(password):
        score += 1

    return score


def strength_label(score: int) -> str:
    """Map a score to Weak, Medium or Strong."""
    if score <= 2:
        return WEAK
    if score <= 4:
        return MEDIUM
    return STRONG


def entropy_bits(length: int, alphabet_size: int) -> float:
    """Theoretical entropy of a uniformly sampled password, in bits."""
    if length <= 0 or alphabet_size <= 0:
        return 0.0
    return length * math.log2(alphabet_size)


def check_strength(password: str, alphabet_size: Optional[int] = None) -> StrengthReport:
    """
    Estimate the strength of a password.

    Args:
        password: Password to check
        alphabet_size: Size of the alphabet it was drawn from, if known

    Returns:
        StrengthReport with score, label and entropy estimate
    """
    score = score_password(password)
    bits = entropy_bits(len(password), alphabet_size) if alphabet_size else 0.0

    return StrengthReport(score, strength_label(score), bits)
