"""
Character classes and alphabet assembly.

Each class maps to a fixed, ordered alphabet. The table is read-only and
built once at import time.
"""

import enum
import logging
import string
from types import MappingProxyType
from typing import FrozenSet, Iterable, Mapping

from .exceptions import EmptyAlphabetError

logger = logging.getLogger(__name__)


class CharacterClass(enum.Enum):
    """Categories of characters that can contribute to an alphabet."""

    UPPER = "upper"
    LOWER = "lower"
    DIGIT = "digit"
    SYMBOL = "symbol"


SYMBOLS = "!@#$%^&*()_+~`|}{[]:;?><,./-="

CLASS_ALPHABETS: Mapping[CharacterClass, str] = MappingProxyType({
    CharacterClass.UPPER: string.ascii_uppercase,
    CharacterClass.LOWER: string.ascii_lowercase,
    CharacterClass.DIGIT: string.digits,
    CharacterClass.SYMBOL: SYMBOLS,
})

# Assembly order, independent of how the caller listed the classes
CLASS_ORDER = (
    CharacterClass.UPPER,
    CharacterClass.LOWER,
    CharacterClass.DIGIT,
    CharacterClass.SYMBOL,
)

# Visually confusable characters
AMBIGUOUS_CHARS: FrozenSet[str] = frozenset("Il1O0")


def build_alphabet(classes: Iterable[CharacterClass],
                   exclude_ambiguous: bool = False,
                   alphabets: Mapping[CharacterClass, str] = CLASS_ALPHABETS) -> str:
    """
    Build the sampling alphabet for a set of character classes.

    Args:
        classes: Enabled character classes
        exclude_ambiguous: Drop characters in AMBIGUOUS_CHARS
        alphabets: Class-to-alphabet table (defaults to the built-in one)

    Returns:
        Ordered alphabet string

    Raises:
        EmptyAlphabetError: If nothing is left to sample from
    """
    enabled = set(classes)
    alphabet = "".join(alphabets.get(cls, "") for cls in CLASS_ORDER if cls in enabled)

    if exclude_ambiguous:
        alphabet = "".join(c for c in alphabet if c not in AMBIGUOUS_CHARS)

    if not alphabet:
        raise EmptyAlphabetError("No characters available for password generation")

    logger.debug(f"Built alphabet of {len(alphabet)} characters")
    return alphabet


def describe_classes(classes: Iterable[CharacterClass], exclude_ambiguous: bool = False) -> str:
    """
    Get human-readable description of enabled character classes.

    Returns:
        Comma-separated class names in assembly order
    """
    names = {
        CharacterClass.UPPER: "uppercase",
        CharacterClass.LOWER: "lowercase",
        CharacterClass.DIGIT: "digits",
        CharacterClass.SYMBOL: "symbols",
    }
    enabled = set(classes)
    info = ", ".join(names[cls] for cls in CLASS_ORDER if cls in enabled)

    if exclude_ambiguous:
        info += " (excluding ambiguous chars)"

    return info
