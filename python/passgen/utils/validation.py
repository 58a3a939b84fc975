"""
Input validation utilities for passgen options.
"""

from typing import FrozenSet, Iterable, Optional

from ..charsets import CharacterClass
from ..exceptions import InvalidOptionError

# Accepted spellings for each character class
CLASS_ALIASES = {
    "upper": CharacterClass.UPPER,
    "uppercase": CharacterClass.UPPER,
    "lower": CharacterClass.LOWER,
    "lowercase": CharacterClass.LOWER,
    "digit": CharacterClass.DIGIT,
    "digits": CharacterClass.DIGIT,
    "number": CharacterClass.DIGIT,
    "numbers": CharacterClass.DIGIT,
    "symbol": CharacterClass.SYMBOL,
    "symbols": CharacterClass.SYMBOL,
}


def validate_length(length: object, minimum: int = 1, maximum: Optional[int] = None) -> bool:
    """
    Validate a password length.

    Args:
        length: The value to validate
        minimum: Smallest accepted length
        maximum: Largest accepted length, or None for no upper bound

    Returns:
        True if length is valid, False otherwise
    """
    if isinstance(length, bool) or not isinstance(length, int):
        return False

    if length < minimum:
        return False

    return maximum is None or length <= maximum


def get_length_error_message(length: object, minimum: int = 1, maximum: Optional[int] = None) -> str:
    """
    Get a descriptive error message for an invalid length.

    Args:
        length: The invalid length

    Returns:
        Error message describing why the length is invalid
    """
    if isinstance(length, bool) or not isinstance(length, int):
        return "Length must be an integer"

    if length < minimum:
        return f"Length must be at least {minimum}"

    if maximum is not None and length > maximum:
        return f"Length cannot be greater than {maximum}"

    return "Length is invalid"


def parse_character_classes(names: Iterable[str]) -> FrozenSet[CharacterClass]:
    """
    Convert class names to CharacterClass members.

    Names are case-insensitive; surrounding whitespace and empty entries
    are ignored.

    Raises:
        InvalidOptionError: If a name is not recognised
    """
    classes = set()

    for name in names:
        key = name.strip().lower()
        if not key:
            continue
        if key not in CLASS_ALIASES:
            raise InvalidOptionError(f"Unknown character class: {name.strip()}")
        classes.add(CLASS_ALIASES[key])

    return frozenset(classes)
