"""
Secure password generation utilities.
"""

import logging
import secrets
from dataclasses import dataclass, field
from typing import Callable, FrozenSet, Iterable, Mapping

from ..charsets import CLASS_ALPHABETS, CharacterClass, build_alphabet, describe_classes
from ..exceptions import InvalidLengthError, InvalidOptionError, NoClassSelectedError
from .validation import get_length_error_message, validate_length

logger = logging.getLogger(__name__)

# Bits per random draw
DRAW_BITS = 32


@dataclass(frozen=True)
class GenerationRequest:
    """Options for a single password generation."""

    length: int
    enabled_classes: FrozenSet[CharacterClass] = field(default_factory=frozenset)
    exclude_ambiguous: bool = False

    def __post_init__(self) -> None:
        # Accept any iterable of classes or class values, stored immutably
        try:
            classes = frozenset(CharacterClass(cls) for cls in self.enabled_classes)
        except ValueError as e:
            raise InvalidOptionError(f"Unknown character class: {e}") from e
        object.__setattr__(self, "enabled_classes", classes)


class PasswordGenerator:
    """Generate passwords by uniform sampling from a character alphabet."""

    def __init__(self,
                 random_source: Callable[[int], int] = secrets.randbits,
                 alphabets: Mapping[CharacterClass, str] = CLASS_ALPHABETS):
        """
        Initialize password generator.

        Args:
            random_source: Callable returning a non-negative integer with the
                given number of random bits (secrets.randbits by default)
            alphabets: Class-to-alphabet table (defaults to the built-in one)
        """
        self.random_source = random_source
        self.alphabets = alphabets

    def generate(self, request: GenerationRequest) -> str:
        """
        Generate a password for the given request.

        Args:
            request: Length, enabled classes and ambiguous-exclusion flag

        Returns:
            Generated password string

        Raises:
            NoClassSelectedError: If no character classes are enabled
            InvalidLengthError: If length is not a positive integer
            EmptyAlphabetError: If exclusion leaves no characters
        """
        if not request.enabled_classes:
            raise NoClassSelectedError("Select at least one option!")

        if not validate_length(request.length):
            raise InvalidLengthError(get_length_error_message(request.length))

        alphabet = build_alphabet(request.enabled_classes, request.exclude_ambiguous, self.alphabets)

        return "".join(alphabet[self._draw_index(len(alphabet))] for _ in range(request.length))

    def _draw_index(self, size: int) -> int:
        """
        Draw a uniform index in [0, size) using rejection sampling.

        Draws at or above the largest multiple of size that fits in
        DRAW_BITS are discarded, so the modulo reduction is unbiased.
        """
        limit = ((1 << DRAW_BITS) // size) * size

        while True:
            value = self.random_source(DRAW_BITS)
            if value < limit:
                return value % size
            logger.debug("Rejected out-of-range draw")

    @staticmethod
    def get_charset_info(request: GenerationRequest) -> str:
        """
        Get human-readable description of the request's character set.

        Returns:
            Description of enabled character types
        """
        return describe_classes(request.enabled_classes, request.exclude_ambiguous)


def build_request(length: int = 16,
                  use_uppercase: bool = True,
                  use_lowercase: bool = True,
                  use_digits: bool = True,
                  use_symbols: bool = False,
                  exclude_ambiguous: bool = False) -> GenerationRequest:
    """Build a GenerationRequest from per-class flags."""
    flags = (
        (use_uppercase, CharacterClass.UPPER),
        (use_lowercase, CharacterClass.LOWER),
        (use_digits, CharacterClass.DIGIT),
        (use_symbols, CharacterClass.SYMBOL),
    )
    classes: Iterable[CharacterClass] = (cls for enabled, cls in flags if enabled)

    return GenerationRequest(
        length=length,
        enabled_classes=frozenset(classes),
        exclude_ambiguous=exclude_ambiguous,
    )


def generate_password(length: int = 16,
                      use_uppercase: bool = True,
                      use_lowercase: bool = True,
                      use_digits: bool = True,
                      use_symbols: bool = False,
                      exclude_ambiguous: bool = False) -> str:
    """
    Convenience function to generate a password.

    Args:
        length: Password length (any positive integer)
        use_uppercase: Include uppercase letters
        use_lowercase: Include lowercase letters
        use_digits: Include digits
        use_symbols: Include symbol characters
        exclude_ambiguous: Exclude visually ambiguous characters (I, l, 1, O, 0)

    Returns:
        Generated password string
    """
    request = build_request(
        length=length,
        use_uppercase=use_uppercase,
        use_lowercase=use_lowercase,
        use_digits=use_digits,
        use_symbols=use_symbols,
        exclude_ambiguous=exclude_ambiguous,
    )

    return PasswordGenerator().generate(request)
