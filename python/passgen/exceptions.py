"""
Custom exceptions for passgen.
"""


class PassgenException(Exception):
    """Base exception for passgen."""

    pass


class GenerationError(PassgenException):
    """Password could not be generated from the given request."""

    pass


class NoClassSelectedError(GenerationError):
    """No character classes were enabled."""

    pass


class EmptyAlphabetError(GenerationError):
    """Alphabet is empty after ambiguous characters were removed."""

    pass


class InvalidLengthError(GenerationError):
    """Requested password length is not a positive integer."""

    pass


class InvalidOptionError(PassgenException):
    """Unrecognised generator option value."""

    pass


class ClipboardError(PassgenException):
    """Clipboard operation failed."""

    pass
