"""
Unit tests for character classes and alphabet assembly.
"""

import string

import pytest

from passgen.charsets import (
    AMBIGUOUS_CHARS,
    CLASS_ALPHABETS,
    SYMBOLS,
    CharacterClass,
    build_alphabet,
    describe_classes,
)
from passgen.exceptions import EmptyAlphabetError


class TestCharacterClasses:
    """Test the fixed class alphabets."""

    def test_class_alphabets(self):
        """Test each class maps to its ordered alphabet."""
        assert CLASS_ALPHABETS[CharacterClass.UPPER] == "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
        assert CLASS_ALPHABETS[CharacterClass.LOWER] == "abcdefghijklmnopqrstuvwxyz"
        assert CLASS_ALPHABETS[CharacterClass.DIGIT] == "0123456789"
        assert CLASS_ALPHABETS[CharacterClass.SYMBOL] == "!@#$%^&*()_+~`|}{[]:;?><,./-="

    def test_symbols_have_no_duplicates(self):
        """Test that every symbol appears once."""
        assert len(set(SYMBOLS)) == len(SYMBOLS)
        assert not set(SYMBOLS) & set(string.ascii_letters + string.digits)

    def test_table_is_read_only(self):
        """Test that the class table cannot be mutated."""
        with pytest.raises(TypeError):
            CLASS_ALPHABETS[CharacterClass.DIGIT] = "0"

    def test_ambiguous_chars(self):
        """Test the ambiguous character set."""
        assert AMBIGUOUS_CHARS == frozenset({"I", "l", "1", "O", "0"})


class TestBuildAlphabet:
    """Test alphabet assembly."""

    def test_fixed_class_order(self):
        """Test classes are concatenated Upper, Lower, Digit, Symbol."""
        alphabet = build_alphabet([CharacterClass.SYMBOL, CharacterClass.DIGIT, CharacterClass.UPPER])

        assert alphabet == string.ascii_uppercase + string.digits + SYMBOLS

    def test_all_classes(self):
        """Test the full alphabet size."""
        alphabet = build_alphabet(CharacterClass)

        assert len(alphabet) == 26 + 26 + 10 + len(SYMBOLS)
        assert len(set(alphabet)) == len(alphabet)

    def test_exclude_ambiguous_preserves_order(self):
        """Test ambiguous characters are removed and the rest keep their order."""
        alphabet = build_alphabet([CharacterClass.UPPER, CharacterClass.DIGIT], exclude_ambiguous=True)

        assert alphabet == "ABCDEFGHJKLMNPQRSTUVWXYZ23456789"

    def test_exclude_ambiguous_lowercase(self):
        """Test lowercase l is removed."""
        alphabet = build_alphabet([CharacterClass.LOWER], exclude_ambiguous=True)

        assert "l" not in alphabet
        assert len(alphabet) == 25

    def test_empty_selection(self):
        """Test that no classes gives an empty-alphabet error."""
        with pytest.raises(EmptyAlphabetError):
            build_alphabet([])

    def test_empty_after_exclusion(self):
        """Test a class made only of ambiguous characters."""
        alphabets = {CharacterClass.DIGIT: "01"}

        assert build_alphabet([CharacterClass.DIGIT], alphabets=alphabets) == "01"
        with pytest.raises(EmptyAlphabetError):
            build_alphabet([CharacterClass.DIGIT], exclude_ambiguous=True, alphabets=alphabets)

    def test_describe_classes(self):
        """Test human-readable class descriptions."""
        assert describe_classes([CharacterClass.DIGIT, CharacterClass.UPPER]) == "uppercase, digits"
        assert describe_classes([CharacterClass.LOWER], exclude_ambiguous=True) == \
            "lowercase (excluding ambiguous chars)"


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
