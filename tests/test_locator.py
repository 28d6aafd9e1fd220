"""Tests for currency symbol placement classification."""

from hypothesis import given
from hypothesis import strategies as st

from currencyinfo.enums import PartType, SymbolPosition
from currencyinfo.runtime.locator import classify_index, locate_symbol
from currencyinfo.runtime.service import NumberPart


class TestClassifyIndex:
    """Test the index classification rule."""

    def test_negative_is_missing(self) -> None:
        assert classify_index(-1, 5) is SymbolPosition.MISSING

    def test_zero_is_leading(self) -> None:
        assert classify_index(0, 5) is SymbolPosition.LEADING

    def test_last_is_trailing(self) -> None:
        assert classify_index(5, 5) is SymbolPosition.TRAILING

    def test_middle_is_within(self) -> None:
        assert classify_index(2, 5) is SymbolPosition.WITHIN

    def test_zero_wins_over_trailing(self) -> None:
        """A symbol that is the whole input classifies as leading."""
        assert classify_index(0, 0) is SymbolPosition.LEADING


class TestLocateSymbolInStrings:
    """Test string targets."""

    def test_leading(self) -> None:
        assert locate_symbol("$1.50", "$") is SymbolPosition.LEADING

    def test_trailing(self) -> None:
        assert locate_symbol("1,50 $", "$") is SymbolPosition.TRAILING

    def test_within(self) -> None:
        assert locate_symbol("1$50", "$") is SymbolPosition.WITHIN

    def test_missing(self) -> None:
        assert locate_symbol("1.50", "$") is SymbolPosition.MISSING

    def test_trailing_multi_character_symbol(self) -> None:
        """A trailing multi-character symbol is trailing, not within."""
        assert locate_symbol("1,50 $ US", "$ US") is SymbolPosition.TRAILING

    def test_first_occurrence_decides(self) -> None:
        """Only the first occurrence of the symbol is classified."""
        assert locate_symbol("$1$", "$") is SymbolPosition.LEADING

    def test_non_string_targets_are_stringified(self) -> None:
        """Numbers are converted with str()."""
        assert locate_symbol(123, "$") is SymbolPosition.MISSING
        assert locate_symbol(None, "$") is SymbolPosition.MISSING


class TestLocateSymbolInParts:
    """Test parts-sequence targets."""

    def test_mapping_parts(self) -> None:
        """Intl-style mappings are accepted."""
        parts = [
            {"type": "integer", "value": "1"},
            {"type": "literal", "value": " "},
            {"type": "currency", "value": "$"},
        ]
        assert locate_symbol(parts, "$") is SymbolPosition.TRAILING

    def test_number_parts(self) -> None:
        """NumberPart objects are accepted."""
        parts = (NumberPart(PartType.CURRENCY, "US$"), NumberPart(PartType.INTEGER, "1"))
        assert locate_symbol(parts, "$") is SymbolPosition.LEADING

    def test_empty_parts_are_ignored(self) -> None:
        """Parts with an empty type or value do not count toward positions."""
        parts = [
            {"type": "integer", "value": "1"},
            {"type": "currency", "value": "$"},
            {"type": "literal", "value": ""},
            {"type": "", "value": "x"},
        ]
        assert locate_symbol(parts, "$") is SymbolPosition.TRAILING

    def test_missing_currency_part(self) -> None:
        parts = [{"type": "integer", "value": "1"}]
        assert locate_symbol(parts, "$") is SymbolPosition.MISSING

    def test_empty_sequence(self) -> None:
        assert locate_symbol([], "$") is SymbolPosition.MISSING

    def test_within(self) -> None:
        parts = [
            {"type": "integer", "value": "1"},
            {"type": "currency", "value": "$"},
            {"type": "fraction", "value": "50"},
        ]
        assert locate_symbol(parts, "$") is SymbolPosition.WITHIN


class TestLocatorConsistency:
    """String and parts forms of the same rendering classify identically."""

    @given(
        prefix=st.sampled_from(["", "-"]),
        digits=st.text(alphabet="0123456789", min_size=1, max_size=6),
        symbol=st.sampled_from(["$", "US$", "$ US", "€"]),
        trailing=st.booleans(),
    )
    def test_string_and_parts_agree(
        self, prefix: str, digits: str, symbol: str, trailing: bool
    ) -> None:
        """Joining the parts and locating in the string gives the same answer."""
        parts = [NumberPart(PartType.INTEGER, digits)]
        if trailing:
            parts += [NumberPart(PartType.LITERAL, " "), NumberPart(PartType.CURRENCY, symbol)]
        else:
            parts.insert(0, NumberPart(PartType.CURRENCY, symbol))
        if prefix:
            parts.insert(0, NumberPart(PartType.MINUS_SIGN, prefix))
        text = "".join(part.value for part in parts)
        assert locate_symbol(text, symbol) == locate_symbol(parts, symbol)
