"""Currency symbol placement classification.

Classifies where a currency symbol sits in either a plain string or an
ordered sequence of typed parts. Both shapes use the same rule so that a
rendered string and its parts classify identically:

    index 0                    -> leading
    index == last valid index  -> trailing
    any other index            -> within
    not found                  -> missing

For parts the last valid index is ``len(parts) - 1``. For strings it is
``len(text) - len(symbol)``, the last offset at which the whole symbol fits,
so multi-character symbols ("US$", "$ US") classify like their single
currency part would.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence

from currencyinfo.enums import PartType, SymbolPosition

__all__ = ["classify_index", "locate_symbol"]


def classify_index(index: int, last_index: int) -> SymbolPosition:
    """Classify a symbol index against the last valid index."""
    if index < 0:
        return SymbolPosition.MISSING
    if index == 0:
        return SymbolPosition.LEADING
    if index == last_index:
        return SymbolPosition.TRAILING
    return SymbolPosition.WITHIN


def _part_fields(part: object) -> tuple[str | None, str | None]:
    """Extract (type, value) from a NumberPart or an Intl-style mapping."""
    if isinstance(part, Mapping):
        return part.get("type"), part.get("value")
    return getattr(part, "type", None), getattr(part, "value", None)


def _is_parts_sequence(target: object) -> bool:
    return isinstance(target, Sequence) and not isinstance(target, (str, bytes, bytearray))


def locate_symbol(target: object, symbol: str) -> SymbolPosition:
    """Classify the position of a currency symbol.

    Args:
        target: A sequence of typed parts (NumberPart objects or mappings with
            "type" and "value" keys), or any other value, which is converted
            with str()
        symbol: Currency symbol to look for in string input (parts input
            looks for the part typed "currency" instead)

    Returns:
        SymbolPosition classification

    Examples:
        >>> locate_symbol("$1.50", "$")
        <SymbolPosition.LEADING: 'leading'>
        >>> locate_symbol("1,50 $", "$")
        <SymbolPosition.TRAILING: 'trailing'>
        >>> locate_symbol("1$50", "$")
        <SymbolPosition.WITHIN: 'within'>
        >>> locate_symbol("1.50", "$")
        <SymbolPosition.MISSING: 'missing'>
        >>> locate_symbol([{"type": "currency", "value": "$"}, {"type": "integer", "value": "1"}], "$")
        <SymbolPosition.LEADING: 'leading'>
    """
    if _is_parts_sequence(target):
        fields = [_part_fields(part) for part in target]  # type: ignore[attr-defined]
        valid = [(kind, value) for kind, value in fields if kind and value]
        index = next(
            (i for i, (kind, _) in enumerate(valid) if kind == PartType.CURRENCY),
            -1,
        )
        return classify_index(index, len(valid) - 1)

    text = str(target)
    return classify_index(text.find(symbol), len(text) - len(symbol))
