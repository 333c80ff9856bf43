"""
Locale-aware string ordering for import sources.

Approximates the Unicode root collation that JavaScript's localeCompare
applies to ASCII paths: whitespace, then punctuation in CLDR order, then
digits, then letters compared case-insensitively. Lowercase wins ties over
uppercase, and the raw string is the final tie-break so the order is total.

The key covers ASCII only. Other letters compare by their casefolded code
point, so accented letters do not share a primary weight with their base
letter: "\u00e9" stays distinct from "e" and sorts after "z".
"""

from __future__ import annotations

from typing import Tuple

# CLDR root order of ASCII punctuation and symbols
_PUNCTUATION = "_-,;:!?.'\"()[]{}@*/\\&#%`^+<=>|~$"
_PUNCT_RANK = {ch: i for i, ch in enumerate(_PUNCTUATION)}

_SPACE, _PUNCT, _DIGIT, _LETTER, _OTHER = range(5)


def _primary(ch: str) -> Tuple[int, int, str]:
    if ch.isspace():
        return _SPACE, 0, ""
    if ch in _PUNCT_RANK:
        return _PUNCT, _PUNCT_RANK[ch], ""
    if ch.isdigit():
        return _DIGIT, 0, ch
    if ch.isalpha():
        return _LETTER, 0, ch.casefold()
    return _OTHER, ord(ch), ""


def collation_key(text: str) -> Tuple[tuple, tuple, str]:
    """Sort key comparing strings the way a root-locale collator does."""
    primary = tuple(_primary(ch) for ch in text)
    tertiary = tuple(1 if ch.isupper() else 0 for ch in text)
    return primary, tertiary, text


__all__ = ["collation_key"]
