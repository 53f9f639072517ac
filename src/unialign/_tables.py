"""
Unicode character oracles used by the alignment iterators.

Provides:
- canonical_combining_class(): the canonical combining class of a character
- compose(): the primary composite of a (base, mark) pair, if any
- decompose_char(): full canonical or compatibility decomposition of one character

All data comes from the interpreter's ``unicodedata`` module, so results
track the Unicode version Python ships with. The composition pair table is
built on first use and cached for the life of the process.
"""

from __future__ import annotations

import logging
import sys
import unicodedata
from functools import lru_cache
from typing import Optional

__all__ = ["canonical_combining_class", "compose", "decompose_char"]

logger = logging.getLogger(__name__)

# Hangul syllables for modern Korean
_SB = 0xAC00
_SL = 0xD7A3

# Hangul leading consonants (syllable onsets)
_LB = 0x1100
_LL = 0x1112

# Hangul vowels (syllable nucleuses)
_VB = 0x1161
_VL = 0x1175

# Hangul trailing consonants (syllable codas)
_TB = 0x11A8
_TL = 0x11C2

_VCOUNT = 21
# 27 trailing consonants plus the "no coda" case
_TCOUNT = 28

_SURROGATES = range(0xD800, 0xE000)


def canonical_combining_class(ch: str) -> int:
    """Return the canonical combining class of ``ch`` (0 for starters)."""
    return unicodedata.combining(ch)


@lru_cache(maxsize=None)
def _composition_table() -> dict[tuple[str, str], str]:
    """
    Map canonical decomposition pairs to their primary composite.

    Only two-character canonical decompositions are candidates. A candidate
    whose NFC form is not itself has been excluded from composition (the
    composition exclusion table, singletons, and non-starter
    decompositions), so it is skipped.
    """
    table: dict[tuple[str, str], str] = {}
    for cp in range(sys.maxunicode + 1):
        if cp in _SURROGATES:
            continue
        composite = chr(cp)
        decomposition = unicodedata.decomposition(composite)
        if not decomposition or decomposition.startswith("<"):
            continue
        parts = decomposition.split()
        if len(parts) != 2:
            continue
        if unicodedata.normalize("NFC", composite) != composite:
            continue
        table[(chr(int(parts[0], 16)), chr(int(parts[1], 16)))] = composite
    logger.debug(
        "Built composition table with %d pairs (Unicode %s)",
        len(table),
        unicodedata.unidata_version,
    )
    return table


def _compose_hangul(base: int, mark: int) -> Optional[str]:
    if _LB <= base <= _LL and _VB <= mark <= _VL:
        # Leading consonant + vowel -> LV syllable
        return chr(_SB + ((base - _LB) * _VCOUNT + mark - _VB) * _TCOUNT)
    if _SB <= base <= _SL and not (base - _SB) % _TCOUNT and _TB <= mark <= _TL:
        # LV syllable + trailing consonant -> LVT syllable
        return chr(base + mark - (_TB - 1))
    return None


def compose(base: str, mark: str) -> Optional[str]:
    """
    Return the primary composite of ``base`` followed by ``mark``.

    Args:
        base: The starter to compose into
        mark: The following character (usually a combining mark, but Hangul
            vowels and trailing consonants are starters)

    Returns:
        The composed character, or None when the pair does not compose

    Example:
        >>> compose("e", "\\u0301")
        'é'
        >>> compose("e", "\\u0305") is None
        True
    """
    hangul = _compose_hangul(ord(base), ord(mark))
    if hangul is not None:
        return hangul
    return _composition_table().get((base, mark))


@lru_cache(maxsize=4096)
def decompose_char(ch: str, compatibility: bool = False) -> str:
    """
    Return the full decomposition of a single character.

    The result is canonically ordered within itself; ordering across
    neighbouring characters is the caller's job.
    """
    return unicodedata.normalize("NFKD" if compatibility else "NFD", ch)
