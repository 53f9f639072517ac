"""
Normalization with an original <-> normalized position map.

Runs text through the decomposition producer (and, for the composed
forms, the recomposition engine) and keeps the per-character deltas so
that offsets can be translated in either direction.

Example:
    >>> from unialign import normalize_detailed
    >>> result = normalize_detailed("Cafe\\u0301 au lait")
    >>> result.normalized
    'Café au lait'
    >>> result.to_original(5)
    6
"""

from __future__ import annotations

from bisect import bisect_right
from dataclasses import dataclass, field
from functools import cached_property

from unialign.decompose import DecompositionsAlignment
from unialign.recompose import RecompositionsAlignment

__all__ = ["AlignedText", "FORMS", "normalize", "normalize_detailed"]

FORMS = ("NFC", "NFKC", "NFD", "NFKD")


@dataclass(frozen=True)
class AlignedText:
    """
    Normalized text together with its alignment to the original.

    ``deltas[i]`` is the delta carried by ``normalized[i]``: that character
    stands for ``1 - deltas[i]`` characters of ``original``.
    """

    original: str
    normalized: str
    form: str
    deltas: tuple[int, ...] = field(default=(), repr=False)

    @cached_property
    def boundaries(self) -> list[int]:
        """Original start offset of every normalized position, plus the end."""
        starts = [0]
        for delta in self.deltas:
            starts.append(starts[-1] + 1 - delta)
        return starts

    @property
    def offset(self) -> int:
        """Total change in length (normalized minus original)."""
        return sum(self.deltas)

    def to_original(self, pos: int) -> int:
        """Return the original offset where normalized position ``pos`` starts."""
        if not 0 <= pos <= len(self.normalized):
            raise IndexError(
                f"Normalized position {pos} out of range 0..{len(self.normalized)}"
            )
        return self.boundaries[pos]

    def to_normalized(self, pos: int) -> int:
        """
        Return the normalized position of the character covering original ``pos``.

        An original offset that falls inside a composed character maps to
        that character. ``len(original)`` maps to ``len(normalized)``.
        """
        if not 0 <= pos <= len(self.original):
            raise IndexError(
                f"Original position {pos} out of range 0..{len(self.original)}"
            )
        return bisect_right(self.boundaries, pos) - 1

    def original_span(self, start: int, end: int) -> tuple[int, int]:
        """Map a normalized slice ``[start, end)`` to the original slice covering it."""
        if start > end:
            raise ValueError(f"Empty span: start {start} is after end {end}")
        return self.to_original(start), self.to_original(end)


def _check_form(form: str) -> str:
    key = form.upper()
    if key not in FORMS:
        raise ValueError(
            f"Unknown normalization form: {form}. Expected one of {', '.join(FORMS)}."
        )
    return key


def normalize_detailed(text: str, form: str = "NFC") -> AlignedText:
    """
    Normalize text and keep the alignment to the original.

    Args:
        text: Input text
        form: One of NFC, NFKC, NFD, NFKD (case-insensitive)

    Returns:
        AlignedText with the normalized string and per-character deltas
    """
    key = _check_form(form)
    stream = DecompositionsAlignment(text, compatibility=key.startswith("NFK"))
    if key in ("NFC", "NFKC"):
        stream = RecompositionsAlignment(stream)

    chars: list[str] = []
    deltas: list[int] = []
    for ch, delta in stream:
        chars.append(ch)
        deltas.append(delta)
    return AlignedText(
        original=text, normalized="".join(chars), form=key, deltas=tuple(deltas)
    )


def normalize(text: str, form: str = "NFC") -> str:
    """
    Normalize text, discarding the alignment.

    Example:
        >>> normalize("\\ufb01ne", "NFKC")
        'fine'
    """
    key = _check_form(form)
    if not text:
        return text
    if key == "NFC":
        return RecompositionsAlignment.canonical(text).render()
    if key == "NFKC":
        return RecompositionsAlignment.compatible(text).render()
    return DecompositionsAlignment(text, compatibility=key == "NFKD").render()
