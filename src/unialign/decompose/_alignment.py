"""
Canonically ordered decomposition with per-character alignment deltas.

Each source character is replaced by its full decomposition. The first
character of a decomposition carries delta 0 and every additional
character carries +1, so the deltas of a stream always sum to the change
in length. Runs of combining marks are held back until the next starter
(or the end of input) and then stably sorted by combining class, which
keeps marks from neighbouring source characters in canonical order.

Example:
    >>> from unialign.decompose import DecompositionsAlignment
    >>> [(f"U+{ord(ch):04X}", delta) for ch, delta in DecompositionsAlignment("é")]
    [('U+0065', 0), ('U+0301', 1)]
"""

from __future__ import annotations

from operator import itemgetter
from typing import Iterable, Iterator

from unialign._tables import canonical_combining_class, decompose_char

__all__ = ["DecompositionsAlignment"]

_by_class = itemgetter(0)


class DecompositionsAlignment:
    """
    One-pass iterator of ``(character, delta)`` pairs in canonical order.

    Args:
        chars: Source characters (a string or any iterable of characters)
        compatibility: Use compatibility (NFKD) instead of canonical (NFD)
            decomposition
    """

    def __init__(self, chars: Iterable[str], compatibility: bool = False) -> None:
        self.compatibility = compatibility
        self._iter = iter(chars)
        # (combining class, character, delta); entries before _ready are final
        self._buffer: list[tuple[int, str, int]] = []
        self._ready = 0
        self._cursor = 0
        self._exhausted = False

    @classmethod
    def canonical(cls, chars: Iterable[str]) -> "DecompositionsAlignment":
        return cls(chars)

    @classmethod
    def compatible(cls, chars: Iterable[str]) -> "DecompositionsAlignment":
        return cls(chars, compatibility=True)

    def _sort_pending(self) -> None:
        pending = self._buffer[self._ready :]
        if len(pending) > 1:
            self._buffer[self._ready :] = sorted(pending, key=_by_class)

    def _push(self, ch: str) -> None:
        for index, part in enumerate(decompose_char(ch, self.compatibility)):
            ccc = canonical_combining_class(part)
            delta = 1 if index else 0
            if ccc == 0:
                # A starter closes the current mark run
                self._sort_pending()
                self._buffer.append((ccc, part, delta))
                self._ready = len(self._buffer)
            else:
                self._buffer.append((ccc, part, delta))

    def __iter__(self) -> Iterator[tuple[str, int]]:
        return self

    def __next__(self) -> tuple[str, int]:
        while True:
            if self._cursor < self._ready:
                _, ch, delta = self._buffer[self._cursor]
                self._cursor += 1
                return ch, delta

            if self._cursor:
                del self._buffer[: self._cursor]
                self._ready = self._cursor = 0

            if self._exhausted:
                raise StopIteration

            try:
                ch = next(self._iter)
            except StopIteration:
                self._exhausted = True
                self._sort_pending()
                self._ready = len(self._buffer)
                continue
            self._push(ch)

    def render(self) -> str:
        """Consume the rest of the stream and return its characters as text."""
        return "".join(ch for ch, _ in self)
