"""
Canonical recomposition with alignment deltas.

Consumes a decomposed, canonically ordered stream of ``(character, delta)``
pairs and merges combining sequences back into primary composites. Merging
two elements with deltas ``d1`` and ``d2`` yields one element with delta
``d1 + d2 - 1``; everything else passes through with its delta unchanged.

The iterator is an explicit state machine rather than a generator: the
state tag and a buffer cursor are all it needs to resume between calls.

- COMPOSING: pull upstream elements, merge them into the composee, or park
  blocked marks in the buffer.
- PURGING: a blocked starter has replaced the composee; drain the buffer,
  then go back to COMPOSING.
- FINISHED: upstream is exhausted; drain the buffer, then stop for good.

Example:
    >>> from unialign.recompose import RecompositionsAlignment
    >>> list(RecompositionsAlignment([("e", 0), ("\\u0301", 0)]))
    [('é', -1)]
    >>> RecompositionsAlignment.canonical("e\\u0301").render()
    'é'
"""

from __future__ import annotations

from enum import Enum
from typing import Iterable, Iterator, Optional

from unialign._tables import canonical_combining_class, compose
from unialign.decompose import DecompositionsAlignment

__all__ = ["RecompositionsAlignment"]


class _State(Enum):
    COMPOSING = "composing"
    PURGING = "purging"
    FINISHED = "finished"


class RecompositionsAlignment:
    """
    One-pass iterator of recomposed ``(character, delta)`` pairs.

    The input must already be decomposed and canonically ordered; this is
    not checked. Out-of-order input produces wrong but well-formed output.

    Args:
        pairs: Upstream ``(character, delta)`` pairs, typically a
            :class:`DecompositionsAlignment`
    """

    def __init__(self, pairs: Iterable[tuple[str, int]]) -> None:
        self._iter = iter(pairs)
        self._state = _State.COMPOSING
        self._cursor = 0
        # Marks blocked from the composee, in arrival order
        self._buffer: list[tuple[str, int]] = []
        self._composee: Optional[tuple[str, int]] = None
        self._last_ccc: Optional[int] = None

    @classmethod
    def canonical(cls, chars: Iterable[str]) -> "RecompositionsAlignment":
        """Build an NFC engine over canonically decomposed ``chars``."""
        return cls(DecompositionsAlignment(chars))

    @classmethod
    def compatible(cls, chars: Iterable[str]) -> "RecompositionsAlignment":
        """Build an NFKC engine over compatibility decomposed ``chars``."""
        return cls(DecompositionsAlignment(chars, compatibility=True))

    def __iter__(self) -> Iterator[tuple[str, int]]:
        return self

    def __next__(self) -> tuple[str, int]:
        while True:
            if self._state is _State.COMPOSING:
                item = self._scan()
                if item is not None:
                    return item
                self._state = _State.FINISHED
                self._cursor = 0
                if self._composee is not None:
                    return self._take_composee()

            elif self._state is _State.PURGING:
                if self._cursor < len(self._buffer):
                    item = self._buffer[self._cursor]
                    self._cursor += 1
                    return item
                self._buffer.clear()
                self._state = _State.COMPOSING

            else:
                if self._cursor < len(self._buffer):
                    item = self._buffer[self._cursor]
                    self._cursor += 1
                    return item
                self._buffer.clear()
                if self._composee is not None:
                    return self._take_composee()
                raise StopIteration

    def _take_composee(self) -> tuple[str, int]:
        composee, self._composee = self._composee, None
        return composee

    def _scan(self) -> Optional[tuple[str, int]]:
        """
        Advance through upstream until something can be emitted.

        Returns the element to emit, or None once upstream is exhausted.
        """
        for ch, delta in self._iter:
            ch_class = canonical_combining_class(ch)

            composee = self._composee
            if composee is None:
                if ch_class != 0:
                    # Nothing to attach to yet
                    return ch, delta
                self._composee = (ch, delta)
                continue

            if self._last_ccc is None:
                composed = compose(composee[0], ch)
                if composed is not None:
                    self._composee = (composed, composee[1] + delta - 1)
                    continue
                if ch_class == 0:
                    self._composee = (ch, delta)
                    return composee
                self._buffer.append((ch, delta))
                self._last_ccc = ch_class
                continue

            if self._last_ccc >= ch_class:
                # ch is blocked from the composee
                if ch_class == 0:
                    self._composee = (ch, delta)
                    self._last_ccc = None
                    self._state = _State.PURGING
                    self._cursor = 0
                    return composee
                self._buffer.append((ch, delta))
                self._last_ccc = ch_class
                continue

            composed = compose(composee[0], ch)
            if composed is not None:
                self._composee = (composed, composee[1] + delta - 1)
                continue
            self._buffer.append((ch, delta))
            self._last_ccc = ch_class

        return None

    def render(self) -> str:
        """
        Consume the rest of the stream and return the composed text.

        Deltas are discarded. The engine is exhausted afterwards; build a
        new one from the source text to iterate again.
        """
        return "".join(ch for ch, _ in self)
