"""
Decomposition submodule.

Produces the canonically ordered ``(character, delta)`` stream that the
recomposition engine consumes.
"""

from unialign.decompose._alignment import DecompositionsAlignment

__all__ = ["DecompositionsAlignment"]
