"""
Recomposition submodule.

Re-exports the recomposition engine used for NFC and NFKC alignment.
"""

from unialign.recompose._alignment import RecompositionsAlignment

__all__ = ["RecompositionsAlignment"]
