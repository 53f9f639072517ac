"""
unialign: Unicode normalization with position alignment.

Normalizes text to NFC, NFKC, NFD or NFKD while tracking how every
normalized character lines up with the original text, so offsets found
in normalized text can be reported in original coordinates.

Basic usage:
    >>> from unialign import normalize
    >>> normalize("Cafe\\u0301")
    'Café'

Alignment:
    >>> from unialign import normalize_detailed
    >>> result = normalize_detailed("\\ufb01ne print", "NFKC")
    >>> result.normalized
    'fine print'
    >>> result.to_original(5)
    4

Streaming:
    >>> from unialign.recompose import RecompositionsAlignment
    >>> list(RecompositionsAlignment.canonical("e\\u0301"))
    [('é', -1)]
"""

from unialign._mapping import FORMS, AlignedText, normalize, normalize_detailed
from unialign._tables import canonical_combining_class, compose
from unialign.decompose import DecompositionsAlignment
from unialign.recompose import RecompositionsAlignment

__version__ = "0.1.0"
__all__ = [
    "FORMS",
    "AlignedText",
    "normalize",
    "normalize_detailed",
    "canonical_combining_class",
    "compose",
    "DecompositionsAlignment",
    "RecompositionsAlignment",
]


# Lazy import for spaCy components (only when spacy is installed)
def __getattr__(name: str):
    if name == "UnicodeNormalizerComponent":
        try:
            from unialign.spacy import UnicodeNormalizerComponent
            return UnicodeNormalizerComponent
        except ImportError:
            raise ImportError(
                "spaCy integration requires spacy. "
                "Install with: pip install unialign[spacy]"
            )
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
