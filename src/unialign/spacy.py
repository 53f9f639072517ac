"""
spaCy integration for unialign.

Provides a pipeline component that attaches Unicode-normalized text and
its alignment to the original text.

Example:
    >>> import spacy
    >>> nlp = spacy.blank("en")
    >>> nlp.add_pipe("unicode_normalizer")
    >>> doc = nlp("Cafe\\u0301 au lait")
    >>> doc._.unicode_normalized
    'Café au lait'
    >>> doc._.unicode_alignment.to_original(5)
    6
"""

import logging
from typing import Optional

from spacy.language import Language
from spacy.tokens import Doc, Token

from unialign._mapping import FORMS, normalize, normalize_detailed

__all__ = [
    "UnicodeNormalizerComponent",
    "create_unicode_normalizer",
]

logger = logging.getLogger(__name__)


@Language.factory(
    "unicode_normalizer",
    default_config={"form": "NFC"},
    assigns=[
        "doc._.unicode_normalized",
        "doc._.unicode_alignment",
        "token._.unicode_normalized",
    ],
)
def create_unicode_normalizer(
    nlp: Language,
    name: str,
    form: str = "NFC",
) -> "UnicodeNormalizerComponent":
    """Create a Unicode normalizer pipeline component."""
    return UnicodeNormalizerComponent(nlp, name, form=form)


class UnicodeNormalizerComponent:
    """
    spaCy pipeline component for Unicode normalization with alignment.

    Extensions:
        - Doc._.unicode_normalized: Full normalized text.
        - Doc._.unicode_alignment: AlignedText mapping normalized offsets
          back to doc.text.
        - Token._.unicode_normalized: Normalized token text.

    Note: doc.text is NEVER modified. Use the alignment to report
    normalized-text offsets in the coordinates of the original document.
    """

    def __init__(
        self,
        nlp: Language,
        name: str,
        *,
        form: str = "NFC",
    ) -> None:
        self.name = name
        self.form = form.upper()

        if self.form not in FORMS:
            raise ValueError(
                f"Unknown form: {form}. Expected one of {', '.join(FORMS)}."
            )

        if not Doc.has_extension("unicode_normalized"):
            Doc.set_extension("unicode_normalized", default=None)
        if not Doc.has_extension("unicode_alignment"):
            Doc.set_extension("unicode_alignment", default=None)
        if not Token.has_extension("unicode_normalized"):
            Token.set_extension("unicode_normalized", default=None)

        logger.debug("Created %s component with form %s", name, self.form)

    def __call__(self, doc: Doc) -> Doc:
        aligned = normalize_detailed(doc.text, self.form)
        doc._.unicode_normalized = aligned.normalized
        doc._.unicode_alignment = aligned

        for token in doc:
            token._.unicode_normalized = normalize(token.text, self.form)

        return doc

    def to_disk(self, path: str, *, exclude: tuple[str, ...] = ()) -> None:
        pass

    def from_disk(
        self, path: str, *, exclude: tuple[str, ...] = ()
    ) -> "UnicodeNormalizerComponent":
        return self

    def to_bytes(self, *, exclude: tuple[str, ...] = ()) -> bytes:
        return b""

    def from_bytes(
        self, data: bytes, *, exclude: tuple[str, ...] = ()
    ) -> "UnicodeNormalizerComponent":
        return self


# =============================================================================
# Utility Functions
# =============================================================================


def get_normalizer_pipe(nlp: Language) -> Optional[UnicodeNormalizerComponent]:
    """Get the Unicode normalizer component from a pipeline."""
    if "unicode_normalizer" in nlp.pipe_names:
        return nlp.get_pipe("unicode_normalizer")
    return None
