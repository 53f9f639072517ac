"""Shared fixtures for unialign tests."""

import pytest

# Mixed scripts, precomposed and decomposed forms, compatibility characters,
# Hangul, and mark runs that need reordering.
SAMPLE_TEXTS = [
    "",
    "plain ascii",
    "Caf\u00e9 au lait",
    "Cafe\u0301 au lait",
    "\u212bngstr\u00f6m A\u030a",
    "\ufb01ne \ufb02ow",
    "\u2460 \u00bd x\u00b2",
    "\ud55c\uad6d\uc5b4",
    "\u1112\u1161\u11ab\u1100\u116e\u11a8",
    "\u1100\u0301\u1161",
    "a\u0301\u0323",
    "a\u0323\u0301",
    "q\u0307\u0323",
    "\u1e0b\u0323",
    "\u00e9\u0323",
    "u\u0308\u0304",
    "\u0301leading mark",
    "\u1f84",
    "\u03b1\u0345\u0313",
    "\u0958 \u0915\u093c",
    "\u0b47\u0b3e",
    "\u0344",
    "A\u0323\u030a\u0301",
    "x" + "\u0305" * 40 + "\u0301",
    "\u03b1" + "\u0305" * 40 + "\u0345",
    "\ufdfa",
    "\u3300 \u32ff",
]


@pytest.fixture
def sample_texts() -> list[str]:
    """Return texts covering composition, blocking, and reordering cases."""
    return list(SAMPLE_TEXTS)
