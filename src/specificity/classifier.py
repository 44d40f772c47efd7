"""Simple-selector classifier: maps one token to its specificity bucket.

Prefix checks run in a fixed order so that pseudo-elements such as
``:before`` are caught before the generic pseudo-class rule:

    pseudo-element  -> C
    . [ :           -> B
    #               -> A
    *               -> NONE
    anything else   -> C
"""

from __future__ import annotations

from enum import Enum

from specificity.config import PSEUDO_ELEMENTS

__all__ = ["Bucket", "PSEUDO_ELEMENTS", "classify", "normalize"]

_NOT_PREFIX = ":not("


class Bucket(Enum):
    """Specificity column a simple selector counts towards."""

    A = "id"
    B = "class-like"
    C = "type-like"
    NONE = "none"


def normalize(token: str) -> str:
    """Collapse ``::`` pseudo-element syntax to a single colon."""
    return token.replace("::", ":")


def classify(token: str, pseudo_elements: tuple[str, ...] = PSEUDO_ELEMENTS) -> Bucket:
    """Return the bucket for a single simple selector.

    ``:not(X)`` counts as X alone. Unrecognised syntax falls back to the
    type bucket rather than raising.
    """
    token = normalize(token.strip())

    if token.startswith(_NOT_PREFIX):
        inner = token[len(_NOT_PREFIX):]
        if inner.endswith(")"):
            inner = inner[:-1]
        return classify(inner, pseudo_elements)

    if token.startswith(pseudo_elements):
        return Bucket.C
    if token.startswith((".", "[", ":")):
        return Bucket.B
    if token.startswith("#"):
        return Bucket.A
    if token.startswith("*"):
        return Bucket.NONE
    return Bucket.C
