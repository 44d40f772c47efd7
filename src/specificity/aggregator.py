"""Specificity aggregator: folds classified tokens into triples and picks the max."""

from __future__ import annotations

import logging
from typing import Iterable

from specificity.classifier import Bucket, classify
from specificity.config import DEFAULT_CONFIG, SpecificityConfig
from specificity.model import Specificity, to_value
from specificity.splitter import split_selector, split_selector_list

__all__ = [
    "aggregate",
    "select_max",
    "specificities",
    "specificity",
    "to_value",
]

logger = logging.getLogger(__name__)


def aggregate(selector: str, config: SpecificityConfig = DEFAULT_CONFIG) -> Specificity:
    """Count the simple selectors of one complex selector per bucket."""
    a = b = c = 0
    for token in split_selector(selector):
        bucket = classify(token, config.pseudo_elements)
        if bucket is Bucket.A:
            a += 1
        elif bucket is Bucket.B:
            b += 1
        elif bucket is Bucket.C:
            c += 1
    return Specificity(a, b, c)


def select_max(
    selectors: Iterable[str],
    as_integer: bool = False,
    config: SpecificityConfig = DEFAULT_CONFIG,
) -> Specificity | int:
    """Return the highest specificity among *selectors*.

    Selectors are compared by their encoded value at ``config.base``. On a
    tie the first selector in source order wins. An empty list yields
    ``(0, 0, 0)``.
    """
    best = Specificity.zero()
    best_value = to_value(best, config.base)
    best_selector = None
    for selector in selectors:
        triple = aggregate(selector, config)
        value = to_value(triple, config.base)
        if best_selector is None or value > best_value:
            best, best_value, best_selector = triple, value, selector

    logger.debug("Max specificity %s (%d) from %r", best, best_value, best_selector)
    return best_value if as_integer else best


def specificities(
    text: str, config: SpecificityConfig = DEFAULT_CONFIG
) -> list[tuple[str, Specificity]]:
    """Return each selector of a selector list with its specificity, in order."""
    return [(selector, aggregate(selector, config)) for selector in split_selector_list(text)]


def specificity(
    selector: str,
    as_integer: bool = False,
    config: SpecificityConfig = DEFAULT_CONFIG,
) -> Specificity | int:
    """Compute the specificity of *selector* text.

    For a selector list, the specificity of its most specific member is
    returned. With ``as_integer=True`` the triple is encoded as
    ``a*256**2 + b*256 + c`` (or at ``config.base``).

    Example:
        >>> specificity("div.foo")
        Specificity(a=0, b=1, c=1)
        >>> specificity("div.foo", as_integer=True)
        257
    """
    return select_max(split_selector_list(selector), as_integer, config)
