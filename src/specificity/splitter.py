"""Selector splitter: selector text -> selector list -> simple selectors.

Example:
    "ul > li.item:not(.done), #main a"
        -> ["ul li.item:not(.done)", "#main a"]
        -> [["ul", "li", ".item", ":not(.done)"], ["#main", "a"]]
"""

from __future__ import annotations

import logging
import re
from typing import Callable, Iterator

__all__ = [
    "remove_combinators",
    "split_compound",
    "split_selector",
    "split_selector_list",
    "tokenize",
]

logger = logging.getLogger(__name__)

# Explicit combinators; the descendant combinator is plain whitespace.
_COMBINATOR_RE = re.compile(r"[+>~]")

# Characters that start a new simple selector inside a compound group.
_BOUNDARIES = frozenset("#.[:")

_OPENERS = frozenset("([")
_CLOSERS = frozenset(")]")
_QUOTES = frozenset("'\"")


def remove_combinators(text: str) -> str:
    """Replace every ``+``, ``>`` and ``~`` in *text* with a space."""
    return _COMBINATOR_RE.sub(" ", text)


def _scan(text: str) -> Iterator[tuple[str, bool]]:
    """Yield each character of *text* with whether it sits at the top level.

    Characters inside quotes, parentheses or brackets are nested, and so is
    a backslash together with the character it escapes. An opening
    ``(`` or ``[`` is reported at the level it opens from.
    """
    depth = 0
    quote = ""
    escaped = False
    for char in text:
        if escaped:
            escaped = False
            yield char, False
        elif char == "\\":
            escaped = True
            yield char, False
        elif quote:
            if char == quote:
                quote = ""
            yield char, False
        elif char in _QUOTES:
            quote = char
            yield char, False
        elif char in _OPENERS:
            yield char, depth == 0
            depth += 1
        elif char in _CLOSERS:
            if depth:
                depth -= 1
            yield char, False
        else:
            yield char, depth == 0


def _split_top_level(text: str, is_separator: Callable[[str], bool]) -> list[str]:
    """Split *text* on top-level separator characters.

    Separators are dropped; parts are stripped and empty parts skipped.
    """
    parts: list[str] = []
    current: list[str] = []
    for char, top_level in _scan(text):
        if top_level and is_separator(char):
            parts.append("".join(current))
            current = []
            continue
        current.append(char)
    parts.append("".join(current))
    return [part.strip() for part in parts if part.strip()]


def split_selector_list(text: str) -> list[str]:
    """Split selector text into its comma-separated selectors.

    Combinators are removed first. Commas inside functional pseudo-classes
    such as ``:is(a, b)``, inside attribute matchers or quoted strings, and
    escaped commas do not split.
    """
    return _split_top_level(remove_combinators(text), lambda char: char == ",")


def split_compound(group: str) -> list[str]:
    """Split one compound selector (``div.foo#bar``) into simple selectors.

    A leading type name or ``*`` becomes its own token. ``::`` pseudo-elements
    stay whole, the contents of ``(...)`` and ``[...]`` never split, and an
    escaped delimiter (``.md\\:flex``) is part of its name.
    """
    tokens: list[str] = []
    current: list[str] = []
    previous = ""
    for char, top_level in _scan(group):
        if (
            top_level
            and char in _BOUNDARIES
            and current
            and not (char == ":" and previous == ":")
        ):
            tokens.append("".join(current))
            current = []
        current.append(char)
        previous = char if top_level else ""
    if current:
        tokens.append("".join(current))
    return tokens


def split_selector(selector: str) -> list[str]:
    """Split one complex selector into its ordered simple selectors."""
    tokens: list[str] = []
    for group in _split_top_level(remove_combinators(selector), str.isspace):
        tokens.extend(split_compound(group))
    logger.debug("Split selector %r into %r", selector, tokens)
    return tokens


def tokenize(text: str) -> list[list[str]]:
    """Return the simple selectors of every selector in *text*."""
    return [split_selector(selector) for selector in split_selector_list(text)]
