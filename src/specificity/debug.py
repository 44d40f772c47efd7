"""Debug emission: expose a selector's specificity as two CSS-style fields.

This is an inspection aid for stylesheets under development. The emitted
``specificity`` and ``specificity-value`` declarations are not real CSS
properties and should not ship in production output.

Example:
    .nav a:hover {
      color: red;
      specificity: 0, 2, 1;
      specificity-value: 513;
    }
"""

from __future__ import annotations

import logging
import re

from specificity.aggregator import specificity
from specificity.config import DEFAULT_CONFIG, SpecificityConfig

__all__ = ["annotate_stylesheet", "debug_fields", "render_debug_block"]

logger = logging.getLogger(__name__)

_COMMENT_RE = re.compile(r"/\*.*?\*/", re.DOTALL)

# Blocks inside these at-rules are keyframe steps, not style rules.
_KEYFRAMES_RE = re.compile(r"@(-[a-z]+-)?keyframes\b", re.IGNORECASE)

# Innermost rule blocks only: at-rule wrappers such as @media never match.
_RULE_RE = re.compile(
    r"""
    (?P<selector>[^{}]+)    # everything before the opening brace
    \{                       # opening brace
    (?P<body>[^{}]*)         # declarations
    \}                       # closing brace
    """,
    re.VERBOSE,
)


def debug_fields(selector: str, config: SpecificityConfig = DEFAULT_CONFIG) -> dict[str, str]:
    """Return the ``specificity`` and ``specificity-value`` fields for *selector*."""
    triple = specificity(selector, config=config)
    value = specificity(selector, as_integer=True, config=config)
    return {
        "specificity": str(triple),
        "specificity-value": str(value),
    }


def _declarations(fields: dict[str, str], indent: str) -> str:
    return "".join(f"{indent}{name}: {value};\n" for name, value in fields.items())


def render_debug_block(selector: str, config: SpecificityConfig = DEFAULT_CONFIG) -> str:
    """Render a rule block for *selector* holding only the debug fields."""
    selector = selector.strip()
    return f"{selector} {{\n{_declarations(debug_fields(selector, config), '  ')}}}"


def _enclosing_prelude(source: str, end: int) -> str:
    """Return the prelude of the block that contains position *end*, if any."""
    depth = 0
    for index in range(end - 1, -1, -1):
        char = source[index]
        if char == "}":
            depth += 1
        elif char == "{":
            if depth == 0:
                start = max(source.rfind(";", 0, index), source.rfind("}", 0, index),
                            source.rfind("{", 0, index))
                return _COMMENT_RE.sub(" ", source[start + 1:index]).strip()
            depth -= 1
    return ""


def annotate_stylesheet(source: str, config: SpecificityConfig = DEFAULT_CONFIG) -> str:
    """Append the debug fields to every style rule in *source*.

    Each rule's own selector is the one measured. At-rules with a plain
    block (``@font-face``, ``@page``) and keyframe steps inside
    ``@keyframes`` are left untouched.
    """

    def _annotate(match: re.Match[str]) -> str:
        raw_selector = match.group("selector")
        selector = _COMMENT_RE.sub(" ", raw_selector).strip()
        if not selector or selector.startswith("@"):
            return match.group(0)
        if _KEYFRAMES_RE.match(_enclosing_prelude(source, match.start("selector"))):
            return match.group(0)

        body = match.group("body").rstrip()
        if not body.strip():
            body = "\n"
        elif body.endswith(";"):
            body += "\n"
        else:
            body += ";\n"
        logger.debug("Annotating rule %r", selector)
        return f"{raw_selector}{{{body}{_declarations(debug_fields(selector, config), '  ')}}}"

    return _RULE_RE.sub(_annotate, source)
