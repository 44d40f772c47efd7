from __future__ import annotations

from dataclasses import dataclass

from specificity.model import DEFAULT_BASE

PSEUDO_ELEMENTS = (
    ":before",
    ":after",
    ":first-line",
    ":first-letter",
    ":selection",
)


@dataclass(frozen=True)
class SpecificityConfig:
    base: int = DEFAULT_BASE  # positional base for the integer encoding
    pseudo_elements: tuple[str, ...] = PSEUDO_ELEMENTS


DEFAULT_CONFIG = SpecificityConfig()
