"""CSS selector specificity.

Splits selector text into simple selectors, classifies each into an
(a, b, c) bucket and returns the specificity of the most specific selector
in a list, as a triple or as a single comparable integer.
"""

from specificity.aggregator import aggregate, select_max, specificities, specificity
from specificity.classifier import Bucket, classify
from specificity.config import SpecificityConfig
from specificity.debug import annotate_stylesheet, debug_fields, render_debug_block
from specificity.model import Specificity, to_value
from specificity.splitter import split_selector, split_selector_list, tokenize

__version__ = "0.1.0"

__all__ = [
    "Bucket",
    "Specificity",
    "SpecificityConfig",
    "aggregate",
    "annotate_stylesheet",
    "classify",
    "debug_fields",
    "render_debug_block",
    "select_max",
    "specificities",
    "specificity",
    "split_selector",
    "split_selector_list",
    "to_value",
    "tokenize",
]
