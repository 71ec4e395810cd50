from tailweave.selector.escape import escape_class_name, escape_commas, unescape
from tailweave.selector.model import Compound, Selector, SelectorList, SimpleSelector
from tailweave.selector.parser import parse_selector

__all__ = [
    "parse_selector",
    "SelectorList",
    "Selector",
    "Compound",
    "SimpleSelector",
    "escape_class_name",
    "escape_commas",
    "unescape",
]
