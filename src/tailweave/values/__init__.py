from tailweave.values.alpha import compose_alpha
from tailweave.values.color import (
    ParsedColor,
    format_color,
    parse_color,
    with_alpha_value,
    with_alpha_variable,
)
from tailweave.values.kinds import KINDS, SUPPORTED_KINDS, resolve_by_kind, resolve_by_kind_list
from tailweave.values.normalize import normalize
from tailweave.values.resolver import resolve_modifier, split_alpha

__all__ = [
    "resolve_modifier",
    "resolve_by_kind",
    "resolve_by_kind_list",
    "compose_alpha",
    "split_alpha",
    "normalize",
    "parse_color",
    "format_color",
    "with_alpha_value",
    "with_alpha_variable",
    "ParsedColor",
    "KINDS",
    "SUPPORTED_KINDS",
]
