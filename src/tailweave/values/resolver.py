"""Modifier resolution: theme lookup, arbitrary values, explicit kinds, colour alpha."""

from __future__ import annotations

import logging
import re
from typing import Any, Iterable, Mapping

from tailweave.model.value import ResolvedValue
from tailweave.values.color import with_alpha_value
from tailweave.values.kinds import SUPPORTED_KINDS, resolve_by_kind, resolve_by_kind_list
from tailweave.values.normalize import normalize

__all__ = [
    "resolve_modifier",
    "resolve_alpha",
    "split_alpha",
    "split_explicit_kind",
    "is_arbitrary_value",
]

logger = logging.getLogger(__name__)

_KIND_PREFIX_RE = re.compile(r"^[a-z][a-z-]*$")


def is_arbitrary_value(modifier: str) -> bool:
    return len(modifier) >= 2 and modifier.startswith("[") and modifier.endswith("]")


def _last_unescaped(text: str, char: str) -> int:
    index = len(text) - 1
    while index >= 0:
        if text[index] == char:
            backslashes = 0
            j = index - 1
            while j >= 0 and text[j] == "\\":
                backslashes += 1
                j -= 1
            if backslashes % 2 == 0:
                return index
        index -= 1
    return -1


def _first_unescaped(text: str, char: str) -> int:
    escaped = False
    for index, ch in enumerate(text):
        if escaped:
            escaped = False
        elif ch == "\\":
            escaped = True
        elif ch == char:
            return index
    return -1


def split_alpha(modifier: str) -> tuple[str, str | None]:
    """Split ``base/alpha`` on the last unescaped slash.

    Returns ``(modifier, None)`` when there is no slash or nothing follows it.
    """
    index = _last_unescaped(modifier, "/")
    if index == -1 or index == len(modifier) - 1:
        return modifier, None
    return modifier[:index], modifier[index + 1:]


def split_explicit_kind(inner: str) -> tuple[str | None, str]:
    """Split ``kind:value`` (bracket contents) on the first unescaped colon.

    Only an identifier-like prefix counts as a kind, so ``url(https://...)``
    is not mistaken for one.
    """
    index = _first_unescaped(inner, ":")
    if index == -1:
        return None, inner
    prefix = inner[:index]
    if not _KIND_PREFIX_RE.match(prefix):
        return None, inner
    return prefix, inner[index + 1:]


def resolve_alpha(alpha: str, opacity: Mapping[str, Any] | None) -> str | None:
    """Resolve an alpha suffix from a bracketed number/percentage or the opacity scale."""
    if is_arbitrary_value(alpha):
        inner = alpha[1:-1]
        return resolve_by_kind("number", inner) or resolve_by_kind("percentage", inner)
    if opacity and alpha in opacity:
        return str(opacity[alpha])
    return None


def resolve_modifier(
    modifier: str,
    theme_table: Mapping[str, Any] | None,
    kinds: Iterable[str],
    opacity: Mapping[str, Any] | None = None,
) -> ResolvedValue | None:
    """Resolve *modifier* against a theme table and an ordered list of kinds.

    Returns None when nothing matches; callers emit no rule in that case.
    """
    kinds = list(kinds)
    table = theme_table or {}

    if modifier in table:
        return ResolvedValue(value=table[modifier], kind="lookup")

    if is_arbitrary_value(modifier):
        explicit, value = split_explicit_kind(modifier[1:-1])
        if explicit is not None:
            if explicit not in SUPPORTED_KINDS or not value:
                logger.debug("Unsupported explicit kind %r in %r", explicit, modifier)
                return None
            return ResolvedValue(value=normalize(value), kind=explicit)
        return resolve_by_kind_list(kinds, modifier[1:-1])

    if "color" in kinds:
        base, alpha = split_alpha(modifier)
        if alpha is not None and base in table:
            resolved_alpha = resolve_alpha(alpha, opacity)
            if resolved_alpha is None:
                logger.debug("No alpha source for %r", modifier)
                return None
            color = table[base]
            literal = with_alpha_value(color, resolved_alpha)
            if literal is None:
                return None
            return ResolvedValue(value=literal, kind="color", color=color, alpha=resolved_alpha)

    return None
