"""Resolved modifier values."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

__all__ = ["ResolvedValue"]


@dataclass(frozen=True)
class ResolvedValue:
    """A fully validated modifier value and the kind that matched it.

    ``value`` is a string for arbitrary and most theme values; theme tables may
    hold other shapes (font-size tuples, colour callables) which are passed
    through untouched. For colour-with-alpha modifiers ``color`` holds the
    base colour and ``alpha`` the resolved opacity, while ``value`` holds the
    literal colour with the alpha applied.
    """

    value: Any
    kind: str
    color: Any = None
    alpha: str | None = None

    @property
    def has_alpha(self) -> bool:
        return self.alpha is not None
