"""Media query construction for responsive variants."""

from __future__ import annotations

from typing import Any, Mapping

__all__ = ["build_media_query"]

_FEATURES = {"min": "min-width", "max": "max-width"}


def build_media_query(screen: Any) -> str:
    """Build media query params from a ``screens`` theme entry.

    - ``"640px"`` -> ``(min-width: 640px)``
    - ``{"min": "640px", "max": "767px"}`` -> ``(min-width: 640px) and (max-width: 767px)``
    - ``{"raw": "print"}`` -> ``print``
    - a list of the above -> the queries joined with ``, ``
    """
    if isinstance(screen, str):
        screen = {"min": screen}
    if isinstance(screen, Mapping):
        screen = [screen]

    queries: list[str] = []
    for entry in screen:
        if isinstance(entry, str):
            entry = {"min": entry}
        if "raw" in entry:
            queries.append(str(entry["raw"]))
            continue
        queries.append(
            " and ".join(
                f"({_FEATURES.get(feature, feature)}: {value})"
                for feature, value in entry.items()
            )
        )
    return ", ".join(queries)
