"""Utility registry: static class rules and value-driven utilities."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Iterator, Mapping

from tailweave.model.value import ResolvedValue
from tailweave.values.resolver import resolve_modifier

__all__ = ["Declarations", "MatchUtility", "UtilityRegistry", "candidate_permutations"]

logger = logging.getLogger(__name__)

# {"color": "red"} or, for sub-selectors, {"&::placeholder": {"color": "red"}}
Declarations = Mapping[str, Any]
Render = Callable[[ResolvedValue], "Declarations | None"]


@dataclass(frozen=True)
class MatchUtility:
    """A utility whose class name carries a modifier (``bg-red-500``)."""

    name: str
    render: Render
    values: Mapping[str, Any]
    kinds: tuple[str, ...]
    plugin: str
    opacity: Mapping[str, Any] | None = None

    def resolve(self, modifier: str) -> ResolvedValue | None:
        resolved = resolve_modifier(modifier, self.values, self.kinds, opacity=self.opacity)
        if resolved is None:
            return None
        if resolved.kind != "lookup" and resolved.kind not in self.kinds:
            return None
        return resolved


def candidate_permutations(candidate: str) -> Iterator[tuple[str, str]]:
    """Yield ``(utility, modifier)`` splits, longest utility name first.

    ``bg-red-500`` yields ``("bg-red", "500")`` then ``("bg", "red-500")``;
    an arbitrary value splits only at the dash before its bracket. A
    bracketed alpha (``bg-red-500/[0.5]``) splits at the dashes left of
    its slash and keeps the alpha on the modifier.
    """
    index = candidate.rfind("-")
    if candidate.endswith("]"):
        bracket = candidate.find("[")
        if bracket <= 0:
            return
        if candidate[bracket - 1] == "-":
            yield candidate[: bracket - 1], candidate[bracket:]
            return
        if candidate[bracket - 1] != "/":
            return
        index = candidate.rfind("-", 0, bracket - 1)
    while index > 0:
        yield candidate[:index], candidate[index + 1:]
        index = candidate.rfind("-", 0, index)


class UtilityRegistry:
    """Utilities keyed by name, in registration order."""

    def __init__(self) -> None:
        self._static: dict[str, tuple[str, Declarations]] = {}
        self._matched: dict[str, list[MatchUtility]] = {}

    def add_utilities(self, rules: Mapping[str, Declarations], plugin: str) -> None:
        """Register static classes: ``{".block": {"display": "block"}}``."""
        for selector, declarations in rules.items():
            self._static[selector.lstrip(".")] = (plugin, declarations)

    def match_utilities(
        self,
        utilities: Mapping[str, Render],
        values: Mapping[str, Any],
        kinds: tuple[str, ...] | list[str] = ("any",),
        plugin: str = "",
        opacity: Mapping[str, Any] | None = None,
    ) -> None:
        for name, render in utilities.items():
            self._matched.setdefault(name, []).append(
                MatchUtility(
                    name=name,
                    render=render,
                    values=values,
                    kinds=tuple(kinds),
                    plugin=plugin,
                    opacity=opacity,
                )
            )

    def names(self) -> list[str]:
        return sorted(set(self._static) | set(self._matched))

    def static(self, class_name: str) -> tuple[str, Declarations] | None:
        return self._static.get(class_name)

    def match(self, class_name: str) -> tuple[MatchUtility, ResolvedValue] | None:
        """Find the first utility that resolves *class_name*, or None."""
        splits = [(class_name, "DEFAULT"), *candidate_permutations(class_name)]
        for name, modifier in splits:
            for utility in self._matched.get(name, []):
                resolved = utility.resolve(modifier)
                if resolved is not None:
                    return utility, resolved
        logger.debug("No utility resolves %r", class_name)
        return None
