"""Variant registry: named lists of rule-tree transforms."""

from __future__ import annotations

from typing import Iterable

from tailweave.css.model import Root
from tailweave.errors import UnknownVariantError
from tailweave.variants.pipeline import VariantTransform

__all__ = ["VariantRegistry"]


class VariantRegistry:
    """Holds variant transforms by name, in registration order."""

    def __init__(self) -> None:
        self._variants: dict[str, list[VariantTransform]] = {}

    def add_variant(
        self, name: str, transforms: VariantTransform | Iterable[VariantTransform]
    ) -> None:
        """Register *name*; a list of transforms emits one copy of the rules per transform."""
        if callable(transforms):
            transforms = [transforms]
        self._variants[name] = list(transforms)

    def get(self, name: str) -> list[VariantTransform]:
        try:
            return self._variants[name]
        except KeyError:
            raise UnknownVariantError(name) from None

    def __contains__(self, name: object) -> bool:
        return name in self._variants

    def __len__(self) -> int:
        return len(self._variants)

    def names(self) -> list[str]:
        return list(self._variants)

    def apply(self, name: str, root: Root) -> Root | None:
        """Run variant *name* over a copy of *root* per transform.

        Returns the combined output, or None when every transform dropped
        every rule.
        """
        result = Root()
        for transform in self.get(name):
            container = root.clone()
            transform(container)
            result.append(*container.remove_all())
        if not result.walk_rules():
            return None
        return result
