"""Generator: turn candidate class names into a CSS rule tree.

A candidate is ``variant:variant:utility`` (with the configured separator).
The base rule for the utility is built first; variants are then applied
innermost first, so ``md:hover:bg-red-500`` runs ``hover`` and then ``md``.
"""

from __future__ import annotations

import logging
from typing import Any, Iterable, Mapping

from tailweave.css.model import Declaration, Root, Rule
from tailweave.model.config import GenerationConfig
from tailweave.selector import escape_class_name, escape_commas
from tailweave.utilities import UtilityRegistry, register_builtin_utilities
from tailweave.variants import VariantRegistry, register_builtin_variants

__all__ = ["Generator", "split_candidate"]

logger = logging.getLogger(__name__)


def split_candidate(candidate: str, separator: str) -> list[str]:
    """Split on *separator* outside square brackets (``[a:b]`` stays whole)."""
    parts: list[str] = []
    current = ""
    depth = 0
    index = 0
    while index < len(candidate):
        ch = candidate[index]
        if ch == "[":
            depth += 1
        elif ch == "]" and depth:
            depth -= 1
        if depth == 0 and separator and candidate.startswith(separator, index):
            parts.append(current)
            current = ""
            index += len(separator)
            continue
        current += ch
        index += 1
    parts.append(current)
    return parts


def _build_rules(selector: str, declarations: Mapping[str, Any]) -> list[Rule]:
    """Build the rule for *selector* plus one rule per ``&``-nested block."""
    own = Rule(selector=selector)
    nested: list[Rule] = []
    for key, value in declarations.items():
        if isinstance(value, Mapping):
            nested.extend(_build_rules(key.replace("&", selector), value))
        else:
            own.append(Declaration(prop=key, value=str(value)))
    return ([own] if own.nodes else []) + nested


class Generator:
    """Generate CSS for candidates against one configuration."""

    def __init__(
        self,
        config: GenerationConfig | None = None,
        utilities: UtilityRegistry | None = None,
        variants: VariantRegistry | None = None,
    ) -> None:
        self.config = config or GenerationConfig()
        self.utilities = utilities or register_builtin_utilities(UtilityRegistry(), self.config)
        self.variants = variants or register_builtin_variants(VariantRegistry(), self.config)

    def _base_rules(self, class_name: str) -> list[Rule] | None:
        prefix = self.config.prefix
        if prefix:
            if not class_name.startswith(prefix):
                return None
            name = class_name[len(prefix):]
        else:
            name = class_name
        selector = "." + escape_commas(escape_class_name(class_name))

        static = self.utilities.static(name)
        if static is not None:
            return _build_rules(selector, static[1])

        match = self.utilities.match(name)
        if match is None:
            return None
        utility, resolved = match
        declarations = utility.render(resolved)
        if declarations is None:
            logger.debug("%s: %r did not compose", utility.name, class_name)
            return None
        return _build_rules(selector, declarations)

    def generate_candidate(self, candidate: str) -> Root | None:
        """Generate the rules for one candidate, or None if it produces nothing."""
        *variant_names, class_name = split_candidate(candidate, self.config.separator)
        if not class_name:
            return None
        unknown = [v for v in variant_names if v not in self.variants]
        if unknown:
            logger.debug("Skipping %r: unknown variant(s) %s", candidate, ", ".join(unknown))
            return None

        rules = self._base_rules(class_name)
        if not rules:
            logger.debug("Skipping %r: no utility matches %r", candidate, class_name)
            return None

        root = Root(nodes=list(rules))
        for variant in reversed(variant_names):
            applied = self.variants.apply(variant, root)
            if applied is None:
                logger.debug("Skipping %r: variant %r produced no rules", candidate, variant)
                return None
            root = applied
        return root

    def generate(self, candidates: Iterable[str]) -> Root:
        """Generate every candidate, in order, skipping duplicates and misses."""
        output = Root()
        seen: set[str] = set()
        for candidate in candidates:
            candidate = candidate.strip()
            if not candidate or candidate in seen:
                continue
            seen.add(candidate)
            result = self.generate_candidate(candidate)
            if result is not None:
                output.append(*result.remove_all())
        return output

    def to_css(self, candidates: Iterable[str]) -> str:
        return self.generate(candidates).to_css()
