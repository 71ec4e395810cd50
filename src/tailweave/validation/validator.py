"""Run the config rules and collect what they report."""

from __future__ import annotations

import logging
from itertools import chain
from typing import Callable, Iterable

from tailweave.errors import ConfigError
from tailweave.model.config import GenerationConfig
from tailweave.model.diagnostic import Diagnostic, Severity
from tailweave.validation.rules import ALL_RULES

logger = logging.getLogger(__name__)

ConfigRule = Callable[[GenerationConfig], list[Diagnostic]]


class ValidationError(ConfigError):
    """A configuration was rejected; ``diagnostics`` holds the blocking findings."""

    def __init__(self, diagnostics: list[Diagnostic]) -> None:
        self.diagnostics = diagnostics
        self.keys = sorted({d.key or d.rule for d in diagnostics})
        super().__init__(
            f"Invalid configuration ({', '.join(self.keys)}): {diagnostics[0].message}"
        )


def validate(
    config: GenerationConfig, extra_rules: Iterable[ConfigRule] | None = None
) -> list[Diagnostic]:
    """Return every diagnostic the built-in and *extra_rules* report for *config*."""
    diagnostics: list[Diagnostic] = []
    for rule in chain(ALL_RULES, extra_rules or ()):
        found = rule(config)
        if found:
            logger.debug("%s reported %d diagnostic(s)", getattr(rule, "__name__", rule), len(found))
        diagnostics.extend(found)
    return diagnostics


def validate_or_raise(
    config: GenerationConfig,
    extra_rules: Iterable[ConfigRule] | None = None,
    strict: bool = False,
) -> list[Diagnostic]:
    """Validate *config*, raising :class:`ValidationError` on errors.

    With *strict*, warnings block as well. Whatever does not block is returned.
    """
    blocking = {Severity.ERROR, Severity.WARNING} if strict else {Severity.ERROR}
    diagnostics = validate(config, extra_rules)
    rejected = [d for d in diagnostics if d.severity in blocking]
    if rejected:
        raise ValidationError(rejected)
    return diagnostics
