"""Built-in variants: pseudo-elements, pseudo-classes, group/peer, direction,
reduced motion, dark mode and responsive screens."""

from __future__ import annotations

import logging

from tailweave.css.model import AtRule, Declaration, Rule
from tailweave.model.config import GenerationConfig
from tailweave.variants.media import build_media_query
from tailweave.variants.pipeline import (
    transform_all_classes,
    transform_all_selectors,
    transform_last_classes,
)
from tailweave.variants.registry import VariantRegistry
from tailweave.variants.rewrite import (
    merge_marker_state,
    prefix_selector,
    rewrite_all_classes,
    rewrite_last_classes,
    with_pseudo,
)

__all__ = ["PSEUDO_VARIANTS", "register_builtin_variants"]

logger = logging.getLogger(__name__)

# (variant name, pseudo-class state); the order also ranks merged marker states.
PSEUDO_VARIANTS: list[tuple[str, str]] = [
    # positional
    ("first", "first-child"),
    ("last", "last-child"),
    ("only", "only-child"),
    ("odd", "nth-child(odd)"),
    ("even", "nth-child(even)"),
    ("first-of-type", "first-of-type"),
    ("last-of-type", "last-of-type"),
    ("only-of-type", "only-of-type"),
    # state
    ("visited", "visited"),
    ("target", "target"),
    # forms
    ("default", "default"),
    ("checked", "checked"),
    ("indeterminate", "indeterminate"),
    ("placeholder-shown", "placeholder-shown"),
    ("autofill", "autofill"),
    ("required", "required"),
    ("valid", "valid"),
    ("invalid", "invalid"),
    ("in-range", "in-range"),
    ("out-of-range", "out-of-range"),
    ("read-only", "read-only"),
    # content
    ("empty", "empty"),
    # interactive
    ("focus-within", "focus-within"),
    ("hover", "hover"),
    ("focus", "focus"),
    ("focus-visible", "focus-visible"),
    ("active", "active"),
    ("disabled", "disabled"),
]

_STATE_ORDER = [state for _, state in PSEUDO_VARIANTS]


def _ensure_content(rule: Rule) -> None:
    if not rule.walk_decls("content"):
        rule.prepend(Declaration(prop="content", value='""'))


def _media(params: str):
    return lambda: AtRule(name="media", params=params)


def _register_pseudo_elements(registry: VariantRegistry, config: GenerationConfig) -> None:
    sep = config.separator

    def own(name: str, pseudo: str, **options):
        return transform_all_classes(
            lambda c: with_pseudo(f"{name}{sep}{c}", pseudo), **options
        )

    def descendants(name: str, pseudo: str):
        return transform_all_selectors(
            lambda s: rewrite_all_classes(s, lambda c: f"{name}{sep}{c}") + f" *{pseudo}"
        )

    registry.add_variant("first-letter", own("first-letter", "::first-letter"))
    registry.add_variant("first-line", own("first-line", "::first-line"))
    registry.add_variant(
        "marker", [descendants("marker", "::marker"), own("marker", "::marker")]
    )
    registry.add_variant(
        "selection",
        [descendants("selection", "::selection"), own("selection", "::selection")],
    )
    registry.add_variant("file", own("file", "::file-selector-button"))
    registry.add_variant("before", own("before", "::before", before_emit=_ensure_content))
    registry.add_variant("after", own("after", "::after", before_emit=_ensure_content))


def _group_join(marker: str, remainder: str) -> str:
    return f"{marker} {remainder.lstrip()}"


def _peer_join(marker: str, remainder: str) -> str:
    remainder = remainder.strip()
    if remainder.startswith("~"):
        return f"{marker} {remainder}"
    return f"{marker} ~ {remainder}"


def _relational(name: str, state: str, marker: str, join, config: GenerationConfig):
    sep = config.separator

    def rename(class_name: str) -> str:
        if f".{class_name}" == marker:
            return class_name
        return f"{name}{sep}{class_name}"

    def transform(selector: str) -> str | None:
        variant_selector = rewrite_all_classes(selector, rename)
        if variant_selector == selector:
            logger.debug("%s: nothing besides %s to attach to in %r", name, marker, selector)
            return None
        return merge_marker_state(variant_selector, marker, state, join, order=_STATE_ORDER)

    return transform_all_selectors(transform)


def _register_pseudo_classes(registry: VariantRegistry, config: GenerationConfig) -> None:
    sep = config.separator
    for variant, state in PSEUDO_VARIANTS:
        registry.add_variant(
            variant,
            transform_all_classes(
                lambda c, variant=variant, state=state: with_pseudo(f"{variant}{sep}{c}", f":{state}")
            ),
        )

    group_marker = prefix_selector(config.prefix, ".group")
    peer_marker = prefix_selector(config.prefix, ".peer")
    for variant, state in PSEUDO_VARIANTS:
        registry.add_variant(
            f"group-{variant}",
            _relational(f"group-{variant}", state, group_marker, _group_join, config),
        )
    for variant, state in PSEUDO_VARIANTS:
        registry.add_variant(
            f"peer-{variant}",
            _relational(f"peer-{variant}", state, peer_marker, _peer_join, config),
        )


def _register_direction(registry: VariantRegistry, config: GenerationConfig) -> None:
    sep = config.separator
    for direction in ("ltr", "rtl"):
        registry.add_variant(
            direction,
            transform_all_selectors(
                lambda s, d=direction: f'[dir="{d}"] '
                + rewrite_all_classes(s, lambda c: f"{d}{sep}{c}").lstrip()
            ),
        )


def _register_reduced_motion(registry: VariantRegistry, config: GenerationConfig) -> None:
    sep = config.separator
    for name, preference in (("motion-safe", "no-preference"), ("motion-reduce", "reduce")):
        registry.add_variant(
            name,
            transform_last_classes(
                lambda c, name=name: f"{name}{sep}{c}",
                wrap=_media(f"(prefers-reduced-motion: {preference})"),
            ),
        )


def _register_dark(registry: VariantRegistry, config: GenerationConfig) -> None:
    sep = config.separator
    mode = config.dark_mode
    if mode is False:
        mode = "media"
        logger.warning(
            "`dark_mode` is set to `false` in your config. "
            "This will behave just like the `media` value."
        )

    if mode == "class":
        dark_selector = prefix_selector(config.prefix, ".dark")

        def transform(selector: str) -> str | None:
            variant_selector = rewrite_last_classes(selector, lambda c: f"dark{sep}{c}")
            if variant_selector == selector:
                return None
            return f"{dark_selector} {variant_selector.lstrip()}"

        registry.add_variant("dark", transform_all_selectors(transform))
    elif mode == "media":
        registry.add_variant(
            "dark",
            transform_last_classes(
                lambda c: f"dark{sep}{c}", wrap=_media("(prefers-color-scheme: dark)")
            ),
        )
    else:
        logger.warning("Unknown dark_mode %r; the dark variant is not registered", mode)


def _register_screens(registry: VariantRegistry, config: GenerationConfig) -> None:
    sep = config.separator
    for screen, size in config.theme.screens.items():
        registry.add_variant(
            screen,
            transform_last_classes(
                lambda c, screen=screen: f"{screen}{sep}{c}",
                wrap=_media(build_media_query(size)),
            ),
        )


def register_builtin_variants(
    registry: VariantRegistry, config: GenerationConfig
) -> VariantRegistry:
    """Register every built-in variant, in the order they apply to output."""
    _register_pseudo_elements(registry, config)
    _register_pseudo_classes(registry, config)
    _register_direction(registry, config)
    _register_reduced_motion(registry, config)
    _register_dark(registry, config)
    _register_screens(registry, config)
    return registry
