from tailweave.variants.builtin import PSEUDO_VARIANTS, register_builtin_variants
from tailweave.variants.media import build_media_query
from tailweave.variants.pipeline import (
    split_selectors,
    transform_all_classes,
    transform_all_selectors,
    transform_last_classes,
    transform_rules,
)
from tailweave.variants.registry import VariantRegistry
from tailweave.variants.rewrite import (
    WithPseudo,
    merge_marker_state,
    prefix_selector,
    rewrite_all_classes,
    rewrite_last_classes,
    with_pseudo,
)

__all__ = [
    "VariantRegistry",
    "register_builtin_variants",
    "PSEUDO_VARIANTS",
    "build_media_query",
    "transform_rules",
    "transform_all_selectors",
    "transform_all_classes",
    "transform_last_classes",
    "split_selectors",
    "rewrite_all_classes",
    "rewrite_last_classes",
    "merge_marker_state",
    "prefix_selector",
    "with_pseudo",
    "WithPseudo",
]
