from tailweave.utilities.builtin import register_builtin_utilities
from tailweave.utilities.registry import MatchUtility, UtilityRegistry, candidate_permutations

__all__ = [
    "UtilityRegistry",
    "MatchUtility",
    "register_builtin_utilities",
    "candidate_permutations",
]
