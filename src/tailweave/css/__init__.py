from tailweave.css.model import AtRule, Declaration, Root, Rule, is_keyframe_rule
from tailweave.css.parser import parse_css

__all__ = ["parse_css", "Root", "Rule", "AtRule", "Declaration", "is_keyframe_rule"]
