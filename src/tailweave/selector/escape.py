"""CSS identifier escaping for class names."""

from __future__ import annotations

import re

__all__ = ["escape_class_name", "unescape", "escape_commas"]

_ESCAPE_RE = re.compile(r"\\(?:([0-9a-fA-F]{1,6})\s?|(.))", re.DOTALL)
_SAFE_RE = re.compile(r"[\w-]")


def unescape(raw: str) -> str:
    """Resolve CSS escapes (``\\:`` and ``\\3a `` alike) in an identifier."""

    def _replace(match: re.Match[str]) -> str:
        if match.group(1):
            codepoint = int(match.group(1), 16)
            if codepoint == 0 or codepoint > 0x10FFFF:
                return "\ufffd"
            return chr(codepoint)
        return match.group(2)

    return _ESCAPE_RE.sub(_replace, raw)


def escape_class_name(value: str) -> str:
    """Escape *value* so it can be written after a ``.`` in a selector."""
    out: list[str] = []
    for ch in value:
        if ord(ch) < 0x20 or ord(ch) == 0x7F:
            out.append(f"\\{ord(ch):x} ")
        elif ord(ch) >= 0x80 or _SAFE_RE.match(ch):
            out.append(ch)
        else:
            out.append("\\" + ch)
    escaped = "".join(out)
    if escaped[:1].isdigit():
        escaped = f"\\3{escaped[0]} " + escaped[1:]
    elif escaped[:1] == "-" and escaped[1:2].isdigit():
        escaped = f"-\\3{escaped[1]} " + escaped[2:]
    elif escaped == "-":
        escaped = "\\-"
    return escaped


def escape_commas(raw: str) -> str:
    """Rewrite escaped commas as hex escapes so they never read as list separators."""
    return raw.replace("\\,", "\\2c ")
