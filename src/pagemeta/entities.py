# Copyright (C) 2025-2026 Retio AI
# SPDX-License-Identifier: AGPL-3.0-only

"""Minimal HTML entity decoding for meta content values.

Six named entities plus decimal/hex numeric character references.
Not a full HTML5 entity table.
"""

from __future__ import annotations

import re

_NAMED_ENTITIES: dict[str, str] = {
    "amp": "&",
    "lt": "<",
    "gt": ">",
    "quot": '"',
    "apos": "'",
}

_ENTITY_RE = re.compile(r"&(?:#[xX]([0-9a-fA-F]+)|#([0-9]+)|(amp|lt|gt|quot|apos));")

# Most significant digits a code point (<= 0x10FFFF) can have per base
_MAX_DIGITS = {10: 7, 16: 6}


def _code_point(digits: str, base: int, original: str) -> str:
    # Out-of-range and surrogate references stay literal
    significant = digits.lstrip("0")
    if len(significant) > _MAX_DIGITS[base]:
        return original
    value = int(significant or "0", base)
    if value > 0x10FFFF or 0xD800 <= value <= 0xDFFF:
        return original
    return chr(value)


def _replace(match: re.Match[str]) -> str:
    hex_digits, dec_digits, name = match.groups()
    if hex_digits is not None:
        return _code_point(hex_digits, 16, match.group(0))
    if dec_digits is not None:
        return _code_point(dec_digits, 10, match.group(0))
    return _NAMED_ENTITIES[name]


def decode_entities(text: str) -> str:
    """Decode ``&amp; &lt; &gt; &quot; &#39; &apos;`` and numeric references.

    ``&#39;`` is covered by the decimal rule. Unknown named entities are
    left untouched.
    """
    if not text or "&" not in text:
        return text
    return _ENTITY_RE.sub(_replace, text)
