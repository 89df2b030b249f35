from __future__ import annotations

import math
import re

_WHITESPACE_RE = re.compile(r"\s+")
_NON_ALNUM_RE = re.compile(r"[^a-z0-9]")


def clean_text(text: str) -> str:
    """Collapse newlines and whitespace runs into single spaces."""
    return _WHITESPACE_RE.sub(" ", (text or "").replace("\n", " ")).strip()


def substring_hits(lowered: str, terms: tuple[str, ...]) -> list[str]:
    return [term for term in terms if term in lowered]


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def clamp_int(value: int, min_value: int, max_value: int) -> int:
    return max(min_value, min(max_value, value))


def normalize_keyword(value: str) -> str:
    return _NON_ALNUM_RE.sub("", value.lower())
