"""Strict parsing of numeric form text."""

import math
import re

_INTEGER_RE = re.compile(r"[+-]?[0-9]+")
_NUMBER_RE = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")


def is_integer(text: str) -> bool:
    return _INTEGER_RE.fullmatch(text) is not None


def is_number(text: str) -> bool:
    # literals like 1e999 match the syntax but overflow to inf
    return _NUMBER_RE.fullmatch(text) is not None and math.isfinite(float(text))


def parse_integer(text: str, fallback: int = 0) -> int:
    return int(text) if is_integer(text) else fallback


def parse_number(text: str, fallback: float = 0.0) -> float:
    return float(text) if is_number(text) else fallback
