"""Strict numeric literal parsing for schema-declared numeric fields.

The accepted grammar follows the JVM ``valueOf`` parsers, so typed values agree
with JVM-based index tooling: integers are plain signed digit strings,
floating point values may carry ``NaN``/``Infinity``, exponents, hexadecimal
notation and an ``f``/``d`` type suffix. Python's own ``int()``/``float()`` are
more lenient (underscores, ``inf``, surrounding whitespace for integers), so
they are only called after the literal has been matched here.
"""

from __future__ import annotations

import math
import re

import numpy as np

_INTEGER_RE = re.compile(r"[+-]?\d+")
_DECIMAL_RE = re.compile(
    r"(?P<sign>[+-]?)(?:(?P<nan>NaN)|(?P<inf>Infinity)|(?P<number>(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)[fFdD]?)",
    re.ASCII,
)
_HEX_RE = re.compile(
    r"(?P<hex>[+-]?0[xX](?:[0-9a-fA-F]+\.?[0-9a-fA-F]*|\.[0-9a-fA-F]+)[pP][+-]?\d+)[fFdD]?",
    re.ASCII,
)
# Characters the JVM strips from both ends of a floating point literal.
_FLOAT_TRIM = "".join(chr(code) for code in range(0x21))

_INT32 = np.iinfo(np.int32)
_INT64 = np.iinfo(np.int64)


def _parse_bounded_int(raw: str, bounds: np.iinfo) -> int:
    if _INTEGER_RE.fullmatch(raw) is None:
        raise ValueError(f"invalid integer literal: {raw!r}")
    value = int(raw)
    if not bounds.min <= value <= bounds.max:
        raise ValueError(f"integer literal out of range [{bounds.min}, {bounds.max}]: {raw!r}")
    return value


def parse_int32(raw: str) -> int:
    """Parse a signed 32-bit integer literal."""

    return _parse_bounded_int(raw, _INT32)


def parse_int64(raw: str) -> int:
    """Parse a signed 64-bit integer literal."""

    return _parse_bounded_int(raw, _INT64)


def parse_float64(raw: str) -> float:
    """Parse a 64-bit floating point literal."""

    text = raw.strip(_FLOAT_TRIM)

    match = _DECIMAL_RE.fullmatch(text)
    if match is not None:
        negative = match.group("sign") == "-"
        if match.group("nan"):
            return math.nan
        if match.group("inf"):
            return -math.inf if negative else math.inf
        value = float(match.group("number"))
        return -value if negative else value

    match = _HEX_RE.fullmatch(text)
    if match is not None:
        literal = match.group("hex")
        try:
            return float.fromhex(literal)
        except OverflowError:
            return -math.inf if literal.startswith("-") else math.inf

    raise ValueError(f"invalid floating point literal: {raw!r}")


def parse_float32(raw: str) -> float:
    """Parse a floating point literal and round it to 32-bit precision."""

    value = parse_float64(raw)
    with np.errstate(over="ignore"):
        return float(np.float32(value))
