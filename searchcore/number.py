"""Numbers that keep their integer or float nature and compare across kinds."""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from enum import Enum
from functools import total_ordering

_U64_MAX = 2**64 - 1
_I64_MIN = -(2**63)
_I64_MAX = 2**63 - 1

_INT_EMPTY = "cannot parse integer from empty string"
_INT_INVALID = "invalid digit found in string"
_INT_POS_OVERFLOW = "number too large to fit in target type"
_INT_NEG_OVERFLOW = "number too small to fit in target type"
_FLOAT_EMPTY = "cannot parse float from empty string"
_FLOAT_INVALID = "invalid float literal"

_DIGITS = re.compile(r"[0-9]+")
_FLOAT = re.compile(
    r"[+-]?(?:inf|infinity|nan|(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?)",
    re.IGNORECASE,
)


class NumberKind(Enum):
    UNSIGNED = "unsigned"
    SIGNED = "signed"
    FLOAT = "float"


def _ordered_float_cmp(a: float, b: float) -> int:
    """Total order on floats where NaN is the greatest and equals itself."""
    a_nan, b_nan = math.isnan(a), math.isnan(b)
    if a_nan or b_nan:
        return int(a_nan) - int(b_nan)
    return (a > b) - (a < b)


@total_ordering
@dataclass(frozen=True, eq=False)
class Number:
    """An unsigned, signed or floating point number."""

    kind: NumberKind
    value: int | float

    def __post_init__(self) -> None:
        if self.kind is NumberKind.FLOAT:
            object.__setattr__(self, "value", float(self.value))
            return
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise TypeError(f"{self.kind.value} number needs an int value")
        low, high = (0, _U64_MAX) if self.kind is NumberKind.UNSIGNED else (_I64_MIN, _I64_MAX)
        if not low <= self.value <= high:
            raise ValueError(f"{self.value} is out of range for a {self.kind.value} number")

    def _compare(self, other: Number) -> int:
        if self.kind is NumberKind.FLOAT or other.kind is NumberKind.FLOAT:
            return _ordered_float_cmp(float(self.value), float(other.value))
        return (self.value > other.value) - (self.value < other.value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Number):
            return NotImplemented
        return self._compare(other) == 0

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Number):
            return NotImplemented
        return self._compare(other) < 0

    def __hash__(self) -> int:
        as_float = float(self.value)
        if math.isnan(as_float):
            return hash("nan")
        return hash(as_float)


class ParseNumberError(ValueError):
    """Text that is neither an unsigned, a signed nor a float number."""

    def __init__(self, uint_error: str, int_error: str, float_error: str) -> None:
        self.uint_error = uint_error
        self.int_error = int_error
        self.float_error = float_error
        if uint_error == int_error:
            message = f"can not parse number: {uint_error}, {float_error}"
        else:
            message = f"can not parse number: {uint_error}, {int_error}, {float_error}"
        super().__init__(message)


def _parse_int(text: str, low: int, high: int, signed: bool) -> int:
    """Parse an integer in [low, high]; raise ValueError carrying the reason."""
    if not text:
        raise ValueError(_INT_EMPTY)
    digits = text
    negative = False
    if digits[0] == "+":
        digits = digits[1:]
    elif digits[0] == "-" and signed:
        negative = True
        digits = digits[1:]
    if not _DIGITS.fullmatch(digits):
        raise ValueError(_INT_INVALID)
    value = -int(digits) if negative else int(digits)
    if value > high:
        raise ValueError(_INT_POS_OVERFLOW)
    if value < low:
        raise ValueError(_INT_NEG_OVERFLOW)
    return value


def _parse_float(text: str) -> float:
    if not text:
        raise ValueError(_FLOAT_EMPTY)
    if not _FLOAT.fullmatch(text):
        raise ValueError(_FLOAT_INVALID)
    return float(text)


def parse_number(text: str) -> Number:
    """Parse text as an unsigned, then a signed, then a float number."""
    try:
        return Number(NumberKind.UNSIGNED, _parse_int(text, 0, _U64_MAX, signed=False))
    except ValueError as error:
        uint_error = str(error)
    try:
        return Number(NumberKind.SIGNED, _parse_int(text, _I64_MIN, _I64_MAX, signed=True))
    except ValueError as error:
        int_error = str(error)
    try:
        return Number(NumberKind.FLOAT, _parse_float(text))
    except ValueError as error:
        float_error = str(error)
    raise ParseNumberError(uint_error, int_error, float_error)