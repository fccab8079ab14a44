"""
best-effort numeric coercion shared by the aggregation operators.

values are dispatched on their type over a fixed set (real numbers, booleans,
single characters and strings). anything that cannot be read as a number
becomes 0.0; nothing here raises.
"""
from __future__ import annotations

import logging
import math
import numbers
import re
import unicodedata
from dataclasses import dataclass
from decimal import Decimal
from functools import singledispatch
from typing import Any

import numpy as np

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class NumericFormat:
    """characters removed from a numeric string before it is parsed"""
    strip_chars: str = "$,"

    def clean(self, text: str) -> str:
        text = text.strip()
        for ch in self.strip_chars:
            text = text.replace(ch, "")
        return text


DEFAULT_FORMAT = NumericFormat()

# plain decimal literals only: no underscores, inf or nan
_NUMBER = re.compile(r"[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?", re.ASCII)


def safe_to_double(value: Any, fmt: NumericFormat = DEFAULT_FORMAT) -> float:
    """coerce any value to a float, falling back to 0.0"""
    return _coerce(value, fmt)


@singledispatch
def _coerce(value: Any, fmt: NumericFormat) -> float:
    logger.debug(f"cannot coerce {type(value).__name__} value {value!r}, using 0.0")
    return 0.0


@_coerce.register(numbers.Real)
@_coerce.register(Decimal)
def _(value, fmt: NumericFormat) -> float:
    try:
        return float(value)
    except (OverflowError, ValueError):
        logger.debug(f"number {value!r} does not fit a float, using 0.0")
        return 0.0


@_coerce.register(bool)
@_coerce.register(np.bool_)
def _(value, fmt: NumericFormat) -> float:
    return 1.0 if value else 0.0


@_coerce.register(str)
def _(value: str, fmt: NumericFormat) -> float:
    if len(value) == 1:
        # a lone character counts only as a digit
        digit = unicodedata.digit(value, None)
        if digit is None:
            logger.debug(f"character {value!r} is not a digit, using 0.0")
            return 0.0
        return float(digit)

    cleaned = fmt.clean(value)
    if not _NUMBER.fullmatch(cleaned):
        logger.debug(f"cannot parse {value!r} as a number, using 0.0")
        return 0.0
    number = float(cleaned)
    if math.isinf(number):
        logger.debug(f"{cleaned!r} does not fit a float, using 0.0")
        return 0.0
    return number
