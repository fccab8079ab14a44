from __future__ import annotations
import typing
import logging
import numpy as np
from ..coercion import safe_to_double
from ..types import *

if typing.TYPE_CHECKING:
    from ..enumerable import Enumerable

logger = logging.getLogger(__name__)


def _get_values(source: Optional[Iterable[T]], selector: Optional[Selector[T, Any]]) -> np.ndarray:
    """
    helper to coerce a sequence (or its projection) into a float array.
    an absent selector yields an empty array so every reduction falls back to 0.0.
    """
    if selector is None:
        logger.debug("aggregate: selector is absent, using 0.0")
        return np.empty(0, dtype=float)
    data = materialize(source)
    if selector is not MISSING:
        data = [selector(x) for x in data]
    return np.fromiter((safe_to_double(x) for x in data), dtype=float, count=len(data))


def sum_(source: Optional[Iterable[T]], selector: Optional[Selector[T, Any]] = MISSING) -> float:
    """sum of the coerced values, 0.0 for an empty sequence"""
    values = _get_values(source, selector)
    return float(np.sum(values))


def min_(source: Optional[Iterable[T]], selector: Optional[Selector[T, Any]] = MISSING) -> float:
    """
    smallest coerced value. an empty sequence gives 0.0, which cannot be told
    apart from a real 0.0 minimum.
    """
    values = _get_values(source, selector)
    if values.size == 0:
        return 0.0
    return float(np.min(values))


def max_(source: Optional[Iterable[T]], selector: Optional[Selector[T, Any]] = MISSING) -> float:
    """largest coerced value, 0.0 for an empty sequence"""
    values = _get_values(source, selector)
    if values.size == 0:
        return 0.0
    return float(np.max(values))


def average(source: Optional[Iterable[T]], selector: Optional[Selector[T, Any]] = MISSING) -> float:
    """arithmetic mean of the coerced values, 0.0 for an empty sequence"""
    values = _get_values(source, selector)
    if values.size == 0:
        return 0.0
    return float(np.mean(values))


class StatsAccessor(Generic[T]):
    def __init__(self, enumerable_instance: 'Enumerable[T]'):
        self._enumerable = enumerable_instance

    def sum(self, selector: Optional[Selector[T, Any]] = MISSING) -> float:
        """calc sum"""
        return sum_(self._enumerable._get_data(), selector)

    def min(self, selector: Optional[Selector[T, Any]] = MISSING) -> float:
        """find minimum"""
        return min_(self._enumerable._get_data(), selector)

    def max(self, selector: Optional[Selector[T, Any]] = MISSING) -> float:
        """find maximum"""
        return max_(self._enumerable._get_data(), selector)

    def average(self, selector: Optional[Selector[T, Any]] = MISSING) -> float:
        """calc average"""
        return average(self._enumerable._get_data(), selector)
