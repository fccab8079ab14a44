from __future__ import annotations
import typing
import logging
import numpy as np
import pandas as pd
from ..types import *

if typing.TYPE_CHECKING:
    from ..enumerable import Enumerable

logger = logging.getLogger(__name__)


# --- predicate queries ---

def any_(source: Optional[Iterable[T]], predicate: Optional[Predicate[T]] = MISSING) -> bool:
    """check if the sequence has any element, or any element satisfying a predicate"""
    if source is None:
        logger.debug("any: source is absent, returning False")
        return False
    if predicate is MISSING:
        for _ in source:
            return True
        return False
    if predicate is None:
        logger.debug("any: predicate is absent, returning False")
        return False
    return any(predicate(x) for x in source)


def all_(source: Optional[Iterable[T]], predicate: Optional[Predicate[T]]) -> bool:
    """
    check if all elements satisfy a predicate.
    an absent or empty source is vacuously true, an absent predicate is false.
    """
    data = materialize(source)
    if not data:
        return True
    if predicate is None:
        logger.debug("all: predicate is absent, returning False")
        return False
    return all(predicate(x) for x in data)


def first_or_default(source: Optional[Iterable[T]], predicate: Optional[Predicate[T]] = MISSING,
                     default: Optional[T] = None) -> Optional[T]:
    """get the first element (matching a predicate when given) or a default"""
    if source is None:
        logger.debug("first_or_default: source is absent, returning default")
        return default
    if predicate is None:
        logger.debug("first_or_default: predicate is absent, returning default")
        return default
    for item in source:
        if predicate is MISSING or predicate(item):
            return item
    return default


def find_index(source: Optional[Iterable[T]], predicate: Optional[Predicate[T]]) -> int:
    """zero-based position of the first element satisfying a predicate, or -1"""
    if source is None or predicate is None:
        logger.debug("find_index: source or predicate is absent, returning -1")
        return -1
    for index, item in enumerate(source):
        if predicate(item):
            return index
    return -1


def count(source: Optional[Iterable[T]], predicate: Optional[Predicate[T]] = MISSING) -> int:
    """count elements, optionally only those satisfying a predicate"""
    if predicate is None:
        logger.debug("count: predicate is absent, returning 0")
        return 0
    data = materialize(source)
    if predicate is MISSING:
        return len(data)
    return sum(1 for x in data if predicate(x))


# --- terminal accessor ---

class TerminalAccessor(Generic[T]):
    def __init__(self, enumerable_instance: 'Enumerable[T]'):
        self._enumerable = enumerable_instance

    def list(self) -> List[T]:
        """convert to a new list"""
        return list(self._enumerable._get_data())

    def set(self) -> Set[T]:
        """convert to set"""
        return set(self._enumerable._get_data())

    def dict(self, key_selector: KeySelector[T, K],
             value_selector: Optional[Selector[T, V]] = None) -> Dict[K, V]:
        """convert to dictionary, later keys overwrite earlier ones"""
        val_sel = value_selector if value_selector else lambda item: item
        return {key_selector(item): val_sel(item) for item in self._enumerable._get_data()}

    def array(self) -> np.ndarray:
        """convert to numpy array"""
        return np.array(self._enumerable._get_data())

    def pandas(self) -> pd.Series:
        """convert to pandas series"""
        return pd.Series(self._enumerable._get_data())

    def df(self) -> pd.DataFrame:
        """convert to pandas dataframe"""
        return pd.DataFrame(self._enumerable._get_data())

    def count(self, predicate: Optional[Predicate[T]] = MISSING) -> int:
        """count elements"""
        return count(self._enumerable._get_data(), predicate)

    def any(self, predicate: Optional[Predicate[T]] = MISSING) -> bool:
        """check if any element satisfies condition"""
        return any_(self._enumerable._get_data(), predicate)

    def all(self, predicate: Predicate[T]) -> bool:
        """check if all elements satisfy condition"""
        return all_(self._enumerable._get_data(), predicate)

    def first_or_default(self, predicate: Optional[Predicate[T]] = MISSING,
                         default: Optional[T] = None) -> Optional[T]:
        """get first element or default"""
        return first_or_default(self._enumerable._get_data(), predicate, default)

    def find_index(self, predicate: Predicate[T]) -> int:
        """index of the first matching element, or -1"""
        return find_index(self._enumerable._get_data(), predicate)
