from __future__ import annotations

from abc import ABC, abstractmethod
from .types import *

# --- core functionality ---
from .extensions.core import _CoreOperations, order_by

# --- accessors ---
from .extensions.join import JoinAccessor
from .extensions.grouping import GroupingAccessor
from .extensions.stats import StatsAccessor
from .extensions.terminal import TerminalAccessor

# --- abstract base class ---

class IEnumerable(ABC, Generic[T]):
    @abstractmethod
    def _get_data(self) -> List[T]:
        """get the underlying data as a list"""
        pass

# --- base enumerable implementation ---

class _BaseEnumerable(IEnumerable[T]):
    def __init__(self, data_func: Callable[[], List[T]]):
        """init with a function that returns data when called"""
        self._data_func = data_func
        self._cached_result: Optional[List[T]] = None
        self._is_cached = False

    def _get_data(self) -> List[T]:
        """get the current data, caching the result"""
        if not self._is_cached:
            self._cached_result = self._data_func()
            self._is_cached = True
        return self._cached_result

    def __iter__(self) -> Iterator[T]:
        return iter(self._get_data())

    def __len__(self) -> int:
        return self.to.count()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._get_data()!r})"

# --- main enumerable class ---

class Enumerable(
    _BaseEnumerable[T],
    _CoreOperations[T]
):
    """a linq-inspired enumerable over any python iterable."""
    def __init__(self, data_func: Callable[[], List[T]]):
        super().__init__(data_func)
        # --- initialize accessors ---
        self.join = JoinAccessor(self)
        self.group = GroupingAccessor(self)
        self.stats = StatsAccessor(self)
        self.to = TerminalAccessor(self)

# --- ordered enumerable class ---

class OrderedEnumerable(Enumerable[T]):
    """represents a sorted sequence, allowing for subsequent orderings."""

    def __init__(self, data_func: Callable[[], List[T]], sort_keys: List[Tuple[Callable, bool]]):
        super().__init__(data_func)
        self._original_data_func = data_func
        self._sort_keys = sort_keys

    def _get_data(self) -> List[T]:
        """overrides base to apply all sorts at once using stable sort."""
        if not self._is_cached:
            data = self._original_data_func()
            # each pass is stable, so sorting from the last key to the first
            # leaves the first key as the primary order
            for key_selector, is_descending in reversed(self._sort_keys):
                data = order_by(data, key_selector, ascending=not is_descending)
            self._cached_result = data
            self._is_cached = True
        return self._cached_result

    def then_by(self, key_selector: KeySelector[T, K]) -> 'OrderedEnumerable[T]':
        """secondary sort ascending"""
        new_keys = self._sort_keys + [(key_selector, False)]
        return OrderedEnumerable(self._original_data_func, new_keys)

    def then_by_descending(self, key_selector: KeySelector[T, K]) -> 'OrderedEnumerable[T]':
        """secondary sort descending"""
        new_keys = self._sort_keys + [(key_selector, True)]
        return OrderedEnumerable(self._original_data_func, new_keys)
