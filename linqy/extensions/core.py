from __future__ import annotations
import typing
import logging
from itertools import islice
from ..types import *

if typing.TYPE_CHECKING:
    from ..enumerable import Enumerable, OrderedEnumerable

logger = logging.getLogger(__name__)


# --- functional operators ---

def where(source: Optional[Iterable[T]], predicate: Optional[Predicate[T]]) -> List[T]:
    """filter elements based on a predicate"""
    if predicate is None:
        logger.debug("where: predicate is absent, returning []")
        return []
    return [x for x in materialize(source) if predicate(x)]


def select(source: Optional[Iterable[T]], selector: Optional[Selector[T, U]]) -> List[U]:
    """project each element to a new form"""
    if selector is None:
        logger.debug("select: selector is absent, returning []")
        return []
    return [selector(x) for x in materialize(source)]


def select_many(source: Optional[Iterable[T]],
                selector: Optional[Selector[T, Optional[Iterable[U]]]]) -> List[U]:
    """project and flatten sequences, skipping absent sub-sequences"""
    if selector is None:
        logger.debug("select_many: selector is absent, returning []")
        return []
    return [item for sublist in select(source, selector) if sublist is not None for item in sublist]


def distinct(source: Optional[Iterable[T]]) -> List[T]:
    """
    return distinct elements, keeping the first occurrence of each.
    elements that cannot be hashed (lists, dicts) are compared by equality.
    """
    result = []
    seen = set()
    seen_unhashable = []
    for item in materialize(source):
        try:
            if item in seen:
                continue
            seen.add(item)
        except TypeError:
            if item in seen_unhashable:
                continue
            seen_unhashable.append(item)
        result.append(item)
    return result


def take(source: Optional[Iterable[T]], count: int) -> List[T]:
    """take the first 'count' elements"""
    if source is None or count <= 0:
        return []
    # islice stops reading a one-shot iterator after 'count' items
    return list(islice(source, count))


def skip(source: Optional[Iterable[T]], count: int) -> List[T]:
    """skip the first 'count' elements"""
    data = materialize(source)
    if count <= 0:
        return data
    return data[count:]


def order_by(source: Optional[Iterable[T]],
             key_selector: Optional[KeySelector[T, K]] = MISSING,
             ascending: bool = True) -> List[T]:
    """
    stable sort by a key, the element itself when no selector is passed.
    equal keys keep their input order in both directions.
    """
    if key_selector is None:
        logger.debug("order_by: key selector is absent, returning []")
        return []
    key = None if key_selector is MISSING else key_selector
    # sorted() with reverse=True is still stable
    return sorted(materialize(source), key=key, reverse=not ascending)


def order_by_descending(source: Optional[Iterable[T]],
                        key_selector: Optional[KeySelector[T, K]] = MISSING) -> List[T]:
    """stable sort by a key in descending order"""
    return order_by(source, key_selector, ascending=False)


# --- chainable methods for the enumerable ---

class _CoreOperations(Generic[T]):
    def where(self: 'Enumerable[T]', predicate: Predicate[T]) -> 'Enumerable[T]':
        """filter elements based on a predicate"""
        from ..enumerable import Enumerable
        return Enumerable(lambda: where(self._get_data(), predicate))

    def select(self: 'Enumerable[T]', selector: Selector[T, U]) -> 'Enumerable[U]':
        """project each element to a new form"""
        from ..enumerable import Enumerable
        return Enumerable(lambda: select(self._get_data(), selector))

    def select_many(self: 'Enumerable[T]', selector: Selector[T, Iterable[U]]) -> 'Enumerable[U]':
        """project and flatten sequences"""
        from ..enumerable import Enumerable
        return Enumerable(lambda: select_many(self._get_data(), selector))

    def distinct(self: 'Enumerable[T]') -> 'Enumerable[T]':
        """return distinct elements. preserves order of first appearance."""
        from ..enumerable import Enumerable
        return Enumerable(lambda: distinct(self._get_data()))

    def take(self: 'Enumerable[T]', count: int) -> 'Enumerable[T]':
        """take the first 'count' elements"""
        from ..enumerable import Enumerable
        return Enumerable(lambda: take(self._get_data(), count))

    def skip(self: 'Enumerable[T]', count: int) -> 'Enumerable[T]':
        """skip the first 'count' elements"""
        from ..enumerable import Enumerable
        return Enumerable(lambda: skip(self._get_data(), count))

    def order_by(self: 'Enumerable[T]', key_selector: KeySelector[T, K] = MISSING) -> 'OrderedEnumerable[T]':
        """sort elements by a key"""
        from ..enumerable import OrderedEnumerable
        return OrderedEnumerable(self._get_data, [(key_selector, False)])

    def order_by_descending(self: 'Enumerable[T]',
                            key_selector: KeySelector[T, K] = MISSING) -> 'OrderedEnumerable[T]':
        """sort elements by a key in descending order"""
        from ..enumerable import OrderedEnumerable
        return OrderedEnumerable(self._get_data, [(key_selector, True)])
