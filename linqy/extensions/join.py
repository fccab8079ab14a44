from __future__ import annotations
import typing
import logging
from collections import defaultdict
from ..types import *

if typing.TYPE_CHECKING:
    from ..enumerable import Enumerable

logger = logging.getLogger(__name__)


class _Lookup(Generic[K, U]):
    """
    inner elements indexed by key, keeping their order within each key.
    keys that cannot be hashed (lists, dicts) are matched by equality.
    """

    def __init__(self, inner: Optional[Iterable[U]], inner_key_selector: KeySelector[U, K]):
        self._hashed = defaultdict(list)
        self._unhashed: List[Tuple[K, List[U]]] = []
        for inner_item in materialize(inner):
            self._items_for(inner_key_selector(inner_item), create=True).append(inner_item)

    def _items_for(self, key: K, create: bool = False) -> List[U]:
        try:
            if create or key in self._hashed:
                return self._hashed[key]
            return []
        except TypeError:
            for existing_key, items in self._unhashed:
                if existing_key == key:
                    return items
            if not create:
                return []
            items = []
            self._unhashed.append((key, items))
            return items

    def get(self, key: K) -> List[U]:
        return self._items_for(key)


def join(outer: Optional[Iterable[T]], inner: Optional[Iterable[U]],
         outer_key_selector: Optional[KeySelector[T, K]],
         inner_key_selector: Optional[KeySelector[U, K]],
         result_selector: Optional[Callable[[T, U], V]]) -> List[V]:
    """
    inner join two sequences based on matching keys.
    results follow outer order, then the order of matching inner elements.
    """
    if outer is None or inner is None:
        logger.debug("join: source is absent, returning []")
        return []
    if outer_key_selector is None or inner_key_selector is None or result_selector is None:
        logger.debug("join: selector is absent, returning []")
        return []
    inner_lookup = _Lookup(inner, inner_key_selector)
    result = []
    for outer_item in materialize(outer):
        outer_key = outer_key_selector(outer_item)
        for inner_item in inner_lookup.get(outer_key):
            result.append(result_selector(outer_item, inner_item))
    return result


def group_join(outer: Optional[Iterable[T]], inner: Optional[Iterable[U]],
               outer_key_selector: Optional[KeySelector[T, K]],
               inner_key_selector: Optional[KeySelector[U, K]],
               result_selector: Optional[Callable[[T, List[U]], V]]) -> List[V]:
    """
    group join - one result per outer element, paired with the list of inner
    elements sharing its key. that list is empty (never None) when nothing
    matches or the inner sequence is absent.
    """
    if outer_key_selector is None or inner_key_selector is None or result_selector is None:
        logger.debug("group_join: selector is absent, returning []")
        return []
    if outer is None:
        logger.debug("group_join: outer source is absent, returning []")
        return []
    outer_data = materialize(outer)
    if not outer_data:
        return []
    inner_lookup = _Lookup(inner, inner_key_selector)
    # each outer element gets its own copy of the matched list
    return [result_selector(o, list(inner_lookup.get(outer_key_selector(o))))
            for o in outer_data]


class JoinAccessor(Generic[T]):
    def __init__(self, enumerable_instance: 'Enumerable[T]'):
        self._enumerable = enumerable_instance

    def join(self, inner: Iterable[U], outer_key_selector: KeySelector[T, K],
             inner_key_selector: KeySelector[U, K],
             result_selector: Callable[[T, U], V]) -> 'Enumerable[V]':
        """inner join two sequences based on matching keys"""
        from ..enumerable import Enumerable
        return Enumerable(lambda: join(self._enumerable._get_data(), inner,
                                       outer_key_selector, inner_key_selector, result_selector))

    def group_join(self, inner: Iterable[U], outer_key_selector: KeySelector[T, K],
                   inner_key_selector: KeySelector[U, K],
                   result_selector: Callable[[T, List[U]], V]) -> 'Enumerable[V]':
        """group join - groups inner elements by outer key"""
        from ..enumerable import Enumerable
        return Enumerable(lambda: group_join(self._enumerable._get_data(), inner,
                                             outer_key_selector, inner_key_selector, result_selector))
