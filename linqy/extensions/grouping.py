from __future__ import annotations
import typing
import logging
from collections import defaultdict
from ..types import *

if typing.TYPE_CHECKING:
    from ..enumerable import Enumerable

logger = logging.getLogger(__name__)


def group_by(source: Optional[Iterable[T]], key_selector: Optional[KeySelector[T, K]],
             element_selector: Optional[Selector[T, U]] = MISSING) -> Dict[K, List[Union[T, U]]]:
    """
    group elements by a key. keys keep the order they are first seen in and
    each group keeps the source order of its elements.
    """
    if key_selector is None or element_selector is None:
        logger.debug("group_by: selector is absent, returning {}")
        return {}
    groups = defaultdict(list)
    for item in materialize(source):
        value = item if element_selector is MISSING else element_selector(item)
        groups[key_selector(item)].append(value)
    return dict(groups)


class GroupingAccessor(Generic[T]):
    def __init__(self, enumerable_instance: 'Enumerable[T]'):
        self._enumerable = enumerable_instance

    def group_by(self, key_selector: KeySelector[T, K],
                 element_selector: Optional[Selector[T, U]] = MISSING) -> Dict[K, List[Union[T, U]]]:
        """group elements by a key"""
        return group_by(self._enumerable._get_data(), key_selector, element_selector)
