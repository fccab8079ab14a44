import typing
from .types import *

if typing.TYPE_CHECKING:
    from .enumerable import Enumerable

def from_iterable(data: Optional[Iterable[T]]) -> 'Enumerable[T]':
    """create enumerable from iterable, an absent source gives an empty one"""
    from .enumerable import Enumerable
    return Enumerable(lambda: materialize(data))

def from_range(start: int, count: int) -> 'Enumerable[int]':
    """create enumerable from range"""
    from .enumerable import Enumerable
    return Enumerable(lambda: list(range(start, start + count)))

def repeat(item: T, count: int) -> 'Enumerable[T]':
    """create enumerable with repeated item"""
    from .enumerable import Enumerable
    return Enumerable(lambda: [item] * count)

def empty() -> 'Enumerable[Any]':
    """create empty enumerable"""
    from .enumerable import Enumerable
    return Enumerable(lambda: [])

# --- aliases ---
linqy = from_iterable
P = from_iterable
