from typing import (
    TypeVar, Generic, Callable, Iterator, Iterable, Any, Optional, Union,
    Dict, List, Tuple, Set
)

T = TypeVar('T')
U = TypeVar('U')
K = TypeVar('K')
V = TypeVar('V')

Predicate = Callable[[T], bool]
Selector = Callable[[T], U]
KeySelector = Callable[[T], K]
ResultSelector = Callable[[T, U], V]


class _Missing:
    """marks an optional callback that was not passed at all (as opposed to passed as None)"""
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool: return False

    def __repr__(self) -> str: return "MISSING"


MISSING: Any = _Missing()


def materialize(source: Optional[Iterable[T]]) -> List[T]:
    """read a possibly-absent source exactly once into a fresh list"""
    if source is None:
        return []
    return list(source)
