from .types import *
from .enumerable import Enumerable


class IterableEnumerable(Enumerable[T]):
    """
    enumerable over a python iterable. re-traversable as long as the iterable is
    (lists, tuples, ranges, dicts...); an iterator or generator can be
    traversed only once.
    """

    def __init__(self, data: Iterable[T]):
        self._data = data

    def each(self, visit: Callable[[T], Any]) -> None:
        for item in self._data:
            visit(item)

    def __repr__(self) -> str:
        return f"IterableEnumerable({self._data!r})"


class EachEnumerable(Enumerable[T]):
    """enumerable over a bare traversal function: each_func(visit)"""

    def __init__(self, each_func: Callable[[Callable[[T], Any]], Any]):
        self._each_func = each_func

    def each(self, visit: Callable[[T], Any]) -> None:
        self._each_func(visit)


def from_iterable(data: Iterable[T]) -> Enumerable[T]:
    """create enumerable from iterable"""
    return IterableEnumerable(data)


def from_each(each_func: Callable[[Callable[[T], Any]], Any]) -> Enumerable[T]:
    """create enumerable from a function that calls its argument once per element"""
    return EachEnumerable(each_func)


def from_range(start: int, count: int) -> Enumerable[int]:
    """create enumerable from range"""
    return IterableEnumerable(range(start, start + count))


def repeat(item: T, count: int) -> Enumerable[T]:
    """create enumerable with repeated item"""
    def each(visit):
        for _ in range(count):
            visit(item)
    return EachEnumerable(each)


def empty() -> Enumerable[Any]:
    """create empty enumerable"""
    return IterableEnumerable(())


def generate(generator_func: Callable[[], T], count: int) -> Enumerable[T]:
    """
    sequence of count calls to generator_func. the function is called again on
    every traversal, so impure functions give a different sequence each time.
    """
    def each(visit):
        for _ in range(count):
            visit(generator_func())
    return EachEnumerable(each)


# --- aliases ---
eachy = from_iterable
E = from_iterable
e = from_iterable
