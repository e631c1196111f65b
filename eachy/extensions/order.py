from __future__ import annotations
import logging
import typing
from ..types import *
from ..errors import ArgumentError, EmptyError
from ..traversal import compare_or_raise

if typing.TYPE_CHECKING:
    from ..enumerable import Enumerable

logger = logging.getLogger(__name__)


def _identity(item):
    return item


# --- quickselect over a scratch copy ---

def _partition(data: List[Any], left: int, right: int, pivot_index: int) -> int:
    """move everything smaller than the pivot to its left; return the pivot's final index"""
    pivot_value = data[pivot_index]
    data[pivot_index], data[right] = data[right], data[pivot_index]
    store_index = left
    for i in range(left, right):
        if compare_or_raise(data[i], pivot_value) < 0:
            data[store_index], data[i] = data[i], data[store_index]
            store_index += 1
    data[right], data[store_index] = data[store_index], data[right]
    return store_index


def _quickselect(data: List[Any], left: int, right: int, k: int) -> Any:
    """k-th smallest element of data[left..right]; reorders data in place"""
    while True:
        if left == right:
            return data[left]
        pivot_index = _partition(data, left, right, left + (right - left) // 2)
        if k == pivot_index:
            return data[k]
        if k < pivot_index:
            right = pivot_index - 1
        else:
            left = pivot_index + 1


class _OrderOperations(Generic[T]):
    # --- single best ---

    def max(self: 'Enumerable[T]', count: Optional[int] = None) -> Union[T, List[T]]:
        """
        largest element, EmptyError if there is none.
        with a count: the `count` largest elements, sorted descending.
        """
        if count is not None:
            return self._top(count, largest=True)
        return self.max_by(_identity)

    def min(self: 'Enumerable[T]', count: Optional[int] = None) -> Union[T, List[T]]:
        """
        smallest element, EmptyError if there is none.
        with a count: the `count` smallest elements, sorted ascending.
        """
        if count is not None:
            return self._top(count, largest=False)
        return self.min_by(_identity)

    def max_or_none(self: 'Enumerable[T]') -> Optional[T]:
        return self.max_by_or_none(_identity)

    def min_or_none(self: 'Enumerable[T]') -> Optional[T]:
        return self.min_by_or_none(_identity)

    def max_by(self: 'Enumerable[T]', selector: Selector[T, Any]) -> T:
        """element with the largest selector value; the first one wins ties"""
        found, (item, _) = self._best_by(selector, 1)
        if not found: raise EmptyError()
        return item

    def min_by(self: 'Enumerable[T]', selector: Selector[T, Any]) -> T:
        """element with the smallest selector value; the first one wins ties"""
        found, (item, _) = self._best_by(selector, -1)
        if not found: raise EmptyError()
        return item

    def max_by_or_none(self: 'Enumerable[T]', selector: Selector[T, Any]) -> Optional[T]:
        return self._best_by(selector, 1)[1][0]

    def min_by_or_none(self: 'Enumerable[T]', selector: Selector[T, Any]) -> Optional[T]:
        return self._best_by(selector, -1)[1][0]

    def max_of(self: 'Enumerable[T]', selector: Selector[T, U]) -> U:
        """largest selector value (the value, not the element)"""
        found, (_, value) = self._best_by(selector, 1)
        if not found: raise EmptyError()
        return value

    def min_of(self: 'Enumerable[T]', selector: Selector[T, U]) -> U:
        """smallest selector value (the value, not the element)"""
        found, (_, value) = self._best_by(selector, -1)
        if not found: raise EmptyError()
        return value

    def max_of_or_none(self: 'Enumerable[T]', selector: Selector[T, U]) -> Optional[U]:
        return self._best_by(selector, 1)[1][1]

    def min_of_or_none(self: 'Enumerable[T]', selector: Selector[T, U]) -> Optional[U]:
        return self._best_by(selector, -1)[1][1]

    def _best_by(self: 'Enumerable[T]', selector: Selector[T, Any], direction: int) -> Tuple[bool, Tuple[Any, Any]]:
        """single pass; direction 1 keeps the largest, -1 the smallest"""
        found = False
        best_item, best_value = None, None

        def visit(item):
            nonlocal found, best_item, best_value
            value = selector(item)
            if not found or compare_or_raise(value, best_value) == direction:
                best_item, best_value = item, value
            found = True

        self.each(visit)
        return found, (best_item, best_value)

    # --- both ends ---

    def minmax(self: 'Enumerable[T]') -> Tuple[T, T]:
        """(smallest, largest) in one pass; EmptyError if there are none"""
        return self.minmax_by(_identity)

    def minmax_or_none(self: 'Enumerable[T]') -> Tuple[Optional[T], Optional[T]]:
        return self.minmax_by_or_none(_identity)

    def minmax_by(self: 'Enumerable[T]', selector: Selector[T, Any]) -> Tuple[T, T]:
        found, (low, _), (high, _) = self._minmax_by(selector)
        if not found: raise EmptyError()
        return low, high

    def minmax_by_or_none(self: 'Enumerable[T]', selector: Selector[T, Any]) -> Tuple[Optional[T], Optional[T]]:
        _, (low, _), (high, _) = self._minmax_by(selector)
        return low, high

    def minmax_of(self: 'Enumerable[T]', selector: Selector[T, U]) -> Tuple[U, U]:
        found, (_, low), (_, high) = self._minmax_by(selector)
        if not found: raise EmptyError()
        return low, high

    def minmax_of_or_none(self: 'Enumerable[T]', selector: Selector[T, U]) -> Tuple[Optional[U], Optional[U]]:
        _, (_, low), (_, high) = self._minmax_by(selector)
        return low, high

    def _minmax_by(self: 'Enumerable[T]', selector: Selector[T, Any]):
        found = False
        low: Tuple[Any, Any] = (None, None)
        high: Tuple[Any, Any] = (None, None)

        def visit(item):
            nonlocal found, low, high
            value = selector(item)
            if not found or compare_or_raise(value, low[1]) < 0:
                low = (item, value)
            if not found or compare_or_raise(value, high[1]) > 0:
                high = (item, value)
            found = True

        self.each(visit)
        return found, low, high

    # --- top / bottom n ---

    def _top(self: 'Enumerable[T]', count: int, largest: bool) -> List[T]:
        """order statistics by quickselect on a single materialized copy"""
        if count < 0: raise ArgumentError(f"count must not be negative: {count}")
        data = self.to_a()
        n = len(data)
        count = min(count, n)
        logger.debug(f"selecting {count} of {n} elements ({'max' if largest else 'min'})")
        if largest:
            return [_quickselect(data, 0, n - 1, n - 1 - i) for i in range(count)]
        return [_quickselect(data, 0, n - 1, i) for i in range(count)]
