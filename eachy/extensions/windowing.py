from __future__ import annotations
import typing
from collections import deque
from ..types import *
from ..errors import ArgumentError

if typing.TYPE_CHECKING:
    from ..enumerable import Enumerable

WindowBuffer = Union[deque, List[Any]]


def _drop_oldest(buffer: WindowBuffer) -> None:
    if isinstance(buffer, deque):
        buffer.popleft()
    else:
        del buffer[0]


class _WindowingOperations(Generic[T]):
    # --- consecutive windows ---

    def each_cons(self: 'Enumerable[T]', count: int, visit: Callable[[List[T]], Any]) -> None:
        """
        visit every run of `count` consecutive elements, advancing one element
        at a time. each window is a fresh list the visitor may keep.
        """
        if count <= 0: raise ArgumentError(f"invalid cons size: {count}")
        window: deque = deque()

        def advance(item):
            window.append(item)
            if len(window) > count: window.popleft()
            if len(window) == count: visit(list(window))

        self.each(advance)

    def each_cons_into(self: 'Enumerable[T]', count: int, buffer: WindowBuffer,
                       visit: Callable[[WindowBuffer], Any]) -> None:
        """
        like each_cons(), but every window is the caller's `buffer`, refilled in
        place. its contents are only valid until the next call to visit.
        """
        if count <= 0: raise ArgumentError(f"invalid cons size: {count}")
        buffer.clear()

        def advance(item):
            buffer.append(item)
            if len(buffer) > count: _drop_oldest(buffer)
            if len(buffer) == count: visit(buffer)

        self.each(advance)

    def each_cons_pair(self: 'Enumerable[T]', visit: Callable[[T, T], Any]) -> None:
        """visit(previous, current) for each adjacent pair, without a window buffer"""
        previous: Any = MISSING

        def advance(item):
            nonlocal previous
            if previous is not MISSING:
                visit(previous, item)
            previous = item

        self.each(advance)

    def cons(self: 'Enumerable[T]', count: int) -> List[List[T]]:
        """all windows of each_cons(count), collected"""
        windows: List[List[T]] = []
        self.each_cons(count, windows.append)
        return windows

    # --- non-overlapping slices ---

    def each_slice(self: 'Enumerable[T]', count: int, visit: Callable[[List[T]], Any]) -> None:
        """visit consecutive slices of `count` elements; the last one may be shorter"""
        if count <= 0: raise ArgumentError(f"invalid slice size: {count}")
        self._each_slice_internal(count, None, visit)

    def each_slice_into(self: 'Enumerable[T]', count: int, buffer: List[Any],
                        visit: Callable[[List[Any]], Any]) -> None:
        """like each_slice(), but every slice is the caller's `buffer`, cleared between slices"""
        if count <= 0: raise ArgumentError(f"invalid slice size: {count}")
        self._each_slice_internal(count, buffer, visit)

    def _each_slice_internal(self: 'Enumerable[T]', count: int, reuse: Optional[List[Any]],
                             visit: Callable[[List[Any]], Any]) -> None:
        if reuse is not None:
            reuse.clear()
        current = reuse if reuse is not None else []

        def advance(item):
            nonlocal current
            current.append(item)
            if len(current) == count:
                visit(current)
                if reuse is not None:
                    current.clear()
                else:
                    current = []

        self.each(advance)
        if current: visit(current)

    def in_slices_of(self: 'Enumerable[T]', count: int) -> List[List[T]]:
        """all slices of each_slice(count), collected"""
        slices: List[List[T]] = []
        self.each_slice(count, slices.append)
        return slices

    def in_groups_of(self: 'Enumerable[T]', size: int, filled_up_with: Any = None) -> List[List[Any]]:
        """slices of exactly `size`, the last one padded with filled_up_with"""
        if size <= 0: raise ArgumentError("size must be positive")
        groups: List[List[Any]] = []

        def pad(group):
            group.extend([filled_up_with] * (size - len(group)))
            groups.append(group)

        self._each_slice_internal(size, None, pad)
        return groups

    # --- strides ---

    def each_step(self: 'Enumerable[T]', n: int, visit: Visitor[T], offset: int = 0) -> None:
        """visit every n-th element, starting with the one at index `offset`"""
        if n <= 0: raise ArgumentError(f"invalid n size: {n}")
        if offset < 0: raise ArgumentError(f"invalid offset size: {offset}")
        offset_mod = offset % n

        def step(item, index):
            if index >= offset and index % n == offset_mod:
                visit(item)

        self.each_with_index(step)
