from __future__ import annotations

from abc import ABC, abstractmethod
from .types import *
from .traversal import each_until

# --- derived operations ---
from .extensions.query import _QueryOperations
from .extensions.search import _SearchOperations
from .extensions.transform import _TransformOperations
from .extensions.grouping import _GroupingOperations
from .extensions.windowing import _WindowingOperations
from .extensions.reduction import _ReductionOperations
from .extensions.order import _OrderOperations
from .extensions.sampling import _SamplingOperations
from .extensions.zip import _ZipOperations

# --- accessors ---
from .extensions.terminal import TerminalAccessor


# --- abstract base class ---

class IEnumerable(ABC, Generic[T]):
    @abstractmethod
    def each(self, visit: Callable[[T], Any]) -> Any:
        """call visit once per element, in order. the only method a source must provide."""
        pass


# --- base enumerable implementation ---

class _BaseEnumerable(IEnumerable[T]):
    def _each_until(self, visit: Callable[[T], Any]) -> bool:
        """traverse until visit returns STOP; true if it did"""
        return each_until(self, visit)

    @property
    def to(self) -> TerminalAccessor[T]:
        return TerminalAccessor(self)

    def __iter__(self) -> Iterator[T]:
        # each() pushes, iteration pulls: materialize once
        return iter(self.to_a())

    def __len__(self) -> int:
        return self.size()

    def __bool__(self) -> bool:
        # without this, truth testing would fall back to __len__ and count everything
        return self.is_present()

    def __contains__(self, item: Any) -> bool:
        return self.includes(item)


# --- main enumerable class ---

class Enumerable(
    _BaseEnumerable[T],
    _QueryOperations[T],
    _SearchOperations[T],
    _TransformOperations[T],
    _GroupingOperations[T],
    _WindowingOperations[T],
    _ReductionOperations[T],
    _OrderOperations[T],
    _SamplingOperations[T],
    _ZipOperations[T]
):
    """
    subclass and implement each(visit) to get every derived operation.

        class Countdown(Enumerable[int]):
            def __init__(self, start):
                self.start = start

            def each(self, visit):
                for i in range(self.start, 0, -1):
                    visit(i)

        Countdown(5).select(lambda i: i % 2)   # [5, 3, 1]

    each() must visit the same sequence every time it is called, unless the
    source documents that it can only be traversed once.
    """

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"
