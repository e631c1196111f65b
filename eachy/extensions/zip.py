from __future__ import annotations
import logging
import typing
from collections.abc import Sequence
from ..types import *
from ..errors import ZipIndexError

if typing.TYPE_CHECKING:
    from ..enumerable import Enumerable

logger = logging.getLogger(__name__)

_EXHAUSTED = object()


class _Lane:
    """one secondary source of a tandem traversal"""

    def __init__(self, source: Iterable[Any]):
        # sequences are read by position, everything else is advanced once per step
        self._indexed = isinstance(source, Sequence)
        self._source = source
        self._iterator = None if self._indexed else iter(source)

    def value_at(self, index: int) -> Any:
        if self._indexed:
            return self._source[index] if index < len(self._source) else _EXHAUSTED
        return next(self._iterator, _EXHAUSTED)


class _ZipOperations(Generic[T]):
    def zip(self: 'Enumerable[T]', *others: Iterable[Any]) -> List[Tuple[Any, ...]]:
        """
        tuples of this source's elements with the elements of `others` at the same
        position. raises ZipIndexError as soon as any other source runs out first.
        """
        result: List[Tuple[Any, ...]] = []
        self._zip_internal(others, True, result.append)
        return result

    def zip_or_none(self: 'Enumerable[T]', *others: Iterable[Any]) -> List[Tuple[Any, ...]]:
        """like zip(), but missing values are None; the length is always this source's"""
        result: List[Tuple[Any, ...]] = []
        self._zip_internal(others, False, result.append)
        return result

    def _zip_internal(self: 'Enumerable[T]', others: Tuple[Iterable[Any], ...], strict: bool,
                      visit: Callable[[Tuple[Any, ...]], Any]) -> None:
        lanes = [_Lane(other) for other in others]
        index = 0

        def step(item):
            nonlocal index
            row = [item]
            for position, lane in enumerate(lanes):
                value = lane.value_at(index)
                if value is _EXHAUSTED:
                    if strict:
                        logger.debug(f"zip source {position} exhausted at index {index}")
                        raise ZipIndexError(f"zip source {position} has no element at index {index}")
                    value = None
                row.append(value)
            index += 1
            visit(tuple(row))

        self.each(step)
