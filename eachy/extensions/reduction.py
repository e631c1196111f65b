from __future__ import annotations
import logging
import operator
import typing
from ..types import *
from ..errors import EmptyError
from ..config import get_config
from ..identity import additive_identity, multiplicative_identity

if typing.TYPE_CHECKING:
    from ..enumerable import Enumerable

logger = logging.getLogger(__name__)


class _ReductionOperations(Generic[T]):
    def reduce(self: 'Enumerable[T]', accumulator: Accumulator[Any, T], seed: Any = MISSING) -> Any:
        """
        fold the elements with accumulator(memo, element).
        without a seed the first element starts the fold and an empty source
        raises EmptyError; with a seed an empty source returns the seed.
        """
        memo = self._fold(accumulator, seed)
        if memo is MISSING: raise EmptyError("cannot reduce empty sequence without seed")
        return memo

    def reduce_or_none(self: 'Enumerable[T]', accumulator: Accumulator[T, T]) -> Optional[T]:
        """seedless reduce() that returns None for an empty source"""
        memo = self._fold(accumulator, MISSING)
        return None if memo is MISSING else memo

    def _fold(self: 'Enumerable[T]', accumulator: Accumulator[Any, T], seed: Any) -> Any:
        memo = seed

        def visit(item):
            nonlocal memo
            memo = item if memo is MISSING else accumulator(memo, item)

        self.each(visit)
        return memo

    def accumulate(self: 'Enumerable[T]', accumulator: Optional[Accumulator[Any, T]] = None,
                   initial: Any = MISSING) -> List[Any]:
        """
        running results of the fold, one per element. uses + unless an
        accumulator is given. an initial value starts the list.
        """
        combine = accumulator or operator.add
        values: List[Any] = [] if initial is MISSING else [initial]
        memo = initial

        def visit(item):
            nonlocal memo
            memo = item if memo is MISSING else combine(memo, item)
            values.append(memo)

        self.each(visit)
        return values

    def sum(self: 'Enumerable[T]', selector: Optional[Selector[T, Any]] = None,
            initial: Any = MISSING, result_type: Optional[type] = None) -> Any:
        """
        add up the elements (or selector results).

        with no initial value the fold is seeded with the additive identity of
        the first value's type, so an empty source sums to the identity of
        result_type (default from config, int). pass initial to skip inference,
        e.g. for mixed element types with no common zero.
        """
        return self._reduce_with_identity(operator.add, additive_identity, selector, initial, result_type)

    def product(self: 'Enumerable[T]', selector: Optional[Selector[T, Any]] = None,
                initial: Any = MISSING, result_type: Optional[type] = None) -> Any:
        """multiply the elements (or selector results); identity rules as in sum()"""
        return self._reduce_with_identity(operator.mul, multiplicative_identity, selector, initial, result_type)

    def _reduce_with_identity(self: 'Enumerable[T]', combine: Callable[[Any, Any], Any],
                              identity_of: Callable[[type], Any], selector: Optional[Selector[T, Any]],
                              initial: Any, result_type: Optional[type]) -> Any:
        memo = initial

        def visit(item):
            nonlocal memo
            value = selector(item) if selector else item
            if memo is MISSING:
                memo = identity_of(type(value))
                logger.debug(f"inferred identity {memo!r} for {type(value).__name__}")
            memo = combine(memo, value)

        self.each(visit)
        if memo is MISSING:
            return identity_of(result_type or get_config().default_sum_type)
        return memo
