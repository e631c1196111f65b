from __future__ import annotations
import typing
from ..types import *
from ..traversal import as_predicate, as_equality

if typing.TYPE_CHECKING:
    from ..enumerable import Enumerable


class _QueryOperations(Generic[T]):
    def all(self: 'Enumerable[T]', condition: Any = MISSING) -> bool:
        """true if every element satisfies the condition; stops at the first that doesn't"""
        test = as_predicate(condition)
        return not self._each_until(lambda item: None if test(item) else STOP)

    def any(self: 'Enumerable[T]', condition: Any = MISSING) -> bool:
        """true if some element satisfies the condition; stops at the first that does"""
        test = as_predicate(condition)
        return self._each_until(lambda item: STOP if test(item) else None)

    def none(self: 'Enumerable[T]', condition: Any = MISSING) -> bool:
        """true if no element satisfies the condition"""
        return not self.any(condition)

    def one(self: 'Enumerable[T]', condition: Any = MISSING) -> bool:
        """true if exactly one element satisfies the condition"""
        test = as_predicate(condition)
        matched = 0

        def visit(item):
            nonlocal matched
            if test(item):
                matched += 1
                # the first match can't decide anything, the second one can
                if matched > 1: return STOP

        self._each_until(visit)
        return matched == 1

    def includes(self: 'Enumerable[T]', obj: Any) -> bool:
        """true if any element == obj"""
        return self._each_until(lambda item: STOP if item == obj else None)

    def count(self: 'Enumerable[T]', condition: Any = MISSING) -> int:
        """
        count elements. with no argument counts them all, a callable counts
        the elements it accepts, any other value (None included) counts
        equal elements.
        """
        if condition is MISSING:
            return self.size()
        test = as_equality(condition)
        total = 0

        def visit(item):
            nonlocal total
            if test(item): total += 1

        self.each(visit)
        return total

    def size(self: 'Enumerable[T]') -> int:
        """number of elements, counted by traversing"""
        total = 0

        def visit(_):
            nonlocal total
            total += 1

        self.each(visit)
        return total

    def is_empty(self: 'Enumerable[T]') -> bool:
        """true if the source yields nothing; looks at one element at most"""
        return not self.is_present()

    def is_present(self: 'Enumerable[T]') -> bool:
        """
        true if the source yields anything. unlike any(), the elements' own
        truthiness doesn't matter: [None, False] is present.
        """
        return self._each_until(lambda _: STOP)
