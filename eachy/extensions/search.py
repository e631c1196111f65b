from __future__ import annotations
import typing
from ..types import *
from ..errors import ArgumentError, EmptyError, NotFoundError
from ..traversal import as_equality

if typing.TYPE_CHECKING:
    from ..enumerable import Enumerable


class _SearchOperations(Generic[T]):
    def find(self: 'Enumerable[T]', predicate: Predicate[T], if_none: Optional[T] = None) -> Optional[T]:
        """first element the predicate accepts, or if_none"""
        found = if_none

        def visit(item):
            nonlocal found
            if predicate(item):
                found = item
                return STOP

        self._each_until(visit)
        return found

    def find_or_raise(self: 'Enumerable[T]', predicate: Predicate[T]) -> T:
        """first element the predicate accepts; NotFoundError if there is none"""
        found = MISSING

        def visit(item):
            nonlocal found
            if predicate(item):
                found = item
                return STOP

        if not self._each_until(visit):
            raise NotFoundError()
        return found

    def find_value(self: 'Enumerable[T]', selector: Selector[T, U], if_none: Optional[U] = None) -> Optional[U]:
        """first truthy selector result (the result, not the element), or if_none"""
        found = if_none

        def visit(item):
            nonlocal found
            value = selector(item)
            if value:
                found = value
                return STOP

        self._each_until(visit)
        return found

    def index(self: 'Enumerable[T]', condition: Any) -> Optional[int]:
        """zero-based position of the first match (callable or equal value), or None"""
        test = as_equality(condition)
        position = 0
        found = None

        def visit(item):
            nonlocal position, found
            if test(item):
                found = position
                return STOP
            position += 1

        self._each_until(visit)
        return found

    def index_or_raise(self: 'Enumerable[T]', condition: Any) -> int:
        """like index() but raises NotFoundError when nothing matches"""
        found = self.index(condition)
        if found is None: raise NotFoundError()
        return found

    def index_by(self: 'Enumerable[T]', key_selector: KeySelector[T, K]) -> Dict[K, T]:
        """map each key to the element producing it; later elements overwrite earlier ones"""
        result: Dict[K, T] = {}

        def visit(item):
            result[key_selector(item)] = item

        self.each(visit)
        return result

    def first(self: 'Enumerable[T]', count: Optional[int] = None) -> Union[T, List[T]]:
        """
        with no count: the first element, EmptyError if there is none.
        with a count: a list of up to count leading elements.
        """
        if count is None:
            found = self._first_or_missing()
            if found is MISSING: raise EmptyError()
            return found
        if count < 0: raise ArgumentError(f"attempt to take negative size: {count}")

        taken: List[T] = []
        if count == 0: return taken

        def visit(item):
            taken.append(item)
            if len(taken) == count: return STOP

        self._each_until(visit)
        return taken

    def first_or_none(self: 'Enumerable[T]') -> Optional[T]:
        """first element, or None for an empty source"""
        found = self._first_or_missing()
        return None if found is MISSING else found

    def _first_or_missing(self: 'Enumerable[T]') -> Any:
        found = MISSING

        def visit(item):
            nonlocal found
            found = item
            return STOP

        self._each_until(visit)
        return found
