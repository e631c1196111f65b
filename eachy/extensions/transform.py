from __future__ import annotations
import typing
from ..types import *
from ..errors import ArgumentError
from ..traversal import as_predicate

if typing.TYPE_CHECKING:
    from ..enumerable import Enumerable


class _TransformOperations(Generic[T]):
    # --- traversal variants ---

    def each_with_index(self: 'Enumerable[T]', visit: Callable[[T, int], Any], offset: int = 0) -> None:
        """visit(element, index), index counting up from offset"""
        index = offset

        def indexed(item):
            nonlocal index
            visit(item, index)
            index += 1

        self.each(indexed)

    def each_with_object(self: 'Enumerable[T]', obj: U, visit: Callable[[T, U], Any]) -> U:
        """visit(element, obj) for every element, then return obj"""
        self.each(lambda item: visit(item, obj))
        return obj

    def cycle(self: 'Enumerable[T]', visit: Visitor[T], times: Optional[int] = None) -> None:
        """
        traverse the source `times` times, or forever when times is None.
        an endless cycle ends only when visit raises.
        """
        if times is not None and times < 0: raise ArgumentError(f"invalid cycle count: {times}")
        if times is None:
            while True:
                self.each(visit)
        for _ in range(times):
            self.each(visit)

    # --- projections ---

    def map(self: 'Enumerable[T]', selector: Selector[T, U]) -> List[U]:
        """project each element to a new form"""
        result: List[U] = []
        self.each(lambda item: result.append(selector(item)))
        return result

    def map_with_index(self: 'Enumerable[T]', selector: Callable[[T, int], U], offset: int = 0) -> List[U]:
        """project each element using its index (counting from offset)"""
        result: List[U] = []
        self.each_with_index(lambda item, index: result.append(selector(item, index)), offset)
        return result

    def compact_map(self: 'Enumerable[T]', selector: Selector[T, Optional[U]]) -> List[U]:
        """project and drop None results"""
        result: List[U] = []

        def visit(item):
            value = selector(item)
            if value is not None: result.append(value)

        self.each(visit)
        return result

    def flat_map(self: 'Enumerable[T]', selector: Selector[T, Any]) -> List[Any]:
        """
        project and flatten one level. lists, tuples, iterators and other
        enumerables are spliced in; any other result is appended as is.
        """
        from ..enumerable import Enumerable
        result: List[Any] = []

        def visit(item):
            value = selector(item)
            if isinstance(value, Enumerable):
                value.each(result.append)
            elif isinstance(value, (list, tuple, Iterator)):
                result.extend(value)
            else:
                result.append(value)

        self.each(visit)
        return result

    # --- filters ---

    def select(self: 'Enumerable[T]', condition: Any = MISSING) -> List[T]:
        """elements satisfying the condition (predicate, type or pattern), in order"""
        test = as_predicate(condition)
        result: List[T] = []

        def visit(item):
            if test(item): result.append(item)

        self.each(visit)
        return result

    def reject(self: 'Enumerable[T]', condition: Any = MISSING) -> List[T]:
        """elements not satisfying the condition, in order"""
        test = as_predicate(condition)
        result: List[T] = []

        def visit(item):
            if not test(item): result.append(item)

        self.each(visit)
        return result

    def skip(self: 'Enumerable[T]', count: int) -> List[T]:
        """every element after the first `count`"""
        if count < 0: raise ArgumentError(f"attempt to skip negative size: {count}")
        result: List[T] = []
        seen = 0

        def visit(item):
            nonlocal seen
            if seen >= count:
                result.append(item)
            seen += 1

        self.each(visit)
        return result

    def skip_while(self: 'Enumerable[T]', predicate: Predicate[T]) -> List[T]:
        """drop the leading run of elements the predicate accepts, keep the rest"""
        result: List[T] = []
        skipping = True

        def visit(item):
            nonlocal skipping
            if skipping and predicate(item):
                return
            skipping = False
            result.append(item)

        self.each(visit)
        return result

    def take_while(self: 'Enumerable[T]', predicate: Predicate[T]) -> List[T]:
        """leading run of elements the predicate accepts; stops at the first rejection"""
        result: List[T] = []

        def visit(item):
            if not predicate(item): return STOP
            result.append(item)

        self._each_until(visit)
        return result

    # --- materialization ---

    def join(self: 'Enumerable[T]', separator: str = "", selector: Optional[Selector[T, Any]] = None) -> str:
        """concatenate str() of each element (or of selector(element))"""
        parts: List[str] = []
        self.each(lambda item: parts.append(str(selector(item) if selector else item)))
        return separator.join(parts)

    def to_a(self: 'Enumerable[T]', selector: Optional[Selector[T, U]] = None) -> List[Any]:
        """all elements (or selector results) as a new list"""
        if selector is not None:
            return self.map(selector)
        result: List[T] = []
        self.each(result.append)
        return result

    def to_h(self: 'Enumerable[T]', selector: Optional[Callable[[T], Tuple[K, V]]] = None) -> Dict[K, V]:
        """build a dict from (key, value) elements, or from selector(element) pairs"""
        result: Dict[K, V] = {}

        def visit(item):
            key, value = selector(item) if selector else item
            result[key] = value

        self.each(visit)
        return result

    def to_set(self: 'Enumerable[T]') -> Set[T]:
        result: Set[T] = set()
        self.each(result.add)
        return result
