from __future__ import annotations
import typing
from collections import defaultdict
from ..types import *
from ..traversal import as_predicate

if typing.TYPE_CHECKING:
    from ..enumerable import Enumerable


class _ChunkAccumulator(Generic[T, K]):
    """holds the open chunk: its key and the elements collected so far"""

    def __init__(self):
        self._key: Any = None
        self._items: List[T] = []
        self._initialized = False

    def _open(self, key: Any, item: T) -> None:
        self._key = key
        self._items = [item]
        self._initialized = True

    def _same_as(self, key: Any) -> bool:
        if not self._initialized: return False
        if isinstance(key, Chunk) or isinstance(self._key, Chunk): return False
        return self._key == key

    def fetch(self) -> Optional[Tuple[Any, List[T]]]:
        """close the open chunk and hand it out, if there is one"""
        if not self._initialized: return None
        self._initialized = False
        return self._key, self._items

    def add(self, key: Any, item: T, emit: Callable[[Any, List[T]], Any]) -> None:
        if self._same_as(key):
            self._items.append(item)
            return
        closed = self.fetch()
        if closed is not None:
            emit(*closed)
        if key is not Chunk.DROP:
            self._open(key, item)


def _unwrap(key: Any) -> Any:
    return key.value if isinstance(key, Key) else key


class _GroupingOperations(Generic[T]):
    def chunks(self: 'Enumerable[T]', classifier: Callable[[T], ChunkKey]) -> List[Tuple[Any, List[T]]]:
        """
        group consecutive elements whose classifier keys are equal, as (key, elements).

        the classifier may return Chunk.DROP to leave an element out, or
        Chunk.ALONE to give it a chunk of its own (emitted with Chunk.ALONE as key).
        wrap a key in Key(...) when the key itself could be a Chunk member.
        """
        result: List[Tuple[Any, List[T]]] = []
        self._chunks_internal(classifier, lambda key, items: result.append((key, items)))
        return result

    def _chunks_internal(self: 'Enumerable[T]', classifier: Callable[[T], ChunkKey],
                         emit: Callable[[Any, List[T]], Any]) -> None:
        accumulator: _ChunkAccumulator = _ChunkAccumulator()
        # Key wrappers compare by value, so unwrap only on the way out
        deliver = lambda key, items: emit(_unwrap(key), items)
        self.each(lambda item: accumulator.add(classifier(item), item, deliver))
        closed = accumulator.fetch()
        if closed is not None:
            deliver(*closed)

    def group_by(self: 'Enumerable[T]', key_selector: KeySelector[T, K]) -> Dict[K, List[T]]:
        """group elements by key; each group keeps traversal order"""
        groups = defaultdict(list)
        self.each(lambda item: groups[key_selector(item)].append(item))
        return dict(groups)

    def partition(self: 'Enumerable[T]', condition: Any = MISSING) -> Tuple[List[T], List[T]]:
        """(matching, non-matching) in a single pass; condition as in select()"""
        test = as_predicate(condition)
        true_items, false_items = [], []
        self.each(lambda item: (true_items if test(item) else false_items).append(item))
        return true_items, false_items

    def tally_by(self: 'Enumerable[T]', key_selector: KeySelector[T, K],
                 into: Optional[MutableMapping[K, int]] = None) -> MutableMapping[K, int]:
        """
        count elements per key. pass `into` to keep counting into an existing
        mapping (e.g. across several sources); it is updated and returned.
        """
        counts: MutableMapping[K, int] = {} if into is None else into

        def visit(item):
            key = key_selector(item)
            counts[key] = counts.get(key, 0) + 1

        self.each(visit)
        return counts

    def tally(self: 'Enumerable[T]', into: Optional[MutableMapping[T, int]] = None) -> MutableMapping[T, int]:
        """count occurrences of each element"""
        return self.tally_by(lambda item: item, into)
