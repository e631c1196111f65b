from enum import Enum
from typing import (
    TypeVar, Generic, Callable, Iterator, Iterable, Any, Optional, Union,
    Dict, List, Tuple, Set, Type, Protocol, MutableMapping, runtime_checkable
)

T = TypeVar('T')
U = TypeVar('U')
K = TypeVar('K')
V = TypeVar('V')

Predicate = Callable[[T], bool]
Selector = Callable[[T], U]
KeySelector = Callable[[T], K]
Visitor = Callable[[T], Any]
Accumulator = Callable[[U, T], U]


class _Marker:
    """a named singleton used where None is a legitimate value."""

    def __init__(self, name: str):
        self._name = name

    def __repr__(self) -> str:
        return self._name

    def __bool__(self) -> bool:
        return False


# argument was not supplied
MISSING: Any = _Marker('MISSING')
# returned by a visitor to end a traversal early
STOP: Any = _Marker('STOP')


class Chunk(Enum):
    """control values a chunks() classifier may return instead of a key"""
    DROP = 'drop'    # leave the element out of every chunk
    ALONE = 'alone'  # put the element in a chunk of its own

    def __repr__(self) -> str:
        return f"Chunk.{self.name}"


class Key(Generic[K]):
    """
    wraps a classifier result so it is always read as a key, never as a Chunk
    control value. compares equal to the bare value, so Key(1) and 1 are the
    same chunk key.
    """

    __slots__ = ('value',)

    def __init__(self, value: K):
        self.value = value

    def __eq__(self, other) -> bool:
        other_value = other.value if isinstance(other, Key) else other
        return self.value == other_value

    def __hash__(self) -> int:
        return hash(self.value)

    def __repr__(self) -> str:
        return f"Key({self.value!r})"


ChunkKey = Union[K, Key[K], Chunk]


# --- capability protocols ---

@runtime_checkable
class Traversable(Protocol[T]):
    """anything with the single traversal primitive"""

    def each(self, visit: Callable[[T], Any]) -> Any: ...


class SupportsOrdering(Protocol):
    def __lt__(self, other: Any) -> bool: ...
    def __gt__(self, other: Any) -> bool: ...


class SupportsAdd(Protocol):
    def __add__(self, other: Any) -> Any: ...


class SupportsMul(Protocol):
    def __mul__(self, other: Any) -> Any: ...


@runtime_checkable
class HasAdditiveIdentity(Protocol):
    """types that know their own zero"""

    @classmethod
    def additive_identity(cls) -> Any: ...


@runtime_checkable
class HasMultiplicativeIdentity(Protocol):
    """types that know their own one"""

    @classmethod
    def multiplicative_identity(cls) -> Any: ...
