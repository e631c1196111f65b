import re
from typing import Any, Callable

from .errors import ComparisonError
from .types import MISSING, STOP, Traversable, Visitor


class _Halt(BaseException):
    """
    raised out of a source's each() to end one traversal early. not an
    Exception, so a source that guards its own work with `except Exception`
    lets it through, like GeneratorExit.
    """


def each_until(source: Traversable, visit: Visitor) -> bool:
    """
    runs source.each(visit), stopping as soon as visit returns STOP.
    returns True when the traversal was cut short.

    each call raises its own _Halt instance and only catches that instance, so
    a visitor that itself runs a short-circuiting operation on another source
    cannot end the outer traversal by accident.
    """
    halt = _Halt()

    def guarded(item):
        if visit(item) is STOP:
            raise halt

    try:
        source.each(guarded)
    except _Halt as stopped:
        if stopped is not halt:
            raise
        return True
    return False


# --- conditions ---

def matches(pattern: Any, value: Any) -> bool:
    """case-equality: type -> isinstance, regex -> search, range -> membership, else ==."""
    if isinstance(pattern, type) or (isinstance(pattern, tuple) and pattern and
                                     all(isinstance(p, type) for p in pattern)):
        return isinstance(value, pattern)
    if isinstance(pattern, re.Pattern):
        if not isinstance(value, (str, bytes)):
            return False
        try:
            return pattern.search(value) is not None
        except TypeError:
            # str pattern against bytes or the reverse
            return False
    if isinstance(pattern, range):
        try:
            return value in pattern
        except TypeError:
            return False
    return pattern == value


def as_predicate(condition: Any = MISSING) -> Callable[[Any], bool]:
    """turn a query condition (nothing, type, callable or pattern) into a predicate"""
    if condition is MISSING:
        return bool
    if isinstance(condition, type) or isinstance(condition, (tuple, re.Pattern, range)):
        return lambda item: matches(condition, item)
    if callable(condition):
        return lambda item: bool(condition(item))
    return lambda item: matches(condition, item)


def as_equality(condition: Any) -> Callable[[Any], bool]:
    """callable -> predicate, anything else -> equality with that value"""
    if callable(condition) and not isinstance(condition, type):
        return lambda item: bool(condition(item))
    return lambda item: item == condition


# --- ordering ---

def compare_or_raise(value: Any, memo: Any) -> int:
    """three-way comparison that fails loudly when the values are unordered"""
    try:
        if value < memo: return -1
        if value > memo: return 1
        if value == memo: return 0
    except TypeError as e:
        raise ComparisonError(f"comparison of {value!r} and {memo!r} failed") from e
    # neither less, greater nor equal (e.g. nan)
    raise ComparisonError(f"comparison of {value!r} and {memo!r} failed")
