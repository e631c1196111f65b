from decimal import Decimal
from fractions import Fraction
from typing import Any, List, Tuple

import numpy as np

from .errors import IdentityError


# calling the base type with no arguments gives its zero / empty value
_ADDITIVE_BASES: List[type] = [bool, int, float, complex, Decimal, Fraction, str, bytes, list, tuple]
_MULTIPLICATIVE_BASES: List[type] = [bool, int, float, complex, Decimal, Fraction]


def _numpy_identity(kind: type, value: int) -> Tuple[bool, Any]:
    if issubclass(kind, np.number):
        return True, kind(value)
    if issubclass(kind, np.bool_):
        # numpy bools promote to int under + and *
        return True, np.int_(value)
    return False, None


def additive_identity(kind: type) -> Any:
    """zero of kind: the type's own additive_identity() hook, else a known numpy/builtin zero"""
    hook = getattr(kind, 'additive_identity', None)
    if callable(hook):
        return hook()
    # before the builtins: np.float64 subclasses float
    found, zero = _numpy_identity(kind, 0)
    if found: return zero
    for base in _ADDITIVE_BASES:
        if issubclass(kind, base):
            # bool has no "false" sum; its sum is an int
            return 0 if base is bool else base()
    raise IdentityError(
        f"cannot infer additive identity of '{kind.__name__}'; pass initial= with a value of the intended result type")


def multiplicative_identity(kind: type) -> Any:
    """one of kind: the type's own multiplicative_identity() hook, else a known numpy/builtin one"""
    hook = getattr(kind, 'multiplicative_identity', None)
    if callable(hook):
        return hook()
    found, one = _numpy_identity(kind, 1)
    if found: return one
    for base in _MULTIPLICATIVE_BASES:
        if issubclass(kind, base):
            return 1 if base is bool else base(1)
    raise IdentityError(
        f"cannot infer multiplicative identity of '{kind.__name__}'; pass initial= with a value of the intended result type")
