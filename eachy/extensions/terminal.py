from __future__ import annotations
import typing
import numpy as np
import pandas as pd
from ..types import *

if typing.TYPE_CHECKING:
    from ..enumerable import Enumerable


class TerminalAccessor(Generic[T]):
    """conversions of a whole traversal into concrete containers, reached via `.to`"""

    def __init__(self, enumerable_instance: 'Enumerable[T]'):
        self._enumerable = enumerable_instance

    def list(self) -> List[T]:
        """convert to list"""
        return self._enumerable.to_a()

    def tuple(self) -> Tuple[T, ...]:
        """convert to tuple"""
        return tuple(self._enumerable.to_a())

    def set(self) -> Set[T]:
        """convert to set"""
        return self._enumerable.to_set()

    def dict(self, key_selector: KeySelector[T, K],
             value_selector: Optional[Selector[T, V]] = None) -> Dict[K, V]:
        """convert to dictionary; later keys overwrite earlier ones"""
        val_sel = value_selector if value_selector else lambda item: item
        return self._enumerable.to_h(lambda item: (key_selector(item), val_sel(item)))

    def array(self, dtype: Any = None) -> np.ndarray:
        """convert to numpy array"""
        return np.array(self._enumerable.to_a(), dtype=dtype)

    def series(self, name: Optional[str] = None) -> pd.Series:
        """convert to pandas series"""
        return pd.Series(self._enumerable.to_a(), name=name)

    def df(self) -> pd.DataFrame:
        """convert to pandas dataframe (elements as rows)"""
        return pd.DataFrame(self._enumerable.to_a())
