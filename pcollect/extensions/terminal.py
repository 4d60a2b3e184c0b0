from __future__ import annotations
import typing
import numpy as np
import pandas as pd
from ..types import *

if typing.TYPE_CHECKING:
    from ..collection import Collection


class TerminalAccessor(Generic[T]):
    def __init__(self, collection_instance: 'Collection[T]'):
        self._collection = collection_instance

    def list(self) -> List[T]:
        """convert to list"""
        return list(self._collection._get_data())

    def tuple(self) -> Tuple[T, ...]:
        """convert to tuple"""
        return self._collection._get_data()

    def set(self) -> Set[T]:
        """convert to set"""
        return set(self._collection._get_data())

    def array(self, dtype: Optional[Any] = None) -> np.ndarray:
        """convert to numpy array, in the collection's dtype when it has one"""
        dtype = dtype if dtype is not None else getattr(self._collection, 'dtype', None)
        return np.array(self._collection._get_data(), dtype=dtype)

    def pandas(self) -> pd.Series:
        """convert to pandas series"""
        return pd.Series(self.array() if hasattr(self._collection, 'dtype') else self.list())

    def df(self) -> pd.DataFrame:
        """convert to pandas dataframe"""
        return pd.DataFrame(self.list())
