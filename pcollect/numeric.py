from __future__ import annotations

import numpy as np

from .types import *
from .collection import Collection
from .errors import NoItemError


def _is_integral(value: Any) -> bool:
    return isinstance(value, (int, np.integer))


def _check_numeric(value: Any) -> None:
    if isinstance(value, (bool, np.bool_)) or not isinstance(value, (int, float, np.integer, np.floating)):
        raise TypeError(f"numeric collection cannot hold {type(value).__name__} value {value!r}")


def _resolve_dtype(dtype: Any) -> Optional[np.dtype]:
    if dtype is None:
        return None
    resolved = np.dtype(dtype)
    if resolved not in NUMERIC_DTYPES:
        raise TypeError(f"unsupported numeric dtype: {resolved}")
    return resolved


class NumericCollection(Collection[N]):
    """
    a collection of signed integers or floats, backed by a numpy dtype
    (int8, int16, int32, int64, float32 or float64).

    when no dtype is given it is inferred on first use: int64 if every value
    is an integer, float64 otherwise. the default value is the dtype's zero.
    """

    def __init__(self, data_func: DataFunc[N], dtype: Any = None,
                 parent: Optional['NumericCollection'] = None):
        self._dtype = _resolve_dtype(dtype)
        # derived collections take the dtype of the collection they came from
        self._parent = parent
        self._array: Optional[np.ndarray] = None
        super().__init__(data_func)

    def _coerce(self, items: Iterable[N]) -> Tuple[N, ...]:
        values = list(items)
        for value in values:
            _check_numeric(value)
        if self._dtype is None and self._parent is not None:
            self._dtype = self._parent.dtype
        if self._dtype is None:
            self._dtype = np.dtype('int64') if all(_is_integral(v) for v in values) else np.dtype('float64')
        elif self._dtype.kind == 'i' and not all(_is_integral(v) for v in values):
            raise TypeError(f"{self._dtype} collection cannot hold floating point values")
        self._array = np.array(values, dtype=self._dtype)
        return tuple(self._native(x) for x in self._array)

    def _native(self, scalar: Any) -> N:
        """
        native python scalar for a numpy one. float32 goes through its shortest
        repr so the value prints and compares as it was stored, not widened.
        """
        if self._dtype == np.float32:
            return float(str(np.float32(scalar)))
        return scalar.item()

    def _derive(self, data_func: DataFunc[N]) -> 'NumericCollection[N]':
        return NumericCollection(data_func, dtype=self._dtype, parent=self)

    def _values(self) -> np.ndarray:
        self._get_data()
        return self._array

    @property
    def dtype(self) -> np.dtype:
        self._get_data()
        return self._dtype

    @property
    def default(self) -> N:
        return self.dtype.type(0).item()

    def __repr__(self) -> str:
        return f"NumericCollection({list(self._get_data())!r}, dtype={self.dtype})"

    @classmethod
    def range_inclusive(cls, first: int, last: int) -> 'NumericCollection[int]':
        """
        consecutive integers from first to last, both included.
        when first > last the range counts down, e.g. (5, 2) gives [5, 4, 3, 2]
        """
        step = 1 if first <= last else -1
        return cls(lambda: range(first, last + step, step), dtype='int64')

    # --- aggregates ---

    def sum(self) -> N:
        """total of all items, in the collection's dtype. zero when empty"""
        return self._native(np.sum(self._values(), dtype=self.dtype))

    def safe_min(self) -> N:
        if self.empty(): raise NoItemError("cannot find minimum of empty collection")
        return self._native(self._values().min())

    def min(self) -> N:
        """smallest item, or zero when empty"""
        try: return self.safe_min()
        except NoItemError: return self.default

    def safe_max(self) -> N:
        if self.empty(): raise NoItemError("cannot find maximum of empty collection")
        return self._native(self._values().max())

    def max(self) -> N:
        """largest item, or zero when empty"""
        try: return self.safe_max()
        except NoItemError: return self.default

    def average32(self) -> np.float32:
        """mean as a float32. nan when empty"""
        count = self.count()
        if count == 0: return np.float32('nan')
        return np.float32(np.sum(self._values(), dtype=self.dtype)) / np.float32(count)

    def average64(self) -> float:
        """mean as a float64. nan when empty"""
        count = self.count()
        if count == 0: return float('nan')
        return float(np.float64(np.sum(self._values(), dtype=self.dtype)) / count)

    def average(self) -> float:
        """alias of average64()"""
        return self.average64()

    def safe_average(self) -> float:
        if self.empty(): raise NoItemError("cannot calculate average of empty collection")
        return self.average64()
