from typing import (
    TypeVar, Generic, Callable, Iterator, Iterable, Any, Optional, Union,
    Dict, List, Tuple, Set, Type, Sequence
)

import numpy as np

T = TypeVar('T')
U = TypeVar('U')
N = TypeVar('N', int, float)

Predicate = Callable[[int, T], bool]
Mapper = Callable[[int, T], T]
Visitor = Callable[[int, T], Any]
DataFunc = Callable[[], Iterable[T]]

# signed integer and floating point kinds a numeric collection may hold
NUMERIC_DTYPES: Tuple[np.dtype, ...] = tuple(np.dtype(name) for name in (
    'int8', 'int16', 'int32', 'int64', 'float32', 'float64'
))
