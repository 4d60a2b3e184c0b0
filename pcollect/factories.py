import typing
from .types import *

if typing.TYPE_CHECKING:
    from .collection import Collection
    from .numeric import NumericCollection


def make(default: Optional[T] = None) -> 'Collection[T]':
    """create an empty collection"""
    from .collection import Collection
    return Collection(lambda: (), default=default)


def from_iterable(data: Iterable[T], default: Optional[T] = None) -> 'Collection[T]':
    """create collection from iterable. the data is copied straight away"""
    from .collection import Collection
    items = tuple(data)
    return Collection(lambda: items, default=default)


def from_numeric(data: Iterable[N], dtype: Any = None) -> 'NumericCollection[N]':
    """create numeric collection from iterable, optionally pinning the numpy dtype"""
    from .numeric import NumericCollection
    items = tuple(data)
    return NumericCollection(lambda: items, dtype=dtype)


def range_inclusive(first: int, last: int) -> 'NumericCollection[int]':
    """create numeric collection counting from first to last, both included"""
    from .numeric import NumericCollection
    return NumericCollection.range_inclusive(first, last)


# --- aliases ---
P = from_iterable
