from __future__ import annotations

from .types import *
from .errors import IndexOutOfRangeError
from .log import logger

# --- operations ---
from .extensions.core import _CoreOperations
from .extensions.access import _AccessOperations
from .extensions.slicing import _SliceOperations
from .extensions.iteration import _IterationOperations

# --- accessors ---
from .extensions.terminal import TerminalAccessor


# --- base collection implementation ---

class _BaseCollection(Generic[T]):
    def __init__(self, data_func: DataFunc[T], default: Optional[T] = None):
        """init with a function that returns data when called"""
        self._data_func = data_func
        self._default = default
        self._cached_result: Optional[Tuple[T, ...]] = None
        self._is_cached = False

    def _get_data(self) -> Tuple[T, ...]:
        """get the contents, materializing and caching them on first use"""
        if not self._is_cached:
            self._cached_result = self._coerce(self._data_func())
            self._is_cached = True
        return self._cached_result

    def _coerce(self, items: Iterable[T]) -> Tuple[T, ...]:
        return tuple(items)

    def _derive(self, data_func: DataFunc[T]) -> 'Collection[T]':
        """build a collection of the same kind over new data"""
        return Collection(data_func, default=self._default)

    @property
    def default(self) -> Optional[T]:
        """value returned by the unsafe lookups when nothing is found"""
        return self._default

    def __iter__(self) -> Iterator[T]:
        return iter(self._get_data())

    def __len__(self) -> int:
        return len(self._get_data())

    def __bool__(self) -> bool:
        return len(self._get_data()) > 0

    def __contains__(self, item: Any) -> bool:
        return item in self._get_data()

    def __getitem__(self, index):
        if isinstance(index, slice):
            return self._derive(lambda: self._get_data()[index])
        data = self._get_data()
        if not 0 <= index < len(data):
            raise IndexError(f"index {index} out of range for collection of {len(data)} items")
        return data[index]

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, _BaseCollection):
            return NotImplemented
        return self._get_data() == other._get_data()

    def __hash__(self) -> int:
        return hash(self._get_data())

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self._get_data())!r})"


# --- main collection class ---

class Collection(
    _BaseCollection[T],
    _CoreOperations[T],
    _AccessOperations[T],
    _SliceOperations[T],
    _IterationOperations[T]
):
    """an immutable, chainable sequence container."""
    def __init__(self, data_func: DataFunc[T], default: Optional[T] = None):
        super().__init__(data_func, default)
        self.to = TerminalAccessor(self)

    def builder(self) -> 'CollectionBuilder[T]':
        """start a mutable builder seeded with this collection's contents"""
        return CollectionBuilder(self._get_data(), default=self.default,
                                 factory=lambda items: self._derive(lambda: items))


# --- builder for the mutating operations ---

class CollectionBuilder(Generic[T]):
    """
    mutable counterpart of Collection. append, concat, set and pop change the
    builder in place; build() snapshots the current contents into a collection.
    """

    def __init__(self, initial: Iterable[T] = (), default: Optional[T] = None,
                 factory: Optional[Callable[[Tuple[T, ...]], Collection[T]]] = None):
        self._items: List[T] = list(initial)
        self._default = default
        self._factory = factory or (lambda items: Collection(lambda: items, default=default))

    def all(self) -> Tuple[T, ...]:
        return tuple(self._items)

    def count(self) -> int:
        return len(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"CollectionBuilder({self._items!r})"

    def append(self, *values: T) -> 'CollectionBuilder[T]':
        """appends values in argument order"""
        self._items.extend(values)
        return self

    def concat(self, other: Iterable[T]) -> 'CollectionBuilder[T]':
        """appends every item of another collection or iterable"""
        return self.append(*other)

    def set(self, index: int, value: T) -> 'CollectionBuilder[T]':
        """
        overwrites the item at index. an index past the end grows the builder,
        filling the gap with the default value.
        """
        if index < 0:
            raise IndexOutOfRangeError(index, len(self._items))
        if index >= len(self._items):
            gap = index + 1 - len(self._items)
            logger().debug("growing builder from %d to %d items", len(self._items), index + 1)
            self._items.extend([self._default] * gap)
        self._items[index] = value
        return self

    def safe_set(self, index: int, value: T) -> 'CollectionBuilder[T]':
        """overwrites the item at index, raising instead of growing when out of range"""
        if not 0 <= index < len(self._items):
            raise IndexOutOfRangeError(index, len(self._items))
        self._items[index] = value
        return self

    def pop(self, count: int = 1) -> Collection[T]:
        """removes the last `count` items and returns them in their original order"""
        if count < 0:
            raise ValueError("pop count must not be negative")
        split_at = max(len(self._items) - count, 0)
        popped = tuple(self._items[split_at:])
        del self._items[split_at:]
        logger().debug("popped %d items, %d remain", len(popped), len(self._items))
        return self._factory(popped)

    def build(self) -> Collection[T]:
        return self._factory(tuple(self._items))
