from __future__ import annotations
import typing
import numpy as np
from ..types import *
from ..errors import NoItemError
from ..log import logger
from ..stream import CollectionStream

if typing.TYPE_CHECKING:
    import random as _random
    from ..collection import Collection

RandomSource = Union['_random.Random', np.random.Generator]
CancelSignal = Union[Callable[[], bool], Any]


def _is_cancelled(cancel: CancelSignal) -> bool:
    """accepts a threading.Event (or anything with is_set) or a zero-arg callable"""
    if hasattr(cancel, 'is_set'):
        return cancel.is_set()
    if callable(cancel):
        return bool(cancel())
    raise TypeError(f"unsupported cancel signal: {type(cancel).__name__}")


def _random_index(source: RandomSource, count: int) -> int:
    if isinstance(source, np.random.Generator):
        return int(source.integers(0, count))
    return source.randrange(count)


class _IterationOperations(Generic[T]):
    def each(self: 'Collection[T]', fn: Visitor[T]) -> 'Collection[T]':
        """
        calls fn(index, value) for every item, in order.
        this is an EAGER operation; returns the collection to allow chaining.
        """
        for i, v in enumerate(self._get_data()):
            fn(i, v)
        return self

    def each_cancelable(self: 'Collection[T]', cancel: CancelSignal, fn: Visitor[T]) -> int:
        """
        like each(), but checks the cancel signal before every item and stops
        as soon as it is set. returns the number of items visited.
        """
        visited = 0
        for i, v in enumerate(self._get_data()):
            if _is_cancelled(cancel):
                logger().debug("iteration cancelled after %d of %d items", visited, self.count())
                break
            fn(i, v)
            visited += 1
        return visited

    def stream(self: 'Collection[T]') -> CollectionStream[T]:
        """a single-pass, closable iterator over the items"""
        return CollectionStream(self._get_data)

    def random(self: 'Collection[T]', source: RandomSource, count: int) -> 'Collection[T]':
        """
        picks `count` items uniformly with replacement, so count may exceed the
        collection's size. the source is a seeded random.Random or numpy Generator,
        consumed immediately, so the same seed always gives the same picks.
        """
        if count < 0:
            raise ValueError("sample count must not be negative")
        data = self._get_data()
        if not data:
            raise NoItemError("cannot pick random items from an empty collection")
        picks = [data[_random_index(source, len(data))] for _ in range(count)]
        return self._derive(lambda: picks)
