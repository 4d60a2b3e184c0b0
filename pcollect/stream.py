from __future__ import annotations

from .types import *
from .log import logger


class CollectionStream(Generic[T]):
    """
    consumer-driven, single-pass iterator over a collection's items.

    items are produced only when pulled. close() (or cancel()) stops the stream
    at once and discards whatever was not consumed; a closed or exhausted stream
    yields nothing further. usable as a context manager, closing on exit.
    """

    def __init__(self, source: Callable[[], Sequence[T]]):
        self._source = source
        self._generator = self._produce()
        self._consumed = 0
        self._closed = False

    def _produce(self) -> Iterator[T]:
        for item in self._source():
            yield item

    def __iter__(self) -> Iterator[T]:
        return self

    def __next__(self) -> T:
        if self._closed:
            raise StopIteration
        try:
            item = next(self._generator)
        except StopIteration:
            self._closed = True
            raise
        self._consumed += 1
        return item

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        self._generator.close()
        logger().debug("stream closed after %d items", self._consumed)

    cancel = close

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def consumed(self) -> int:
        return self._consumed

    @property
    def remaining(self) -> int:
        """items still available to pull. zero once closed"""
        if self._closed:
            return 0
        return len(self._source()) - self._consumed

    def __enter__(self) -> 'CollectionStream[T]':
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()
