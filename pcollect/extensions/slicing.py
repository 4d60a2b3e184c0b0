from __future__ import annotations
import typing
from itertools import batched
from ..types import *

if typing.TYPE_CHECKING:
    from ..collection import Collection


def _clamp(index: int, length: int) -> int:
    return max(0, min(index, length))


class _SliceOperations(Generic[T]):
    # every sub-collection here is a copy; collections never share mutable storage

    def before(self: 'Collection[T]', index: int) -> 'Collection[T]':
        """items at positions [0, index)"""
        def before_data():
            data = self._get_data()
            return data[:_clamp(index, len(data))]
        return self._derive(before_data)

    def after(self: 'Collection[T]', index: int) -> 'Collection[T]':
        """items at positions [index, count)"""
        def after_data():
            data = self._get_data()
            return data[_clamp(index, len(data)):]
        return self._derive(after_data)

    def split(self: 'Collection[T]', index: int) -> Tuple['Collection[T]', 'Collection[T]']:
        return self.before(index), self.after(index)

    def first_x(self: 'Collection[T]', count: int) -> 'Collection[T]':
        """the first `count` items, or this collection when it is not longer than that"""
        if self.count() <= count:
            return self
        return self.before(count)

    def chunk(self: 'Collection[T]', size: int) -> 'Collection[Collection[T]]':
        """split into consecutive groups of `size` items. the last group may be shorter"""
        from ..collection import Collection
        if size <= 0:
            raise ValueError("chunk size must be positive")
        def chunk_data():
            # bind each batch explicitly, the lambdas are evaluated later
            return [self._derive(lambda batch=batch: batch) for batch in batched(self._get_data(), size)]
        return Collection(chunk_data)
