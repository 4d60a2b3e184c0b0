from __future__ import annotations
import typing
from itertools import chain
from ..types import *

if typing.TYPE_CHECKING:
    from ..collection import Collection


def _unique_by_equality(data: Iterable[T]) -> List[T]:
    """order-preserving dedupe that also copes with unhashable items"""
    try:
        # dicts are ordered, so dict.fromkeys keeps the first occurrence of each item
        return list(dict.fromkeys(data))
    except TypeError:
        result = []
        for item in data:
            if item not in result:
                result.append(item)
        return result


class _CoreOperations(Generic[T]):
    def filter(self: 'Collection[T]', predicate: Predicate[T]) -> 'Collection[T]':
        """keep the items for which predicate(index, value) holds"""
        def filter_data():
            return [v for i, v in enumerate(self._get_data()) if predicate(i, v)]
        return self._derive(filter_data)

    def map(self: 'Collection[T]', fn: Mapper[T]) -> 'Collection[T]':
        """apply fn(index, value) to every item"""
        def map_data():
            return [fn(i, v) for i, v in enumerate(self._get_data())]
        return self._derive(map_data)

    def unique(self: 'Collection[T]') -> 'Collection[T]':
        """distinct items, in order of first appearance"""
        return self._derive(lambda: _unique_by_equality(self._get_data()))

    def diff(self: 'Collection[T]', other: Iterable[T]) -> 'Collection[T]':
        """items of this collection that are equal to no item of other"""
        def diff_data():
            others = list(other)
            try:
                lookup = set(others)
            except TypeError:
                lookup = others
            return [x for x in self._get_data() if x not in lookup]
        return self._derive(diff_data)

    def reverse(self: 'Collection[T]') -> 'Collection[T]':
        """inverts the order of the items"""
        return self._derive(lambda: reversed(self._get_data()))

    def append(self: 'Collection[T]', *values: T) -> 'Collection[T]':
        """a new collection with values added at the end, in argument order"""
        return self._derive(lambda: chain(self._get_data(), values))

    def prepend(self: 'Collection[T]', *values: T) -> 'Collection[T]':
        """a new collection with values added at the start, in argument order"""
        return self._derive(lambda: chain(values, self._get_data()))

    def concat(self: 'Collection[T]', other: Iterable[T]) -> 'Collection[T]':
        """a new collection with every item of other added at the end"""
        return self.append(*other)
