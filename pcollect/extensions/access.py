from __future__ import annotations
import typing
from ..types import *
from ..errors import NoItemError
from ..joining import JoinMethod, COMMA_SEPARATED, join_values

if typing.TYPE_CHECKING:
    from ..collection import Collection


class _AccessOperations(Generic[T]):
    """
    lookups and queries that return a scalar.
    each unsafe lookup has a safe_* form: the unsafe form answers the
    collection's default value when nothing is found, the safe form raises
    NoItemError instead.
    """

    def all(self: 'Collection[T]') -> Tuple[T, ...]:
        """the full contents, in order"""
        return self._get_data()

    def slice(self: 'Collection[T]') -> Tuple[T, ...]:
        """alias of all()"""
        return self.all()

    def count(self: 'Collection[T]') -> int:
        return len(self._get_data())

    def count_where(self: 'Collection[T]', predicate: Predicate[T]) -> int:
        return sum(1 for i, v in enumerate(self._get_data()) if predicate(i, v))

    def empty(self: 'Collection[T]') -> bool:
        return len(self._get_data()) == 0

    def not_empty(self: 'Collection[T]') -> bool:
        return not self.empty()

    def safe_at(self: 'Collection[T]', index: int) -> T:
        data = self._get_data()
        if not 0 <= index < len(data):
            raise NoItemError(f"no item at index {index}", index=index)
        return data[index]

    def at(self: 'Collection[T]', index: int) -> Optional[T]:
        try:
            return self.safe_at(index)
        except NoItemError:
            return self.default

    def safe_first(self: 'Collection[T]') -> T:
        if self.empty(): raise NoItemError("collection is empty")
        return self._get_data()[0]

    def first(self: 'Collection[T]') -> Optional[T]:
        try: return self.safe_first()
        except NoItemError: return self.default

    def safe_last(self: 'Collection[T]') -> T:
        if self.empty(): raise NoItemError("collection is empty")
        return self._get_data()[-1]

    def last(self: 'Collection[T]') -> Optional[T]:
        try: return self.safe_last()
        except NoItemError: return self.default

    def safe_search(self: 'Collection[T]', predicate: Predicate[T]) -> int:
        """index of the first item matching predicate"""
        for i, v in enumerate(self._get_data()):
            if predicate(i, v):
                return i
        raise NoItemError("no item satisfies the condition", index=-1)

    def search(self: 'Collection[T]', predicate: Predicate[T]) -> int:
        """index of the first item matching predicate, or -1"""
        try: return self.safe_search(predicate)
        except NoItemError: return -1

    def safe_first_where(self: 'Collection[T]', predicate: Predicate[T]) -> T:
        return self._get_data()[self.safe_search(predicate)]

    def first_where(self: 'Collection[T]', predicate: Predicate[T]) -> Optional[T]:
        try: return self.safe_first_where(predicate)
        except NoItemError: return self.default

    def has(self: 'Collection[T]', predicate: Predicate[T]) -> bool:
        """true if any item matches. false on an empty collection"""
        return any(predicate(i, v) for i, v in enumerate(self._get_data()))

    def has_no(self: 'Collection[T]', predicate: Predicate[T]) -> bool:
        """true if no item matches. true on an empty collection"""
        return not self.has(predicate)

    def every(self: 'Collection[T]', predicate: Predicate[T]) -> bool:
        """true if all items match. vacuously true on an empty collection"""
        return all(predicate(i, v) for i, v in enumerate(self._get_data()))

    def join(self: 'Collection[T]', method: JoinMethod = COMMA_SEPARATED) -> str:
        """
        stringifies every item and glues them together with the method's separators.
        e.g. LIST_JOIN over ['a', 'b', 'c'] gives 'a, b and c'
        """
        return join_values(self._get_data(), method)
