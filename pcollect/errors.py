from typing import Optional


class CollectionError(Exception):
    """base class for every error raised by pcollect."""


class NoItemError(CollectionError, LookupError):
    """raised by the safe_* forms when the requested item does not exist."""

    def __init__(self, message: str = "item not found", index: Optional[int] = None):
        super().__init__(message)
        self.index = index


class IndexOutOfRangeError(CollectionError, IndexError):
    """raised when a bounded write targets an index outside the collection."""

    def __init__(self, index: int, count: int):
        super().__init__(f"index {index} out of range for collection of {count} items")
        self.index = index
        self.count = count
