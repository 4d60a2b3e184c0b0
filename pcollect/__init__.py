r"""
                     _ _           _
     _ __   ___ ___ | | | ___  ___| |_
    | '_ \ / __/ _ \| | |/ _ \/ __| __|
    | |_) | (_| (_) | | |  __/ (__| |_
    | .__/ \___\___/|_|_|\___|\___|\__|
    |_|
"""

# expose the main classes
from .collection import Collection, CollectionBuilder
from .numeric import NumericCollection
from .stream import CollectionStream

# expose the factory functions
from .factories import (
    make,
    from_iterable,
    from_numeric,
    range_inclusive,
    P
)

# expose join formatting and errors
from .joining import JoinMethod, COMMA_SEPARATED, LIST_JOIN
from .errors import CollectionError, NoItemError, IndexOutOfRangeError
from .log import logger, set_logger

# define what `import *` does
__all__ = [
    "Collection",
    "CollectionBuilder",
    "NumericCollection",
    "CollectionStream",
    "make",
    "from_iterable",
    "from_numeric",
    "range_inclusive",
    "P",
    "JoinMethod",
    "COMMA_SEPARATED",
    "LIST_JOIN",
    "CollectionError",
    "NoItemError",
    "IndexOutOfRangeError",
    "logger",
    "set_logger"
]
