from .api import collect, traverse, traverse_all
from .collection import Collection
from .cursor import Cursor, CursorRange
from .errors import (
    CollectionError,
    CursorMismatchError,
    CursorOutOfRangeError,
    ElementNotFoundError,
    ErrorKind,
)
from .model import OrderingKind, SnapshotHook, SnapshotState
from .orderings import ORDERINGS, order_elements

__all__ = [
    "collect",
    "traverse",
    "traverse_all",
    "Collection",
    "Cursor",
    "CursorRange",
    "CollectionError",
    "CursorMismatchError",
    "CursorOutOfRangeError",
    "ElementNotFoundError",
    "ErrorKind",
    "OrderingKind",
    "SnapshotHook",
    "SnapshotState",
    "ORDERINGS",
    "order_elements",
]
