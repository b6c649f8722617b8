from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    NOT_FOUND = "not_found"
    OUT_OF_RANGE = "out_of_range"
    INVALID_ARGUMENT = "invalid_argument"


class CollectionError(Exception):
    """Base class for collection and cursor failures."""

    kind: ErrorKind


class ElementNotFoundError(CollectionError, ValueError):
    kind = ErrorKind.NOT_FOUND

    def __init__(self, value: object):
        super().__init__(f"element not found in collection: {value!r}")
        self.value = value


class CursorOutOfRangeError(CollectionError, IndexError):
    kind = ErrorKind.OUT_OF_RANGE

    def __init__(self, position: int, length: int):
        super().__init__(f"cannot dereference cursor at position {position} (snapshot length {length})")
        self.position = position
        self.length = length


class CursorMismatchError(CollectionError, ValueError):
    kind = ErrorKind.INVALID_ARGUMENT

    def __init__(self) -> None:
        super().__init__("cannot compare cursors from different collections")
