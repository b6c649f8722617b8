from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Iterator

from .errors import CursorMismatchError, CursorOutOfRangeError
from .model import OrderingKind, T


@dataclass(slots=True, eq=False)
class Cursor(Generic[T]):
    """Position over a private snapshot taken from a collection.

    ``owner`` is the producing collection's identity token. It is only used to
    reject ``!=`` between cursors of different collections.
    """

    owner: object
    snapshot: tuple[T, ...]
    kind: OrderingKind
    position: int = 0

    @property
    def exhausted(self) -> bool:
        return self.position >= len(self.snapshot)

    def dereference(self) -> T:
        if self.position >= len(self.snapshot):
            raise CursorOutOfRangeError(self.position, len(self.snapshot))
        return self.snapshot[self.position]

    def advance(self) -> Cursor[T]:
        # no upper bound here, dereference does the checking
        self.position += 1
        return self

    def post_advance(self) -> Cursor[T]:
        before = self.copy()
        self.position += 1
        return before

    def copy(self) -> Cursor[T]:
        return Cursor(self.owner, self.snapshot, self.kind, self.position)

    __copy__ = copy

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Cursor):
            return NotImplemented
        return self.position == other.position

    def __ne__(self, other: object) -> bool:
        if not isinstance(other, Cursor):
            return NotImplemented
        if self.owner is not other.owner:
            raise CursorMismatchError()
        return self.position != other.position

    # mutable and compared by position
    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"<Cursor {self.kind.value} at {self.position}/{len(self.snapshot)}>"


@dataclass(frozen=True, slots=True)
class CursorRange(Generic[T]):
    begin: Cursor[T]
    end: Cursor[T]

    def __iter__(self) -> Iterator[T]:
        it = self.begin.copy()
        while it != self.end:
            yield it.dereference()
            it.advance()

    def __len__(self) -> int:
        return len(self.begin.snapshot)
