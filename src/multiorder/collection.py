from __future__ import annotations

import logging
from typing import Generic, Iterable, Iterator, Optional, Union

from .cursor import Cursor, CursorRange
from .errors import ElementNotFoundError
from .model import OrderingKind, SnapshotHook, SnapshotState, T
from .orderings import order_elements

logger = logging.getLogger(__name__)

RENDER_SEPARATOR = " "

Kind = Union[OrderingKind, str]


class Collection(Generic[T]):
    """Insertion-ordered collection with duplicates, traversable in six orderings.

    Every cursor factory takes a fresh snapshot of the current elements, so a
    cursor never observes mutations made after it was created.
    """

    def __init__(self, items: Iterable[T] = (), *, on_snapshot: Optional[SnapshotHook] = None):
        self._elements: list[T] = list(items)
        self._token = object()
        self._on_snapshot = on_snapshot

    def append(self, value: T) -> None:
        self._elements.append(value)

    def remove(self, value: T) -> None:
        """Remove every element equal to ``value``.

        Raises ElementNotFoundError and leaves the collection untouched when
        nothing matches.
        """
        kept = [e for e in self._elements if not (e == value)]
        removed = len(self._elements) - len(kept)
        if removed == 0:
            raise ElementNotFoundError(value)
        self._elements = kept
        logger.debug("removed %d element(s) equal to %r", removed, value)

    def size(self) -> int:
        return len(self._elements)

    def render(self) -> str:
        return "".join(f"{e}{RENDER_SEPARATOR}" for e in self._elements)

    def _snapshot(self, kind: Kind, at_end: bool) -> tuple[OrderingKind, tuple[T, ...]]:
        kind = OrderingKind(kind)
        snapshot = order_elements(kind, self._elements)
        logger.debug("snapshot %s of %d element(s)", kind.value, len(snapshot))
        if self._on_snapshot is not None:
            self._on_snapshot(SnapshotState(kind=kind, size=len(self._elements), snapshot=snapshot, at_end=at_end))
        return kind, snapshot

    def begin(self, kind: Kind) -> Cursor[T]:
        kind, snapshot = self._snapshot(kind, at_end=False)
        return Cursor(self._token, snapshot, kind, 0)

    def end(self, kind: Kind) -> Cursor[T]:
        kind, snapshot = self._snapshot(kind, at_end=True)
        return Cursor(self._token, snapshot, kind, len(snapshot))

    def cursors(self, kind: Kind) -> CursorRange[T]:
        kind, snapshot = self._snapshot(kind, at_end=False)
        return CursorRange(
            begin=Cursor(self._token, snapshot, kind, 0),
            end=Cursor(self._token, snapshot, kind, len(snapshot)),
        )

    def begin_insertion(self) -> Cursor[T]:
        return self.begin(OrderingKind.INSERTION)

    def end_insertion(self) -> Cursor[T]:
        return self.end(OrderingKind.INSERTION)

    def begin_reverse(self) -> Cursor[T]:
        return self.begin(OrderingKind.REVERSE)

    def end_reverse(self) -> Cursor[T]:
        return self.end(OrderingKind.REVERSE)

    def begin_ascending(self) -> Cursor[T]:
        return self.begin(OrderingKind.ASCENDING)

    def end_ascending(self) -> Cursor[T]:
        return self.end(OrderingKind.ASCENDING)

    def begin_descending(self) -> Cursor[T]:
        return self.begin(OrderingKind.DESCENDING)

    def end_descending(self) -> Cursor[T]:
        return self.end(OrderingKind.DESCENDING)

    def begin_side_cross(self) -> Cursor[T]:
        return self.begin(OrderingKind.SIDE_CROSS)

    def end_side_cross(self) -> Cursor[T]:
        return self.end(OrderingKind.SIDE_CROSS)

    def begin_middle_out(self) -> Cursor[T]:
        return self.begin(OrderingKind.MIDDLE_OUT)

    def end_middle_out(self) -> Cursor[T]:
        return self.end(OrderingKind.MIDDLE_OUT)

    def __len__(self) -> int:
        return len(self._elements)

    def __iter__(self) -> Iterator[T]:
        return iter(list(self._elements))

    def __contains__(self, value: object) -> bool:
        return any(e == value for e in self._elements)

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"Collection({self._elements!r})"
