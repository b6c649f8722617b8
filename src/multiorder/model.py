from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Protocol, TypeVar


class SupportsOrdering(Protocol):
    def __eq__(self, other: Any) -> bool: ...

    def __lt__(self, other: Any) -> bool: ...


T = TypeVar("T", bound=SupportsOrdering)


class OrderingKind(str, Enum):
    INSERTION = "insertion"
    REVERSE = "reverse"
    ASCENDING = "ascending"
    DESCENDING = "descending"
    SIDE_CROSS = "side_cross"
    MIDDLE_OUT = "middle_out"


@dataclass(frozen=True, slots=True)
class SnapshotState:
    kind: OrderingKind
    size: int
    snapshot: tuple[Any, ...]
    at_end: bool


SnapshotHook = Callable[[SnapshotState], None]
