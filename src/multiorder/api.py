from __future__ import annotations

from typing import Iterable, Union

from .collection import Collection
from .model import OrderingKind, T


def traverse(collection: Collection[T], kind: Union[OrderingKind, str]) -> list[T]:
    it = collection.begin(kind)
    end = collection.end(kind)
    out: list[T] = []
    while it != end:
        out.append(it.dereference())
        it.advance()
    return out


def traverse_all(collection: Collection[T]) -> dict[OrderingKind, list[T]]:
    return {kind: traverse(collection, kind) for kind in OrderingKind}


def collect(items: Iterable[T], kind: Union[OrderingKind, str]) -> list[T]:
    # one-shot helper for callers that do not need to keep the collection
    return traverse(Collection(items), kind)
