from __future__ import annotations

from functools import cmp_to_key
from typing import Callable, Sequence, Union

from .model import OrderingKind, SupportsOrdering, T

OrderingStrategy = Callable[[Sequence[T]], tuple[T, ...]]


def compare_ascending(one: SupportsOrdering, other: SupportsOrdering) -> int:
    # only `<` is required of elements; equal values compare as 0
    if one < other:
        return -1
    if other < one:
        return 1
    return 0


def compare_descending(one: SupportsOrdering, other: SupportsOrdering) -> int:
    return compare_ascending(other, one)


_ascending_key = cmp_to_key(compare_ascending)
_descending_key = cmp_to_key(compare_descending)


def insertion_order(elements: Sequence[T]) -> tuple[T, ...]:
    return tuple(elements)


def reverse_order(elements: Sequence[T]) -> tuple[T, ...]:
    return tuple(reversed(elements))


def ascending_order(elements: Sequence[T]) -> tuple[T, ...]:
    return tuple(sorted(elements, key=_ascending_key))


def descending_order(elements: Sequence[T]) -> tuple[T, ...]:
    return tuple(sorted(elements, key=_descending_key))


def side_cross_order(elements: Sequence[T]) -> tuple[T, ...]:
    """Lowest, highest, second lowest, second highest, ...

    For an odd number of elements the sorted middle element comes last.
    """
    temp = ascending_order(elements)
    out: list[T] = []
    low, high = 0, len(temp) - 1
    while low <= high:
        out.append(temp[low])
        low += 1
        if low <= high:
            out.append(temp[high])
            high -= 1
    return tuple(out)


def middle_out_order(elements: Sequence[T]) -> tuple[T, ...]:
    """Start at the insertion-order middle and alternate one step left, one step right.

    For an even count the left of the two middle elements is the start.
    """
    n = len(elements)
    if n == 0:
        return ()
    middle = (n - 1) // 2
    out = [elements[middle]]
    left, right = middle, middle + 1
    while left > 0 or right < n:
        if left > 0:
            left -= 1
            out.append(elements[left])
        if right < n:
            out.append(elements[right])
            right += 1
    return tuple(out)


ORDERINGS: dict[OrderingKind, OrderingStrategy] = {
    OrderingKind.INSERTION: insertion_order,
    OrderingKind.REVERSE: reverse_order,
    OrderingKind.ASCENDING: ascending_order,
    OrderingKind.DESCENDING: descending_order,
    OrderingKind.SIDE_CROSS: side_cross_order,
    OrderingKind.MIDDLE_OUT: middle_out_order,
}


def order_elements(kind: Union[OrderingKind, str], elements: Sequence[T]) -> tuple[T, ...]:
    return ORDERINGS[OrderingKind(kind)](elements)
