"""Three-way comparators for the ordered containers."""
from typing import Any, Sequence


def cmp_less(x: Any, y: Any) -> int:
    """Compare two values in ascending order; returns -1, 0 or 1."""
    if x == y:
        return 0
    if x > y:
        return 1
    return -1


def cmp_greater(x: Any, y: Any) -> int:
    """Compare two values in descending order."""
    return cmp_less(y, x)


def cmp_slice_less(x: Sequence[Any], y: Sequence[Any]) -> int:
    """
    Compare two sequences element by element in ascending order.

    A sequence that is a proper prefix of the other compares less.
    :param x: The first sequence.
    :param y: The second sequence.
    :return: -1, 0 or 1.
    """
    for x_item, y_item in zip(x, y):
        if x_item < y_item:
            return -1
        if x_item > y_item:
            return 1

    # All shared positions are equal, so the shorter one goes first.
    return cmp_less(len(x), len(y))


def cmp_slice_greater(x: Sequence[Any], y: Sequence[Any]) -> int:
    """Compare two sequences element by element in descending order."""
    return cmp_slice_less(y, x)
