"""
Sorted Set Difference

Splits two sorted, duplicate-free sequences into the elements unique to
each side and their intersection in a single merge pass.
"""

from dataclasses import dataclass, field
from typing import Generic, List, Sequence, TypeVar

from quadtile.core.exceptions import PreconditionViolatedError

T = TypeVar("T")


@dataclass
class SetSplit(Generic[T]):
    """
    Result of split_sets()

    Attributes:
        only_a: Elements of A not in B (ascending)
        only_b: Elements of B not in A (ascending)
        both: Elements present in A and B (ascending)
    """

    only_a: List[T] = field(default_factory=list)
    only_b: List[T] = field(default_factory=list)
    both: List[T] = field(default_factory=list)


def split_sets(
    sorted_a: Sequence[T],
    sorted_b: Sequence[T],
    check_sorted: bool = False,
) -> SetSplit[T]:
    """
    Three-way split of two sorted sequences in O(len(a) + len(b))

    Both inputs must be sorted ascending under the same order and contain
    no duplicates. Sortedness is not verified unless `check_sorted` is set;
    unsorted input then gives a wrong (but well-formed) result.

    Args:
        sorted_a: First sorted sequence
        sorted_b: Second sorted sequence
        check_sorted: Verify the precondition first

    Returns:
        SetSplit with only_a, only_b and both

    Raises:
        PreconditionViolatedError: If check_sorted is set and an input is
            not strictly ascending

    Examples:
        >>> split = split_sets([1, 2, 3], [2, 3, 4])
        >>> split.only_a, split.only_b, split.both
        ([1], [4], [2, 3])
    """
    if check_sorted:
        _require_strictly_ascending(sorted_a, "first")
        _require_strictly_ascending(sorted_b, "second")

    result: SetSplit[T] = SetSplit()
    i = j = 0
    len_a = len(sorted_a)
    len_b = len(sorted_b)

    while i < len_a and j < len_b:
        a = sorted_a[i]
        b = sorted_b[j]
        if a < b:
            result.only_a.append(a)
            i += 1
        elif b < a:
            result.only_b.append(b)
            j += 1
        else:
            result.both.append(a)
            i += 1
            j += 1

    result.only_a.extend(sorted_a[i:])
    result.only_b.extend(sorted_b[j:])
    return result


def _require_strictly_ascending(seq: Sequence, name: str) -> None:
    for k in range(1, len(seq)):
        if not seq[k - 1] < seq[k]:
            raise PreconditionViolatedError(
                f"{name} sequence is not sorted and duplicate-free at index {k}: "
                f"{seq[k - 1]!r} followed by {seq[k]!r}"
            )
