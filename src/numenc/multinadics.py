"""
Ranking of multiset permutations.

The distinct arrangements of a multiset, e.g. `(0, 0, 1)`, are ranked in
lexicographic order: `(0, 0, 1)`, `(0, 1, 0)`, `(1, 0, 0)`.
When every value is distinct this is the factorial number system.
"""

import collections
from typing import Any, Counter, Iterator, Sequence, Tuple

from numenc import bigint, combinatorics
from numenc.errors import InvalidInput, OutOfRange


def count(xs: Sequence[Any]) -> int:
    """
    The number of distinct arrangements of `xs`.
    """
    return combinatorics.multinomial(xs)


def encode(arrangement: Sequence[Any]) -> int:
    """
    Ranks an arrangement among the distinct arrangements of its values.
    """
    try:
        remaining = collections.Counter(arrangement)
        sorted(remaining)
    except TypeError as err:
        raise InvalidInput(
            f"Values must be hashable and comparable. Got {tuple(arrangement)!r}"
        ) from err
    rank = 0
    arrangements = count(arrangement)
    for idx, value in enumerate(arrangement):
        size = len(arrangement) - idx
        # every arrangement of the suffix that starts with a smaller value comes first
        for smaller in sorted(other for other in remaining if other < value):
            rank = bigint.add(rank, _starting_with(arrangements, remaining, smaller, size))
        arrangements = _starting_with(arrangements, remaining, value, size)
        _take(remaining, value)
    return rank


def decode(xs: Sequence[Any], value: int) -> Tuple[Any, ...]:
    """
    Arranges the non-decreasing `xs` according to rank `value`.

    Raises:
        InvalidInput: if `xs` is not non-decreasing.
        OutOfRange: if `value` is not smaller than `count(xs)`.
    """
    if not combinatorics.is_ordered_multiset(xs):
        raise InvalidInput(f"Values must be non-decreasing. Got {tuple(xs)}")
    rank = bigint.from_native(value)
    arrangements = count(xs)
    if bigint.compare(rank, arrangements) >= 0:
        raise OutOfRange(
            f"Rank must be smaller than {arrangements} for {tuple(xs)}. Got {rank}"
        )
    remaining = collections.Counter(xs)
    arrangement = []
    for idx in range(len(xs)):
        size = len(xs) - idx
        for candidate in sorted(remaining):
            block = _starting_with(arrangements, remaining, candidate, size)
            if rank < block:
                break
            rank = bigint.sub(rank, block)
        arrangements = block
        arrangement.append(candidate)
        _take(remaining, candidate)
    return tuple(arrangement)


def permutations(xs: Sequence[Any]) -> Iterator[Tuple[Any, ...]]:
    """
    Lazily generates the distinct arrangements of the non-decreasing `xs`,
    in rank order.
    """
    if not combinatorics.is_ordered_multiset(xs):
        raise InvalidInput(f"Values must be non-decreasing. Got {tuple(xs)}")
    arrangement = tuple(xs)
    while arrangement is not None:
        yield arrangement
        arrangement = combinatorics.next_permutation(arrangement)


def _starting_with(
    arrangements: int, remaining: Counter[Any], value: Any, size: int
) -> int:
    # arrangements of the remaining values that start with `value`
    block, _ = bigint.divmod(bigint.mul(arrangements, remaining[value]), size)
    return block


def _take(remaining: Counter[Any], value: Any) -> None:
    remaining[value] -= 1
    if remaining[value] == 0:
        del remaining[value]
