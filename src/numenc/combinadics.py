"""
Combinatorial number system.

A strictly increasing k-tuple `c_0 < c_1 < ... < c_{k-1}` of
non-negative integers is ranked as

    rank = C(c_0, 1) + C(c_1, 2) + ... + C(c_{k-1}, k)

where `C(m, r)` is `m choose r`, and zero when `m < r`.
For a fixed `k` this is a bijection between k-combinations
and all the non-negative integers; combinations of `{0, ..., n-1}`
take exactly the ranks `[0, C(n, k))`.

See https://en.wikipedia.org/wiki/Combinatorial_number_system.
"""

import logging
from typing import Iterator, Optional, Sequence, Tuple

from numenc import bigint, combinatorics
from numenc.errors import InvalidCombination, NumberEncodingError, OutOfRange


def encode(combination: Sequence[int]) -> int:
    """
    Ranks a combination.

    Args:
        combination: strictly increasing non-negative integers.
    Returns:
        The rank of the combination; zero for the empty combination.
    Raises:
        InvalidCombination: if the values are not strictly increasing
            non-negative integers.
    """
    values = _as_combination(combination)
    rank = 0
    for idx, value in enumerate(values):
        rank = bigint.add(rank, combinatorics.binomial(value, idx + 1))
    return rank


def decode(value: int, size: int) -> Tuple[int, ...]:
    """
    Returns the combination of `size` values with rank `value`.

    The largest element is chosen first: it is the largest `m` with
    `C(m, size) <= value`. The rest of the rank is then decoded
    with one element fewer.

    Raises:
        OutOfRange: if `value` or `size` are negative,
            or `size` is zero and `value` is not.
    """
    try:
        remainder, size = bigint.from_native(value), bigint.from_native(size)
    except OutOfRange as err:
        raise OutOfRange(
            f"Rank and size must be non-negative. Got rank {value}, size {size}"
        ) from err
    if size == 0 and remainder != 0:
        logging.debug("Rank %d is out of range for the empty combination", remainder)
        raise OutOfRange(f"The empty combination only has rank 0. Got {remainder}")

    combination = [0] * size
    upper: Optional[int] = None
    for idx in reversed(range(size)):
        element = _largest_element(remainder, idx + 1, upper)
        remainder = bigint.sub(remainder, combinatorics.binomial(element, idx + 1))
        combination[idx] = element
        upper = element - 1
    return tuple(combination)


def next_combination(combination: Sequence[int]) -> Tuple[int, ...]:
    """
    Returns the combination whose rank is one more than the rank of `combination`.

    The first element that can grow without reaching its successor
    is incremented, and the ones before it are reset to `0, 1, ...`.
    """
    values = list(_as_combination(combination))
    if not values:
        raise OutOfRange("The empty combination has no successor")
    for idx in range(len(values)):
        values[idx] += 1
        if idx == len(values) - 1 or values[idx] < values[idx + 1]:
            break
        values[idx] = idx
    return tuple(values)


def combinations(
    size: int, start: Optional[Sequence[int]] = None
) -> Iterator[Tuple[int, ...]]:
    """
    Lazily generates k-combinations in rank order.

    Args:
        size: the number of elements, k.
        start: the first combination to generate, `(0, 1, ..., size-1)` by default.

    For `size >= 1` the sequence never ends; callers decide when to stop.
    For `size == 0` only the empty combination is generated.
    """
    size = bigint.from_native(size)
    if start is None:
        combination = tuple(range(size))
    else:
        combination = _as_combination(start)
        if len(combination) != size:
            raise InvalidCombination(
                f"Start must have {size} elements. Got {len(combination)}"
            )
    yield combination
    if size == 0:
        return
    while True:
        combination = next_combination(combination)
        yield combination


def _largest_element(remainder: int, order: int, upper: Optional[int]) -> int:
    # C(m, order) <= remainder holds for every m < order, since
    # the coefficient is zero, so the search starts from order - 1.
    low = order - 1
    if upper is None:
        # grow the bound until C(high, order) exceeds the remainder
        step = 1
        high = low + step
        while combinatorics.binomial(high, order) <= remainder:
            low = high
            step *= 2
            high = low + step
    else:
        if upper < low:
            raise OutOfRange(f"No element of order {order} below {upper + 1}")
        if combinatorics.binomial(upper, order) <= remainder:
            return upper
        high = upper
    # invariant: C(low, order) <= remainder < C(high, order)
    while high - low > 1:
        middle = (low + high) // 2
        if combinatorics.binomial(middle, order) <= remainder:
            low = middle
        else:
            high = middle
    return low


def _as_combination(combination: Sequence[int]) -> Tuple[int, ...]:
    try:
        values = tuple(bigint.from_native(value) for value in combination)
    except NumberEncodingError as err:
        raise InvalidCombination(
            f"Combination values must be non-negative integers. Got {tuple(combination)}"
        ) from err
    if not combinatorics.is_ordered_set(values):
        logging.debug("Rejecting %s, not strictly increasing", values)
        raise InvalidCombination(
            f"Combination values must be strictly increasing. Got {values}"
        )
    return values
