"""
Factorial number system.

A permutation of `n` distinct values is ranked by its Lehmer code:
digit `c_i` counts the values after position `i` that are smaller than
the value at position `i`. Digits are kept most significant first, so
`c_i` has place value `(n-1-i)!` and radix `n-i`:

    rank = c_0 * (n-1)! + c_1 * (n-2)! + ... + c_{n-1} * 0!

The rank of a permutation is its position in the lexicographic order
of all permutations of the same values.

See https://en.wikipedia.org/wiki/Factorial_number_system.
"""

import logging
from typing import Any, Iterator, Sequence, Tuple

from numenc import bigint, combinatorics
from numenc.errors import InvalidInput, InvalidPermutation, OutOfRange


def radices(size: int) -> Tuple[int, ...]:
    """
    The radix of each factoradic digit for permutations of `size` values,
    most significant first: `(size, size - 1, ..., 1)`.
    """
    return tuple(range(_size(size), 0, -1))


def to_digits(value: int, size: int) -> Tuple[int, ...]:
    """
    Writes `value` in the factorial number system with `size` digits.

    Raises:
        OutOfRange: if `value >= size!`.
    """
    value = bigint.from_native(value)
    limit = combinatorics.factorial(_size(size))
    if bigint.compare(value, limit) >= 0:
        logging.debug("Rank %d is out of range for size %d", value, size)
        raise OutOfRange(
            f"Rank must be smaller than {size}! = {limit} for permutations of size {size}. Got {value}"
        )
    return combinatorics.integer_to_digits(radices(size), value)


def from_digits(digits: Sequence[int]) -> int:
    """
    Reads factoradic `digits`, most significant first.

    Raises:
        InvalidInput: if the `i`-th digit is not in `[0, len(digits) - i)`.
    """
    return combinatorics.digits_to_integer(radices(len(digits)), digits)


def lehmer_code(xs: Sequence[Any]) -> Tuple[int, ...]:
    """
    Counts, for each position, the values to its right
    that are smaller than the value in that position.
    """
    return tuple(
        sum(1 for other in xs[idx + 1 :] if other < value)
        for idx, value in enumerate(xs)
    )


def from_lehmer_code(digits: Sequence[int]) -> Tuple[int, ...]:
    """
    Expands a Lehmer code into a permutation of `0..len(digits)-1`.
    """
    return _select(range(len(digits)), digits)


def encode(permutation: Sequence[int]) -> int:
    """
    Ranks a permutation of `0..n-1`, where `n = len(permutation)`.

    Args:
        permutation: the values `0..n-1`, each exactly once.
    Returns:
        An integer in `[0, n!)`.
    Raises:
        InvalidPermutation: if the values are not a permutation of `0..n-1`.
    """
    try:
        values = tuple(bigint.item(value) for value in permutation)
    except InvalidInput as err:
        raise InvalidPermutation(
            f"Permutation values must be scalars. Got {permutation!r}"
        ) from err
    if any(isinstance(value, bool) or not isinstance(value, int) for value in values):
        raise InvalidPermutation(f"Permutation values must be integers. Got {values}")
    if sorted(values) != list(range(len(values))):
        logging.debug("Rejecting %s, not a permutation", values)
        raise InvalidPermutation(
            f"Expected a permutation of 0..{len(values) - 1}. Got {values}"
        )
    return from_digits(lehmer_code(values))


def decode(value: int, size: int) -> Tuple[int, ...]:
    """
    Returns the permutation of `0..size-1` with rank `value`.

    Raises:
        OutOfRange: if `value >= size!` or `size` is negative.
    """
    return from_lehmer_code(to_digits(value, size))


def encode_elements(xs: Sequence[Any]) -> int:
    """
    Ranks an arrangement of distinct, comparable values,
    e.g. `encode_elements("bca") == 3`.

    Raises:
        InvalidPermutation: if a value is repeated.
    """
    if not combinatorics.is_unordered_set(xs):
        raise InvalidPermutation(f"Values must be distinct. Got {tuple(xs)}")
    return from_digits(lehmer_code(xs))


def decode_elements(xs: Sequence[Any], value: int) -> Tuple[Any, ...]:
    """
    Arranges the strictly increasing `xs` according to rank `value`.

    Raises:
        InvalidInput: if `xs` is not strictly increasing.
        OutOfRange: if `value >= len(xs)!`.
    """
    if not combinatorics.is_ordered_set(xs):
        raise InvalidInput(f"Values must be strictly increasing. Got {tuple(xs)}")
    return _select(xs, to_digits(value, len(xs)))


def permutations(xs: Sequence[Any]) -> Iterator[Tuple[Any, ...]]:
    """
    Lazily generates every arrangement of the strictly increasing `xs`,
    in rank order: the i-th arrangement has rank i.
    """
    if not combinatorics.is_ordered_set(xs):
        raise InvalidInput(f"Values must be strictly increasing. Got {tuple(xs)}")
    arrangement = tuple(xs)
    while arrangement is not None:
        yield arrangement
        arrangement = combinatorics.next_permutation(arrangement)


def _select(pool: Sequence[Any], digits: Sequence[int]) -> Tuple[Any, ...]:
    # each digit picks, and removes, one of the values left in the pool
    remaining = list(pool)
    if len(digits) != len(remaining):
        raise InvalidInput(f"Expected {len(remaining)} digits. Got {len(digits)}")
    arrangement = []
    for idx, digit in enumerate(digits):
        digit = combinatorics.as_digit(digit)
        if digit >= len(remaining):
            raise InvalidInput(
                f"Digit {digit} at position {idx} must be smaller than {len(remaining)}"
            )
        arrangement.append(remaining.pop(digit))
    return tuple(arrangement)


def _size(size: int) -> int:
    try:
        return bigint.from_native(size)
    except OutOfRange as err:
        raise OutOfRange(f"Size must be non-negative. Got {size}") from err
