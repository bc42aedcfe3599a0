"""
Utils for combinatorial problems.
"""

import collections
import math
from typing import Any, Optional, Sequence, Tuple

from numenc import bigint
from numenc.errors import InvalidInput, OutOfRange


def factorial(n: int) -> int:
    """
    Returns `n!`, with `0! = 1`.
    """
    return math.factorial(bigint.from_native(n))


def binomial(n: int, k: int) -> int:
    """
    The binomial coefficient `n choose k`.
    It is zero when `n < k`.
    """
    n, k = bigint.from_native(n), bigint.from_native(k)
    if n < k:
        return 0
    return math.comb(n, k)


def multinomial(xs: Sequence[Any]) -> int:
    """
    Number of distinct arrangements of the multiset `xs`,
    i.e. `len(xs)! / (m_1! * m_2! * ... )` where `m_i` are the
    multiplicities of each distinct value.
    """
    total = factorial(len(xs))
    for multiplicity in collections.Counter(xs).values():
        total, _ = bigint.divmod(total, factorial(multiplicity))
    return total


def greatest_common_divisor(a: int, b: int) -> int:
    a, b = bigint.from_native(a), bigint.from_native(b)
    if a == 0 and b == 0:
        raise InvalidInput("The gcd of zero and zero is undefined")
    return math.gcd(a, b)


def digits_to_integer(radices: Sequence[int], digits: Sequence[int]) -> int:
    """
    Composes an integer from mixed-radix digits.

    Digits and radices are given from most to least significant,
    so the place value of `digits[i]` is the product of `radices[i+1:]`.
    With a single repeated radix this is the usual positional system,
    e.g. base 10 or base 2.

    Args:
        radices: the number of possible values at each place.
        digits: one digit per place, with `0 <= digits[i] < radices[i]`.
    Returns:
        The integer the digits represent.
    """
    if len(radices) != len(digits):
        raise InvalidInput(
            f"Expected {len(radices)} digits, one per radix. Got {len(digits)}"
        )
    value = 0
    for radix, digit in zip(radices, digits):
        radix, digit = bigint.from_native(radix), as_digit(digit)
        if digit >= radix:
            raise InvalidInput(f"Digit {digit} is not valid for radix {radix}")
        value = bigint.add(bigint.mul(value, radix), digit)
    return value


def integer_to_digits(radices: Sequence[int], value: int) -> Tuple[int, ...]:
    """
    Extracts the mixed-radix digits of `value`, most significant first.

    Args:
        radices: the number of possible values at each place, most significant first.
        value: a non-negative integer.
    Returns:
        A tuple with one digit per radix.
    Raises:
        OutOfRange: if `value` is not smaller than the product of the radices.
    """
    remainder = bigint.from_native(value)
    digits = []
    for radix in reversed(radices):
        if bigint.from_native(radix) == 0:
            raise InvalidInput("Radices must be positive")
        remainder, digit = bigint.divmod(remainder, radix)
        digits.append(digit)
    if remainder != 0:
        raise OutOfRange(
            f"{value} cannot be written with radices {tuple(radices)}. "
            f"The largest representable value is {math.prod(radices) - 1}"
        )
    return tuple(reversed(digits))


def is_ordered_set(xs: Sequence[Any]) -> bool:
    """
    Returns true if `xs` is strictly increasing.
    """
    return all(xs[idx] < xs[idx + 1] for idx in range(len(xs) - 1))


def is_ordered_multiset(xs: Sequence[Any]) -> bool:
    """
    Returns true if `xs` is non-decreasing.
    """
    return all(xs[idx] <= xs[idx + 1] for idx in range(len(xs) - 1))


def is_unordered_set(xs: Sequence[Any]) -> bool:
    """
    Returns true if `xs` has no repeated values.
    """
    return is_ordered_set(sorted(xs))


def next_permutation(xs: Sequence[Any]) -> Optional[Tuple[Any, ...]]:
    """
    Returns the arrangement of `xs` that follows it in lexicographic order,
    or `None` if `xs` is the last one, i.e. non-increasing.
    Repeated values are supported: only distinct arrangements are visited.
    """
    data = list(xs)
    pivot = len(data) - 1
    while pivot > 0 and data[pivot - 1] >= data[pivot]:
        pivot -= 1
    if pivot <= 0:
        return None
    successor = len(data) - 1
    while data[successor] <= data[pivot - 1]:
        successor -= 1
    data[pivot - 1], data[successor] = data[successor], data[pivot - 1]
    data[pivot:] = reversed(data[pivot:])
    return tuple(data)


def as_digit(value: int) -> int:
    """
    Converts a digit to `int`.

    Raises:
        InvalidInput: if the digit is negative or not an integer.
    """
    try:
        return bigint.from_native(value)
    except OutOfRange as err:
        raise InvalidInput(f"Digits must be non-negative. Got {value}") from err
