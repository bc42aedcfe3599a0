"""
Arithmetic over non-negative integers of unbounded magnitude.

Python's `int` already has arbitrary precision, so the functions here
are mostly about keeping values in the domain the codecs work in:
non-negative integers. Numpy integer scalars and 0-d arrays are accepted
and turned into plain `int`, and values can be converted back to numpy
machine integers when they fit.
"""

import logging
from typing import Any, Tuple, Type

import numpy as np

from numenc.errors import DivisionByZero, InvalidInput, OutOfRange

NativeInt = Type[np.integer]


def item(value: Any) -> Any:
    """
    Returns the single value from a numpy array or scalar,
    or the value itself if it is neither.

    Raises:
        InvalidInput: if `value` is an array with more than one element.
    """
    try:
        return value.item()
    except AttributeError:
        pass
    except ValueError as err:
        raise InvalidInput(f"Expected a single value. Got {value!r}") from err
    return value


def from_native(value: Any) -> int:
    """
    Converts `value` into a non-negative Python integer.

    Args:
        value: a Python int, a numpy integer scalar or a 0-d integer array.
    Returns:
        The value as an `int`.
    Raises:
        InvalidInput: if the value is not an integer.
        OutOfRange: if the value is negative.
    """
    if isinstance(value, np.ndarray) and value.ndim != 0:
        raise InvalidInput(f"Expected a scalar integer. Got array of shape {value.shape}")
    if isinstance(value, (bool, np.bool_)) or not isinstance(
        value, (int, np.integer, np.ndarray)
    ):
        raise InvalidInput(f"Expected an integer. Got {type(value).__name__}: {value!r}")
    if isinstance(value, np.ndarray) and not np.issubdtype(value.dtype, np.integer):
        raise InvalidInput(f"Expected an integer array. Got dtype {value.dtype}")
    if not isinstance(value, int):
        value = int(item(value))
    if value < 0:
        logging.debug("Rejecting negative value %d", value)
        raise OutOfRange(f"Value must be non-negative. Got {value}")
    return value


def fits_native(value: int, dtype: NativeInt = np.uint64) -> bool:
    """
    Checks if `value` can be represented by the numpy integer type `dtype`.
    """
    info = np.iinfo(dtype)
    return info.min <= from_native(value) <= info.max


def to_native(value: int, dtype: NativeInt = np.uint64) -> np.integer:
    """
    Converts `value` into a numpy machine integer.

    Raises:
        OutOfRange: if the value does not fit `dtype`.
    """
    if not fits_native(value, dtype):
        raise OutOfRange(f"{value} does not fit in {np.dtype(dtype).name}")
    return np.dtype(dtype).type(value)


def add(a: int, b: int) -> int:
    return from_native(a) + from_native(b)


def sub(a: int, b: int) -> int:
    """
    Subtracts `b` from `a`.

    Raises:
        OutOfRange: if `b` is larger than `a`, since the result
            would be negative.
    """
    a, b = from_native(a), from_native(b)
    if b > a:
        raise OutOfRange(f"Cannot subtract {b} from {a}")
    return a - b


def mul(a: int, b: int) -> int:
    return from_native(a) * from_native(b)


def divmod(a: int, b: int) -> Tuple[int, int]:
    """
    Integer division with remainder.

    Returns:
        A tuple `(quotient, remainder)` with
        `a == quotient * b + remainder` and `0 <= remainder < b`.
    Raises:
        DivisionByZero: if `b` is zero.
    """
    a, b = from_native(a), from_native(b)
    if b == 0:
        raise DivisionByZero(f"Cannot divide {a} by zero")
    return a // b, a % b


def compare(a: int, b: int) -> int:
    """
    Three-way comparison.

    Returns:
        -1 if `a < b`, 0 if `a == b` and 1 if `a > b`.
    """
    a, b = from_native(a), from_native(b)
    return (a > b) - (a < b)
