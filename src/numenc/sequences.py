"""
Bijective base-2 numbering of boolean sequences.

Every finite sequence of booleans, of any length, gets a distinct
non-negative integer. Sequences are ordered by length first and then
lexicographically, with `False < True`:

    0 -> ()
    1 -> (False,)
    2 -> (True,)
    3 -> (False, False)
    ...
"""

from typing import Sequence, Tuple

from numenc import bigint
from numenc.errors import InvalidInput


def encode(bits: Sequence[bool]) -> int:
    """
    Returns the integer for the sequence `bits`.

    Args:
        bits: booleans, or numpy booleans, most significant first.
    """
    value = 0
    for bit in bits:
        bit = bigint.item(bit)
        if not isinstance(bit, bool):
            raise InvalidInput(f"Expected a sequence of booleans. Got {bit!r}")
        value = bigint.add(bigint.mul(value, 2), 1 + int(bit))
    return value


def decode_len(value: int) -> int:
    """
    The length of the sequence for `value`.
    Sequences of length `n` take the values `[2^n - 1, 2^(n+1) - 1)`.
    """
    return (bigint.from_native(value) + 1).bit_length() - 1


def decode(value: int) -> Tuple[bool, ...]:
    """
    Returns the sequence for `value`: the binary digits of
    `value + 1`, without the leading one.
    """
    shifted = bigint.from_native(value) + 1
    length = decode_len(value)
    return tuple(bool(shifted >> pos & 1) for pos in reversed(range(length)))
