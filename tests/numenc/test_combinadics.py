import itertools
import math

import hypothesis
import hypothesis.strategies as st
import numpy as np
import pytest

from numenc import combinadics
from numenc.errors import InvalidCombination, InvalidInput, OutOfRange

# rank: combination, for 3-combinations
RANKS_SIZE_3 = {
    0: (0, 1, 2),
    1: (0, 1, 3),
    2: (0, 2, 3),
    3: (1, 2, 3),
    4: (0, 1, 4),
    5: (0, 2, 4),
    6: (1, 2, 4),
    7: (0, 3, 4),
    8: (1, 3, 4),
    9: (2, 3, 4),
    10: (0, 1, 5),
}


def test_encode():
    assert combinadics.encode(()) == 0
    assert combinadics.encode((0,)) == 0
    assert combinadics.encode((1,)) == 1
    assert combinadics.encode((0, 1)) == 0
    assert combinadics.encode((0, 2)) == 1
    assert combinadics.encode((1, 2)) == 2
    assert combinadics.encode((0, 3)) == 3
    for rank, combination in RANKS_SIZE_3.items():
        assert combinadics.encode(combination) == rank


def test_decode():
    assert combinadics.decode(0, 0) == ()
    assert combinadics.decode(0, 1) == (0,)
    assert combinadics.decode(1, 1) == (1,)
    assert combinadics.decode(2, 1) == (2,)
    assert combinadics.decode(0, 2) == (0, 1)
    assert combinadics.decode(1, 2) == (0, 2)
    assert combinadics.decode(2, 2) == (1, 2)
    assert combinadics.decode(3, 2) == (0, 3)
    # C(4, 2) = 6 <= 7 < C(5, 2), then C(1, 1) = 1
    assert combinadics.decode(7, 2) == (1, 4)
    for rank, combination in RANKS_SIZE_3.items():
        assert combinadics.decode(rank, 3) == combination


@pytest.mark.parametrize("size", list(range(7)))
def test_decode_encode_round_trip(size: int):
    max_rank = 10_000 if size > 0 else 0
    for rank in range(max_rank + 1):
        combination = combinadics.decode(rank, size)
        assert len(combination) == size
        assert combinadics.encode(combination) == rank


@pytest.mark.parametrize("space_size", list(range(8)))
def test_encode_subsets_of_space(space_size: int):
    # k-combinations of {0, ..., n - 1} take the ranks [0, C(n, k)).
    for size in range(space_size + 1):
        ranks = sorted(
            combinadics.encode(combination)
            for combination in itertools.combinations(range(space_size), size)
        )
        assert ranks == list(range(math.comb(space_size, size)))


@hypothesis.given(
    combination=st.sets(st.integers(min_value=0, max_value=2**80), max_size=8)
)
def test_encode_decode_round_trip(combination):
    combination = tuple(sorted(combination))
    rank = combinadics.encode(combination)
    assert combinadics.decode(rank, len(combination)) == combination


@hypothesis.given(
    size=st.integers(min_value=1, max_value=6),
    rank=st.integers(min_value=0, max_value=10**6),
)
def test_decode_is_monotonic(size: int, rank: int):
    current = combinadics.decode(rank, size)
    following = combinadics.decode(rank + 1, size)
    assert combinadics.next_combination(current) == following
    # combinadic order compares the largest elements first
    assert tuple(reversed(current)) < tuple(reversed(following))


def test_decode_large_rank():
    rank = 2**200
    combination = combinadics.decode(rank, 5)
    assert combinadics.encode(combination) == rank
    assert combination[-1] > 2**40


def test_decode_out_of_range():
    with pytest.raises(OutOfRange):
        combinadics.decode(-1, 2)
    with pytest.raises(OutOfRange):
        combinadics.decode(0, -1)
    with pytest.raises(OutOfRange):
        combinadics.decode(1, 0)


def test_encode_invalid_combination():
    with pytest.raises(InvalidCombination):
        combinadics.encode((1, 0))
    with pytest.raises(InvalidCombination):
        combinadics.encode((2, 2))
    with pytest.raises(InvalidCombination):
        combinadics.encode((-1, 2))
    with pytest.raises(InvalidCombination):
        combinadics.encode((0.5, 2))
    with pytest.raises(InvalidInput):
        combinadics.encode((0, 3, 1))


def test_encode_numpy_arrays():
    assert combinadics.encode(np.array([0, 3, 4], dtype=np.int64)) == 7


def test_next_combination():
    assert combinadics.next_combination((0,)) == (1,)
    assert combinadics.next_combination((2, 3)) == (0, 4)
    assert combinadics.next_combination((0, 2, 4)) == (1, 2, 4)
    assert combinadics.next_combination((2, 3, 4)) == (0, 1, 5)
    with pytest.raises(OutOfRange):
        combinadics.next_combination(())


def test_combinations():
    output = list(itertools.islice(combinadics.combinations(3), len(RANKS_SIZE_3)))
    assert output == [RANKS_SIZE_3[rank] for rank in range(len(RANKS_SIZE_3))]
    assert list(combinadics.combinations(0)) == [()]


def test_combinations_from_start():
    output = list(itertools.islice(combinadics.combinations(3, start=(0, 2, 4)), 4))
    assert output == [(0, 2, 4), (1, 2, 4), (0, 3, 4), (1, 3, 4)]
    start = combinadics.encode((0, 2, 4))
    for offset, combination in enumerate(output):
        assert combinadics.encode(combination) == start + offset


def test_combinations_with_invalid_start():
    with pytest.raises(InvalidCombination):
        next(combinadics.combinations(2, start=(0, 1, 2)))
    with pytest.raises(InvalidCombination):
        next(combinadics.combinations(2, start=(1, 1)))
