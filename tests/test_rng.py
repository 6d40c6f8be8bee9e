from collections import Counter

import pytest

from simple_dice_roller.errors import DiceError
from simple_dice_roller.rng import random_int


def test_maps_byte_onto_range(scripted_bytes):
    assert random_int(1, 6, scripted_bytes([0])) == 1
    assert random_int(1, 6, scripted_bytes([11])) == 6
    assert random_int(10, 12, scripted_bytes([4])) == 11


def test_rejects_bytes_above_last_full_span(scripted_bytes):
    # 252 is the largest multiple of 6 under 256; 252..255 are redrawn.
    assert random_int(1, 6, scripted_bytes([255, 252, 7])) == 2


def test_long_rejection_runs_do_not_recurse(scripted_bytes):
    # span 129 keeps only 0..128, so 255 is always rejected.
    assert random_int(1, 129, scripted_bytes([255] * 5000 + [3])) == 4


def test_full_byte_span_never_rejects(scripted_bytes):
    assert random_int(1, 256, scripted_bytes([255])) == 256


def test_single_value_range():
    assert random_int(7, 7) == 7


def test_uniform_over_d6():
    trials = 60_000
    counts = Counter(random_int(1, 6) for _ in range(trials))
    assert set(counts) == {1, 2, 3, 4, 5, 6}
    for value in range(1, 7):
        assert counts[value] / trials == pytest.approx(1 / 6, abs=0.01)


@pytest.mark.parametrize(("minimum", "maximum"), [(1, 257), (0, 300), (6, 1)])
def test_rejects_unsupported_ranges(minimum, maximum):
    with pytest.raises(DiceError) as exc:
        random_int(minimum, maximum)
    assert str(exc.value).startswith("[INVALID_RANGE]")
