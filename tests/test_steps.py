import numpy as np
import pytest

from kmassign import InternalError, Mark, MunkresState, Step
from kmassign.hungarian import (
    _HANDLERS,
    _step1,
    _step2,
    _step3,
    _step4,
    _step5,
    _step6,
    _step7,
    run_steps,
)


def _state(cost, shape=None) -> MunkresState:
    cost = np.array(cost, dtype=np.int64)
    return MunkresState(cost=cost, shape=shape or cost.shape)


def test_step1_subtracts_row_minima() -> None:
    state = _state([[4, 2, 7], [3, 9, 3], [0, 5, 1]])

    assert _step1(state) == Step.STAR_ZEROS
    np.testing.assert_array_equal(state.cost, [[2, 0, 5], [0, 6, 0], [0, 5, 1]])


def test_step2_stars_first_free_zeros_in_row_major_order() -> None:
    state = _state([[0, 0, 1], [0, 1, 1], [1, 0, 0]])

    assert _step2(state) == Step.COVER_COLUMNS

    expected = np.zeros((3, 3), dtype=np.int8)
    expected[0, 0] = Mark.STAR
    expected[2, 1] = Mark.STAR
    np.testing.assert_array_equal(state.mask, expected)
    assert not state.row_cover.any()
    assert not state.col_cover.any()


def test_step3_done_when_every_column_is_starred() -> None:
    state = _state([[0, 1], [1, 0]])
    state.mask[0, 0] = Mark.STAR
    state.mask[1, 1] = Mark.STAR

    assert _step3(state) == Step.DONE
    assert state.col_cover.all()


def test_step3_partial_cover() -> None:
    state = _state([[0, 1, 2], [0, 3, 4], [0, 5, 6]])
    state.mask[0, 0] = Mark.STAR

    assert _step3(state) == Step.PRIME_ZEROS
    np.testing.assert_array_equal(state.col_cover, [True, False, False])


def test_full_cycle_on_two_by_two() -> None:
    state = _state([[1, 2], [3, 4]])

    assert _step1(state) == Step.STAR_ZEROS
    assert _step2(state) == Step.COVER_COLUMNS
    assert state.mask[0, 0] == Mark.STAR
    assert _step3(state) == Step.PRIME_ZEROS

    # Only zeros are in the covered column 0
    assert _step4(state) == Step.ADJUST_MATRIX
    assert state.star_count() == 1

    assert _step6(state) == Step.PRIME_ZEROS
    np.testing.assert_array_equal(state.cost, [[0, 0], [0, 0]])
    assert state.n_adjustments == 1

    assert _step4(state) == Step.AUGMENT_PATH
    assert state.mask[0, 1] == Mark.PRIME
    assert state.mask[1, 0] == Mark.PRIME
    np.testing.assert_array_equal(state.row_cover, [True, False])
    np.testing.assert_array_equal(state.col_cover, [False, False])
    assert state.path_start == (1, 0)

    assert _step5(state) == Step.COVER_COLUMNS
    assert state.mask[0, 1] == Mark.STAR
    assert state.mask[1, 0] == Mark.STAR
    assert state.mask[0, 0] == Mark.NONE
    assert not (state.mask == Mark.PRIME).any()
    assert not state.row_cover.any()
    assert not state.col_cover.any()
    assert state.path == [(1, 0), (0, 0), (0, 1)]
    assert state.path_start is None
    assert state.n_augmentations == 1

    assert _step3(state) == Step.DONE


def test_step4_covers_row_of_starred_prime() -> None:
    state = _state([[0, 0, 5], [5, 5, 0], [5, 5, 5]])
    state.mask[0, 0] = Mark.STAR
    state.col_cover[0] = True

    # (0, 1) is primed, its row holds a star, then (1, 2) has no star in its row
    assert _step4(state) == Step.AUGMENT_PATH
    assert state.mask[0, 1] == Mark.PRIME
    assert state.row_cover[0]
    assert not state.col_cover[0]
    assert state.path_start == (1, 2)


def test_step5_alternating_path() -> None:
    state = _state([[0, 0, 9], [0, 9, 9], [9, 9, 0]])
    state.mask[0, 0] = Mark.STAR
    state.mask[2, 2] = Mark.STAR
    state.mask[0, 1] = Mark.PRIME
    state.mask[1, 0] = Mark.PRIME
    state.path_start = (1, 0)

    # (1,0)' -> (0,0)* -> (0,1)' ; column 1 has no star
    _step5(state)

    assert state.mask[1, 0] == Mark.STAR
    assert state.path == [(1, 0), (0, 0), (0, 1)]
    assert state.mask[0, 1] == Mark.STAR
    assert state.mask[0, 0] == Mark.NONE
    assert state.mask[2, 2] == Mark.STAR
    assert state.star_count() == 3


def test_step5_without_seed_raises() -> None:
    state = _state([[0, 1], [1, 0]])
    with pytest.raises(InternalError):
        _step5(state)


def test_step6_adjusts_by_smallest_uncovered_value() -> None:
    state = _state([[0, 3, 2], [0, 0, 4], [5, 1, 7]])
    state.row_cover[1] = True
    state.col_cover[0] = True

    assert _step6(state) == Step.PRIME_ZEROS

    # minimum over rows {0, 2} x cols {1, 2} is 1
    np.testing.assert_array_equal(state.cost, [[0, 2, 1], [1, 0, 4], [5, 0, 6]])


def test_step6_without_uncovered_cells_raises() -> None:
    state = _state([[0, 1], [1, 0]])
    state.row_cover[:] = True
    with pytest.raises(InternalError):
        _step6(state)


def test_step7_trims_mask_to_original_shape() -> None:
    state = _state([[0, 1, 2], [1, 0, 2], [0, 0, 0]], shape=(2, 3))
    state.mask[0, 0] = Mark.STAR
    state.mask[1, 1] = Mark.STAR
    state.mask[2, 2] = Mark.STAR

    assert _step7(state) is None
    assert state.mask.shape == (2, 3)


def test_run_steps_reaches_complete_assignment() -> None:
    state = _state([[25, 40, 35], [40, 60, 35], [20, 40, 25]])
    run_steps(state)

    assert state.star_count() == 3
    assert (state.mask.sum(axis=0) == Mark.STAR).all()
    assert (state.mask.sum(axis=1) == Mark.STAR).all()


def test_run_steps_unknown_step_raises(monkeypatch) -> None:
    monkeypatch.setitem(_HANDLERS, Step.REDUCE_ROWS, lambda state: 99)
    with pytest.raises(InternalError):
        run_steps(_state([[1, 2], [3, 4]]))


def test_find_uncovered_zero_scans_row_major() -> None:
    state = _state([[5, 0, 0], [0, 5, 5], [5, 5, 0]])
    assert state.find_uncovered_zero() == (0, 1)

    state.row_cover[0] = True
    assert state.find_uncovered_zero() == (1, 0)

    state.col_cover[0] = True
    assert state.find_uncovered_zero() == (2, 2)

    state.row_cover[2] = True
    assert state.find_uncovered_zero() == (-1, -1)
