"""
Hungarian Algorithm for the Linear Assignment Problem

This module implements the Kuhn-Munkres algorithm (also known as the
Hungarian algorithm) as a matrix-rewriting state machine.

Mathematical Background:
-----------------------
Given an n x n cost matrix C, find a permutation sigma minimizing
Σ C[i, sigma(i)]. The algorithm never changes which permutation is optimal
while it rewrites C: it only subtracts constants from whole rows or
columns, and it marks zeros of the rewritten matrix until n independent
zeros (no two in the same row or column) have been found.

The algorithm works by:
1. Subtracting row minima so every row holds a zero
2. Starring a greedy set of independent zeros
3. Covering the columns of the starred zeros (done when n are covered)
4. Priming uncovered zeros until one has no starred zero in its row
5. Augmenting along the alternating path of primed and starred zeros
6. Moving the smallest uncovered value to create new zeros
7. Reading the starred zeros as the optimal assignment

Time Complexity: O(n³)
Space Complexity: O(n²)

References:
-----------
H. Kuhn, "The Hungarian Method for the Assignment Problem",
Naval Research Logistics Quarterly, 2(1-2), 1955, pp. 83-97.

J. Munkres, "Algorithms for the Assignment and Transportation Problems",
Journal of the Society for Industrial and Applied Mathematics, 5(1),
1957, pp. 32-38.

Applications:
- Task and resource assignment
- Detection-to-track association in multi-object tracking
- Matching factors or clusters between two solutions
"""

from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple, Union

import numpy as np

from .config import SolverConfig
from .exceptions import InternalError
from .state import Mark, MunkresState, Step
from .utils.display import format_mask, format_matrix, print_matrix
from .utils.extraction import assignment_matrix, output_solution, starred_pairs
from .utils.preprocessing import (
    as_cost_matrix,
    check_overflow,
    handle_negatives,
    pad_matrix,
)


@dataclass
class AssignmentResult:
    """Outcome of one solved cost matrix"""
    cost: int  # total over the original (unshifted, unpadded) costs
    pairs: List[Tuple[int, int]]  # (row, col), sorted by row
    matching: np.ndarray  # 0/1 matrix with the caller's shape
    shape: Tuple[int, int]
    n_augmentations: int = 0
    n_adjustments: int = 0


def hungarian(
    cost_matrix,
    allow_negatives: bool = True,
    return_pairs: bool = False,
    pad_value: Optional[int] = None,
    verbose: int = 0
) -> Union[int, Tuple[int, List[Tuple[int, int]]]]:
    r"""
    Minimum total cost of a one-to-one assignment of rows to columns.

    Parameters
    ----------
    cost_matrix : array_like
        Integral costs, shape (m, n). Any sequence of equal-length rows is
        accepted; the matrix does not need to be square.
    allow_negatives : bool, optional
        If True (default) negative costs are handled by a uniform shift.
        If False they raise ``InvalidInputError``.
    return_pairs : bool, optional
        Also return the assigned (row, col) pairs.
    pad_value : int, optional
        Sentinel used to pad a rectangular matrix. Defaults to the largest
        (shifted) cost.
    verbose : int, optional
        0 = silent, 1 = print matrix, assignment and cost,
        2 = also trace every step.

    Returns
    -------
    total_cost : int
        Sum of the original costs at the assigned positions.
    pairs : list of tuple, only if ``return_pairs``
        Assigned (row, col) pairs in increasing row order. For an m x n
        matrix there are min(m, n) pairs, all inside the original ranges.

    Raises
    ------
    InvalidInputError
        Empty, irregular, non-integral input, or negative costs when
        ``allow_negatives`` is False.
    NumericOverflowError
        Costs too large to be processed exactly in 64-bit integers.

    Examples
    --------
    >>> from kmassign import hungarian
    >>> hungarian([[25, 40, 35], [40, 60, 35], [20, 40, 25]])
    95
    >>> hungarian([[1, 2], [3, 4]], return_pairs=True)
    (5, [(0, 1), (1, 0)])
    """
    config = SolverConfig(
        allow_negatives=allow_negatives,
        pad_value=pad_value,
        verbose=verbose
    )
    result = solve(cost_matrix, config)

    if return_pairs:
        return result.cost, result.pairs
    return result.cost


def solve(cost_matrix, config: Optional[SolverConfig] = None) -> AssignmentResult:
    r"""
    Solve one assignment problem and return the full result.

    Parameters
    ----------
    cost_matrix : array_like
        Integral costs, shape (m, n). Never modified.
    config : SolverConfig, optional
        Solver options. Defaults to ``SolverConfig()``.

    Returns
    -------
    AssignmentResult
        Cost, pairs, 0/1 matching matrix and iteration counts.
    """
    if config is None:
        config = SolverConfig()

    original = as_cost_matrix(cost_matrix)

    # ============================================================================
    # Preprocessing
    # ============================================================================
    work = handle_negatives(original, config.allow_negatives)
    work = pad_matrix(work, config.pad_value)
    check_overflow(work)

    state = MunkresState(cost=work, shape=original.shape, verbose=config.verbose)

    # ============================================================================
    # Step Engine
    # ============================================================================
    run_steps(state)

    # ============================================================================
    # Extraction
    # ============================================================================
    total_cost = output_solution(original, state.mask)
    result = AssignmentResult(
        cost=total_cost,
        pairs=starred_pairs(state.mask, original.shape),
        matching=assignment_matrix(state.mask, original.shape),
        shape=original.shape,
        n_augmentations=state.n_augmentations,
        n_adjustments=state.n_adjustments
    )

    if config.verbose:
        print_matrix(original, "Cost Matrix:")
        print_matrix(result.matching, "Optimal assignment:")
        print(f"Optimal cost: {total_cost}")

    return result


def solve_many(matrices: Iterable, config: Optional[SolverConfig] = None) -> List[AssignmentResult]:
    """Solve independent cost matrices one after the other"""
    return [solve(matrix, config) for matrix in matrices]


def run_steps(state: MunkresState) -> MunkresState:
    r"""
    Drive the step engine from row reduction until the mask is final.

    Each handler receives the state, mutates it, and returns the next
    ``Step``. The loop ends after ``Step.DONE`` has been handled.

    Raises
    ------
    InternalError
        If a handler returns a value that is not a known step.
    """
    stepnum = Step.REDUCE_ROWS

    while True:
        handler = _HANDLERS.get(stepnum)
        if handler is None:
            raise InternalError(f"unknown step {stepnum!r}")

        next_step = handler(state)

        if state.verbose == 2:
            print(f"Step {int(stepnum)} ({Step(stepnum).name}) -> "
                  f"{'halt' if next_step is None else int(next_step)}")

        if next_step is None:
            break
        stepnum = next_step

    return state


def _step1(state: MunkresState) -> Step:
    r"""
    Step 1: Subtract row minima.

    For each row, subtract its minimum value. This creates at least one zero
    in each row while preserving the optimal matching.

    .. math::
        C'_{ij} = C_{ij} - \min_j C_{ij}
    """
    cost = state.cost
    cost -= cost.min(axis=1, keepdims=True)

    if state.verbose == 2:
        print_matrix(cost, "After row reduction:")

    return Step.STAR_ZEROS


def _step2(state: MunkresState) -> Step:
    r"""
    Step 2: Star independent zeros.

    Scan the matrix row by row. A zero whose row and column are both
    uncovered is starred, and its row and column are covered. The covers are
    cleared again before step 3 counts columns.
    """
    cost, mask = state.cost, state.mask
    r_cov, c_cov = state.row_cover, state.col_cover
    p_size = state.size

    for i in range(p_size):
        for j in range(p_size):
            if cost[i, j] == 0 and not r_cov[i] and not c_cov[j]:
                mask[i, j] = Mark.STAR
                r_cov[i] = True
                c_cov[j] = True

    state.clear_covers()
    return Step.COVER_COLUMNS


def _step3(state: MunkresState) -> Step:
    r"""
    Step 3: Cover columns containing starred zeros.

    If all n columns are covered, the starred zeros form a complete
    assignment and the algorithm is done. Otherwise search for more zeros.
    """
    starred_cols = np.any(state.mask == Mark.STAR, axis=0)
    state.col_cover[starred_cols] = True

    if np.count_nonzero(state.col_cover) >= state.size:
        return Step.DONE
    return Step.PRIME_ZEROS


def _step4(state: MunkresState) -> Step:
    r"""
    Step 4: Prime uncovered zeros.

    Repeatedly take the first uncovered zero (row-major order) and prime it.
    - If its row holds a starred zero, cover the row and uncover the column
      of that starred zero, then keep searching
    - Otherwise this primed zero starts an augmenting path: go to step 5

    If no uncovered zero is left, go to step 6.
    """
    while True:
        row, col = state.find_uncovered_zero()
        if row == -1:
            return Step.ADJUST_MATRIX

        state.mask[row, col] = Mark.PRIME

        star_col = state.find_star_in_row(row)
        if star_col != -1:
            state.row_cover[row] = True
            state.col_cover[star_col] = False
        else:
            state.path_start = (row, col)
            return Step.AUGMENT_PATH


def _step5(state: MunkresState) -> Step:
    r"""
    Step 5: Construct the alternating path and flip it.

    Starting from the primed zero Z0 found in step 4:
    - Z1 is the starred zero in the column of Z0 (if any)
    - Z2 is the primed zero in the row of Z1 (there always is one)

    Continue until a primed zero has no starred zero in its column. Unstar
    every starred zero of the path, star every primed zero, erase all primes
    and uncover every line. The path stays on the state until the next
    augmentation replaces it.
    """
    if state.path_start is None:
        raise InternalError("augmenting path requested without a primed zero")

    path = state.path = [state.path_start]

    while True:
        row = state.find_star_in_col(path[-1][1])
        if row == -1:
            break
        path.append((row, path[-1][1]))

        col = state.find_prime_in_row(row)
        if col == -1:
            raise InternalError(f"starred zero in row {row} has no primed zero")
        path.append((row, col))

    if len(path) > 2 * state.size + 1:
        raise InternalError(f"augmenting path of length {len(path)} exceeds bound")

    # Flip stars and primes along the path
    for r, c in path:
        if state.mask[r, c] == Mark.STAR:
            state.mask[r, c] = Mark.NONE
        else:
            state.mask[r, c] = Mark.STAR

    state.n_augmentations += 1

    if state.verbose == 2:
        print(f"Augmenting path: {path} ({state.star_count()} starred)")
        print(format_mask(state.mask))

    state.clear_covers()
    state.erase_primes()
    state.path_start = None

    return Step.COVER_COLUMNS


def _step6(state: MunkresState) -> Step:
    r"""
    Step 6: Update the cost matrix.

    Find the smallest value not covered by any line. Add it to every covered
    row and subtract it from every uncovered column. Doubly covered cells go
    up, fully uncovered cells go down, and stars, primes and covers are left
    untouched.
    """
    r_cov, c_cov = state.row_cover, state.col_cover

    if r_cov.all() or c_cov.all():
        raise InternalError("no uncovered value left to adjust the matrix with")

    minval = state.cost[np.ix_(~r_cov, ~c_cov)].min()

    # Add to covered rows
    state.cost[r_cov, :] += minval
    # Subtract from uncovered columns
    state.cost[:, ~c_cov] -= minval

    state.n_adjustments += 1

    if state.verbose == 2:
        print(f"Adjusting by {minval}")
        print(format_mask(state.mask, r_cov, c_cov))
        print(format_matrix(state.cost))

    return Step.PRIME_ZEROS


def _step7(state: MunkresState) -> None:
    r"""
    Step 7: Trim the mask to the caller's shape and halt.
    """
    m, n = state.shape
    state.mask = state.mask[:m, :n].copy()
    return None


_HANDLERS = {
    Step.REDUCE_ROWS: _step1,
    Step.STAR_ZEROS: _step2,
    Step.COVER_COLUMNS: _step3,
    Step.PRIME_ZEROS: _step4,
    Step.AUGMENT_PATH: _step5,
    Step.ADJUST_MATRIX: _step6,
    Step.DONE: _step7,
}
