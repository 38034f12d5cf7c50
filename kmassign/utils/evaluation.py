"""
Evaluation helpers for checking assignments.

These are independent of the step engine: a brute-force search for small
matrices and the ``scipy.optimize.linear_sum_assignment`` reference solver.
"""

import itertools
from typing import List, Sequence, Tuple

import numpy as np
from scipy.optimize import linear_sum_assignment


def brute_force_cost(cost_matrix) -> int:
    r"""
    Minimum assignment cost by trying every injective row-to-column mapping.

    Rectangular matrices assign min(m, n) pairs. Intended for small
    matrices only (the search is factorial in size).
    """
    C = np.asarray(cost_matrix)
    m, n = C.shape

    if m <= n:
        return min(
            sum(int(C[i, j]) for i, j in enumerate(cols))
            for cols in itertools.permutations(range(n), m)
        )
    return min(
        sum(int(C[i, j]) for j, i in enumerate(rows))
        for rows in itertools.permutations(range(m), n)
    )


def reference_assignment(cost_matrix) -> Tuple[int, List[Tuple[int, int]]]:
    r"""
    Optimal cost and pairs computed with scipy.

    Returns
    -------
    cost : int
        Minimum total cost.
    pairs : list of tuple
        (row, col) pairs in increasing row order.
    """
    C = np.asarray(cost_matrix)
    row_idx, col_idx = linear_sum_assignment(C)
    pairs = [(int(r), int(c)) for r, c in zip(row_idx, col_idx)]
    return sum(int(C[r, c]) for r, c in pairs), pairs


def is_valid_assignment(pairs: Sequence[Tuple[int, int]], shape: Tuple[int, int]) -> bool:
    """True if ``pairs`` is a complete one-to-one assignment within ``shape``"""
    m, n = shape
    rows = [r for r, _ in pairs]
    cols = [c for _, c in pairs]

    if len(pairs) != min(m, n):
        return False
    if len(set(rows)) != len(rows) or len(set(cols)) != len(cols):
        return False
    return all(0 <= r < m for r in rows) and all(0 <= c < n for c in cols)
