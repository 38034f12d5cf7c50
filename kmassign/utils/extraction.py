"""
Solution Extraction

Reads the final mask of the step engine against the caller's original
matrix. Padded rows and columns are ignored and the costs are taken from
the unshifted values, so neither preprocessing step leaks into the answer.
"""

from typing import List, Tuple

import numpy as np

from ..state import Mark


def output_solution(original: np.ndarray, mask: np.ndarray) -> int:
    r"""
    Total cost of the starred cells, summed over the original values.

    Parameters
    ----------
    original : np.ndarray
        Caller's cost matrix of shape (m, n).
    mask : np.ndarray
        Final mask; only its top-left (m, n) block is read.

    Returns
    -------
    int
        Exact total as a Python ``int``.
    """
    m, n = original.shape
    starred = mask[:m, :n] == Mark.STAR
    return sum(int(v) for v in original[starred])


def starred_pairs(mask: np.ndarray, shape: Tuple[int, int]) -> List[Tuple[int, int]]:
    """Sorted (row, col) pairs of starred cells inside ``shape``"""
    m, n = shape
    rows, cols = np.nonzero(mask[:m, :n] == Mark.STAR)
    return [(int(r), int(c)) for r, c in zip(rows, cols)]


def assignment_matrix(mask: np.ndarray, shape: Tuple[int, int]) -> np.ndarray:
    """0/1 matching matrix of the given shape (1 = assigned)"""
    m, n = shape
    return (mask[:m, :n] == Mark.STAR).astype(int)
