"""
Cost Matrix Preprocessing

This module turns a caller-supplied cost matrix into the canonical working
form used by the step engine: a private, square, non-negative ``int64``
array.

Pipeline:
---------
1. ``as_cost_matrix``: ingest any sequence of rows (lists, tuples,
   generators, ``np.ndarray``) and validate shape and dtype
2. ``handle_negatives``: shift every entry by ``abs(min)`` when the
   minimum is negative (or reject the matrix)
3. ``pad_matrix``: extend the smaller dimension with a sentinel value
   until the matrix is square
4. ``check_overflow``: make sure the adjustments of step 6 stay exact

A uniform shift adds ``n * shift`` to every perfect matching, so it never
changes which assignment is optimal. Likewise every perfect matching of a
padded matrix selects the same number of sentinel cells, so the sentinel
value never changes which real pairs are optimal.
"""

import numbers
import warnings
from typing import Optional

import numpy as np

from ..exceptions import InvalidInputError, NumericOverflowError

INT64_MAX = int(np.iinfo(np.int64).max)
INT64_MIN = int(np.iinfo(np.int64).min)


def as_cost_matrix(matrix) -> np.ndarray:
    r"""
    Convert a nested sequence of rows into a read-only 2D integral array.

    Parameters
    ----------
    matrix : array_like
        Rows of costs. Any iterable of iterables is accepted, as well as
        a 2D ``np.ndarray``. All rows must have the same, non-zero length.

    Returns
    -------
    np.ndarray
        A copy of the costs with the caller's integer dtype (Python ints
        become ``int64``). The copy is flagged read-only.

    Raises
    ------
    InvalidInputError
        If the matrix is empty, irregular, not 2D, or not integral.
    NumericOverflowError
        If a value does not fit in a signed 64-bit integer.
    """
    if isinstance(matrix, np.ndarray):
        arr = np.array(matrix, copy=True)
    else:
        try:
            rows = [list(row) for row in matrix]
        except TypeError:
            raise InvalidInputError("cost matrix must be a sequence of rows") from None

        if len(rows) == 0:
            raise InvalidInputError("cost matrix must not be empty")

        lengths = {len(row) for row in rows}
        if len(lengths) != 1:
            raise InvalidInputError(
                f"all rows must have the same length, got lengths {sorted(lengths)}"
            )

        # Checked on the Python values: numpy would silently turn mixed
        # bools into ints and mixed huge ints into floats
        values = [v for row in rows for v in row]
        if any(isinstance(v, bool) or not isinstance(v, numbers.Integral) for v in values):
            raise InvalidInputError("cost matrix must contain integers only")
        if any(not INT64_MIN <= int(v) <= INT64_MAX for v in values):
            raise NumericOverflowError("cost values do not fit in a signed 64-bit integer")

        arr = np.array(rows, dtype=np.int64)

    if arr.ndim != 2:
        raise InvalidInputError(f"cost matrix must be 2D, got shape {arr.shape}")

    if arr.size == 0:
        raise InvalidInputError(f"cost matrix must not be empty, got shape {arr.shape}")

    if arr.dtype == object:
        # Object arrays may hold Python ints beyond 64 bits
        if all(isinstance(v, numbers.Integral) and not isinstance(v, bool) for v in arr.flat):
            raise NumericOverflowError("cost values do not fit in a 64-bit integer")
        raise InvalidInputError("cost matrix must contain integers only")

    if not np.issubdtype(arr.dtype, np.integer):
        raise InvalidInputError(f"cost matrix must have an integer dtype, got {arr.dtype}")

    if np.issubdtype(arr.dtype, np.unsignedinteger) and int(arr.max()) > INT64_MAX:
        raise NumericOverflowError("cost values do not fit in a signed 64-bit integer")

    arr.setflags(write=False)
    return arr


def handle_negatives(matrix: np.ndarray, allow_negatives: bool = True) -> np.ndarray:
    r"""
    Shift a matrix with negative entries so that its minimum becomes 0.

    Parameters
    ----------
    matrix : np.ndarray
        Integral cost matrix (not modified).
    allow_negatives : bool
        If False, a negative entry is an error instead of being shifted.

    Returns
    -------
    np.ndarray
        New ``int64`` array. Unsigned inputs are only converted.

    Raises
    ------
    InvalidInputError
        If negative entries are present and ``allow_negatives`` is False.
    NumericOverflowError
        If the shifted values do not fit in ``int64``.
    """
    work = matrix.astype(np.int64, copy=True)

    # Unsigned costs cannot be negative
    if np.issubdtype(matrix.dtype, np.unsignedinteger):
        return work

    min_val = int(work.min())
    if min_val >= 0:
        return work

    if not allow_negatives:
        raise InvalidInputError(
            f"negative costs not permitted (minimum entry is {min_val})"
        )

    shift = -min_val
    if int(work.max()) > INT64_MAX - shift:
        raise NumericOverflowError(
            f"shifting costs by {shift} would overflow a 64-bit integer"
        )

    work += shift
    return work


def pad_matrix(matrix: np.ndarray, pad_value: Optional[int] = None) -> np.ndarray:
    r"""
    Make a non-negative matrix square by appending sentinel rows or columns.

    Parameters
    ----------
    matrix : np.ndarray
        Non-negative ``int64`` matrix of shape (m, n).
    pad_value : int, optional
        Value of the added cells. Defaults to the largest entry of
        ``matrix``.

    Returns
    -------
    np.ndarray
        New array of shape (max(m, n), max(m, n)).
    """
    m, n = matrix.shape
    size = max(m, n)

    if m == n:
        return matrix.copy()

    largest = int(matrix.max())
    if pad_value is None:
        pad_value = largest
    elif pad_value < 0:
        raise InvalidInputError(f"pad_value must be non-negative, got {pad_value}")
    elif pad_value > INT64_MAX:
        raise NumericOverflowError(f"pad_value {pad_value} does not fit in a 64-bit integer")
    elif pad_value < largest:
        warnings.warn(
            f"pad_value {pad_value} is smaller than the largest cost {largest}",
            UserWarning
        )

    padded = np.full((size, size), pad_value, dtype=np.int64)
    padded[:m, :n] = matrix
    return padded


def check_overflow(matrix: np.ndarray) -> None:
    r"""
    Reject a working matrix whose adjustments could leave the ``int64`` range.

    Step 6 adds the smallest uncovered value to doubly covered cells, so
    entries can grow past the initial span. Requiring ``span * 2n`` to fit
    keeps every intermediate value exact.
    """
    n = matrix.shape[0]
    span = int(matrix.max()) - int(matrix.min())
    if span > INT64_MAX // (2 * n):
        raise NumericOverflowError(
            f"cost span {span} is too large to solve a {n}x{n} matrix exactly"
        )
