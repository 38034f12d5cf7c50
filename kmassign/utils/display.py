"""
Diagnostic printing of cost matrices and masks.
"""

import numpy as np

from ..state import Mark

_MARK_SYMBOLS = {Mark.NONE: ".", Mark.STAR: "*", Mark.PRIME: "'"}


def format_matrix(matrix, title: str = None) -> str:
    r"""
    Render a 2D matrix as right-aligned text, one row per line.

    Parameters
    ----------
    matrix : array_like
        Matrix to render.
    title : str, optional
        Heading line placed above the matrix.
    """
    arr = np.asarray(matrix)
    cells = [[str(v) for v in row] for row in arr]
    width = max((len(c) for row in cells for c in row), default=1)

    lines = [] if title is None else [title]
    for row in cells:
        lines.append(" " + " ".join(c.rjust(width) for c in row))
    return "\n".join(lines)


def format_mask(mask: np.ndarray, row_cover=None, col_cover=None) -> str:
    r"""
    Render a star/prime mask. Covered rows and columns are flagged with ``x``.

    ``*`` is a starred zero, ``'`` a primed zero and ``.`` anything else.
    """
    lines = []
    if col_cover is not None:
        lines.append("  " + " ".join("x" if c else " " for c in col_cover))
    for i, row in enumerate(mask):
        flag = "x" if row_cover is not None and row_cover[i] else " "
        lines.append(flag + " " + " ".join(_MARK_SYMBOLS[Mark(v)] for v in row))
    return "\n".join(lines)


def print_matrix(matrix, title: str = None):
    """Print a matrix followed by a blank line"""
    print(format_matrix(matrix, title))
    print()
