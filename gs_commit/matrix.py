"""
Matrix Algebra
==============

Small rectangular-array helpers over commitment-group elements and scalars.

A Matrix is a row-major list of lists. The commitment operations are written
as matrix statements on top of these helpers:

    c := ι(X) + R · U      (m × 1)

where ι(X) is the embedded input column, R the m × 2 randomness matrix and U
the 2 × 1 first column of the commitment key.

Element requirements:
- entries being added must support `+`
- the right-hand side of left_mul must support `.scalar_mul(r)` and `+`
"""

from functools import reduce
from operator import add
from typing import List, Tuple, TypeVar

T = TypeVar('T')
Matrix = List[List[T]]


def shape(mat: Matrix) -> Tuple[int, int]:
    """
    Return (rows, cols) of a matrix.

    The empty matrix [] has shape (0, 0).

    Raises
    ------
    ValueError
        If the rows do not all have the same length.
    """
    rows = len(mat)
    if rows == 0:
        return 0, 0
    cols = len(mat[0])
    for i, row in enumerate(mat):
        if len(row) != cols:
            raise ValueError(f"Ragged matrix: row {i} has length {len(row)} != {cols}")
    return rows, cols


def mat_add(a: Matrix, b: Matrix) -> Matrix:
    """Entrywise sum of two matrices of equal shape."""
    if shape(a) != shape(b):
        raise ValueError(f"Shape mismatch in mat_add: {shape(a)} != {shape(b)}")
    return [[x + y for x, y in zip(row_a, row_b)] for row_a, row_b in zip(a, b)]


def left_mul(scalars: Matrix, elems: Matrix) -> Matrix:
    """
    Multiply an m × k scalar matrix into a k × n matrix of group elements.

    Formula:
    --------
    result[i][j] = Σ_{l=0}^{k-1} scalars[i][l] · elems[l][j]

    Parameters
    ----------
    scalars : Matrix
        m × k matrix of scalars (ZR)
    elems : Matrix
        k × n matrix of elements supporting scalar_mul and +

    Returns
    -------
    Matrix
        m × n matrix of elements. For m = 0 this is [].

    Notes
    -----
    There is no neutral element available generically, so k must be at
    least 1.
    """
    m, k = shape(scalars)
    if m == 0:
        return []
    k_elems, n = shape(elems)
    if k == 0:
        raise ValueError("left_mul needs at least one column of scalars")
    if k != k_elems:
        raise ValueError(f"Inner dimensions differ in left_mul: {m}x{k} · {k_elems}x{n}")

    return [
        [reduce(add, (elems[l][j].scalar_mul(row[l]) for l in range(k))) for j in range(n)]
        for row in scalars
    ]


def vec_to_col_vec(vec: List[T]) -> Matrix:
    """[a, b, c] -> [[a], [b], [c]]"""
    return [[x] for x in vec]


def col_vec_to_vec(mat: Matrix) -> List[T]:
    """[[a], [b], [c]] -> [a, b, c]"""
    rows, cols = shape(mat)
    if rows and cols != 1:
        raise ValueError(f"Expected a column vector, got shape {rows}x{cols}")
    return [row[0] for row in mat]


def column(mat: Matrix, j: int) -> Matrix:
    """The j-th column of mat as a rows × 1 matrix."""
    rows, cols = shape(mat)
    if not 0 <= j < cols:
        raise ValueError(f"Column {j} out of range for shape {rows}x{cols}")
    return [[row[j]] for row in mat]
