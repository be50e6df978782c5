"""
Commitment Generation
=====================

This module commits elements of G1, G2 or Z_p into the Groth-Sahai
commitment groups B1, B2 for the SXDH instantiation:

- G1 → B1:   c := ι_1(x) + r_1 u_1 + r_2 u_2
- Z_p → B1:  c := ι_1'(x) + r u_1
- G2 → B2:   d := ι_2(y) + s_1 v_1 + s_2 v_2
- Z_p → B2:  d := ι_2'(y) + s v_1

In matrix form, for m inputs at once:

    c := ι(X) + R · [[w_1], [w_2]]      R ∈ Z_p^{m×2}   (group elements)
    c := ι'(X) + r · [[w_1]]             r ∈ Z_p^{m×1}   (scalars)

Every routine is written once, parametrized on the Side (B1 with u, B2 with
v). A single-element commitment is the one-row case of the batch routine, so
batch and single commitments agree exactly when given the same randomness.

Randomness:
-----------
The random variants draw fresh scalars from the RandomSource passed in and
discard them. The *_with variants take the randomness explicitly, for callers
(proof construction) that need to keep it. Group commitments draw two
independent scalars per input; scalar commitments draw one.
"""

import logging
from typing import List

from charm.toolbox.pairinggroup import ZR

from .crs import CommitmentKey
from .embeddings import (
    Side, SIDE_1, SIDE_2,
    batch_linear_map, batch_scalar_linear_map,
)
from .groups import Com1, Com2
from .matrix import Matrix, shape, mat_add, left_mul, vec_to_col_vec, col_vec_to_vec
from .randomness import RandomSource

logger = logging.getLogger(__name__)


def sample_group_randomness(m: int, rng: RandomSource) -> Matrix:
    """Draw the m × 2 randomness matrix R for m group-element commitments."""
    return rng.matrix(m, 2)


def sample_scalar_randomness(m: int, rng: RandomSource) -> Matrix:
    """Draw the m × 1 randomness matrix r for m scalar commitments."""
    return rng.matrix(m, 1)


def _check_randomness(R: Matrix, m: int, cols: int) -> None:
    rows, r_cols = shape(R)
    if rows != m:
        raise ValueError(f"Randomness has {rows} rows, expected one per input (m={m})")
    if m and r_cols != cols:
        raise ValueError(f"Randomness must be {m}x{cols}, got {rows}x{r_cols}")


def commit_group_with(side: Side, xvars: List, R: Matrix, key: CommitmentKey) -> List:
    """
    Commit source-group elements with explicit randomness.

    Formula:
    --------
    c := ι(X) + R · [[w_1], [w_2]]   (m × 1 matrix)

    where (w_1, w_2) = (u_1, u_2) on B1 and (v_1, v_2) on B2.

    Parameters
    ----------
    side : Side
        SIDE_1 (G1 → B1) or SIDE_2 (G2 → B2)
    xvars : List
        The m source-group elements
    R : Matrix
        The m × 2 randomness matrix; row i randomizes xvars[i]
    key : CommitmentKey
        The commitment key

    Returns
    -------
    List
        The m commitments, in input order

    Raises
    ------
    ValueError
        If R is not m × 2
    """
    m = len(xvars)
    _check_randomness(R, m, 2)
    if m == 0:
        return []

    # ι(X) = [ (O, X_1), ..., (O, X_m) ] (m × 1 matrix)
    lin_x = vec_to_col_vec(batch_linear_map(side, xvars, key))

    # c := ι(X) + R w (m × 1 matrix)
    coms = mat_add(lin_x, left_mul(R, side.basis_column(key)))

    return col_vec_to_vec(coms)


def commit_scalar_with(side: Side, scalar_xvars: List[ZR], r: Matrix, key: CommitmentKey) -> List:
    """
    Commit scalars with explicit randomness.

    Formula:
    --------
    c := ι'(x) + r · [[w_1]]   (m' × 1 matrix)

    Parameters
    ----------
    side : Side
        SIDE_1 (Z_p → B1) or SIDE_2 (Z_p → B2)
    scalar_xvars : List[ZR]
        The m' scalars
    r : Matrix
        The m' × 1 randomness matrix
    key : CommitmentKey
        The commitment key

    Raises
    ------
    ValueError
        If r is not m' × 1
    """
    mprime = len(scalar_xvars)
    _check_randomness(r, mprime, 1)
    if mprime == 0:
        return []

    slin_x = vec_to_col_vec(batch_scalar_linear_map(side, scalar_xvars, key))
    w1 = side.basis_column(key)[:1]

    # c := ι'(x) + r w_1 (m' × 1 matrix)
    coms = mat_add(slin_x, left_mul(r, w1))

    return col_vec_to_vec(coms)


def commit_group(side: Side, xvar, key: CommitmentKey, rng: RandomSource):
    """Commit one source-group element: c := ι(x) + r_1 w_1 + r_2 w_2."""
    R = sample_group_randomness(1, rng)
    return commit_group_with(side, [xvar], R, key)[0]


def batch_commit_group(side: Side, xvars: List, key: CommitmentKey, rng: RandomSource) -> List:
    """Commit every source-group element in xvars, each with its own fresh row of R."""
    m = len(xvars)
    logger.debug("committing %d source-group elements into %s", m, side.name)
    R = sample_group_randomness(m, rng)
    return commit_group_with(side, xvars, R, key)


def commit_scalar(side: Side, scalar_xvar: ZR, key: CommitmentKey, rng: RandomSource):
    """Commit one scalar: c := ι'(x) + r w_1."""
    r = sample_scalar_randomness(1, rng)
    return commit_scalar_with(side, [scalar_xvar], r, key)[0]


def batch_commit_scalar(side: Side, scalar_xvars: List[ZR], key: CommitmentKey,
                        rng: RandomSource) -> List:
    """Commit every scalar in scalar_xvars, each with its own fresh randomizer."""
    mprime = len(scalar_xvars)
    logger.debug("committing %d scalars into %s", mprime, side.name)
    r = sample_scalar_randomness(mprime, rng)
    return commit_scalar_with(side, scalar_xvars, r, key)


def verify_group_opening(side: Side, com, xvar, r_row: List[ZR], key: CommitmentKey) -> bool:
    """
    Check that com opens to xvar with randomness (r_1, r_2).

    Returns True iff com == ι(x) + r_1 w_1 + r_2 w_2.
    """
    return commit_group_with(side, [xvar], [list(r_row)], key)[0] == com


def verify_scalar_opening(side: Side, com, scalar_xvar: ZR, r_row: List[ZR],
                          key: CommitmentKey) -> bool:
    """
    Check that com opens to the scalar with randomness (r,).

    Returns True iff com == ι'(x) + r w_1.
    """
    return commit_scalar_with(side, [scalar_xvar], [list(r_row)], key)[0] == com


# ============================================================================
# B1 side
# ============================================================================

def commit_G1(xvar, key: CommitmentKey, rng: RandomSource) -> Com1:
    """
    Commit a single G1 element to B1.

    c := ι_1(x) + r_1 u_1 + r_2 u_2

    Examples
    --------
    >>> c = commit_G1(x, key, GroupRandomness(key.group))
    """
    return commit_group(SIDE_1, xvar, key, rng)


def batch_commit_G1(xvars: List, key: CommitmentKey, rng: RandomSource) -> List[Com1]:
    """Commit all G1 elements in the list to the corresponding element of B1."""
    return batch_commit_group(SIDE_1, xvars, key, rng)


def commit_G1_with(xvars: List, R: Matrix, key: CommitmentKey) -> List[Com1]:
    """Commit G1 elements to B1 with an explicit m × 2 randomness matrix R."""
    return commit_group_with(SIDE_1, xvars, R, key)


def commit_scalar_to_B1(scalar_xvar: ZR, key: CommitmentKey, rng: RandomSource) -> Com1:
    """
    Commit a single scalar to B1.

    c := ι_1'(x) + r u_1
    """
    return commit_scalar(SIDE_1, scalar_xvar, key, rng)


def batch_commit_scalar_to_B1(scalar_xvars: List[ZR], key: CommitmentKey,
                              rng: RandomSource) -> List[Com1]:
    """Commit all scalars in the list to the corresponding element of B1."""
    return batch_commit_scalar(SIDE_1, scalar_xvars, key, rng)


def commit_scalar_to_B1_with(scalar_xvars: List[ZR], r: Matrix, key: CommitmentKey) -> List[Com1]:
    """Commit scalars to B1 with an explicit m' × 1 randomness matrix r."""
    return commit_scalar_with(SIDE_1, scalar_xvars, r, key)


# ============================================================================
# B2 side
# ============================================================================

def commit_G2(yvar, key: CommitmentKey, rng: RandomSource) -> Com2:
    """
    Commit a single G2 element to B2.

    d := ι_2(y) + s_1 v_1 + s_2 v_2
    """
    return commit_group(SIDE_2, yvar, key, rng)


def batch_commit_G2(yvars: List, key: CommitmentKey, rng: RandomSource) -> List[Com2]:
    """Commit all G2 elements in the list to the corresponding element of B2."""
    return batch_commit_group(SIDE_2, yvars, key, rng)


def commit_G2_with(yvars: List, S: Matrix, key: CommitmentKey) -> List[Com2]:
    """Commit G2 elements to B2 with an explicit n × 2 randomness matrix S."""
    return commit_group_with(SIDE_2, yvars, S, key)


def commit_scalar_to_B2(scalar_yvar: ZR, key: CommitmentKey, rng: RandomSource) -> Com2:
    """
    Commit a single scalar to B2.

    d := ι_2'(y) + s v_1
    """
    return commit_scalar(SIDE_2, scalar_yvar, key, rng)


def batch_commit_scalar_to_B2(scalar_yvars: List[ZR], key: CommitmentKey,
                              rng: RandomSource) -> List[Com2]:
    """Commit all scalars in the list to the corresponding element of B2."""
    return batch_commit_scalar(SIDE_2, scalar_yvars, key, rng)


def commit_scalar_to_B2_with(scalar_yvars: List[ZR], s: Matrix, key: CommitmentKey) -> List[Com2]:
    """Commit scalars to B2 with an explicit n' × 1 randomness matrix s."""
    return commit_scalar_with(SIDE_2, scalar_yvars, s, key)
