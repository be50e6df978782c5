"""
Commitment Key (CRS)
====================

The public commitment key of the SXDH instantiation consists of two matrices
of commitment-group elements:

- u ∈ B1^{2×k}:  rows u_1, u_2 (first column) used on the G1 / B1 side
- v ∈ B2^{2×k}:  rows v_1, v_2 (first column) used on the G2 / B2 side

together with the generators P1 ∈ G1, P2 ∈ G2 used by the scalar embedding.

Only the first column of each matrix is read when committing. The key is
generated elsewhere (trusted setup); this module only validates and holds it.
A key with the wrong shape is rejected here, when it is constructed.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, List

from charm.toolbox.pairinggroup import PairingGroup, ZR

from .groups import Com1, Com2
from .matrix import shape

logger = logging.getLogger(__name__)


class MalformedKeyError(ValueError):
    """The commitment key does not have the structure the scheme requires."""


def _check_basis(name: str, mat, com_type) -> None:
    if not isinstance(mat, (list, tuple)):
        raise MalformedKeyError(f"{name} must be a 2xk matrix, got {type(mat).__name__}")
    try:
        rows, cols = shape(mat)
    except (TypeError, ValueError) as e:
        raise MalformedKeyError(f"{name} is not a rectangular matrix: {e}") from e
    if rows != 2:
        raise MalformedKeyError(f"{name} must have exactly 2 rows, got {rows}")
    if cols < 1:
        raise MalformedKeyError(f"{name} must have at least one column")
    for i, row in enumerate(mat):
        for j, entry in enumerate(row):
            if not isinstance(entry, com_type):
                raise MalformedKeyError(
                    f"{name}[{i}][{j}] must be {com_type.__name__}, got {type(entry).__name__}"
                )


@dataclass(frozen=True, eq=False)
class CommitmentKey:
    """
    Immutable SXDH commitment key.

    Parameters
    ----------
    group : PairingGroup
        The pairing group the key lives in
    g1 : G1
        Generator P1 of G1
    g2 : G2
        Generator P2 of G2
    u : List[List[Com1]]
        2 × k matrix over B1
    v : List[List[Com2]]
        2 × k matrix over B2

    Raises
    ------
    MalformedKeyError
        If any matrix has the wrong shape or entry type, or a generator is missing.
    """

    group: PairingGroup
    g1: Any
    g2: Any
    u: List[List[Com1]]
    v: List[List[Com2]]
    zero_g1: Any = field(init=False, repr=False, compare=False)
    zero_g2: Any = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        if self.group is None:
            raise MalformedKeyError("Commitment key needs a pairing group")
        if self.g1 is None or self.g2 is None:
            raise MalformedKeyError("Commitment key needs generators for G1 and G2")
        _check_basis('u', self.u, Com1)
        _check_basis('v', self.v, Com2)

        # Freeze the rows so the shared key cannot be mutated through u / v
        object.__setattr__(self, 'u', tuple(tuple(row) for row in self.u))
        object.__setattr__(self, 'v', tuple(tuple(row) for row in self.v))

        zero = self.group.init(ZR, 0)
        object.__setattr__(self, 'zero_g1', self.g1 ** zero)
        object.__setattr__(self, 'zero_g2', self.g2 ** zero)

        logger.debug("commitment key accepted: u is 2x%d, v is 2x%d", len(self.u[0]), len(self.v[0]))

    @property
    def u1(self) -> Com1:
        return self.u[0][0]

    @property
    def u2(self) -> Com1:
        return self.u[1][0]

    @property
    def v1(self) -> Com2:
        return self.v[0][0]

    @property
    def v2(self) -> Com2:
        return self.v[1][0]
