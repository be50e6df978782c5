"""
Embeddings into the Commitment Groups
=====================================

The fixed injective maps the commitments are built around:

- ι_1 : G1 → B1,  ι_1(x) = (O, x)
- ι_2 : G2 → B2,  ι_2(y) = (O, y)
- ι_1': Z_p → B1, ι_1'(z) = z · (u_2 + (O, P1))
- ι_2': Z_p → B2, ι_2'(z) = z · (v_2 + (O, P2))

The scalar embedding ι' is a map of its own: it is not ι applied to P^z.

Both halves of the scheme are described by a Side value, so every map here
(and every commitment routine in commit.py) is written once and parametrized
on the side instead of being duplicated for B1 and B2.
"""

from dataclasses import dataclass
from typing import Any, List

from .crs import CommitmentKey
from .groups import Com1, Com2
from .matrix import Matrix, column


@dataclass(frozen=True)
class Side:
    """
    One half of the SXDH commitment scheme.

    name      : 'B1' or 'B2'
    com       : the commitment group element type (Com1 / Com2)
    basis_key : attribute of CommitmentKey holding the basis matrix ('u' / 'v')
    gen_key   : attribute of CommitmentKey holding the generator ('g1' / 'g2')
    zero_key  : attribute of CommitmentKey holding the identity ('zero_g1' / 'zero_g2')
    """

    name: str
    com: type
    basis_key: str
    gen_key: str
    zero_key: str

    def basis(self, key: CommitmentKey) -> Matrix:
        """The full 2 × k basis matrix of this side."""
        return getattr(key, self.basis_key)

    def basis_column(self, key: CommitmentKey) -> Matrix:
        """The 2 × 1 first column [[w_1], [w_2]] of this side's basis."""
        return column(self.basis(key), 0)

    def generator(self, key: CommitmentKey) -> Any:
        return getattr(key, self.gen_key)

    def zero(self, key: CommitmentKey) -> Any:
        return getattr(key, self.zero_key)


SIDE_1 = Side('B1', Com1, 'u', 'g1', 'zero_g1')
SIDE_2 = Side('B2', Com2, 'v', 'g2', 'zero_g2')


def linear_map(side: Side, x, key: CommitmentKey):
    """ι(x) = (O, x)"""
    return side.com(side.zero(key), x)


def batch_linear_map(side: Side, xs: List, key: CommitmentKey) -> List:
    """[ι(x_1), ..., ι(x_m)]"""
    zero = side.zero(key)
    return [side.com(zero, x) for x in xs]


def _scalar_direction(side: Side, key: CommitmentKey):
    # w = w_2 + (O, P)
    w2 = side.basis(key)[1][0]
    return w2 + side.com(side.zero(key), side.generator(key))


def scalar_linear_map(side: Side, z, key: CommitmentKey):
    """ι'(z) = z · (w_2 + (O, P)) where w_2 is u_2 (B1) or v_2 (B2)."""
    return _scalar_direction(side, key).scalar_mul(z)


def batch_scalar_linear_map(side: Side, zs: List, key: CommitmentKey) -> List:
    """[ι'(z_1), ..., ι'(z_m)]"""
    w = _scalar_direction(side, key)
    return [w.scalar_mul(z) for z in zs]
