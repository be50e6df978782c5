"""
Tests for the embeddings ι, ι' and the Side description.
"""

import pytest
from charm.toolbox.pairinggroup import ZR, G1, G2

from gs_commit.embeddings import (
    SIDE_1, SIDE_2,
    linear_map, batch_linear_map, scalar_linear_map, batch_scalar_linear_map,
)
from gs_commit.groups import Com1, Com2

from conftest import T_1, T_2


SOURCE = {SIDE_1: G1, SIDE_2: G2}


def test_sides(key):
    assert SIDE_1.com is Com1 and SIDE_2.com is Com2
    assert SIDE_1.basis(key) is key.u
    assert SIDE_2.basis(key) is key.v
    assert SIDE_1.basis_column(key) == [[key.u1], [key.u2]]
    assert SIDE_2.basis_column(key) == [[key.v1], [key.v2]]
    assert SIDE_1.generator(key) == key.g1
    assert SIDE_2.zero(key) == key.zero_g2


def test_basis_column_ignores_extra_columns(key_2x2):
    assert SIDE_1.basis_column(key_2x2) == [[key_2x2.u[0][0]], [key_2x2.u[1][0]]]


@pytest.mark.parametrize("side", [SIDE_1, SIDE_2])
def test_linear_map(side, key, group):
    x = group.random(SOURCE[side])
    e = linear_map(side, x, key)
    assert isinstance(e, side.com)
    assert e.first == side.zero(key)
    assert e.second == x


@pytest.mark.parametrize("side", [SIDE_1, SIDE_2])
def test_linear_map_homomorphic(side, key, group):
    x, y = group.random(SOURCE[side]), group.random(SOURCE[side])
    assert linear_map(side, x * y, key) == linear_map(side, x, key) + linear_map(side, y, key)


@pytest.mark.parametrize("side", [SIDE_1, SIDE_2])
def test_batch_linear_map(side, key, group):
    xs = [group.random(SOURCE[side]) for _ in range(4)]
    assert batch_linear_map(side, xs, key) == [linear_map(side, x, key) for x in xs]
    assert batch_linear_map(side, [], key) == []


def test_scalar_linear_map_formula(key, zr):
    """ι_1'(z) = z·(u_2 + (O, P1)); for a hiding key this is z·t·u_1."""
    z = zr(9)
    expected = (key.u2 + Com1(key.zero_g1, key.g1)).scalar_mul(z)
    assert scalar_linear_map(SIDE_1, z, key) == expected
    assert scalar_linear_map(SIDE_1, z, key) == key.u1.scalar_mul(z * zr(T_1))
    assert scalar_linear_map(SIDE_2, z, key) == key.v1.scalar_mul(z * zr(T_2))


def test_scalar_linear_map_binding_key(binding_key, zr):
    z = zr(4)
    expected = binding_key.u2.scalar_mul(z) + Com1(binding_key.zero_g1, binding_key.g1 ** z)
    assert scalar_linear_map(SIDE_1, z, binding_key) == expected


@pytest.mark.parametrize("side", [SIDE_1, SIDE_2])
def test_scalar_embedding_distinct_from_group_embedding(side, key, zr):
    """ι'(z) is not ι(P^z)."""
    z = zr(5)
    lifted = side.generator(key) ** z
    assert scalar_linear_map(side, z, key) != linear_map(side, lifted, key)


@pytest.mark.parametrize("side", [SIDE_1, SIDE_2])
def test_scalar_linear_map_additive(side, key, zr):
    a, b = zr(12), zr(30)
    assert scalar_linear_map(side, a + b, key) == scalar_linear_map(side, a, key) + scalar_linear_map(side, b, key)


@pytest.mark.parametrize("side", [SIDE_1, SIDE_2])
def test_scalar_linear_map_injective_on_samples(side, key, zr):
    images = [scalar_linear_map(side, zr(i), key) for i in range(1, 6)]
    for i in range(len(images)):
        for j in range(i + 1, len(images)):
            assert images[i] != images[j]


@pytest.mark.parametrize("side", [SIDE_1, SIDE_2])
def test_batch_scalar_linear_map(side, key, group):
    zs = [group.random(ZR) for _ in range(3)]
    assert batch_scalar_linear_map(side, zs, key) == [scalar_linear_map(side, z, key) for z in zs]
    assert batch_scalar_linear_map(side, [], key) == []
