"""
Shared fixtures: pairing group, commitment keys built from known trapdoors,
seeded randomness.
"""

import os
import sys

import pytest
from charm.toolbox.pairinggroup import ZR, G1, G2

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from gs_commit.groups import setup, get_generators, Com1, Com2
from gs_commit.crs import CommitmentKey


# Trapdoors for the test keys: u_1 = (P1, a1·P1), u_2 = t1·u_1 - (O, P1)
ALPHA_1, T_1 = 3, 5
ALPHA_2, T_2 = 7, 11


def make_basis(com, P, zero, alpha, t, hiding=True):
    """Rows [w_1], [w_2] of an SXDH basis: hiding (w_2 = t·w_1 - (O, P)) or binding (w_2 = t·w_1)."""
    w1 = com(P, P ** alpha)
    w2 = w1.scalar_mul(t)
    if hiding:
        w2 = w2 - com(zero, P)
    return [[w1], [w2]]


def make_key(group, P1, P2, hiding=True, extra_column=False):
    z = group.init(ZR, 0)
    zero1, zero2 = P1 ** z, P2 ** z
    u = make_basis(Com1, P1, zero1, group.init(ZR, ALPHA_1), group.init(ZR, T_1), hiding)
    v = make_basis(Com2, P2, zero2, group.init(ZR, ALPHA_2), group.init(ZR, T_2), hiding)
    if extra_column:
        u = [row + [Com1(group.random(G1), group.random(G1))] for row in u]
        v = [row + [Com2(group.random(G2), group.random(G2))] for row in v]
    return CommitmentKey(group, P1, P2, u, v)


@pytest.fixture(scope="session")
def pairing_params():
    """Initialize pairing group."""
    return setup('BN254')


@pytest.fixture(scope="session")
def group(pairing_params):
    return pairing_params['group']


@pytest.fixture(scope="session")
def generators(group):
    return get_generators(group)


@pytest.fixture(scope="session")
def key(group, generators):
    """Hiding key with a 2x1 basis per side."""
    P1, P2 = generators
    return make_key(group, P1, P2)


@pytest.fixture(scope="session")
def binding_key(group, generators):
    P1, P2 = generators
    return make_key(group, P1, P2, hiding=False)


@pytest.fixture(scope="session")
def key_2x2(group, generators):
    """Hiding key whose matrices carry a second, unused column."""
    P1, P2 = generators
    return make_key(group, P1, P2, extra_column=True)


@pytest.fixture
def zr(group):
    """Shorthand: zr(5) -> 5 ∈ Z_p"""
    return lambda value: group.init(ZR, value)
