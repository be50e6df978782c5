"""
Tests for commitment key validation.
"""

import pytest
from charm.toolbox.pairinggroup import ZR, G1, G2

from gs_commit.crs import CommitmentKey, MalformedKeyError
from gs_commit.groups import Com1, Com2


def _com1(group):
    return Com1(group.random(G1), group.random(G1))


def _com2(group):
    return Com2(group.random(G2), group.random(G2))


def test_key_accessors(key):
    assert key.u1 is key.u[0][0]
    assert key.u2 is key.u[1][0]
    assert key.v1 is key.v[0][0]
    assert key.v2 is key.v[1][0]


def test_key_identities(key, group):
    assert key.zero_g1 * key.g1 == key.g1
    assert key.zero_g2 * key.g2 == key.g2
    assert key.g1 ** group.init(ZR, 0) == key.zero_g1


def test_key_accepts_2x2(key_2x2):
    assert len(key_2x2.u) == 2 and len(key_2x2.u[0]) == 2
    assert len(key_2x2.v) == 2 and len(key_2x2.v[0]) == 2


def test_key_is_immutable(key, group):
    with pytest.raises(AttributeError):
        key.u = []
    with pytest.raises(TypeError):
        key.u[0][0] = _com1(group)


@pytest.mark.parametrize("rows", [0, 1, 3])
def test_key_wrong_row_count(group, generators, rows):
    P1, P2 = generators
    u = [[_com1(group)] for _ in range(rows)]
    v = [[_com2(group)], [_com2(group)]]
    with pytest.raises(MalformedKeyError):
        CommitmentKey(group, P1, P2, u, v)


def test_key_no_columns(group, generators):
    P1, P2 = generators
    u = [[_com1(group)], [_com1(group)]]
    with pytest.raises(MalformedKeyError):
        CommitmentKey(group, P1, P2, u, [[], []])


def test_key_ragged(group, generators):
    P1, P2 = generators
    u = [[_com1(group), _com1(group)], [_com1(group)]]
    v = [[_com2(group)], [_com2(group)]]
    with pytest.raises(MalformedKeyError):
        CommitmentKey(group, P1, P2, u, v)


def test_key_wrong_side_entries(group, generators):
    """u must live in B1 and v in B2."""
    P1, P2 = generators
    u = [[_com1(group)], [_com1(group)]]
    v = [[_com2(group)], [_com2(group)]]
    with pytest.raises(MalformedKeyError):
        CommitmentKey(group, P1, P2, v, u)


def test_key_missing_parts(group, generators):
    P1, P2 = generators
    u = [[_com1(group)], [_com1(group)]]
    v = [[_com2(group)], [_com2(group)]]
    with pytest.raises(MalformedKeyError):
        CommitmentKey(None, P1, P2, u, v)
    with pytest.raises(MalformedKeyError):
        CommitmentKey(group, None, P2, u, v)
    with pytest.raises(MalformedKeyError):
        CommitmentKey(group, P1, P2, None, v)


def test_malformed_key_is_value_error():
    assert issubclass(MalformedKeyError, ValueError)
