"""
Group Initialization and Commitment Groups
==========================================

This module handles the initialization of Type-3 asymmetric pairing groups
for the SXDH instantiation of Groth-Sahai commitments, and defines the two
commitment groups built on top of them:

- B1 = G1 × G1  (elements are Com1)
- B2 = G2 × G2  (elements are Com2)

According to charm-crypto documentation (https://jhuisi.github.io/charm/tutorial.html):
- PairingGroup('BN254') and PairingGroup('MNT224') provide asymmetric Type-3 pairings
- G1, G2 are the source groups; GT is the target group
- Group law is written multiplicatively: `a * b`, `a ** r`, inverse `a ** -1`
- Pairing operation: pair(g1_elem, g2_elem) -> GT element

SXDH assumes DDH is hard in both G1 and G2, which is false for symmetric
curves (SS512, SS1024). Those are refused here.
"""

import logging

from charm.toolbox.pairinggroup import PairingGroup, ZR, G1, G2, GT, pair

from .config import config, SYMMETRIC_CURVES

logger = logging.getLogger(__name__)


def setup(group_name: str = None) -> dict:
    """
    Initialize the pairing group for the commitment scheme.

    Parameters
    ----------
    group_name : str, optional
        The pairing curve identifier. Defaults to the configured curve
        (GS_PAIRING_CURVE, 'BN254' unless overridden). If the requested curve
        cannot be initialized, the configured fallback curves are tried in
        order.

    Returns
    -------
    dict
        A dictionary containing:
        - 'group': The PairingGroup object
        - 'group_name': The name of the curve used
        - 'G1', 'G2', 'GT', 'ZR': The charm group type constants
        - 'pair': The pairing function

    Raises
    ------
    ValueError
        If a symmetric curve is requested, or no candidate curve could be
        initialized.

    Examples
    --------
    >>> params = setup('BN254')
    >>> group = params['group']
    >>> P1, P2 = get_generators(group)
    """
    candidates = config.curve_candidates
    if group_name is not None:
        candidates = [group_name] + [name for name in candidates if name != group_name]

    if candidates[0] in SYMMETRIC_CURVES:
        raise ValueError(f"{candidates[0]} is a symmetric curve; SXDH requires a Type-3 pairing")

    errors = []
    for name in candidates:
        if name in SYMMETRIC_CURVES:
            continue
        try:
            group = PairingGroup(name)
        except Exception as e:
            logger.warning("pairing curve %s not available (%s), trying next candidate", name, e)
            errors.append(f"{name}: {e}")
            continue

        if name != candidates[0]:
            logger.warning("falling back to pairing curve %s", name)
        return {
            'group': group,
            'group_name': name,
            'G1': G1,
            'G2': G2,
            'GT': GT,
            'ZR': ZR,
            'pair': pair,
        }

    raise ValueError("No Type-3 pairing curve could be initialized: " + "; ".join(errors))


def get_generators(group: PairingGroup) -> tuple:
    """
    Generate generators (P1, P2) of G1 and G2.

    These are the P used by the embeddings ι(x) = (O, x) and
    ι'(z) = z·(u_2 + (O, P)).
    """
    return group.random(G1), group.random(G2)


class _CommitmentElement:
    """
    An element of a commitment group B = G × G, stored as its two source-group
    coordinates.

    The group law is componentwise. Elements only combine with elements of the
    same commitment group; Com1 and Com2 are deliberately unrelated types.
    """

    __slots__ = ('first', 'second')

    def __init__(self, first, second):
        self.first = first
        self.second = second

    def __add__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return type(self)(self.first * other.first, self.second * other.second)

    def __neg__(self):
        return type(self)(self.first ** -1, self.second ** -1)

    def __sub__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return self + (-other)

    def scalar_mul(self, r):
        """Return r·self, i.e. (first^r, second^r)."""
        return type(self)(self.first ** r, self.second ** r)

    def __eq__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return self.first == other.first and self.second == other.second

    def __ne__(self, other):
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    __hash__ = None

    def __getitem__(self, index):
        return (self.first, self.second)[index]

    def __iter__(self):
        yield self.first
        yield self.second

    def __repr__(self):
        return f"{type(self).__name__}({self.first!r}, {self.second!r})"


class Com1(_CommitmentElement):
    """Element of B1 = G1 × G1."""

    __slots__ = ()


class Com2(_CommitmentElement):
    """Element of B2 = G2 × G2."""

    __slots__ = ()


def commitment_pairing(c1: Com1, c2: Com2) -> list:
    """
    The bilinear map F: B1 × B2 → GT^{2×2}.

    F((a1, a2), (b1, b2)) = [[e(a1, b1), e(a1, b2)],
                             [e(a2, b1), e(a2, b2)]]

    This is the pairing the downstream proof layer checks commitments with.
    Bilinearity carries over from e: F(c1 + c1', c2) = F(c1, c2) ⊙ F(c1', c2)
    entrywise.
    """
    if not isinstance(c1, Com1) or not isinstance(c2, Com2):
        raise TypeError(
            f"commitment_pairing expects (Com1, Com2), got ({type(c1).__name__}, {type(c2).__name__})"
        )
    return [[pair(a, b) for b in c2] for a in c1]
