"""
Groth-Sahai Commitments (SXDH)
==============================

The commitment phase of the Groth-Sahai non-interactive proof system in the
SXDH setting: elements of G1, G2 or Z_p are embedded, under fresh randomness,
into the commitment groups B1 = G1 × G1 and B2 = G2 × G2.

Built on charm-crypto Type-3 asymmetric pairing curves.

Modules:
--------
- config: Environment configuration (pairing curve)
- groups: Group initialization, commitment group elements Com1 / Com2
- matrix: Rectangular matrix helpers (add, left_mul, column vectors)
- crs: The commitment key (u, v) and its validation
- embeddings: The maps ι, ι' and the Side description of B1 / B2
- randomness: Randomness sources for commitments
- commit: The commitment operations

Usage:
------
    from gs_commit import setup, CommitmentKey, GroupRandomness
    from gs_commit.commit import commit_G1, batch_commit_scalar_to_B2

    params = setup('BN254')
    key = CommitmentKey(params['group'], P1, P2, u, v)   # u, v from a trusted setup
    rng = GroupRandomness(params['group'])

    c = commit_G1(x, key, rng)
    ds = batch_commit_scalar_to_B2(scalars, key, rng)
"""

__version__ = "0.1.0"

from .groups import setup, Com1, Com2
from .crs import CommitmentKey, MalformedKeyError
from .randomness import RandomSource, GroupRandomness, SeededRandomness

__all__ = [
    'setup', 'Com1', 'Com2',
    'CommitmentKey', 'MalformedKeyError',
    'RandomSource', 'GroupRandomness', 'SeededRandomness',
]
