"""
Randomness Sources
==================

Every commitment draws fresh scalars from a caller-supplied RandomSource.

Precondition (not checked): production callers pass a source whose output is
cryptographically secure and never shared between two commitments. A
predictable or repeating source does not raise anything, it silently makes
commitments non-hiding.

Sources:
--------
- GroupRandomness: charm's group.random(ZR), draws serialized by a lock so
  concurrent callers never observe the same output
- SeededRandomness: deterministic counter-mode hashing to ZR, for tests and
  reproducible transcripts only

Draw order:
-----------
matrix(rows, cols) draws row by row, so a batch of m rows consumes the source
exactly like m consecutive single draws of `cols` scalars.
"""

import logging
import threading
from abc import ABC, abstractmethod
from typing import List, Union

from charm.toolbox.pairinggroup import PairingGroup, ZR

logger = logging.getLogger(__name__)


class RandomSource(ABC):
    """A source of uniform scalars in Z_p."""

    @abstractmethod
    def scalar(self) -> ZR:
        """Draw one scalar."""

    def scalars(self, count: int) -> List[ZR]:
        return [self.scalar() for _ in range(count)]

    def matrix(self, rows: int, cols: int) -> List[List[ZR]]:
        """Draw a rows × cols scalar matrix, row-major."""
        return [self.scalars(cols) for _ in range(rows)]


class GroupRandomness(RandomSource):
    """Uniform scalars from the pairing group's own RNG."""

    def __init__(self, group: PairingGroup):
        self.group = group
        self._lock = threading.Lock()

    def scalar(self) -> ZR:
        with self._lock:
            return self.group.random(ZR)


class SeededRandomness(RandomSource):
    """
    Deterministic scalar stream derived from a seed.

    Formula:
    --------
    r_i = H(prefix || seed || i) ∈ Z_p,  i = 0, 1, 2, ...

    Domain separation: uses prefix b"GSRAND"

    Two instances built from the same group and seed produce the same
    sequence. The counter is advanced under a lock, so concurrent callers
    sharing one instance never receive the same index.

    Not for production use: anyone who knows the seed can open every
    commitment made with it.
    """

    PREFIX = b"GSRAND"

    def __init__(self, group: PairingGroup, seed: Union[bytes, str, int]):
        if isinstance(seed, str):
            seed = seed.encode('utf-8')
        elif isinstance(seed, int):
            seed = seed.to_bytes(32, 'big')
        self.group = group
        self._seed = bytes(seed)
        self._counter = 0
        self._lock = threading.Lock()
        logger.warning("SeededRandomness in use: commitments made with it are not hiding")

    def scalar(self) -> ZR:
        with self._lock:
            i = self._counter
            self._counter += 1
            return self.group.hash(self.PREFIX + self._seed + i.to_bytes(8, 'big'), ZR)
