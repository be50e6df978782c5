"""
Commitment engine configuration
Pairing curve selection read from the environment
"""

import os

# Defaults
DEFAULT_PAIRING_CURVE = 'BN254'
DEFAULT_FALLBACK_CURVES = 'MNT224'

# Symmetric (Type-1) curves: SXDH does not hold there
SYMMETRIC_CURVES = ('SS512', 'SS1024')


class Config:
    """Configuration read from GS_* environment variables."""

    def __init__(self):
        self.pairing_curve = os.getenv('GS_PAIRING_CURVE', DEFAULT_PAIRING_CURVE)
        fallback = os.getenv('GS_FALLBACK_CURVES', DEFAULT_FALLBACK_CURVES)
        self.fallback_curves = [name.strip() for name in fallback.split(',') if name.strip()]

    @property
    def curve_candidates(self):
        candidates = [self.pairing_curve]
        for name in self.fallback_curves:
            if name not in candidates:
                candidates.append(name)
        return candidates


# Global configuration instance
config = Config()
