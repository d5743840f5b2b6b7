# src/lcgcrack/crack.py
"""
Recover (m, a, c) of an unknown LCG from consecutive outputs.

With d[i] = v[i+1] - v[i], every d[i+2]*d[i] - d[i+1]**2 is a multiple of
the true modulus, so their gcd is the modulus or a multiple of it. More
samples make a spurious extra factor less likely; a short sequence can
give a wrong answer.
"""

import logging
from typing import List, Optional, Sequence

from . import config
from .config import CrackFlags
from .lcg import LCG
from .modmath import gcd_all, modular_inverse, normalized_mod

logger = logging.getLogger(__name__)

def differences(values: Sequence[int]) -> List[int]:
    return [b - a for a, b in zip(values, values[1:])]

def second_difference_products(diffs: Sequence[int]) -> List[int]:
    return [d2 * d0 - d1 * d1 for d0, d1, d2 in zip(diffs, diffs[1:], diffs[2:])]

def recover_modulus(values: Sequence[int]) -> Optional[int]:
    """
    gcd of the second-difference products, or None when it comes out 0
    (fewer than four values, or every product is zero).
    """
    m = gcd_all(second_difference_products(differences(values)))
    if m == 0:
        return None
    return m

def _replays(lcg: LCG, values: Sequence[int]) -> bool:
    x = values[0]
    for want in values[1:]:
        x = normalized_mod(x * lcg.a + lcg.c, lcg.m)
        if x != want:
            return False
    return True

def crack_lcg(values: Sequence[int], flags: Optional[CrackFlags] = None) -> Optional[LCG]:
    """
    Derive the generator that produced `values`, positioned at the last one,
    so advance() continues the sequence. None when recovery is impossible.
    """
    if flags is None:
        flags = config.FLAGS
    values = list(values)
    for v in values:
        if not isinstance(v, int):
            raise TypeError(f"observed values must be ints, got {v!r}")
    if len(values) < flags.min_samples:
        logger.debug("crack_lcg: %d values is not enough", len(values))
        return None

    m = recover_modulus(values)
    if m is None:
        logger.debug("crack_lcg: second differences are all zero, no modulus")
        return None

    inv_d0 = modular_inverse(values[1] - values[0], m)
    if inv_d0 is None:
        logger.debug("crack_lcg: v1 - v0 has no inverse mod %d", m)
        return None
    a = normalized_mod((values[2] - values[1]) * inv_d0, m)
    c = normalized_mod(values[1] - values[0] * a, m)

    last = values[-1]
    if not 0 <= last < m:
        logger.debug("crack_lcg: last value %d is outside [0, %d)", last, m)
        return None
    lcg = LCG(state=last, a=a, c=c, m=m)

    if flags.verify and not _replays(lcg, values):
        logger.debug("crack_lcg: candidate m=%d a=%d c=%d does not replay the input", m, a, c)
        return None
    return lcg
