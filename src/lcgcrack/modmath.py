# src/lcgcrack/modmath.py
"""
Exact modular arithmetic on Python ints: a modulo that always lands in
[0, m), extended Euclid, and the modular inverse built on it.
"""

from math import gcd
from typing import Iterable, Optional, Tuple

def normalized_mod(a: int, m: int) -> int:
    """Return a mod m constrained to [0, m) for any integer a and m > 0."""
    return ((a % m) + m) % m

def extended_gcd(x: int, y: int) -> Tuple[int, int, int]:
    """
    Return (g, p, q) with p*x + q*y == g == gcd(x, y).
    Both arguments are expected to be non-negative.
    """
    p0, p1 = 1, 0
    q0, q1 = 0, 1
    while y != 0:
        k, r = divmod(x, y)
        x, y = y, r
        p0, p1 = p1, p0 - k * p1
        q0, q1 = q1, q0 - k * q1
    return x, p0, q0

def modular_inverse(a: int, m: int) -> Optional[int]:
    """
    Multiplicative inverse of a modulo m, or None when gcd(a, m) != 1.

    a is reduced into [0, m) first, which makes m the larger operand and
    the dividend of the Euclid loop. Negative a is fine.
    """
    if m <= 0:
        return None
    g, _, coef = extended_gcd(m, normalized_mod(a, m))
    if g != 1:
        return None
    return normalized_mod(coef, m)

def gcd_all(values: Iterable[int]) -> int:
    # Fold from 0: zeros drop out, an empty input stays 0.
    g = 0
    for v in values:
        g = gcd(g, v)
    return g
