from math import gcd

from lcgcrack.modmath import normalized_mod, extended_gcd, modular_inverse, gcd_all

def test_normalized_mod_is_never_negative():
    assert normalized_mod(-1, 5) == 4
    assert normalized_mod(-10, 5) == 0
    assert normalized_mod(7, 5) == 2
    assert normalized_mod(-(2**130) - 3, 2**64) == (2**64 - 3)
    for a in range(-50, 50):
        r = normalized_mod(a, 7)
        assert 0 <= r < 7
        assert (r - a) % 7 == 0

def test_extended_gcd_bezout():
    cases = [(240, 46), (46, 240), (17, 5), (0, 9), (9, 0), (2**89 - 1, 2**61 - 1)]
    for x, y in cases:
        g, p, q = extended_gcd(x, y)
        assert p * x + q * y == g
        assert g == gcd(x, y)

def test_modular_inverse_known_values():
    assert modular_inverse(3, 7) == 5
    assert modular_inverse(10, 7) == 5     # 10 = 3 mod 7
    assert modular_inverse(-3, 7) == 2     # -3 = 4 mod 7
    assert modular_inverse(16807, 0x7FFFFFFF) == 1407677000
    assert modular_inverse(0, 1) == 0

def test_modular_inverse_absent_when_not_coprime():
    assert modular_inverse(4, 8) is None
    assert modular_inverse(0, 8) is None
    assert modular_inverse(6, 9) is None
    assert modular_inverse(5, 0) is None

def test_modular_inverse_property():
    m = 479001599
    for a in (2, 5039, 76581, m - 1, -12345, 3 * m + 7):
        inv = modular_inverse(a, m)
        assert inv is not None
        assert 0 <= inv < m
        assert (a * inv) % m == 1

def test_gcd_all_folds_from_zero():
    assert gcd_all([]) == 0
    assert gcd_all([0, 0]) == 0
    assert gcd_all([0, 12, 18]) == 6
    assert gcd_all([-12, 18]) == 6
