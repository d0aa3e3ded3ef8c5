# primeserve/miller_rabin.py
# Large-integer primality: square-and-multiply modpow + deterministic Miller–Rabin.
#
# The witness set below is proven to classify every n < 2^64 exactly.
# It is applied unchanged to larger n, where it is only a strong
# probable-prime test (the 12-prime strong pseudoprime
# 318665857834031151167461 slips through, for instance).

from __future__ import annotations
import logging

from gmpy2 import mpz

log = logging.getLogger(__name__)

WITNESS_BASES = (2, 3, 5, 7, 11, 13, 17, 19, 23, 29, 31, 37)
DETERMINISTIC_LIMIT = 1 << 64

# ---------- Modular exponentiation ----------

def mod_pow(base, exponent, modulus) -> mpz:
    """base^exponent mod modulus, always in [0, modulus)."""
    base, exponent, modulus = mpz(base), mpz(exponent), mpz(modulus)
    if exponent < 0:
        raise ValueError("exponent must be non-negative")
    if modulus <= 0:
        raise ValueError("modulus must be positive")

    result = mpz(1) % modulus
    base = base % modulus
    while exponent > 0:
        if exponent & 1:
            result = (result * base) % modulus
        base = (base * base) % modulus
        exponent >>= 1
    return result

# ---------- Miller–Rabin ----------

def is_deterministic(n) -> bool:
    """True when the fixed witness set is proven exact for n."""
    return n < DETERMINISTIC_LIMIT

def _decompose(n: mpz) -> tuple[mpz, int]:
    # n - 1 = d * 2^r with d odd
    d = n - 1
    r = 0
    while d % 2 == 0:
        d //= 2
        r += 1
    return d, r

def miller_rabin_test(n) -> bool:
    n = mpz(n)
    if n < 2:
        return False
    if n == 2 or n == 3:
        return True
    if n % 2 == 0:
        return False

    if not is_deterministic(n):
        log.debug("%d-bit input is past the proven witness range", n.bit_length())

    d, r = _decompose(n)
    for a in WITNESS_BASES:
        if a >= n:
            continue
        x = mod_pow(a, d, n)
        if x == 1 or x == n - 1:
            continue
        for _ in range(r - 1):
            x = (x * x) % n
            if x == n - 1:
                break
        else:
            return False
    return True

def is_prime_for_big_integer(n) -> bool:
    return miller_rabin_test(n)
