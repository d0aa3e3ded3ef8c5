# primeserve/prime_utils.py
# Native-width trial division plus the sequence operations built on a primality oracle.

from __future__ import annotations
from dataclasses import dataclass
from typing import List, Optional, Protocol

class PrimalityOracle(Protocol):
    """Anything that answers "is this integer prime?"."""
    def __call__(self, n: int) -> bool: ...

# ---------- Small-integer primality ----------

def is_prime_for_small_integer(n: int) -> bool:
    if n < 2:
        return False
    if n == 2 or n == 3:
        return True
    if n % 2 == 0 or n % 3 == 0:
        return False
    # only 6k ± 1 candidates
    i = 5
    while i * i <= n:
        if n % i == 0 or n % (i + 2) == 0:
            return False
        i += 6
    return True

# ---------- Searches over an oracle ----------

def next_prime(n: int, is_prime_fn: PrimalityOracle) -> int:
    # nothing below 2 is prime
    candidate = max(n + 1, 2)
    while not is_prime_fn(candidate):
        candidate += 1
    return candidate

def previous_prime(n: int, is_prime_fn: PrimalityOracle) -> Optional[int]:
    """Largest prime below n, or None when n <= 2."""
    if n <= 2:
        return None
    candidate = n - 1
    while candidate >= 2 and not is_prime_fn(candidate):
        candidate -= 1
    return candidate if candidate >= 2 else None

def primes_in_range(start: int, end: int, is_prime_fn: PrimalityOracle) -> List[int]:
    return [i for i in range(max(2, start), end + 1) if is_prime_fn(i)]

# ---------- Factorization ----------

@dataclass(frozen=True)
class PrimeFactor:
    prime: int
    exponent: int

def prime_factorization(n: int) -> List[PrimeFactor]:
    """
    Trial-division factorization, ascending by prime.
    Returns [] for n < 2 (1 has the empty factorization).
    """
    if n < 2:
        return []

    factors: List[PrimeFactor] = []
    remaining = n

    exponent = 0
    while remaining % 2 == 0:
        remaining //= 2
        exponent += 1
    if exponent:
        factors.append(PrimeFactor(2, exponent))

    i = 3
    while i * i <= remaining:
        exponent = 0
        while remaining % i == 0:
            remaining //= i
            exponent += 1
        if exponent:
            factors.append(PrimeFactor(i, exponent))
        i += 2

    # whatever survives trial division up to its square root is prime
    if remaining > 1:
        factors.append(PrimeFactor(remaining, 1))
    return factors

def format_prime_factorization(factors: List[PrimeFactor]) -> str:
    if not factors:
        return "1"
    return " × ".join(
        str(f.prime) if f.exponent == 1 else f"{f.prime}^{f.exponent}"
        for f in factors
    )
