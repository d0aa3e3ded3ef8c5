__version__ = "1.0.0"

from .dispatch import MAX_SAFE_INTEGER, IntegerValue, Magnitude, is_prime
from .miller_rabin import (
    DETERMINISTIC_LIMIT,
    WITNESS_BASES,
    is_deterministic,
    is_prime_for_big_integer,
    miller_rabin_test,
    mod_pow,
)
from .prime_utils import (
    PrimalityOracle,
    PrimeFactor,
    format_prime_factorization,
    is_prime_for_small_integer,
    next_prime,
    previous_prime,
    prime_factorization,
    primes_in_range,
)

__all__ = [
    "DETERMINISTIC_LIMIT", "MAX_SAFE_INTEGER", "WITNESS_BASES",
    "IntegerValue", "Magnitude", "PrimalityOracle", "PrimeFactor",
    "format_prime_factorization", "is_deterministic", "is_prime",
    "is_prime_for_big_integer", "is_prime_for_small_integer", "miller_rabin_test",
    "mod_pow", "next_prime", "previous_prime", "prime_factorization", "primes_in_range",
]
