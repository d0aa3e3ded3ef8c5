# primeserve/dispatch.py
# Magnitude dispatch: the one place that decides which checker answers.

from __future__ import annotations
import enum
from dataclasses import dataclass
from typing import Callable, Dict, Union

from gmpy2 import mpz

from .miller_rabin import is_prime_for_big_integer
from .prime_utils import is_prime_for_small_integer

# largest integer an IEEE-754 double holds exactly (2^53 - 1)
MAX_SAFE_INTEGER = (1 << 53) - 1

class Magnitude(enum.Enum):
    NATIVE = "native"
    ARBITRARY = "arbitrary"

@dataclass(frozen=True)
class IntegerValue:
    value: Union[int, mpz]
    magnitude: Magnitude

    @classmethod
    def of(cls, n: Union[int, float, str, mpz]) -> IntegerValue:
        """Tag n with the magnitude tier that can represent it exactly."""
        if isinstance(n, bool):
            raise TypeError("bool is not an integer value")
        if isinstance(n, mpz):
            return cls(n, Magnitude.ARBITRARY)
        if isinstance(n, str):
            return cls(mpz(n.strip()), Magnitude.ARBITRARY)
        if isinstance(n, float):
            if not n.is_integer():
                raise ValueError(f"{n!r} is not an integer")
            n = int(n)
        if not isinstance(n, int):
            raise TypeError(f"unsupported integer type: {type(n).__name__}")
        if abs(n) > MAX_SAFE_INTEGER:
            return cls(mpz(n), Magnitude.ARBITRARY)
        return cls(n, Magnitude.NATIVE)

_CHECKERS: Dict[Magnitude, Callable[..., bool]] = {
    Magnitude.NATIVE: is_prime_for_small_integer,
    Magnitude.ARBITRARY: is_prime_for_big_integer,
}

def is_prime(n) -> bool:
    """Primality oracle for any supported integer representation."""
    value = n if isinstance(n, IntegerValue) else IntegerValue.of(n)
    return _CHECKERS[value.magnitude](value.value)
