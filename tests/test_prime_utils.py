from __future__ import annotations

from math import prod

import pytest
from sympy import factorint, isprime

from primeserve.prime_utils import (
    PrimeFactor,
    format_prime_factorization,
    is_prime_for_small_integer,
    next_prime,
    previous_prime,
    prime_factorization,
    primes_in_range,
)


class RecordingOracle:
    """Stub predicate: answers from a fixed set and remembers what it was asked."""

    def __init__(self, primes):
        self.primes = set(primes)
        self.calls = []

    def __call__(self, n):
        self.calls.append(n)
        return n in self.primes


# ---- small-integer checker ----

def test_small_checker_below_two():
    assert not is_prime_for_small_integer(-1)
    assert not is_prime_for_small_integer(0)
    assert not is_prime_for_small_integer(1)


def test_small_checker_primes():
    for p in (2, 3, 5, 7, 11, 13, 17, 19, 97):
        assert is_prime_for_small_integer(p), p


def test_small_checker_composites():
    for c in (4, 6, 8, 9, 10, 15, 25, 100, 5 * 7, 11 * 13, 997 * 991):
        assert not is_prime_for_small_integer(c), c


def test_small_checker_matches_sympy_up_to_ten_thousand():
    for n in range(-5, 10_000):
        assert is_prime_for_small_integer(n) == isprime(n), n


def test_small_checker_at_the_native_limit():
    assert is_prime_for_small_integer(2**31 - 1)
    assert not is_prime_for_small_integer(2**53 - 1)  # 6361 * 69431 * 20394401


# ---- next / previous ----

def test_next_prime_with_small_checker():
    assert next_prime(1, is_prime_for_small_integer) == 2
    assert next_prime(2, is_prime_for_small_integer) == 3
    assert next_prime(3, is_prime_for_small_integer) == 5
    assert next_prime(10, is_prime_for_small_integer) == 11
    assert next_prime(14, is_prime_for_small_integer) == 17
    assert next_prime(-50, is_prime_for_small_integer) == 2


def test_next_prime_only_asks_the_injected_oracle():
    oracle = RecordingOracle({104})
    assert next_prime(100, oracle) == 104
    assert oracle.calls == [101, 102, 103, 104]


def test_next_prime_from_far_below_starts_at_two():
    oracle = RecordingOracle({3})
    assert next_prime(-10**40, oracle) == 3
    assert oracle.calls == [2, 3]


def test_previous_prime_none_sentinel():
    assert previous_prime(2, is_prime_for_small_integer) is None
    assert previous_prime(1, is_prime_for_small_integer) is None
    assert previous_prime(-7, is_prime_for_small_integer) is None


def test_previous_prime_with_small_checker():
    assert previous_prime(3, is_prime_for_small_integer) == 2
    assert previous_prime(10, is_prime_for_small_integer) == 7
    assert previous_prime(20, is_prime_for_small_integer) == 19
    assert previous_prime(14, is_prime_for_small_integer) == 13


def test_previous_prime_runs_out_below_two():
    oracle = RecordingOracle(set())
    assert previous_prime(6, oracle) is None
    assert oracle.calls == [5, 4, 3, 2]


def test_next_of_previous_lands_on_first_prime_not_below_n():
    for n, expected in ((10, 11), (11, 11), (20, 23), (24, 29)):
        p = previous_prime(n, is_prime_for_small_integer)
        assert next_prime(p, is_prime_for_small_integer) == expected


# ---- range ----

def test_primes_in_range():
    assert primes_in_range(1, 20, is_prime_for_small_integer) == [2, 3, 5, 7, 11, 13, 17, 19]
    assert primes_in_range(1, 10, is_prime_for_small_integer) == [2, 3, 5, 7]
    assert primes_in_range(10, 20, is_prime_for_small_integer) == [11, 13, 17, 19]
    assert primes_in_range(2, 2, is_prime_for_small_integer) == [2]


def test_primes_in_range_empty():
    assert primes_in_range(24, 28, is_prime_for_small_integer) == []
    assert primes_in_range(1, 1, is_prime_for_small_integer) == []
    assert primes_in_range(-10, 1, is_prime_for_small_integer) == []


def test_primes_in_range_clamps_start_before_asking_oracle():
    oracle = RecordingOracle({2, 5})
    assert primes_in_range(-3, 6, oracle) == [2, 5]
    assert oracle.calls == [2, 3, 4, 5, 6]


# ---- factorization ----

def test_factorization_below_two_is_empty():
    assert prime_factorization(0) == []
    assert prime_factorization(1) == []
    assert prime_factorization(-5) == []


def test_factorization_of_primes():
    assert prime_factorization(2) == [PrimeFactor(2, 1)]
    assert prime_factorization(3) == [PrimeFactor(3, 1)]
    assert prime_factorization(17) == [PrimeFactor(17, 1)]


def test_factorization_of_composites():
    assert prime_factorization(4) == [PrimeFactor(2, 2)]
    assert prime_factorization(6) == [PrimeFactor(2, 1), PrimeFactor(3, 1)]
    assert prime_factorization(12) == [PrimeFactor(2, 2), PrimeFactor(3, 1)]
    assert prime_factorization(60) == [PrimeFactor(2, 2), PrimeFactor(3, 1), PrimeFactor(5, 1)]
    assert prime_factorization(9) == [PrimeFactor(3, 2)]
    assert prime_factorization(100) == [PrimeFactor(2, 2), PrimeFactor(5, 2)]
    assert prime_factorization(1000) == [PrimeFactor(2, 3), PrimeFactor(5, 3)]


def test_factorization_leaves_large_prime_cofactor():
    assert prime_factorization(2 * 982451653) == [PrimeFactor(2, 1), PrimeFactor(982451653, 1)]


@pytest.mark.parametrize("n", [2**53 - 1, 600851475143, 7420738134810, 2**40, 3**30])
def test_factorization_multiplies_back(n):
    factors = prime_factorization(n)
    assert prod(f.prime ** f.exponent for f in factors) == n
    assert [f.prime for f in factors] == sorted({f.prime for f in factors})
    assert {f.prime: f.exponent for f in factors} == factorint(n)


def test_factorization_matches_sympy_for_small_n():
    for n in range(2, 3000):
        factors = prime_factorization(n)
        assert {f.prime: f.exponent for f in factors} == factorint(n), n


# ---- formatting ----

def test_format_empty():
    assert format_prime_factorization([]) == "1"


def test_format_single_factor():
    assert format_prime_factorization([PrimeFactor(7, 1)]) == "7"
    assert format_prime_factorization([PrimeFactor(2, 3)]) == "2^3"


def test_format_multiple_factors():
    assert format_prime_factorization(
        [PrimeFactor(2, 2), PrimeFactor(3, 1), PrimeFactor(5, 1)]
    ) == "2^2 × 3 × 5"
    assert format_prime_factorization(
        [PrimeFactor(2, 1), PrimeFactor(3, 2), PrimeFactor(7, 1)]
    ) == "2 × 3^2 × 7"


@pytest.mark.parametrize("n, expected", [(1, "1"), (12, "2^2 × 3"), (60, "2^2 × 3 × 5")])
def test_format_of_factorization(n, expected):
    assert format_prime_factorization(prime_factorization(n)) == expected
