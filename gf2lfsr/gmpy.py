"""This module collects all gmpy2 functions used by gf2lfsr.

Efficient functions for factoring integers are also provided, in particular
for factoring the Mersenne numbers 2^n-1 as needed for primitivity tests.
"""

import logging
import functools
from gmpy2 import version, mpz, is_prime, next_prime, gcd, is_square, isqrt

logging.debug(f'Load gmpy2 version {version()}')

# Exponents n for which 2^n-1 is prime (no need to factor these).
MERSENNE_EXPONENTS = frozenset((2, 3, 5, 7, 13, 17, 19, 31, 61, 89, 107, 127,
                                521, 607, 1279, 2203, 2281, 3217, 4253, 4423,
                                9689, 9941, 11213, 19937, 21701, 23209, 44497,
                                86243, 110503, 132049, 216091))


def factor(x):
    """Return the prime factors of positive integer x in ascending order, with multiplicity.

    For example, factor(63) == [3, 3, 7] and factor(1) == [].
    """
    if x < 1:
        raise ValueError('number must be positive')

    factors = []
    k = 10
    # trial division by all primes p below 2**k
    p = 2
    while p < 1<<k and p * p <= x:
        while x % p == 0:
            factors.append(int(p))
            x //= p
        p = next_prime(p)

    # cofactor x is 1, a prime, or a product of primes p >= 2**k
    todo = [x] if x > 1 else []
    while todo:
        y = todo.pop()
        if is_prime(y):
            factors.append(int(y))
        else:
            d = _find_factor(y)
            todo.extend((d, y // d))
    factors.sort()
    return factors


def _find_factor(x):
    """Return a nontrivial factor of odd composite x, using Pollard-Brent rho."""
    if is_square(x):
        return int(isqrt(x))

    x = mpz(x)
    m = 128  # batch size for gcd computations
    for c in range(1, 1<<16):
        y, r, q, g = mpz(2), 1, mpz(1), mpz(1)
        while g == 1:
            z = y
            for _ in range(r):
                y = (y * y + c) % x
            i = 0
            while i < r and g == 1:
                ys = y
                for _ in range(min(m, r - i)):
                    y = (y * y + c) % x
                    q = q * abs(z - y) % x
                g = gcd(q, x)
                i += m
            r <<= 1
        if g == x:
            # backtrack one step at a time
            g = mpz(1)
            while g == 1:
                ys = (ys * ys + c) % x
                g = gcd(abs(z - ys), x)
        if g != x:
            return int(g)

    raise ValueError('no factor found')  # NB: not expected to happen


@functools.cache
def _mersenne_factors(n):
    if n == 1:
        return ()

    if n in MERSENNE_EXPONENTS:
        return ((1<<n) - 1,)

    # 2^a-1 divides 2^n-1 for every divisor a of n
    p = 2
    while n % p:
        p = int(next_prime(p))
    if p == n:
        return tuple(factor((1<<n) - 1))

    a = n // p
    small = _mersenne_factors(a)
    large = factor(((1<<n) - 1) // ((1<<a) - 1))
    return tuple(sorted(small + tuple(large)))


def mersenne_factors(n):
    """Return the prime factors of 2^n-1 in ascending order, with multiplicity.

    For example, mersenne_factors(6) == [3, 3, 7].
    """
    if n < 1:
        raise ValueError('exponent must be positive')

    return list(_mersenne_factors(n))
