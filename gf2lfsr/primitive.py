"""This module provides a test for primitivity of polynomials over GF(2).

An irreducible polynomial f of degree n is primitive if x generates the full
multiplicative group of GF(2)[x]/(f), which is of order 2^n-1. Equivalently,
f is primitive if x^e mod f differs from 1 for all proper divisors e of 2^n-1.

The divisors e are obtained from the prime factorization of 2^n-1, and the
search for a divisor e with x^e = 1 modulo f is split recursively into chunks
of divisors, which are handled by a pool of worker threads. As soon as one such
e is found, the remaining work is skipped.
"""

import os
import logging
import threading
import concurrent.futures
from gf2lfsr import gmpy
from gf2lfsr.gf2x import Polynomial, BinaryPolynomial, Reducibility


def divisors(n):
    """Return list of all divisors d of 2^n-1 satisfying 1 < d < 2^n-1, in ascending order.

    The divisors are all products of (nonempty) sub-multisets of the prime factors of 2^n-1.
    """
    m = (1 << n) - 1
    ds = {1}
    for p in gmpy.mersenne_factors(n):
        ds |= {d * p for d in ds}
    ds.discard(1)
    ds.discard(m)
    return sorted(ds)


def _split(lo, hi, granularity):
    """Recursively halve range(lo, hi) into chunks of at most granularity elements."""
    if hi - lo <= granularity:
        return (lo, hi)

    mid = (lo + hi) // 2
    return _split(lo, mid, granularity), _split(mid, hi, granularity)


def _chunks(node):
    if isinstance(node[0], tuple):
        for child in node:
            yield from _chunks(child)
    else:
        yield node


def _search(cls, a, ds, lo, hi, failed):
    """Return True if x^e != 1 modulo a for all divisors e in ds[lo:hi].

    Shared flag failed is set as soon as a divisor e with x^e = 1 modulo a is found.
    The flag is only ever set, never cleared.
    """
    one = cls._one
    x = cls._lshift(one, 1)
    for i in range(lo, hi):
        if failed.is_set():
            return False  # another thread already found a small order

        e = ds[i]
        if not cls._mod(cls._xor(cls._powmod(x, e, a), one), a):
            # x^e + 1 = 0 modulo a
            logging.debug(f'Order of x divides {e}')
            failed.set()
            return False

    return True


def _join(node):
    if isinstance(node, tuple):
        left, right = node
        left = _join(left)
        right = _join(right)  # no short-circuit, result() of every future
        return left and right

    return node.result()


def _is_primitive(cls, a, max_workers=None, granularity=None):
    """Test irreducible polynomial a for primitivity, a in cls internal format."""
    if max_workers is None:
        max_workers = int(os.getenv('GF2LFSR_MAXWORKERS', '0'))
    if granularity is None:
        granularity = int(os.getenv('GF2LFSR_GRANULARITY', '1000'))
    if granularity < 1:
        raise ValueError('granularity must be positive')

    if not cls._bit(a, 0):
        return False  # root 0, only a=x is irreducible here

    n = cls._deg(a)
    ds = divisors(n)
    failed = threading.Event()
    tree = _split(0, len(ds), granularity)
    if max_workers == 0 or len(ds) <= granularity:
        primitive = all(_search(cls, a, ds, lo, hi, failed) for lo, hi in _chunks(tree))
    else:
        # Fork all chunks, then join results pairwise along the tree.
        with concurrent.futures.ThreadPoolExecutor(max_workers=max_workers) as executor:
            def fork(node):
                if isinstance(node[0], tuple):
                    return tuple(fork(child) for child in node)

                lo, hi = node
                return executor.submit(_search, cls, a, ds, lo, hi, failed)

            primitive = _join(fork(tree))
    # NB: primitive == (not failed.is_set()), independent of thread scheduling
    logging.debug(f'Primitivity test for degree {n} over {len(ds)} divisors: {primitive}')
    return primitive


def is_primitive(a, max_workers=None, granularity=None):
    """Test nonconstant polynomial a for primitivity.

    Reducible polynomials are not primitive. For irreducible a of degree n,
    the order of x modulo a is tested against all proper divisors of 2^n-1,
    using up to max_workers threads, each thread handling chunks of at most
    granularity divisors. Defaults are set by environment variables
    GF2LFSR_MAXWORKERS and GF2LFSR_GRANULARITY.

    Raise ValueError for constant polynomials a (including zero).
    """
    cls = type(a) if isinstance(a, Polynomial) else BinaryPolynomial
    a = cls._intern(a)
    if cls._reducibility(a) is Reducibility.REDUCIBLE:
        return False

    return _is_primitive(cls, a, max_workers=max_workers, granularity=granularity)
