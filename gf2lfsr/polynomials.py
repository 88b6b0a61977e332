"""This module enumerates irreducible and primitive polynomials over GF(2).

Candidates of degree n are the polynomials x^n + ... + 1 with both the leading
and constant coefficient equal to 1. The candidates are generated in order of
increasing weight of the n-1 interior coefficients, hence polynomials with few
terms (such as trinomials and pentanomials) are found first.

The reciprocal of an irreducible (primitive) polynomial is irreducible (primitive)
as well. Therefore, each classification is recorded for the reversed pattern of
interior coefficients, and reused once that pattern comes up as a candidate.
"""

import logging
import itertools
from gf2lfsr.gf2x import BinaryPolynomial, Reducibility
from gf2lfsr.primitive import _is_primitive


def _reverse_bits(p, m):
    """Reverse the m least significant bits of p."""
    r = 0
    for _ in range(m):
        r = (r << 1) | (p & 1)
        p >>= 1
    return r


class PrimePolynomials:
    """Irreducible polynomials of given degree, or primitive ones if primitive is set.

    Each iteration over a PrimePolynomials object starts afresh from the
    candidate x^degree + 1, yielding polynomials of type poly.
    """

    __slots__ = ('degree', 'primitive', 'poly', 'max_workers')

    def __init__(self, degree, primitive=False, poly=BinaryPolynomial, max_workers=None):
        if degree < 1:
            raise ValueError('degree must be positive')

        self.degree = degree
        self.primitive = primitive
        self.poly = poly
        self.max_workers = max_workers

    def _test(self, a):
        cls = self.poly
        if cls._reducibility(a) is Reducibility.REDUCIBLE:
            return False

        if self.primitive:
            return _is_primitive(cls, a, max_workers=self.max_workers)

        return True

    def __iter__(self):
        cls = self.poly
        n = self.degree
        m = n - 1  # number of interior coefficients
        ends = (1 << n) | 1
        pending = {}  # interior pattern -> classification found for its reverse
        for w in range(m + 1):
            found = 0
            for positions in itertools.combinations(range(m), w):
                p = 0
                for i in positions:
                    p |= 1 << i
                a = cls._from_int(ends | p << 1)
                if p in pending:
                    ok = pending.pop(p)
                else:
                    ok = self._test(a)
                    r = _reverse_bits(p, m)
                    if r != p:
                        pending[r] = ok
                if ok:
                    found += 1
                    yield cls(a, check=False)

            logging.debug(f'Degree {n}, weight {w + 2}: {found} found')

    def __repr__(self):
        kind = 'primitive' if self.primitive else 'irreducible'
        return f'{type(self).__name__}({self.degree}, {kind})'


def irreducibles(degree, poly=BinaryPolynomial):
    """Iterator over all irreducible polynomials of given degree with constant term 1."""
    return iter(PrimePolynomials(degree, poly=poly))


def primitives(degree, poly=BinaryPolynomial, max_workers=None):
    """Iterator over all primitive polynomials of given degree."""
    return iter(PrimePolynomials(degree, primitive=True, poly=poly, max_workers=max_workers))


def first_primitive(degree, poly=BinaryPolynomial):
    """Primitive polynomial of given degree with the fewest terms."""
    return next(primitives(degree, poly=poly))
