"""This module provides linear feedback shift registers (LFSRs) in Galois form.

An LFSR of degree n is driven by a primitive polynomial f of degree n over GF(2).
The register holds an n-bit state v, starting at a given nonzero value. In each
step, v is shifted right by one position, and if the bit shifted out is 1, the
taps are added (xor) to v. The taps are the coefficients of x^n,...,x^1 in f.

For primitive f, the register runs through all 2^n-1 nonzero states before it
returns to its start value, and iteration stops just before that happens.

NB: LFSR output is linear, hence easily predictable, and not suitable for cryptography.
"""

import logging
from gf2lfsr.gf2x import Polynomial, BinaryPolynomial
from gf2lfsr import primitive
from gf2lfsr import polynomials


class LFSR:
    """Galois linear feedback shift register for given primitive polynomial.

    Iterating over an LFSR yields the start value followed by all other states
    in the cycle through start, as positive integers below 2^degree.

    If check is set (default), the polynomial is tested for primitivity, raising
    ValueError otherwise. With check=False, any polynomial is accepted, but the
    cycle through start may be (much) shorter than 2^degree-1.
    """

    __slots__ = ('polynomial', 'degree', 'taps', 'start')

    def __init__(self, poly, start=1, check=True):
        if not isinstance(poly, Polynomial):
            poly = BinaryPolynomial(poly)
        n = poly.degree()
        if n < 1:
            raise ValueError('polynomial of positive degree required')

        if check and not primitive.is_primitive(poly):
            raise ValueError(f'{poly} is not primitive')

        if not 0 < start < 1 << n:
            raise ValueError(f'start value must be nonzero {n}-bit integer')

        self.polynomial = poly
        self.degree = n
        self.taps = int(poly) >> 1  # drop coefficient of x^0
        self.start = start
        logging.debug(f'LFSR for {poly} with taps {self.taps:#x} from {start}')

    @classmethod
    def from_degree(cls, n, start=1):
        """LFSR of degree n for the primitive polynomial with the fewest terms."""
        return cls(polynomials.first_primitive(n), start=start, check=False)

    @property
    def period(self):
        """Maximal cycle length 2^degree-1, attained for primitive polynomials."""
        return (1 << self.degree) - 1

    def __iter__(self):
        taps = self.taps
        start = self.start
        v = start
        while True:
            yield v

            shifted_out = v & 1
            v >>= 1
            if shifted_out:
                v ^= taps
            if v == start:
                break

    def __repr__(self):
        return f'LFSR({self.polynomial}, start={self.start})'
