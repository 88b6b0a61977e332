"""This module generates unique identifiers from LFSR output.

Each identifier is an n-bit integer with exactly k bits set. The values m drawn
from an LFSR are mapped to identifiers using the combinadic (combinatorial number
system), a bijection between 0,...,C(n,k)-1 and the k-combinations of n items.
"""

import math
import logging
from gf2lfsr.lfsr import LFSR


def combinadic(n, k, m):
    """Return the k-combination of n items of rank m, for 0 <= m < C(n,k).

    The combination is returned as an integer with exactly k bits set among
    its n least significant bits. Rank 0 corresponds to the k lowest bits.
    """
    if not 0 <= m < math.comb(n, k):
        raise ValueError('rank out of range')

    c = 0
    for i in range(n, 0, -1):
        y = math.comb(i - 1, k)
        if m >= y:
            m -= y
            c |= 1 << (i - 1)
            k -= 1
    return c


class UniqueIdentifiers:
    """Distinct n-bit integers of weight k, in a scrambled order.

    The ranks m are drawn from an LFSR just large enough to cover C(n,k).
    Values m >= C(n,k) are skipped, and as an LFSR never outputs 0, the
    combination of rank 0 is never produced. Every other k-combination
    is produced exactly once per iteration.
    """

    __slots__ = ('n', 'k', 'lfsr')

    def __init__(self, n, k, start=1):
        if not 0 <= k <= n:
            raise ValueError('0 <= k <= n required')

        self.n = n
        self.k = k
        self.lfsr = LFSR.from_degree(math.comb(n, k).bit_length(), start=start)

    def __iter__(self):
        n = self.n
        k = self.k
        limit = math.comb(n, k)
        skipped = 0
        for m in self.lfsr:
            if m >= limit:
                skipped += 1
                continue

            yield combinadic(n, k, m)

        logging.debug(f'Skipped {skipped} LFSR values out of range {limit}')
