"""gf2lfsr is a Python package for polynomials over GF(2) and maximal-length LFSRs.

Binary polynomials of arbitrary degree are supported with two interchangeable
representations: a dense bit-vector (a Python int) and a sparse set of exponents.
Both representations share one implementation of the arithmetic, including
multiplication, division with remainder, GCDs and modular powers.

Polynomials can be classified as irreducible, using Ben-Or's deterministic test,
and as primitive, using a divisor-based order test which is run on a pool of worker
threads for large degrees. Irreducible and primitive polynomials of a given degree
are enumerated lazily, in order of increasing weight.

A primitive polynomial of degree n drives a Galois-form linear feedback shift
register (LFSR) through all 2^n-1 nonzero n-bit states. A small extension module
maps LFSR output to unique k-out-of-n bit patterns (combinadics).

The package is configured via environment variables:

    GF2LFSR_MAXWORKERS   number of worker threads for primitivity tests (0 = none)
    GF2LFSR_GRANULARITY  maximum number of divisors tested per worker task
    GF2LFSR_LOGLEVEL     logging level ll=debug/info/warning(default)/error
    GF2LFSR_NOLOG        set to 1 to disable logging messages
"""

__version__ = '0.3.1'
__license__ = 'MIT License'

import os
import sys
import logging


def _log_level(ll):
    """Convert logging level name or digit ll to a level of Python's logging module."""
    ch = ll[0].upper() if ll else 'W'
    ch = {'N': '0', 'D': '1', 'I': '2', 'W': '3', 'E': '4', 'C': '5'}.get(ch, ch)
    ch = ch if '0' <= ch <= '5' else '0'  # default to '0'
    level = int(ch)
    return (logging.NOTSET, logging.DEBUG, logging.INFO, logging.WARNING, logging.ERROR,
            logging.CRITICAL)[level]


if os.getenv('READTHEDOCS') != 'True':
    # Set logging level as early as possible.
    if os.getenv('GF2LFSR_NOLOG') == '1':
        logging.basicConfig(level=logging.WARNING)
    else:
        level = _log_level(os.getenv('GF2LFSR_LOGLEVEL', 'warning'))
        if sys.flags.dev_mode:
            # Switch to debug mode, just like asyncio does in development mode.
            level = logging.DEBUG
        logging.basicConfig(format='{asctime} {message}', style='{', level=level, stream=sys.stdout)
        logging.debug(f'Set logging level to {level}: {logging.getLevelName(level)}')
        del level

    # Worker threads for gf2lfsr.primitive.is_primitive().
    env_max_workers = os.getenv('GF2LFSR_MAXWORKERS')  # check if variable GF2LFSR_MAXWORKERS is set
    if not env_max_workers:
        os.environ['GF2LFSR_MAXWORKERS'] = str(os.cpu_count() or 1)
        # NB: GF2LFSR_MAXWORKERS also set for subprocesses
    logging.debug(f'Number of worker threads maximum set to {os.getenv("GF2LFSR_MAXWORKERS")}')

    env_granularity = os.getenv('GF2LFSR_GRANULARITY')
    if not env_granularity:
        os.environ['GF2LFSR_GRANULARITY'] = '1000'
    logging.debug(f'Divisors per worker task set to {os.getenv("GF2LFSR_GRANULARITY")}')

    del env_max_workers, env_granularity
