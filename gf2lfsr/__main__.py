"""Command line interface for gf2lfsr.

Example usage from the command line:

    python -m gf2lfsr -d8 --primitive -n4

to list the first four primitive polynomials of degree 8,

    python -m gf2lfsr -t "x^4 + x^3 + x^2 + x + 1"

to classify a given polynomial, and

    python -m gf2lfsr -d4 --lfsr

to print the full cycle of a 4-bit LFSR.
"""

import os
import sys
import logging
import argparse
import itertools
import gf2lfsr
from gf2lfsr import gf2x
from gf2lfsr import primitive
from gf2lfsr.polynomials import PrimePolynomials
from gf2lfsr.lfsr import LFSR


def get_arg_parser():
    """Return parser for command line arguments."""
    parser = argparse.ArgumentParser(prog='python -m gf2lfsr')
    parser.add_argument('-V', '--VERSION', action='version',
                        version=f'gf2lfsr {gf2lfsr.__version__}')
    parser.add_argument('-d', '--degree', type=int, metavar='n',
                        help='degree n of polynomials (and LFSR)')
    group = parser.add_mutually_exclusive_group()
    group.add_argument('--irreducible', action='store_false', dest='primitive',
                       help='list irreducible polynomials (default)')
    group.add_argument('--primitive', action='store_true',
                       help='list primitive polynomials')
    parser.add_argument('-n', '--number', type=int, metavar='k',
                        help='list at most k polynomials')
    parser.add_argument('-t', '--test', type=str, metavar='poly',
                        help='classify polynomial poly, e.g., "x^8 + x^4 + x^3 + x + 1"')
    parser.add_argument('-l', '--lfsr', action='store_true',
                        help='print all states of LFSR of degree n')
    parser.add_argument('-s', '--start', type=int, metavar='v',
                        help='start LFSR at nonzero state v')
    parser.add_argument('-W', '--workers', type=int, metavar='w',
                        help='maximum number of worker threads for primitivity tests')
    parser.add_argument('--log-level', type=str, metavar='ll',
                        help='logging level ll=debug/info/warning(default)/error')
    parser.set_defaults(primitive=False, start=1)
    return parser


def main(argv=None):
    parser = get_arg_parser()
    args = parser.parse_args(argv)
    if args.log_level:
        logging.getLogger().setLevel(gf2lfsr._log_level(args.log_level))
    if args.workers is not None:
        os.environ['GF2LFSR_MAXWORKERS'] = str(args.workers)

    if args.test:
        try:
            a = gf2x.from_terms(args.test)
            if not gf2x.is_irreducible(a):
                kind = 'reducible'
            elif primitive.is_primitive(a):
                kind = 'primitive'
            else:
                kind = 'irreducible, not primitive'
        except ValueError as exc:
            parser.error(str(exc))
        print(f'{a}: {kind}')
        return 0

    if args.degree is None:
        parser.error('degree required (or use -t to test a polynomial)')

    try:
        if args.lfsr:
            lfsr = LFSR.from_degree(args.degree, start=args.start)
            print(f'{lfsr.polynomial}')
            for i, v in enumerate(lfsr):
                print(f'{i:>{len(str(1 << args.degree))}} {v:0{args.degree}b}')
            return 0

        polys = PrimePolynomials(args.degree, primitive=args.primitive)
        for a in itertools.islice(polys, args.number):
            print(a)
    except ValueError as exc:
        parser.error(str(exc))
    return 0


if __name__ == '__main__':
    sys.exit(main())
