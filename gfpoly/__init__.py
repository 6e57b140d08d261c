"""gfpoly is a Python package for polynomials over prime fields GF(p).

Polynomials over GF(p) are provided as immutable values in canonical form,
with the usual ring operations available via Python's operator overloading:
addition, subtraction, multiplication, and division with remainder.
Polynomial GCDs and modular powers of x are supported as well.

Irreducibility over GF(p) is decided by Rabin's test, which combines
modular exponentiation of x with one GCD per prime divisor of the degree.
Module gmpy collects the integer helpers (modular inverses, prime divisors),
backed by the gmpy2 package.
"""

__version__ = '0.1.0'
__license__ = 'MIT License'

import os
import sys
import argparse
import logging


def get_arg_parser():
    """Return parser for command line arguments recognized by gfpoly."""
    parser = argparse.ArgumentParser(add_help=False)

    group = parser.add_argument_group('gfpoly help')
    group.add_argument('-V', '--VERSION', action='store_true',
                       help='print gfpoly version number and exit')

    group = parser.add_argument_group('gfpoly parameters')
    group.add_argument('--log-level', type=str, metavar='ll',
                       help='logging level ll=debug/info(default)/warning/error')
    group.add_argument('--no-log', action='store_true',
                       help='disable logging messages')

    parser.set_defaults(log_level='info')
    return parser


if os.getenv('READTHEDOCS') != 'True':
    options = get_arg_parser().parse_known_args()[0]
    if options.VERSION:
        options.no_log = True

    # Set logging level as early as possible.
    if options.no_log:
        logging.basicConfig(level=logging.WARNING)
    else:
        ch = options.log_level[0].upper()
        ch = {'N': '0', 'D': '1', 'I': '2', 'W': '3', 'E': '4', 'C': '5'}.get(ch, ch)
        ch = ch if '0' <= ch <= '5' else '0'  # default to '0'
        level = int(ch)
        level = (logging.NOTSET, logging.DEBUG, logging.INFO, logging.WARNING, logging.ERROR,
                 logging.CRITICAL)[level]
        if sys.flags.dev_mode:
            level = logging.DEBUG
        logging.basicConfig(format='{asctime} {message}', style='{', level=level, stream=sys.stdout)
        logging.debug(f'Set logging level to {level}: {logging.getLevelName(level)}')
        del ch, level

    del options
