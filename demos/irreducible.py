"""Demo Rabin's irreducibility test for polynomials over GF(p).

Example usage from the command line:

    python irreducible.py -p 3 1 0 1

to test x^2+1 over GF(3), where the coefficients a_0 a_1 ... a_n are listed
starting from the constant term. Alternatively, the polynomial can be given
as a sum of terms:

    python irreducible.py -p 2 -t 'x^4+x^3+x^2+x+1'

The canonical form of the polynomial is printed, with every coefficient
shown from x^n down to x^0, followed by the verdict. Invalid input, such
as a composite modulus or a constant polynomial, is reported instead and
the demo exits with status 1.

Use --log-level debug to see which step of Rabin's test finds a polynomial
to be reducible.
"""

import sys
import time
import argparse
import logging
import gfpoly
from gfpoly import gfpx


def main():
    parser = argparse.ArgumentParser(parents=[gfpoly.get_arg_parser()])
    parser.add_argument('-p', '--modulus', type=int, metavar='P',
                        help='prime modulus P (default 2)')
    parser.add_argument('-t', '--terms', type=str, metavar='T',
                        help='polynomial as sum of terms, e.g. x^2+2x+1')
    parser.add_argument('coefficients', nargs='*', type=int, metavar='a',
                        help='coefficients a_0 a_1 ... a_n, constant term first')
    parser.set_defaults(modulus=2)
    args = parser.parse_args()

    if args.VERSION:
        print(f'gfpoly {gfpoly.__version__}')
        return 0

    p = args.modulus
    if args.terms is not None:
        if args.coefficients:
            parser.error('give either coefficients or terms, not both')
        try:
            coefficients = list(gfpx.GFpX(p).from_terms(args.terms))
        except ValueError as exc:
            print(f'Invalid input: {exc}')
            return 1
    else:
        coefficients = args.coefficients

    problems = gfpx.check_input(p, coefficients)
    if problems:
        for problem in problems:
            print(f'Invalid input: {problem}')
        return 1

    f = gfpx.polynomial(coefficients, p)
    print(f'The polynomial over GF({p}): {f}')
    logging.info(f'Degree {f.degree()}, testing irreducibility')
    start = time.process_time()
    irreducible = gfpx.is_irreducible(f)
    logging.info(f'{time.process_time() - start} seconds for Rabin\'s test')
    print(f'Status: {"irreducible" if irreducible else "reducible"}')
    return 0


if __name__ == '__main__':
    sys.exit(main())
