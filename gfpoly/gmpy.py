"""This module collects all gmpy2 functions used by gfpoly.

Integer helpers for polynomial arithmetic over GF(p) are provided as well:
modular inverses, plain integer powers, and the distinct prime divisors of an integer.
"""

import logging
from gmpy2 import version, mpz, is_prime, next_prime, gcdext

logging.debug(f'Load gmpy2 version {version()}')


class NonInvertibleElement(ZeroDivisionError):
    """Integer has no inverse modulo the given modulus."""


def inverse(a, p):
    """Return b in {0, ... , p-1} such that a*b == 1 modulo p.

    Computed with the extended Euclidean algorithm on (a, p).
    Raises NonInvertibleElement if gcd(a, p) != 1, which for prime p
    only happens if a is a multiple of p.
    """
    if p <= 0:
        raise ValueError('modulus must be positive')

    g, s, _ = gcdext(a, p)
    if g != 1:
        raise NonInvertibleElement(f'element {a} is not invertible modulo {p}')

    return int(s % p)


def pow_int(a, b):
    """Return a**b for nonnegative integer b, without modular reduction."""
    if b < 0:
        raise ValueError('negative exponent')

    return int(mpz(a)**b)


def prime_divisors(n):
    """Return the distinct prime divisors of n >= 1 in increasing order.

    Trial division by primes up to the square root of what remains of n.
    """
    if n <= 0:
        raise ValueError('positive integer expected')

    d = []
    q = 2
    while q * q <= n:
        if n % q == 0:
            d.append(q)
            while n % q == 0:
                n //= q
        q = int(next_prime(q))
    if n > 1:
        d.append(n)
    return d
