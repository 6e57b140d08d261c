"""This module supports arithmetic with polynomials over GF(p).

Polynomials over GF(p) are represented as tuples of coefficients.
The polynomial a_0 + a_1 X + ... + a_n X^n corresponds
to the tuple (a_0, a_1, ... , a_n) of integers in {0, ... , p-1}.
Leading coefficient a_n is nonzero, using (0,) for the zero polynomial.
Hence, the degree of a polynomial is one less than the length of its
tuple, and the zero polynomial has degree 0: use is_zero() to tell it apart
from the nonzero constants.

The operators +,-,*,//,%, and function divmod are overloaded, as well as
== and != for testing equality. Integers are accepted in place of polynomials,
read as a_0 + a_1 p + ... + a_n p^n, and so are strings like 'x^2+2x+1'.

GCD, powers of X modulo a polynomial, and general modular powers are supported.
Irreducibility is decided by Rabin's test, and a basic routine finds the
next largest monic irreducible polynomial.
"""

__all__ = ['X', 'GFpX', 'Polynomial', 'polynomial', 'is_irreducible', 'check_input',
           'DivisionByZeroPolynomial', 'NonInvertibleElement', 'InvalidModulus']

import functools
import logging
from gfpoly import gmpy as gmpy2
from gfpoly.gmpy import NonInvertibleElement

X = 'x'  # symbol for indeterminate in polynomials


class DivisionByZeroPolynomial(ZeroDivisionError):
    """Divisor is the zero polynomial."""


class InvalidModulus(ValueError):
    """Modulus cannot be used for coefficients of a polynomial."""


@functools.cache
def GFpX(p):
    """Create type for polynomials over GF(p).

    Modulus p must be a positive integer. Primality of p is not checked
    here: use check_input() at the boundary for that.
    """
    if not isinstance(p, int) or isinstance(p, bool) or p <= 0:
        raise InvalidModulus(f'modulus must be a positive integer, not {p!r}')

    GFpPolynomial = type(f'GF({p})[{X}]', (Polynomial,), {'__slots__': ()})
    GFpPolynomial.p = p
    globals()[f'GF({p})[{X}]'] = GFpPolynomial  # NB: exploit unique name dynamic Polynomial type
    logging.debug(f'Create polynomial type {GFpPolynomial.__name__}')
    return GFpPolynomial


def polynomial(coefficients, p):
    """Polynomial over GF(p) with given coefficients, listed from X^0 upward."""
    return GFpX(p)(coefficients)


class Polynomial:
    """Polynomials over GF(p) represented as tuples of integers in {0, ... , p-1}.

    Invariant: attribute 'value' is nonempty and its last element is nonzero,
    unless 'value' is (0,) for the zero polynomial.
    """

    __slots__ = 'value'

    p = None

    def __init__(self, value=0, check=True):
        """Initialize polynomial to given value (zero polynomial, by default)."""
        if check:
            value = self._intern(value)
        self.value = tuple(value)

    @classmethod
    def _intern(cls, a):
        # convert a to cls internal format, if possible
        a = cls._coerce(a)
        if a is NotImplemented:
            raise TypeError(f'polynomial over GF({cls.p}) expected')

        return a

    @classmethod
    def _coerce(cls, a):
        if isinstance(a, Polynomial):
            if not isinstance(a, cls):
                raise TypeError(f'polynomial of type {cls.__name__} expected')

            return a.value

        if isinstance(a, int):
            return cls._from_int(a)

        if isinstance(a, str):
            return cls._from_terms(a)

        if isinstance(a, (list, tuple)):
            if not all(isinstance(a_i, int) for a_i in a):
                raise ValueError('polynomial coefficients must be integers')

            return cls._normalize(a)

        return NotImplemented

    @classmethod
    def _normalize(cls, a):
        p = cls.p
        c = [a_i % p for a_i in a]  # NB: Python's % is nonnegative for negative a_i as well
        return cls._strip(c)

    @staticmethod
    def _strip(c):
        while len(c) > 1 and not c[-1]:
            c.pop()
        if not c:
            c.append(0)
        return c

    def __int__(self):
        return self._to_int(self.value)

    def __getitem__(self, key):  # NB: no set_item to prevent mutability
        if isinstance(key, slice):
            raise IndexError('slicing of polynomials not supported, use list() or similar')

        if not isinstance(key, int):
            raise IndexError('use int for indexing polynomials')

        if key < 0:
            raise IndexError('negative index not allowed for polynomials')

        try:
            v = self.value[key]
        except IndexError:
            v = 0
        return v

    def __iter__(self):
        yield from self.value

    def __call__(self, x):
        """Evaluate polynomial at given x."""
        p = type(self).p
        x = x % p
        y = 0
        for c in reversed(self.value):
            y *= x
            y += c
            y %= p
        return y

    @classmethod
    def _from_int(cls, a):
        p = cls.p
        neg = a < 0
        if neg:
            a = -a
        c = []
        while a:
            a, r = divmod(a, p)
            c.append(p - r if neg and r else r)
        return cls._strip(c)

    @classmethod
    def _to_int(cls, a):
        p = cls.p
        s = 0
        for ai in reversed(a):
            s *= p
            s += ai
        return s

    @classmethod
    def _from_terms(cls, s, x=X):
        d = {}
        s = ''.join(s.split())  # remove all whitespace
        for term in s.split('+'):
            try:
                if term.find(x) == -1:
                    c = int(term)
                    i = 0
                elif term.endswith(x):
                    c = term[:-1]
                    c = 1 if c == '' else int(c)
                    i = 1
                else:
                    c, i = term.split(f'{x}^')
                    c = 1 if c == '' else int(c)
                    i = int(i)
            except Exception as exc:
                raise ValueError('ill formatted polynomial') from exc

            if i < 0:
                raise ValueError('ill formatted polynomial')

            d[i] = d.get(i, 0) + c

        a = [0] * (max(d.keys()) + 1)
        for i, c in d.items():
            a[i] = c
        return cls._normalize(a)

    @classmethod
    def _to_terms(cls, a, x=X):
        if cls._is_zero(a):
            return '0'

        s = ''
        for i in range(len(a) - 1, -1, -1):
            if a[i]:
                c = '' if a[i] == 1 else a[i]
                if i == 0:
                    s += f'+{a[i]}'  # x^0 = 1
                elif i == 1:
                    s += f'+{c}{x}'  # x^1 = x
                else:
                    s += f'+{c}{x}^{i}'
        return s[1:]

    @staticmethod
    def _deg(a):
        return len(a) - 1

    @staticmethod
    def _is_zero(a):
        return a[-1] == 0

    @classmethod
    def _monic(cls, a):
        a1 = a[-1]
        if a1 in (0, 1):
            return list(a)

        p = cls.p
        a1 = gmpy2.inverse(a1, p)
        return [(a_i * a1) % p for a_i in a]

    @classmethod
    def _neg(cls, a):
        p = cls.p
        return [0 if a_i == 0 else p - a_i for a_i in a]

    @classmethod
    def _pos(cls, a):
        return list(a)

    @classmethod
    def _add(cls, a, b):
        p = cls.p
        if len(a) < len(b):
            a, b = b, a
        # len(a) >= len(b)
        c = list(a)
        for i, b_i in enumerate(b):
            c[i] += b_i
            if c[i] >= p:
                c[i] -= p
        return cls._strip(c)

    @classmethod
    def _sub(cls, a, b):
        p = cls.p
        c = list(a) + [0] * (len(b) - len(a))
        for i, b_i in enumerate(b):
            c[i] -= b_i
            if c[i] < 0:
                c[i] += p
        return cls._strip(c)

    @classmethod
    def _mul(cls, a, b):
        p = cls.p
        if len(a) > len(b):
            a, b = b, a
        # len(a) <= len(b)
        if cls._is_zero(a) or cls._is_zero(b):
            return [0]

        c = [0] * (len(a) + len(b) - 1)
        for i, a_i in enumerate(a):
            if a_i:
                for j, b_j in enumerate(b):
                    c[i + j] += a_i * b_j
        for i in range(len(c)):
            c[i] %= p
        return cls._strip(c)

    @classmethod
    def _mod(cls, a, b):
        if b is None:  # see _powmod()
            return a

        return cls._divmod(a, b)[1]

    @classmethod
    def _divmod(cls, a, b):
        p = cls.p
        if cls._is_zero(b):
            raise DivisionByZeroPolynomial('division by zero polynomial')

        m = len(a)
        n = len(b)
        if m < n:
            return [0], list(a)

        b1 = gmpy2.inverse(b[-1], p)
        q, r = [0] * (m - n + 1), list(a)
        for i in range(m - n, -1, -1):
            if len(r) >= i + n and not cls._is_zero(r):
                q[i] = q_i = (r[-1] * b1) % p
                for j in range(n):
                    r[i + j] -= q_i * b[j]
                    r[i + j] %= p
                cls._strip(r)
        return cls._strip(q), r

    @classmethod
    def _powmod(cls, a, n, modulus=None):
        if n < 0:
            raise ValueError('negative exponent')

        if n == 0:
            return cls._mod([1], modulus)

        a = cls._mod(a, modulus)
        b = a
        for i in range(n.bit_length()-2, -1, -1):
            b = cls._mul(b, b)
            b = cls._mod(b, modulus)
            if (n >> i) & 1:
                b = cls._mul(b, a)
                b = cls._mod(b, modulus)
        return b

    @classmethod
    def _powx(cls, k, modulus):
        if k < 0:
            raise ValueError('negative exponent')

        r = cls._mod([0, 1], modulus)  # r = X
        y = cls._mod([1], modulus)  # y = 1
        while k:
            if k & 1:
                y = cls._mod(cls._mul(y, r), modulus)
            r = cls._mod(cls._mul(r, r), modulus)
            k >>= 1
        return y

    @classmethod
    def _gcd(cls, a, b):
        while not cls._is_zero(b):
            a, b = b, cls._mod(a, b)
        return cls._monic(a)

    @classmethod
    def _is_irreducible(cls, a):
        p = cls.p
        n = cls._deg(a)
        if n <= 0:
            return False

        x = [0, 1]
        b = cls._mod(cls._sub(cls._powx(gmpy2.pow_int(p, n), a), x), a)
        if not cls._is_zero(b):
            logging.debug(f'{cls._to_terms(a)} does not divide {X}^({p}^{n}) - {X}')
            return False

        for q in gmpy2.prime_divisors(n):
            h = cls._sub(cls._powx(gmpy2.pow_int(p, n // q), a), x)
            d = cls._gcd(a, h)
            if cls._deg(d) > 0:
                logging.debug(f'{cls._to_terms(a)} has factor in common with '
                              f'{X}^({p}^{n // q}) - {X}: {cls._to_terms(d)}')
                return False

        return True

    @classmethod
    def _next_irreducible(cls, a):
        p = cls.p
        a = cls._to_int(a)
        while True:
            a += 1
            if a % p == 0 and a != p:  # X^k for k>1 and multiples of X are reducible
                a += 1
            _a = cls._from_int(a)
            if _a[-1] != 1:  # ensure monic a
                a = p**len(_a) - 1
                continue
            if cls._is_irreducible(_a):
                break

        return _a

    @classmethod
    def from_terms(cls, s, x=X):
        """Convert string s with sum of powers of x to a polynomial."""
        return cls(cls._from_terms(s, x), check=False)

    @classmethod
    def to_terms(cls, a, x=X):
        """Convert polynomial a to a string with sum of powers of x."""
        a = cls._intern(a)
        return cls._to_terms(a, x)

    @classmethod
    def deg(cls, a):
        """Degree of polynomial a (0 if a is zero polynomial)."""
        a = cls._intern(a)
        return cls._deg(a)

    def degree(self):
        """Degree of polynomial (0 for zero polynomial, see is_zero())."""
        return self._deg(self.value)

    def is_zero(self):
        """Test for zero polynomial."""
        return self._is_zero(self.value)

    def monic(self):
        """Monic version of polynomial, zero polynomial remains unchanged."""
        cls = type(self)
        return cls(cls._monic(self.value), check=False)

    def render(self):
        """Render all coefficients from highest to lowest degree.

        For example, 1 + X^2 over GF(2) is rendered as '1x^2 + 0x^1 + 1'.
        """
        a = self.value
        return ' + '.join(f'{a[i]}{X}^{i}' if i else f'{a[i]}' for i in range(len(a) - 1, -1, -1))

    def __neg__(self):
        cls = type(self)
        return cls(cls._neg(self.value), check=False)

    def __pos__(self):
        cls = type(self)
        return cls(cls._pos(self.value), check=False)

    @classmethod
    def add(cls, a, b):
        """Add polynomials a and b."""
        a = cls._intern(a)
        b = cls._intern(b)
        return cls(cls._add(a, b), check=False)

    def __add__(self, other):
        cls = type(self)
        other = cls._coerce(other)
        if other is NotImplemented:
            return NotImplemented

        return cls(cls._add(self.value, other), check=False)

    __radd__ = __add__

    @classmethod
    def sub(cls, a, b):
        """Subtract polynomials a and b."""
        a = cls._intern(a)
        b = cls._intern(b)
        return cls(cls._sub(a, b), check=False)

    def __sub__(self, other):
        cls = type(self)
        other = cls._coerce(other)
        if other is NotImplemented:
            return NotImplemented

        return cls(cls._sub(self.value, other), check=False)

    def __rsub__(self, other):
        cls = type(self)
        other = cls._coerce(other)
        if other is NotImplemented:
            return NotImplemented

        return cls(cls._sub(other, self.value), check=False)

    @classmethod
    def mul(cls, a, b):
        """Multiply polynomials a and b."""
        a = cls._intern(a)
        b = cls._intern(b)
        return cls(cls._mul(a, b), check=False)

    def __mul__(self, other):
        cls = type(self)
        other = cls._coerce(other)
        if other is NotImplemented:
            return NotImplemented

        return cls(cls._mul(self.value, other), check=False)

    __rmul__ = __mul__

    def __floordiv__(self, other):
        cls = type(self)
        other = cls._coerce(other)
        if other is NotImplemented:
            return NotImplemented

        return cls(cls._divmod(self.value, other)[0], check=False)

    def __rfloordiv__(self, other):
        cls = type(self)
        other = cls._coerce(other)
        if other is NotImplemented:
            return NotImplemented

        return cls(cls._divmod(other, self.value)[0], check=False)

    @classmethod
    def mod(cls, a, b):
        """Reduce polynomial a modulo polynomial b, for nonzero b."""
        a = cls._intern(a)
        b = cls._intern(b)
        return cls(cls._mod(a, b), check=False)

    def __mod__(self, other):
        cls = type(self)
        other = cls._coerce(other)
        if other is NotImplemented:
            return NotImplemented

        return cls(cls._mod(self.value, other), check=False)

    def __rmod__(self, other):
        cls = type(self)
        other = cls._coerce(other)
        if other is NotImplemented:
            return NotImplemented

        return cls(cls._mod(other, self.value), check=False)

    @classmethod
    def divmod(cls, a, b):
        """Divide polynomial a by polynomial b with remainder, for nonzero b."""
        a = cls._intern(a)
        b = cls._intern(b)
        q, r = cls._divmod(a, b)
        return cls(q, check=False), cls(r, check=False)

    def __divmod__(self, other):
        cls = type(self)
        other = cls._coerce(other)
        if other is NotImplemented:
            return NotImplemented

        q, r = cls._divmod(self.value, other)
        return cls(q, check=False), cls(r, check=False)

    def __rdivmod__(self, other):
        cls = type(self)
        other = cls._coerce(other)
        if other is NotImplemented:
            return NotImplemented

        q, r = cls._divmod(other, self.value)
        return cls(q, check=False), cls(r, check=False)

    @classmethod
    def powmod(cls, a, n, b):
        """Polynomial a to the power of n modulo polynomial b, for nonzero b."""
        a = cls._intern(a)
        b = cls._intern(b)
        return cls(cls._powmod(a, n, modulus=b), check=False)

    @classmethod
    def powx(cls, k, b):
        """X to the power of k modulo polynomial b, for nonzero b.

        Right-to-left binary exponentiation, reducing modulo b after each
        multiplication. Exponent k may be huge, e.g., p^n for the size of GF(p^n).
        """
        b = cls._intern(b)
        return cls(cls._powx(k, b), check=False)

    def __pow__(self, other):
        cls = type(self)
        return cls(cls._powmod(self.value, other), check=False)

    @classmethod
    def gcd(cls, a, b):
        """Greatest common divisor of polynomials a and b, made monic."""
        a = cls._intern(a)
        b = cls._intern(b)
        return cls(cls._gcd(a, b), check=False)

    @classmethod
    def is_irreducible(cls, a):
        """Test polynomial a for irreducibility, using Rabin's test."""
        a = cls._intern(a)
        return cls._is_irreducible(a)

    @classmethod
    def next_irreducible(cls, a):
        """Return lexicographically next monic irreducible polynomial > a.

        E.g., X < X+1 < X^2+X+1 < X^3+X+1 < X^3+X^2+1 < ... for p=2.
        """
        a = cls._intern(a)
        return cls(cls._next_irreducible(a), check=False)

    def __repr__(self):
        return self._to_terms(self.value)

    def __str__(self):
        return self.render()

    def __eq__(self, other):
        """Equality test."""
        other = self._coerce(other)
        if other is NotImplemented:
            return False

        return self.value == tuple(other)

    def __ne__(self, other):
        """Negated equality test."""
        other = self._coerce(other)
        if other is NotImplemented:
            return True

        return self.value != tuple(other)

    def __hash__(self):
        """Make polynomials hashable (e.g., for LRU caching)."""
        return hash((type(self).__name__, self.value))

    def __bool__(self):
        """Truth value testing.

        Return False if this polynomial is zero, True otherwise.
        """
        return not self._is_zero(self.value)


def is_irreducible(f):
    """Decide whether polynomial f is irreducible over GF(p).

    Constants, including the zero polynomial, are never irreducible.
    """
    if not isinstance(f, Polynomial):
        raise TypeError('polynomial over GF(p) expected')

    return type(f).is_irreducible(f)


def check_input(p, coefficients):
    """Check modulus p and coefficients a_0, ..., a_n before testing irreducibility.

    Return a list of problems found, which is empty if p is prime and the
    coefficients define a polynomial of degree at least 1 over GF(p).
    """
    problems = []
    if not isinstance(p, int) or isinstance(p, bool):
        problems.append(f'modulus {p!r} is not an integer')
    elif p < 2 or not gmpy2.is_prime(p):
        problems.append(f'modulus {p} is not a prime')

    if not isinstance(coefficients, (list, tuple)):
        problems.append('coefficients must be given as a list or tuple')
    elif not coefficients:
        problems.append('no coefficients given')
    elif not all(isinstance(c, int) for c in coefficients):
        problems.append('coefficients must be integers')
    elif not problems:
        f = polynomial(coefficients, p)
        if f.degree() < 1:
            problems.append(f'polynomial {f!r} over GF({p}) is constant')
    return problems
