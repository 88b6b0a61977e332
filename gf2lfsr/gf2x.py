"""This module supports arithmetic with polynomials over GF(2).

Two representations of binary polynomials are provided, both implementing the
same interface. For BinaryPolynomial, polynomials are represented as nonnegative
integers: the polynomial b_n x^n + ... + b_1 x + b_0 corresponds to the integer
b_n 2^n + ... + b_1 2 + b_0, for bits b_n,...,b_0. For SparsePolynomial,
polynomials are represented as frozensets of exponents: the same polynomial
corresponds to the set of all i with b_i = 1, using the empty set for zero.

All arithmetic is implemented once, in the base class Polynomial, in terms of
a few primitive operations on the underlying representation (test a bit, xor,
shift, and so on). Subclasses only supply these primitives.

The operators +,-,*,<<,>>,//,%,^,&,| and function divmod are overloaded.
Addition, subtraction and ^ all coincide with xor of coefficients.
The operators <,<=,>,>=,==,!= are overloaded as well, using the order of the
corresponding integers (zero polynomial is the smallest). Polynomials in
different representations compare equal if they have the same coefficients.

GCD, extended GCD, modular inverse and powers are all supported.
Ben-Or's deterministic irreducibility test is provided as well.
"""

import enum
import logging

X = 'x'  # symbol for indeterminate in polynomials


class Reducibility(enum.Enum):
    """Reducibility of a nonconstant binary polynomial."""

    REDUCIBLE = 0
    IRREDUCIBLE = 1


class Polynomial:
    """Abstract base class for polynomials over GF(2).

    Invariant: attribute 'value' is never mutated, all operations return new polynomials.
    """

    __slots__ = 'value'

    _zero = None  # representation of zero polynomial
    _one = None  # representation of polynomial 1

    def __init__(self, value=0, check=True):
        """Initialize polynomial to given value (zero polynomial, by default)."""
        if check:
            value = self._intern(value)
        self.value = value

    @classmethod
    def _intern(cls, a):
        # convert a to cls internal format, if possible
        a = cls._coerce(a)
        if a is NotImplemented:
            raise TypeError('polynomial over GF(2) expected')

        return a

    @classmethod
    def _coerce(cls, a):
        if isinstance(a, Polynomial):
            if isinstance(a, cls):
                return a.value

            return cls._from_exponents(type(a)._to_exponents(a.value))

        if isinstance(a, int):
            if a < 0:
                raise ValueError('nonnegative integer expected')

            return cls._from_int(a)

        if isinstance(a, str):
            return cls._from_terms(a)

        return NotImplemented

    # Primitives on the representation, to be provided by subclasses.

    @staticmethod
    def _from_int(a):
        raise NotImplementedError

    @staticmethod
    def _to_int(a):
        raise NotImplementedError

    @staticmethod
    def _from_exponents(a):
        raise NotImplementedError

    @staticmethod
    def _to_exponents(a):
        """Return exponents of nonzero terms of a in ascending order."""
        raise NotImplementedError

    @staticmethod
    def _deg(a):
        raise NotImplementedError

    @staticmethod
    def _bit(a, i):
        raise NotImplementedError

    @staticmethod
    def _xor(a, b):
        raise NotImplementedError

    @staticmethod
    def _and(a, b):
        raise NotImplementedError

    @staticmethod
    def _or(a, b):
        raise NotImplementedError

    @staticmethod
    def _lshift(a, n):
        raise NotImplementedError

    @staticmethod
    def _rshift(a, n):
        raise NotImplementedError

    # Arithmetic, in terms of the above primitives only.

    @classmethod
    def _from_terms(cls, s, x=X):
        s = ''.join(s.split())  # remove all whitespace
        exponents = set()
        for term in s.split('+'):
            if term == '0':
                continue

            if term == '1':
                i = 0  # x^0 = 1
            elif term == x:
                i = 1  # x^1 = x
            elif term.startswith(f'{x}^') and term[len(x)+1:].isdigit():
                i = int(term[len(x)+1:])
            else:  # invalid term
                raise ValueError('ill formatted polynomial')

            exponents ^= {i}  # repeated terms cancel
        return cls._from_exponents(exponents)

    @classmethod
    def _to_terms(cls, a, x=X):
        if not a:
            return '0'

        terms = []
        for i in reversed(list(cls._to_exponents(a))):
            if i == 0:
                terms.append('1')
            elif i == 1:
                terms.append(x)
            else:
                terms.append(f'{x}^{i}')
        return ' + '.join(terms)

    @classmethod
    def _reverse(cls, a, d=None):
        if d is None:
            d = cls._deg(a)
        # d >= -1
        return cls._from_exponents(d - i for i in cls._to_exponents(a) if i <= d)

    @classmethod
    def _mul(cls, a, b):
        c = cls._zero
        for i in cls._to_exponents(a):
            c = cls._xor(c, cls._lshift(b, i))
        return c

    @classmethod
    def _mod(cls, a, b):
        if b is None:  # see _powmod()
            return a

        n = cls._deg(b)
        if n < 0:
            raise ZeroDivisionError('division by zero polynomial')

        for i in range(cls._deg(a) - n, -1, -1):
            if cls._bit(a, i + n):
                a = cls._xor(a, cls._lshift(b, i))
        return a

    @classmethod
    def _divmod(cls, a, b):
        n = cls._deg(b)
        if n < 0:
            raise ZeroDivisionError('division by zero polynomial')

        q = cls._zero
        for i in range(cls._deg(a) - n, -1, -1):
            if cls._bit(a, i + n):
                a = cls._xor(a, cls._lshift(b, i))
                q = cls._xor(q, cls._lshift(cls._one, i))
        return q, a

    @classmethod
    def _powmod(cls, a, n, modulus=None):
        if n < 0:
            if modulus is None:
                raise ValueError('negative exponent')

            a = cls._invert(a, modulus)
            n = -n
        a = cls._mod(a, modulus)
        c = cls._mod(cls._one, modulus)
        while n:
            # bits of n are consumed least-significant first
            if n & 1:
                c = cls._mod(cls._mul(c, a), modulus)
            n >>= 1
            if n:
                a = cls._mod(cls._mul(a, a), modulus)
        return c

    @classmethod
    def _gcd(cls, a, b):
        while b:
            a, b = b, cls._mod(a, b)
        return a

    @classmethod
    def _gcdext(cls, a, b):
        s, s1 = cls._one, cls._zero
        t, t1 = cls._zero, cls._one
        while b:
            a, (q, b) = b, cls._divmod(a, b)
            s, s1 = s1, cls._xor(s, cls._mul(q, s1))
            t, t1 = t1, cls._xor(t, cls._mul(q, t1))
        return a, s, t

    @classmethod
    def _invert(cls, a, b):
        if not b:
            raise ZeroDivisionError('division by zero polynomial')

        s, s1 = cls._one, cls._zero
        while b:
            a, (q, b) = b, cls._divmod(a, b)
            s, s1 = s1, cls._xor(s, cls._mul(q, s1))
        if a != cls._one:
            raise ZeroDivisionError('inverse does not exist')

        return s

    @classmethod
    def _reducibility(cls, a):
        d = cls._deg(a)
        if d <= 0:
            raise ValueError('reducibility undefined for constant polynomials')

        x = cls._lshift(cls._one, 1)
        b = x
        for i in range(1, d//2 + 1):
            b = cls._mod(cls._mul(b, b), a)  # b = x^(2^i) mod a
            if cls._gcd(a, cls._xor(b, x)) != cls._one:
                logging.debug(f'Reducible {cls._to_terms(a)}, found at i={i}')
                return Reducibility.REDUCIBLE

        return Reducibility.IRREDUCIBLE

    # Public interface.

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
    def from_exponents(cls, exponents):
        """Polynomial with a term x^i for each i in the given iterable of exponents."""
        exponents = set(exponents)
        if not all(isinstance(i, int) and i >= 0 for i in exponents):
            raise ValueError('exponents must be nonnegative integers')

        return cls(cls._from_exponents(exponents), check=False)

    @classmethod
    def from_value(cls, value, degree):
        """Polynomial of given degree with lower-order coefficients given by the bits of value.

        Bits of value at positions degree and higher are ignored, and the coefficient
        of x^degree is set to 1. For instance, from_value(3, 4) is x^4 + x + 1.
        """
        if degree < 0:
            raise ValueError('degree must be nonnegative')

        a = cls._intern(value)
        a = cls._and(a, cls._from_int((1 << degree) - 1))
        return cls(cls._or(a, cls._lshift(cls._one, degree)), check=False)

    @classmethod
    def zero(cls):
        """The zero polynomial."""
        return cls(cls._zero, check=False)

    @classmethod
    def one(cls):
        """The polynomial 1."""
        return cls(cls._one, check=False)

    @classmethod
    def x(cls):
        """The polynomial x."""
        return cls(cls._lshift(cls._one, 1), check=False)

    @classmethod
    def deg(cls, a):
        """Degree of polynomial a (-1 if a is zero polynomial)."""
        a = cls._intern(a)
        return cls._deg(a)

    def degree(self):
        """Degree of polynomial (-1 for zero polynomial)."""
        return self._deg(self.value)

    def exponents(self):
        """Tuple of exponents of the terms of polynomial, in ascending order."""
        return tuple(self._to_exponents(self.value))

    def reverse(self, d=None):
        """Reverse of polynomial (reciprocal, coefficients in reverse order).

        For example, reverse of x^4 + x + 1 is x^4 + x^3 + 1.
        If d is None (default), d is set to the degree of the given polynomial.
        Otherwise, the given polynomial is first padded with zeros or truncated
        to attain the given degree d, d>=-1, before it is reversed.
        """
        cls = type(self)
        return cls(cls._reverse(self.value, d=d), check=False)

    def __int__(self):
        return self._to_int(self.value)

    def __getitem__(self, key):  # NB: no set_item to prevent mutability
        if not isinstance(key, int):
            raise IndexError('use int for indexing polynomials')

        if key < 0:
            raise IndexError('negative index not allowed for polynomials')

        return self._bit(self.value, key)

    def __iter__(self):
        """Coefficients of polynomial, lowest degree first."""
        a = self.value
        for i in range(self._deg(a) + 1):
            yield self._bit(a, i)

    def __call__(self, x):
        """Evaluate polynomial at given x."""
        if x % 2:
            return sum(1 for _ in self._to_exponents(self.value)) % 2

        return self._bit(self.value, 0)

    @classmethod
    def add(cls, a, b):
        """Add polynomials a and b."""
        a = cls._intern(a)
        b = cls._intern(b)
        return cls(cls._xor(a, b), check=False)

    sub = add
    xor = add

    def __add__(self, other):
        cls = type(self)
        other = cls._coerce(other)
        if other is NotImplemented:
            return NotImplemented

        return cls(cls._xor(self.value, other), check=False)

    __radd__ = __add__
    __sub__ = __add__
    __rsub__ = __add__
    __xor__ = __add__
    __rxor__ = __add__

    @classmethod
    def and_(cls, a, b):
        """Coefficient-wise AND of polynomials a and b."""
        a = cls._intern(a)
        b = cls._intern(b)
        return cls(cls._and(a, b), check=False)

    def __and__(self, other):
        cls = type(self)
        other = cls._coerce(other)
        if other is NotImplemented:
            return NotImplemented

        return cls(cls._and(self.value, other), check=False)

    __rand__ = __and__

    @classmethod
    def or_(cls, a, b):
        """Coefficient-wise OR of polynomials a and b."""
        a = cls._intern(a)
        b = cls._intern(b)
        return cls(cls._or(a, b), check=False)

    def __or__(self, other):
        cls = type(self)
        other = cls._coerce(other)
        if other is NotImplemented:
            return NotImplemented

        return cls(cls._or(self.value, other), check=False)

    __ror__ = __or__

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

    @staticmethod
    def _shift_count(n):
        if not isinstance(n, int):
            raise TypeError('int shift count expected')

        if n < 0:
            raise ValueError('negative shift count')

        return n

    @classmethod
    def lshift(cls, a, n):
        """Multiply polynomial a by x^n."""
        n = cls._shift_count(n)
        a = cls._intern(a)
        return cls(cls._lshift(a, n), check=False)

    def __lshift__(self, other):
        if not isinstance(other, int):
            return NotImplemented

        cls = type(self)
        other = cls._shift_count(other)
        return cls(cls._lshift(self.value, other), check=False)

    def __rlshift__(self, other):
        return NotImplemented

    @classmethod
    def rshift(cls, a, n):
        """Quotient for polynomial a divided by x^n."""
        n = cls._shift_count(n)
        a = cls._intern(a)
        return cls(cls._rshift(a, n), check=False)

    def __rshift__(self, other):
        if not isinstance(other, int):
            return NotImplemented

        cls = type(self)
        other = cls._shift_count(other)
        return cls(cls._rshift(self.value, other), check=False)

    def __rrshift__(self, other):
        return NotImplemented

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

    def __pow__(self, other):
        if not isinstance(other, int):
            return NotImplemented

        cls = type(self)
        return cls(cls._powmod(self.value, other), check=False)

    @classmethod
    def gcd(cls, a, b):
        """Greatest common divisor of polynomials a and b."""
        a = cls._intern(a)
        b = cls._intern(b)
        return cls(cls._gcd(a, b), check=False)

    @classmethod
    def gcdext(cls, a, b):
        """Extended GCD for polynomials a and b.

        Return d, s, t satisfying s a + t b = d = gcd(a,b).
        """
        a = cls._intern(a)
        b = cls._intern(b)
        d, s, t = cls._gcdext(a, b)
        return cls(d, check=False), cls(s, check=False), cls(t, check=False)

    @classmethod
    def invert(cls, a, b):
        """Inverse of polynomial a modulo polynomial b, for nonzero b."""
        a = cls._intern(a)
        b = cls._intern(b)
        return cls(cls._invert(a, b), check=False)

    @classmethod
    def reducibility(cls, a):
        """Classify nonconstant polynomial a as reducible or irreducible (Ben-Or test).

        For i = 1,...,deg(a)//2, the gcd of a and x^(2^i) - x modulo a is computed.
        Polynomial a is irreducible if and only if all these gcds are equal to 1.
        Raise ValueError for constant polynomials a (including zero).
        """
        a = cls._intern(a)
        return cls._reducibility(a)

    @classmethod
    def is_irreducible(cls, a):
        """Test nonconstant polynomial a for irreducibility."""
        return cls.reducibility(a) is Reducibility.IRREDUCIBLE

    @classmethod
    def is_primitive(cls, a):
        """Test nonconstant polynomial a for primitivity."""
        from gf2lfsr import primitive
        return primitive.is_primitive(cls(a))

    def __repr__(self):
        return self._to_terms(self.value)

    def __lt__(self, other):
        """Strictly less-than comparison."""
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented

        return self._to_int(self.value) < self._to_int(other)

    def __le__(self, other):
        """Less-than or equal comparison."""
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented

        return self._to_int(self.value) <= self._to_int(other)

    def __eq__(self, other):
        """Equality test."""
        try:
            other = self._coerce(other)
        except ValueError:  # negative int, ill formatted str
            return False

        if other is NotImplemented:
            return False

        return self.value == other

    def __ge__(self, other):
        """Greater-than or equal comparison."""
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented

        return self._to_int(self.value) >= self._to_int(other)

    def __gt__(self, other):
        """Strictly greater-than comparison."""
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented

        return self._to_int(self.value) > self._to_int(other)

    def __ne__(self, other):
        """Negated equality test."""
        try:
            other = self._coerce(other)
        except ValueError:
            return True

        if other is NotImplemented:
            return True

        return self.value != other

    def __hash__(self):
        """Make polynomials hashable, equal hashes for equal polynomials in either representation."""
        return hash(self._to_int(self.value))

    def __bool__(self):
        """Truth value testing.

        Return False if this polynomial is zero, True otherwise.
        """
        return bool(self.value)


class BinaryPolynomial(Polynomial):
    """Polynomials over GF(2) represented as nonnegative integers."""

    __slots__ = ()

    _zero = 0
    _one = 1

    @staticmethod
    def _from_int(a):
        return a

    @staticmethod
    def _to_int(a):
        return a

    @staticmethod
    def _from_exponents(a):
        s = 0
        for i in a:
            s ^= 1 << i
        return s

    @staticmethod
    def _to_exponents(a):
        i = 0
        while a:
            if a & 1:
                yield i
            a >>= 1
            i += 1

    @staticmethod
    def _deg(a):
        return a.bit_length() - 1

    @staticmethod
    def _bit(a, i):
        return (a >> i) & 1

    @staticmethod
    def _xor(a, b):
        return a ^ b

    @staticmethod
    def _and(a, b):
        return a & b

    @staticmethod
    def _or(a, b):
        return a | b

    @staticmethod
    def _lshift(a, n):
        return a << n

    @staticmethod
    def _rshift(a, n):
        return a >> n


class SparsePolynomial(Polynomial):
    """Polynomials over GF(2) represented as frozensets of exponents.

    Suitable for polynomials of huge degree with few terms, such as trinomials.
    """

    __slots__ = ()

    _zero = frozenset()
    _one = frozenset((0,))

    @staticmethod
    def _from_int(a):
        return frozenset(BinaryPolynomial._to_exponents(a))

    @staticmethod
    def _to_int(a):
        return BinaryPolynomial._from_exponents(a)

    @staticmethod
    def _from_exponents(a):
        s = set()
        for i in a:
            s ^= {i}
        return frozenset(s)

    @staticmethod
    def _to_exponents(a):
        return sorted(a)

    @staticmethod
    def _deg(a):
        return max(a, default=-1)

    @staticmethod
    def _bit(a, i):
        return int(i in a)

    @staticmethod
    def _xor(a, b):
        return a ^ b

    @staticmethod
    def _and(a, b):
        return a & b

    @staticmethod
    def _or(a, b):
        return a | b

    @staticmethod
    def _lshift(a, n):
        return frozenset(i + n for i in a)

    @staticmethod
    def _rshift(a, n):
        return frozenset(i - n for i in a if i >= n)


def _type(a):
    return type(a) if isinstance(a, Polynomial) else BinaryPolynomial


def add(a, b):
    """Add polynomials a and b."""
    return _type(a).add(a, b)


def mul(a, b):
    """Multiply polynomials a and b."""
    return _type(a).mul(a, b)


def mod(a, b):
    """Reduce polynomial a modulo polynomial b, for nonzero b."""
    return _type(a).mod(a, b)


def divmod_(a, b):
    """Divide polynomial a by polynomial b with remainder, for nonzero b."""
    return _type(a).divmod(a, b)


def gcd(a, b):
    """Greatest common divisor of polynomials a and b."""
    return _type(a).gcd(a, b)


def gcdext(a, b):
    """Extended GCD for polynomials a and b."""
    return _type(a).gcdext(a, b)


def invert(a, b):
    """Inverse of polynomial a modulo polynomial b, for nonzero b."""
    return _type(a).invert(a, b)


def powmod(a, n, b):
    """Raise polynomial a to the power of n modulo polynomial b, for nonzero b."""
    return _type(a).powmod(a, n, b)


def degree(a):
    """Degree of polynomial a (-1 if a is zero)."""
    return _type(a).deg(a)


def to_terms(a, x=X):
    """Convert polynomial a to a string with sum of powers of x."""
    return _type(a).to_terms(a, x)


def from_terms(s, x=X):
    """Convert string s with sum of powers of x to a polynomial."""
    return BinaryPolynomial.from_terms(s, x)


def reducibility(a):
    """Classify nonconstant polynomial a as reducible or irreducible."""
    return _type(a).reducibility(a)


def is_irreducible(a):
    """Test nonconstant polynomial a for irreducibility."""
    return _type(a).is_irreducible(a)
