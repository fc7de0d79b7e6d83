"""Exact rational numbers over unbounded ints, always kept in lowest terms."""

from math import gcd

from core.errors import DivisionByZero, ZeroDenominator


class Rational:
    """Reduced fraction numerator/denominator with denominator > 0.

    Instances are immutable; every operation returns a new reduced value.
    """

    __slots__ = ('_num', '_den')

    def __init__(self, numerator: int, denominator: int = 1):
        if denominator == 0:
            raise ZeroDenominator()
        if denominator < 0:
            numerator, denominator = -numerator, -denominator
        # gcd(0, d) == d, so zero always lands on 0/1
        g = gcd(numerator, denominator)
        if g != 1:
            numerator //= g
            denominator //= g
        object.__setattr__(self, '_num', numerator)
        object.__setattr__(self, '_den', denominator)

    def __setattr__(self, name, value):
        raise AttributeError("Rational is immutable")

    @property
    def numerator(self) -> int:
        return self._num

    @property
    def denominator(self) -> int:
        return self._den

    @staticmethod
    def _coerce(other):
        if isinstance(other, Rational):
            return other
        if isinstance(other, int):
            return Rational(other)
        return None

    # --- named operations ---

    def add(self, other: 'Rational') -> 'Rational':
        return Rational(self._num * other._den + other._num * self._den,
                        self._den * other._den)

    def sub(self, other: 'Rational') -> 'Rational':
        return Rational(self._num * other._den - other._num * self._den,
                        self._den * other._den)

    def mul(self, other: 'Rational') -> 'Rational':
        return Rational(self._num * other._num, self._den * other._den)

    def div(self, other: 'Rational') -> 'Rational':
        if other._num == 0:
            raise DivisionByZero()
        return Rational(self._num * other._den, self._den * other._num)

    def is_integer(self) -> bool:
        return self._den == 1

    # --- operators (accept plain ints on either side) ---

    def __add__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return self.add(other)

    def __radd__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return other.add(self)

    def __sub__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return self.sub(other)

    def __rsub__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return other.sub(self)

    def __mul__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return self.mul(other)

    def __rmul__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return other.mul(self)

    def __truediv__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return self.div(other)

    def __rtruediv__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return other.div(self)

    def __neg__(self):
        return Rational(-self._num, self._den)

    def __eq__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return self._num == other._num and self._den == other._den

    def __hash__(self):
        if self._den == 1:
            return hash(self._num)
        return hash((self._num, self._den))

    def __bool__(self):
        return self._num != 0

    def __repr__(self):
        return f"R({self._num}/{self._den})"

    def __str__(self):
        if self.is_integer():
            return str(self._num)
        return f"{self._num}/{self._den}"

    @staticmethod
    def zero():
        return Rational(0)

    @staticmethod
    def one():
        return Rational(1)
