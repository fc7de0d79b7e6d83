"""Core primitives: digit decoding, exact rationals, point selection, interpolation."""

from core.errors import (
    RecoveryError, InvalidBase, InvalidDigit, ZeroDenominator, DivisionByZero,
    DuplicateX, ZeroX, InsufficientPoints, MalformedDocument,
)
from core.digits import MIN_BASE, MAX_BASE, digit_value, parse_base, decode_digits
from core.rational import Rational
from core.points import Point, select_points
from core.polynomial import Polynomial, barycentric_weights, interpolate_at_zero
from core import rng
