"""Polynomials over the integers and exact barycentric interpolation at x=0."""

from core import rng
from core.errors import DivisionByZero, DuplicateX, InsufficientPoints, ZeroX
from core.points import Point
from core.rational import Rational


class Polynomial:
    """Integer polynomial. coeffs[0] = constant term."""

    def __init__(self, coeffs: list[int]):
        self.coeffs = coeffs

    @property
    def degree(self) -> int:
        return len(self.coeffs) - 1

    def evaluate(self, x: int) -> int:
        """Evaluate polynomial at x using Horner's method."""
        result = 0
        for coeff in reversed(self.coeffs):
            result = result * x + coeff
        return result

    def sample(self, xs) -> list[Point]:
        return [Point(x, self.evaluate(x)) for x in xs]

    @staticmethod
    def random(degree: int, constant: int, bound: int = 1000) -> 'Polynomial':
        """Random polynomial of given degree with p(0) = constant.

        Higher coefficients are drawn from [-bound, bound]; the leading one
        is never zero so the degree is exact.
        """
        coeffs = [constant]
        for i in range(degree):
            c = rng.randint(-bound, bound)
            while i == degree - 1 and c == 0:
                c = rng.randint(-bound, bound)
            coeffs.append(c)
        return Polynomial(coeffs)

    @staticmethod
    def interpolate_at_zero(points) -> Rational:
        return interpolate_at_zero(points)


def barycentric_weights(xs: list[int]) -> list[Rational]:
    """w_i = 1 / prod_{j!=i} (x_i - x_j), in input order."""
    weights = []
    for i, xi in enumerate(xs):
        denom = 1
        for j, xj in enumerate(xs):
            if i == j:
                continue
            diff = xi - xj
            if diff == 0:
                raise DuplicateX(xi)
            denom *= diff
        weights.append(Rational(1, denom))
    return weights


def interpolate_at_zero(points) -> Rational:
    """Exact value at x=0 of the degree <= k-1 polynomial through k points.

    Barycentric form specialised to x=0:
        f(0) = sum_i (w_i * y_i / x_i) / sum_i (w_i / x_i)
    Sums are accumulated in input order.
    """
    points = list(points)
    if not points:
        raise InsufficientPoints(required=1, available=0)

    weights = barycentric_weights([p.x for p in points])

    num = Rational.zero()
    den = Rational.zero()
    for p, w in zip(points, weights):
        if p.x == 0:
            raise ZeroX()
        inv_x = Rational(1, p.x)
        num = num.add(w.mul(Rational(p.y)).mul(inv_x))
        den = den.add(w.mul(inv_x))

    if not den:
        raise DivisionByZero()
    return num.div(den)
