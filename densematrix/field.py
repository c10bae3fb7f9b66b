import sys
from fractions import Fraction


class RealField:
    """Double-precision arithmetic with a tolerance-based zero test.

    ``tolerance`` is the absolute threshold below which two values are
    considered equal. It decides which pivots are skipped and which rows are
    dropped as zero, so it is the knob to turn for ill-conditioned input.
    A tolerance of ``0`` falls back to exact comparison.
    """

    zero = 0.0
    one = 1.0

    def __init__(self, tolerance=sys.float_info.epsilon):
        if tolerance < 0:
            raise ValueError(f"Tolerance must be non-negative, got {tolerance}")
        self.tolerance = float(tolerance)

    def __eq__(self, other):
        return type(self) is type(other) and self.tolerance == other.tolerance

    def __hash__(self):
        return hash((type(self), self.tolerance))

    def __repr__(self):
        return f"RealField(tolerance={self.tolerance!r})"

    def coerce(self, x):
        return float(x)

    def add(self, a, b):
        return a + b

    def sub(self, a, b):
        return a - b

    def mul(self, a, b):
        return a * b

    def div(self, a, b):
        return a / b

    def neg(self, a):
        return -a

    def magnitude(self, a):
        return abs(a)

    def equal(self, a, b):
        if self.tolerance == 0.0:
            return a == b
        return abs(a - b) < self.tolerance

    def is_zero(self, a):
        return self.equal(a, self.zero)

    def format_entry(self, value, width):
        return f"{value:>{width}g}"


class ExactField(RealField):
    """Rational arithmetic on ``Fraction`` entries; equality is exact."""

    zero = Fraction(0)
    one = Fraction(1)

    def __init__(self):
        super().__init__(tolerance=0)

    def __repr__(self):
        return "ExactField()"

    def coerce(self, x):
        return Fraction(x)

    def equal(self, a, b):
        return a == b

    def format_entry(self, value, width):
        return str(value).rjust(width)
