import math
from decimal import Decimal
from fractions import Fraction
from typing import Union

Num = Union[int, float, Fraction, Decimal]


def F(x: Num, max_denominator: int = 10**6) -> Fraction:
    """Convert a number to a Fraction for display.
    - Fraction, Decimal, int -> exact
    - float (numpy floats included) -> closest rational with a bounded denominator
    """
    if isinstance(x, Fraction):
        return x
    if isinstance(x, (Decimal, int)):
        return Fraction(x)
    return Fraction.from_float(float(x)).limit_denominator(max_denominator)


def fmt_out(x: Num) -> str:
    """Pretty-print numbers as integers or reduced fractions."""
    if isinstance(x, float) and (math.isnan(x) or math.isinf(x)):
        return str(x)
    fr = F(x)
    if fr == 0:
        return "0"
    if fr.denominator == 1:
        return str(fr.numerator)
    sign = '-' if fr.numerator < 0 else ''
    return f"{sign}{abs(fr.numerator)}/{fr.denominator}"
