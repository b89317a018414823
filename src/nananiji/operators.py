# src/nananiji/operators.py

"""
Exact binary operators over rationals.

Values are kept in canonical form: a plain ``int`` when the value is
integral, otherwise a reduced :class:`fractions.Fraction`. Both hash alike for
equal values, so they can share table keys, and integer-only arithmetic stays
on the fast ``int`` path.

Examples
--------
>>> from fractions import Fraction
>>> from nananiji.operators import Operator
>>> Operator.ADD.invoke(Fraction(1, 3), Fraction(1, 2))
Fraction(5, 6)
>>> Operator.DIV.invoke(6, 3)
2
>>> Operator.DIV.invoke(1, 0) is None
True
>>> str(Operator.MUL)
'*'
"""

from __future__ import annotations
from enum import Enum
from fractions import Fraction
from numbers import Rational
from typing import Optional, Union

__all__ = [
    "RationalLike",
    "Operator",
    "OPERATORS",
    "canonical",
]

RationalLike = Union[int, Fraction]


def canonical(q: Rational) -> RationalLike:
    """Return ``q`` as an ``int`` when integral, else as a reduced ``Fraction``."""
    if q.denominator == 1:
        return int(q.numerator)
    if isinstance(q, Fraction):
        return q
    return Fraction(q.numerator, q.denominator)


class Operator(Enum):
    ADD = "+"
    SUB = "-"
    MUL = "*"
    DIV = "/"

    @property
    def symbol(self) -> str:
        return self.value

    @property
    def commutative(self) -> bool:
        return self is Operator.ADD or self is Operator.MUL

    def invoke(self, x: RationalLike, y: RationalLike) -> Optional[RationalLike]:
        """Apply the operator exactly; ``None`` for division by zero."""
        if self is Operator.ADD:
            return canonical(x + y)
        if self is Operator.SUB:
            return canonical(x - y)
        if self is Operator.MUL:
            return canonical(x * y)
        if y == 0:
            return None
        return canonical(Fraction(x, y))

    def __str__(self) -> str:
        return self.value


# enumeration order decides which expression is found first
OPERATORS = (Operator.ADD, Operator.SUB, Operator.MUL, Operator.DIV)
