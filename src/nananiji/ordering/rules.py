# src/nananiji/ordering/rules.py

"""
Decomposition rules used by the generator's recursion.

Each rule names integers that have a known expression and encodes one
identity:

- ``Mul(m)``:        ``n = g(n/m) * m``
- ``MulAdd(m, a)``:  ``n = g((n-a)/m) * m + a``
- ``MulSub(m, s)``:  ``n = g((n+s)/m) * m - s``

``reduce(n)`` returns the recursive sub-target when the rule applies to ``n``
and ``None`` otherwise.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Optional, Tuple, Union

__all__ = [
    "Mul",
    "MulAdd",
    "MulSub",
    "MulExpr",
    "RuleRecord",
    "rule_to_record",
    "rule_from_record",
]


@dataclass(frozen=True, slots=True)
class Mul:
    multiplier: int

    kind = "mul"

    def reduce(self, n: int) -> Optional[int]:
        if n % self.multiplier == 0:
            return n // self.multiplier
        return None

    def residue(self, div: int) -> int:
        return 0


@dataclass(frozen=True, slots=True)
class MulAdd:
    multiplier: int
    offset: int

    kind = "mul_add"

    def reduce(self, n: int) -> Optional[int]:
        shifted = n - self.offset
        if shifted % self.multiplier == 0:
            return shifted // self.multiplier
        return None

    def residue(self, div: int) -> int:
        return self.offset % div


@dataclass(frozen=True, slots=True)
class MulSub:
    multiplier: int
    offset: int

    kind = "mul_sub"

    def reduce(self, n: int) -> Optional[int]:
        shifted = n + self.offset
        if shifted % self.multiplier == 0:
            return shifted // self.multiplier
        return None

    def residue(self, div: int) -> int:
        return -self.offset % div


MulExpr = Union[Mul, MulAdd, MulSub]

# (kind, multiplier, offset); offset is 0 for Mul
RuleRecord = Tuple[str, int, int]

_KINDS = {"mul": Mul, "mul_add": MulAdd, "mul_sub": MulSub}


def rule_to_record(rule: MulExpr) -> RuleRecord:
    return (rule.kind, rule.multiplier, getattr(rule, "offset", 0))


def rule_from_record(record) -> MulExpr:
    """
    Rebuild a rule from a ``(kind, multiplier, offset)`` record.

    Raises
    ------
    ValueError
        On an unknown kind, a zero multiplier or non-integer fields.
    """
    kind, multiplier, offset = record
    if kind not in _KINDS:
        raise ValueError(f"unknown rule kind: {kind!r}")
    if type(multiplier) is not int or type(offset) is not int:
        raise ValueError(f"rule fields must be integers: {record!r}")
    if multiplier == 0:
        raise ValueError("rule multiplier must be non-zero")
    if kind == "mul":
        return Mul(multiplier)
    return _KINDS[kind](multiplier, offset)
