# src/nananiji/search/seeds.py

"""
Depth-0 expression tables built from a single seed grouping.

A grouping is a short run of integers whose digits, concatenated, spell the
base numeral (``227 -> (22, 7)``). Each arity has its own composition rule:

- arity 1: the value itself;
- arity 2: one operator between the two numbers, ``(x<op>y)``;
- arity 3: two operators, both left ``((x op1 y) op2 z)`` and right
  ``(x op1 (y op2 z))`` associated, with redundant inner parentheses elided.

When several combinations produce the same value, the first one written (in
operator enumeration order) is kept.

Examples
--------
>>> from nananiji.search.seeds import generate_pair_expr
>>> generate_pair_expr(33, 4)[37]
'(33+4)'
"""

from __future__ import annotations
from itertools import product
from typing import Dict, Optional, Sequence, Tuple

from nananiji.errors import SeedArityError
from nananiji.operators import OPERATORS, Operator, RationalLike, canonical

__all__ = [
    "ExprTable",
    "generate_pair_expr",
    "generate_triple_expr",
    "grouping_table",
]

ExprTable = Dict[RationalLike, str]

_ADDITIVE = (Operator.ADD, Operator.SUB)
_MULTIPLICATIVE = (Operator.MUL, Operator.DIV)


def generate_pair_expr(num1: RationalLike, num2: RationalLike) -> ExprTable:
    exprs: ExprTable = {}
    for op in OPERATORS:
        res = op.invoke(num1, num2)
        if res is not None:
            exprs.setdefault(res, f"({num1}{op}{num2})")
    return exprs


def _invoke_left(
    num1: RationalLike, num2: RationalLike, num3: RationalLike, op1: Operator, op2: Operator
) -> Optional[Tuple[RationalLike, str]]:
    # ((num1 op1 num2) op2 num3)
    tmp = op1.invoke(num1, num2)
    if tmp is None:
        return None
    num = op2.invoke(tmp, num3)
    if num is None:
        return None
    if op1 in _MULTIPLICATIVE or (op1 in _ADDITIVE and op2 in _ADDITIVE):
        return num, f"({num1}{op1}{num2}{op2}{num3})"
    return num, f"(({num1}{op1}{num2}){op2}{num3})"


def _invoke_right(
    num1: RationalLike, num2: RationalLike, num3: RationalLike, op1: Operator, op2: Operator
) -> Optional[Tuple[RationalLike, str]]:
    # (num1 op1 (num2 op2 num3))
    tmp = op2.invoke(num2, num3)
    if tmp is None:
        return None
    num = op1.invoke(num1, tmp)
    if num is None:
        return None
    if op1 is Operator.ADD or (op1 is not Operator.DIV and op2 in _MULTIPLICATIVE):
        return num, f"({num1}{op1}{num2}{op2}{num3})"
    return num, f"({num1}{op1}({num2}{op2}{num3}))"


def generate_triple_expr(num1: RationalLike, num2: RationalLike, num3: RationalLike) -> ExprTable:
    exprs: ExprTable = {}
    for op1, op2 in product(OPERATORS, OPERATORS):
        for invoke in (_invoke_left, _invoke_right):
            found = invoke(num1, num2, num3, op1, op2)
            if found is not None:
                exprs.setdefault(*found)
    return exprs


def grouping_table(grouping: Sequence[RationalLike]) -> ExprTable:
    """
    Dispatch a grouping to its arity-specific table.

    Raises
    ------
    SeedArityError
        If ``grouping`` does not hold exactly 1, 2 or 3 numbers.
    """
    nums = [canonical(n) for n in grouping]
    if len(nums) == 1:
        return {nums[0]: str(nums[0])}
    if len(nums) == 2:
        return generate_pair_expr(*nums)
    if len(nums) == 3:
        return generate_triple_expr(*nums)
    raise SeedArityError(f"seed groupings must hold 1, 2 or 3 numbers, got {len(nums)}: {list(grouping)!r}")
