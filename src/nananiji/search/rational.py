# src/nananiji/search/rational.py

"""
Breadth-by-depth exact-rational reachability search.

Depth 0 holds every value the seed groupings express on their own. Depth
``k`` combines a value found at depth ``i`` with one found at depth ``j``
for every ``i + j == k - 1``, under each of the four operators. A value is
recorded once, with the first expression that reached it; later, deeper
expressions never replace it.

Two guards keep the search tractable:

- ``+`` and ``*`` are only tried with ``lval <= rval``;
- results whose reduced denominator is ``>= denom_cut`` are discarded.

Examples
--------
>>> from nananiji.search.rational import RationalSearch
>>> rs = RationalSearch.from_lists([[334]], denom_cut=30)
>>> rs.extend(2)
>>> sorted(rs.generatable_nums[1])
[0, 1, 668, 111556]
>>> rs.known_expr[111556]
'334*334'
"""

from __future__ import annotations
from typing import Dict, Iterable, List, Sequence

from tqdm.auto import tqdm

from nananiji.operators import OPERATORS, Operator, RationalLike
from nananiji.search.seeds import ExprTable, grouping_table

__all__ = ["RationalSearch"]


def _wrap_product(expr: str) -> str:
    """Parenthesize ``expr`` if it is a product at the top level."""
    level = 0
    for ch in expr:
        if ch == "(":
            level += 1
        elif ch == ")":
            level -= 1
        elif ch == "*" and level == 0:
            return f"({expr})"
    return expr


def _combine(lexpr: str, op: Operator, rexpr: str) -> str:
    if op is Operator.MUL:
        return f"{lexpr}{op}{rexpr}"
    if op is Operator.DIV:
        rexpr = _wrap_product(rexpr)
    return f"({lexpr}{op}{rexpr})"


class RationalSearch:
    """
    Growing table of reachable rationals and their expressions.

    Attributes
    ----------
    denom_cut : int
        Exclusive upper bound on reduced denominators accepted at depth >= 1.
    generatable_nums : list of list
        ``generatable_nums[i]`` holds the values first found at depth ``i``.
        A level is never modified once computed.
    known_expr : dict
        Value -> expression string; grows monotonically.
    """

    def __init__(self, denom_cut: int, generatable_nums: List[List[RationalLike]], known_expr: ExprTable):
        self.denom_cut = denom_cut
        self.generatable_nums = generatable_nums
        self.known_expr = known_expr

    @classmethod
    def from_lists(cls, num_lists: Iterable[Sequence[RationalLike]], denom_cut: int) -> "RationalSearch":
        exprs: ExprTable = {}
        for grouping in num_lists:
            for num, expr in grouping_table(grouping).items():
                exprs.setdefault(num, expr)
        return cls(denom_cut, [list(exprs)], exprs)

    @property
    def depth(self) -> int:
        """Number of computed levels (depth 0 included)."""
        return len(self.generatable_nums)

    def extend(self, n: int, *, progress: bool = False) -> None:
        """Compute levels up to (excluding) ``n``; no-op when already there."""
        start = len(self.generatable_nums)
        if start >= n:
            return

        depths: Iterable[int] = range(start, n)
        if progress:
            depths = tqdm(depths, total=n - start, desc="search depth")

        for k in depths:
            self.generatable_nums.append(self._next_level(k))

    def _next_level(self, k: int) -> List[RationalLike]:
        levels = self.generatable_nums
        known = self.known_expr
        denom_cut = self.denom_cut
        found: List[RationalLike] = []

        for i in range(k):
            rvals = levels[k - 1 - i]
            for lval in levels[i]:
                for rval in rvals:
                    for op in OPERATORS:
                        if op.commutative and lval > rval:
                            continue
                        num = op.invoke(lval, rval)
                        if num is None or num.denominator >= denom_cut or num in known:
                            continue
                        known[num] = _combine(known[lval], op, known[rval])
                        found.append(num)

        found.sort(key=lambda num: num.denominator)
        return found

    # ─────────────── integer projections ─────────────── #

    def integer_levels(self) -> List[List[int]]:
        return [[int(num) for num in level if num.denominator == 1] for level in self.generatable_nums]

    def integer_table(self) -> Dict[int, str]:
        return {int(num): expr for num, expr in self.known_expr.items() if num.denominator == 1}

    def __repr__(self) -> str:
        sizes = [len(level) for level in self.generatable_nums]
        return f"RationalSearch(denom_cut={self.denom_cut}, level_sizes={sizes})"
