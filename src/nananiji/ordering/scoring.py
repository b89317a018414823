# src/nananiji/ordering/scoring.py

"""
Candidate ordering builder.

Every integer found by the search is a potential multiplier; every integer is
a potential offset. A rule's score is ``|m| ** (1 / cost)``, where ``cost``
is the number of search levels spent reaching its operands (``i + 1`` for a
bare multiplier from depth ``i``, ``i + j + 2`` for a multiplier from depth
``i`` with an offset from depth ``j``). Large multipliers that are cheap to
express shrink a target fastest per expression length, so they are tried
first.

The formula is fixed: changing it reorders the rules and therefore changes
the emitted expressions (never their values).
"""

from __future__ import annotations
import math
from typing import List, Sequence, Set, Tuple

from nananiji.ordering.rules import Mul, MulAdd, MulExpr, MulSub

__all__ = [
    "SCORE_THRESHOLD",
    "PAIR_BUDGET",
    "rule_score",
    "all_mul_offset_with_score",
    "build_search_ordering",
]

SCORE_THRESHOLD = 2.0
# skip offset scans whose level-size product exceeds this
PAIR_BUDGET = 2_000_000


def rule_score(magnitude: int, cost: int) -> float:
    """
    ``magnitude ** (1 / cost)`` as a float.

    >>> rule_score(227, 1)
    227.0
    >>> round(rule_score(227, 2), 3)
    15.067
    """
    try:
        return float(magnitude) ** (1.0 / cost)
    except OverflowError:
        # integers past the float range
        return math.exp(math.log(magnitude) / cost)


def all_mul_offset_with_score(gen_nums: Sequence[Sequence[int]]) -> List[Tuple[float, MulExpr]]:
    """
    Score every useful ``Mul``/``MulAdd``/``MulSub`` rule.

    Parameters
    ----------
    gen_nums : sequence of sequences of int
        Integer values per search depth.

    Returns
    -------
    list of (score, rule)
        Unordered; see :func:`build_search_ordering`.

    Notes
    -----
    ``Mul(m)`` and ``Mul(-m)`` are interchangeable, so a multiplier whose
    negation was already processed is skipped. For a given multiplier an
    offset rule is emitted only when it resolves a residue class mod ``|m|``
    not yet resolved, and the offset scan stops once all classes are
    resolved.
    """
    mul_set: Set[int] = set()
    ret: List[Tuple[float, MulExpr]] = []

    for i, muls in enumerate(gen_nums):
        for mul in muls:
            if -mul in mul_set:
                continue
            mul_set.add(mul)
            if mul == 0:
                continue

            mulabs = abs(mul)
            score = rule_score(mulabs, i + 1)
            if score <= SCORE_THRESHOLD:
                continue
            ret.append((score, Mul(mul)))

            rem_set = {0}
            for j, offsets in enumerate(gen_nums):
                if len(muls) * len(offsets) > PAIR_BUDGET:
                    break
                score = rule_score(mulabs, i + j + 2)
                if score <= SCORE_THRESHOLD:
                    # scores only drop for deeper offsets
                    break
                if _scan_offsets(mul, mulabs, offsets, score, rem_set, ret):
                    break

    return ret


def _scan_offsets(
    mul: int,
    mulabs: int,
    offsets: Sequence[int],
    score: float,
    rem_set: Set[int],
    ret: List[Tuple[float, MulExpr]],
) -> bool:
    """Emit offset rules for new residues; ``True`` once all are covered."""
    for offset in offsets:
        rem = offset % mulabs
        if rem not in rem_set:
            rem_set.add(rem)
            ret.append((score, MulSub(mul, offset)))

        rem = -offset % mulabs
        if rem not in rem_set:
            rem_set.add(rem)
            ret.append((score, MulAdd(mul, offset)))

        if len(rem_set) == mulabs:
            return True
    return False


def build_search_ordering(gen_nums: Sequence[Sequence[int]]) -> List[MulExpr]:
    """Rules sorted by descending score; ties keep their emission order."""
    scored = all_mul_offset_with_score(gen_nums)
    scored.sort(key=lambda pair: pair[0], reverse=True)
    return [rule for _, rule in scored]
