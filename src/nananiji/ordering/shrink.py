# src/nananiji/ordering/shrink.py

"""
Ordering shrinker.

Rules whose multiplier equals ``div`` (the largest depth-0 integer) are
tracked by the residue class of ``n`` they resolve modulo ``div``. Once every
class has a rule, any integer can be reduced by one of them, so the rules
after the last one needed are never reached and can be dropped.

If the classes are never all covered, the ordering is returned unchanged;
generation still works but is not bounded by this argument.
"""

from __future__ import annotations
from typing import Dict, List, Optional, Sequence

from nananiji.ordering.rules import MulExpr

__all__ = ["residue_coverage", "shrink_ordering"]


def residue_coverage(search_ordering: Sequence[MulExpr], div: int) -> Dict[int, int]:
    """
    Map each residue class mod ``div`` to the index of the first rule with
    multiplier ``div`` resolving it. The scan stops at full coverage.

    >>> from nananiji.ordering.rules import Mul, MulAdd, MulSub
    >>> residue_coverage([Mul(3), MulAdd(5, 1), MulAdd(3, 4), MulSub(3, 1)], 3)
    {0: 0, 1: 2, 2: 3}
    """
    rem_map: Dict[int, int] = {}
    if div <= 0:
        return rem_map
    for idx, rule in enumerate(search_ordering):
        if rule.multiplier != div:
            continue
        rem = rule.residue(div)
        if rem not in rem_map:
            rem_map[rem] = idx
            if len(rem_map) == div:
                break
    return rem_map


def shrink_ordering(search_ordering: Sequence[MulExpr], div: Optional[int]) -> List[MulExpr]:
    """Truncate after the last rule needed for full coverage mod ``div``."""
    ordering = list(search_ordering)
    if div is None or div <= 0:
        return ordering
    rem_map = residue_coverage(ordering, div)
    if len(rem_map) == div:
        return ordering[: max(rem_map.values()) + 1]
    return ordering
