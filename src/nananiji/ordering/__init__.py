from .rules import Mul, MulAdd, MulSub, MulExpr, rule_to_record, rule_from_record
from .scoring import rule_score, all_mul_offset_with_score, build_search_ordering
from .shrink import residue_coverage, shrink_ordering

__all__ = [
    "Mul",
    "MulAdd",
    "MulSub",
    "MulExpr",
    "rule_to_record",
    "rule_from_record",
    "rule_score",
    "all_mul_offset_with_score",
    "build_search_ordering",
    "residue_coverage",
    "shrink_ordering",
]
