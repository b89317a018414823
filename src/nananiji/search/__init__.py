from .seeds import generate_pair_expr, generate_triple_expr, grouping_table
from .rational import RationalSearch

__all__ = [
    "generate_pair_expr",
    "generate_triple_expr",
    "grouping_table",
    "RationalSearch",
]
