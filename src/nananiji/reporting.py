# src/nananiji/reporting.py

"""
Inspection and verification helpers.

- :func:`evaluate_expression` re-parses an emitted expression and evaluates
  it with exact rationals (no floats, no ``eval``).
- :func:`depth_summary` and :func:`ordering_frame` tabulate a search and a
  generator as ``pandas.DataFrame`` objects.
- :func:`verify_generator` checks ``generate(n)`` against exact evaluation
  for a batch of targets, e.g. from :func:`sample_targets`.

Examples
--------
>>> from nananiji.reporting import evaluate_expression
>>> evaluate_expression("(22/7)*7")
Fraction(22, 1)
"""

from __future__ import annotations
import ast
from fractions import Fraction
from typing import Iterable, List, Optional

import numpy as np
import pandas as pd

from nananiji.errors import GenerationError
from nananiji.generator import ExpressionGenerator
from nananiji.ordering.rules import rule_to_record
from nananiji.search.rational import RationalSearch

__all__ = [
    "evaluate_expression",
    "depth_summary",
    "ordering_frame",
    "sample_targets",
    "verify_generator",
]


_BINOPS = {
    ast.Add: lambda x, y: x + y,
    ast.Sub: lambda x, y: x - y,
    ast.Mult: lambda x, y: x * y,
    ast.Div: lambda x, y: x / y,
}


def _eval_node(node: ast.AST) -> Fraction:
    if isinstance(node, ast.Expression):
        return _eval_node(node.body)
    if isinstance(node, ast.BinOp) and type(node.op) in _BINOPS:
        return _BINOPS[type(node.op)](_eval_node(node.left), _eval_node(node.right))
    if isinstance(node, ast.UnaryOp) and isinstance(node.op, ast.USub):
        return -_eval_node(node.operand)
    if isinstance(node, ast.Constant) and type(node.value) is int:
        return Fraction(node.value)
    raise ValueError(f"unsupported syntax in expression: {ast.dump(node)}")


def evaluate_expression(expr: str) -> Fraction:
    """
    Evaluate ``+ - * /`` over integer literals exactly.

    Raises
    ------
    ValueError
        On any other syntax.
    ZeroDivisionError
        If the expression divides by zero.
    """
    try:
        tree = ast.parse(expr, mode="eval")
    except SyntaxError as e:
        raise ValueError(f"not an arithmetic expression: {expr!r}") from e
    return _eval_node(tree)


def depth_summary(search: RationalSearch) -> pd.DataFrame:
    """One row per search level: value counts and the largest denominator."""
    rows = []
    for depth, level in enumerate(search.generatable_nums):
        denoms = [num.denominator for num in level]
        rows.append({
            "depth": depth,
            "values": len(level),
            "integers": sum(1 for d in denoms if d == 1),
            "max_denominator": max(denoms) if denoms else 0,
        })
    return pd.DataFrame(rows, columns=["depth", "values", "integers", "max_denominator"])


def ordering_frame(generator: ExpressionGenerator) -> pd.DataFrame:
    """The generator's rules in trial order, one row per rule."""
    records = [rule_to_record(rule) for rule in generator.search_ordering]
    return pd.DataFrame(records, columns=["kind", "multiplier", "offset"], dtype=object)


def sample_targets(low: int, high: int, size: int, *, seed: Optional[int] = None) -> List[int]:
    """``size`` integers drawn uniformly from ``[low, high)`` as Python ints."""
    rng = np.random.default_rng(seed)
    return [int(v) for v in rng.integers(low, high, size=size)]


def verify_generator(generator: ExpressionGenerator, targets: Iterable[int]) -> pd.DataFrame:
    """
    Generate and exactly re-evaluate each target.

    Generation failures are recorded (``expression`` is ``None``,
    ``ok`` is ``False``) rather than raised, so a whole batch can be audited.
    """
    rows = []
    for n in targets:
        try:
            expr = generator.generate(n)
        except GenerationError as e:
            rows.append({"target": n, "expression": None, "value": None, "ok": False, "error": str(e)})
            continue
        value = evaluate_expression(expr)
        rows.append({"target": n, "expression": expr, "value": value, "ok": value == n, "error": None})
    # object columns keep None for failed rows
    df = pd.DataFrame(rows, columns=["target", "expression", "value", "ok", "error"], dtype=object)
    return df.astype({"ok": bool})
