import numpy as np
import pytest

from nananiji.errors import GenerationDepthError, GenerationError, NoMatchingRuleError
from nananiji.generator import ExpressionGenerator
from nananiji.ordering.rules import Mul, MulAdd, MulSub
from nananiji.ordering.shrink import residue_coverage
from nananiji.reporting import evaluate_expression

TARGETS = [1, 227, 123456, 2020, -123456, 10 ** 12 + 39]


# -----------------------
# Hand-built generator
# -----------------------

def test_direct_hit(tens_generator):
    assert tens_generator.generate(10) == "10"
    assert 10 in tens_generator and 11 not in tens_generator


@pytest.mark.parametrize("n, expected", [
    (100, "10*10"),
    (11, "(10+1)"),
    (101, "(10*10+1)"),
    (9, "(10-1)"),
    (99, "(10*10-1)"),
    (1000, "10*10*10"),
])
def test_rule_rendering(tens_generator, n, expected):
    expr = tens_generator.generate(n)
    assert expr == expected
    assert evaluate_expression(expr) == n


def test_negative_targets_recurse(tens_generator):
    expr = tens_generator.generate(-9)
    assert expr == "((0*10-1)*10+1)"
    assert evaluate_expression(expr) == -9


def test_unit_quotient_expands_when_shift_unknown():
    gen = ExpressionGenerator([MulAdd(29, 5)], {-1: "(1-2)", 1: "1", 2: "2", 5: "5", 29: "29"})
    # -24 - 5 == -29 is not in the table, so the quotient -1 is expanded
    assert gen.generate(-24) == "((1-2)*29+5)"
    assert evaluate_expression(gen.generate(-24)) == -24


def test_unit_quotient_without_progress_is_skipped():
    gen = ExpressionGenerator(
        [MulAdd(29, 28), MulSub(2, 1)],
        {0: "(1-1)", 1: "1", 2: "2", 28: "28", 29: "29"},
    )
    # MulAdd(29, 28) maps -1 onto itself; the next rule resolves it
    assert gen.generate(-1) == "((1-1)*2-1)"


def test_no_matching_rule(tens_generator):
    with pytest.raises(NoMatchingRuleError) as exc:
        tens_generator.generate(5)
    assert exc.value.target == 5
    assert isinstance(exc.value, GenerationError)


def test_step_budget(tens_generator):
    with pytest.raises(GenerationDepthError) as exc:
        tens_generator.generate(10 ** 6, max_depth=3)
    assert exc.value.target == 10 ** 6
    assert tens_generator.generate(10 ** 6, max_depth=10) == "*".join(["10"] * 6)


def test_integer_like_inputs(tens_generator):
    assert tens_generator.generate(np.int64(100)) == "10*10"
    with pytest.raises(TypeError):
        tens_generator.generate(1.5)


def test_generator_is_immutable(tens_generator):
    with pytest.raises(AttributeError):
        tens_generator.search_ordering = ()
    with pytest.raises(TypeError):
        tens_generator.known_expr[5] = "5"
    assert isinstance(tens_generator.search_ordering, tuple)


def test_equality(tens_generator):
    same = ExpressionGenerator(list(tens_generator.search_ordering), dict(tens_generator.known_expr))
    assert same == tens_generator
    assert ExpressionGenerator([Mul(10)], {10: "10"}) != tens_generator


# -----------------------
# Preset generators
# -----------------------

def test_from_lists_small_depth():
    gen = ExpressionGenerator.from_lists([[227], [22, 7], [2, 2, 7]], search_depth=1, denom_cut=10)
    assert gen.generate(227) == "227"
    assert gen.generate(29) == "(22+7)"
    assert gen.generate(154) == "(22*7)"
    assert all(isinstance(k, int) for k in gen.known_expr)


def test_from_preset_and_config_agree():
    from nananiji.config import GeneratorConfig

    a = ExpressionGenerator.from_preset("hanshin", allow_split=True, search_depth=2, denom_cut=5)
    b = ExpressionGenerator.from_config(GeneratorConfig(preset="HANSHIN", allow_split=True, search_depth=2, denom_cut=5))
    assert a == b
    assert a.generate(334) == "334"


@pytest.mark.parametrize("n", TARGETS)
def test_nananiji_generates_exact_expressions(nananiji_generator, n):
    expr = nananiji_generator.generate(n)
    assert evaluate_expression(expr) == n
    assert set(expr) <= set("0123456789+-*/()")


def test_nananiji_table_hits(nananiji_generator):
    assert nananiji_generator.generate(227) == "227"
    for n, expr in list(nananiji_generator.known_expr.items())[:500]:
        assert nananiji_generator.generate(n) == expr


def test_nananiji_ordering_is_shrunk_with_full_coverage(nananiji_full_ordering, nananiji_generator):
    full = nananiji_full_ordering
    kept = list(nananiji_generator.search_ordering)
    assert kept == full[: len(kept)]
    assert len(residue_coverage(kept, 227)) == 227


def test_shrinking_does_not_change_output(nananiji_search, nananiji_full_ordering, nananiji_generator):
    full = ExpressionGenerator(
        nananiji_full_ordering,
        nananiji_search.integer_table(),
    )
    for n in TARGETS:
        assert full.generate(n) == nananiji_generator.generate(n)


def test_generate_is_pure(nananiji_generator):
    before = (len(nananiji_generator.search_ordering), len(nananiji_generator.known_expr))
    first = nananiji_generator.generate(123456)
    assert nananiji_generator.generate(123456) == first
    assert (len(nananiji_generator.search_ordering), len(nananiji_generator.known_expr)) == before
