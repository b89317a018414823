import pytest

from nananiji.ordering.rules import Mul, MulAdd, MulSub, rule_from_record, rule_to_record


def test_mul_reduce():
    assert Mul(7).reduce(49) == 7
    assert Mul(7).reduce(-49) == -7
    assert Mul(-7).reduce(49) == -7
    assert Mul(7).reduce(50) is None


def test_mul_add_reduce():
    # 7*6 + 3 = 45
    assert MulAdd(7, 3).reduce(45) == 6
    assert MulAdd(7, 3).reduce(46) is None
    # negative target: 7*(-6) + 3 = -39
    assert MulAdd(7, 3).reduce(-39) == -6


def test_mul_sub_reduce():
    # 7*7 - 3 = 46
    assert MulSub(7, 3).reduce(46) == 7
    assert MulSub(7, 3).reduce(45) is None


def test_residues():
    assert Mul(5).residue(5) == 0
    assert MulAdd(5, 7).residue(5) == 2
    assert MulAdd(5, -1).residue(5) == 4
    assert MulSub(5, 1).residue(5) == 4
    assert MulSub(5, -2).residue(5) == 2


def test_residue_matches_reduce():
    div = 11
    for rule in (Mul(div), MulAdd(div, 3), MulAdd(div, -30), MulSub(div, 4), MulSub(div, -25)):
        n = 1000 * div + rule.residue(div)
        assert rule.reduce(n) is not None


def test_rules_are_frozen_values():
    assert MulAdd(3, 1) == MulAdd(3, 1)
    assert MulAdd(3, 1) != MulSub(3, 1)
    with pytest.raises(AttributeError):
        MulAdd(3, 1).offset = 2


def test_record_round_trip():
    for rule in (Mul(-227), MulAdd(227, 22), MulSub(15, -7)):
        assert rule_from_record(rule_to_record(rule)) == rule
    assert rule_to_record(Mul(3)) == ("mul", 3, 0)


@pytest.mark.parametrize("record", [
    ("div", 3, 0),
    ("mul", 0, 0),
    ("mul_add", 3.0, 1),
    ("mul_sub", 3),
])
def test_bad_records(record):
    with pytest.raises(ValueError):
        rule_from_record(record)
