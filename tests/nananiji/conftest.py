import pytest

from nananiji.generator import ExpressionGenerator
from nananiji.ordering.rules import Mul, MulAdd, MulSub
from nananiji.ordering.scoring import build_search_ordering
from nananiji.presets import Preset, seed_groupings
from nananiji.search.rational import RationalSearch


@pytest.fixture(scope="session")
def nananiji_search():
    # levels 0..2 (search depth 3), denominators below 10
    rs = RationalSearch.from_lists(seed_groupings(Preset.NANANIJI), denom_cut=10)
    rs.extend(3)
    return rs


@pytest.fixture(scope="session")
def nananiji_generator(nananiji_search):
    return ExpressionGenerator.from_search(nananiji_search)


@pytest.fixture(scope="session")
def nananiji_full_ordering(nananiji_search):
    return build_search_ordering(nananiji_search.integer_levels())


@pytest.fixture
def tens_generator():
    # hand-built: resolves residues 0, 1 and 9 mod 10 only
    return ExpressionGenerator(
        [Mul(10), MulAdd(10, 1), MulSub(10, 1)],
        {0: "0", 1: "1", 10: "10"},
    )
