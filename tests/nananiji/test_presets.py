import pytest

from nananiji.config import GeneratorConfig
from nananiji.presets import Preset, generator_filename, seed_groupings


@pytest.mark.parametrize("name", ["nananiji", "NANANIJI", " Nananiji "])
def test_parse_case_insensitive(name):
    assert Preset.parse(name) is Preset.NANANIJI
    assert Preset.parse(Preset.KYOJIN) is Preset.KYOJIN


def test_parse_unknown():
    with pytest.raises(ValueError, match="unknown preset"):
        Preset.parse("giants")


def test_seed_groupings():
    assert seed_groupings(Preset.NANANIJI) == ((227,), (22, 7), (2, 2, 7))
    assert seed_groupings(Preset.HANSHIN) == ((334,), (33, 4), (3, 3, 4))
    assert seed_groupings(Preset.KYOJIN, allow_split=True) == ((264,), (26, 4), (2, 6, 4), (2, 64))
    # nananiji has no split grouping
    assert seed_groupings(Preset.NANANIJI, allow_split=True) == seed_groupings(Preset.NANANIJI)


def test_generator_filenames():
    assert generator_filename(Preset.NANANIJI) == "nananiji.bin"
    assert generator_filename(Preset.NANANIJI, allow_split=True) == "nananiji.bin"
    assert generator_filename(Preset.HANSHIN) == "hanshin.bin"
    assert generator_filename("kyojin", allow_split=True) == "kyojin_a.bin"


def test_config_defaults():
    cfg = GeneratorConfig()
    assert (cfg.search_depth, cfg.denom_cut) == (3, 10)
    assert cfg.preset_enum is Preset.NANANIJI
    assert cfg.groupings == seed_groupings(Preset.NANANIJI)
    assert cfg.filename == "nananiji.bin"


def test_config_split_variant():
    cfg = GeneratorConfig(preset="Hanshin", allow_split=True)
    assert cfg.groupings[-1] == (3, 34)
    assert cfg.filename == "hanshin_a.bin"


@pytest.mark.parametrize("kwargs", [
    {"preset": "giants"},
    {"search_depth": 0},
    {"denom_cut": 0},
])
def test_config_validation(kwargs):
    with pytest.raises(ValueError):
        GeneratorConfig(**kwargs)


def test_config_is_frozen():
    cfg = GeneratorConfig()
    with pytest.raises(AttributeError):
        cfg.search_depth = 4
