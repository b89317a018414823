# src/nananiji/presets.py

"""
Named seed-grouping presets.

Each preset splits the digits of a base numeral into groupings. The
``allow_split`` variant adds one more grouping for the presets that have it
(``3-34`` for hanshin, ``2-64`` for kyojin); nananiji has none.

Examples
--------
>>> from nananiji.presets import Preset, seed_groupings
>>> seed_groupings(Preset.NANANIJI)
((227,), (22, 7), (2, 2, 7))
>>> seed_groupings(Preset.parse("Hanshin"), allow_split=True)[-1]
(3, 34)
"""

from __future__ import annotations
from enum import Enum
from typing import Tuple

__all__ = [
    "Preset",
    "SeedGroupings",
    "seed_groupings",
    "generator_filename",
]

SeedGroupings = Tuple[Tuple[int, ...], ...]


class Preset(Enum):
    NANANIJI = "nananiji"
    HANSHIN = "hanshin"
    KYOJIN = "kyojin"

    @classmethod
    def parse(cls, name: "str | Preset") -> "Preset":
        if isinstance(name, cls):
            return name
        try:
            return cls(str(name).strip().lower())
        except ValueError:
            choices = ", ".join(p.value for p in cls)
            raise ValueError(f"unknown preset {name!r}; expected one of: {choices}") from None


_BASE: dict = {
    Preset.NANANIJI: ((227,), (22, 7), (2, 2, 7)),
    Preset.HANSHIN: ((334,), (33, 4), (3, 3, 4)),
    Preset.KYOJIN: ((264,), (26, 4), (2, 6, 4)),
}

_SPLIT: dict = {
    Preset.HANSHIN: (3, 34),
    Preset.KYOJIN: (2, 64),
}


def seed_groupings(preset: Preset, allow_split: bool = False) -> SeedGroupings:
    preset = Preset.parse(preset)
    groupings = _BASE[preset]
    if allow_split and preset in _SPLIT:
        groupings = groupings + (_SPLIT[preset],)
    return groupings


def generator_filename(preset: Preset, allow_split: bool = False) -> str:
    """File name a persisted generator for this preset is stored under."""
    preset = Preset.parse(preset)
    suffix = "_a" if allow_split and preset in _SPLIT else ""
    return f"{preset.value}{suffix}.bin"
