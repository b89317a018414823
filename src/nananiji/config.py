# src/nananiji/config.py

from __future__ import annotations
from dataclasses import dataclass

from nananiji.presets import Preset, SeedGroupings, generator_filename, seed_groupings

"""
Configuration for building an :class:`~nananiji.generator.ExpressionGenerator`.

Treat a :class:`GeneratorConfig` as an immutable snapshot passed to the
builders; the defaults match the command-line defaults.

Examples
--------
>>> from nananiji.config import GeneratorConfig
>>> cfg = GeneratorConfig(preset="hanshin", allow_split=True)
>>> cfg.filename
'hanshin_a.bin'
>>> cfg.search_depth, cfg.denom_cut
(3, 10)
"""

__all__ = [
    "GeneratorConfig",
]


@dataclass(frozen=True)
class GeneratorConfig:
    """
    Knobs for one generator build.

    Parameters
    ----------
    preset : str or Preset, default="nananiji"
        Seed-grouping preset name (case-insensitive).
    search_depth : int, default=3
        Number of search levels to compute, depth 0 included. Cost grows
        combinatorially; 3 is practical, 4 is expensive.
    denom_cut : int, default=10
        Exclusive bound on reduced denominators kept by the search. ``1``
        keeps only integers past depth 0.
    allow_split : bool, default=False
        Add the preset's extra split grouping (ignored for nananiji).
    verbose : bool, default=False
        Print a build summary to the console.
    progress : bool, default=False
        Show a progress bar while the search runs.
    """

    preset: str = "nananiji"
    search_depth: int = 3
    denom_cut: int = 10
    allow_split: bool = False
    verbose: bool = False
    progress: bool = False

    def __post_init__(self):
        # raises ValueError on unknown names
        Preset.parse(self.preset)
        if self.search_depth < 1:
            raise ValueError("search_depth must be ≥ 1")
        if self.denom_cut < 1:
            raise ValueError("denom_cut must be ≥ 1")

    @property
    def preset_enum(self) -> Preset:
        return Preset.parse(self.preset)

    @property
    def groupings(self) -> SeedGroupings:
        return seed_groupings(self.preset_enum, self.allow_split)

    @property
    def filename(self) -> str:
        return generator_filename(self.preset_enum, self.allow_split)
