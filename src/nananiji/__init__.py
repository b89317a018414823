"""
nananiji: write any integer with ``+ - * /`` over the digits of a seed number.

>>> from nananiji import ExpressionGenerator, Preset
>>> gen = ExpressionGenerator.from_preset(Preset.NANANIJI, search_depth=2)
>>> gen.generate(227)
'227'
"""

from .operators import Operator, OPERATORS
from .errors import (
    NananijiError,
    SeedArityError,
    PersistedStateError,
    GenerationError,
    NoMatchingRuleError,
    GenerationDepthError,
    RequestError,
)
from .presets import Preset, seed_groupings, generator_filename
from .config import GeneratorConfig
from .search import RationalSearch
from .generator import ExpressionGenerator
from .persistence import dumps, loads, save, load

__all__ = [
    "Operator",
    "OPERATORS",
    "NananijiError",
    "SeedArityError",
    "PersistedStateError",
    "GenerationError",
    "NoMatchingRuleError",
    "GenerationDepthError",
    "RequestError",
    "Preset",
    "seed_groupings",
    "generator_filename",
    "GeneratorConfig",
    "RationalSearch",
    "ExpressionGenerator",
    "dumps",
    "loads",
    "save",
    "load",
]
