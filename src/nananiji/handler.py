# src/nananiji/handler.py

"""
Request/response wrapper for serving preloaded generators.

Requests look like::

    {"value": "2020", "list_name": {"name": "hanshin", "split": true}}

``split`` is ignored for nananiji and defaults to ``False``. The response
echoes the request next to the generated expression::

    {"req": {...}, "expr": "..."}
"""

from __future__ import annotations
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Mapping, Tuple, Union

from rich.console import Console

from nananiji.errors import RequestError
from nananiji.generator import ExpressionGenerator
from nananiji.persistence import load
from nananiji.presets import Preset, generator_filename

__all__ = [
    "PreloadedGenerators",
    "handle_request",
]

console = Console(stderr=True)

GeneratorKey = Tuple[Preset, bool]

# (preset, allow_split) combinations that have their own generator file
_VARIANTS: Tuple[GeneratorKey, ...] = (
    (Preset.NANANIJI, False),
    (Preset.HANSHIN, False),
    (Preset.HANSHIN, True),
    (Preset.KYOJIN, False),
    (Preset.KYOJIN, True),
)


def _key(preset: Preset, split: bool) -> GeneratorKey:
    return (preset, bool(split) and preset is not Preset.NANANIJI)


@dataclass
class PreloadedGenerators:
    generators: Dict[GeneratorKey, ExpressionGenerator] = field(default_factory=dict)

    @classmethod
    def load(cls, directory: Union[str, Path] = ".") -> "PreloadedGenerators":
        directory = Path(directory)
        return cls({
            key: load(directory / generator_filename(*key))
            for key in _VARIANTS
        })

    def add(self, preset: Preset, split: bool, generator: ExpressionGenerator) -> None:
        self.generators[_key(preset, split)] = generator

    def choose(self, list_name: Mapping[str, Any]) -> ExpressionGenerator:
        """Pick the generator named by a ``{"name": ..., "split": ...}`` mapping."""
        try:
            preset = Preset.parse(list_name["name"])
        except (KeyError, TypeError, ValueError) as e:
            raise RequestError(f"invalid list_name: {list_name!r}") from e
        split = list_name.get("split", False)
        if not isinstance(split, bool):
            raise RequestError(f"list_name.split must be a boolean, got {split!r}")
        key = _key(preset, split)
        if key not in self.generators:
            raise RequestError(f"no generator loaded for {preset.value} (split={key[1]})")
        return self.generators[key]


def handle_request(request: Mapping[str, Any], generators: PreloadedGenerators) -> Dict[str, Any]:
    console.print(f"[dim]request[/dim] {dict(request)!r}")

    list_name = request.get("list_name")
    if not isinstance(list_name, Mapping):
        raise RequestError("list_name must be an object with a 'name' field")
    generator = generators.choose(list_name)

    try:
        value = int(str(request["value"]).strip())
    except (KeyError, ValueError) as e:
        raise RequestError("value parse failed") from e

    return {"req": dict(request), "expr": generator.generate(value)}
