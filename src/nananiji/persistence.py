# src/nananiji/persistence.py

"""
Byte-level persistence of a built :class:`ExpressionGenerator`.

A generator is stored as a zlib-compressed JSON document::

    {"format": 1,
     "ordering": [[kind, multiplier, offset], ...],
     "known_expr": [[n, expr], ...]}

JSON integers are arbitrary precision, so no value is truncated. Loading a
payload rebuilds an equal generator; anything malformed raises
:class:`~nananiji.errors.PersistedStateError`.
"""

from __future__ import annotations
import json
import zlib
from pathlib import Path
from typing import Union

from nananiji.errors import PersistedStateError
from nananiji.generator import ExpressionGenerator
from nananiji.ordering.rules import rule_from_record, rule_to_record

__all__ = [
    "FORMAT_VERSION",
    "dumps",
    "loads",
    "save",
    "load",
]

FORMAT_VERSION = 1

PathLike = Union[str, Path]


def dumps(generator: ExpressionGenerator) -> bytes:
    doc = {
        "format": FORMAT_VERSION,
        "ordering": [list(rule_to_record(rule)) for rule in generator.search_ordering],
        "known_expr": [[n, expr] for n, expr in generator.known_expr.items()],
    }
    return zlib.compress(json.dumps(doc, separators=(",", ":")).encode("utf-8"))


def loads(data: bytes) -> ExpressionGenerator:
    try:
        doc = json.loads(zlib.decompress(data).decode("utf-8"))
    except (zlib.error, UnicodeDecodeError, json.JSONDecodeError, TypeError) as e:
        raise PersistedStateError(f"cannot decode generator payload: {e}") from e

    if not isinstance(doc, dict) or doc.get("format") != FORMAT_VERSION:
        raise PersistedStateError("unsupported generator payload format")

    try:
        ordering = [rule_from_record(record) for record in doc["ordering"]]
        known_expr = {}
        for n, expr in doc["known_expr"]:
            if type(n) is not int or not isinstance(expr, str):
                raise ValueError(f"bad table entry: {[n, expr]!r}")
            known_expr[n] = expr
    except (KeyError, TypeError, ValueError) as e:
        raise PersistedStateError(f"malformed generator payload: {e}") from e

    for rule in ordering:
        missing = [v for v in (rule.multiplier, getattr(rule, "offset", rule.multiplier)) if v not in known_expr]
        if missing:
            raise PersistedStateError(f"rule {rule!r} references values without expressions: {missing}")

    return ExpressionGenerator(ordering, known_expr)


def save(generator: ExpressionGenerator, path: PathLike) -> Path:
    path = Path(path)
    if path.parent and not path.parent.exists():
        path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(dumps(generator))
    return path


def load(path: PathLike) -> ExpressionGenerator:
    return loads(Path(path).read_bytes())
