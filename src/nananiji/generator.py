# src/nananiji/generator.py

"""
Query-time expression generator.

An :class:`ExpressionGenerator` is the immutable pair of

- ``known_expr``: integer -> expression, projected from the search table;
- ``search_ordering``: the shrunk, score-ordered decomposition rules.

``generate(n)`` returns the table entry when ``n`` is known, otherwise applies
the first matching rule and recurses on the (smaller) sub-target.

Examples
--------
>>> from nananiji.generator import ExpressionGenerator
>>> gen = ExpressionGenerator.from_lists([[227], [22, 7], [2, 2, 7]], search_depth=2, denom_cut=10)
>>> gen.generate(227)
'227'
"""

from __future__ import annotations
import operator
from dataclasses import dataclass
from types import MappingProxyType
from typing import Iterable, Mapping, Optional, Sequence, Tuple

from rich.console import Console

from nananiji.config import GeneratorConfig
from nananiji.errors import GenerationDepthError, NoMatchingRuleError
from nananiji.ordering.rules import Mul, MulAdd, MulExpr
from nananiji.ordering.scoring import build_search_ordering
from nananiji.ordering.shrink import shrink_ordering
from nananiji.presets import Preset, seed_groupings
from nananiji.search.rational import RationalSearch

__all__ = [
    "DEFAULT_MAX_DEPTH",
    "ExpressionGenerator",
]

console = Console()

# recursion steps allowed per generate() call
DEFAULT_MAX_DEPTH = 200


@dataclass(frozen=True, eq=False)
class ExpressionGenerator:
    search_ordering: Tuple[MulExpr, ...]
    known_expr: Mapping[int, str]

    def __post_init__(self):
        object.__setattr__(self, "search_ordering", tuple(self.search_ordering))
        object.__setattr__(self, "known_expr", MappingProxyType(dict(self.known_expr)))

    # ───────────────────────────── builders ───────────────────────────── #

    @classmethod
    def from_search(cls, search: RationalSearch, *, verbose: bool = False) -> "ExpressionGenerator":
        """Build from an already extended search; the search is not modified."""
        gen_nums = search.integer_levels()
        full_ordering = build_search_ordering(gen_nums)

        div: Optional[int] = max(gen_nums[0]) if gen_nums[0] else None
        search_ordering = shrink_ordering(full_ordering, div)

        generator = cls(search_ordering, search.integer_table())
        if verbose:
            console.print(f"[bold green]=== search ===[/bold green] {search!r}")
            console.print(
                f"[bold cyan]=== ordering ===[/bold cyan] {len(full_ordering)} rules, "
                f"kept {len(search_ordering)} (div={div})"
            )
            console.print(f"[bold magenta]=== table ===[/bold magenta] {len(generator.known_expr)} integers")
        return generator

    @classmethod
    def from_lists(
        cls,
        num_lists: Iterable[Sequence[int]],
        search_depth: int,
        denom_cut: int,
        *,
        progress: bool = False,
        verbose: bool = False,
    ) -> "ExpressionGenerator":
        search = RationalSearch.from_lists(num_lists, denom_cut)
        search.extend(search_depth, progress=progress)
        return cls.from_search(search, verbose=verbose)

    @classmethod
    def from_preset(
        cls,
        preset: "Preset | str",
        *,
        allow_split: bool = False,
        search_depth: int = 3,
        denom_cut: int = 10,
        progress: bool = False,
        verbose: bool = False,
    ) -> "ExpressionGenerator":
        return cls.from_lists(
            seed_groupings(Preset.parse(preset), allow_split),
            search_depth,
            denom_cut,
            progress=progress,
            verbose=verbose,
        )

    @classmethod
    def from_config(cls, cfg: GeneratorConfig) -> "ExpressionGenerator":
        return cls.from_lists(
            cfg.groupings,
            cfg.search_depth,
            cfg.denom_cut,
            progress=cfg.progress,
            verbose=cfg.verbose,
        )

    # ───────────────────────────── persistence ───────────────────────────── #

    def to_bytes(self) -> bytes:
        from nananiji.persistence import dumps
        return dumps(self)

    @classmethod
    def from_bytes(cls, data: bytes) -> "ExpressionGenerator":
        from nananiji.persistence import loads
        return loads(data)

    # ───────────────────────────── queries ───────────────────────────── #

    def generate(self, n: int, *, max_depth: int = DEFAULT_MAX_DEPTH) -> str:
        """
        Expression over the seed numbers that evaluates exactly to ``n``.

        Raises
        ------
        TypeError
            If ``n`` is not an integer.
        NoMatchingRuleError
            If ``n`` is unknown and no rule applies to it.
        GenerationDepthError
            If more than ``max_depth`` recursive steps are needed.
        """
        n = operator.index(n)
        return self._generate(n, n, 0, max_depth)

    def _generate(self, n: int, target: int, depth: int, max_depth: int) -> str:
        expr = self.known_expr.get(n)
        if expr is not None:
            return expr
        if depth >= max_depth:
            raise GenerationDepthError(target, max_depth)

        known = self.known_expr
        for rule in self.search_ordering:
            sub = rule.reduce(n)
            if sub is None:
                continue

            mul = known[rule.multiplier]
            if isinstance(rule, Mul):
                return f"{self._generate(sub, target, depth + 1, max_depth)}*{mul}"

            offset = known[rule.offset]
            sign = "+" if isinstance(rule, MulAdd) else "-"
            if abs(sub) == 1:
                shifted = n - rule.offset if sign == "+" else n + rule.offset
                if shifted in known:
                    return f"({known[shifted]}{sign}{offset})"
                if sub == n:
                    # no progress: n == -1 maps back onto itself
                    continue
            return f"({self._generate(sub, target, depth + 1, max_depth)}*{mul}{sign}{offset})"

        raise NoMatchingRuleError(n)

    def __contains__(self, n: object) -> bool:
        return n in self.known_expr

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ExpressionGenerator):
            return NotImplemented
        return self.search_ordering == other.search_ordering and dict(self.known_expr) == dict(other.known_expr)

    def __repr__(self) -> str:
        return f"ExpressionGenerator(rules={len(self.search_ordering)}, known={len(self.known_expr)})"
