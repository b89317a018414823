# src/nananiji/cli.py
from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from rich.console import Console

from nananiji.config import GeneratorConfig
from nananiji.generator import ExpressionGenerator
from nananiji.persistence import load, save
from nananiji.presets import Preset

console = Console()


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="nananiji",
        description="Express any integer with + - * / over the digits of a seed number.",
    )
    p.add_argument("-l", "--list-name", type=str.lower, default="nananiji",
                   choices=[preset.value for preset in Preset],
                   help="The name of number set")
    p.add_argument("-w", "--write-file", action="store_true",
                   help="Save the pre-calculation file into --data-dir")
    p.add_argument("-r", "--read-file", action="store_true",
                   help="Load the pre-calculation file from --data-dir")
    p.add_argument("-d", "--search-depth", type=int, default=3, metavar="DEPTH",
                   help="The depth of search")
    p.add_argument("-c", "--denom-cut", type=int, default=10, metavar="MAX_DENOM",
                   help="Exclusive bound on denominators kept while searching")
    p.add_argument("-a", "--allow-split", action="store_true",
                   help="Allow splitting like 3-34 (hanshin and kyojin only)")
    p.add_argument("--data-dir", type=Path, default=Path("."),
                   help="Directory holding pre-calculation files")
    p.add_argument("-v", "--verbose", action="store_true",
                   help="Print build summary and progress")
    p.add_argument("target_num", nargs="?", type=int, metavar="TARGET_NUM",
                   help="The number searched")
    return p


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        cfg = GeneratorConfig(
            preset=args.list_name,
            search_depth=args.search_depth,
            denom_cut=args.denom_cut,
            allow_split=args.allow_split,
            verbose=args.verbose,
            progress=args.verbose,
        )
    except ValueError as e:
        parser.error(str(e))

    path = args.data_dir / cfg.filename
    if args.read_file:
        generator = load(path)
        if args.verbose:
            console.print(f"[bold blue]loaded[/bold blue] {generator!r} from {path}")
    else:
        generator = ExpressionGenerator.from_config(cfg)

    if args.write_file:
        save(generator, path)
        console.print(f"[bold green]saved[/bold green] {path}")
    elif args.target_num is not None:
        console.print(f"{generator.generate(args.target_num)} = {args.target_num}", highlight=False, soft_wrap=True)
    else:
        parser.print_usage(sys.stdout)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
