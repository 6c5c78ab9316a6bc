from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Optional

from .config import NbdocConfig, load_config
from .errors import NbdocError
from .fmt import format_text
from .io import parse_file
from .lint import lint_notebook


def _cmd_fmt(path: Path, cfg: NbdocConfig, *, minor: Optional[int], output: Optional[str]) -> int:
    original = path.read_text(encoding="utf-8")
    target = minor if minor is not None else cfg.default_nbformat_minor
    text = format_text(original, nbformat_minor=target, indent=cfg.indent, validate=cfg.validate)
    out_path = Path(output) if output else path
    out_path.write_text(text, encoding="utf-8")
    print(f"Formatted: {out_path}")
    return 0


def _cmd_lint(path: Path) -> int:
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        print(f"ERROR: not valid JSON: {e}")
        return 1
    errors, warns = lint_notebook(data)
    for w in warns:
        print(f"WARN: {w.message}")
    for e in errors:
        print(f"ERROR: {e.message}")
    if errors:
        return 1
    print("OK: no lint errors")
    return 0


def _cmd_ids(path: Path, cfg: NbdocConfig) -> int:
    nb = parse_file(str(path), validate=cfg.validate)
    for cell_id, cell in nb.cells():
        print(f"{cell_id}\t{cell.cell_type}")
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="nbdoc", description="Jupyter notebook document tools")
    parser.add_argument("--config", help="YAML settings file (default: ./.nbdoc.yaml)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    sub = parser.add_subparsers(dest="cmd", required=True)

    p_fmt = sub.add_parser("fmt", help="Rewrite an .ipynb file in canonical form")
    p_fmt.add_argument("file")
    p_fmt.add_argument("--minor", type=int, help="Target nbformat minor version")
    p_fmt.add_argument("-o", "--output", help="Output file (default: rewrite in place)")

    p_lint = sub.add_parser("lint", help="Check cell types and cell ids of an .ipynb file")
    p_lint.add_argument("file")

    p_ids = sub.add_parser("ids", help="Print cell ids and types in order")
    p_ids.add_argument("file")

    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    cfg = load_config(args.config)
    path = Path(args.file)

    try:
        if args.cmd == "fmt":
            return _cmd_fmt(path, cfg, minor=args.minor, output=args.output)
        if args.cmd == "lint":
            return _cmd_lint(path)
        if args.cmd == "ids":
            return _cmd_ids(path, cfg)
    except NbdocError as e:
        print(f"ERROR: {e}")
        return 1
    return 2


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
