from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from .classifier import explain
from .config import find_config
from .engine import lint_paths
from .errors import ImportRulesUserError
from .jsonic import dumps as jdumps
from .manifest import load_dependencies
from .report import build_check_report, build_explain_items, format_text
from .version import tool_version

EXIT_OK = 0
EXIT_FINDINGS = 1
EXIT_ERROR = 2


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="importrules",
        description="Check and fix the order of JavaScript/TypeScript imports",
        add_help=True,
    )
    p.add_argument("-V", "--version", action="version", version=f"%(prog)s {tool_version()}")
    p.add_argument("-v", "--verbose", action="store_true", help="debug logging to stderr")
    sub = p.add_subparsers(dest="cmd", required=True)

    # Shared by check/explain
    def add_common(sp: argparse.ArgumentParser) -> None:
        sp.add_argument(
            "--config",
            type=Path,
            metavar="FILE",
            help="configuration file (default: <cwd>/.importrules.yaml)",
        )
        sp.add_argument(
            "--cwd",
            type=Path,
            default=None,
            metavar="DIR",
            help="project root holding package.json and the root directory (default: current directory)",
        )

    sp_check = sub.add_parser("check", help="report import order and depth problems")
    add_common(sp_check)
    sp_check.add_argument("paths", nargs="+", type=Path, help="files or directories")
    sp_check.add_argument("--fix", action="store_true", help="rewrite files in place")
    sp_check.add_argument("--json", action="store_true", help="JSON report on stdout")

    sp_explain = sub.add_parser("explain", help="show the priority of import sources (JSON)")
    add_common(sp_explain)
    sp_explain.add_argument("sources", nargs="+", help="import sources as written in code")

    return p


def _setup_logging(verbose: bool) -> None:
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("[%(levelname)s] %(message)s"))
    root = logging.getLogger("importrules")
    root.handlers[:] = [handler]
    root.setLevel(logging.DEBUG if verbose else logging.WARNING)


def _run_check(ns: argparse.Namespace, root: Path) -> int:
    settings = find_config(root, ns.config)
    reports = lint_paths(ns.paths, settings, root, fix=ns.fix)

    if ns.json:
        sys.stdout.write(jdumps(build_check_report(reports).model_dump(mode="json")))
    else:
        text = format_text(reports)
        if text:
            sys.stdout.write(text + "\n")

    return EXIT_OK if all(r.ok for r in reports) else EXIT_FINDINGS


def _run_explain(ns: argparse.Namespace, root: Path) -> int:
    settings = find_config(root, ns.config)
    dependencies = load_dependencies(root)
    items = [
        explain(source, settings.sort.equal, dependencies, settings.sort.local)
        for source in ns.sources
    ]
    sys.stdout.write(jdumps([item.model_dump() for item in build_explain_items(items)]))
    return EXIT_OK


def main(argv: Optional[List[str]] = None) -> int:
    ns = _build_parser().parse_args(argv)
    _setup_logging(ns.verbose)
    root = (ns.cwd or Path.cwd()).resolve()

    try:
        if ns.cmd == "check":
            return _run_check(ns, root)
        if ns.cmd == "explain":
            return _run_explain(ns, root)
    except ImportRulesUserError as e:
        sys.stderr.write(str(e).rstrip() + "\n")
        return EXIT_ERROR

    return EXIT_ERROR


if __name__ == "__main__":
    raise SystemExit(main())
