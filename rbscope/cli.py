from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import Any, Dict, Optional

from .config import load_config
from .errors import RbScopeUserError
from .jsonic import dumps as jdumps
from .report import build_report
from .scope import ScopeKind
from .version import tool_version


def _setup_logging(verbose: bool) -> None:
    root = logging.getLogger("rbscope")
    if getattr(_setup_logging, "_inited", False):
        return
    _setup_logging._inited = True  # type: ignore[attr-defined]
    level = logging.DEBUG if verbose or os.environ.get("RBSCOPE_DEBUG") else logging.WARNING
    root.setLevel(level)
    if not root.handlers:
        h = logging.StreamHandler()
        h.setFormatter(logging.Formatter("[%(levelname)s] %(message)s"))
        root.addHandler(h)


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="rbscope",
        description="Lexical scope analysis for RSpec sources",
        add_help=True,
    )
    p.add_argument("-v", "--version", action="version", version=f"%(prog)s {tool_version()}")
    p.add_argument("--verbose", action="store_true", help="debug logging to stderr")
    sub = p.add_subparsers(dest="cmd", required=True)

    def add_config(sp: argparse.ArgumentParser) -> None:
        sp.add_argument(
            "--config",
            metavar="FILE",
            help="YAML with extra DSL names (default: .rbscope.yaml in the current directory)",
        )

    sp_scopes = sub.add_parser("scopes", help="JSON report: scope stack of every reference to a name")
    sp_scopes.add_argument("paths", nargs="+", metavar="PATH", help="Ruby files or directories")
    sp_scopes.add_argument("--target", required=True, metavar="NAME", help="method or local name to look up")
    add_config(sp_scopes)

    sp_list = sub.add_parser("list", help="Lists (JSON)")
    sp_list.add_argument("what", choices=["kinds", "entry-points"], help="what to list")
    add_config(sp_list)

    return p


def _config_arg(ns: argparse.Namespace) -> Optional[Path]:
    value = getattr(ns, "config", None)
    return Path(value) if value else None


def main(argv: list[str] | None = None) -> int:
    ns = _build_parser().parse_args(argv)
    _setup_logging(bool(ns.verbose))

    try:
        cfg = load_config(Path.cwd(), _config_arg(ns))

        if ns.cmd == "scopes":
            report = build_report([Path(p) for p in ns.paths], ns.target, cfg)
            sys.stdout.write(jdumps(report.model_dump(mode="json")))
            return 0

        if ns.cmd == "list":
            data: Dict[str, Any]
            if ns.what == "kinds":
                data = {"kinds": [kind.value for kind in ScopeKind]}
            else:
                data = {"entry_points": cfg.to_table().to_dict()}
            sys.stdout.write(jdumps(data))
            return 0

    except RbScopeUserError as e:
        sys.stderr.write(str(e).rstrip() + "\n")
        return 2

    return 2


if __name__ == "__main__":
    raise SystemExit(main())
