"""Command-line entry point: list node kinds, validate or run a script."""

from __future__ import annotations

import argparse
import json
import sys
from typing import List, Optional

from omegaconf import OmegaConf

from nodeflow import __version__
from nodeflow.config import configure_logging
from nodeflow.engine import GraphEngine
from nodeflow.foundation.errors import GraphError
from nodeflow.runner import SCRIPT_ERRORS, Runner


def _parse_overrides(pairs: List[str]) -> dict:
    """--set key=value pairs; values are read as YAML scalars (true, 3, text)."""
    if not pairs:
        return {}
    for pair in pairs:
        if "=" not in pair:
            raise ValueError(f"Expected key=value, got {pair!r}")
    return OmegaConf.to_container(OmegaConf.from_dotlist(pairs), resolve=True)


def _report(payload: dict) -> int:
    print(json.dumps(payload, indent=2), file=sys.stderr)
    return 1


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="nodeflow", description="Dataflow graph engine")
    parser.add_argument("--version", action="version", version=f"nodeflow {__version__}")
    parser.add_argument("--log-level", default=None,
                        help="Logging level; overrides the script's log_level (default: WARNING)")
    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("kinds", help="Print the node kind catalogue as JSON")

    run = sub.add_parser("run", help="Replay a script and print traces as JSON")
    run.add_argument("script", help="Path to script file (YAML or JSON)")
    run.add_argument("--set", dest="overrides", action="append", default=[], metavar="KEY=VALUE",
                     help="Engine config override, e.g. --set detect_cycles=true")

    validate = sub.add_parser("validate", help="Build a script's graph without evaluating")
    validate.add_argument("script", help="Path to script file (YAML or JSON)")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level or "WARNING")

    if args.command == "kinds":
        print(json.dumps(GraphEngine().get_node_defs(), indent=2, sort_keys=True))
        return 0

    log_override = {"log_level": args.log_level} if args.log_level else {}

    if args.command == "validate":
        result = Runner.validate(args.script, **log_override)
        print(json.dumps(result, indent=2))
        return 0 if result["valid"] else 1

    try:
        overrides = {**_parse_overrides(args.overrides), **log_override}
        result = Runner.execute(args.script, **overrides)
    except GraphError as e:
        return _report({"error": e.to_dict()})
    except SCRIPT_ERRORS as e:
        return _report({"error": {"kind": type(e).__name__, "message": str(e)}})
    print(json.dumps(result, indent=2, default=str))
    return 0


if __name__ == "__main__":
    sys.exit(main())
