#!/usr/bin/env python3
"""
Export the match patterns a host must subscribe to.

The output is a JSON array of ``*://<host><path>*`` patterns, suitable for
an extension manifest or a ``webRequest`` filter.

Usage:
    python scripts/gen_match_patterns.py
    python scripts/gen_match_patterns.py --output build/patterns.json
    python scripts/gen_match_patterns.py --config settings.toml
    python scripts/gen_match_patterns.py --init-config
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from linkunwrap.infra.config import ConfigAdapter, init_config, load_config
from linkunwrap.infra.logger import setup_logging
from linkunwrap.resolver import Resolver

logger = logging.getLogger("linkunwrap.scripts.gen_match_patterns")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Export redirector match patterns as JSON."
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Settings file to use instead of the usual lookup.",
    )
    parser.add_argument(
        "--init-config",
        action="store_true",
        help="Write sample settings to --config or the user settings file, then exit.",
    )
    parser.add_argument(
        "--force",
        action="store_true",
        help="With --init-config, replace an existing settings file.",
    )
    parser.add_argument(
        "--output",
        type=Path,
        default=None,
        help="Write to this file instead of stdout.",
    )
    return parser


def _init_config(target: Path | None, force: bool) -> int:
    try:
        path = init_config(target, overwrite=force)
    except FileExistsError as e:
        print(f"{e} (use --force to replace it)", file=sys.stderr)
        return 1
    print(path)
    return 0


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    if args.init_config:
        return _init_config(args.config, args.force)

    adapter = ConfigAdapter(load_config(args.config))
    log_cfg = adapter.get_log_config()
    setup_logging(log_cfg.log_level, log_cfg.log_dir)

    patterns = Resolver(adapter.get_resolver_config()).subscriptions()
    text = json.dumps(patterns, indent=2) + "\n"

    if args.output is None:
        print(text, end="")
    else:
        args.output.parent.mkdir(parents=True, exist_ok=True)
        args.output.write_text(text, encoding="utf-8")
        logger.info("Wrote %d patterns to %s", len(patterns), args.output)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
