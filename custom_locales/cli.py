#!/usr/bin/env python3
"""Operator command line for custom locales.

Commands:
  seed     add language items to a configured content database
  report   run the registration cycle and print its outcome

Exit Codes:
  0 = ok
  1 = cycle completed with per-locale errors
  2 = configuration problem (unknown database, missing connection string,
      content database not resolvable)
  99 = unhandled exception
"""
from __future__ import annotations

import argparse
import json
import sys
import traceback
from typing import List, Optional

from custom_locales import config as app_config
from custom_locales.db import get_engine
from custom_locales.db.repositories import languages_repo
from custom_locales.errors import CustomLocalesError, RegistryMarkingError
from custom_locales.host.runtime import get_runtime
from custom_locales.services import custom_language_manager


def run_seed(args: argparse.Namespace) -> int:
    url = app_config.connection_string(args.database)
    if not url:
        print(f"No connection string configured for database {args.database}", file=sys.stderr)
        return 2
    engine = get_engine(url)
    for name in args.languages:
        languages_repo.add_language(engine, name)
    names = languages_repo.list_language_names(engine)
    print(f"[SEED] {args.database} languages: {', '.join(names)}")
    return 0


def run_report(args: argparse.Namespace) -> int:
    try:
        report = custom_language_manager.register_custom_languages_and_clear_cache(get_runtime())
    except RegistryMarkingError:
        raise
    except CustomLocalesError as exc:
        print(f"Configuration problem: {exc}", file=sys.stderr)
        return 2
    summary = report.as_dict()
    if args.json:
        print(json.dumps(summary, indent=2, sort_keys=True))
    else:
        print(f"database: {summary['database']}")
        print(f"registered: {', '.join(summary['registered']) or '-'}")
        for code, names in sorted(summary["patched"].items()):
            print(f"  {code}: {names['display_name']} / {names['english_name']} / {names['native_name']}")
        for code, error in sorted(summary["errors"].items()):
            print(f"  {code}: ERROR {error}")
    return 1 if summary["errors"] else 0


def parse_args(argv: List[str]) -> argparse.Namespace:
    ap = argparse.ArgumentParser(description="Custom locale registration tools.")
    sub = ap.add_subparsers(dest="command", required=True)

    seed = sub.add_parser("seed", help="Add language items to a content database")
    seed.add_argument("--database", default=app_config.MASTER_DATABASE, help="Configured database name")
    seed.add_argument("languages", nargs="+", help="Language names, e.g. du-my")
    seed.set_defaults(handler=run_seed)

    report = sub.add_parser("report", help="Run the registration cycle and print the result")
    report.add_argument("--json", action="store_true", help="Output JSON only")
    report.set_defaults(handler=run_report)
    return ap.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    try:
        args = parse_args(sys.argv[1:] if argv is None else argv)
        return args.handler(args)
    except KeyboardInterrupt:
        print("\nInterrupted.", file=sys.stderr)
        return 2
    except Exception as exc:
        print(f"FATAL: Unhandled exception: {exc}", file=sys.stderr)
        traceback.print_exc()
        return 99


if __name__ == "__main__":
    sys.exit(main())
