#!/usr/bin/env python
"""Print per-day website visit counts from a '<epoch-millis>|<website>' log.

Usage:
  python hit_count.py visits.log

Output, per UTC day in ascending order:
  01/01/1970 GMT
  a.com 2
  b.com 1

Exit codes:
  0 success
  1 bad arguments, unreadable input file, malformed input line or closed stdout
"""
from __future__ import annotations
import argparse
import logging
import os
import sys
from typing import Optional

from hitcount_core.config import LOGGER_NAME
from hitcount_core.exceptions import ArgumentError, HitCountError
from hitcount_core.pipeline import run_report

logging.basicConfig(level=logging.ERROR)
logger = logging.getLogger(LOGGER_NAME)


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Per-day website hit counts from a visit log")
    # Counted by hand so a wrong count surfaces as ArgumentError
    p.add_argument("paths", nargs="*", metavar="path", help="Visit log: one '<epoch-millis>|<website>' per line")
    return p


def _silence_stdout():
    """Point stdout at devnull so the interpreter's final flush cannot fail again."""
    try:
        os.dup2(os.open(os.devnull, os.O_WRONLY), sys.stdout.fileno())
    except (OSError, ValueError):
        pass


def cmd_report(args: argparse.Namespace) -> int:
    if len(args.paths) != 1:
        raise ArgumentError(f"Input should be filename (expected 1 argument, got {len(args.paths)})")
    lines = run_report(args.paths[0])
    for line in lines:
        print(line)
    return 0


def main(argv: Optional[list[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        return cmd_report(args)
    except ArgumentError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        parser.print_usage(sys.stderr)
        return 1
    except HitCountError as e:
        logger.debug(f"{type(e).__name__} while reporting", exc_info=True)
        print(f"ERROR: {type(e).__name__}: {e}", file=sys.stderr)
        return 1
    except BrokenPipeError:
        # Reader went away, e.g. `hitcount visits.log | head`
        _silence_stdout()
        return 1
    except KeyboardInterrupt:
        print("Interrupted", file=sys.stderr)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
