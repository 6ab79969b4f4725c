"""
Command-line interface for nihonify.

Usage:
    nihonify convert-date --date 2021-11-12
    nihonify resolve --timestamp 1636346788
    nihonify parse "令和３年１１月１２日"
    nihonify detect "日本語の文です。"
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from . import __version__
from .japanese_calendar import (
    InvalidDateError,
    normalise_era_notation,
    parse_date,
    render_nenkou,
    resolve,
)
from .settings import settings
from .text_detection import contains_japanese

logger = logging.getLogger("nihonify.cli")


def _fail(message: str) -> int:
    print(f"error: {message}", file=sys.stderr)
    return 1


def _cmd_convert_date(args: argparse.Namespace) -> int:
    try:
        moment = parse_date(args.date, anchor=args.anchor)
    except InvalidDateError as exc:
        return _fail(str(exc))

    nenkou = render_nenkou(moment)
    if nenkou is None:
        logger.debug("No nenkou for %s", moment.isoformat())
        return _fail(f"{args.date} is outside the supported era range")
    print(nenkou)
    return 0


def _cmd_resolve(args: argparse.Namespace) -> int:
    era = resolve(args.timestamp)
    if era is None:
        return _fail(f"no era covers timestamp {args.timestamp}")
    print(f"{era.kanji or '-'}\t{era.romaji or '-'}\t{era.jidai.value}")
    return 0


def _cmd_parse(args: argparse.Namespace) -> int:
    date_iso = normalise_era_notation(args.text)
    if date_iso is None:
        return _fail("no era notation found")
    print(date_iso)
    return 0


def _cmd_detect(args: argparse.Namespace) -> int:
    is_japanese = contains_japanese(args.text)
    print("true" if is_japanese else "false")
    return 0 if is_japanese else 1


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="nihonify",
        description="Convert Gregorian dates to Japanese era (nengou) dates.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "--log-level",
        default=settings.log_level,
        help="Logging level (default: %(default)s)",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    convert = subparsers.add_parser("convert-date", help="Render a date as a nenkou string")
    convert.add_argument(
        "--date",
        required=True,
        help="A YYYY-MM-DD gregorian date to convert to nengou.",
    )
    convert.add_argument(
        "--anchor",
        default=None,
        help="UTC time of day (HH:MM:SS) the date is anchored to",
    )
    convert.set_defaults(func=_cmd_convert_date)

    resolve_parser = subparsers.add_parser("resolve", help="Find the era containing a Unix timestamp")
    resolve_parser.add_argument("--timestamp", type=int, required=True)
    resolve_parser.set_defaults(func=_cmd_resolve)

    parse = subparsers.add_parser("parse", help="Convert an era notation back to an ISO date")
    parse.add_argument("text")
    parse.set_defaults(func=_cmd_parse)

    detect = subparsers.add_parser("detect", help="Check whether text contains Japanese kana")
    detect.add_argument("text")
    detect.set_defaults(func=_cmd_detect)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=getattr(logging, str(args.log_level).upper(), logging.INFO))
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
