import sys
import argparse
import logging
from datetime import datetime

import pytz

from reldate.config import config
from reldate import FormatOptions, RelDateError, format_date, format_relative, get_locale

logger = logging.getLogger()


def configure_logging(verbose: bool = False) -> None:
    level = logging.DEBUG if verbose else getattr(logging, config.LOG_LEVEL, logging.INFO)
    logger.setLevel(level)

    # Clear existing handlers to avoid duplicates
    if logger.hasHandlers():
        logger.handlers.clear()

    formatter = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')

    # Console Handler (stderr, so stdout only carries the result)
    ch = logging.StreamHandler(sys.stderr)
    ch.setFormatter(formatter)
    ch.setLevel(level)
    logger.addHandler(ch)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Describe a date in words relative to a base date."
    )
    parser.add_argument("date", help="ISO 8601 date/time, e.g. 2026-10-11T04:30")
    parser.add_argument("--base", help="base date (ISO 8601). Default: now")
    parser.add_argument("--locale", help="locale code, e.g. en-US, en-GB, it")
    parser.add_argument("--week-starts-on", type=int, help="0 = Sunday ... 6 = Saturday")
    parser.add_argument("--time-zone", help=f"time zone name (default: {config.TIME_ZONE})")
    parser.add_argument("--pattern", help="render DATE with this pattern instead")
    parser.add_argument("--verbose", action="store_true", help="debug logging")
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.verbose)

    try:
        options = FormatOptions(
            locale=get_locale(args.locale) if args.locale else None,
            week_starts_on=args.week_starts_on,
            time_zone=args.time_zone,
        )
        if args.pattern:
            result = format_date(args.date, args.pattern, options)
        else:
            base = args.base if args.base else datetime.now(pytz.UTC)
            result = format_relative(args.date, base, options)
    except (RelDateError, pytz.UnknownTimeZoneError) as e:
        logger.error(f"{type(e).__name__}: {e}")
        return 1

    print(result)
    return 0


if __name__ == "__main__":
    sys.exit(main())
