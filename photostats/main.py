import argparse
import logging
import sys
import time
from pathlib import Path

from . import config
from .core import PhotoStatsApp
from .exceptions import ScanRootError
from .reporting import NO_PHOTOS_MESSAGE, ReportGenerator


def setup_logging(verbose: bool):
    """Log records go to stderr so stdout carries only the report."""
    log_level = logging.DEBUG if verbose else logging.INFO

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s [%(levelname)s] %(message)s",
        handlers=[logging.StreamHandler(sys.stderr)],
    )

    # Silence chatty libraries
    logging.getLogger("PIL").setLevel(logging.WARNING)


def parse_args(argv=None):
    p = argparse.ArgumentParser(description="photostats: pixel statistics for a photo collection")

    p.add_argument("-p", "--path", type=str, default=config.DEFAULT_ROOT, help="Name of the path to walk")
    p.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    p.add_argument("--csv", type=Path, default=None, help="Also write one row per photo to this CSV file")
    p.add_argument("--no-progress", action="store_true", help="Disable the progress counter")
    p.add_argument("--no-banner", action="store_true", help="Do not print the banner")

    return p.parse_args(argv)


def main(argv=None):
    started = time.perf_counter()
    args = parse_args(argv)
    setup_logging(args.verbose)

    if not args.no_banner:
        print(config.BANNER)
    print(f"Scanning {args.path}")

    app = PhotoStatsApp(show_progress=not args.no_progress)
    reporter = ReportGenerator()

    try:
        totals, records = app.analyse(args.path)
    except ScanRootError as e:
        logging.error(str(e))
        sys.exit(1)
    except KeyboardInterrupt:
        logging.warning("Scan cancelled by user.")
        sys.exit(1)

    if records:
        print(reporter.render_summary(totals))
    else:
        print(NO_PHOTOS_MESSAGE)

    if args.csv:
        reporter.export_csv(records, args.csv)

    elapsed = time.perf_counter() - started
    print(reporter.render_timing(elapsed, totals.photo_count))


if __name__ == "__main__":
    main()
