import argparse
import logging
import sys
from pathlib import Path
from typing import Optional

from .core import MoiReaderApp
from .exceptions import PathError
from .reporting import ReportGenerator
from . import config

EXIT_OK = 0
EXIT_FILE_ERRORS = 1
EXIT_BAD_PATH = 2


def setup_logging(verbose: bool, log_file: Optional[Path] = None):
    """Sets up logging to the console and, optionally, a file."""
    log_level = logging.DEBUG if verbose else logging.INFO

    handlers = [logging.StreamHandler(sys.stdout)]
    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file, encoding='utf-8'))

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s [%(levelname)s] %(message)s",
        handlers=handlers,
        force=True,
    )


def parse_args(argv=None):
    p = argparse.ArgumentParser(description="MOI Reader: decode camcorder .MOI metadata files")

    p.add_argument("path", type=Path, help="A .MOI file or a directory containing .MOI files")

    p.add_argument("--workers", type=int, default=config.DEFAULT_MAX_WORKERS,
                   help=f"Parallel decode workers (max {config.MAX_WORKERS_CAP})")
    p.add_argument("--csv", type=Path, default=None, help="Also write the results to this CSV file")
    p.add_argument("--progress", action="store_true", help="Show a progress bar")
    p.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    p.add_argument("--log-file", type=Path, default=None, help="Write the log to this file as well")

    return p.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)
    setup_logging(args.verbose, args.log_file)

    app = MoiReaderApp()

    try:
        result = app.read(args.path, max_workers=args.workers, progress=args.progress)
    except PathError as e:
        logging.error(str(e))
        return EXIT_BAD_PATH
    except KeyboardInterrupt:
        logging.warning("Operation cancelled by user.")
        return EXIT_FILE_ERRORS
    except Exception:
        logging.exception("Fatal error while reading MOI files.")
        return EXIT_FILE_ERRORS

    reporter = ReportGenerator(result)
    reporter.print_report()

    if args.csv:
        reporter.write_csv(args.csv)

    return EXIT_OK if result.success else EXIT_FILE_ERRORS


if __name__ == "__main__":
    sys.exit(main())
