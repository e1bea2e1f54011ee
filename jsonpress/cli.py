"""
Command-line interface: format a JSON file in place.

Exit codes: 0 on success, 1 when --check finds an unformatted file, 2 when the
file cannot be read or parsed.
"""

import argparse
import contextlib
import logging
import os
import shutil
import sys
import tempfile
from pathlib import Path
from typing import Optional

from .core.formatter import format_json
from .security.exceptions import jsonpressError
from .utils.config import FormatOptions

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_UNFORMATTED = 1
EXIT_ERROR = 2


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    ap = argparse.ArgumentParser(
        prog="jsonpress", description="Format a JSON file in place"
    )
    ap.add_argument("file", help="JSON file to format")
    ap.add_argument(
        "-t", "--tabs", dest="use_tabs", action="store_true",
        help="indent with tabs instead of spaces",
    )
    ap.add_argument(
        "-s", "--spaces", type=int, default=None,
        help="spaces per indent level (default: 4)",
    )
    ap.add_argument(
        "-c", "--trailing-commas", dest="trailing_commas", action="store_true",
        help="add a comma after the last member of objects and arrays",
    )
    ap.add_argument(
        "--check", action="store_true",
        help="report whether the file is formatted without writing it",
    )
    ap.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
    return ap


def write_atomic(path: Path, text: str) -> None:
    """Replace the contents of ``path`` with ``text``.

    The text goes to a temporary file beside ``path`` that is then renamed over
    it, so a failed write leaves the original file untouched.
    """
    fd, tmp_name = tempfile.mkstemp(prefix=f".{path.name}.", suffix=".tmp", dir=path.parent)
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as handle:
            handle.write(text)
        shutil.copymode(path, tmp_name)
        os.replace(tmp_name, path)
    except OSError:
        with contextlib.suppress(OSError):
            os.unlink(tmp_name)
        raise


def main(argv: Optional[list[str]] = None) -> int:
    """Run the command line; returns the process exit code."""
    ap = build_parser()
    args = ap.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        options = FormatOptions().replace(
            spaces=args.spaces, use_tabs=args.use_tabs, trailing_commas=args.trailing_commas
        )
    except ValueError as exc:
        ap.error(str(exc))

    try:
        with open(args.file, "r", encoding="utf-8") as handle:
            original = handle.read()
    except (OSError, UnicodeDecodeError) as exc:
        print(f"jsonpress: cannot read {args.file}: {exc}", file=sys.stderr)
        return EXIT_ERROR

    try:
        formatted = format_json(original, options)
    except jsonpressError as exc:
        print(f"jsonpress: {args.file}: {exc}", file=sys.stderr)
        return EXIT_ERROR

    if args.check:
        if formatted != original:
            print(f"{args.file} is not formatted", file=sys.stderr)
            return EXIT_UNFORMATTED
        return EXIT_OK

    if formatted == original:
        logger.debug("%s already formatted", args.file)
        return EXIT_OK

    try:
        write_atomic(Path(args.file), formatted)
    except OSError as exc:
        print(f"jsonpress: cannot write {args.file}: {exc}", file=sys.stderr)
        return EXIT_ERROR

    logger.debug("Wrote %d characters to %s", len(formatted), args.file)
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
