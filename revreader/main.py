"""Command line entry point for the ``revreader`` executable."""

import argparse
import codecs
import logging
import sys
import time
from typing import Optional, Sequence

from .config import settings
from .errors import RevReaderError
from .reader.reverse_reader import ReverseTextReader
from .utils.logger import init_app_logger, shutdown_app_logger


def _unescape(value: str) -> str:
    """Turn backslash escapes typed on the command line ("\\r\\n") into characters."""
    return codecs.decode(value, "unicode_escape")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="revreader",
        description="Print the records of a file from last to first.",
    )
    parser.add_argument("path", help="File to read")
    parser.add_argument(
        "-d", "--delimiter",
        type=_unescape,
        default=settings.delimiter,
        help="Record delimiter, backslash escapes allowed (default: platform line separator)",
    )
    parser.add_argument(
        "-b", "--buffer-size",
        type=int,
        default=settings.buffer_size,
        help=f"Bytes read per backward block (default: {settings.buffer_size})",
    )
    parser.add_argument(
        "-e", "--encoding",
        default=settings.encoding,
        help=f"Text encoding of the file (default: {settings.encoding})",
    )
    parser.add_argument(
        "--errors",
        default=settings.errors,
        help=f"Decode error handler (default: {settings.errors})",
    )
    parser.add_argument(
        "--consume",
        action="store_true",
        help="Truncate the file after each printed record",
    )
    parser.add_argument(
        "--delay",
        type=float,
        default=0.0,
        help="Seconds to wait after each record",
    )
    parser.add_argument(
        "-n", "--limit",
        type=int,
        default=None,
        help="Stop after this many records",
    )
    parser.add_argument(
        "--number",
        action="store_true",
        help="Prefix each record with its sequence number",
    )
    parser.add_argument(
        "--log-level",
        default=settings.log_level,
        help=f"Log level (default: {settings.log_level})",
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the revreader CLI."""

    parser = _build_parser()
    try:
        args = parser.parse_args(list(argv) if argv is not None else None)
    except SystemExit as exc:  # argparse exits with code 2 on errors
        code = exc.code if isinstance(exc.code, int) else 2
        return int(code)

    logger = init_app_logger(settings, log_level=args.log_level)
    try:
        return _run(args, logger)
    finally:
        shutdown_app_logger()


def _run(args: argparse.Namespace, logger: logging.Logger) -> int:
    delimiter = args.delimiter if args.delimiter is not None else settings.get_delimiter()
    started = time.monotonic()
    count = 0

    try:
        # Without --consume the file is only read, so read-only files work too
        with ReverseTextReader(
            args.path,
            args.buffer_size,
            args.encoding,
            args.errors,
            writable=args.consume
        ) as reader:
            while args.limit is None or count < args.limit:
                record = reader.reverse_read(delimiter)
                if record is None:
                    break

                count += 1
                if args.number:
                    print(f"{count}: {record}")
                else:
                    print(record)
                sys.stdout.flush()

                if args.consume:
                    reader.truncate()
                if args.delay > 0:
                    time.sleep(args.delay)
    except (RevReaderError, OSError, UnicodeDecodeError) as e:
        logger.error(f"Failed to read {args.path} after {count} records: {e}")
        return 1

    elapsed = time.monotonic() - started
    logger.info(f"Read {count} records from {args.path} in {elapsed:.3f}s")
    return 0


if __name__ == "__main__":
    sys.exit(main())
