import argparse
import sys
from dataclasses import replace
from typing import List, Optional, TextIO

from settings import LoggerSettings, silent_requested, SILENT_TOKEN


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Append timestamped lines to a log file, gzip-compressed on close."
    )
    parser.add_argument("logfile", help="Path of the log file to write.")
    parser.add_argument(
        "messages",
        nargs="*",
        help="Lines to log. Read from stdin when omitted.",
    )
    parser.add_argument(
        "--append",
        action="store_true",
        default=None,
        help="Keep existing content instead of truncating the file.",
    )
    parser.add_argument(
        "--no-gzip",
        dest="gzip",
        action="store_false",
        default=None,
        help="Leave the log uncompressed on close.",
    )
    parser.add_argument(
        "--no-timestamp",
        dest="timestamp",
        action="store_false",
        help="Do not prefix lines with the date and time.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Print logger diagnostics to stderr.",
    )
    return parser


def read_messages(stream: TextIO) -> List[str]:
    return [line.rstrip("\r\n") for line in stream]


def _stderr(message: str) -> None:
    print(message, file=sys.stderr)


def main(argv: Optional[List[str]] = None) -> int:
    argv = list(sys.argv[1:] if argv is None else argv)
    silent = silent_requested(argv)
    args = build_arg_parser().parse_args(
        [arg for arg in argv if arg.lower() != SILENT_TOKEN]
    )

    settings = LoggerSettings.from_env()
    overrides = {"silent": silent or settings.silent}
    if args.gzip is not None:
        overrides["use_gzip"] = args.gzip
    if args.append is not None:
        overrides["append"] = args.append
    logger = replace(settings, **overrides).create_logger(
        args.logfile, logger=_stderr if args.verbose else None
    )

    messages = args.messages or read_messages(sys.stdin)
    ok = True
    for message in messages:
        ok = logger.write(message, add_timestamp=args.timestamp) and ok
    ok = logger.close() and ok

    for error in logger.get_errors():
        _stderr(f"error: {error}")
    return 0 if ok else 1


if __name__ == "__main__":
    raise SystemExit(main())
