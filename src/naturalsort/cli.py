from __future__ import annotations

import argparse
import logging
import signal
import sys
from pathlib import Path
from typing import BinaryIO

from .config import NaturalSortConfig
from .errors import NaturalSortError
from .fs import Filesystem, RealFilesystem
from .natural import natural_sort
from .records import join_records, split_records, validate_separator
from .streams import decode_records, read_input, write_output

logger = logging.getLogger(__name__)

EXIT_INTERRUPTED = 130


def _find_project_root(start: Path) -> Path:
    current = start if start.is_dir() else start.parent
    for ancestor in [current, *current.parents]:
        if (ancestor / "pyproject.toml").exists():
            return ancestor
    return current


def _raise_interrupt(signum: int, frame: object) -> None:
    raise KeyboardInterrupt(signal.Signals(signum).name)


def _choose(flag: bool | None, default: bool) -> bool:
    return default if flag is None else flag


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="naturalsort",
        description="Sort separated records into natural order (z2 before z11).",
    )
    parser.add_argument("--debug", action="store_true", help="Debug logging")
    parser.add_argument("--separator", help="Record separator (default: ',')")
    parser.add_argument("--input", default="", help="Input records to sort")
    parser.add_argument("--input-file", default="", help="File holding the records")
    parser.add_argument(
        "--input-gzip",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Decompress gzip input",
    )
    parser.add_argument(
        "--input-base64",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Decode base64 input",
    )
    parser.add_argument(
        "--output-file", default="", help="Write here instead of standard output"
    )
    parser.add_argument(
        "--output-gzip",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Compress output with gzip",
    )
    parser.add_argument(
        "--output-base64",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Encode output as base64",
    )
    parser.add_argument(
        "--root", type=Path, help="Directory whose pyproject.toml holds defaults"
    )
    return parser


def run(
    args: argparse.Namespace,
    config: NaturalSortConfig,
    fsys: Filesystem,
    stdout: BinaryIO | None = None,
) -> int:
    separator = validate_separator(
        config.separator if args.separator is None else args.separator
    )
    input_gzip = _choose(args.input_gzip, config.input_gzip)
    input_base64 = _choose(args.input_base64, config.input_base64)
    output_gzip = _choose(args.output_gzip, config.output_gzip)
    output_base64 = _choose(args.output_base64, config.output_base64)

    logger.debug(
        "input file=%r gzip=%s base64=%s", args.input_file, input_gzip, input_base64
    )
    logger.debug(
        "output file=%r gzip=%s base64=%s",
        args.output_file,
        output_gzip,
        output_base64,
    )

    data = read_input(
        fsys,
        args.input.strip(),
        args.input_file.strip(),
        gzip=input_gzip,
        base64=input_base64,
    )
    records = split_records(decode_records(data), separator)
    logger.debug("sorting %d records", len(records))
    natural_sort(records)

    payload = join_records(records, separator).encode("utf-8")
    write_output(
        fsys,
        args.output_file,
        payload,
        gzip=output_gzip,
        base64=output_base64,
        stdout=stdout,
    )
    return 0


def main(
    argv: list[str] | None = None,
    *,
    fsys: Filesystem | None = None,
    stdout: BinaryIO | None = None,
) -> int:
    parser = build_arg_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    if not args.input.strip() and not args.input_file.strip():
        parser.error(
            f"no valid input (input: {args.input!r}, file: {args.input_file!r})"
        )

    previous = signal.signal(signal.SIGTERM, _raise_interrupt)
    try:
        root = (
            args.root.resolve() if args.root else _find_project_root(Path.cwd())
        )
        config = NaturalSortConfig.load(root)
        return run(args, config, fsys or RealFilesystem(), stdout)
    except NaturalSortError as exc:
        print(f"[ERROR] {exc}", file=sys.stderr)
        return 2
    except KeyboardInterrupt:
        logger.info("interrupted, nothing written")
        return EXIT_INTERRUPTED
    finally:
        signal.signal(signal.SIGTERM, previous)


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
