from __future__ import annotations

import base64 as b64
import binascii
import gzip as gz
import logging
import sys
import zlib
from typing import BinaryIO

from .errors import InputError
from .fs import Filesystem

logger = logging.getLogger(__name__)


def read_input(
    fsys: Filesystem,
    text: str,
    input_file: str,
    *,
    gzip: bool = False,
    base64: bool = False,
) -> bytes:
    if input_file and fsys.exists(input_file):
        logger.debug("reading input file %s", input_file)
        try:
            with fsys.open(input_file) as handle:
                data = handle.read()
        except OSError as exc:
            raise InputError(f"cannot read input file {input_file!r}: {exc}") from exc
    elif input_file:
        raise InputError(f"file does not exist (input file: {input_file!r})")
    else:
        data = text.encode("utf-8")

    if base64:
        try:
            data = b64.b64decode(b"".join(data.split()), validate=True)
        except binascii.Error as exc:
            raise InputError(f"invalid base64 input: {exc}") from exc
    if gzip:
        try:
            data = gz.decompress(data)
        except (OSError, EOFError, zlib.error) as exc:
            raise InputError(f"invalid gzip input: {exc}") from exc
    return data


def decode_records(data: bytes) -> str:
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise InputError(f"input is not valid UTF-8: {exc}") from exc


def write_output(
    fsys: Filesystem,
    output_file: str,
    payload: bytes,
    *,
    gzip: bool = False,
    base64: bool = False,
    stdout: BinaryIO | None = None,
) -> None:
    if gzip:
        payload = gz.compress(payload)
    if base64:
        payload = b64.b64encode(payload)

    output_file = output_file.strip()
    if output_file:
        logger.debug("writing %d bytes to %s", len(payload), output_file)
        try:
            with fsys.create(output_file) as handle:
                handle.write(payload)
        except OSError as exc:
            raise InputError(
                f"cannot write output file {output_file!r}: {exc}"
            ) from exc
        return

    target = stdout if stdout is not None else sys.stdout.buffer
    target.write(payload)
    target.flush()
