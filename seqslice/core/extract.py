"""Bounded forward reads of sequence characters."""

from __future__ import annotations

import logging
from typing import BinaryIO, Final

from seqslice.core.alphabet import filter_sequence_bytes
from seqslice.errors import CoordinateOutOfBounds

_LOGGER = logging.getLogger(__name__)

RECORD_START: Final = b">"
MAX_CHUNK: Final = 1 << 20


def read_sequence(stream: BinaryIO, offset: int, count: int, caps: bool = False) -> str:
    """Collect ``count`` sequence characters starting at byte ``offset``.

    Non-alphabet bytes are skipped without being counted. The stream is only
    read forward from ``offset``; a ``>`` byte marks the start of another
    record and ends the sequence.

    Raises
    ------
    CoordinateOutOfBounds
        If the file (or the first record) ends before ``count`` characters
        were collected.
    """
    if count < 0:
        raise ValueError(f"count must be non-negative, got {count}")

    stream.seek(offset)
    parts: list[bytes] = []
    collected = 0
    while collected < count:
        need = count - collected
        # Over-read a little so a wrapped range usually completes in one chunk.
        chunk = stream.read(min(need + need // 8 + 2, MAX_CHUNK))
        if not chunk:
            raise CoordinateOutOfBounds(
                f"end of file after {collected} of {count} characters (offset {offset})"
            )

        boundary = chunk.find(RECORD_START)
        if boundary >= 0:
            chunk = chunk[:boundary]

        kept = filter_sequence_bytes(chunk, caps)[:need]
        parts.append(kept)
        collected += len(kept)

        if boundary >= 0 and collected < count:
            raise CoordinateOutOfBounds(
                f"next record reached after {collected} of {count} characters (offset {offset})"
            )

    _LOGGER.debug("Read %d characters from offset %d", count, offset)
    return b"".join(parts).decode("ascii")


__all__ = ["MAX_CHUNK", "RECORD_START", "read_sequence"]
