"""Header scanning for wrapped FASTA files."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import BinaryIO, Final

from seqslice.core.alphabet import count_sequence_bytes
from seqslice.errors import InvalidFormat

_LOGGER = logging.getLogger(__name__)

HEADER_MARKERS: Final = frozenset(b">;")


@dataclass(frozen=True, slots=True)
class HeaderInfo:
    """Layout metrics gathered from the top of a FASTA file.

    Attributes
    ----------
    header_length : int
        Bytes taken by the leading ``>``/``;`` lines, terminators included.
    line_width : int
        Sequence characters on the first data line (always > 0).
    terminator_width : int
        Non-sequence bytes on the first data line, terminator included
        (1 for ``\\n``, 2 for ``\\r\\n``, more with trailing whitespace).
    header_lines : tuple[str, ...]
        Header and comment lines as text, terminators stripped.
    """

    header_length: int
    line_width: int
    terminator_width: int = 1
    header_lines: tuple[str, ...] = ()

    @property
    def name(self) -> str | None:
        """Identifier of the first ``>`` record, if any."""
        description = self.description
        if not description:
            return None
        return description.split()[0]

    @property
    def description(self) -> str | None:
        for line in self.header_lines:
            if line.startswith(">"):
                return line[1:].strip()
        return None


def is_header_line(line: bytes) -> bool:
    return len(line) > 0 and line[0] in HEADER_MARKERS


def scan_header(stream: BinaryIO) -> HeaderInfo:
    """Scan the header region of ``stream`` and measure the first data line.

    The stream is read from its current position, which should be the start
    of the file. Reading stops right after the first data line.

    Raises
    ------
    InvalidFormat
        If the file is empty, holds only header lines, or its first data line
        has no sequence characters.
    """
    header_length = 0
    header_lines: list[str] = []

    for line in iter(stream.readline, b""):
        if is_header_line(line):
            header_length += len(line)
            header_lines.append(line.rstrip(b"\r\n").decode("utf-8", errors="replace"))
            continue

        line_width = count_sequence_bytes(line)
        if line_width == 0:
            raise InvalidFormat(
                f"first data line after {header_length} header bytes has no sequence characters"
            )
        # Trailing whitespace and \r count towards the stride between lines.
        terminator_width = len(line) - line_width if line.endswith(b"\n") else 1
        _LOGGER.debug(
            "Scanned header: %d bytes over %d line(s), line width %d",
            header_length,
            len(header_lines),
            line_width,
        )
        return HeaderInfo(
            header_length=header_length,
            line_width=line_width,
            terminator_width=terminator_width,
            header_lines=tuple(header_lines),
        )

    if not header_lines:
        raise InvalidFormat("file is empty")
    raise InvalidFormat("file has no sequence data line")


__all__ = ["HEADER_MARKERS", "HeaderInfo", "is_header_line", "scan_header"]
