"""Random-access handle over a wrapped, single-record FASTA file."""

from __future__ import annotations

import logging
from enum import Enum
from pathlib import Path
from typing import BinaryIO

from seqslice.core.extract import read_sequence
from seqslice.core.header import HeaderInfo, scan_header
from seqslice.core.offsets import byte_offset
from seqslice.core.sequence import Sequence
from seqslice.errors import HandleClosedError, InvalidRange, OpenFailure

_LOGGER = logging.getLogger(__name__)


class HandleState(Enum):
    CLOSED = "closed"
    OPEN = "open"


class FastaFile:
    """Slice 1-based, inclusive coordinate ranges out of a FASTA file.

    The header is scanned once when the file is opened; every query then
    seeks straight to the computed byte offset and reads forward only as far
    as it needs to. The sequence body must be wrapped at one fixed width.

    Example
    -------
    >>> with FastaFile("chr1.fa") as fasta:
    ...     fasta.get_sequence(10_001, 10_060, caps=True)
    """

    def __init__(self, path: str | Path | None = None) -> None:
        self._path: Path | None = None
        self._stream: BinaryIO | None = None
        self._info: HeaderInfo | None = None
        if path is not None:
            self.open(path)

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------
    def open(self, path: str | Path) -> FastaFile:
        """Open ``path`` and scan its header.

        An already open handle releases its current file first.

        Raises
        ------
        OpenFailure
            If the path cannot be opened for reading.
        InvalidFormat
            If the file has no usable data line.
        """
        self.close()
        path = Path(path)
        try:
            stream = path.open("rb")
        except OSError as exc:
            raise OpenFailure(exc.errno, f"cannot open FASTA file: {exc.strerror}", str(path)) from exc

        try:
            info = scan_header(stream)
        except BaseException:
            stream.close()
            raise

        self._path = path
        self._stream = stream
        self._info = info
        _LOGGER.debug(
            "Opened %s (header %d bytes, line width %d)", path, info.header_length, info.line_width
        )
        return self

    def close(self) -> None:
        """Release the file. Safe to call more than once."""
        stream, self._stream = self._stream, None
        path, self._path = self._path, None
        self._info = None
        if stream is not None:
            stream.close()
            _LOGGER.debug("Closed %s", path)

    def __enter__(self) -> FastaFile:
        self._require_open()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def __del__(self) -> None:
        # Last resort when the handle was neither closed nor used as a context manager.
        stream = getattr(self, "_stream", None)
        if stream is not None:
            stream.close()

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------
    @property
    def state(self) -> HandleState:
        return HandleState.OPEN if self._stream is not None else HandleState.CLOSED

    @property
    def closed(self) -> bool:
        return self._stream is None

    @property
    def path(self) -> Path | None:
        return self._path

    @property
    def header(self) -> HeaderInfo:
        _, info = self._require_open()
        return info

    @property
    def header_length(self) -> int:
        return self.header.header_length

    @property
    def line_width(self) -> int:
        return self.header.line_width

    @property
    def name(self) -> str | None:
        return self.header.name

    @property
    def description(self) -> str | None:
        return self.header.description

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def offset_of(self, coordinate: int) -> int:
        """Byte offset of 1-based ``coordinate`` in the underlying file."""
        info = self.header
        return byte_offset(coordinate, info.header_length, info.line_width, info.terminator_width)

    def get_sequence(self, start: int, end: int, caps: bool = False) -> str:
        """Return the characters at coordinates ``start`` to ``end`` inclusive.

        Raises
        ------
        InvalidRange
            If ``start < 1`` or ``end < start``.
        HandleClosedError
            If the handle is not open.
        CoordinateOutOfBounds
            If the range runs past the end of the sequence.
        """
        _check_range(start, end)
        stream, info = self._require_open()
        offset = byte_offset(start, info.header_length, info.line_width, info.terminator_width)
        return read_sequence(stream, offset, end - start + 1, caps=caps)

    def fetch(self, start: int, end: int, caps: bool = False) -> Sequence:
        """Like :meth:`get_sequence` but wrapped in a :class:`Sequence`."""
        tokens = self.get_sequence(start, end, caps=caps)
        label = self.name or (self._path.stem if self._path is not None else "sequence")
        return Sequence(
            id=f"{label}:{start}-{end}",
            tokens=tokens,
            metadata={"start": start, "end": end, "path": str(self._path)},
        )

    def _require_open(self) -> tuple[BinaryIO, HeaderInfo]:
        if self._stream is None or self._info is None:
            raise HandleClosedError("FASTA handle is closed")
        return self._stream, self._info

    def __repr__(self) -> str:
        path = str(self._path) if self._path is not None else None
        return f"FastaFile(path={path!r}, state={self.state.value!r})"


def _check_range(start: int, end: int) -> None:
    if start < 1:
        raise InvalidRange(f"start must be >= 1, got {start}")
    if end < start:
        raise InvalidRange(f"end ({end}) must be >= start ({start})")


def open_fasta(path: str | Path) -> FastaFile:
    """Open ``path`` and return a ready :class:`FastaFile`."""
    return FastaFile(path)


__all__ = ["FastaFile", "HandleState", "open_fasta"]
