"""Error types raised by seqslice.

Every error derives from :class:`SeqsliceError` and from the closest builtin
exception, so callers may catch either ``SeqsliceError`` or e.g. ``ValueError``.
"""

from __future__ import annotations


class SeqsliceError(Exception):
    """Base class for all seqslice errors."""


class OpenFailure(OSError, SeqsliceError):
    """The FASTA path cannot be opened for reading."""


class InvalidFormat(SeqsliceError, ValueError):
    """The file has no data line or its first data line has no sequence characters."""


class CoordinateOutOfBounds(SeqsliceError, IndexError):
    """The requested range runs past the end of the sequence."""


class InvalidRange(SeqsliceError, ValueError):
    """``start < 1`` or ``end < start``."""


class HandleClosedError(SeqsliceError, RuntimeError):
    """A query was issued against a handle that is not open."""


class ConfigError(SeqsliceError, ValueError):
    """A batch config or region string is malformed."""


__all__ = [
    "SeqsliceError",
    "OpenFailure",
    "InvalidFormat",
    "CoordinateOutOfBounds",
    "InvalidRange",
    "HandleClosedError",
    "ConfigError",
]
