"""seqslice public interface.

Open a wrapped FASTA file once with :class:`FastaFile` (or :func:`open_fasta`)
and slice 1-based, inclusive coordinate ranges out of it.
"""

from __future__ import annotations

from .core.sequence import Sequence
from .errors import (
    ConfigError,
    CoordinateOutOfBounds,
    HandleClosedError,
    InvalidFormat,
    InvalidRange,
    OpenFailure,
    SeqsliceError,
)
from .io.fasta_file import FastaFile, HandleState, open_fasta

__all__ = [
    "ConfigError",
    "CoordinateOutOfBounds",
    "FastaFile",
    "HandleClosedError",
    "HandleState",
    "InvalidFormat",
    "InvalidRange",
    "OpenFailure",
    "SeqsliceError",
    "Sequence",
    "open_fasta",
]

__version__ = "0.1.0"
