"""Core primitives.

Byte classification, header scanning, offset arithmetic and bounded reads.
None of these hold state; :class:`seqslice.io.FastaFile` ties them together.
"""

from .alphabet import (
    ALPHABET,
    count_sequence_bytes,
    filter_sequence_bytes,
    is_sequence_byte,
    normalize_byte,
)
from .extract import read_sequence
from .header import HeaderInfo, scan_header
from .offsets import byte_offset
from .sequence import Sequence

__all__ = [
    "ALPHABET",
    "HeaderInfo",
    "Sequence",
    "byte_offset",
    "count_sequence_bytes",
    "filter_sequence_bytes",
    "is_sequence_byte",
    "normalize_byte",
    "read_sequence",
    "scan_header",
]
