"""Sequence alphabet and byte classification.

The alphabet is ASCII letters plus ``*`` (stop) and ``-`` (gap). Everything
else, line terminators and stray whitespace included, is not sequence
content. Both the header scanner and the extractor classify bytes through
this module only.
"""

from __future__ import annotations

import string
from typing import Final

import numpy as np

ALPHABET: Final[frozenset[int]] = frozenset((string.ascii_letters + "*-").encode("ascii"))

_LOOKUP = np.zeros(256, dtype=bool)
_LOOKUP[sorted(ALPHABET)] = True
_LOOKUP.flags.writeable = False

_UPPER: Final = bytes.maketrans(
    string.ascii_lowercase.encode("ascii"), string.ascii_uppercase.encode("ascii")
)


def is_sequence_byte(byte: int) -> bool:
    """Return ``True`` when ``byte`` is part of the sequence alphabet."""
    return 0 <= byte < 256 and bool(_LOOKUP[byte])


def normalize_byte(byte: int, caps: bool = False) -> int:
    """Return ``byte`` unchanged, or uppercased when ``caps`` is set.

    Raises
    ------
    ValueError
        If ``byte`` is not in the alphabet.
    """
    if not is_sequence_byte(byte):
        raise ValueError(f"byte {byte!r} is not a sequence character")
    return _UPPER[byte] if caps else byte


def sequence_mask(data: bytes) -> np.ndarray:
    """Boolean mask marking the sequence bytes of ``data``."""
    return _LOOKUP[np.frombuffer(data, dtype=np.uint8)]


def count_sequence_bytes(data: bytes) -> int:
    if not data:
        return 0
    return int(np.count_nonzero(sequence_mask(data)))


def filter_sequence_bytes(data: bytes, caps: bool = False) -> bytes:
    """Drop every non-alphabet byte from ``data``, uppercasing if ``caps``."""
    if not data:
        return b""
    kept = np.frombuffer(data, dtype=np.uint8)[sequence_mask(data)].tobytes()
    return kept.translate(_UPPER) if caps else kept


__all__ = [
    "ALPHABET",
    "is_sequence_byte",
    "normalize_byte",
    "sequence_mask",
    "count_sequence_bytes",
    "filter_sequence_bytes",
]
