"""Coordinate to byte offset arithmetic."""

from __future__ import annotations

from seqslice.errors import InvalidRange


def byte_offset(start: int, header_length: int, line_width: int, terminator_width: int = 1) -> int:
    """Absolute byte position of 1-based coordinate ``start``.

    Every wrapped line before the target is assumed to hold exactly
    ``line_width`` sequence bytes followed by ``terminator_width`` bytes.
    """
    if start < 1:
        raise InvalidRange(f"start must be >= 1, got {start}")
    if line_width < 1:
        raise ValueError(f"line_width must be positive, got {line_width}")
    lines_before, column = divmod(start - 1, line_width)
    return header_length + lines_before * (line_width + terminator_width) + column


__all__ = ["byte_offset"]
