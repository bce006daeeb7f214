"""Shared test fixtures for seqslice tests."""

from pathlib import Path

import pytest


@pytest.fixture
def write_fasta(tmp_path):
    """Factory writing raw bytes (or text) to a FASTA file under tmp_path."""

    def _write(content: bytes | str, name: str = "sample.fa") -> Path:
        path = tmp_path / name
        data = content.encode("ascii") if isinstance(content, str) else content
        path.write_bytes(data)
        return path

    return _write


@pytest.fixture
def small_fasta(write_fasta):
    """Header ``>seq1`` (6 bytes) with data lines ``ACGT`` and ``AC``."""
    return write_fasta(">seq1\nACGT\nAC\n")


@pytest.fixture
def wrapped_sequence():
    """A 250-character body wrapped at 60 in the fixture file below."""
    unit = "ACGTTGCAacgtNNnn*-"
    return (unit * 14)[:250]


@pytest.fixture
def wrapped_fasta(write_fasta, wrapped_sequence):
    width = 60
    lines = [wrapped_sequence[idx : idx + width] for idx in range(0, len(wrapped_sequence), width)]
    header = ">chr_test some description here\n;comment line\n"
    return write_fasta(header + "\n".join(lines) + "\n", name="wrapped.fa")
