"""Minimal example showing how to slice a FASTA file."""

from __future__ import annotations

import sys
import tempfile
from pathlib import Path

from seqslice import CoordinateOutOfBounds, FastaFile


def main() -> None:
    with tempfile.TemporaryDirectory() as tmp:
        path = Path(tmp) / "example.fa"
        path.write_text(">seq1 toy record\n;hand written\nacgtACGTac\nGGCCttAA\n")

        with FastaFile(path) as fasta:
            print("Record:", fasta.name)
            print("Header bytes:", fasta.header_length)
            print("Line width:", fasta.line_width)
            print("1-10:", fasta.get_sequence(1, 10))
            print("8-14 (caps):", fasta.get_sequence(8, 14, caps=True))
            print(fasta.fetch(5, 18).to_fasta(width=fasta.line_width), end="")

            try:
                fasta.get_sequence(1, 100)
            except CoordinateOutOfBounds as exc:
                print("Out of bounds:", exc, file=sys.stderr)


if __name__ == "__main__":
    main()
