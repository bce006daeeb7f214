"""File handles."""

from .fasta_file import FastaFile, HandleState, open_fasta

__all__ = ["FastaFile", "HandleState", "open_fasta"]
