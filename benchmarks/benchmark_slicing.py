"""Random-access slicing micro benchmarks."""

import random
import tempfile
from pathlib import Path
from time import perf_counter

from seqslice import FastaFile

LINE_WIDTH = 60
LENGTH = 5_000_000


def write_fixture(directory: Path) -> Path:
    rng = random.Random(1337)
    body = "".join(rng.choice("ACGT") for _ in range(LENGTH))
    path = directory / "bench.fa"
    with path.open("w") as handle:
        handle.write(">bench synthetic\n")
        for idx in range(0, LENGTH, LINE_WIDTH):
            handle.write(body[idx : idx + LINE_WIDTH] + "\n")
    return path


def time_slices(fasta: FastaFile, span: int, rounds: int = 1000) -> float:
    rng = random.Random(42)
    start = perf_counter()
    for _ in range(rounds):
        begin = rng.randint(1, LENGTH - span)
        fasta.get_sequence(begin, begin + span - 1)
    return perf_counter() - start


if __name__ == "__main__":
    with tempfile.TemporaryDirectory() as tmp:
        path = write_fixture(Path(tmp))
        with FastaFile(path) as fasta:
            for span in (10, 150, 10_000, 1_000_000):
                rounds = 1000 if span < 1_000_000 else 10
                print(f"span {span}: {time_slices(fasta, span, rounds):.6f}s over {rounds} reads")
