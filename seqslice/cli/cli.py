"""seqslice command-line interface."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from seqslice.errors import SeqsliceError
from seqslice.io.fasta_file import FastaFile
from seqslice.utils.config import ExtractionConfig, load_config
from seqslice.utils.logging import get_logger


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="seqslice", description="Random-access slices of wrapped FASTA files"
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command")

    get_parser = subparsers.add_parser("get", help="Print the sequence between two coordinates")
    get_parser.add_argument("fasta", help="Path to FASTA file")
    get_parser.add_argument("start", type=int, help="1-based start coordinate (inclusive)")
    get_parser.add_argument("end", type=int, help="1-based end coordinate (inclusive)")
    get_parser.add_argument("--caps", action="store_true", help="Uppercase the output")
    get_parser.add_argument(
        "--fasta-out",
        dest="fasta_out",
        action="store_true",
        help="Print a FASTA record instead of the bare sequence",
    )

    info_parser = subparsers.add_parser("info", help="Show header length and line width")
    info_parser.add_argument("fasta", help="Path to FASTA file")

    batch_parser = subparsers.add_parser("batch", help="Extract every region listed in a config")
    batch_parser.add_argument("config", help="Path to YAML/JSON config file")

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logger = get_logger(level=logging.DEBUG if args.verbose else logging.WARNING)

    try:
        if args.command == "get":
            return _run_get(Path(args.fasta), args.start, args.end, args.caps, args.fasta_out)
        if args.command == "info":
            return _run_info(Path(args.fasta))
        if args.command == "batch":
            return _run_batch(Path(args.config))
    except (SeqsliceError, FileNotFoundError) as exc:
        logger.debug("Command %s failed", args.command, exc_info=True)
        print(f"seqslice: error: {exc}", file=sys.stderr)
        return 1

    parser.print_help()
    return 0


def _run_get(path: Path, start: int, end: int, caps: bool, fasta_out: bool) -> int:
    with FastaFile(path) as fasta:
        if fasta_out:
            print(fasta.fetch(start, end, caps=caps).to_fasta(width=fasta.line_width), end="")
        else:
            print(fasta.get_sequence(start, end, caps=caps))
    return 0


def _run_info(path: Path) -> int:
    with FastaFile(path) as fasta:
        print(f"path\t{path}")
        print(f"name\t{fasta.name or ''}")
        print(f"header_length\t{fasta.header_length}")
        print(f"line_width\t{fasta.line_width}")
    return 0


def _run_batch(config_path: Path) -> int:
    config: ExtractionConfig = load_config(config_path)
    with FastaFile(config.fasta) as fasta:
        for region in config.regions:
            record = fasta.fetch(region.start, region.end, caps=config.caps)
            if region.name:
                record.id = region.name
            print(record.to_fasta(width=fasta.line_width), end="")
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
