"""Batch extraction configuration."""

from __future__ import annotations

import json
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from seqslice.errors import ConfigError
from seqslice.utils.regions import Region, parse_region


@dataclass(frozen=True, slots=True)
class ExtractionConfig:
    """What to slice and from where.

    Attributes
    ----------
    fasta : Path
        FASTA file to read.
    regions : tuple[Region, ...]
        Ranges to extract, in output order.
    caps : bool
        Uppercase the extracted characters.
    """

    fasta: Path
    regions: tuple[Region, ...]
    caps: bool = False

    def as_dict(self) -> dict[str, Any]:
        return {
            "fasta": str(self.fasta),
            "caps": self.caps,
            "regions": [
                {"start": region.start, "end": region.end, "name": region.name}
                for region in self.regions
            ],
        }


def load_config(path: str | Path) -> ExtractionConfig:
    """Load an :class:`ExtractionConfig` from a JSON or YAML file.

    A relative ``fasta`` entry is resolved against the config file's folder.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")
    text = path.read_text(encoding="utf-8")
    try:
        if path.suffix.lower() == ".json":
            data = json.loads(text)
        else:
            data = yaml.safe_load(text)
    except (json.JSONDecodeError, yaml.YAMLError) as exc:
        raise ConfigError(f"Failed to parse config {path}: {exc}") from exc
    return config_from_mapping(data, base_dir=path.parent)


def config_from_mapping(data: Any, base_dir: Path | None = None) -> ExtractionConfig:
    if not isinstance(data, Mapping):
        raise ConfigError("Config must be a mapping")

    fasta = data.get("fasta")
    if not fasta:
        raise ConfigError("fasta is required")
    fasta_path = Path(fasta)
    if base_dir is not None and not fasta_path.is_absolute():
        fasta_path = base_dir / fasta_path

    raw_regions = data.get("regions") or []
    if not isinstance(raw_regions, list) or not raw_regions:
        raise ConfigError("regions must be a non-empty list")

    caps = data.get("caps", False)
    if not isinstance(caps, bool):
        raise ConfigError(f"caps must be a boolean, got {caps!r}")

    return ExtractionConfig(
        fasta=fasta_path,
        regions=tuple(_build_region(entry) for entry in raw_regions),
        caps=caps,
    )


def _build_region(entry: Any) -> Region:
    if isinstance(entry, str):
        return parse_region(entry)
    if isinstance(entry, Mapping):
        try:
            return Region(
                start=int(entry["start"]),
                end=int(entry["end"]),
                name=entry.get("name"),
            )
        except (KeyError, TypeError, ValueError) as exc:
            raise ConfigError(f"Invalid region entry {dict(entry)!r}: {exc}") from exc
    raise ConfigError(f"Region entries must be strings or mappings, got {entry!r}")
