"""Region parsing helpers."""

from __future__ import annotations

import re
from dataclasses import dataclass

from seqslice.errors import ConfigError

_REGION_RE = re.compile(r"^(?:(?P<name>[^:\s]+):)?(?P<start>[\d,_]+)-(?P<end>[\d,_]+)$")


@dataclass(frozen=True, slots=True)
class Region:
    """A 1-based, inclusive coordinate range."""

    start: int
    end: int
    name: str | None = None

    @property
    def length(self) -> int:
        return self.end - self.start + 1

    def __str__(self) -> str:
        span = f"{self.start}-{self.end}"
        return f"{self.name}:{span}" if self.name else span


def parse_region(text: str) -> Region:
    """Parse ``"start-end"`` or ``"name:start-end"``.

    Thousands separators (``,`` or ``_``) inside the numbers are accepted.
    """
    match = _REGION_RE.match(text.strip())
    if match is None:
        raise ConfigError(f"Cannot parse region {text!r}; expected 'start-end' or 'name:start-end'")
    start = int(match["start"].replace(",", "").replace("_", ""))
    end = int(match["end"].replace(",", "").replace("_", ""))
    return Region(start=start, end=end, name=match["name"])
