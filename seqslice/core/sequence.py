"""Sequence data structures."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field


@dataclass(slots=True)
class Sequence:
    """A slice of a FASTA sequence together with where it came from."""

    id: str
    tokens: str
    metadata: Mapping[str, object] = field(default_factory=dict)

    def to_dict(self) -> dict[str, object]:
        return {
            "id": self.id,
            "tokens": self.tokens,
            "metadata": dict(self.metadata),  # type: ignore[dict-item]
        }

    def to_fasta(self, width: int | None = None) -> str:
        """Render as a FASTA record, wrapping the body at ``width`` if given."""
        if width is None or width <= 0:
            body = self.tokens
        else:
            body = "\n".join(
                self.tokens[idx : idx + width] for idx in range(0, len(self.tokens), width)
            )
        return f">{self.id}\n{body}\n"

    def __len__(self) -> int:  # pragma: no cover - simple delegation
        return len(self.tokens)
