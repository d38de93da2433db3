"""Manifest default values handed to the manifest generator."""

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class ManifestDefaults:
    """Package name, description and authors used to seed a manifest."""

    name: str = ""
    description: str = ""
    authors: tuple[str, ...] = field(default_factory=tuple)

    def is_empty(self) -> bool:
        return not (self.name or self.description or self.authors)

    def to_dict(self) -> dict[str, Any]:
        """Convert to the package section layout, omitting empty fields."""
        result: dict[str, Any] = {}
        if self.name:
            result["name"] = self.name
        if self.description:
            result["description"] = self.description
        if self.authors:
            result["authors"] = list(self.authors)
        return result
