from dataclasses import dataclass, field
from typing import Final

NO_DESCRIPTION: Final[str] = "No description."


@dataclass(frozen=True, slots=True)
class PackageRecord:
    """Represents a single search hit from one package source.

    Attributes:
        name: Package or application ID. Never empty.
        description: One-line summary, or `NO_DESCRIPTION` when the source had none.
    """

    name: str
    description: str = NO_DESCRIPTION


@dataclass(frozen=True, slots=True)
class SearchResults:
    """Per-source search hits, in the tool's own output order."""

    system: list[PackageRecord] = field(default_factory=list)
    user: list[PackageRecord] = field(default_factory=list)
    sandboxed: list[PackageRecord] = field(default_factory=list)
