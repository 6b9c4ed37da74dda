"""Domain entities for GitHub repositories."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Repository:
    """Immutable repository entity."""

    id: int
    name: str
    ssh_url: str
