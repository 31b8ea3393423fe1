"""Data models for manifest entries and resolved dependencies."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Optional, Union


class Role(Enum):
    """How a resolved coordinate participates in the build."""
    OPTIONAL_COMPILE = "optional-compile"
    COMPILE_AND_EXPORT = "compile-and-export"
    TEST_ONLY = "test-only"


@dataclass(frozen=True)
class Coordinate:
    """Dependency identity (group + artifact), optionally with an explicit version.

    Equality and hashing ignore the version; use `key` for lookups.
    """
    group: str
    artifact: str
    version: Optional[str] = field(default=None, compare=False)

    @classmethod
    def parse(cls, text: str) -> "Coordinate":
        """Parse "artifact", "group:artifact" or "group:artifact:version"."""
        parts = [p.strip() for p in text.strip().split(":")]
        if len(parts) == 1:
            group, artifact, version = "", parts[0], None
        elif len(parts) == 2:
            group, artifact, version = parts[0], parts[1], None
        elif len(parts) == 3:
            group, artifact, version = parts
        else:
            raise ValueError(f"Invalid coordinate '{text}'")
        if not artifact:
            raise ValueError(f"Invalid coordinate '{text}': missing artifact")
        return cls(group=group, artifact=artifact, version=version or None)

    @property
    def key(self) -> str:
        """Version-free identity string."""
        return f"{self.group}:{self.artifact}" if self.group else self.artifact

    def __str__(self) -> str:
        return self.key


@dataclass(frozen=True)
class PlatformReference:
    """A BOM: supplies default versions without being a library dependency."""
    coordinate: Coordinate
    versions: Dict[str, str] = field(default_factory=dict, compare=False)
    active: bool = True

    def lookup(self, coordinate: Coordinate) -> Optional[str]:
        """Return the managed version for coordinate, or None.

        Tries group:artifact first, then the group, then the bare artifact.
        """
        candidates = [coordinate.key]
        if coordinate.group:
            candidates.extend([coordinate.group, coordinate.artifact])
        for candidate in candidates:
            version = self.versions.get(candidate)
            if version:
                return version
        return None


@dataclass(frozen=True)
class DependencyEntry:
    """A declared dependency: coordinate plus role."""
    coordinate: Coordinate
    role: Role


ManifestEntry = Union[PlatformReference, DependencyEntry]


@dataclass(frozen=True)
class ResolvedDependency:
    """Resolution output handed to the build engine."""
    coordinate: Coordinate
    version: str
    role: Role

    def as_tuple(self):
        """Return (coordinate key, version, role value)."""
        return (self.coordinate.key, self.version, self.role.value)
