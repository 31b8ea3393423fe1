"""Error taxonomy for manifest loading and resolution."""

from typing import Sequence

from .models import Coordinate, Role


class ManifestError(ValueError):
    """Raised when manifest input is malformed or references unknown names."""


class ResolutionError(Exception):
    """Base class for resolution failures; terminal for the resolve call."""

    def __init__(self, message: str, coordinate=None):
        super().__init__(message)
        self.coordinate = coordinate


class AmbiguousPlatformError(ResolutionError):
    """More than one active platform reference in a single manifest."""

    def __init__(self, platforms: Sequence[Coordinate]):
        names = ", ".join(str(p) for p in platforms)
        super().__init__(f"More than one active platform: {names}", platforms[1] if len(platforms) > 1 else None)
        self.platforms = list(platforms)


class UnresolvedVersionError(ResolutionError):
    """No explicit version and no active platform manages the coordinate."""

    def __init__(self, coordinate: Coordinate):
        super().__init__(f"No version available for '{coordinate}'", coordinate)


class ConflictingRoleError(ResolutionError):
    """Same coordinate declared with two different roles."""

    def __init__(self, coordinate: Coordinate, role1: Role, role2: Role):
        super().__init__(
            f"'{coordinate}' declared as both {role1.value} and {role2.value}",
            coordinate,
        )
        self.role1 = role1
        self.role2 = role2
