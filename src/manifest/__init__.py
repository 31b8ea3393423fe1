"""Dependency manifest package.

- models.py: coordinates, platform references, roles and resolved records
- errors.py: loader and resolution error taxonomy
- resolver.py: BOM version inheritance, deduplication and ordering
- loader.py: YAML/JSON manifest documents
- catalog.py: Gradle version catalogs (libs.versions.toml)
- gradle.py: dependencies blocks of build.gradle.kts scripts
- export.py: JSON/CSV output
"""

from .errors import (  # noqa: F401
    AmbiguousPlatformError,
    ConflictingRoleError,
    ManifestError,
    ResolutionError,
    UnresolvedVersionError,
)
from .models import (  # noqa: F401
    Coordinate,
    DependencyEntry,
    PlatformReference,
    ResolvedDependency,
    Role,
)
from .resolver import resolve  # noqa: F401

__all__ = [
    "AmbiguousPlatformError",
    "ConflictingRoleError",
    "ManifestError",
    "ResolutionError",
    "UnresolvedVersionError",
    "Coordinate",
    "DependencyEntry",
    "PlatformReference",
    "ResolvedDependency",
    "Role",
    "resolve",
]
