"""Gradle version catalog (libs.versions.toml) support."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from .errors import ManifestError
from .models import Coordinate

logger = logging.getLogger(__name__)


def normalize_alias(alias: str) -> str:
    """Normalize a catalog alias; '-', '_' and '.' are interchangeable."""
    return re.sub(r"[-_.]", ".", alias.strip()).lower()


@dataclass
class VersionCatalog:
    """Library aliases mapped to coordinates (with versions when declared)."""
    libraries: Dict[str, Coordinate] = field(default_factory=dict)

    def lookup(self, alias: str) -> Coordinate:
        """Return the coordinate for alias (dotted accessor or raw alias).

        Raises:
            ManifestError: alias is not in the catalog.
        """
        coord = self.libraries.get(normalize_alias(alias))
        if coord is None:
            raise ManifestError(f"Unknown version catalog alias '{alias}'")
        return coord


def _library_coordinate(alias: str, spec: Any, versions: Dict[str, Any]) -> Coordinate:
    if isinstance(spec, str):
        return Coordinate.parse(spec)
    if not isinstance(spec, dict):
        raise ManifestError(f"Invalid library definition for '{alias}'")

    if "module" in spec:
        base = Coordinate.parse(spec["module"])
    elif "group" in spec and "name" in spec:
        base = Coordinate(spec["group"], spec["name"])
    else:
        raise ManifestError(f"Library '{alias}' needs 'module' or 'group' and 'name'")

    version: Optional[str] = None
    raw = spec.get("version")
    if isinstance(raw, str):
        version = raw
    elif isinstance(raw, dict):
        if "ref" in raw:
            ref = raw["ref"]
            if ref not in versions:
                raise ManifestError(f"Library '{alias}' references unknown version '{ref}'")
            version = _version_value(versions[ref])
        else:
            version = _version_value(raw)
    return Coordinate(base.group, base.artifact, version)


def _version_value(value: Any) -> Optional[str]:
    """Flatten rich version declarations to a single version string."""
    if isinstance(value, str):
        return value
    if isinstance(value, dict):
        for key in ("strictly", "require", "prefer"):
            if isinstance(value.get(key), str):
                return value[key]
    return None


def catalog_from_dict(data: Dict[str, Any]) -> VersionCatalog:
    """Build a VersionCatalog from a parsed TOML document."""
    versions = data.get("versions", {}) or {}
    catalog = VersionCatalog()
    for alias, spec in (data.get("libraries", {}) or {}).items():
        try:
            coord = _library_coordinate(alias, spec, versions)
        except ManifestError:
            raise
        except ValueError as e:
            raise ManifestError(f"Invalid library definition for '{alias}': {e}") from e
        catalog.libraries[normalize_alias(alias)] = coord
    return catalog


def load_catalog(path: str) -> VersionCatalog:
    """Read a libs.versions.toml file.

    Raises:
        ManifestError: missing or unparseable file.
    """
    try:
        import tomllib as toml  # type: ignore
    except ImportError:  # Python < 3.11
        import tomli as toml  # type: ignore

    try:
        with open(path, "rb") as f:
            data = toml.load(f) or {}
    except FileNotFoundError as e:
        raise ManifestError(f"Version catalog not found: {path}") from e
    except (OSError, toml.TOMLDecodeError) as e:
        raise ManifestError(f"Failed to parse version catalog {path}: {e}") from e

    catalog = catalog_from_dict(data)
    logger.info("Version catalog loaded from %s (%d libraries)", path, len(catalog.libraries))
    return catalog
