"""Load manifest documents (YAML or JSON) into manifest entries.

Documents are validated against MANIFEST_SCHEMA (Draft 7) before conversion
so malformed input fails with a path to the offending field.
"""

from __future__ import annotations

import json
import logging
import os
from typing import Any, Dict, List, Optional

import yaml
from jsonschema import Draft7Validator

from .errors import ManifestError
from .models import Coordinate, DependencyEntry, ManifestEntry, PlatformReference, Role

logger = logging.getLogger(__name__)

MANIFEST_SCHEMA: Dict[str, Any] = {
    "$schema": "http://json-schema.org/draft-07/schema#",
    "type": "object",
    "required": ["entries"],
    "properties": {
        "entries": {
            "type": "array",
            "items": {
                "type": "object",
                "required": ["kind", "coordinate"],
                "properties": {
                    "kind": {"enum": ["platform", "dependency"]},
                    "coordinate": {"type": "string", "minLength": 1},
                    "version": {"type": ["string", "null"]},
                    "role": {"enum": [r.value for r in Role]},
                    "versions": {
                        "type": "object",
                        "additionalProperties": {"type": "string"},
                    },
                    "active": {"type": "boolean"},
                },
                "if": {"properties": {"kind": {"const": "dependency"}}},
                "then": {"required": ["role"]},
            },
        },
    },
}


def validate_document(data: Any) -> None:
    """Raise ManifestError on the first schema violation."""
    validator = Draft7Validator(MANIFEST_SCHEMA)
    errs = sorted(validator.iter_errors(data), key=lambda e: list(e.path))
    if errs:
        first = errs[0]
        path = "/".join([str(p) for p in first.path])
        raise ManifestError(f"Invalid manifest at '{path}': {first.message}")


def _coordinate(text: str, version: Optional[str]) -> Coordinate:
    try:
        coord = Coordinate.parse(text)
    except ValueError as e:
        raise ManifestError(str(e)) from e
    if version:
        coord = Coordinate(coord.group, coord.artifact, version)
    return coord


def entries_from_document(data: Any, bom_catalog: Optional[Dict[str, Dict[str, str]]] = None) -> List[ManifestEntry]:
    """Convert a parsed manifest document into manifest entries.

    Args:
        data: parsed YAML/JSON document
        bom_catalog: platform coordinate -> version table, used when a
            platform entry carries no inline versions

    Returns:
        Entries in document order.
    """
    validate_document(data)
    bom_catalog = bom_catalog or {}
    entries: List[ManifestEntry] = []
    for item in data["entries"]:
        coord = _coordinate(item["coordinate"], item.get("version"))
        if item["kind"] == "platform":
            versions = item.get("versions")
            if versions is None:
                versions = bom_catalog.get(coord.key, {})
                if not versions:
                    logger.warning("Platform %s has no version table configured", coord)
            entries.append(PlatformReference(coord, dict(versions), item.get("active", True)))
        else:
            entries.append(DependencyEntry(coord, Role(item["role"])))
    return entries


def load_manifest(path: str, bom_catalog: Optional[Dict[str, Dict[str, str]]] = None) -> List[ManifestEntry]:
    """Read a YAML or JSON manifest file (format chosen by extension).

    Raises:
        ManifestError: unreadable, unparseable or invalid documents.
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            if os.path.splitext(path)[1].lower() == ".json":
                data = json.load(f)
            else:
                data = yaml.safe_load(f)
    except FileNotFoundError as e:
        raise ManifestError(f"Manifest not found: {path}") from e
    except (OSError, json.JSONDecodeError, yaml.YAMLError) as e:
        raise ManifestError(f"Failed to read manifest {path}: {e}") from e
    logger.info("Manifest loaded from %s", path)
    return entries_from_document(data, bom_catalog)
