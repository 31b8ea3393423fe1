"""Extract manifest entries from a Gradle Kotlin DSL build script.

Only the top-level `dependencies { ... }` block is read. Declarations take the
forms `conf(X)`, `"conf"(X)` and `conf(platform(X))`, where X is a quoted
coordinate or a version catalog accessor such as `libs.mybatis`.
"""

from __future__ import annotations

import logging
import re
from typing import Dict, List, Optional

from common.logging_utils import extra_context, is_debug_enabled
from constants import Constants

from .catalog import VersionCatalog
from .errors import ManifestError
from .models import Coordinate, DependencyEntry, ManifestEntry, PlatformReference, Role

logger = logging.getLogger(__name__)

_STRING = re.compile(r'"(?:\\.|[^"\\\n])*"')
_COMMENT_OR_STRING = re.compile(r'"(?:\\.|[^"\\\n])*"|/\*.*?\*/|//[^\n]*', re.DOTALL)
_DEPENDENCIES_OPEN = re.compile(r"(?m)^\s*dependencies\s*\{")
_DECLARATION = re.compile(
    r'(?:"(?P<qconf>[A-Za-z_]\w*)"|\b(?P<conf>[A-Za-z_]\w*))\s*\(\s*'
    r'(?:(?P<func>[A-Za-z_]\w*)\s*\(\s*(?P<inner>[^()]*?)\s*\)|(?P<arg>[^()]*?))'
    r'\s*\)'
)


def strip_comments(text: str) -> str:
    """Remove Kotlin block and line comments; string literals are kept intact."""
    return _COMMENT_OR_STRING.sub(
        lambda m: m.group(0) if m.group(0).startswith('"') else "", text
    )


def _mask_strings(text: str) -> str:
    """Blank out string literal contents, keeping offsets and the quotes."""
    return _STRING.sub(lambda m: '"' + " " * (len(m.group(0)) - 2) + '"', text)


def dependencies_block(text: str) -> Optional[str]:
    """Return the body of the first top-level dependencies block, nested blocks removed.

    Braces inside string literals do not count towards nesting, and a
    dependencies block nested in another block (e.g. buildscript) is skipped.
    """
    masked = _mask_strings(text)
    start = None
    for match in _DEPENDENCIES_OPEN.finditer(masked):
        if masked.count("{", 0, match.start()) == masked.count("}", 0, match.start()):
            start = match.end()
            break
    if start is None:
        return None
    depth = 1
    body = []
    for i in range(start, len(text)):
        char = masked[i]
        if char == "{":
            depth += 1
            continue
        if char == "}":
            depth -= 1
            if depth == 0:
                return "".join(body)
            continue
        if depth == 1:
            body.append(text[i])
    raise ManifestError("Unterminated dependencies block")


def _notation_coordinate(notation: str, catalog: Optional[VersionCatalog]) -> Coordinate:
    notation = notation.strip()
    if len(notation) >= 2 and notation[0] == notation[-1] == '"':
        try:
            return Coordinate.parse(notation[1:-1])
        except ValueError as e:
            raise ManifestError(str(e)) from e
    prefix = Constants.CATALOG_ACCESSOR + "."
    if notation.startswith(prefix):
        if catalog is None:
            raise ManifestError(f"'{notation}' needs a version catalog")
        return catalog.lookup(notation[len(prefix):])
    raise ManifestError(f"Unsupported dependency notation '{notation}'")


def parse_build_script(
    text: str,
    catalog: Optional[VersionCatalog] = None,
    configuration_roles: Optional[Dict[str, str]] = None,
    bom_catalog: Optional[Dict[str, Dict[str, str]]] = None,
) -> List[ManifestEntry]:
    """Parse build.gradle.kts text into manifest entries.

    Args:
        text: build script source
        catalog: version catalog used for `libs.` accessors
        configuration_roles: configuration name -> role value
        bom_catalog: platform coordinate -> version table

    Returns:
        Entries in declaration order; empty when there is no dependencies block.

    Raises:
        ManifestError: unknown configurations, aliases or notations.
    """
    roles = configuration_roles or Constants.DEFAULT_CONFIGURATION_ROLES
    bom_catalog = bom_catalog or {}
    body = dependencies_block(strip_comments(text))
    if body is None:
        logger.warning("No dependencies block found in build script")
        return []

    entries: List[ManifestEntry] = []
    for m in _DECLARATION.finditer(body):
        conf = m.group("qconf") or m.group("conf")
        func = m.group("func")
        if func is not None and func not in Constants.PLATFORM_FUNCTIONS:
            logger.warning("Skipping %s(%s(...)): not an external coordinate", conf, func)
            continue
        if conf not in roles:
            raise ManifestError(f"Unknown configuration '{conf}'")

        if func is not None:
            coord = _notation_coordinate(m.group("inner"), catalog)
            versions = bom_catalog.get(coord.key, {})
            if not versions:
                logger.warning("Platform %s has no version table configured", coord)
            entries.append(PlatformReference(coord, dict(versions)))
        else:
            coord = _notation_coordinate(m.group("arg"), catalog)
            entries.append(DependencyEntry(coord, Role(roles[conf])))

        if is_debug_enabled(logger):
            logger.debug(
                "Parsed declaration",
                extra=extra_context(
                    event="parse",
                    component="gradle",
                    action=conf,
                    target=coord.key,
                    outcome="platform" if func is not None else "dependency",
                )
            )
    return entries


def load_build_script(path: str, catalog: Optional[VersionCatalog] = None,
                      configuration_roles: Optional[Dict[str, str]] = None,
                      bom_catalog: Optional[Dict[str, Dict[str, str]]] = None) -> List[ManifestEntry]:
    """Read and parse a build.gradle.kts file."""
    try:
        with open(path, encoding="utf-8") as f:
            text = f.read()
    except FileNotFoundError as e:
        raise ManifestError(f"Build script not found: {path}") from e
    except OSError as e:
        raise ManifestError(f"Failed to read build script {path}: {e}") from e
    logger.info("Build script loaded from %s", path)
    return parse_build_script(text, catalog, configuration_roles, bom_catalog)
