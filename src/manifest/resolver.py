"""Dependency manifest resolution.

Single pass over manifest entries: pick the active platform, compute each
dependency's effective version, deduplicate by coordinate and emit records in
first-seen order. Errors are raised for the first problem found, scanning in
input order; no partial results are returned.
"""

from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Optional

from common.logging_utils import extra_context, is_debug_enabled

from .errors import AmbiguousPlatformError, ConflictingRoleError, UnresolvedVersionError
from .models import DependencyEntry, ManifestEntry, PlatformReference, ResolvedDependency

logger = logging.getLogger(__name__)


def active_platform(entries: Iterable[ManifestEntry]) -> Optional[PlatformReference]:
    """Return the single active platform, None if there is none.

    Raises:
        AmbiguousPlatformError: more than one platform is active.
    """
    active = [e for e in entries if isinstance(e, PlatformReference) and e.active]
    if len(active) > 1:
        raise AmbiguousPlatformError([p.coordinate for p in active])
    return active[0] if active else None


def resolve(entries: Iterable[ManifestEntry]) -> List[ResolvedDependency]:
    """Resolve manifest entries into an ordered list of ResolvedDependency.

    Args:
        entries: platform references and dependency entries, in declaration order

    Returns:
        One record per unique coordinate, in first-seen order.

    Raises:
        AmbiguousPlatformError, UnresolvedVersionError, ConflictingRoleError
    """
    entries = list(entries)
    platform = active_platform(entries)

    seen: Dict[str, ResolvedDependency] = {}
    for entry in entries:
        if not isinstance(entry, DependencyEntry):
            continue
        coordinate = entry.coordinate
        previous = seen.get(coordinate.key)
        if previous is not None:
            if previous.role != entry.role:
                raise ConflictingRoleError(coordinate, previous.role, entry.role)
            if coordinate.version and coordinate.version != previous.version:
                logger.warning(
                    "Duplicate declaration of %s with version %s ignored; keeping %s",
                    coordinate, coordinate.version, previous.version,
                )
            continue

        version = coordinate.version
        source = "explicit"
        if not version and platform is not None:
            version = platform.lookup(coordinate)
            source = "platform"
        if not version:
            raise UnresolvedVersionError(coordinate)

        if is_debug_enabled(logger):
            logger.debug(
                "Resolved dependency",
                extra=extra_context(
                    event="decision",
                    component="resolver",
                    action="resolve",
                    target=coordinate.key,
                    outcome=source,
                    resolved_version=version,
                )
            )
        seen[coordinate.key] = ResolvedDependency(coordinate=coordinate, version=version, role=entry.role)

    return list(seen.values())
