"""YAML configuration loading.

Recognized keys:
  platforms:       BOM coordinate -> {key: version} table
  configurations:  Gradle configuration name -> role value (merged over defaults)

A missing or malformed file never breaks the CLI: a warning is logged and
defaults are used.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

import yaml

from constants import Constants
from manifest.models import Role

logger = logging.getLogger(__name__)

_ROLE_VALUES = {r.value for r in Role}


@dataclass
class ResolverConfig:
    """Runtime configuration for manifest loading."""
    platforms: Dict[str, Dict[str, str]] = field(default_factory=dict)
    configurations: Dict[str, str] = field(
        default_factory=lambda: dict(Constants.DEFAULT_CONFIGURATION_ROLES)
    )


def config_from_dict(data: Any) -> ResolverConfig:
    """Build a ResolverConfig from a parsed YAML mapping, skipping invalid items."""
    cfg = ResolverConfig()
    if not isinstance(data, dict):
        return cfg

    platforms = data.get("platforms") or {}
    if isinstance(platforms, dict):
        for coord, table in platforms.items():
            if not isinstance(table, dict):
                logger.warning("Ignoring platform %s: version table must be a mapping", coord)
                continue
            versions = {}
            for key, version in table.items():
                # unquoted YAML versions such as 5.10 arrive as floats and have lost digits
                if not isinstance(version, str):
                    logger.warning(
                        "Ignoring version %r for %s in platform %s: versions must be quoted strings",
                        version, key, coord,
                    )
                    continue
                versions[str(key)] = version
            cfg.platforms[str(coord)] = versions

    configurations = data.get("configurations") or {}
    if isinstance(configurations, dict):
        for name, role in configurations.items():
            if role not in _ROLE_VALUES:
                logger.warning("Ignoring configuration %s: unknown role %r", name, role)
                continue
            cfg.configurations[str(name)] = role
    return cfg


def load_config(path: Optional[str] = None) -> ResolverConfig:
    """Load configuration from path, or DEPRESOLVE_CONFIG when path is None."""
    path = path or os.environ.get(Constants.ENV_CONFIG)
    if not path:
        return ResolverConfig()
    if not os.path.isfile(path):
        logger.warning("Config file not found: %s", path)
        return ResolverConfig()
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        logger.warning("Failed to load config %s: %s", path, e)
        return ResolverConfig()
    logger.info("Loaded config from: %s", path)
    return config_from_dict(data)
