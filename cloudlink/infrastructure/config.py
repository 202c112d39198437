"""
Configuration Module

Architectural Intent:
- Centralized configuration loading from JSON files
- Provides typed access to CloudLink settings
- Falls back to defaults when the config file is absent
- Environment variables override file-based config

Design Decisions:
- Config is a frozen dataclass for immutability after load
- Nested config sections map to sub-dataclasses
- Only the composition root reads configuration; the dispatch engine never does
"""

from __future__ import annotations
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional
import dataclasses
import json
import logging
import os

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class OpenStackConfig:
    """Remote API connection settings."""
    auth_url: str = ""
    username: str = ""
    password: str = ""
    project: str = ""
    domain: str = "Default"
    region: str = "RegionOne"


@dataclass(frozen=True)
class TelemetryConfig:
    """OpenTelemetry configuration."""
    endpoint: str = ""
    insecure: bool = False
    service_name: str = "cloudlink"


@dataclass(frozen=True)
class BusConfig:
    """In-process message bus configuration."""
    dead_letter: bool = True


@dataclass(frozen=True)
class CloudLinkConfig:
    """Root configuration for CloudLink."""
    openstack: OpenStackConfig = field(default_factory=OpenStackConfig)
    telemetry: TelemetryConfig = field(default_factory=TelemetryConfig)
    bus: BusConfig = field(default_factory=BusConfig)
    log_level: str = "WARNING"


def _env_override(data: dict, prefix: str = "CLOUDLINK") -> dict:
    """Override config values with environment variables.

    Environment variables follow the pattern CLOUDLINK_SECTION_KEY.
    For example: CLOUDLINK_OPENSTACK_REGION=RegionTwo, CLOUDLINK_LOG_LEVEL=DEBUG
    """
    sections = {f.name for f in dataclasses.fields(CloudLinkConfig)}
    for key, value in os.environ.items():
        if not key.startswith(f"{prefix}_"):
            continue
        name = key[len(prefix) + 1:].lower()
        section, _, field_name = name.partition("_")
        if section in sections and field_name:
            data.setdefault(section, {})[field_name] = value
        else:
            data[name] = value
    return data


def _parse_config_file(path: Path) -> dict:
    """Parse a JSON config file. Returns empty dict on failure."""
    try:
        with open(path) as f:
            return json.load(f)
    except FileNotFoundError:
        logger.debug("Config file not found: %s", path)
        return {}
    except json.JSONDecodeError as e:
        logger.warning("Invalid config file %s: %s", path, e)
        return {}


def _build_sub_config(cls, data: dict):
    """Build a sub-config dataclass from a dict, ignoring unknown keys."""
    valid_fields = {f.name for f in dataclasses.fields(cls)}
    filtered = {k: v for k, v in data.items() if k in valid_fields}

    # Convert string numbers/flags from the environment to int/bool
    for f in dataclasses.fields(cls):
        if f.name in filtered and isinstance(filtered[f.name], str):
            if f.type == "int":
                filtered[f.name] = int(filtered[f.name])
            elif f.type == "bool":
                filtered[f.name] = filtered[f.name].lower() in ("true", "1", "yes")

    return cls(**filtered)


def load_config(
    path: Optional[str] = None,
    env_prefix: str = "CLOUDLINK",
) -> CloudLinkConfig:
    """Load configuration from file and environment variables.

    Priority (highest to lowest):
    1. Environment variables (CLOUDLINK_SECTION_KEY)
    2. Config file values
    3. Defaults

    Args:
        path: Path to config file (JSON). Defaults to cloudlink.json in CWD.
        env_prefix: Environment variable prefix. Defaults to CLOUDLINK.
    """
    config_path = Path(path) if path else Path("cloudlink.json")
    data = _parse_config_file(config_path)
    data = _env_override(data, env_prefix)

    return CloudLinkConfig(
        openstack=_build_sub_config(OpenStackConfig, data.get("openstack", {})),
        telemetry=_build_sub_config(TelemetryConfig, data.get("telemetry", {})),
        bus=_build_sub_config(BusConfig, data.get("bus", {})),
        log_level=data.get("log_level", "WARNING"),
    )
