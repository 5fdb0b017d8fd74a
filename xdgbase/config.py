"""Environment profiles: YAML files that pin or unset XDG variables.

A profile is a flat mapping of variable names to values::

    XDG_CONFIG_HOME: /srv/app/config
    XDG_DATA_DIRS: /opt/share:/usr/share
    XDG_CACHE_HOME: null      # force the fallback

Profiles are opt-in: pass ``environment_from_file(path)`` as the ``env`` of a
resolver. Profile problems surface as ValueError, OSError or yaml.YAMLError
when the profile is loaded, never from the resolvers themselves.
"""
from __future__ import annotations

from pathlib import Path

import yaml

from xdgbase._log import get_logger
from xdgbase.environment import Environment, OverlayEnvironment, ProcessEnvironment

logger = get_logger(__name__)


def load_overrides(path: Path) -> dict[str, str | None]:
    """Load a profile file and return its variable overrides.

    Raises ValueError if the document is not a mapping of names to strings or nulls.
    """
    with Path(path).open("r", encoding="utf-8") as fh:
        data = yaml.safe_load(fh)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"Invalid profile {path}: expected a mapping, got {type(data).__name__}")

    overrides: dict[str, str | None] = {}
    for key, value in data.items():
        if not isinstance(key, str) or not key:
            raise ValueError(f"Invalid profile {path}: bad variable name {key!r}")
        if value is not None and not isinstance(value, str):
            raise ValueError(
                f"Invalid profile {path}: value for '{key}' must be a string or null"
            )
        overrides[key] = value
    return overrides


def environment_from_file(
    path: Path,
    base: Environment | None = None,
) -> OverlayEnvironment:
    """Return the profile at *path* layered on *base* (the process environment by default)."""
    overrides = load_overrides(path)
    logger.debug("loaded %d override(s) from %s", len(overrides), path)
    return OverlayEnvironment(base if base is not None else ProcessEnvironment(), overrides)
