"""XDG Base Directory resolution.

User-specific directories (``Xdg.cache()`` and friends):

    Cache:   $XDG_CACHE_HOME   or $HOME/.cache
    Config:  $XDG_CONFIG_HOME  or $HOME/.config
    Data:    $XDG_DATA_HOME    or $HOME/.local/share
    State:   $XDG_STATE_HOME   or $HOME/.local/state
    Runtime: $XDG_RUNTIME_DIR  (no fallback)
    Exec:    $HOME/.local/bin

System-wide, preference-ordered directories (``sys_config()``, ``sys_data()``):

    Config:  $XDG_CONFIG_DIRS  or /etc/xdg
    Data:    $XDG_DATA_DIRS    or /usr/local/share:/usr/share

A variable that is unset or empty selects the fallback. A variable set to a
relative path raises RelativePathError; one that is not valid UTF-8 raises
InvalidUnicodeError. Nothing is cached: every call reads the environment again.
"""
from __future__ import annotations

import os
from pathlib import Path, PurePosixPath
from typing import Union

from xdgbase._log import get_logger
from xdgbase.environment import Environment, ProcessEnvironment, read_var
from xdgbase.errors import HomeNotFoundError, RelativePathError
from xdgbase.kinds import EXEC_SUFFIX, RUNTIME_ENV_VAR, DirectoryKind, SystemDirectoryKind

StrPath = Union[str, os.PathLike]

logger = get_logger(__name__)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _validate_path(env_var: str, value: str) -> Path:
    """Return *value* as a Path, or raise RelativePathError if it is not absolute."""
    if not PurePosixPath(value).is_absolute():
        raise RelativePathError(env_var, value)
    return Path(value)


def _decode_home_var(env: Environment, key: str) -> str | None:
    raw = env.lookup(key)
    if raw is None:
        return None
    if isinstance(raw, bytes):
        try:
            return raw.decode("utf-8")
        except UnicodeDecodeError:
            return None
    return raw


def _find_home(env: Environment) -> Path:
    """Return $HOME verbatim, else /home/$USER.

    HOME is trusted as given: it is not checked for being absolute or non-empty.
    """
    home = _decode_home_var(env, "HOME")
    if home is not None:
        return Path(home)
    user = _decode_home_var(env, "USER")
    if user is not None:
        logger.debug("HOME not set, deriving home from USER=%s", user)
        return Path("/home") / user
    raise HomeNotFoundError()


def _sys_dir_paths(env: Environment, kind: SystemDirectoryKind) -> list[Path]:
    """Return the preference-ordered directories for *kind*, first = most important."""
    value = read_var(env, kind.env_var)
    if value is None:
        logger.debug("%s not set, falling back to %s", kind.env_var, ":".join(kind.fallback))
        return [Path(p) for p in kind.fallback]
    # Stops at the first relative entry; duplicates and order are kept.
    return [_validate_path(kind.env_var, segment) for segment in value.split(":")]


def sys_config(env: Environment | None = None) -> list[Path]:
    """Return the system-wide config directories ($XDG_CONFIG_DIRS or /etc/xdg)."""
    return _sys_dir_paths(env if env is not None else ProcessEnvironment(), SystemDirectoryKind.CONFIG)


def sys_data(env: Environment | None = None) -> list[Path]:
    """Return the system-wide data directories ($XDG_DATA_DIRS or /usr/local/share:/usr/share)."""
    return _sys_dir_paths(env if env is not None else ProcessEnvironment(), SystemDirectoryKind.DATA)


# ---------------------------------------------------------------------------
# Resolver
# ---------------------------------------------------------------------------

class Xdg:
    """Resolve XDG base directories for the user owning the process.

    The home directory is computed once, here; everything else is computed
    fresh on each call from *env* (the process environment by default).

    Raises HomeNotFoundError if neither HOME nor USER is set.
    """

    def __init__(self, env: Environment | None = None) -> None:
        env = env if env is not None else ProcessEnvironment()
        self._bind(env, _find_home(env))

    def _bind(self, env: Environment, home: Path) -> None:
        self._env = env
        self._home = home

    def __repr__(self) -> str:
        return f"{type(self).__name__}(home={str(self._home)!r})"

    @property
    def home(self) -> Path:
        """Return the home directory of the user owning the process."""
        return self._home

    @property
    def env(self) -> Environment:
        """Return the environment provider this resolver reads from."""
        return self._env

    # ------------------------------------------------------------------
    # User-specific directories
    # ------------------------------------------------------------------

    def _dir_path(self, kind: DirectoryKind) -> Path:
        value = read_var(self._env, kind.env_var)
        if value is None:
            return self._home / kind.fallback
        return _validate_path(kind.env_var, value)

    def cache(self) -> Path:
        """Return $XDG_CACHE_HOME, or $HOME/.cache."""
        return self._dir_path(DirectoryKind.CACHE)

    def config(self) -> Path:
        """Return $XDG_CONFIG_HOME, or $HOME/.config."""
        return self._dir_path(DirectoryKind.CONFIG)

    def data(self) -> Path:
        """Return $XDG_DATA_HOME, or $HOME/.local/share."""
        return self._dir_path(DirectoryKind.DATA)

    def state(self) -> Path:
        """Return $XDG_STATE_HOME, or $HOME/.local/state."""
        return self._dir_path(DirectoryKind.STATE)

    def runtime(self) -> Path | None:
        """Return $XDG_RUNTIME_DIR, or None when it is unset or empty."""
        value = read_var(self._env, RUNTIME_ENV_VAR)
        if value is None:
            return None
        return _validate_path(RUNTIME_ENV_VAR, value)

    def exec(self) -> Path:
        """Return $HOME/.local/bin."""
        return self._home / EXEC_SUFFIX

    # ------------------------------------------------------------------
    # System-wide directories
    # ------------------------------------------------------------------

    def sys_config(self) -> list[Path]:
        """Return $XDG_CONFIG_DIRS split on colons, or [/etc/xdg]."""
        return _sys_dir_paths(self._env, SystemDirectoryKind.CONFIG)

    def sys_data(self) -> list[Path]:
        """Return $XDG_DATA_DIRS split on colons, or [/usr/local/share, /usr/share]."""
        return _sys_dir_paths(self._env, SystemDirectoryKind.DATA)

    # ------------------------------------------------------------------
    # File paths (no I/O)
    # ------------------------------------------------------------------

    def cache_file(self, file: StrPath) -> Path:
        """Return <cache>/<file>; the file need not exist."""
        return self.cache() / file

    def config_file(self, file: StrPath) -> Path:
        """Return <config>/<file>; the file need not exist."""
        return self.config() / file

    def data_file(self, file: StrPath) -> Path:
        """Return <data>/<file>; the file need not exist."""
        return self.data() / file

    def state_file(self, file: StrPath) -> Path:
        """Return <state>/<file>; the file need not exist."""
        return self.state() / file

    # ------------------------------------------------------------------
    # Search
    # ------------------------------------------------------------------

    def _search(self, kind: DirectoryKind, *parts: StrPath) -> Path | None:
        """Return the first existing regular file at <dir>/<parts...>.

        The user-specific directory is tried first, then the system-wide
        directories of *kind* (if any) in preference order.
        """
        candidate = self._dir_path(kind).joinpath(*parts)
        if candidate.is_file():
            logger.debug("found %s", candidate)
            return candidate
        if kind.system is None:
            return None
        for base in _sys_dir_paths(self._env, kind.system):
            candidate = base.joinpath(*parts)
            if candidate.is_file():
                logger.debug("found %s", candidate)
                return candidate
        return None

    def search_cache_file(self, file: StrPath) -> Path | None:
        """Return $XDG_CACHE_HOME/<file> if it is an existing file, else None."""
        return self._search(DirectoryKind.CACHE, file)

    def search_config_file(self, file: StrPath) -> Path | None:
        """Search <file> in $XDG_CONFIG_HOME, then in each of $XDG_CONFIG_DIRS."""
        return self._search(DirectoryKind.CONFIG, file)

    def search_data_file(self, file: StrPath) -> Path | None:
        """Search <file> in $XDG_DATA_HOME, then in each of $XDG_DATA_DIRS."""
        return self._search(DirectoryKind.DATA, file)

    def search_state_file(self, file: StrPath) -> Path | None:
        """Return $XDG_STATE_HOME/<file> if it is an existing file, else None."""
        return self._search(DirectoryKind.STATE, file)
