"""Application subdirectories on top of the XDG base directories.

Config: $XDG_CONFIG_HOME/<name>/ (or ~/.config/<name>/)
Data:   $XDG_DATA_HOME/<name>/   (or ~/.local/share/<name>/)
System: each of $XDG_CONFIG_DIRS / $XDG_DATA_DIRS with /<name> appended
"""
from __future__ import annotations

from pathlib import Path

from xdgbase.environment import Environment
from xdgbase.kinds import DirectoryKind, SystemDirectoryKind
from xdgbase.paths import StrPath, Xdg, _sys_dir_paths


class XdgApp(Xdg):
    """An :class:`Xdg` resolver scoped to one application name."""

    def __init__(self, name: str, env: Environment | None = None) -> None:
        super().__init__(env)
        self._name = name

    @classmethod
    def from_xdg(cls, xdg: Xdg, name: str) -> XdgApp:
        """Scope an existing resolver to *name*, reusing its home and environment."""
        app = cls.__new__(cls)
        app._bind(xdg.env, xdg.home)
        app._name = name
        return app

    def __repr__(self) -> str:
        return f"XdgApp(name={self._name!r}, home={str(self.home)!r})"

    @property
    def name(self) -> str:
        """Return the application name appended to every app_* path."""
        return self._name

    # ------------------------------------------------------------------
    # Directories
    # ------------------------------------------------------------------

    def app_cache(self) -> Path:
        """Return $XDG_CACHE_HOME/<name>, or $HOME/.cache/<name>."""
        return self._dir_path(DirectoryKind.CACHE) / self._name

    def app_config(self) -> Path:
        """Return $XDG_CONFIG_HOME/<name>, or $HOME/.config/<name>."""
        return self._dir_path(DirectoryKind.CONFIG) / self._name

    def app_data(self) -> Path:
        """Return $XDG_DATA_HOME/<name>, or $HOME/.local/share/<name>."""
        return self._dir_path(DirectoryKind.DATA) / self._name

    def app_state(self) -> Path:
        """Return $XDG_STATE_HOME/<name>, or $HOME/.local/state/<name>."""
        return self._dir_path(DirectoryKind.STATE) / self._name

    def app_sys_config(self) -> list[Path]:
        """Return each $XDG_CONFIG_DIRS entry with /<name> appended, in order."""
        return [p / self._name for p in _sys_dir_paths(self.env, SystemDirectoryKind.CONFIG)]

    def app_sys_data(self) -> list[Path]:
        """Return each $XDG_DATA_DIRS entry with /<name> appended, in order."""
        return [p / self._name for p in _sys_dir_paths(self.env, SystemDirectoryKind.DATA)]

    # ------------------------------------------------------------------
    # Files
    # ------------------------------------------------------------------

    def app_cache_file(self, file: StrPath) -> Path:
        """Return <cache>/<name>/<file>; the file need not exist."""
        return self.app_cache() / file

    def app_config_file(self, file: StrPath) -> Path:
        """Return <config>/<name>/<file>; the file need not exist."""
        return self.app_config() / file

    def app_data_file(self, file: StrPath) -> Path:
        """Return <data>/<name>/<file>; the file need not exist."""
        return self.app_data() / file

    def app_state_file(self, file: StrPath) -> Path:
        """Return <state>/<name>/<file>; the file need not exist."""
        return self.app_state() / file

    def search_app_cache_file(self, file: StrPath) -> Path | None:
        """Return <cache>/<name>/<file> if it is an existing file, else None."""
        return self._search(DirectoryKind.CACHE, self._name, file)

    def search_app_config_file(self, file: StrPath) -> Path | None:
        """Search <name>/<file> in $XDG_CONFIG_HOME, then in each of $XDG_CONFIG_DIRS."""
        return self._search(DirectoryKind.CONFIG, self._name, file)

    def search_app_data_file(self, file: StrPath) -> Path | None:
        """Search <name>/<file> in $XDG_DATA_HOME, then in each of $XDG_DATA_DIRS."""
        return self._search(DirectoryKind.DATA, self._name, file)

    def search_app_state_file(self, file: StrPath) -> Path | None:
        """Return <state>/<name>/<file> if it is an existing file, else None."""
        return self._search(DirectoryKind.STATE, self._name, file)
