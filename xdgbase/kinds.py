"""Base directory kinds and the constants attached to each of them."""
from __future__ import annotations

from enum import Enum

RUNTIME_ENV_VAR = "XDG_RUNTIME_DIR"
EXEC_SUFFIX = ".local/bin"


class SystemDirectoryKind(Enum):
    """System-wide, preference-ordered directory lists."""

    CONFIG = ("XDG_CONFIG_DIRS", ("/etc/xdg",))
    DATA = ("XDG_DATA_DIRS", ("/usr/local/share", "/usr/share"))

    def __init__(self, env_var: str, fallback: tuple[str, ...]) -> None:
        self.env_var = env_var
        self.fallback = fallback


class DirectoryKind(Enum):
    """User-specific base directories, each with a fallback relative to $HOME."""

    CACHE = ("XDG_CACHE_HOME", ".cache", None)
    CONFIG = ("XDG_CONFIG_HOME", ".config", SystemDirectoryKind.CONFIG)
    DATA = ("XDG_DATA_HOME", ".local/share", SystemDirectoryKind.DATA)
    STATE = ("XDG_STATE_HOME", ".local/state", None)

    def __init__(
        self,
        env_var: str,
        fallback: str,
        system: SystemDirectoryKind | None,
    ) -> None:
        self.env_var = env_var
        self.fallback = fallback
        # Cache and State have no system-wide counterpart to search.
        self.system = system
