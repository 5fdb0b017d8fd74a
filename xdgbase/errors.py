"""Exceptions raised while resolving XDG base directories.

Three kinds, all derived from :class:`XdgError`:
  1. HomeNotFoundError     neither HOME nor USER is set
  2. RelativePathError     an XDG variable holds a relative path
  3. InvalidUnicodeError   an XDG variable holds bytes that are not valid UTF-8
"""
from __future__ import annotations


class XdgError(Exception):
    """Base class for every resolution failure."""

    def _key(self) -> tuple:
        return ()

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash((type(self), self._key()))


class HomeNotFoundError(XdgError):
    def __init__(self) -> None:
        super().__init__(
            "unable to locate user's home directory, "
            "neither HOME or USER environment variables set"
        )


class RelativePathError(XdgError):
    """An XDG environment variable contains a relative path."""

    def __init__(self, env_var: str, path: str) -> None:
        self.env_var = env_var
        self.path = path
        super().__init__(
            f"environment variable '{env_var}' contains a relative path '{path}'"
        )

    def _key(self) -> tuple:
        return (self.env_var, self.path)


class InvalidUnicodeError(XdgError):
    """An XDG environment variable is set to bytes that do not decode as UTF-8."""

    def __init__(self, env_var: str, value: bytes) -> None:
        self.env_var = env_var
        self.value = value
        super().__init__(
            f"environment variable '{env_var}' set to invalid unicode value {value!r}"
        )

    def _key(self) -> tuple:
        return (self.env_var, self.value)
