"""Environment providers consulted by the resolvers.

Resolvers never touch ``os.environ`` directly: they ask an :class:`Environment`
for the raw value of a variable. ``ProcessEnvironment`` reads the live process
environment on every lookup, ``MappingEnvironment`` pins a fixed set of values
and ``OverlayEnvironment`` layers overrides on top of another provider.
"""
from __future__ import annotations

import os
from collections.abc import Mapping
from typing import Protocol, Union

from xdgbase.errors import InvalidUnicodeError

RawValue = Union[str, bytes]


class Environment(Protocol):
    def lookup(self, key: str) -> RawValue | None:
        """Return the raw value of *key*, or None when it is not set."""
        ...


class ProcessEnvironment:
    """The live process environment, read as raw bytes where the OS allows it."""

    def lookup(self, key: str) -> RawValue | None:
        if os.supports_bytes_environ:
            return os.environb.get(os.fsencode(key))
        return os.environ.get(key)

    def __repr__(self) -> str:
        return "ProcessEnvironment()"


class MappingEnvironment:
    """A fixed environment backed by a plain mapping of str or bytes values."""

    def __init__(self, mapping: Mapping[str, RawValue] | None = None) -> None:
        self._mapping = dict(mapping or {})

    def lookup(self, key: str) -> RawValue | None:
        return self._mapping.get(key)

    def __repr__(self) -> str:
        return f"MappingEnvironment({self._mapping!r})"


class OverlayEnvironment:
    """*overrides* layered on *base*; a None override hides the base variable."""

    def __init__(
        self,
        base: Environment,
        overrides: Mapping[str, RawValue | None],
    ) -> None:
        self._base = base
        self._overrides = dict(overrides)

    def lookup(self, key: str) -> RawValue | None:
        if key in self._overrides:
            return self._overrides[key]
        return self._base.lookup(key)

    def __repr__(self) -> str:
        return f"OverlayEnvironment({self._base!r}, {self._overrides!r})"


def _raw_bytes(value: str) -> bytes:
    try:
        return value.encode("utf-8", "surrogateescape")
    except UnicodeEncodeError:
        return value.encode("utf-8", "surrogatepass")


def read_var(env: Environment, key: str) -> str | None:
    """Return the decoded value of *key*, or None when unset or empty.

    Raises InvalidUnicodeError when the value is set but is not valid UTF-8.
    """
    raw = env.lookup(key)
    if not raw:
        return None
    if isinstance(raw, bytes):
        try:
            return raw.decode("utf-8")
        except UnicodeDecodeError:
            raise InvalidUnicodeError(key, raw) from None
    try:
        raw.encode("utf-8")
    except UnicodeEncodeError:
        # str values decoded by the OS layer carry undecodable bytes as
        # lone surrogates.
        raise InvalidUnicodeError(key, _raw_bytes(raw)) from None
    return raw
