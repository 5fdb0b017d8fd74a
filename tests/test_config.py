"""Tests for YAML environment profiles."""
from pathlib import Path

import pytest
import yaml


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _write_yaml(path: Path, data) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8") as f:
        yaml.dump(data, f)


def _base():
    from xdgbase.environment import MappingEnvironment
    return MappingEnvironment({
        "HOME": "/home/alice",
        "XDG_CACHE_HOME": "/tmp/cache",
    })


# ---------------------------------------------------------------------------
# load_overrides
# ---------------------------------------------------------------------------

def test_load_overrides(tmp_path):
    profile = tmp_path / "profile.yaml"
    _write_yaml(profile, {"XDG_CONFIG_HOME": "/srv/config", "XDG_CACHE_HOME": None})

    from xdgbase.config import load_overrides
    assert load_overrides(profile) == {"XDG_CONFIG_HOME": "/srv/config", "XDG_CACHE_HOME": None}


def test_load_overrides_empty_file(tmp_path):
    profile = tmp_path / "empty.yaml"
    profile.write_text("", encoding="utf-8")

    from xdgbase.config import load_overrides
    assert load_overrides(profile) == {}


def test_load_overrides_rejects_list(tmp_path):
    profile = tmp_path / "list.yaml"
    _write_yaml(profile, ["XDG_CONFIG_HOME"])

    from xdgbase.config import load_overrides
    with pytest.raises(ValueError, match="expected a mapping"):
        load_overrides(profile)


def test_load_overrides_rejects_non_string_value(tmp_path):
    profile = tmp_path / "bad.yaml"
    _write_yaml(profile, {"XDG_DATA_DIRS": ["/a", "/b"]})

    from xdgbase.config import load_overrides
    with pytest.raises(ValueError, match="XDG_DATA_DIRS"):
        load_overrides(profile)


def test_load_overrides_rejects_non_string_key(tmp_path):
    profile = tmp_path / "bad.yaml"
    profile.write_text("42: /srv\n", encoding="utf-8")

    from xdgbase.config import load_overrides
    with pytest.raises(ValueError, match="bad variable name"):
        load_overrides(profile)


# ---------------------------------------------------------------------------
# environment_from_file
# ---------------------------------------------------------------------------

def test_profile_overlays_base(tmp_path):
    profile = tmp_path / "profile.yaml"
    _write_yaml(profile, {"XDG_CONFIG_HOME": "/srv/config", "XDG_CACHE_HOME": None})

    from xdgbase.config import environment_from_file
    from xdgbase.paths import Xdg
    xdg = Xdg(environment_from_file(profile, base=_base()))

    assert xdg.config() == Path("/srv/config")
    # null in the profile masks the base value
    assert xdg.cache() == Path("/home/alice/.cache")
    assert xdg.home == Path("/home/alice")


def test_profile_can_supply_home(tmp_path):
    profile = tmp_path / "profile.yaml"
    _write_yaml(profile, {"HOME": "/home/carol"})

    from xdgbase.config import environment_from_file
    from xdgbase.environment import MappingEnvironment
    from xdgbase.paths import Xdg
    xdg = Xdg(environment_from_file(profile, base=MappingEnvironment()))
    assert xdg.data() == Path("/home/carol/.local/share")


# ---------------------------------------------------------------------------
# Opt-in only
# ---------------------------------------------------------------------------

def test_profile_passed_as_env(tmp_path, monkeypatch):
    profile = tmp_path / "profile.yaml"
    _write_yaml(profile, {"XDG_STATE_HOME": "/var/lib/state"})
    monkeypatch.setenv("HOME", str(tmp_path))

    from xdgbase.app import XdgApp
    from xdgbase.config import environment_from_file
    app = XdgApp("myapp", environment_from_file(profile))
    assert app.app_state() == Path("/var/lib/state/myapp")
    assert app.home == tmp_path


def test_bad_profile_fails_at_load(tmp_path):
    profile = tmp_path / "list.yaml"
    _write_yaml(profile, ["XDG_CONFIG_HOME"])

    from xdgbase.config import environment_from_file
    with pytest.raises(ValueError, match="expected a mapping"):
        environment_from_file(profile)


def test_resolvers_ignore_profile_variable(tmp_path, monkeypatch):
    profile = tmp_path / "list.yaml"
    _write_yaml(profile, ["XDG_CONFIG_HOME"])
    monkeypatch.setenv("XDGBASE_PROFILE", str(profile))
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.delenv("XDG_CONFIG_HOME", raising=False)
    monkeypatch.delenv("XDG_DATA_DIRS", raising=False)

    from xdgbase.paths import Xdg, sys_data
    assert Xdg().config() == tmp_path / ".config"
    assert sys_data() == [Path("/usr/local/share"), Path("/usr/share")]
