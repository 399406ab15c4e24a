from __future__ import annotations

import os
from pathlib import Path
from typing import Callable

import pytest

from pecorc.core.errors import NotFoundError
from pecorc.core.rcfile import locate_rcfile, locate_rcfile_in


def test_xdg_config_home_wins(
    tmp_path: Path, fake_home: Path, config_env: Callable[..., None], write_rcfile: Callable[..., Path]
) -> None:
    xdg_home = tmp_path / "a"
    expected = write_rcfile(xdg_home / "peco")
    other = tmp_path / "other"
    write_rcfile(other / "peco")
    write_rcfile(fake_home / ".peco")
    config_env(XDG_CONFIG_HOME=xdg_home, XDG_CONFIG_DIRS=other)
    assert locate_rcfile() == str(expected)


def test_not_found_without_env_or_home_file(fake_home: Path) -> None:
    with pytest.raises(NotFoundError, match="Config file not found"):
        locate_rcfile()


def test_default_config_home_when_xdg_unset(fake_home: Path, write_rcfile: Callable[..., Path]) -> None:
    expected = write_rcfile(fake_home / ".config" / "peco")
    write_rcfile(fake_home / ".peco")
    assert locate_rcfile() == str(expected)


def test_empty_xdg_config_home_counts_as_unset(
    fake_home: Path, config_env: Callable[..., None], write_rcfile: Callable[..., Path]
) -> None:
    expected = write_rcfile(fake_home / ".config" / "peco")
    config_env(XDG_CONFIG_HOME="")
    assert locate_rcfile() == str(expected)


def test_xdg_config_home_skips_default_config_home(
    tmp_path: Path, fake_home: Path, config_env: Callable[..., None], write_rcfile: Callable[..., Path]
) -> None:
    # Only one of $XDG_CONFIG_HOME and ~/.config is consulted
    write_rcfile(fake_home / ".config" / "peco")
    legacy = write_rcfile(fake_home / ".peco")
    config_env(XDG_CONFIG_HOME=tmp_path / "empty")
    assert locate_rcfile() == str(legacy)


def test_xdg_config_dirs_in_order(
    tmp_path: Path, fake_home: Path, config_env: Callable[..., None], write_rcfile: Callable[..., Path]
) -> None:
    first, second, third = tmp_path / "first", tmp_path / "second", tmp_path / "third"
    expected = write_rcfile(second / "peco")
    write_rcfile(third / "peco")
    write_rcfile(fake_home / ".peco")
    config_env(XDG_CONFIG_DIRS=os.pathsep.join([str(first), "", str(second), str(third)]))
    assert locate_rcfile() == str(expected)


def test_legacy_home_directory(fake_home: Path, write_rcfile: Callable[..., Path]) -> None:
    expected = write_rcfile(fake_home / ".peco")
    assert locate_rcfile() == str(expected)


def test_directory_named_like_rcfile_is_skipped(fake_home: Path, write_rcfile: Callable[..., Path]) -> None:
    (fake_home / ".config" / "peco" / "config.json").mkdir(parents=True)
    expected = write_rcfile(fake_home / ".peco")
    assert locate_rcfile() == str(expected)


def test_unresolvable_home_is_not_fatal(
    no_home: None, tmp_path: Path, config_env: Callable[..., None], write_rcfile: Callable[..., Path]
) -> None:
    expected = write_rcfile(tmp_path / "etc" / "xdg" / "peco")
    config_env(XDG_CONFIG_DIRS=tmp_path / "etc" / "xdg")
    assert locate_rcfile() == str(expected)


def test_unresolvable_home_and_nothing_else(no_home: None) -> None:
    with pytest.raises(NotFoundError):
        locate_rcfile()


def test_explicit_environment_mapping(tmp_path: Path, fake_home: Path, write_rcfile: Callable[..., Path]) -> None:
    expected = write_rcfile(tmp_path / "xdg" / "peco")
    assert locate_rcfile({"XDG_CONFIG_HOME": str(tmp_path / "xdg")}) == str(expected)


def test_locate_rcfile_in(tmp_path: Path, write_rcfile: Callable[..., Path]) -> None:
    with pytest.raises(NotFoundError):
        locate_rcfile_in(tmp_path)
    expected = write_rcfile(tmp_path)
    assert locate_rcfile_in(tmp_path) == str(expected)


def test_locator_shares_error_types_with_loader() -> None:
    from pecorc.core import config_loader, errors, rcfile

    assert rcfile.NotFoundError is errors.NotFoundError
    assert config_loader.NotFoundError is errors.NotFoundError
    assert issubclass(errors.NotFoundError, errors.ConfigError)
