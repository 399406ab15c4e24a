from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Callable, Iterable

import pytest

from pecorc.core import rcfile


@pytest.fixture
def config_env(monkeypatch: pytest.MonkeyPatch) -> Callable[..., None]:
    def apply(**env: Any) -> None:
        for key, value in env.items():
            if value is None:
                monkeypatch.delenv(key, raising=False)
            else:
                monkeypatch.setenv(key, str(value))

    return apply


@pytest.fixture
def fake_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch, config_env: Callable[..., None]) -> Path:
    """Point home resolution at an empty directory and clear the XDG variables."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setattr(rcfile, "_home_dir", lambda: home)
    config_env(XDG_CONFIG_HOME=None, XDG_CONFIG_DIRS=None)
    return home


@pytest.fixture
def no_home(monkeypatch: pytest.MonkeyPatch, config_env: Callable[..., None]) -> None:
    def _fail() -> Path:
        raise RuntimeError("Could not determine home directory.")

    monkeypatch.setattr(rcfile, "_home_dir", _fail)
    config_env(XDG_CONFIG_HOME=None, XDG_CONFIG_DIRS=None)


@pytest.fixture
def write_rcfile() -> Callable[..., Path]:
    def write(directory: Path, content: Any = None, *, raw: str | None = None) -> Path:
        directory.mkdir(parents=True, exist_ok=True)
        path = directory / "config.json"
        if raw is not None:
            path.write_text(raw, encoding="utf-8")
        else:
            path.write_text(json.dumps(content if content is not None else {}), encoding="utf-8")
        return path

    return write


@pytest.fixture
def reset_structlog() -> Iterable[None]:
    import structlog

    structlog.reset_defaults()
    yield
    structlog.reset_defaults()
