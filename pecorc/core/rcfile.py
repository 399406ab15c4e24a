"""Rcfile discovery following the XDG base directory layout.

Search order:

1. ``$XDG_CONFIG_HOME/peco/config.json``, or ``~/.config/peco/config.json``
   when ``XDG_CONFIG_HOME`` is unset or empty
2. ``<dir>/peco/config.json`` for each ``<dir>`` in ``$XDG_CONFIG_DIRS``
3. ``~/.peco/config.json``
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Iterator, Mapping

from .errors import NotFoundError

logger = logging.getLogger("pecorc.core.rcfile")

RCFILE_NAME = "config.json"
APP_DIR = "peco"


def _home_dir() -> Path:
    return Path.home()


def locate_rcfile_in(directory: Path | str) -> str:
    """Return ``<directory>/config.json`` if it is an existing regular file."""
    candidate = Path(directory) / RCFILE_NAME
    if not candidate.is_file():
        raise NotFoundError(f"{candidate} does not exist")
    return str(candidate)


def _candidate_dirs(env: Mapping[str, str]) -> Iterator[Path]:
    try:
        home: Path | None = _home_dir()
    except (RuntimeError, KeyError, OSError) as exc:
        # Unresolvable home only disables the home based candidates.
        logger.debug("Home directory unavailable: %s", exc)
        home = None

    config_home = env.get("XDG_CONFIG_HOME", "")
    if config_home:
        yield Path(config_home) / APP_DIR
    elif home is not None:
        yield home / ".config" / APP_DIR

    config_dirs = env.get("XDG_CONFIG_DIRS", "")
    if config_dirs:
        for entry in config_dirs.split(os.pathsep):
            # Empty entries would resolve against the working directory
            if entry:
                yield Path(entry) / APP_DIR

    if home is not None:
        yield home / f".{APP_DIR}"


def locate_rcfile(env: Mapping[str, str] | None = None) -> str:
    """Return the path of the first rcfile found, or raise NotFoundError."""
    environ = os.environ if env is None else env
    for directory in _candidate_dirs(environ):
        try:
            path = locate_rcfile_in(directory)
        except NotFoundError:
            logger.debug("No rcfile in %s", directory)
            continue
        logger.debug("Found rcfile %s", path)
        return path
    raise NotFoundError("Config file not found")


__all__ = ["APP_DIR", "RCFILE_NAME", "locate_rcfile", "locate_rcfile_in"]
