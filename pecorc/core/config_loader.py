from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Mapping

from .errors import ConfigError, DecodeError, NotFoundError
from .rcfile import locate_rcfile
from .style import (
    ATTR_BOLD,
    ATTR_UNDERLINE,
    COLOR_BLACK,
    COLOR_CYAN,
    COLOR_DEFAULT,
    COLOR_MAGENTA,
    Style,
    strings_to_style,
)

logger = logging.getLogger("pecorc.core.config")

IGNORE_CASE_MATCH = "IgnoreCase"
DEFAULT_PROMPT = "QUERY>"

_MISSING = object()


@dataclass
class StyleSet:
    basic: Style = field(default_factory=lambda: Style(fg=COLOR_DEFAULT, bg=COLOR_DEFAULT))
    saved_selection: Style = field(default_factory=lambda: Style(fg=COLOR_BLACK | ATTR_BOLD, bg=COLOR_CYAN))
    selected: Style = field(default_factory=lambda: Style(fg=COLOR_DEFAULT | ATTR_UNDERLINE, bg=COLOR_MAGENTA))
    query: Style = field(default_factory=lambda: Style(fg=COLOR_DEFAULT, bg=COLOR_DEFAULT))
    matched: Style = field(default_factory=lambda: Style(fg=COLOR_CYAN, bg=COLOR_DEFAULT))

    @classmethod
    def decode(cls, data: Any) -> dict[str, Style]:
        """Decode a ``Style`` section into a partial mapping of slot name to Style.

        Absent slots are left out of the result. A ``null`` slot counts as an
        empty token list and resets the slot to the default colors.
        """
        section = _require_mapping(data, "Style")
        slots: dict[str, Style] = {}
        for key, attr in _STYLE_KEYS.items():
            value = _lookup(section, key, _MISSING)
            if value is _MISSING:
                continue
            tokens = [] if value is None else _string_list(value, f"Style.{key}")
            slots[attr] = strings_to_style(tokens)
        return slots

    def to_dict(self) -> dict[str, dict[str, int]]:
        return {key: getattr(self, attr).to_dict() for key, attr in _STYLE_KEYS.items()}


@dataclass
class Config:
    """Settings consumed by the rest of the application.

    ``keymap`` only records what the user configured, dispatching happens
    elsewhere.
    """

    action: dict[str, list[str]] = field(default_factory=dict)
    keymap: dict[str, str] = field(default_factory=dict)
    matcher: str = IGNORE_CASE_MATCH
    style: StyleSet = field(default_factory=StyleSet)
    custom_matcher: dict[str, list[str]] = field(default_factory=dict)
    prompt: str = DEFAULT_PROMPT

    def read_filename(self, filename: Path | str) -> "Config":
        """Read ``filename`` and merge its contents onto this config.

        The file is fully decoded before any field is written, so a failure
        leaves the instance untouched.
        """

        path = Path(filename)
        try:
            with path.open("r", encoding="utf-8") as fh:
                raw = json.load(fh)
        except OSError as exc:
            raise DecodeError(f"Failed to open configuration file {path}: {exc}") from exc
        except (ValueError, RecursionError) as exc:
            # ValueError covers JSONDecodeError, UnicodeDecodeError and oversized integer literals
            raise DecodeError(f"Failed to parse configuration file {path}: {exc}") from exc

        patch = decode_document(raw)
        merge_config(self, patch)
        logger.debug("Decoded %s (fields: %s)", path, ", ".join(sorted(patch)))
        return self

    def to_dict(self) -> dict[str, Any]:
        return {
            "Action": {name: list(keys) for name, keys in self.action.items()},
            "Keymap": dict(self.keymap),
            "Matcher": self.matcher,
            "Style": self.style.to_dict(),
            "CustomMatcher": {name: list(args) for name, args in self.custom_matcher.items()},
            "Prompt": self.prompt,
        }


_STYLE_KEYS = {
    "Basic": "basic",
    "SavedSelection": "saved_selection",
    "Selected": "selected",
    "Query": "query",
    "Matched": "matched",
}


def decode_document(data: Any) -> dict[str, Any]:
    """Decode a parsed rcfile into a patch of ``Config`` attribute names.

    Only keys present in ``data`` end up in the patch. Unknown keys are
    ignored and ``null`` values count as absent.
    """

    document = _require_mapping(data, "Configuration root")
    patch: dict[str, Any] = {}

    value = _lookup(document, "Action")
    if value is not None:
        patch["action"] = _string_list_map(value, "Action")
    value = _lookup(document, "Keymap")
    if value is not None:
        patch["keymap"] = _string_map(value, "Keymap")
    value = _lookup(document, "Matcher")
    if value is not None:
        patch["matcher"] = _string(value, "Matcher")
    value = _lookup(document, "Style")
    if value is not None:
        patch["style"] = StyleSet.decode(value)
    value = _lookup(document, "CustomMatcher")
    if value is not None:
        patch["custom_matcher"] = _string_list_map(value, "CustomMatcher")
    value = _lookup(document, "Prompt")
    if value is not None:
        patch["prompt"] = _string(value, "Prompt")
    return patch


def merge_config(config: Config, patch: Mapping[str, Any]) -> Config:
    """Apply ``patch`` onto ``config`` in place and return it.

    Top level fields are replaced wholesale, maps are not merged key by key.
    ``style`` is the exception: it carries individual slots, and slots missing
    from the patch keep their current value.
    """

    known = {f.name for f in fields(Config)}
    for name, value in patch.items():
        if name not in known:
            raise ConfigError(f"Unknown configuration field: {name}")
        if name == "style":
            for slot, style in value.items():
                setattr(config.style, slot, style)
        else:
            setattr(config, name, value)
    return config


def load_config(path: Path | str | None = None) -> tuple[Config, str | None]:
    """Build a config from ``path``, or from the located rcfile when omitted.

    Returns the config together with the file it was read from. When no path
    is given and no rcfile exists, the defaults are returned with ``None``.
    """

    config = Config()
    if path is None:
        try:
            path = locate_rcfile()
        except NotFoundError:
            logger.info("No rcfile found, using defaults")
            return config, None
    config.read_filename(path)
    return config, str(path)


def _lookup(data: Mapping[str, Any], key: str, default: Any = None) -> Any:
    # Exact key first, then the first case-insensitive match.
    if key in data:
        return data[key]
    folded = key.casefold()
    for candidate, value in data.items():
        if isinstance(candidate, str) and candidate.casefold() == folded:
            return value
    return default


def _require_mapping(value: Any, name: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise DecodeError(f"{name} must be an object, received {type(value).__name__}")
    return value


def _string(value: Any, name: str) -> str:
    if not isinstance(value, str):
        raise DecodeError(f"{name} must be a string, received {type(value).__name__}")
    return value


def _string_list(value: Any, name: str) -> list[str]:
    if not isinstance(value, list):
        raise DecodeError(f"{name} must be a list of strings, received {type(value).__name__}")
    return [_string(item, f"{name}[{index}]") for index, item in enumerate(value)]


def _string_map(value: Any, name: str) -> dict[str, str]:
    section = _require_mapping(value, name)
    return {key: _string(item, f"{name}.{key}") for key, item in section.items()}


def _string_list_map(value: Any, name: str) -> dict[str, list[str]]:
    section = _require_mapping(value, name)
    return {key: _string_list(item, f"{name}.{key}") for key, item in section.items()}


__all__ = [
    "Config",
    "ConfigError",
    "DecodeError",
    "DEFAULT_PROMPT",
    "IGNORE_CASE_MATCH",
    "NotFoundError",
    "StyleSet",
    "decode_document",
    "load_config",
    "merge_config",
]
