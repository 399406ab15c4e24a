"""Style token resolution.

Turns ordered lists of human readable tokens such as ``["red", "on_black",
"bold"]`` into packed foreground/background attribute pairs understood by a
termbox style rendering layer.

Unrecognized tokens are ignored so that configuration files written for
newer or older vocabularies still load.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import Iterable, Mapping

logger = logging.getLogger("pecorc.core.style")

# Packed attribute values, compatible with termbox.
COLOR_DEFAULT = 0x0000
COLOR_BLACK = 0x0001
COLOR_RED = 0x0002
COLOR_GREEN = 0x0003
COLOR_YELLOW = 0x0004
COLOR_BLUE = 0x0005
COLOR_MAGENTA = 0x0006
COLOR_CYAN = 0x0007
COLOR_WHITE = 0x0008

ATTR_BOLD = 0x0200
ATTR_UNDERLINE = 0x0400
ATTR_REVERSE = 0x0800

_COLORS = {
    "default": COLOR_DEFAULT,
    "black": COLOR_BLACK,
    "red": COLOR_RED,
    "green": COLOR_GREEN,
    "yellow": COLOR_YELLOW,
    "blue": COLOR_BLUE,
    "magenta": COLOR_MAGENTA,
    "cyan": COLOR_CYAN,
    "white": COLOR_WHITE,
}

FG_COLORS: Mapping[str, int] = MappingProxyType(dict(_COLORS))
BG_COLORS: Mapping[str, int] = MappingProxyType({f"on_{name}": value for name, value in _COLORS.items()})
FG_ATTRS: Mapping[str, int] = MappingProxyType(
    {
        "bold": ATTR_BOLD,
        "underline": ATTR_UNDERLINE,
        "blink": ATTR_REVERSE,
    }
)
# "blink" on the background packs the bold bit. Long-standing behaviour that
# existing rcfiles rely on, kept as is.
BG_ATTRS: Mapping[str, int] = MappingProxyType({"blink": ATTR_BOLD})

_KNOWN_TOKENS = frozenset(FG_COLORS) | frozenset(BG_COLORS) | frozenset(FG_ATTRS) | frozenset(BG_ATTRS)


@dataclass(frozen=True)
class Style:
    """A foreground/background attribute pair."""

    fg: int = COLOR_DEFAULT
    bg: int = COLOR_DEFAULT

    def to_dict(self) -> dict[str, int]:
        return {"fg": self.fg, "bg": self.bg}


def strings_to_style(tokens: Iterable[str]) -> Style:
    """Resolve ``tokens`` into a :class:`Style`.

    Base colors are resolved first (the last color per channel wins), then
    emphasis attributes are OR-ed on top so they never clear a color,
    regardless of where they appear in the list.
    """

    raw = list(tokens)
    fg = COLOR_DEFAULT
    bg = COLOR_DEFAULT

    for token in raw:
        if token in FG_COLORS:
            fg = FG_COLORS[token]
        if token in BG_COLORS:
            bg = BG_COLORS[token]

    for token in raw:
        if token in FG_ATTRS:
            fg |= FG_ATTRS[token]
        if token in BG_ATTRS:
            bg |= BG_ATTRS[token]

    unknown = [token for token in raw if token not in _KNOWN_TOKENS]
    if unknown:
        logger.debug("Ignoring unknown style tokens: %s", unknown)

    return Style(fg=fg, bg=bg)


__all__ = [
    "ATTR_BOLD",
    "ATTR_REVERSE",
    "ATTR_UNDERLINE",
    "BG_ATTRS",
    "BG_COLORS",
    "COLOR_BLACK",
    "COLOR_BLUE",
    "COLOR_CYAN",
    "COLOR_DEFAULT",
    "COLOR_GREEN",
    "COLOR_MAGENTA",
    "COLOR_RED",
    "COLOR_WHITE",
    "COLOR_YELLOW",
    "FG_ATTRS",
    "FG_COLORS",
    "Style",
    "strings_to_style",
]
