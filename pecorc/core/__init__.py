"""Core package exports."""

from .config_loader import (
    Config,
    StyleSet,
    decode_document,
    load_config,
    merge_config,
)
from .errors import ConfigError, DecodeError, NotFoundError
from .rcfile import locate_rcfile
from .style import Style, strings_to_style

__all__ = [
    "Config",
    "ConfigError",
    "DecodeError",
    "NotFoundError",
    "Style",
    "StyleSet",
    "decode_document",
    "load_config",
    "locate_rcfile",
    "merge_config",
    "strings_to_style",
]
