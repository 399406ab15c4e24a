"""Configuration error hierarchy."""


class ConfigError(Exception):
    """Raised when configuration loading fails."""


class DecodeError(ConfigError):
    """Raised when the rcfile cannot be opened or does not have the expected shape."""


class NotFoundError(ConfigError):
    """Raised when no rcfile exists in any searched location."""


__all__ = ["ConfigError", "DecodeError", "NotFoundError"]
