"""Version information for pecorc."""

import importlib.metadata


def get_pecorc_version() -> str:
    """Return pecorc version."""
    try:
        return importlib.metadata.version("pecorc")
    except importlib.metadata.PackageNotFoundError:
        # Fallback for development/uninstalled package
        return "0.1.0-dev"
