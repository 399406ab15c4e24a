from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Sequence, TextIO

import structlog
import yaml
from dotenv import load_dotenv

from pecorc.core import config_loader
from pecorc.core.log_setup import LOG_FORMATS, LOG_LEVELS, configure_logging
from pecorc.core.version import get_pecorc_version

logger = structlog.get_logger("pecorc.cli")


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="pecorc",
        description="Locate and load the peco rcfile, then print the effective configuration.",
    )
    parser.add_argument(
        "--rcfile",
        type=Path,
        help="Path to the configuration file (defaults to the XDG search order).",
    )
    parser.add_argument(
        "--format",
        choices=("json", "yaml"),
        default="json",
        help="Output format for the effective configuration.",
    )
    parser.add_argument(
        "--env-file",
        type=Path,
        help="Load environment variables (e.g. XDG_CONFIG_HOME) from this dotenv file before searching.",
    )
    parser.add_argument("--log-level", choices=LOG_LEVELS, default="warning")
    parser.add_argument("--log-format", choices=LOG_FORMATS, default="console")
    parser.add_argument("--version", action="version", version=f"%(prog)s {get_pecorc_version()}")
    return parser.parse_args(argv)


def _dump(data: dict, fmt: str, stream: TextIO) -> None:
    if fmt == "yaml":
        yaml.safe_dump(data, stream, default_flow_style=False, sort_keys=False)
    else:
        json.dump(data, stream, indent=2)
        stream.write("\n")


def main(argv: Sequence[str] | None = None) -> int:
    args = _parse_args(argv)
    configure_logging(args.log_level, args.log_format)

    if args.env_file is not None:
        if not load_dotenv(dotenv_path=str(args.env_file)):
            logger.warning("env-file-not-loaded", path=str(args.env_file))

    try:
        config, source = config_loader.load_config(args.rcfile)
    except config_loader.ConfigError as exc:
        print(exc, file=sys.stderr)
        return 1

    logger.info("config-loaded", source=source or "defaults")
    _dump(config.to_dict(), args.format, sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())
