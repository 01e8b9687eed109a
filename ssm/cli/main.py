#!/usr/bin/env python3

import argparse
import logging
from pathlib import Path

from rich.console import Console
from rich.markup import escape

from ssm import __version__
from ssm.cli.menu import Menu
from ssm.core.connection_service import ConnectionService
from ssm.core.errors import SSHClientNotFound
from ssm.core.paths import default_config_dir

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def build_parser():
    parser = argparse.ArgumentParser(
        prog="ssm",
        description="Store SSH connection profiles and connect to them from a menu.",
    )
    parser.add_argument(
        "--config-dir",
        type=Path,
        default=None,
        help="Directory holding connections.json and defaults.json "
             "(default: $SSM_CONFIG_DIR or ~/.config/ssm)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def setup_logging(verbose=False):
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format=LOG_FORMAT,
    )


def main(argv=None, console=None, read=input):
    args = build_parser().parse_args(argv)
    setup_logging(args.verbose)

    config_dir = args.config_dir or default_config_dir()
    logging.debug(f"Using configuration directory {config_dir}")

    console = console or Console()
    service = ConnectionService.from_config_dir(config_dir)
    try:
        Menu(service, console=console, read=read).run()
    except SSHClientNotFound as e:
        console.print(f"[red]\\[-][/] {escape(str(e))}")
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
