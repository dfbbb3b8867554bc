#!/usr/bin/env python3

from __future__ import annotations

import argparse
import logging
import sys
from signal import SIGINT, SIGTERM, signal
from typing import TYPE_CHECKING

from dotenv import load_dotenv

from service_registration import __build_time__, __version__
from service_registration.app import run_service_registration
from service_registration.config import (
    ConfigurationError,
    configure_logging,
    get_ambari_config,
    get_consul_config,
    get_sync_config,
)

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import FrameType

log = logging.getLogger(__name__)


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="service-registration",
        description="Keep Consul service registrations in sync with the Ambari topology",
    )
    parser.add_argument(
        "command",
        nargs="?",
        help="'version' prints version and build information and exits",
    )
    parser.add_argument(
        "--version",
        action="store_true",
        help="print version and build information and exit",
    )
    args = parser.parse_args(list(argv))
    if args.command is not None and not args.command.endswith("version"):
        parser.error(f"unknown command: {args.command}")
    return args


def version_string() -> str:
    return f"Version: {__version__}-{__build_time__}"


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    args = _parse_args(sys.argv[1:] if argv is None else argv)
    if args.version or args.command is not None:
        print(version_string())  # noqa: T201
        return

    configure_logging()
    try:
        consul = get_consul_config()
        sync = get_sync_config()
        ambari = get_ambari_config()
    except ConfigurationError:
        log.exception("Fatal configuration error")
        sys.exit(1)

    run_service_registration(ambari=ambari, consul=consul, sync=sync)


def shutdown_handler(signal_received: int, _frame: FrameType | None) -> None:
    """Handle SIGINT/SIGTERM gracefully."""
    log.info("Stopped by signal %s", signal_received)
    sys.exit(0)


def cli() -> None:
    load_dotenv()
    signal(SIGINT, shutdown_handler)
    signal(SIGTERM, shutdown_handler)
    main()


if __name__ == "__main__":
    cli()
