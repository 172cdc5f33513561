#!/usr/bin/env python3
"""
Dockerized Service CLI - run the server or check its port

Usage:
    python -m dockerized_service.cli                  # Start the server
    python -m dockerized_service.cli serve --port 8080
    python -m dockerized_service.cli check-port       # Exit 1 if PORT is taken
"""

import argparse
import dataclasses
import logging
import sys
from typing import Optional

import uvicorn

from .application import create_app
from .check_port import check_port
from .core import Settings, parse_log_level, setup_logging

logger = logging.getLogger(__name__)


def serve(settings: Settings) -> None:
    """Start uvicorn, exiting with status 1 if the port is already taken."""
    if not check_port(settings.host, settings.port):
        logger.error(
            f"Port {settings.port} is already in use. "
            f"Please stop the other process or use a different port."
        )
        sys.exit(1)

    uvicorn.run(
        create_app(settings),
        host=settings.host,
        port=settings.port,
        log_level=parse_log_level(settings.log_level).lower(),
        http='h11',   # HTTP/1.1 only
        ws='none',    # No WebSocket support
    )


def cmd_check_port(settings: Settings) -> int:
    """Report whether the configured port is free"""
    if check_port(settings.host, settings.port):
        print(f"Port {settings.port} is available.")
        return 0
    print(f"[ERROR] Port {settings.port} is already in use!")
    print("Please stop the existing process or change PORT in your .env file.")
    return 1


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="dockerized-service",
        description="Dockerized Service - greeting, health and Basic-auth secret endpoints",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  dockerized-service                    Start the server on $PORT (default 3000)
  dockerized-service serve --port 8080  Start the server on port 8080
  dockerized-service check-port         Check whether $PORT is free
        """
    )
    parser.add_argument(
        "command",
        nargs="?",
        default="serve",
        choices=["serve", "check-port"],
        help="Command to run (default: serve)"
    )
    parser.add_argument("--host", help="Bind address (overrides HOST)")
    parser.add_argument("--port", type=int, help="Listen port (overrides PORT)")
    return parser


def main(argv: Optional[list] = None) -> int:
    args = build_parser().parse_args(argv)

    settings = Settings.from_env()
    overrides = {}
    if args.host:
        overrides["host"] = args.host
    if args.port is not None:
        overrides["port"] = args.port
    if overrides:
        settings = dataclasses.replace(settings, **overrides)

    setup_logging(settings.log_level)

    if args.command == "check-port":
        return cmd_check_port(settings)

    serve(settings)
    return 0


if __name__ == "__main__":
    sys.exit(main())
