"""CLI entry point for the BookBridge server."""

from __future__ import annotations

import argparse
import os
import sys
from pathlib import Path

from bookbridge import __version__


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bookbridge",
        description="BookBridge — One book-search API over Aladin, Kakao, and Naver",
    )
    parser.add_argument(
        "--config",
        "-c",
        type=str,
        default=None,
        help="Path to YAML configuration file",
    )
    parser.add_argument(
        "--host",
        type=str,
        default=None,
        help="Server bind address (overrides config)",
    )
    parser.add_argument(
        "--port",
        "-p",
        type=int,
        default=None,
        help="Server port (overrides config)",
    )
    parser.add_argument(
        "--workers",
        "-w",
        type=int,
        default=None,
        help="Number of worker processes",
    )
    parser.add_argument(
        "--reload",
        action="store_true",
        help="Enable auto-reload for development",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        choices=["debug", "info", "warning", "error"],
        default=None,
        help="Log level (overrides config)",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"BookBridge {__version__}",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """Main CLI entry point for the BookBridge server."""
    args = build_parser().parse_args(argv)

    from bookbridge.config.settings import CONFIG_FILE_ENV, Settings
    from bookbridge.observability.logging import setup_logging

    if args.config:
        config_path = Path(args.config)
        if not config_path.exists():
            print(f"Error: Config file not found: {config_path}", file=sys.stderr)
            sys.exit(1)
        settings = Settings.from_yaml(config_path)
    else:
        settings = Settings()

    if args.host:
        settings.server.host = args.host
    if args.port:
        settings.server.port = args.port
    if args.workers:
        settings.server.workers = args.workers
    if args.log_level:
        settings.observability.log_level = args.log_level

    setup_logging(settings.observability)

    import uvicorn

    from bookbridge.api.app import create_app

    if args.reload or settings.server.workers > 1:
        # Reload and multi-worker modes build the app in a fresh process from the environment.
        if args.config:
            os.environ[CONFIG_FILE_ENV] = str(Path(args.config).resolve())
        overrides = {
            "BOOKBRIDGE_SERVER__HOST": args.host,
            "BOOKBRIDGE_SERVER__PORT": args.port,
            "BOOKBRIDGE_OBSERVABILITY__LOG_LEVEL": args.log_level,
        }
        os.environ.update({name: str(value) for name, value in overrides.items() if value})
        uvicorn.run(
            "bookbridge.api.app:create_app",
            factory=True,
            host=settings.server.host,
            port=settings.server.port,
            workers=settings.server.workers if not args.reload else 1,
            reload=args.reload,
            log_level=settings.observability.log_level,
        )
    else:
        uvicorn.run(
            create_app(settings),
            host=settings.server.host,
            port=settings.server.port,
            log_level=settings.observability.log_level,
        )


if __name__ == "__main__":
    main()
