"""CLI entry point for the Historify server."""

from __future__ import annotations

import argparse
import socket
import sys
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from historify.config.settings import Settings


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="historify",
        description="Historify: search server for digitized historical documents",
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
        "--documents",
        "-d",
        type=str,
        default=None,
        help="JSON file of documents to serve (overrides config)",
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
        version=f"Historify {_get_version()}",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """Main CLI entry point for the Historify server."""
    args = build_parser().parse_args(argv)

    from historify.config.settings import Settings
    from historify.observability.logging import setup_logging

    if args.config:
        config_path = Path(args.config)
        if not config_path.exists():
            print(f"Error: Config file not found: {config_path}", file=sys.stderr)
            sys.exit(1)
        settings = Settings.from_yaml(config_path)
    else:
        settings = Settings()

    # Apply CLI overrides
    if args.host:
        settings.server.host = args.host
    if args.port:
        settings.server.port = args.port
    if args.workers:
        settings.server.workers = args.workers
    if args.log_level:
        settings.observability.log_level = args.log_level
    if args.documents:
        documents_path = Path(args.documents)
        if not documents_path.exists():
            print(f"Error: Document file not found: {documents_path}", file=sys.stderr)
            sys.exit(1)
        settings.documents.path = documents_path

    setup_logging(settings.observability)

    if not _port_available(settings.server.host, settings.server.port):
        print(f"Error: Port {settings.server.port} is already in use", file=sys.stderr)
        sys.exit(1)

    import uvicorn

    from historify.api.app import create_app

    if args.reload or settings.server.workers > 1:
        # Reload and multi-worker modes need an import string; the factory
        # reads the overrides back from the environment.
        _export_settings(settings)
        uvicorn.run(
            "historify.api.app:create_app",
            factory=True,
            host=settings.server.host,
            port=settings.server.port,
            workers=1 if args.reload else settings.server.workers,
            reload=args.reload,
            log_level=settings.observability.log_level.lower(),
        )
    else:
        uvicorn.run(
            create_app(settings),
            host=settings.server.host,
            port=settings.server.port,
            log_level=settings.observability.log_level.lower(),
        )


def _export_settings(settings: Settings) -> None:
    """Expose CLI overrides to worker processes through HISTORIFY_ env vars."""
    import os

    os.environ["HISTORIFY_SERVER__HOST"] = settings.server.host
    os.environ["HISTORIFY_SERVER__PORT"] = str(settings.server.port)
    os.environ["HISTORIFY_OBSERVABILITY__LOG_LEVEL"] = settings.observability.log_level
    if settings.documents.path is not None:
        os.environ["HISTORIFY_DOCUMENTS__PATH"] = str(settings.documents.path)


def _port_available(host: str, port: int) -> bool:
    """Check whether the server port can be bound."""
    sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    try:
        sock.bind((host if host != "0.0.0.0" else "127.0.0.1", port))
    except OSError:
        return False
    finally:
        sock.close()
    return True


def _get_version() -> str:
    """Get the package version."""
    try:
        from historify import __version__

        return __version__
    except ImportError:
        return "unknown"


if __name__ == "__main__":
    main()
