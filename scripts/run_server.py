"""Utility script to serve the application with uvicorn."""

from __future__ import annotations

import argparse

import uvicorn
from pydantic import ValidationError

from micfx.config import get_settings


def parse_args() -> argparse.Namespace:
    """Parse command line arguments for the development server."""

    parser = argparse.ArgumentParser(
        description="Serve the MicFx starter application.",
    )
    parser.add_argument(
        "--host",
        default="127.0.0.1",
        help="Interface to bind (default: 127.0.0.1)",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=8000,
        help="Port to listen on (default: 8000)",
    )
    parser.add_argument(
        "--reload",
        action="store_true",
        help="Restart the server when source files change.",
    )
    return parser.parse_args()


def main() -> None:
    """Validate the configuration and start uvicorn."""

    args = parse_args()

    try:
        settings = get_settings()
    except ValidationError as exc:
        raise SystemExit(f"Invalid configuration: {exc}") from exc

    uvicorn.run(
        "main:app",
        host=args.host,
        port=args.port,
        reload=args.reload,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
