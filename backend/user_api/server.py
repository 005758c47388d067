"""Command-line entry point — runs the User API under uvicorn."""

from __future__ import annotations

import argparse
import logging
from typing import Sequence

from user_api.config import get_settings

logger = logging.getLogger("user_api.server")


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    settings = get_settings()
    parser = argparse.ArgumentParser(description="User records HTTP API")
    parser.add_argument(
        "--host", default=settings.host, help="Bind address (default: HOST or 0.0.0.0)",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=settings.port,
        help="Listen port (default: PORT or 3000)",
    )
    parser.add_argument(
        "--reload",
        action="store_true",
        help="Restart on code changes (development only)",
    )
    return parser.parse_args(argv)


def run(argv: Sequence[str] | None = None) -> None:
    import uvicorn

    args = _parse_args(argv)
    settings = get_settings()
    logger.info("Starting User API on http://%s:%s", args.host, args.port)
    uvicorn.run(
        "user_api.main:app",
        host=args.host,
        port=args.port,
        reload=args.reload,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()
