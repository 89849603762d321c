"""
scripts/run_server.py — CLI entry point for the API server.

Usage:
    python scripts/run_server.py
    python scripts/run_server.py --port 8080 --reload
    PORT=4000 python scripts/run_server.py
"""
from __future__ import annotations

import argparse
import os
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

import structlog
import uvicorn

from clinic_api.config import get_settings
from clinic_api.logging_config import configure_logging

logger = structlog.get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    settings = get_settings()
    parser = argparse.ArgumentParser(description="Serve the clinic records API.")
    parser.add_argument("--host", type=str, default=settings.host, help="Interface to bind.")
    parser.add_argument(
        "--port",
        type=int,
        default=settings.port,
        help="Port to listen on (defaults to $PORT, then 3000).",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=settings.log_level,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )
    parser.add_argument("--reload", action="store_true", help="Restart on code changes.")
    return parser


def main(argv: list[str] | None = None) -> None:
    args = build_parser().parse_args(argv)

    # The app reads its own settings on import; make the flags win there too.
    os.environ["HOST"] = args.host
    os.environ["PORT"] = str(args.port)
    os.environ["LOG_LEVEL"] = args.log_level
    get_settings.cache_clear()
    configure_logging(args.log_level, json=get_settings().log_json)

    logger.info("serving", host=args.host, port=args.port, reload=args.reload)
    uvicorn.run(
        "clinic_api.api.main:app",
        host=args.host,
        port=args.port,
        reload=args.reload,
        log_level=args.log_level.lower(),
        log_config=None,
    )


if __name__ == "__main__":
    main()
