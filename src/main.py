# src/main.py - v2
"""CLI entry point: serve, annotate, fingerprint commands.

Usage:
    redflags serve [--host HOST] [--port PORT]
    redflags annotate <file.html>
    redflags fingerprint <file.html>
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from pathlib import Path

from redflags.version import __version__

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    if not hasattr(args, "func"):
        parser.print_help()
        return 1

    try:
        return args.func(args)
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        return 130
    except Exception as exc:
        logger.error("Fatal error: %s", exc, exc_info=args.verbose)
        return 1


def run() -> None:
    """Console-script wrapper."""
    sys.exit(main())


def _build_parser() -> argparse.ArgumentParser:
    """Build CLI argument parser."""
    parser = argparse.ArgumentParser(
        prog="redflags",
        description=f"redflags v{__version__}: highlight red and green flags in job postings",
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true",
        help="Enable debug logging",
    )

    subparsers = parser.add_subparsers(dest="command")

    # --- serve ---
    p_serve = subparsers.add_parser("serve", help="Run the HTTP service")
    p_serve.add_argument("--host", default=None, help="Bind address (default: HOST)")
    p_serve.add_argument("--port", type=int, default=None, help="Bind port (default: PORT)")
    p_serve.set_defaults(func=_cmd_serve)

    # --- annotate ---
    p_annotate = subparsers.add_parser(
        "annotate", help="Annotate a job-posting HTML file and print the result",
    )
    p_annotate.add_argument("file", type=Path, help="Path to HTML file")
    p_annotate.set_defaults(func=_cmd_annotate)

    # --- fingerprint ---
    p_fp = subparsers.add_parser(
        "fingerprint", help="Print the cache fingerprint of an HTML file",
    )
    p_fp.add_argument("file", type=Path, help="Path to HTML file")
    p_fp.set_defaults(func=_cmd_fingerprint)

    return parser


def _cmd_serve(args: argparse.Namespace) -> int:
    """Start uvicorn with the configured application."""
    import uvicorn

    from redflags.api.app import create_app
    from redflags.config.settings import load_settings

    settings = load_settings()
    _setup_logging(settings, args.verbose)
    app = create_app(settings)

    host = args.host or settings.host
    port = args.port or settings.port
    logger.info("Serving on %s:%d", host, port)
    uvicorn.run(app, host=host, port=port, log_config=None)
    return 0


def _cmd_annotate(args: argparse.Namespace) -> int:
    """Run one document through the same handler the HTTP route uses."""
    from redflags.annotation.models import Annotated, render_text
    from redflags.api.app import build_handler
    from redflags.config.settings import load_settings

    settings = load_settings()
    _setup_logging(settings, args.verbose, log_format="text", stream=sys.stderr)

    file_path: Path = args.file
    if not file_path.is_file():
        logger.error("File not found: %s", file_path)
        return 1

    handler = build_handler(settings)

    async def _annotate():
        try:
            return await handler.annotate(file_path.read_text(encoding="utf-8"))
        finally:
            await handler.close()

    result = asyncio.run(_annotate())
    print(render_text(result))
    return 0 if isinstance(result, Annotated) else 2


def _cmd_fingerprint(args: argparse.Namespace) -> int:
    """Print the fingerprint used as cache key for a file."""
    from redflags.cache.fingerprint import compute_fingerprint

    file_path: Path = args.file
    if not file_path.is_file():
        logger.error("File not found: %s", file_path)
        return 1

    print(compute_fingerprint(file_path.read_text(encoding="utf-8")))
    return 0


def _setup_logging(
    settings, verbose: bool, log_format: str | None = None, stream=None,
) -> None:
    """Configure logging from settings; --verbose forces DEBUG."""
    from redflags.logging.logger import setup_logging

    setup_logging(
        level="DEBUG" if verbose else settings.log_level,
        log_format=log_format or settings.log_format,
        log_file=settings.log_file,
        rotation=settings.log_rotation,
        retention=settings.log_retention,
        stream=stream,
    )


if __name__ == "__main__":
    sys.exit(main())
