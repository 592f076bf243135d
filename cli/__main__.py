"""
CLI Main Entry Point

Run this module to start the interactive contact book:
    python -m cli
"""
import argparse
import logging
import sys
from typing import List, Optional
from dotenv import load_dotenv
from contact_book.config import ConfigError, load_settings
from cli.main import run_cli


def configure_logging(level: int = logging.WARNING) -> None:
    """Configure logging for the CLI. Records go to stderr."""
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
        stream=sys.stderr,
    )


def load_env() -> None:
    """Load environment variables from .env file."""
    load_dotenv()


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="contact-book",
        description="Interactive contact book: add phones and emails, look them up, export to JSON.",
    )
    parser.add_argument("--prompt", help="Prompt shown before each command.")
    parser.add_argument(
        "--export-dir",
        help="Directory that relative export paths are written to (default: current directory).",
    )
    parser.add_argument(
        "--log-level",
        help="Logging level, e.g. DEBUG or INFO (default: CONTACT_BOOK_LOG_LEVEL or WARNING).",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    load_env()
    args = _build_parser().parse_args(argv)

    try:
        settings = load_settings(
            prompt=args.prompt,
            export_dir=args.export_dir,
            log_level=args.log_level,
        )
    except ConfigError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 2

    configure_logging(settings.log_level_value)
    run_cli(
        prompt=settings.prompt,
        export_dir=settings.export_dir,
        log_level=settings.log_level,
    )
    return 0


if __name__ == '__main__':
    raise SystemExit(main())
