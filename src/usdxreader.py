import sys
import os
import json
import asyncio
import logging
import argparse
from typing import Any, List, Optional

from common.constants import APP_NAME, APP_DESCRIPTION, APP_LOG_FILENAME
from utils.version import get_version

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="usdxreader", description=f"{APP_NAME} - {APP_DESCRIPTION}")
    parser.add_argument("file", nargs="?", help="USDX song file (.txt) to read")
    parser.add_argument("--version", action="store_true", help="Show version information and exit")
    parser.add_argument("--config", metavar="PATH", help="Use this config.ini instead of the default one")
    parser.add_argument("--encoding", metavar="NAME", help="Default encoding (Auto, UTF8, CP1250, CP1252)")
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        type=str.upper,
        help="Override the configured log level",
    )
    parser.add_argument(
        "--base-dir", metavar="DIR", help="Song library root; the song dir is reported relative to it"
    )
    return parser


def parse_arguments(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments"""
    parser = build_parser()
    args = parser.parse_args(argv)
    if not args.version and not args.file:
        parser.error("the following arguments are required: file")
    return args


def print_version_info():
    """Print version information"""
    print(f"{APP_NAME} {get_version()}")
    print(f"Python: {sys.version.split()[0]}")


def _create_and_validate_config(config_path: Optional[str]) -> Any:
    """Create Config and validate it, auto-fixing what can be fixed."""
    from common.config import Config
    from utils.config_validator import validate_config, print_validation_report

    config = Config(config_path)
    _, validation_errors = validate_config(config, auto_fix=True)
    if validation_errors:
        print_validation_report(validation_errors)
    return config


def _setup_logging(config: Any, level_override: Optional[str]) -> None:
    from common.utils.async_logging import setup_async_logging
    from utils.files import get_localappdata_dir

    level = config._get_log_level(level_override) if level_override else config.log_level
    log_file_path = os.path.join(get_localappdata_dir(), APP_LOG_FILENAME) if config.log_to_file else None
    setup_async_logging(log_level=level, log_file_path=log_file_path)
    config.log_config_location()


def format_result(result) -> str:
    """Render a ReadResult as JSON."""
    return json.dumps(
        {
            "song": result.song.to_dict(),
            "warnings": [str(warning) for warning in result.warnings],
            "error": str(result.error) if result.error is not None else None,
        },
        ensure_ascii=False,
        indent=2,
    )


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point: read one song file and print it as JSON"""
    args = parse_arguments(argv)

    if args.version:
        print_version_info()
        return 0

    from common.utils.async_logging import shutdown_async_logging
    from services.song_reader import SongReader
    from services.song_file_service import SongFileService

    config = _create_and_validate_config(args.config)
    _setup_logging(config, args.log_level)

    try:
        try:
            reader = SongReader(default_encoding=args.encoding or config.default_encoding)
        except ValueError as e:
            print(f"Error: {e}", file=sys.stderr)
            return 2

        try:
            result = asyncio.run(SongFileService(reader).load(args.file, args.base_dir))
        except (FileNotFoundError, ValueError) as e:
            logger.error(f"Failed to open file: {e}")
            print(f"Error: {e}", file=sys.stderr)
            return 1

        print(format_result(result))
        if result.error is not None:
            logger.error(f"Failed to read file {args.file}: {result.error}")
            return 1
        return 0
    finally:
        shutdown_async_logging()


if __name__ == "__main__":
    sys.exit(main())
