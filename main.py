# main.py
import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from services.exceptions import ConfigError, InputFileError
from services.migration_orchestrator import run_migration
from utils.config import load_config
from utils.logger import get_logger, set_log_level

logger = get_logger("main")

EXIT_SUCCESS = 0
EXIT_FATAL = 1

# Loggers whose level follows --debug
APP_LOGGERS = (
    "main", "config", "csv_reader", "outcome_logger",
    "migration_orchestrator", "contacts_client", "validators.email_format_checker",
)


def _parse_args(argv: List[str]) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Migrate subscriber interests from a CSV export to existing contacts")
    p.add_argument("--input", type=Path, help="CSV file with email,interests columns (overrides INTERESTS_INPUT_FILE)")
    p.add_argument("--skipped-log", type=Path, help="Where to write skipped rows (overrides SKIPPED_LOG_FILE)")
    p.add_argument("--changed-log", type=Path, help="Where to write updated rows (overrides CHANGED_LOG_FILE)")
    p.add_argument("--env-file", type=Path, help="Load settings from this .env file instead of ./.env")
    p.add_argument("--debug", action="store_true", help="Enable debug logging")
    return p.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    # Only fall back to sys.argv when nothing was passed (an empty list means "no args")
    if argv is None:
        argv = sys.argv[1:]
    args = _parse_args(argv)

    if args.debug:
        set_log_level(logging.DEBUG, *APP_LOGGERS)
        logger.debug("debug mode enabled")

    try:
        config = load_config(
            env_file=args.env_file,
            input_file=args.input,
            skipped_log=args.skipped_log,
            changed_log=args.changed_log,
        )
    except ConfigError as e:
        logger.error(f"config: {e}")
        return EXIT_FATAL

    try:
        summary = run_migration(config)
    except InputFileError as e:
        logger.error(f"❌ {e}")
        return EXIT_FATAL
    except OSError as e:
        logger.error(f"❌ Cannot write outcome logs: {e}")
        return EXIT_FATAL

    logger.info(f"📄 Skipped contacts written to: {summary.skipped_log} ({summary.skipped} rows)")
    logger.info(f"📄 Changed contacts written to: {summary.changed_log} ({summary.updated} rows)")
    return EXIT_SUCCESS


if __name__ == "__main__":
    raise SystemExit(main())
