"""Command line entry point."""
import sys
import argparse
from pathlib import Path
from typing import List, Optional

from .config.settings import AppSettings
from .orchestrator.processor import AggregationOrchestrator
from .utils.logger import get_logger, configure_logger
from .utils.exceptions import ConfigError

logger = get_logger()


def _load_and_validate_settings(config_path: Optional[Path], log_level: Optional[str]) -> AppSettings:
    """Load settings, apply CLI overrides and validate them."""
    settings = AppSettings.load(config_path)
    
    if log_level:
        settings.log_level = log_level
    
    is_valid, message = settings.validate()
    if not is_valid:
        raise ConfigError(f"Invalid configuration: {message}")
    
    try:
        configure_logger(
            settings.log_level,
            settings.log_file,
            settings.log_max_file_size_mb,
            settings.log_backup_count
        )
    except OSError as e:
        raise ConfigError(f"Cannot open log file {settings.log_file}: {e}") from e
    return settings


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the product aggregator."""
    parser = argparse.ArgumentParser(
        description="Fetch the product catalog, group it by category and save it as JSON"
    )
    parser.add_argument(
        "--config",
        type=Path,
        help="Path to the YAML settings file (default: config.yaml)"
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        help="Override the configured log level"
    )
    
    args = parser.parse_args(argv)
    
    try:
        settings = _load_and_validate_settings(args.config, args.log_level)
    except ConfigError as e:
        logger.critical(str(e))
        return 1
    
    logger.info(f"{settings.app_name} v{settings.app_version} starting")
    
    result = AggregationOrchestrator(settings).run()
    return 0 if result.success else 1


if __name__ == "__main__":
    sys.exit(main())
