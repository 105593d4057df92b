"""Application settings loader from YAML configuration."""
import os
import yaml
from pathlib import Path
from typing import Optional, Tuple
from dataclasses import dataclass

from ..utils.exceptions import ConfigError

# Source endpoint and output file are fixed, not configurable
API_URL = "https://fakestoreapi.com/products"
OUTPUT_FILE = "grouped_products.json"

CONFIG_ENV_VAR = "PRODUCT_AGGREGATOR_CONFIG"
DEFAULT_CONFIG_PATH = Path(__file__).resolve().parents[3] / "config.yaml"

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

NUMERIC_FIELDS = {
    "log_max_file_size_mb": int,
    "log_backup_count": int,
    "fetch_max_attempts": int,
    "fetch_retry_delay_seconds": (int, float),
    "fetch_timeout_seconds": (int, float),
    "output_indent": int,
}


@dataclass
class AppSettings:
    """Application-wide settings loaded from config.yaml."""
    
    # App info
    app_name: str = "ProductAggregator"
    app_version: str = "1.0.0"
    
    # Logging
    log_level: str = "INFO"
    log_file: Optional[str] = None
    log_max_file_size_mb: int = 10
    log_backup_count: int = 5
    
    # Fetch
    fetch_max_attempts: int = 3
    fetch_retry_delay_seconds: float = 2.0
    fetch_timeout_seconds: float = 30.0
    
    # Output
    output_indent: int = 2
    
    @classmethod
    def load(cls, config_path: Optional[Path] = None) -> "AppSettings":
        """
        Load settings from YAML file.
        
        An explicit path must exist. Without one, the path comes from
        PRODUCT_AGGREGATOR_CONFIG or defaults to config.yaml in the project
        root; if that default file is absent the built-in defaults apply.
        """
        if config_path is None:
            env_path = os.getenv(CONFIG_ENV_VAR)
            if env_path:
                config_path = Path(env_path)
            elif DEFAULT_CONFIG_PATH.exists():
                config_path = DEFAULT_CONFIG_PATH
            else:
                return cls()
        
        config_path = Path(config_path)
        if not config_path.exists():
            raise ConfigError(f"Configuration file not found: {config_path}")
        
        try:
            with open(config_path, "r", encoding="utf-8") as f:
                config = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            raise ConfigError(f"Failed to read configuration {config_path}: {e}") from e
        
        if not isinstance(config, dict):
            raise ConfigError(f"Configuration {config_path} must be a mapping")
        
        try:
            return cls(
                app_name=config["app"]["name"],
                app_version=str(config["app"]["version"]),
                log_level=config["logging"]["level"],
                log_file=config["logging"].get("file"),
                log_max_file_size_mb=config["logging"]["max_file_size_mb"],
                log_backup_count=config["logging"]["backup_count"],
                fetch_max_attempts=config["fetch"]["max_attempts"],
                fetch_retry_delay_seconds=config["fetch"]["retry_delay_seconds"],
                fetch_timeout_seconds=config["fetch"]["timeout_seconds"],
                output_indent=config["output"]["indent"]
            )
        except (KeyError, TypeError) as e:
            raise ConfigError(f"Missing configuration key in {config_path}: {e}") from e
    
    def validate(self) -> Tuple[bool, str]:
        """Validate configuration values."""
        for name, expected in NUMERIC_FIELDS.items():
            value = getattr(self, name)
            # bool is an int subclass but never a valid count or duration
            if isinstance(value, bool) or not isinstance(value, expected):
                return False, f"{name} must be a number, got {value!r}"
        
        if self.log_file is not None and not isinstance(self.log_file, str):
            return False, f"log_file must be a path, got {self.log_file!r}"
        
        if str(self.log_level).upper() not in LOG_LEVELS:
            return False, f"Unknown log level: {self.log_level}"
        
        if self.fetch_max_attempts < 1:
            return False, "Fetch max attempts must be at least 1"
        
        if self.fetch_retry_delay_seconds < 0:
            return False, "Retry delay cannot be negative"
        
        if self.fetch_timeout_seconds <= 0:
            return False, "Request timeout must be positive"
        
        if self.output_indent < 0:
            return False, "Output indent cannot be negative"
        
        return True, "Configuration is valid"

