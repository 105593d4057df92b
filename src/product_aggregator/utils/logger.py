"""Logging infrastructure with run context."""
import logging
import sys
from pathlib import Path
from logging.handlers import RotatingFileHandler
from typing import Optional


class RunContextFilter(logging.Filter):
    """Add run context to log records."""
    
    def __init__(self):
        super().__init__()
        self.run_id: Optional[str] = None
    
    def filter(self, record):
        """Add run_id to record."""
        record.run_id = self.run_id or "-"
        return True


class AggregatorLogger:
    """Centralized logging manager."""
    
    def __init__(
        self,
        log_level: str = "INFO",
        log_file: Optional[str] = None,
        max_file_size_mb: int = 10,
        backup_count: int = 5
    ):
        self.log_file = Path(log_file) if log_file else None
        self.run_filter = RunContextFilter()
        
        self.logger = logging.getLogger("product_aggregator")
        self.logger.setLevel(getattr(logging, log_level.upper()))
        
        # Remove existing handlers
        for handler in list(self.logger.handlers):
            self.logger.removeHandler(handler)
            handler.close()
        
        formatter = logging.Formatter(
            "%(asctime)s [%(levelname)s] [run:%(run_id)s] %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S"
        )
        
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(logging.INFO)
        console_handler.setFormatter(formatter)
        console_handler.addFilter(self.run_filter)
        self.logger.addHandler(console_handler)
        
        if self.log_file:
            self.log_file.parent.mkdir(parents=True, exist_ok=True)
            file_handler = RotatingFileHandler(
                self.log_file,
                maxBytes=max_file_size_mb * 1024 * 1024,
                backupCount=backup_count,
                encoding="utf-8"
            )
            file_handler.setLevel(logging.DEBUG)
            file_handler.setFormatter(formatter)
            file_handler.addFilter(self.run_filter)
            self.logger.addHandler(file_handler)
    
    def set_run_context(self, run_id: Optional[str]):
        """Set current run context for logging."""
        self.run_filter.run_id = run_id
    
    def get_logger(self) -> logging.Logger:
        """Get the configured logger."""
        return self.logger


# Global logger instance
_logger_instance: Optional[AggregatorLogger] = None


def get_logger(log_level: str = "INFO") -> logging.Logger:
    """Get or create global logger instance."""
    global _logger_instance
    if _logger_instance is None:
        _logger_instance = AggregatorLogger(log_level)
    return _logger_instance.get_logger()


def configure_logger(
    log_level: str = "INFO",
    log_file: Optional[str] = None,
    max_file_size_mb: int = 10,
    backup_count: int = 5
) -> logging.Logger:
    """Rebuild the global logger from loaded settings."""
    global _logger_instance
    _logger_instance = AggregatorLogger(log_level, log_file, max_file_size_mb, backup_count)
    return _logger_instance.get_logger()


def set_run_context(run_id: Optional[str]):
    """Set run context for logging."""
    global _logger_instance
    if _logger_instance:
        _logger_instance.set_run_context(run_id)
