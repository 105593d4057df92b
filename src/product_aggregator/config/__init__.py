"""Configuration module."""
from .settings import AppSettings, API_URL, OUTPUT_FILE

__all__ = ["AppSettings", "API_URL", "OUTPUT_FILE"]
