"""Tests for application settings."""
import os
import unittest
import tempfile
import shutil
from pathlib import Path
from unittest.mock import patch

from product_aggregator.config import settings as settings_mod
from product_aggregator.config.settings import AppSettings, CONFIG_ENV_VAR
from product_aggregator.utils.exceptions import ConfigError

VALID_YAML = """
app:
  name: ProductAggregator
  version: "2.1.0"
logging:
  level: DEBUG
  file: logs/aggregator.log
  max_file_size_mb: 5
  backup_count: 2
fetch:
  max_attempts: 4
  retry_delay_seconds: 1.5
  timeout_seconds: 10
output:
  indent: 4
"""


class TestAppSettings(unittest.TestCase):
    """Test AppSettings loading and validation."""
    
    def setUp(self):
        """Set up test fixtures."""
        self.test_dir = Path(tempfile.mkdtemp())
        self.config_file = self.test_dir / "config.yaml"
    
    def tearDown(self):
        """Clean up test fixtures."""
        shutil.rmtree(self.test_dir, ignore_errors=True)
    
    def test_load_from_file(self):
        self.config_file.write_text(VALID_YAML, encoding="utf-8")
        
        settings = AppSettings.load(self.config_file)
        
        self.assertEqual(settings.app_version, "2.1.0")
        self.assertEqual(settings.log_level, "DEBUG")
        self.assertEqual(settings.log_file, "logs/aggregator.log")
        self.assertEqual(settings.fetch_max_attempts, 4)
        self.assertEqual(settings.fetch_retry_delay_seconds, 1.5)
        self.assertEqual(settings.fetch_timeout_seconds, 10)
        self.assertEqual(settings.output_indent, 4)
    
    def test_defaults_match_source_behaviour(self):
        settings = AppSettings()
        
        self.assertEqual(settings.fetch_max_attempts, 3)
        self.assertEqual(settings.fetch_retry_delay_seconds, 2.0)
        self.assertIsNone(settings.log_file)
    
    def test_project_config_file_is_valid(self):
        project_config = Path(__file__).resolve().parent.parent / "config.yaml"
        
        settings = AppSettings.load(project_config)
        
        self.assertEqual(settings.fetch_max_attempts, 3)
        self.assertEqual(settings.fetch_retry_delay_seconds, 2)
        self.assertTrue(settings.validate()[0])
    
    def test_missing_explicit_file_raises(self):
        with self.assertRaises(ConfigError):
            AppSettings.load(self.test_dir / "nope.yaml")
    
    def test_missing_key_raises(self):
        self.config_file.write_text("app:\n  name: x\n  version: 1\n", encoding="utf-8")
        
        with self.assertRaises(ConfigError):
            AppSettings.load(self.config_file)
    
    def test_invalid_yaml_raises(self):
        self.config_file.write_text("fetch: [unclosed\n", encoding="utf-8")
        
        with self.assertRaises(ConfigError):
            AppSettings.load(self.config_file)
    
    def test_env_var_selects_file(self):
        self.config_file.write_text(VALID_YAML, encoding="utf-8")
        
        with patch.dict(os.environ, {CONFIG_ENV_VAR: str(self.config_file)}):
            settings = AppSettings.load()
        
        self.assertEqual(settings.fetch_max_attempts, 4)
    
    def test_defaults_when_no_config_file(self):
        with patch.dict(os.environ, clear=True), \
                patch.object(settings_mod, "DEFAULT_CONFIG_PATH", self.test_dir / "absent.yaml"):
            settings = AppSettings.load()
        
        self.assertEqual(settings, AppSettings())
    
    def test_validate(self):
        cases = [
            (AppSettings(fetch_max_attempts=0), "attempts"),
            (AppSettings(fetch_retry_delay_seconds=-1), "delay"),
            (AppSettings(fetch_timeout_seconds=0), "timeout"),
            (AppSettings(output_indent=-2), "indent"),
            (AppSettings(log_level="LOUD"), "log level"),
            (AppSettings(fetch_max_attempts="three"), "fetch_max_attempts must be a number"),
            (AppSettings(fetch_retry_delay_seconds=None), "fetch_retry_delay_seconds must be a number"),
            (AppSettings(output_indent=True), "output_indent must be a number"),
            (AppSettings(log_file=5), "log_file must be a path"),
        ]
        for settings, fragment in cases:
            is_valid, message = settings.validate()
            self.assertFalse(is_valid)
            self.assertIn(fragment, message)
        
        self.assertEqual(AppSettings().validate(), (True, "Configuration is valid"))


if __name__ == "__main__":
    unittest.main()
