"""
Configuration Loader Module

This module loads the bridge settings from a YAML file and applies
environment overrides (optionally read from a .env file).
"""

import os
import logging
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field, ValidationError

logger = logging.getLogger(__name__)

ENV_OVERRIDES = {
    "TASK_BRIDGE_BASE_DIR": "base_dir",
    "TASK_BRIDGE_SUMMARY_FILE": "summary_file",
    "TASK_BRIDGE_LOG_LEVEL": "log_level",
}


class BridgeConfig(BaseModel):
    """Settings for the task bridge."""

    base_dir: str = Field(".", description="Directory the log trees are relative to")
    summary_file: str = Field("appliedCount.json", description="Run summary file")
    app_log_dir: str = Field("applylogs", description="Application outcome log tree")
    test_log_dir: str = Field("cypress/logs", description="Test progress log tree")
    max_workers: int = Field(2, ge=1, description="Workers for asynchronous tasks")
    log_level: str = Field("INFO", description="Diagnostic log level")
    log_dir: Optional[str] = Field(None, description="Directory for the diagnostic log file")


class ConfigLoader:
    """Handles loading the YAML configuration file."""

    def __init__(self, config_file_path: str = "config/config.yaml", env_file: Optional[str] = ".env"):
        """
        Initialize the configuration loader.

        Args:
            config_file_path: Path to the YAML configuration file
            env_file: Optional .env file with environment overrides
        """
        self.config_file_path = Path(config_file_path)
        self.env_file = env_file
        self.config_data: Dict[str, Any] = {}
        self._load_config()

    def _load_config(self) -> None:
        """Load configuration from YAML file."""
        try:
            if not self.config_file_path.exists():
                logger.warning(f"Configuration file not found: {self.config_file_path}, using defaults")
                self.config_data = {}
                return

            with open(self.config_file_path, "r", encoding="utf-8") as f:
                self.config_data = yaml.safe_load(f) or {}

            logger.info(f"Successfully loaded configuration from {self.config_file_path}")

        except yaml.YAMLError as e:
            logger.error(f"YAML parsing error in {self.config_file_path}: {str(e)}")
            self.config_data = {}
        except Exception as e:
            logger.error(f"Error loading configuration file: {str(e)}")
            self.config_data = {}

    def _collect_settings(self) -> Dict[str, Any]:
        bridge = dict(self.config_data.get("bridge", {}) or {})
        logging_section = self.config_data.get("logging", {}) or {}
        if "level" in logging_section:
            bridge["log_level"] = logging_section["level"]
        if "log_dir" in logging_section:
            bridge["log_dir"] = logging_section["log_dir"]

        if self.env_file and Path(self.env_file).exists():
            load_dotenv(self.env_file)
            logger.debug(f"Loaded environment variables from: {self.env_file}")

        for env_name, key in ENV_OVERRIDES.items():
            value = os.getenv(env_name)
            if value:
                bridge[key] = value
        return bridge

    def get_bridge_config(self) -> BridgeConfig:
        """
        Build the validated bridge settings.

        Returns:
            BridgeConfig: Settings with YAML values and environment overrides applied
        """
        settings = self._collect_settings()
        try:
            return BridgeConfig(**settings)
        except ValidationError as e:
            logger.error(f"Invalid bridge configuration, using defaults: {str(e)}")
            return BridgeConfig()


def create_config_loader(config_file_path: str = "config/config.yaml") -> ConfigLoader:
    """Factory function to create a configuration loader."""
    return ConfigLoader(config_file_path)
