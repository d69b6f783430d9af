#!/usr/bin/env python3
"""
Configuration management for the Linear GraphQL client.

This module handles loading and validating configuration from JSON files.
"""

import json
from pathlib import Path
from typing import Dict, Optional

from .transport import LINEAR_API_URL


class Config:
    """Configuration management"""

    def __init__(self, config_path: str = "config.json"):
        self.config_path = Path(config_path)
        self._config = self._load_config()

    def _load_config(self) -> Dict:
        """Load configuration from JSON file"""
        if not self.config_path.exists():
            raise FileNotFoundError(
                f"Configuration file not found: {self.config_path}\n"
                "Please create it from config.example.json"
            )

        with open(self.config_path) as f:
            config = json.load(f)

        if "linear" not in config:
            raise ValueError("Missing required config field: linear")
        if not config["linear"].get("api_key"):
            raise ValueError("Missing required config field: linear.api_key")

        return config

    @property
    def api_key(self) -> str:
        return self._config["linear"]["api_key"]

    @property
    def api_url(self) -> str:
        return self._config["linear"].get("api_url", LINEAR_API_URL)

    @property
    def timeout_seconds(self) -> float:
        return self._config["linear"].get("timeout_seconds", 30)

    @property
    def templates_path(self) -> Optional[str]:
        """Directory of .graphql documents overriding the bundled ones"""
        return self._config.get("templates", {}).get("path")

    @property
    def log_level(self) -> str:
        return self._config.get("logging", {}).get("level", "INFO")

    @property
    def log_file(self) -> Optional[str]:
        return self._config.get("logging", {}).get("file")
