"""Unit tests for configuration loading"""

import json

import pytest

from linear_gql import Config


@pytest.fixture
def write_config(tmp_path):
    """Write a config.json and return its path"""
    def write(data):
        config_path = tmp_path / "config.json"
        config_path.write_text(json.dumps(data))
        return str(config_path)
    return write


class TestConfig:
    """Test Config class"""

    def test_config_loading(self, write_config):
        config = Config(write_config({
            "linear": {
                "api_key": "lin_api_test",
                "api_url": "http://localhost:4000/graphql",
                "timeout_seconds": 5
            },
            "templates": {"path": "/tmp/graphql"},
            "logging": {"level": "DEBUG", "file": "client.log"}
        }))

        assert config.api_key == "lin_api_test"
        assert config.api_url == "http://localhost:4000/graphql"
        assert config.timeout_seconds == 5
        assert config.templates_path == "/tmp/graphql"
        assert config.log_level == "DEBUG"
        assert config.log_file == "client.log"

    def test_config_defaults(self, write_config):
        config = Config(write_config({"linear": {"api_key": "key"}}))

        assert config.api_url == "https://api.linear.app/graphql"
        assert config.timeout_seconds == 30
        assert config.templates_path is None
        assert config.log_level == "INFO"
        assert config.log_file is None

    def test_config_file_not_found(self, tmp_path):
        with pytest.raises(FileNotFoundError, match="config.example.json"):
            Config(str(tmp_path / "nonexistent.json"))

    def test_config_missing_linear_section(self, write_config):
        with pytest.raises(ValueError, match="Missing required config field: linear"):
            Config(write_config({"logging": {"level": "INFO"}}))

    def test_config_missing_api_key(self, write_config):
        with pytest.raises(ValueError, match="linear.api_key"):
            Config(write_config({"linear": {"api_url": "http://localhost"}}))
