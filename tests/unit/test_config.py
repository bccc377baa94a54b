"""Unit tests for configuration management."""

import json
import logging
from pathlib import Path
from tempfile import TemporaryDirectory
from unittest.mock import patch

import pytest

from sgval.config import (
    BlockHandlerCountPolicy,
    LoggingConfig,
    LogLevel,
    SgvalConfig,
    ValidationConfig,
    apply_logging_config,
    create_default_config,
    find_config_file,
    load_config,
)


class TestSgvalConfig:
    """Test complete SgvalConfig model."""

    def test_defaults(self):
        config = SgvalConfig()
        assert config.validation.block_handler_count_policy == BlockHandlerCountPolicy.TOTAL
        assert config.logging.level == LogLevel.INFO

    def test_config_from_dict(self):
        config = SgvalConfig(**{
            "validation": {"blockHandlerCountPolicy": "call_filtered"},
            "logging": {"level": "debug"},
        })
        assert config.validation.block_handler_count_policy == BlockHandlerCountPolicy.CALL_FILTERED
        assert config.logging.level == LogLevel.DEBUG

    def test_populate_by_name(self):
        config = ValidationConfig(block_handler_count_policy="call_filtered")
        assert config.block_handler_count_policy == BlockHandlerCountPolicy.CALL_FILTERED

    def test_invalid_policy(self):
        with pytest.raises(ValueError):
            SgvalConfig(validation={"blockHandlerCountPolicy": "some"})

    def test_extra_fields_forbidden(self):
        with pytest.raises(ValueError):
            SgvalConfig(invalid_field="should-fail")


class TestConfigFileOperations:
    """Test configuration file loading and discovery."""

    def test_load_config_with_file(self):
        with TemporaryDirectory() as temp_dir:
            config_file = Path(temp_dir) / ".sgval.json"
            with open(config_file, "w") as f:
                json.dump({"validation": {"blockHandlerCountPolicy": "call_filtered"}}, f)

            config = load_config(config_file)
            assert config.validation.block_handler_count_policy == BlockHandlerCountPolicy.CALL_FILTERED

    def test_load_config_file_not_found(self):
        with TemporaryDirectory() as temp_dir:
            config = load_config(Path(temp_dir) / "nonexistent.json")
            assert config == create_default_config()

    def test_load_config_invalid_json(self):
        with TemporaryDirectory() as temp_dir:
            config_file = Path(temp_dir) / ".sgval.json"
            config_file.write_text("{invalid json")

            with pytest.raises(ValueError, match="Invalid JSON"):
                load_config(config_file)

    def test_load_config_invalid_structure(self):
        with TemporaryDirectory() as temp_dir:
            config_file = Path(temp_dir) / ".sgval.json"
            config_file.write_text(json.dumps({"invalid": "structure"}))

            with pytest.raises(ValueError, match="Failed to load config"):
                load_config(config_file)

    def test_find_config_file_parent_dir(self):
        with TemporaryDirectory() as temp_dir:
            temp_path = Path(temp_dir)
            config_file = temp_path / ".sgval.json"
            config_file.touch()

            sub_dir = temp_path / "a" / "b"
            sub_dir.mkdir(parents=True)

            assert find_config_file(sub_dir) == config_file.resolve()

    def test_find_config_file_not_found(self):
        with TemporaryDirectory() as temp_dir:
            with patch("pathlib.Path.exists", return_value=False):
                assert find_config_file(Path(temp_dir)) is None

    def test_zero_config_operation(self):
        with patch("sgval.config.find_config_file", return_value=None):
            config = load_config()
            assert config.validation.block_handler_count_policy == BlockHandlerCountPolicy.TOTAL


class TestLoggingConfig:
    """Test applying the logging section."""

    def test_apply_logging_config(self):
        logger = logging.getLogger("sgval")
        previous = logger.level
        try:
            apply_logging_config(SgvalConfig(logging=LoggingConfig(level=LogLevel.DEBUG)))
            assert logger.level == logging.DEBUG

            apply_logging_config(SgvalConfig(logging=LoggingConfig(level="warn")))
            assert logger.level == logging.WARNING
        finally:
            logger.setLevel(previous)
