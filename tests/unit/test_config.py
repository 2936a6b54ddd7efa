"""Unit tests for configuration management."""

from pathlib import Path

import pytest

from car_factory.config.defaults import get_default_config
from car_factory.config.loader import ConfigLoader
from car_factory.config.validation import ConfigValidator
from car_factory.errors import ConfigurationError


class TestDefaultConfig:
    """Test suite for default configuration."""

    def test_default_config_creation(self) -> None:
        config = get_default_config()
        assert config.output.price_format == "plain"
        assert config.logging.level == "WARNING"
        assert config.logging.format_json is False
        assert config.demo.factories == ("mazda", "ford")


class TestConfigLoader:
    """Test suite for configuration loader."""

    def test_default_config_dir(self) -> None:
        loader = ConfigLoader.create()
        assert isinstance(loader.config_dir, Path)
        assert loader.config_dir.name == "config"

    def test_merge_config_defaults_only(self, tmp_path) -> None:
        config = ConfigLoader.create(tmp_path).merge_config()

        assert config == {
            "output": {"price_format": "plain"},
            "logging": {"level": "WARNING", "format_json": False, "include_timestamp": True},
            "demo": {"factories": ["mazda", "ford"]},
        }

    def test_settings_file_overrides_defaults(self, tmp_path) -> None:
        (tmp_path / "settings.yaml").write_text(
            "output:\n  price_format: currency\nlogging:\n  level: DEBUG\n"
        )

        config = ConfigLoader.create(str(tmp_path)).merge_config()

        assert config["output"]["price_format"] == "currency"
        assert config["logging"]["level"] == "DEBUG"
        # Other defaults should remain
        assert config["logging"]["format_json"] is False
        assert config["demo"]["factories"] == ["mazda", "ford"]

    def test_overrides_take_precedence_over_settings(self, tmp_path) -> None:
        (tmp_path / "settings.yaml").write_text("output:\n  price_format: currency\n")

        config = ConfigLoader.create(tmp_path).merge_config({"output": {"price_format": "raw"}})

        assert config["output"]["price_format"] == "raw"

    def test_empty_settings_file(self, tmp_path) -> None:
        (tmp_path / "settings.yaml").write_text("")

        loader = ConfigLoader.create(tmp_path)

        assert loader.load_settings() == {}
        assert loader.merge_config()["output"]["price_format"] == "plain"

    def test_shipped_settings_are_valid(self) -> None:
        config = ConfigLoader.create().merge_config()
        assert ConfigValidator.validate_config(config) == []


class TestConfigValidator:
    """Test suite for configuration validation."""

    def test_valid_defaults(self, tmp_path) -> None:
        config = ConfigLoader.create(tmp_path).merge_config()
        assert ConfigValidator.validate_config(config) == []

    @pytest.mark.parametrize("price_format", ["plain", "currency", "raw"])
    def test_valid_price_formats(self, price_format) -> None:
        assert ConfigValidator.validate_output_params({"price_format": price_format}) == []

    def test_invalid_price_format(self) -> None:
        errors = ConfigValidator.validate_output_params({"price_format": "euro"})

        assert len(errors) == 1
        assert errors[0].field == "price_format"
        assert errors[0].value == "euro"

    def test_log_level_is_case_insensitive(self) -> None:
        assert ConfigValidator.validate_logging_params({"level": "debug"}) == []

    def test_invalid_log_level(self) -> None:
        errors = ConfigValidator.validate_logging_params({"level": "LOUD"})

        assert len(errors) == 1
        assert errors[0].field == "level"

    def test_invalid_boolean_flags(self) -> None:
        errors = ConfigValidator.validate_logging_params(
            {"format_json": "yes", "include_timestamp": 1}
        )

        assert [err.field for err in errors] == ["format_json", "include_timestamp"]
        assert all(err.message == "Must be a boolean" for err in errors)

    def test_empty_factory_list(self) -> None:
        errors = ConfigValidator.validate_demo_params({"factories": []})

        assert len(errors) == 1
        assert errors[0].field == "factories"

    def test_unknown_factory(self) -> None:
        errors = ConfigValidator.validate_demo_params({"factories": ["mazda", "toyota"]})

        assert len(errors) == 1
        assert errors[0].value == ["toyota"]

    def test_validate_config_collects_all_sections(self) -> None:
        errors = ConfigValidator.validate_config({
            "output": {"price_format": "euro"},
            "logging": {"level": "LOUD"},
            "demo": {"factories": "mazda"},
        })

        assert [err.field for err in errors] == ["price_format", "level", "factories"]

    @pytest.mark.parametrize("value", [None, "plain", ["plain"], 3])
    def test_section_must_be_a_mapping(self, value) -> None:
        errors = ConfigValidator.validate_config({"output": value, "logging": {"level": "INFO"}})

        assert len(errors) == 1
        assert errors[0].field == "output"
        assert errors[0].value == value


class TestSettingsShape:
    """Settings files whose top level is not a mapping."""

    def test_top_level_list_is_rejected(self, tmp_path) -> None:
        (tmp_path / "settings.yaml").write_text("- plain\n- currency\n")

        with pytest.raises(ConfigurationError) as exc_info:
            ConfigLoader.create(tmp_path).load_settings()

        assert exc_info.value.context["value"] == ["plain", "currency"]
