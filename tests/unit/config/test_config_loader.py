"""Unit tests for YAML configuration file loading."""

import logging
from pathlib import Path

import pytest

from datepicker.config.loader import read_config_file
from datepicker.exceptions import ConfigurationError


class TestReadConfigFile:
    """Test read_config_file parsing and validation."""

    def test_read_config_file_when_both_sections_then_returns_mapping(self, tmp_path: Path) -> None:
        config_file = tmp_path / "datepicker.yaml"
        config_file.write_text(
            "settings:\n  default_locale: de\noptions:\n  month: 3\n  year: 2024\n"
        )

        config_data = read_config_file(config_file)

        assert config_data == {
            "settings": {"default_locale": "de"},
            "options": {"month": 3, "year": 2024},
        }

    def test_read_config_file_when_empty_then_empty_mapping(self, tmp_path: Path) -> None:
        config_file = tmp_path / "empty.yaml"
        config_file.write_text("")

        assert read_config_file(str(config_file)) == {}

    def test_read_config_file_when_missing_then_raises_configuration_error(
        self, tmp_path: Path
    ) -> None:
        with pytest.raises(ConfigurationError, match="Could not read configuration file"):
            read_config_file(tmp_path / "missing.yaml")

    def test_read_config_file_when_invalid_yaml_then_raises_configuration_error(
        self, tmp_path: Path
    ) -> None:
        config_file = tmp_path / "broken.yaml"
        config_file.write_text("settings: [unclosed\n")

        with pytest.raises(ConfigurationError, match="Invalid YAML"):
            read_config_file(config_file)

    def test_read_config_file_when_top_level_list_then_raises_configuration_error(
        self, tmp_path: Path
    ) -> None:
        config_file = tmp_path / "list.yaml"
        config_file.write_text("- settings\n- options\n")

        with pytest.raises(ConfigurationError, match="must contain a mapping"):
            read_config_file(config_file)

    def test_read_config_file_when_section_not_mapping_then_raises_configuration_error(
        self, tmp_path: Path
    ) -> None:
        config_file = tmp_path / "section.yaml"
        config_file.write_text("options: 3\n")

        with pytest.raises(ConfigurationError) as exc_info:
            read_config_file(config_file)

        assert exc_info.value.field_name == "options"

    def test_read_config_file_when_unknown_section_then_warns(
        self, tmp_path: Path, caplog: pytest.LogCaptureFixture
    ) -> None:
        config_file = tmp_path / "extra.yaml"
        config_file.write_text("theme:\n  dark: true\n")

        with caplog.at_level(logging.WARNING, logger="datepicker"):
            config_data = read_config_file(config_file)

        assert config_data == {"theme": {"dark": True}}
        assert "Ignoring unknown configuration section 'theme'" in caplog.text
