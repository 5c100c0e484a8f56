"""Tests for settings loading and their effect on validation."""

import logging

import pytest

from schemaknobs import ConfigurationError, Settings, configure, get_settings, number
from schemaknobs.settings import DEFAULT_MESSAGE_TEMPLATE, reset_settings


class TestSettings:
    """Test the Settings dataclass."""

    def test_defaults(self):
        settings = Settings()
        assert settings.message_template == DEFAULT_MESSAGE_TEMPLATE
        assert settings.max_depth is None
        assert settings.to_dict() == {
            "message_template": DEFAULT_MESSAGE_TEMPLATE,
            "max_depth": None,
        }

    @pytest.mark.parametrize("max_depth", [0, -1, "3", True, 2.5])
    def test_invalid_max_depth(self, max_depth):
        with pytest.raises(ConfigurationError):
            Settings(max_depth=max_depth)

    def test_invalid_template(self):
        with pytest.raises(ConfigurationError):
            Settings(message_template="Expected {type}")

    @pytest.mark.parametrize("template", ["{expected.foo}", "{received[0]}", "{expected"])
    def test_invalid_template_lookups(self, template):
        """Attribute and index lookups that fail are configuration errors."""
        with pytest.raises(ConfigurationError):
            Settings(message_template=template)

    def test_from_dict_ignores_unknown_keys(self, caplog):
        with caplog.at_level(logging.WARNING, logger="schemaknobs.settings"):
            settings = Settings.from_dict({"max_depth": 10, "colour": "blue"})
        assert settings.max_depth == 10
        assert "colour" in caplog.text

    def test_from_yaml(self, tmp_path):
        path = tmp_path / "schemaknobs.yaml"
        path.write_text("max_depth: 32\nmessage_template: 'want {expected}, got {received}'\n")
        settings = Settings.from_yaml(path)
        assert settings.max_depth == 32
        assert settings.format_message("string", "int") == "want string, got int"

    def test_from_yaml_empty_file(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("")
        assert Settings.from_yaml(path) == Settings()

    def test_from_yaml_missing_file(self, tmp_path):
        with pytest.raises(ConfigurationError):
            Settings.from_yaml(tmp_path / "nope.yaml")

    def test_from_yaml_not_a_mapping(self, tmp_path):
        path = tmp_path / "list.yaml"
        path.write_text("- 1\n- 2\n")
        with pytest.raises(ConfigurationError):
            Settings.from_yaml(path)

    def test_from_yaml_invalid_yaml(self, tmp_path):
        path = tmp_path / "broken.yaml"
        path.write_text("max_depth: [1, 2\n")
        with pytest.raises(ConfigurationError):
            Settings.from_yaml(path)

    def test_from_env(self, monkeypatch):
        monkeypatch.setenv("SCHEMAKNOBS_MAX_DEPTH", "12")
        monkeypatch.setenv("SCHEMAKNOBS_MESSAGE_TEMPLATE", "{received} is not {expected}")
        settings = Settings.from_env()
        assert settings.max_depth == 12
        assert settings.format_message("string", "int") == "int is not string"

    def test_from_env_defaults(self, monkeypatch):
        monkeypatch.delenv("SCHEMAKNOBS_MAX_DEPTH", raising=False)
        monkeypatch.delenv("SCHEMAKNOBS_MESSAGE_TEMPLATE", raising=False)
        assert Settings.from_env() == Settings()

    def test_from_env_invalid(self, monkeypatch):
        monkeypatch.setenv("SCHEMAKNOBS_MAX_DEPTH", "deep")
        with pytest.raises(ConfigurationError):
            Settings.from_env()


class TestConfigure:
    """Test installing settings."""

    def test_configure_overrides(self):
        settings = configure(max_depth=5)
        assert get_settings() is settings
        assert settings.max_depth == 5

    def test_configure_with_settings(self):
        configure(Settings(max_depth=7), message_template="{expected}!")
        assert get_settings().max_depth == 7
        assert get_settings().message_template == "{expected}!"

    def test_configure_unknown_key(self):
        with pytest.raises(ConfigurationError):
            configure(colour="blue")

    def test_reset(self):
        configure(max_depth=5)
        assert reset_settings() == Settings()
        assert get_settings().max_depth is None

    def test_template_applies_to_generated_messages(self):
        schema = number()
        configure(message_template="{expected} wanted, {received} given")
        assert schema("x")[0].message == "number wanted, str given"

    def test_explicit_message_wins(self):
        configure(message_template="{expected} wanted")
        assert number("Need a number")("x")[0].message == "Need a number"
