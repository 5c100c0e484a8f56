"""Library-wide settings.

Settings are read by validators at call time and are never changed by a
validation run. They can be built from a dictionary, a YAML file, or the
environment.

Example:
    ```python
    from schemaknobs.settings import Settings, configure

    configure(max_depth=64)
    configure(Settings.from_yaml("config/schemaknobs.yaml"))
    configure(Settings.from_env())
    ```

YAML file format:
    ```yaml
    message_template: "Expected {expected}, received {received}"
    max_depth: 64
    ```
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any

import yaml

from .exceptions import ConfigurationError

logger = logging.getLogger(__name__)

DEFAULT_MESSAGE_TEMPLATE = "Expected {expected}, received {received}"
ENV_PREFIX = "SCHEMAKNOBS_"


@dataclass(frozen=True)
class Settings:
    """Settings consulted by validators.

    Attributes:
        message_template: Template for generated type-mismatch messages; may
            reference ``{expected}`` and ``{received}``
        max_depth: Number of nested ``lazy`` resolutions past which
            validation refuses to descend, or None for no limit
    """

    message_template: str = DEFAULT_MESSAGE_TEMPLATE
    max_depth: int | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.message_template, str):
            raise ConfigurationError(
                "message_template must be a string",
                context={"message_template": self.message_template},
            )
        try:
            self.message_template.format(expected="", received="")
        except (AttributeError, KeyError, IndexError, ValueError) as e:
            raise ConfigurationError(
                f"Invalid message_template: {e}",
                context={"message_template": self.message_template},
            ) from e
        if self.max_depth is not None and (
            isinstance(self.max_depth, bool)
            or not isinstance(self.max_depth, int)
            or self.max_depth < 1
        ):
            raise ConfigurationError(
                f"max_depth must be a positive integer, got {self.max_depth!r}",
                context={"max_depth": self.max_depth},
            )

    def format_message(self, expected: str, received: str) -> str:
        """Render the type-mismatch message."""
        return self.message_template.format(expected=expected, received=received)

    def to_dict(self) -> dict[str, Any]:
        """Export settings as a dictionary."""
        return {f.name: getattr(self, f.name) for f in fields(self)}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Settings:
        """Create settings from a dictionary.

        Unknown keys are ignored with a warning.

        Args:
            data: Settings dictionary

        Returns:
            Settings instance

        Raises:
            ConfigurationError: If a value is invalid
        """
        known = {f.name for f in fields(cls)}
        values = {}
        for key, value in data.items():
            if key in known:
                values[key] = value
            else:
                logger.warning(f"Ignoring unknown setting: {key}")
        return cls(**values)

    @classmethod
    def from_yaml(cls, path: str | Path) -> Settings:
        """Load settings from a YAML file.

        Args:
            path: Path to the YAML file

        Returns:
            Settings instance

        Raises:
            ConfigurationError: If the file is missing or not a mapping
        """
        path = Path(path)
        if not path.exists():
            raise ConfigurationError(
                f"Settings file not found: {path}", context={"path": str(path)}
            )
        with open(path, encoding="utf-8") as f:
            try:
                data = yaml.safe_load(f)
            except yaml.YAMLError as e:
                raise ConfigurationError(
                    f"Invalid YAML in settings file {path}: {e}",
                    context={"path": str(path)},
                ) from e
        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ConfigurationError(
                f"Settings file must contain a mapping: {path}",
                context={"path": str(path), "type": type(data).__name__},
            )
        logger.info(f"Loaded settings from {path}")
        return cls.from_dict(data)

    @classmethod
    def from_env(cls, prefix: str = ENV_PREFIX) -> Settings:
        """Create settings from environment variables.

        Reads ``<prefix>MESSAGE_TEMPLATE`` and ``<prefix>MAX_DEPTH``.

        Args:
            prefix: Environment variable prefix

        Returns:
            Settings instance

        Raises:
            ConfigurationError: If a variable holds an invalid value
        """
        values: dict[str, Any] = {}
        template = os.environ.get(f"{prefix}MESSAGE_TEMPLATE")
        if template is not None:
            values["message_template"] = template
        max_depth = os.environ.get(f"{prefix}MAX_DEPTH")
        if max_depth is not None and max_depth.strip():
            try:
                values["max_depth"] = int(max_depth)
            except ValueError as e:
                raise ConfigurationError(
                    f"{prefix}MAX_DEPTH must be an integer, got {max_depth!r}",
                    context={"variable": f"{prefix}MAX_DEPTH", "value": max_depth},
                ) from e
        return cls(**values)


_settings = Settings()


def get_settings() -> Settings:
    """Return the settings currently in force."""
    return _settings


def configure(settings: Settings | None = None, **overrides: Any) -> Settings:
    """Install new settings.

    Args:
        settings: Settings to install; the current settings when omitted
        **overrides: Individual fields to override

    Returns:
        The settings now in force
    """
    global _settings
    base = settings if settings is not None else _settings
    unknown = set(overrides) - {f.name for f in fields(Settings)}
    if unknown:
        raise ConfigurationError(
            f"Unknown settings: {', '.join(sorted(unknown))}",
            context={"unknown": sorted(unknown)},
        )
    _settings = replace(base, **overrides)
    logger.debug(f"Settings configured: {_settings.to_dict()}")
    return _settings


def reset_settings() -> Settings:
    """Restore the default settings."""
    global _settings
    _settings = Settings()
    return _settings
