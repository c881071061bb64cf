"""Configuration management for tagparse."""

from __future__ import annotations

import tomllib
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, ClassVar

from tagparse.config.paths import default_config_path
from tagparse.parsing.escaped import ESCAPE_CHAR
from tagparse.platform.logging import logger


def _path_field(default: Path | None = None) -> Any:
    """Create a field for Path objects with proper conversion."""
    return field(default=default, metadata={"path": True})


@dataclass
class Config:
    """Parser configuration."""

    # Characters that delimit values packed into a single tag entry
    separators: str = ""

    # Log file path; console only when unset
    log_file: Path | None = _path_field()

    # Minimum level shown on the console
    console_log_level: str = "INFO"

    # Loaded instances keyed by resolved config path
    _instances: ClassVar[dict[Path, "Config"]] = {}

    def __post_init__(self) -> None:
        """Normalize separators and convert string paths to ``Path`` objects."""
        if not isinstance(self.separators, str):
            raise TypeError(f"separators must be a string, got {type(self.separators).__name__}")

        accepted: list[str] = []
        for char in self.separators:
            if char.isspace() or char == ESCAPE_CHAR:
                logger.warning("Ignoring unusable separator %r", char)
                continue
            if char not in accepted:
                accepted.append(char)
        self.separators = "".join(accepted)

        for f in fields(self):
            if not f.metadata.get("path", False):
                continue
            value = getattr(self, f.name)
            if isinstance(value, str):
                setattr(self, f.name, Path(value) if value.strip() else None)

    def save(self, path: Path | None = None) -> Path:
        """Save configuration to ``path`` or the default config location.

        Returns:
            Path: File the configuration was written to.
        """
        target = path if path is not None else default_config_path()
        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            _ = target.write_text(self._render_toml(), encoding="utf-8")
            logger.info("Configuration saved to %s", target)
        except OSError as e:
            logger.error("Failed to save configuration: %s", e)
            raise
        return target

    def _render_toml(self) -> str:
        """Render configuration as TOML with inline guidance."""

        lines: list[str] = []

        lines.append("# tagparse Configuration File")
        lines.append("")

        lines.append("# Characters that separate several values in one tag entry")
        lines.append("# Prefix a separator with a backslash in a tag to keep it literal")
        lines.append('# Example: separators = ";,/"')
        lines.append(f"separators = {self._format_toml_value(self.separators)}")
        lines.append("")

        lines.append("# Log file path (optional)")
        lines.append('# Example: log_file = "/path/to/logs/tagparse.log"')
        if self.log_file is not None:
            lines.append(f"log_file = {self._format_toml_value(self.log_file)}")
        lines.append("")

        lines.append("# Console log level: DEBUG, INFO, WARNING or ERROR")
        lines.append(f"console_log_level = {self._format_toml_value(self.console_log_level)}")
        lines.append("")

        return "\n".join(lines)

    def _format_toml_value(self, value: Any) -> str:
        """Format a value for TOML serialization."""
        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, (str, Path)):
            escaped = str(value).replace("\\", "\\\\").replace('"', '\\"')
            return f'"{escaped}"'
        return str(value)

    @classmethod
    def load(cls, path: Path | None = None) -> "Config":
        """Load configuration from ``path`` or the default config location.

        A missing file yields the defaults. Instances are cached per file.

        Raises:
            tomllib.TOMLDecodeError: If the file is not valid TOML.
        """
        config_file = (path if path is not None else default_config_path()).expanduser().resolve()

        cached = cls._instances.get(config_file)
        if cached is not None:
            return cached

        if not config_file.exists():
            logger.debug("No configuration at %s, using defaults", config_file)
            instance = cls()
            cls._instances[config_file] = instance
            return instance

        try:
            with open(config_file, "rb") as f:
                config_dict = tomllib.load(f)
        except (OSError, tomllib.TOMLDecodeError) as e:
            logger.error("Failed to load configuration: %s", e)
            raise

        known = {f.name for f in fields(cls)}
        for key in sorted(set(config_dict) - known):
            logger.warning("Ignoring unknown configuration key %r in %s", key, config_file)

        instance = cls(**{key: value for key, value in config_dict.items() if key in known})
        logger.info("Configuration loaded from %s", config_file)
        cls._instances[config_file] = instance
        return instance

    @classmethod
    def reset(cls) -> None:
        """Forget every cached instance."""
        cls._instances.clear()


__all__ = ["Config"]
