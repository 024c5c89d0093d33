"""
Configuration schema for the record codec.

This module defines codec settings (byte order, text encoding, length
limits) and logging settings, loaded from YAML and validated at
construction.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional, Union
import yaml

from .logging import LogEvent, StructuredLogger, create_logger


@dataclass(frozen=True)
class CodecConfig:
    """CDR codec configuration."""

    byte_order: str = "little"  # "little" or "big"
    encoding: str = "utf-8"
    max_string_length: int = 1_048_576
    max_sequence_length: int = 1_048_576
    allow_trailing_bytes: bool = False

    def __post_init__(self):
        """Validate codec configuration."""
        valid_orders = {"little", "big"}
        if self.byte_order not in valid_orders:
            raise ValueError(
                f"Invalid byte_order: {self.byte_order}. "
                f"Must be one of {valid_orders}"
            )

        try:
            "".encode(self.encoding)
        except LookupError:
            raise ValueError(f"Unknown encoding: {self.encoding}")

        if self.max_string_length < 0:
            raise ValueError(
                f"max_string_length must be >= 0, got {self.max_string_length}"
            )

        if self.max_sequence_length < 0:
            raise ValueError(
                f"max_sequence_length must be >= 0, got {self.max_sequence_length}"
            )


@dataclass(frozen=True)
class LoggingConfig:
    """Structured logger configuration."""

    component: str = "codec"
    level: str = "INFO"

    def __post_init__(self):
        """Validate logging configuration."""
        if not self.component:
            raise ValueError("component cannot be empty")

        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR"}
        if self.level not in valid_levels:
            raise ValueError(
                f"Invalid level: {self.level}. Must be one of {valid_levels}"
            )

    @property
    def level_value(self) -> int:
        """Numeric logging level (e.g. logging.INFO)."""
        return getattr(logging, self.level)


@dataclass(frozen=True)
class RecordsConfig:
    """
    Top-level configuration.

    Immutable after construction (frozen dataclass).
    """

    codec: CodecConfig = field(default_factory=CodecConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "RecordsConfig":
        """Build configuration from a parsed mapping.

        Raises:
            ValueError: If a section is not a mapping or a setting is invalid
        """
        data = data or {}
        codec_data = data.get("codec", {}) or {}
        logging_data = data.get("logging", {}) or {}

        if not isinstance(codec_data, dict):
            raise ValueError("'codec' section must be a mapping")
        if not isinstance(logging_data, dict):
            raise ValueError("'logging' section must be a mapping")

        try:
            return cls(
                codec=CodecConfig(**codec_data),
                logging=LoggingConfig(**logging_data),
            )
        except TypeError as e:
            raise ValueError(f"Invalid configuration: {e}")

    @classmethod
    def from_yaml(
        cls,
        yaml_path: Union[str, Path],
        logger: Optional[StructuredLogger] = None
    ) -> "RecordsConfig":
        """
        Load configuration from YAML file.

        Example YAML:
            codec:
              byte_order: "little"
              encoding: "utf-8"
              max_string_length: 65536
              max_sequence_length: 4096
              allow_trailing_bytes: false

            logging:
              component: "codec"
              level: "DEBUG"

        Args:
            yaml_path: Path to the YAML file
            logger: Structured logger (default: idl_records.config)

        Raises:
            FileNotFoundError: If the file doesn't exist
            ValueError: If the YAML or a setting is invalid
        """
        logger = logger or create_logger("config")
        path = Path(yaml_path)
        try:
            config = cls.from_dict(_load_yaml(path))
        except (FileNotFoundError, ValueError) as e:
            logger.error(
                event=LogEvent.CONFIG_ERROR,
                message="Failed to load config",
                exc_info=e,
                metadata={'path': str(path)}
            )
            raise

        logger.info(
            event=LogEvent.CONFIG_LOADED,
            message="Loaded config",
            metadata={
                'path': str(path),
                'byte_order': config.codec.byte_order,
                'level': config.logging.level,
            }
        )
        return config


def _load_yaml(path: Path) -> Optional[Dict[str, Any]]:
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    try:
        with open(path) as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML in {path}: {e}")

    if data is not None and not isinstance(data, dict):
        raise ValueError(f"Config root in {path} must be a mapping")

    return data
