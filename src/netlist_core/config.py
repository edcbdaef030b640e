# src/netlist_core/config.py
"""
Optional YAML configuration for the netlist reader.

A configuration file is a flat mapping, for example::

    supported_version: E
    log_level: DEBUG

It is validated strictly with Cerberus: unknown keys are rejected and absent
keys take their defaults.
"""
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping, Union

import cerberus
import yaml

from .errors import DiagnosableError, format_diagnostic_report
from .log_config import setup_logging
from .parser.extraction import SUPPORTED_VERSION

logger = logging.getLogger(__name__)

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


@dataclass(eq=False)
class ConfigError(DiagnosableError):
    """The configuration file could not be read or does not match the schema."""
    details: str
    file_path: Union[Path, str, None] = None
    errors: Any = None

    def __str__(self):
        if self.file_path is None:
            return f"Configuration error: {self.details}"
        return f"Configuration error in file '{self.file_path}': {self.details}"

    def get_diagnostic_report(self) -> str:
        details = self.details
        if self.errors:
            error_list_str = "\n".join(
                f"  - Field '{k}': {v[0] if isinstance(v, list) and v else v}"
                for k, v in sorted(self.errors.items())
            )
            details = f"{details}\nSee details for {len(self.errors)} issue(s) below:\n\n{error_list_str}"
        return format_diagnostic_report(
            error_type="Configuration Error",
            details=details,
            suggestion=f"Only 'supported_version' and 'log_level' ({', '.join(LOG_LEVELS)}) are accepted.",
            context={'source_file': self.file_path}
        )


@dataclass(frozen=True)
class NetlistConfig:
    supported_version: str = SUPPORTED_VERSION
    log_level: str = "INFO"

    _schema = {
        "supported_version": {"type": "string", "empty": False, "default": SUPPORTED_VERSION},
        "log_level": {"type": "string", "allowed": LOG_LEVELS, "default": "INFO"},
    }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "NetlistConfig":
        """Validates a mapping and builds a config from it, filling in defaults."""
        validator = cerberus.Validator(cls._schema)
        validator.allow_unknown = False
        if not validator.validate(dict(data)):
            raise ConfigError("Configuration does not match the schema.", errors=validator.errors)
        document = validator.document
        return cls(supported_version=document["supported_version"], log_level=document["log_level"])

    def configure_logging(self) -> None:
        """Re-installs the package logging handler at this config's level."""
        setup_logging(self.log_level)


def load_config(path: Union[str, Path]) -> NetlistConfig:
    """Loads a `NetlistConfig` from a YAML file."""
    source = Path(path)
    if not source.is_file():
        raise ConfigError(f"Config file not found at path: {source}", file_path=source)
    try:
        with source.open("r", encoding="utf-8") as f:
            content = yaml.safe_load(f)
    except PermissionError as e:
        raise ConfigError(f"Permission denied when trying to read file: {e}", file_path=source) from e
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML syntax: {e}", file_path=source) from e

    if content is None:
        content = {}
    if not isinstance(content, dict):
        raise ConfigError("The root of the YAML file must be a dictionary (mapping).", file_path=source)

    try:
        config = NetlistConfig.from_dict(content)
    except ConfigError as e:
        raise ConfigError(e.details, file_path=source, errors=e.errors) from e
    logger.debug("Loaded configuration from %s: %s", source, config)
    return config
