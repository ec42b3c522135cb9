"""Configuration loading from CLI args, env vars, and optional YAML file."""

import logging
import os
from dataclasses import dataclass

import yaml

from wifilog.patterns import DEFAULT_IP_PREFIXES

logger = logging.getLogger(__name__)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class Config:
    ip_prefixes: tuple[str, ...] = DEFAULT_IP_PREFIXES
    log_level: str = "INFO"
    output_path: str | None = None


def load_yaml_config(path: str | None) -> dict:
    """Load settings from a YAML file. Returns empty dict if no path.

    Raises ValueError if the file is not valid YAML or not a mapping.
    """
    if not path:
        return {}
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except FileNotFoundError:
        logger.warning("Config file %s not found, using defaults", path)
        return {}
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML in {path}: {e}") from e

    if not isinstance(data, dict):
        raise ValueError(f"Config file {path} must contain a mapping")
    logger.info("Loaded YAML config from %s", path)
    return data


def _split_prefixes(value: str) -> tuple[str, ...]:
    return tuple(p.strip() for p in value.split(",") if p.strip())


def _yaml_prefixes(value) -> tuple[str, ...]:
    """Validate the YAML ip_prefixes value.

    Unquoted entries such as 10.180 are parsed by YAML as floats and would
    lose digits, so only a list of strings is accepted.
    """
    if not isinstance(value, (list, tuple)):
        raise ValueError("ip_prefixes must be a list of quoted strings")
    if not all(isinstance(p, str) for p in value):
        raise ValueError("ip_prefixes must be a list of quoted strings")
    return tuple(p.strip() for p in value)


def load_config(cli_args, yaml_data: dict) -> Config:
    """Build Config; precedence is CLI > env vars > YAML > defaults."""
    ip_prefixes = _yaml_prefixes(yaml_data.get("ip_prefixes", DEFAULT_IP_PREFIXES))
    env_prefixes = os.environ.get("WIFILOG_IP_PREFIXES")
    if env_prefixes:
        ip_prefixes = _split_prefixes(env_prefixes)

    log_level = str(yaml_data.get("log_level", Config.log_level))
    log_level = os.environ.get("WIFILOG_LOG_LEVEL", log_level)
    if getattr(cli_args, "log_level", None):
        log_level = cli_args.log_level
    log_level = log_level.upper()
    if log_level not in LOG_LEVELS:
        raise ValueError(f"Unknown log level: {log_level}")

    output_path = yaml_data.get("output")
    if getattr(cli_args, "output", None):
        output_path = cli_args.output

    if not ip_prefixes:
        raise ValueError("ip_prefixes must not be empty")

    return Config(
        ip_prefixes=ip_prefixes,
        log_level=log_level,
        output_path=output_path,
    )
