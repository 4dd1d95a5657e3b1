"""Detector configuration loaded from YAML."""

import logging
import os
from pathlib import Path

import yaml
from pydantic import BaseModel, Field

from .policy import Policy, TieredPolicy

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "GIBBERISH_CHECK_CONFIG"


class DetectorConfig(BaseModel):
    policy: Policy = Field(default_factory=TieredPolicy)
    dictionary_path: Path | None = None
    passwords_path: Path | None = None


def load_config(path: Path) -> DetectorConfig:
    """Load a detector configuration file.

    An empty file yields the defaults. Relative word list paths are resolved
    against the directory holding the config file.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Config not found: {path}")

    with open(path) as f:
        data = yaml.safe_load(f) or {}

    if not isinstance(data, dict):
        raise ValueError(f"Config must be a mapping, got {type(data).__name__}: {path}")

    config = DetectorConfig.model_validate(data)
    for field in ("dictionary_path", "passwords_path"):
        value = getattr(config, field)
        if value is not None and not value.is_absolute():
            setattr(config, field, path.parent / value)

    logger.info("Loaded config from %s (%s policy)", path, config.policy.kind)
    return config


def config_from_env() -> DetectorConfig:
    """Load the config named by ``GIBBERISH_CHECK_CONFIG``, or the defaults."""
    env_path = os.getenv(CONFIG_ENV_VAR)
    if not env_path:
        return DetectorConfig()
    return load_config(Path(env_path))
