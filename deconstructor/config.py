"""Persistent configuration for Deconstructor.

Settings live in a JSON file under ``~/.config/deconstructor/`` (override
the directory with ``DECONSTRUCTOR_CONFIG_DIR``). API credentials are never
written to disk; they come from the environment.
"""

import json
import os
from pathlib import Path

from pydantic import BaseModel, Field


DEFAULT_MAX_ATTEMPTS = 3

# Environment variables checked for each provider, in priority order
API_KEY_ENV_VARS = {
    "openai": ["OPENAI_API_KEY"],
    "claude": ["ANTHROPIC_API_KEY", "ANTHROPIC_ACCESS_TOKEN"],
}


class LLMConfig(BaseModel):
    provider: str = "openai"
    model: str | None = None


class RetryConfig(BaseModel):
    max_attempts: int = Field(default=DEFAULT_MAX_ATTEMPTS, ge=1)


class LoggingConfig(BaseModel):
    log_requests: bool = True


class DeconstructorConfig(BaseModel):
    """All user-tunable settings, grouped by section."""

    llm: LLMConfig = Field(default_factory=LLMConfig)
    retry: RetryConfig = Field(default_factory=RetryConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


# Dotted keys accepted by `deconstructor config set`, with their value types
CONFIG_KEYS: dict[str, type] = {
    "llm.provider": str,
    "llm.model": str,
    "retry.max_attempts": int,
    "logging.log_requests": bool,
}


def get_config_dir() -> Path:
    override = os.environ.get("DECONSTRUCTOR_CONFIG_DIR")
    if override:
        return Path(override)
    return Path.home() / ".config" / "deconstructor"


def get_config_path() -> Path:
    return get_config_dir() / "config.json"


def get_config() -> DeconstructorConfig:
    """Load the config file, falling back to defaults if it does not exist."""
    path = get_config_path()
    if not path.exists():
        return DeconstructorConfig()
    with open(path) as f:
        return DeconstructorConfig.model_validate(json.load(f))


def save_config(config: DeconstructorConfig) -> Path:
    path = get_config_path()
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w") as f:
        json.dump(config.model_dump(mode="json"), f, indent=2)
    return path


def parse_config_value(key: str, raw: str) -> str | int | bool:
    """Convert a CLI string into the type expected for a dotted key.

    Raises:
        KeyError: If the key is unknown
        ValueError: If the value cannot be converted
    """
    if key not in CONFIG_KEYS:
        raise KeyError(key)

    expected = CONFIG_KEYS[key]
    if expected is int:
        try:
            return int(raw)
        except ValueError:
            raise ValueError(f"Invalid integer for {key}: {raw!r}") from None
    if expected is bool:
        lowered = raw.strip().lower()
        if lowered in ("true", "1", "yes", "on"):
            return True
        if lowered in ("false", "0", "no", "off"):
            return False
        raise ValueError(f"Invalid boolean for {key}: {raw!r}")
    return raw


def set_config_value(config: DeconstructorConfig, key: str, raw: str) -> DeconstructorConfig:
    """Return a copy of config with one dotted key updated and re-validated."""
    value = parse_config_value(key, raw)
    section, field = key.split(".", 1)

    data = config.model_dump()
    data[section][field] = value
    return DeconstructorConfig.model_validate(data)


def get_api_key(provider: str) -> str:
    """Read the provider's credential from the environment ("" if unset)."""
    for env_var in API_KEY_ENV_VARS.get(provider, []):
        value = os.environ.get(env_var)
        if value:
            return value
    return ""
