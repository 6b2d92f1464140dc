"""
Tool: Timekit Configuration
Purpose: Client settings (app, base URL, timezone, credentials)

Settings live in a pydantic model held by each client. They come from, in
order of precedence:
    1. configure() / set_user() calls
    2. TIMEKIT_* environment variables (a .env file is honoured)
    3. args/timekit.yaml (or the file named by TIMEKIT_CONFIG)
    4. Model defaults

Usage:
    from timekit.config import load_config, merge_options

    config = load_config()
    config = merge_options(config, {"apiBaseUrl": "http://localhost:8000/"})
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any, Mapping, Optional

import yaml
from dotenv import find_dotenv, load_dotenv
from pydantic import BaseModel, ConfigDict, Field

from timekit.models import Credentials

logger = logging.getLogger(__name__)


# Path constants
PROJECT_ROOT = Path(__file__).parent.parent
ARGS_DIR = PROJECT_ROOT / "args"
CONFIG_PATH = ARGS_DIR / "timekit.yaml"

DEFAULT_APP = "demo"
DEFAULT_API_BASE_URL = "https://api.timekit.io/"

# Environment variable -> config field
ENV_OVERRIDES = {
    "TIMEKIT_APP": "app",
    "TIMEKIT_API_BASE_URL": "api_base_url",
    "TIMEKIT_API_VERSION": "api_version",
    "TIMEKIT_TIMEZONE": "timezone",
    "TIMEKIT_TIMEOUT": "timeout",
}


class TimekitConfig(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)
    app: str = Field(default=DEFAULT_APP)
    api_base_url: str = Field(default=DEFAULT_API_BASE_URL, alias="apiBaseUrl")
    api_version: Optional[str] = Field(default=None, alias="apiVersion")
    timezone: Optional[str] = None
    timeout: Optional[float] = Field(default=None, gt=0)
    credentials: Optional[Credentials] = None


def _recognized_keys() -> dict[str, str]:
    """Map every accepted option name (field name or alias) to its field."""
    keys = {}
    for name, field in TimekitConfig.model_fields.items():
        keys[name] = name
        if field.alias:
            keys[field.alias] = name
    return keys


def merge_options(config: TimekitConfig, options: Mapping[str, Any]) -> TimekitConfig:
    """
    Return a new config with recognised options merged in.

    Unrecognised keys are skipped. The returned object is a fresh instance,
    so anything holding the previous one keeps seeing the old values.

    Args:
        config: Current configuration
        options: Option names (snake_case or camelCase) to new values

    Returns:
        New TimekitConfig
    """
    recognized = _recognized_keys()
    update = {}
    for key, value in options.items():
        field = recognized.get(key)
        if field is None or field == "credentials":
            logger.debug(f"Ignoring unrecognized config option: {key}")
            continue
        update[field] = value

    merged = config.model_dump()
    merged.update(update)
    return TimekitConfig.model_validate(merged)


def with_credentials(config: TimekitConfig, email: str, api_token: str) -> TimekitConfig:
    """Return a new config carrying the given user credentials."""
    return config.model_copy(
        update={"credentials": Credentials(email=email, api_token=api_token)}
    )


def _read_yaml(path: Path) -> dict[str, Any]:
    with open(path) as f:
        raw = yaml.safe_load(f) or {}
    if not isinstance(raw, dict):
        raise ValueError("top level must be a mapping")
    section = raw.get("timekit", raw) or {}
    if not isinstance(section, dict):
        raise ValueError("'timekit' section must be a mapping")
    return section


def load_config(path: str | Path | None = None) -> TimekitConfig:
    """
    Load configuration from the yaml file and environment.

    A missing file means defaults. An invalid file is logged and replaced by
    defaults so a bad config never blocks import.

    Args:
        path: Optional yaml path (defaults to $TIMEKIT_CONFIG or args/timekit.yaml)

    Returns:
        TimekitConfig
    """
    load_dotenv(find_dotenv(usecwd=True))

    if path is None:
        path = os.environ.get("TIMEKIT_CONFIG") or CONFIG_PATH
    yaml_path = Path(path)

    raw: dict[str, Any] = {}
    try:
        if yaml_path.exists():
            raw = _read_yaml(yaml_path)
        config = merge_options(TimekitConfig(), raw)
    except Exception as e:
        logger.warning(f"Config validation failed for {yaml_path}: {e}, using defaults")
        raw = {}
        config = TimekitConfig()

    env = {
        field: os.environ[var]
        for var, field in ENV_OVERRIDES.items()
        if os.environ.get(var)
    }
    if env:
        config = merge_options(config, env)

    email = os.environ.get("TIMEKIT_EMAIL") or raw.get("email")
    api_token = os.environ.get("TIMEKIT_API_TOKEN") or raw.get("api_token")
    if email and api_token:
        config = with_credentials(config, email, api_token)

    return config


__all__ = [
    "TimekitConfig",
    "load_config",
    "merge_options",
    "with_credentials",
    "CONFIG_PATH",
]
