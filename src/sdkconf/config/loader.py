"""Load sdkconf settings from YAML and the environment."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from pydantic import BaseModel, Field, field_validator

from ..triple import Triple

CONFIG_DIR = Path("~/.sdkconf")
SETTINGS_PATH = CONFIG_DIR / "config.yml"

ENV_CONFIG_PATH = "SDKCONF_CONFIG"
ENV_OVERRIDES = {
    "sdks_path": "SDKCONF_SDKS_PATH",
    "host_triple": "SDKCONF_HOST_TRIPLE",
    "log_level": "SDKCONF_LOG_LEVEL",
}


class Settings(BaseModel):
    sdks_path: Path = Field(
        CONFIG_DIR / "sdks", description="Directory holding installed SDK bundles", validate_default=True
    )
    host_triple: Optional[str] = Field(None, description="Host triple; detected when unset")
    log_level: str = "WARNING"

    @field_validator("sdks_path")
    @classmethod
    def expand_sdks_path(cls, value: Path) -> Path:
        return Path(value).expanduser()

    @field_validator("host_triple")
    @classmethod
    def check_host_triple(cls, value: Optional[str]) -> Optional[str]:
        if value is not None:
            Triple.parse(value)
        return value

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, value: str) -> str:
        return value.upper()

    def resolved_host_triple(self) -> Triple:
        if self.host_triple:
            return Triple.parse(self.host_triple)
        return Triple.host()


def load_yaml(path: Path) -> Dict[str, Any]:
    with path.open("r", encoding="utf-8") as handle:
        return yaml.safe_load(handle) or {}


def load_settings(path: Path | None = None) -> Settings:
    """Read settings from ``path`` (if it exists), then apply environment overrides."""
    file_path = Path(path or os.getenv(ENV_CONFIG_PATH) or SETTINGS_PATH).expanduser()
    data: Dict[str, Any] = {}
    if file_path.exists():
        data = load_yaml(file_path).get("sdkconf", {}) or {}
    for key, env_name in ENV_OVERRIDES.items():
        value = os.getenv(env_name)
        if value:
            data[key] = value
    return Settings(**data)
