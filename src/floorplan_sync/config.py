"""Run configuration: managed properties and service settings."""

import json
import os
from pathlib import Path
from typing import Any, Literal, Mapping, Optional

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from floorplan_sync.connectors.entrata.methods import METHODS
from floorplan_sync.exceptions import ConfigError
from floorplan_sync.models.property import PropertyConfig

WEBFLOW_MAX_BATCH = 100


def _properties_from_data(data: Any) -> list[PropertyConfig]:
    if not isinstance(data, list):
        raise ConfigError(f"Property configuration must be a JSON array, got {type(data).__name__}")
    configs: list[PropertyConfig] = []
    for i, entry in enumerate(data):
        if not isinstance(entry, dict):
            raise ConfigError(f"Property entry {i} must be an object, got {type(entry).__name__}")
        try:
            configs.append(PropertyConfig.model_validate(entry))
        except ValidationError as e:
            raise ConfigError(f"Invalid property entry {i}: {e}") from e
    return configs


def load_properties(raw: Optional[str]) -> list[PropertyConfig]:
    """
    Parse the PROPERTIES configuration value (a JSON array of property objects).
    Order is preserved; it is the order properties are synced in.
    """
    if raw is None or not raw.strip():
        raise ConfigError("Property configuration is empty")
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        raise ConfigError(f"Property configuration is not valid JSON: {e}") from e
    return _properties_from_data(data)


def load_properties_file(path: str | Path) -> list[PropertyConfig]:
    """Load property configuration from a JSON or YAML (.yaml/.yml) file."""
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"Cannot read properties file {path}: {e}") from e
    if path.suffix.lower() in (".yaml", ".yml"):
        try:
            data = yaml.safe_load(text)
        except yaml.YAMLError as e:
            raise ConfigError(f"Properties file {path} is not valid YAML: {e}") from e
        return _properties_from_data(data)
    return load_properties(text)


def _env_bool(value: Optional[str]) -> Optional[bool]:
    if value is None or not value.strip():
        return None
    return value.strip().lower() in ("1", "true", "yes", "on")


class Settings(BaseModel):
    """
    Read-only settings for one run. Built once at run start and passed
    explicitly to the connector, publisher and pipeline.
    """

    model_config = ConfigDict(frozen=True)

    entrata_api_key: str = ""
    entrata_base_url: str = ""
    entrata_org: str = ""
    webflow_api_token: str = ""

    properties: tuple[PropertyConfig, ...] = ()

    entrata_method: str = "floorplans"
    batch_size: int = Field(WEBFLOW_MAX_BATCH, ge=1, le=WEBFLOW_MAX_BATCH)
    batch_delay: float = Field(1.0, ge=0)
    timeout: float = Field(30.0, gt=0)
    write_mode: Literal["staged", "live"] = "staged"
    fail_fast: bool = False
    elite_price_per_bed: int = Field(900, ge=0)

    @field_validator("entrata_method")
    @classmethod
    def _known_method(cls, value: str) -> str:
        key = value.lower()
        if key not in METHODS:
            raise ValueError(f"Unknown Entrata method: {value}. Available: {list(METHODS.keys())}")
        return key

    @field_validator("entrata_base_url")
    @classmethod
    def _strip_slash(cls, value: str) -> str:
        return value.rstrip("/")

    @classmethod
    def from_env(
        cls,
        environ: Optional[Mapping[str, str]] = None,
        *,
        properties_file: Optional[str | Path] = None,
        require_properties: bool = True,
    ) -> "Settings":
        """
        Build settings from environment variables.
        Properties come from `properties_file`, else PROPERTIES (JSON string),
        else PROPERTIES_FILE. Without `require_properties` a missing
        configuration yields an empty property list.
        """
        env = os.environ if environ is None else environ

        if properties_file is not None:
            properties = load_properties_file(properties_file)
        elif env.get("PROPERTIES"):
            properties = load_properties(env["PROPERTIES"])
        elif env.get("PROPERTIES_FILE"):
            properties = load_properties_file(env["PROPERTIES_FILE"])
        elif require_properties:
            raise ConfigError("No property configuration: set PROPERTIES or PROPERTIES_FILE")
        else:
            properties = []

        values: dict[str, Any] = {
            "entrata_api_key": env.get("ENTRATA_API_KEY", ""),
            "entrata_base_url": env.get("ENTRATA_BASE_URL", ""),
            "entrata_org": env.get("ENTRATA_ORG", ""),
            "webflow_api_token": env.get("WEBFLOW_API_TOKEN", ""),
            "properties": tuple(properties),
        }
        optional = {
            "entrata_method": env.get("ENTRATA_METHOD"),
            "batch_size": env.get("SYNC_BATCH_SIZE"),
            "batch_delay": env.get("SYNC_BATCH_DELAY"),
            "timeout": env.get("SYNC_TIMEOUT"),
            "write_mode": env.get("SYNC_WRITE_MODE"),
            "fail_fast": _env_bool(env.get("SYNC_FAIL_FAST")),
            "elite_price_per_bed": env.get("SYNC_ELITE_PRICE_PER_BED"),
        }
        values.update({k: v for k, v in optional.items() if v not in (None, "")})

        try:
            return cls.model_validate(values)
        except ValidationError as e:
            raise ConfigError(f"Invalid settings: {e}") from e

    def require_secrets(self, *, destination: bool = True) -> None:
        """Raise ConfigError if any API secret needed for a network run is missing."""
        secrets = [
            ("ENTRATA_API_KEY", self.entrata_api_key),
            ("ENTRATA_BASE_URL", self.entrata_base_url),
            ("ENTRATA_ORG", self.entrata_org),
        ]
        if destination:
            secrets.append(("WEBFLOW_API_TOKEN", self.webflow_api_token))
        missing = [env_name for env_name, value in secrets if not value]
        if missing:
            raise ConfigError(f"Missing required secrets: {', '.join(missing)}")
