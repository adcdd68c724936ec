"""Client configuration: credentials, environment flag and transport options.

AramexConfig is immutable; switching environments produces a new
instance (see SoapSessionManager.set_environment).

load_config() reads (priority order):
1. explicit config_path argument
2. ./aramex.yaml (working directory)
3. ~/.aramex/config.yaml (user home)

The file may be flat or nest its fields under an ``aramex:`` key.
${VAR} references in YAML values resolve from environment at load time.
ARAMEX_<FIELD> environment variables override file values
(ARAMEX_USERNAME, ARAMEX_ACCOUNT_PIN, ARAMEX_SANDBOX, ARAMEX_TIMEOUT, ...).
"""

import logging
import os
import re
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml
from pydantic import AliasChoices, BaseModel, ConfigDict, Field, ValidationError, field_validator
from pydantic.alias_generators import to_camel

from aramex.errors import AramexError

logger = logging.getLogger(__name__)

_ENV_VAR_PATTERN = re.compile(r"\$\{([^}]+)\}")
_ENV_PREFIX = "ARAMEX_"

# Env names kept for compatibility with older deployments.
_ENV_ALIASES = {
    "TEST_MODE": "sandbox",
    "DEBUG_SOAP": "debug_wire",
}

REQUIRED_FIELDS = (
    "username",
    "password",
    "account_number",
    "account_pin",
    "account_entity",
    "account_country_code",
)

DEFAULT_VERSION = "1.0"
DEFAULT_SOURCE = 24


class AramexConfig(BaseModel):
    """Aramex account credentials and client options.

    Field names are snake_case; camelCase names (``accountNumber``,
    ``testMode``) are accepted on input.
    """

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    username: str
    password: str
    account_number: str
    account_pin: str
    account_entity: str
    account_country_code: str
    version: str = DEFAULT_VERSION
    source: int = DEFAULT_SOURCE
    sandbox: bool = Field(
        default=True,
        validation_alias=AliasChoices("sandbox", "testMode", "test_mode"),
    )
    timeout: float | None = None  # seconds; bounds binding HTTP and each call
    debug_wire: bool = False

    @field_validator(*REQUIRED_FIELDS, mode="before")
    @classmethod
    def _not_blank(cls, value: Any) -> Any:
        if value is None or (isinstance(value, str) and not value.strip()):
            raise ValueError("must not be empty")
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return str(value)
        return value

    @field_validator("version", mode="before")
    @classmethod
    def _default_version(cls, value: Any) -> Any:
        return DEFAULT_VERSION if value in (None, "") else value

    @field_validator("source", mode="before")
    @classmethod
    def _default_source(cls, value: Any) -> Any:
        return DEFAULT_SOURCE if value in (None, "") else value

    @field_validator("sandbox", mode="before")
    @classmethod
    def _default_sandbox(cls, value: Any) -> Any:
        return True if value in (None, "") else value

    @field_validator("timeout")
    @classmethod
    def _positive_timeout(cls, value: float | None) -> float | None:
        if value is not None and value <= 0:
            raise ValueError("must be positive")
        return value

    @property
    def environment(self) -> str:
        """'sandbox' or 'production'."""
        return "sandbox" if self.sandbox else "production"


def build_config(values: "AramexConfig | Mapping[str, Any]") -> AramexConfig:
    """Validate raw configuration values into an AramexConfig.

    Args:
        values: An AramexConfig (returned as-is) or a mapping of fields.

    Returns:
        Validated, immutable AramexConfig with defaults applied.

    Raises:
        AramexError: kind CONFIG naming the first missing or invalid field.
    """
    if isinstance(values, AramexConfig):
        return values
    try:
        return AramexConfig.model_validate(dict(values))
    except ValidationError as e:
        first = e.errors()[0]
        loc = first.get("loc") or ("config",)
        field_name = _field_name(str(loc[0]))
        reason = first.get("msg", "")
        raise AramexError.config(field_name, reason) from e


def _field_name(name: str) -> str:
    """Map a camelCase alias from a validation error back to the field name."""
    for field_name, info in AramexConfig.model_fields.items():
        if name in (field_name, info.alias):
            return field_name
    return name


def resolve_env_vars(value: str, env: Mapping[str, str] | None = None) -> str:
    """Resolve ${VAR} references in a string from environment variables.

    Args:
        value: String potentially containing ${VAR} references.
        env: Environment mapping (defaults to os.environ).

    Returns:
        String with all ${VAR} references replaced by their env values.
        Missing env vars resolve to empty string.
    """
    source = os.environ if env is None else env

    def _replace(match: re.Match) -> str:
        return source.get(match.group(1), "")

    return _ENV_VAR_PATTERN.sub(_replace, value)


def _resolve_env_vars_recursive(data: Any, env: Mapping[str, str] | None) -> Any:
    if isinstance(data, str):
        return resolve_env_vars(data, env)
    elif isinstance(data, dict):
        return {k: _resolve_env_vars_recursive(v, env) for k, v in data.items()}
    elif isinstance(data, list):
        return [_resolve_env_vars_recursive(item, env) for item in data]
    return data


def _find_config_file() -> Path | None:
    """Search for config file in standard locations.

    Returns:
        Path to config file if found, None otherwise.
    """
    candidates = [
        Path.cwd() / "aramex.yaml",
        Path.cwd() / "aramex.yml",
        Path.home() / ".aramex" / "config.yaml",
        Path.home() / ".aramex" / "config.yml",
    ]
    for candidate in candidates:
        if candidate.exists():
            return candidate
    return None


def _input_aliases(field_name: str) -> set[str]:
    """Every input key other than ``field_name`` that populates the field."""
    info = AramexConfig.model_fields[field_name]
    aliases = {info.alias} if info.alias else set()
    if isinstance(info.validation_alias, AliasChoices):
        aliases.update(c for c in info.validation_alias.choices if isinstance(c, str))
    aliases.discard(field_name)
    return aliases


def _apply_env_overrides(data: dict[str, Any], env: Mapping[str, str]) -> dict[str, Any]:
    """Apply ARAMEX_<FIELD> env var overrides to config data.

    Values stay strings; pydantic coerces them ("true", "30", ...).

    Args:
        data: Parsed config dict.
        env: Environment mapping.

    Returns:
        Config dict with env var overrides applied.
    """
    known_fields = set(AramexConfig.model_fields)
    for key, value in env.items():
        if not key.startswith(_ENV_PREFIX):
            continue
        suffix = key[len(_ENV_PREFIX):]
        field_name = _ENV_ALIASES.get(suffix, suffix.lower())
        if field_name in known_fields:
            # aliases from the file would take precedence over the field name
            for alias in _input_aliases(field_name):
                data.pop(alias, None)
            data[field_name] = value
    return data


def load_config(
    config_path: str | None = None,
    env: Mapping[str, str] | None = None,
) -> AramexConfig:
    """Load configuration from YAML and environment.

    Args:
        config_path: Explicit path to a YAML file. If None, searches
            standard locations; when none exists only the environment is used.
        env: Environment mapping (defaults to os.environ).

    Returns:
        Validated AramexConfig.

    Raises:
        FileNotFoundError: config_path given but missing.
        AramexError: kind CONFIG for unparsable files or missing fields.
    """
    env = os.environ if env is None else env

    if config_path:
        path: Path | None = Path(config_path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")
    else:
        path = _find_config_file()

    data: dict[str, Any] = {}
    if path is not None:
        logger.info("Loading Aramex config from %s", path)
        try:
            with open(path) as f:
                raw_data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise AramexError.config("config_file", f"Could not parse {path}: {e}") from e
        if not isinstance(raw_data, dict):
            raise AramexError.config("config_file", f"{path} must contain a mapping.")
        section = raw_data.get("aramex", raw_data)
        if not isinstance(section, dict):
            raise AramexError.config("config_file", f"'aramex' section in {path} must be a mapping.")
        data = _resolve_env_vars_recursive(section, env)

    data = _apply_env_overrides(data, env)
    return build_config(data)
