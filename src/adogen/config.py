"""Generator configuration: read appsettings.json and ADOGEN_* environment overrides."""

import json
import os
from dataclasses import dataclass, field

from adogen.errors import ConfigError

# Azure CLI public client; accepted by Azure DevOps for device-code login.
DEFAULT_CLIENT_ID = "04b07795-8ddb-461a-bbee-02f9e1bf7b46"
DEFAULT_AUTHORITY = "https://login.microsoftonline.com/organizations"
DEVOPS_SCOPE = "499b84ac-1321-427f-aa17-267ca6975798/.default"

SETTINGS_FILE = "appsettings.json"

_FILE_KEYS = {
    "ClientId": "client_id",
    "Authority": "authority",
    "Scopes": "scopes",
    "TemplatesDirectory": "templates_dir",
    "ApiVersion": "api_version",
    "RequestTimeout": "request_timeout",
    "OperationPollAttempts": "poll_attempts",
    "OperationPollInterval": "poll_interval",
}

_ENV_KEYS = {
    "ADOGEN_CLIENT_ID": "client_id",
    "ADOGEN_AUTHORITY": "authority",
    "ADOGEN_TEMPLATES_DIR": "templates_dir",
    "ADOGEN_API_VERSION": "api_version",
}

_NUMERIC_FIELDS = {
    "request_timeout": float,
    "poll_attempts": int,
    "poll_interval": float,
}


@dataclass
class GeneratorConfig:
    """Settings shared by the authentication and provisioning collaborators."""

    client_id: str = DEFAULT_CLIENT_ID
    authority: str = DEFAULT_AUTHORITY
    scopes: list[str] = field(default_factory=lambda: [DEVOPS_SCOPE])
    templates_dir: str = "Templates"
    api_version: str = "7.1"
    request_timeout: float = 30.0
    poll_attempts: int = 30
    poll_interval: float = 2.0


def _read_settings_file(path):
    if not os.path.isfile(path):
        return {}
    try:
        with open(path, encoding="utf-8-sig") as f:
            data = json.load(f)
    except json.JSONDecodeError as exc:
        raise ConfigError(f"Invalid settings file {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise ConfigError(f"Invalid settings file {path}: expected a JSON object")
    return {attr: data[key] for key, attr in _FILE_KEYS.items() if key in data}


def _coerce(values):
    for attr, kind in _NUMERIC_FIELDS.items():
        if attr not in values:
            continue
        try:
            values[attr] = kind(values[attr])
        except (TypeError, ValueError) as exc:
            raise ConfigError(f"Invalid value for {attr}: {values[attr]!r}") from exc
    scopes = values.get("scopes")
    if isinstance(scopes, str):
        values["scopes"] = [scopes]
    return values


def read_generator_config(path=SETTINGS_FILE, environ=None):
    """Build a GeneratorConfig from the settings file and the environment.

    The settings file is optional. Environment variables win over the file.

    Raises:
        ConfigError: If the file is not valid JSON or a numeric value is malformed.
    """
    if environ is None:
        environ = os.environ
    values = _read_settings_file(path)
    for env_key, attr in _ENV_KEYS.items():
        if environ.get(env_key):
            values[attr] = environ[env_key]
    return GeneratorConfig(**_coerce(values))
