import os
from dataclasses import dataclass
from typing import Any, Mapping, Optional

from .yaml_loader import load_yaml_section

DEFAULT_GEMINI_BASE_URL = "https://generativelanguage.googleapis.com/v1beta"
DEFAULT_GEMINI_MODEL = "gemini-pro"
DEFAULT_PORT = 3000
SUPPORTED_VALIDATION_STATUSES = (400, 422, 500)

# setting name -> environment variable
_ENV_KEYS = {
    "official_email": "OFFICIAL_EMAIL",
    "gemini_api_key": "GEMINI_API_KEY",
    "gemini_model": "GEMINI_MODEL",
    "gemini_base_url": "GEMINI_BASE_URL",
    "host": "HOST",
    "port": "PORT",
    "validation_status": "BFHL_VALIDATION_STATUS",
    "log_level": "LOG_LEVEL",
}


@dataclass(frozen=True)
class ServiceConfig:
    """Immutable runtime settings for the BFHL service.

    Built once at startup and handed to the components that need it.
    ``validation_status`` is the HTTP status used when a recognised operation
    receives malformed input; it defaults to 500 for compatibility with
    existing clients.
    """

    official_email: str = ""
    gemini_api_key: str = ""
    gemini_model: str = DEFAULT_GEMINI_MODEL
    gemini_base_url: str = DEFAULT_GEMINI_BASE_URL
    host: str = "0.0.0.0"
    port: int = DEFAULT_PORT
    validation_status: int = 500
    log_level: str = "INFO"


def _to_int(name: str, value: Any) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        raise ValueError(f"{name} must be an integer, got {value!r}") from None


def load_service_config(
    path: Optional[str] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> ServiceConfig:
    """Build a :class:`ServiceConfig` from YAML and environment variables.

    Parameters
    ----------
    path:
        Optional YAML file whose ``service`` mapping provides base values.
        Defaults to the ``BFHL_CONFIG`` environment variable.
    environ:
        Mapping to read variables from; defaults to :data:`os.environ`.
        Non-empty variables override the YAML values.
    """

    env = os.environ if environ is None else environ
    values = dict(load_yaml_section(path or env.get("BFHL_CONFIG"), "service"))
    unknown = set(values) - set(_ENV_KEYS)
    if unknown:
        raise ValueError(f"Unknown service settings: {', '.join(sorted(unknown))}")

    for field_name, var in _ENV_KEYS.items():
        if env.get(var):
            values[field_name] = env[var]

    if "port" in values:
        values["port"] = _to_int("port", values["port"])
    if "validation_status" in values:
        status = _to_int("validation_status", values["validation_status"])
        if status not in SUPPORTED_VALIDATION_STATUSES:
            raise ValueError(
                f"validation_status must be one of {SUPPORTED_VALIDATION_STATUSES}, got {status}"
            )
        values["validation_status"] = status
    for field_name in ("official_email", "gemini_api_key", "gemini_model", "gemini_base_url", "host", "log_level"):
        if field_name in values:
            values[field_name] = str(values[field_name])
    return ServiceConfig(**values)
