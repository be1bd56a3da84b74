"""
Configuration objects and helpers for the Mollie client.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional

from .environment import build_environment

__all__ = [
    "DEFAULT_API_VERSION",
    "DEFAULT_BASE_URL",
    "DEFAULT_USER_AGENT",
    "ClientConfig",
    "ConfigError",
    "load_client_config",
]

DEFAULT_BASE_URL = "https://api.mollie.com"
DEFAULT_API_VERSION = "v2"
DEFAULT_USER_AGENT = "mollie-payments-python/0.1.0"

_PARAMETER_TO_ENV_KEY = {
    "access_token": "MOLLIE_ACCESS_TOKEN",
    "base_url": "MOLLIE_API_URL",
    "api_version": "MOLLIE_API_VERSION",
    "user_agent": "MOLLIE_USER_AGENT",
    "timeout_seconds": "MOLLIE_TIMEOUT_SECONDS",
}


class ConfigError(Exception):
    """Raised when the supplied configuration is invalid."""


def _stringify(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _collect_parameter_overrides(explicit: Mapping[str, Any]) -> Dict[str, str]:
    overrides: Dict[str, str] = {}
    for key, value in explicit.items():
        if value is None:
            continue
        try:
            env_key = _PARAMETER_TO_ENV_KEY[key]
        except KeyError as exc:
            raise TypeError(f"Unknown client parameter '{key}'") from exc
        overrides[env_key] = _stringify(value)
    return overrides


def _parse_timeout(raw: Optional[str]) -> Optional[float]:
    if raw is None or not raw.strip():
        return None
    try:
        timeout = float(raw)
    except ValueError as exc:
        raise ConfigError(
            f"MOLLIE_TIMEOUT_SECONDS must be a number, got '{raw}'"
        ) from exc
    if timeout <= 0:
        raise ConfigError("MOLLIE_TIMEOUT_SECONDS must be greater than zero")
    return timeout


@dataclass(frozen=True)
class ClientConfig:
    """
    Everything a transport needs to reach the API.

    ``timeout`` is handed to ``requests`` unchanged; ``None`` means the
    library imposes no timeout of its own.
    """

    access_token: str
    base_url: str = DEFAULT_BASE_URL
    api_version: str = DEFAULT_API_VERSION
    user_agent: str = DEFAULT_USER_AGENT
    timeout: Optional[float] = None

    @property
    def api_url(self) -> str:
        return f"{self.base_url.rstrip('/')}/{self.api_version.strip('/')}"

    @classmethod
    def from_mapping(cls, values: Mapping[str, str]) -> "ClientConfig":
        access_token = values.get("MOLLIE_ACCESS_TOKEN")
        if access_token is None:
            raise ConfigError("MOLLIE_ACCESS_TOKEN must be provided")

        base_url = values.get("MOLLIE_API_URL", DEFAULT_BASE_URL).strip().rstrip("/")
        if not base_url.startswith(("http://", "https://")):
            raise ConfigError(f"MOLLIE_API_URL must be an http(s) URL, got '{base_url}'")

        api_version = values.get("MOLLIE_API_VERSION", DEFAULT_API_VERSION).strip("/ ")
        if not api_version:
            raise ConfigError("MOLLIE_API_VERSION must not be empty")

        return cls(
            access_token=access_token.strip(),
            base_url=base_url,
            api_version=api_version,
            user_agent=values.get("MOLLIE_USER_AGENT", DEFAULT_USER_AGENT),
            timeout=_parse_timeout(values.get("MOLLIE_TIMEOUT_SECONDS")),
        )

    @classmethod
    def from_env(
        cls,
        *,
        env_file: Optional[str] = ".env",
        overrides: Optional[Mapping[str, str]] = None,
        base: Optional[Mapping[str, str]] = None,
        access_token: Optional[str] = None,
        base_url: Optional[str] = None,
        api_version: Optional[str] = None,
        user_agent: Optional[str] = None,
        timeout_seconds: Optional[float | int | str] = None,
    ) -> "ClientConfig":
        parameter_overrides = _collect_parameter_overrides(
            {
                "access_token": access_token,
                "base_url": base_url,
                "api_version": api_version,
                "user_agent": user_agent,
                "timeout_seconds": timeout_seconds,
            }
        )
        merged_overrides = dict(overrides or {})
        merged_overrides.update(parameter_overrides)

        environment = build_environment(
            env_file=env_file,
            base=base,
            overrides=merged_overrides,
        )
        return cls.from_mapping(environment.variables)


def load_client_config(
    *,
    env_file: Optional[str] = ".env",
    overrides: Optional[Mapping[str, str]] = None,
    base: Optional[Mapping[str, str]] = None,
    access_token: Optional[str] = None,
    base_url: Optional[str] = None,
    api_version: Optional[str] = None,
    user_agent: Optional[str] = None,
    timeout_seconds: Optional[float | int | str] = None,
) -> ClientConfig:
    """
    Convenience wrapper that mirrors :meth:`ClientConfig.from_env`.

    Settings may come from environment variables, a ``.env`` file, keyword
    arguments, or any combination of the three.
    """
    return ClientConfig.from_env(
        env_file=env_file,
        overrides=overrides,
        base=base,
        access_token=access_token,
        base_url=base_url,
        api_version=api_version,
        user_agent=user_agent,
        timeout_seconds=timeout_seconds,
    )
