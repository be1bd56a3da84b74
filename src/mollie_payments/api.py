"""
Public, high-level helpers for building a Mollie client.
"""

from __future__ import annotations

from typing import Mapping, Optional

import requests

from .core.client import Client, new_client
from .core.config import ClientConfig, ConfigError, load_client_config

__all__ = [
    "Client",
    "ClientConfig",
    "ConfigError",
    "create_client",
    "load_client_config",
    "new_client",
]


def create_client(
    *,
    config: Optional[ClientConfig] = None,
    session: Optional[requests.Session] = None,
    env_file: Optional[str] = ".env",
    overrides: Optional[Mapping[str, str]] = None,
    base: Optional[Mapping[str, str]] = None,
    access_token: Optional[str] = None,
    base_url: Optional[str] = None,
    api_version: Optional[str] = None,
    user_agent: Optional[str] = None,
    timeout_seconds: Optional[float | int | str] = None,
) -> Client:
    """
    Construct a :class:`Client`.

    Callers can either supply a ready-made :class:`ClientConfig` or let the
    helper assemble one from ``MOLLIE_*`` environment data and keyword
    arguments.
    """
    if config is not None:
        extras = (
            overrides,
            base,
            access_token,
            base_url,
            api_version,
            user_agent,
            timeout_seconds,
        )
        if any(item is not None and item != {} for item in extras):
            raise ValueError(
                "Provide either a pre-built ClientConfig or individual parameters, not both."
            )
        cfg = config
    else:
        cfg = load_client_config(
            env_file=env_file,
            overrides=overrides,
            base=base,
            access_token=access_token,
            base_url=base_url,
            api_version=api_version,
            user_agent=user_agent,
            timeout_seconds=timeout_seconds,
        )
    return new_client(cfg.access_token, config=cfg, session=session)
