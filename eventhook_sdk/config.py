"""Client configuration resolved from arguments and the environment."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from dotenv import load_dotenv

from eventhook_sdk.exceptions import EventWebhookValidationError

DEFAULT_BASE_URL = "https://api.sendgrid.com/v3"
DEFAULT_TIMEOUT = 30.0

ENV_API_KEY = "SENDGRID_API_KEY"
ENV_BASE_URL = "SENDGRID_BASE_URL"
ENV_TIMEOUT = "SENDGRID_TIMEOUT"
ENV_ON_BEHALF_OF = "SENDGRID_ON_BEHALF_OF"


@dataclass(frozen=True)
class EventWebhookConfig:
    """Connection settings shared by the sync and async clients."""

    api_key: Optional[str] = None
    base_url: str = DEFAULT_BASE_URL
    timeout: float = DEFAULT_TIMEOUT
    on_behalf_of: Optional[str] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "base_url", self.base_url.rstrip("/"))

    @classmethod
    def from_env(
        cls,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        on_behalf_of: Optional[str] = None,
        dotenv_path: Optional[Union[str, Path]] = None,
    ) -> "EventWebhookConfig":
        """Build a config, filling unset values from ``SENDGRID_*`` variables.

        Explicit arguments win over the environment. When *dotenv_path* is
        given, that file is loaded first without overriding variables that
        are already set.
        """
        if dotenv_path is not None:
            load_dotenv(dotenv_path=dotenv_path)

        if timeout is None:
            raw_timeout = os.environ.get(ENV_TIMEOUT)
            timeout = _parse_timeout(raw_timeout) if raw_timeout else DEFAULT_TIMEOUT

        return cls(
            api_key=api_key or os.environ.get(ENV_API_KEY),
            base_url=base_url or os.environ.get(ENV_BASE_URL) or DEFAULT_BASE_URL,
            timeout=timeout,
            on_behalf_of=on_behalf_of or os.environ.get(ENV_ON_BEHALF_OF),
        )


def _parse_timeout(raw: str) -> float:
    try:
        value = float(raw)
    except ValueError:
        raise EventWebhookValidationError(
            f"{ENV_TIMEOUT} must be a number of seconds, got {raw!r}",
            operation="configure",
        ) from None
    if value <= 0:
        raise EventWebhookValidationError(
            f"{ENV_TIMEOUT} must be positive, got {raw!r}",
            operation="configure",
        )
    return value
