"""Python client for the event webhook settings API."""

from eventhook_sdk.client import EventWebhookClient
from eventhook_sdk.async_client import AsyncEventWebhookClient
from eventhook_sdk.config import EventWebhookConfig
from eventhook_sdk.models import EventWebhook, EventWebhookSigning
from eventhook_sdk.exceptions import (
    EventWebhookError,
    EventWebhookAPIError,
    EventWebhookDecodeError,
    EventWebhookTimeoutError,
    EventWebhookTransportError,
    EventWebhookValidationError,
)

__all__ = [
    "EventWebhookClient",
    "AsyncEventWebhookClient",
    "EventWebhookConfig",
    "EventWebhook",
    "EventWebhookSigning",
    "EventWebhookError",
    "EventWebhookAPIError",
    "EventWebhookDecodeError",
    "EventWebhookTimeoutError",
    "EventWebhookTransportError",
    "EventWebhookValidationError",
]

__version__ = "0.1.0"
