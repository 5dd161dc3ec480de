"""Synchronous event webhook settings client (uses httpx)."""

from __future__ import annotations

import logging
from typing import Any, Optional, Type

import httpx

from eventhook_sdk._base import (
    _Call,
    _build_headers,
    _configure_signing_call,
    _create_call,
    _delete_call,
    _handle_response,
    _read_call,
    _read_signing_call,
    _request_error,
    _request_kwargs,
    _resolve_config,
    _update_call,
)
from eventhook_sdk.config import EventWebhookConfig
from eventhook_sdk.models import EventWebhook, EventWebhookSigning, ModelT

logger = logging.getLogger(__name__)


class EventWebhookClient:
    """Synchronous client for the event webhook settings API.

    Usage::

        with EventWebhookClient(api_key="SG.xxx") as client:
            hook = client.create_event_webhook(
                EventWebhook(url="https://example.com/events", delivered=True, enabled=True)
            )
            client.configure_signing(True)

    Anything not passed explicitly is read from ``SENDGRID_*`` environment
    variables (see :class:`EventWebhookConfig`).
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        on_behalf_of: Optional[str] = None,
        config: Optional[EventWebhookConfig] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        self.config = _resolve_config(config, api_key, base_url, timeout, on_behalf_of)
        self.base_url = self.config.base_url
        self._headers = _build_headers(self.config.api_key, self.config.on_behalf_of)
        self._client = httpx.Client(
            base_url=self.base_url,
            headers=self._headers,
            timeout=self.config.timeout,
            transport=transport,
        )

    # ------------------------------------------------------------------
    # Context manager
    # ------------------------------------------------------------------

    def __enter__(self) -> "EventWebhookClient":
        return self

    def __exit__(self, *exc: Any) -> None:
        self.close()

    def close(self) -> None:
        self._client.close()

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------

    def _execute(
        self,
        call: _Call,
        model: Optional[Type[ModelT]],
        timeout: Optional[float] = None,
    ) -> Optional[ModelT]:
        logger.debug("Event webhook %s: %s %s", call.operation, call.method, call.path)
        try:
            resp = self._client.request(call.method, call.path, **_request_kwargs(call, timeout))
        except httpx.RequestError as exc:
            raise _request_error(call, exc) from exc
        return _handle_response(call, resp, model)

    # ------------------------------------------------------------------
    # Event webhook settings
    # ------------------------------------------------------------------

    def create_event_webhook(
        self, webhook: EventWebhook, *, timeout: Optional[float] = None
    ) -> EventWebhook:
        """POST /user/webhooks/event/settings — create an event webhook."""
        return self._execute(_create_call(webhook), EventWebhook, timeout)

    def get_event_webhook(
        self, webhook_id: str, *, timeout: Optional[float] = None
    ) -> EventWebhook:
        """GET /user/webhooks/event/settings/{id} — fetch one event webhook."""
        return self._execute(_read_call(webhook_id), EventWebhook, timeout)

    def update_event_webhook(
        self, webhook_id: str, webhook: EventWebhook, *, timeout: Optional[float] = None
    ) -> EventWebhook:
        """PATCH /user/webhooks/event/settings/{id} — replace every field of a webhook."""
        return self._execute(_update_call(webhook_id, webhook), EventWebhook, timeout)

    def delete_event_webhook(
        self, webhook_id: str, *, timeout: Optional[float] = None
    ) -> None:
        """DELETE /user/webhooks/event/settings/{id} — delete an event webhook."""
        self._execute(_delete_call(webhook_id), None, timeout)

    # ------------------------------------------------------------------
    # Signing
    # ------------------------------------------------------------------

    def configure_signing(
        self, enabled: bool, *, timeout: Optional[float] = None
    ) -> EventWebhookSigning:
        """PATCH /user/webhooks/event/settings/signed — toggle payload signing."""
        return self._execute(_configure_signing_call(enabled), EventWebhookSigning, timeout)

    def get_signing(self, *, timeout: Optional[float] = None) -> EventWebhookSigning:
        """GET /user/webhooks/event/settings/signed — signing state and public key."""
        return self._execute(_read_signing_call(), EventWebhookSigning, timeout)
