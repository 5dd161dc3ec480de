"""Asynchronous event webhook settings client (uses httpx.AsyncClient)."""

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


class AsyncEventWebhookClient:
    """Async client for the event webhook settings API.

    Usage::

        async with AsyncEventWebhookClient(api_key="SG.xxx") as client:
            hook = await client.get_event_webhook("wh_1")
            signing = await client.get_signing()
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        on_behalf_of: Optional[str] = None,
        config: Optional[EventWebhookConfig] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.config = _resolve_config(config, api_key, base_url, timeout, on_behalf_of)
        self.base_url = self.config.base_url
        self._headers = _build_headers(self.config.api_key, self.config.on_behalf_of)
        self._client = httpx.AsyncClient(
            base_url=self.base_url,
            headers=self._headers,
            timeout=self.config.timeout,
            transport=transport,
        )

    # ------------------------------------------------------------------
    # Context manager
    # ------------------------------------------------------------------

    async def __aenter__(self) -> "AsyncEventWebhookClient":
        return self

    async def __aexit__(self, *exc: Any) -> None:
        await self.close()

    async def close(self) -> None:
        await self._client.aclose()

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------

    async def _execute(
        self,
        call: _Call,
        model: Optional[Type[ModelT]],
        timeout: Optional[float] = None,
    ) -> Optional[ModelT]:
        logger.debug("Event webhook %s: %s %s", call.operation, call.method, call.path)
        try:
            resp = await self._client.request(
                call.method, call.path, **_request_kwargs(call, timeout)
            )
        except httpx.RequestError as exc:
            raise _request_error(call, exc) from exc
        return _handle_response(call, resp, model)

    # ------------------------------------------------------------------
    # Event webhook settings
    # ------------------------------------------------------------------

    async def create_event_webhook(
        self, webhook: EventWebhook, *, timeout: Optional[float] = None
    ) -> EventWebhook:
        """POST /user/webhooks/event/settings — create an event webhook."""
        return await self._execute(_create_call(webhook), EventWebhook, timeout)

    async def get_event_webhook(
        self, webhook_id: str, *, timeout: Optional[float] = None
    ) -> EventWebhook:
        """GET /user/webhooks/event/settings/{id} — fetch one event webhook."""
        return await self._execute(_read_call(webhook_id), EventWebhook, timeout)

    async def update_event_webhook(
        self, webhook_id: str, webhook: EventWebhook, *, timeout: Optional[float] = None
    ) -> EventWebhook:
        """PATCH /user/webhooks/event/settings/{id} — replace every field of a webhook."""
        return await self._execute(_update_call(webhook_id, webhook), EventWebhook, timeout)

    async def delete_event_webhook(
        self, webhook_id: str, *, timeout: Optional[float] = None
    ) -> None:
        """DELETE /user/webhooks/event/settings/{id} — delete an event webhook."""
        await self._execute(_delete_call(webhook_id), None, timeout)

    # ------------------------------------------------------------------
    # Signing
    # ------------------------------------------------------------------

    async def configure_signing(
        self, enabled: bool, *, timeout: Optional[float] = None
    ) -> EventWebhookSigning:
        """PATCH /user/webhooks/event/settings/signed — toggle payload signing."""
        return await self._execute(
            _configure_signing_call(enabled), EventWebhookSigning, timeout
        )

    async def get_signing(self, *, timeout: Optional[float] = None) -> EventWebhookSigning:
        """GET /user/webhooks/event/settings/signed — signing state and public key."""
        return await self._execute(_read_signing_call(), EventWebhookSigning, timeout)
