"""Shared constants and pipeline stages used by both sync and async clients.

Each operation runs the same steps: validate local preconditions, serialize
the body, send it, classify a transport failure, classify a status of 300 or
above, then decode into the target model. Only the sending step differs
between the two clients, so everything else lives here.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional, Type
from urllib.parse import quote

import httpx

from eventhook_sdk.config import EventWebhookConfig
from eventhook_sdk.exceptions import (
    EventWebhookAPIError,
    EventWebhookDecodeError,
    EventWebhookError,
    EventWebhookTimeoutError,
    EventWebhookTransportError,
    EventWebhookValidationError,
)
from eventhook_sdk.models import EventWebhook, ModelT

logger = logging.getLogger(__name__)

SETTINGS_PATH = "/user/webhooks/event/settings"
SIGNING_PATH = f"{SETTINGS_PATH}/signed"


@dataclass(frozen=True)
class _Call:
    """One prepared API call."""

    operation: str
    method: str
    path: str
    payload: Optional[Dict[str, Any]] = None
    webhook_id: Optional[str] = None


def _build_headers(api_key: Optional[str], on_behalf_of: Optional[str] = None) -> Dict[str, str]:
    headers: Dict[str, str] = {
        "Content-Type": "application/json",
        "Accept": "application/json",
    }
    if api_key:
        headers["Authorization"] = f"Bearer {api_key}"
    if on_behalf_of:
        headers["on-behalf-of"] = on_behalf_of
    return headers


def _resolve_config(
    config: Optional[EventWebhookConfig],
    api_key: Optional[str],
    base_url: Optional[str],
    timeout: Optional[float],
    on_behalf_of: Optional[str],
) -> EventWebhookConfig:
    if config is not None:
        return config
    return EventWebhookConfig.from_env(
        api_key=api_key,
        base_url=base_url,
        timeout=timeout,
        on_behalf_of=on_behalf_of,
    )


def _extract_error(body: str) -> str:
    """Pull the message(s) out of an ``{"errors": [{"message": ...}]}`` envelope."""
    try:
        data = json.loads(body)
    except ValueError:
        return body.strip() or "empty response"
    if isinstance(data, dict):
        errors = data.get("errors")
        if isinstance(errors, list):
            messages = [
                str(err.get("message"))
                for err in errors
                if isinstance(err, dict) and err.get("message")
            ]
            if messages:
                return "; ".join(messages)
        if data.get("detail"):
            return str(data["detail"])
    return body.strip()


def _settings_item_path(webhook_id: str, operation: str) -> str:
    """Path of one webhook; the id is escaped into a single path segment."""
    if not webhook_id or webhook_id in (".", ".."):
        raise EventWebhookValidationError(
            f"invalid event webhook id {webhook_id!r}",
            operation=operation,
            webhook_id=webhook_id or None,
        )
    return f"{SETTINGS_PATH}/{quote(webhook_id, safe='')}"


def _write_payload(webhook: EventWebhook) -> Dict[str, Any]:
    # The path carries the id on update; the server assigns it on create.
    payload = webhook.to_payload()
    payload.pop("id", None)
    return payload


def _require_url(webhook: EventWebhook, operation: str, webhook_id: Optional[str] = None) -> None:
    if not webhook.url:
        raise EventWebhookValidationError(
            "event webhook url is required",
            operation=operation,
            webhook_id=webhook_id,
        )


# ----------------------------------------------------------------------
# Call builders
# ----------------------------------------------------------------------

def _create_call(webhook: EventWebhook) -> _Call:
    _require_url(webhook, "create")
    return _Call("create", "POST", SETTINGS_PATH, _write_payload(webhook))


def _update_call(webhook_id: str, webhook: EventWebhook) -> _Call:
    path = _settings_item_path(webhook_id, "update")
    _require_url(webhook, "update", webhook_id)
    return _Call("update", "PATCH", path, _write_payload(webhook), webhook_id)


def _read_call(webhook_id: str) -> _Call:
    return _Call("read", "GET", _settings_item_path(webhook_id, "read"), webhook_id=webhook_id)


def _delete_call(webhook_id: str) -> _Call:
    return _Call("delete", "DELETE", _settings_item_path(webhook_id, "delete"), webhook_id=webhook_id)


def _configure_signing_call(enabled: bool) -> _Call:
    return _Call("configure_signing", "PATCH", SIGNING_PATH, {"enabled": bool(enabled)})


def _read_signing_call() -> _Call:
    return _Call("read_signing", "GET", SIGNING_PATH)


# ----------------------------------------------------------------------
# Response handling
# ----------------------------------------------------------------------

def _request_kwargs(call: _Call, timeout: Optional[float]) -> Dict[str, Any]:
    kwargs: Dict[str, Any] = {}
    if call.payload is not None:
        kwargs["json"] = call.payload
    if timeout is not None:
        kwargs["timeout"] = timeout
    return kwargs


def _request_error(call: _Call, exc: httpx.RequestError) -> EventWebhookError:
    """Map an httpx request failure onto the SDK taxonomy."""
    if isinstance(exc, httpx.DecodingError):
        # Body arrived but its content encoding was invalid.
        return EventWebhookDecodeError(
            f"{call.operation} response could not be decoded: {exc}",
            operation=call.operation,
            webhook_id=call.webhook_id,
        )
    if isinstance(exc, httpx.TimeoutException):
        error_cls = EventWebhookTimeoutError
    else:
        error_cls = EventWebhookTransportError
    return error_cls(
        f"{call.operation} {call.method} {call.path} failed: {exc}",
        operation=call.operation,
        webhook_id=call.webhook_id,
    )


def _handle_response(
    call: _Call,
    resp: httpx.Response,
    model: Optional[Type[ModelT]],
) -> Optional[ModelT]:
    if resp.status_code >= 300:
        logger.warning(
            "Event webhook %s failed: HTTP %d", call.operation, resp.status_code
        )
        raise EventWebhookAPIError(
            resp.status_code,
            _extract_error(resp.text),
            resp.text,
            operation=call.operation,
            webhook_id=call.webhook_id,
        )

    if model is None:
        return None
    return model.from_json(resp.text, operation=call.operation, webhook_id=call.webhook_id)
