"""SDK exception hierarchy."""

from __future__ import annotations

from typing import Optional

# Status reported for failures that never got a usable server response.
LOCAL_FAILURE_STATUS = 500


class EventWebhookError(Exception):
    """Base exception for all SDK errors.

    ``status_code`` is a best-effort HTTP status: the server's own code for
    :class:`EventWebhookAPIError`, 500 for everything raised locally.
    """

    def __init__(
        self,
        message: str,
        *,
        operation: str = "",
        webhook_id: Optional[str] = None,
        status_code: int = LOCAL_FAILURE_STATUS,
    ):
        self.operation = operation
        self.webhook_id = webhook_id
        self.status_code = status_code
        super().__init__(message)


class EventWebhookValidationError(EventWebhookError):
    """Raised when a local precondition fails (no request is sent)."""


class EventWebhookTransportError(EventWebhookError):
    """Raised when the HTTP call could not be completed."""


class EventWebhookTimeoutError(EventWebhookTransportError):
    """Raised when the HTTP call exceeds its deadline."""


class EventWebhookAPIError(EventWebhookError):
    """Raised when the API answers with a status of 300 or above."""

    def __init__(
        self,
        status_code: int,
        detail: str,
        response_body: str = "",
        *,
        operation: str = "",
        webhook_id: Optional[str] = None,
    ):
        self.detail = detail
        self.response_body = response_body
        target = f" event webhook {webhook_id}" if webhook_id else ""
        super().__init__(
            f"{operation or 'request'}{target} failed with HTTP {status_code}: {detail}",
            operation=operation,
            webhook_id=webhook_id,
            status_code=status_code,
        )


class EventWebhookDecodeError(EventWebhookError):
    """Raised when a response body cannot be parsed into the expected record."""
