"""
Resource models for event webhook settings.

Both records map 1:1 onto the JSON objects exchanged with
``/user/webhooks/event/settings``. Empty optional strings are left out of the
wire payload; booleans are always sent.
"""
from __future__ import annotations

from typing import Any, ClassVar, Dict, List, Optional, Set, Tuple, Type, TypeVar

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    ValidationInfo,
    field_validator,
)

from eventhook_sdk.exceptions import EventWebhookDecodeError

ModelT = TypeVar("ModelT", bound="WireModel")

EVENT_FLAGS = (
    "group_resubscribe",
    "delivered",
    "group_unsubscribe",
    "spam_report",
    "bounce",
    "deferred",
    "unsubscribe",
    "processed",
    "open",
    "click",
    "dropped",
)


class WireModel(BaseModel):
    """Common JSON behaviour for the settings records."""

    model_config = ConfigDict(extra="ignore")

    omit_if_empty: ClassVar[Tuple[str, ...]] = ()

    @field_validator("*", mode="before")
    @classmethod
    def null_to_default(cls, value: Any, info: ValidationInfo) -> Any:
        """The API sends ``null`` for unset fields; treat it as the default."""
        if value is None:
            return cls.model_fields[info.field_name].get_default(call_default_factory=True)
        return value

    def _empty_fields(self) -> Set[str]:
        return {name for name in self.omit_if_empty if getattr(self, name) == ""}

    def to_payload(self) -> Dict[str, Any]:
        """Return the dict sent on the wire."""
        return self.model_dump(exclude=self._empty_fields())

    def to_json(self) -> str:
        return self.model_dump_json(exclude=self._empty_fields())

    @classmethod
    def from_json(
        cls: Type[ModelT],
        body: str,
        *,
        operation: str = "",
        webhook_id: Optional[str] = None,
    ) -> ModelT:
        """Decode *body*, raising :class:`EventWebhookDecodeError` on failure."""
        try:
            return cls.model_validate_json(body)
        except ValidationError as exc:
            raise EventWebhookDecodeError(
                f"failed parsing {cls.__name__}: {exc.errors()[0]['msg']}",
                operation=operation,
                webhook_id=webhook_id,
            ) from exc


class EventWebhook(WireModel):
    """Account-level event webhook settings.

    ``url`` is the destination the provider posts events to; it is required
    whenever the record is created or updated. The ``oauth_*`` fields are only
    needed when that destination is OAuth-protected.
    """

    omit_if_empty: ClassVar[Tuple[str, ...]] = (
        "id",
        "friendly_name",
        "url",
        "oauth_client_id",
        "oauth_client_secret",
        "oauth_token_url",
    )

    enabled: bool = False
    id: str = ""
    friendly_name: str = ""
    url: str = ""
    group_resubscribe: bool = False
    delivered: bool = False
    group_unsubscribe: bool = False
    spam_report: bool = False
    bounce: bool = False
    deferred: bool = False
    unsubscribe: bool = False
    processed: bool = False
    open: bool = False
    click: bool = False
    dropped: bool = False
    oauth_client_id: str = ""
    oauth_client_secret: str = Field("", repr=False)
    oauth_token_url: str = ""

    def enabled_events(self) -> List[str]:
        """Names of the event categories switched on, in wire order."""
        return [name for name in EVENT_FLAGS if getattr(self, name)]


class EventWebhookSigning(WireModel):
    """Signing state for outgoing webhook payloads (one per account)."""

    enabled: bool = False
    public_key: str = ""
