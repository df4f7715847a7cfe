"""Typed APNs delivery results.

APNs answers every notification request with a status code, an ``apns-id``
header and, on failure only, a JSON body::

    {"reason": "Unregistered", "timestamp": 1508249865488}

This module turns those pieces into immutable pydantic models. Parsing is
pure: nothing here retries, and parse failures are raised to the caller
as ``apns_contract.errors.ParseError`` subclasses.
"""

import json
import logging
from collections.abc import Mapping
from datetime import datetime, timedelta, timezone
from typing import Annotated, Any, Self

import httpx
from pydantic import (
    AliasChoices,
    BaseModel,
    ConfigDict,
    Field,
    StrictInt,
    ValidationError,
    field_validator,
)

from apns_contract.config import ResponseConfig
from apns_contract.enums import ErrorReason, StatusCode
from apns_contract.errors import (
    MalformedBodyError,
    MissingFieldError,
    TypeMismatchError,
)
from apns_contract.log import delivery_extra

logger = logging.getLogger(__name__)

RawBody = Mapping[str, Any] | str | bytes

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)

# Wire type is an unsigned 64-bit integer.
UnsignedTimestamp = Annotated[StrictInt, Field(ge=0, le=2**64 - 1)]


class ErrorDetail(BaseModel):
    """The body APNs returns with a failed delivery.

    ``device_unregistered_at`` (wire key ``timestamp``) is only meaningful
    when ``reason`` is ``Unregistered``: it is the last time APNs confirmed
    the device token was no longer valid for the topic. APNs may send it
    with other reasons too; it is kept but should be ignored.

    Use ``parse_error_body`` to parse a wire body: it raises the
    ``ParseError`` subclasses directly. ``model_validate`` applies the same
    rules but reports them as a pydantic ``ValidationError`` whose error
    context holds the underlying ``UnknownReasonError``.
    """

    model_config = ConfigDict(frozen=True)

    reason: ErrorReason
    device_unregistered_at: UnsignedTimestamp | None = Field(
        default=None,
        validation_alias=AliasChoices("timestamp", "device_unregistered_at"),
        serialization_alias="timestamp",
    )

    @field_validator("reason", mode="before")
    @classmethod
    def _parse_reason(cls, value: Any) -> ErrorReason:
        return ErrorReason.parse(value)

    @property
    def description(self) -> str:
        return self.reason.description

    @property
    def unregistered_datetime(self) -> datetime | None:
        """The timestamp as an aware UTC datetime (wire value is milliseconds).

        None when the timestamp is absent or lies beyond what ``datetime``
        can represent (after year 9999).
        """
        if self.device_unregistered_at is None:
            return None
        try:
            return _EPOCH + timedelta(milliseconds=self.device_unregistered_at)
        except OverflowError:
            return None


def parse_error_body(raw: RawBody) -> ErrorDetail:
    """Build an ErrorDetail from a decoded mapping or a raw JSON body.

    Raises:
        MalformedBodyError: body is not valid JSON or not a JSON object.
        MissingFieldError: ``reason`` is absent.
        TypeMismatchError: ``reason`` is not a string, or ``timestamp`` is
            not an unsigned integer.
        UnknownReasonError: ``reason`` is not a known APNs reason.
    """
    if isinstance(raw, (str, bytes, bytearray)):
        try:
            raw = json.loads(raw)
        except ValueError as exc:
            raise MalformedBodyError(
                f"APNs error body is not valid JSON: {exc}"
            ) from exc

    if not isinstance(raw, Mapping):
        raise MalformedBodyError(
            f"APNs error body must be a JSON object, got {type(raw).__name__}"
        )

    if "reason" not in raw:
        raise MissingFieldError("reason")

    reason_value = raw["reason"]
    if not isinstance(reason_value, str):
        raise TypeMismatchError("reason", reason_value, "a string")
    reason = ErrorReason.parse(reason_value)

    timestamp = raw.get("timestamp")
    try:
        return ErrorDetail(reason=reason, device_unregistered_at=timestamp)
    except ValidationError as exc:
        raise TypeMismatchError(
            "timestamp", timestamp, "an unsigned integer"
        ) from exc


def _has_body(body: RawBody | None) -> bool:
    if body is None:
        return False
    if isinstance(body, (str, bytes, bytearray)):
        return bool(body.strip())
    return True


class DeliveryResult(BaseModel):
    """Outcome of one APNs delivery attempt.

    Construct it with ``from_transport`` (or ``from_httpx``), which enforces
    that a success status never carries an error. Direct construction
    stores the fields as given.
    """

    model_config = ConfigDict(frozen=True)

    status_code: int
    provider_notification_id: str | None = None
    error: ErrorDetail | None = None

    @property
    def is_success(self) -> bool:
        return self.status_code == StatusCode.SUCCESS

    @property
    def status(self) -> StatusCode | None:
        """The known StatusCode member, or None for codes outside that set."""
        try:
            return StatusCode(self.status_code)
        except ValueError:
            return None

    @property
    def reason(self) -> ErrorReason | None:
        return self.error.reason if self.error is not None else None

    @classmethod
    def from_transport(
        cls,
        status_code: int,
        apns_id: str | None = None,
        body: RawBody | None = None,
        *,
        config: ResponseConfig | None = None,
    ) -> Self:
        """Assemble a result from what the transport received.

        A body on a success response is logged and dropped. A body on a
        failure response is parsed, and any ParseError propagates without
        a result being built.
        """
        if status_code == StatusCode.SUCCESS:
            if _has_body(body):
                cfg = config or ResponseConfig()
                logger.log(
                    logging.WARNING if cfg.warn_on_success_body else logging.DEBUG,
                    "Ignoring body on successful APNs response",
                    extra=delivery_extra(status_code, apns_id),
                )
            return cls(status_code=status_code, provider_notification_id=apns_id)

        error = parse_error_body(body) if _has_body(body) else None  # type: ignore[arg-type]
        return cls(
            status_code=status_code,
            provider_notification_id=apns_id,
            error=error,
        )

    @classmethod
    def from_httpx(
        cls,
        response: httpx.Response,
        config: ResponseConfig | None = None,
    ) -> Self:
        """Assemble a result from a received httpx response."""
        cfg = config or ResponseConfig()
        return cls.from_transport(
            response.status_code,
            apns_id=response.headers.get(cfg.id_header),
            body=response.content,
            config=cfg,
        )
