from enum import IntEnum, StrEnum
from typing import Any, Self

from apns_contract.errors import UnknownReasonError


class ErrorReason(StrEnum):
    """Failure reasons APNs reports in the ``reason`` key of an error body.

    Member values are the exact wire strings. ``str(reason)`` returns the wire
    value; use ``reason.description`` for the human-readable explanation.
    """

    BAD_COLLAPSE_ID = "BadCollapseId"
    BAD_DEVICE_TOKEN = "BadDeviceToken"
    BAD_EXPIRATION_DATE = "BadExpirationDate"
    BAD_MESSAGE_ID = "BadMessageId"
    BAD_PRIORITY = "BadPriority"
    BAD_TOPIC = "BadTopic"
    DEVICE_TOKEN_NOT_FOR_TOPIC = "DeviceTokenNotForTopic"
    DUPLICATE_HEADERS = "DuplicateHeaders"
    IDLE_TIMEOUT = "IdleTimeout"
    MISSING_DEVICE_TOKEN = "MissingDeviceToken"
    MISSING_TOPIC = "MissingTopic"
    PAYLOAD_EMPTY = "PayloadEmpty"
    TOPIC_DISALLOWED = "TopicDisallowed"
    BAD_CERTIFICATE = "BadCertificate"
    BAD_CERTIFICATE_ENVIRONMENT = "BadCertificateEnvironment"
    EXPIRED_PROVIDER_TOKEN = "ExpiredProviderToken"
    FORBIDDEN = "Forbidden"
    INVALID_PROVIDER_TOKEN = "InvalidProviderToken"
    MISSING_PROVIDER_TOKEN = "MissingProviderToken"
    BAD_PATH = "BadPath"
    METHOD_NOT_ALLOWED = "MethodNotAllowed"
    UNREGISTERED = "Unregistered"
    PAYLOAD_TOO_LARGE = "PayloadTooLarge"
    TOO_MANY_PROVIDER_TOKEN_UPDATES = "TooManyProviderTokenUpdates"
    TOO_MANY_REQUESTS = "TooManyRequests"
    INTERNAL_SERVER_ERROR = "InternalServerError"
    SERVICE_UNAVAILABLE = "ServiceUnavailable"
    SHUTDOWN = "Shutdown"

    @classmethod
    def parse(cls, value: Any) -> Self:
        """Return the member whose wire string is exactly *value*.

        Raises UnknownReasonError for anything else, including other casings.
        """
        if not isinstance(value, str):
            raise UnknownReasonError(value)
        try:
            return cls(value)
        except ValueError as exc:
            raise UnknownReasonError(value) from exc

    @property
    def description(self) -> str:
        return _REASON_DESCRIPTIONS[self]


_REASON_DESCRIPTIONS: dict[ErrorReason, str] = {
    ErrorReason.BAD_COLLAPSE_ID: (
        "The collapse identifier exceeds the maximum allowed size."
    ),
    ErrorReason.BAD_DEVICE_TOKEN: (
        "The specified device token was bad. Verify that the request contains "
        "a valid token and that the token matches the environment."
    ),
    ErrorReason.BAD_EXPIRATION_DATE: (
        "The `apns_expiration` in `NotificationOptions` is bad."
    ),
    ErrorReason.BAD_MESSAGE_ID: "The `apns_id` in `NotificationOptions` is bad.",
    ErrorReason.BAD_PRIORITY: "The `apns_priority` in `NotificationOptions` is bad.",
    ErrorReason.BAD_TOPIC: "The `apns_topic` in `NotificationOptions` is bad.",
    ErrorReason.DEVICE_TOKEN_NOT_FOR_TOPIC: (
        "The device token does not match the specified topic."
    ),
    ErrorReason.DUPLICATE_HEADERS: "One or more headers were repeated.",
    ErrorReason.IDLE_TIMEOUT: "Idle time out.",
    ErrorReason.MISSING_DEVICE_TOKEN: (
        "The device token is not specified in the payload."
    ),
    ErrorReason.MISSING_TOPIC: (
        "The `apns_topic` of the `NotificationOptions` was not specified and "
        "was required. The `apns_topic` header is mandatory when the client is "
        "connected using the `CertificateConnector` and the included PKCS12 "
        "file includes multiple topics, or when using the `TokenConnector`."
    ),
    ErrorReason.PAYLOAD_EMPTY: "The message payload was empty.",
    ErrorReason.TOPIC_DISALLOWED: "Pushing to this topic is not allowed.",
    ErrorReason.BAD_CERTIFICATE: "The certificate was bad.",
    ErrorReason.BAD_CERTIFICATE_ENVIRONMENT: (
        "The client certificate was for the wrong environment."
    ),
    ErrorReason.EXPIRED_PROVIDER_TOKEN: (
        "The provider token is stale and a new token should be generated."
    ),
    ErrorReason.FORBIDDEN: "The specified action is not allowed.",
    ErrorReason.INVALID_PROVIDER_TOKEN: (
        "The provider token is not valid or the token signature could not be "
        "verified."
    ),
    ErrorReason.MISSING_PROVIDER_TOKEN: (
        "No provider certificate was used to connect to APNs and Authorization "
        "header was missing or no provider token was specified."
    ),
    ErrorReason.BAD_PATH: "The request path value is bad.",
    ErrorReason.METHOD_NOT_ALLOWED: "The request method was not `POST`.",
    ErrorReason.UNREGISTERED: (
        "The device token is inactive for the specified topic. You should stop "
        "sending notifications to this token."
    ),
    ErrorReason.PAYLOAD_TOO_LARGE: "The message payload was too large (4096 bytes)",
    ErrorReason.TOO_MANY_PROVIDER_TOKEN_UPDATES: (
        "The provider token is being updated too often."
    ),
    ErrorReason.TOO_MANY_REQUESTS: (
        "Too many requests were made consecutively to the same device token."
    ),
    ErrorReason.INTERNAL_SERVER_ERROR: "An internal server error occurred.",
    ErrorReason.SERVICE_UNAVAILABLE: "The service is unavailable.",
    ErrorReason.SHUTDOWN: "The server is shutting down.",
}

_undescribed = set(ErrorReason) - _REASON_DESCRIPTIONS.keys()
if _undescribed:
    raise RuntimeError(
        f"ErrorReason members without a description: {sorted(_undescribed)}"
    )
del _undescribed


def describe_reason(reason: ErrorReason) -> str:
    """Return the fixed explanation logged for *reason*."""
    return _REASON_DESCRIPTIONS[reason]


ALL_REASONS: frozenset[str] = frozenset(r.value for r in ErrorReason)


class StatusCode(IntEnum):
    """HTTP status codes returned by the APNs provider API."""

    SUCCESS = 200
    BAD_REQUEST = 400
    FORBIDDEN = 403
    METHOD_NOT_ALLOWED = 405
    GONE = 410
    PAYLOAD_TOO_LARGE = 413
    TOO_MANY_REQUESTS = 429
    INTERNAL_SERVER_ERROR = 500
    SERVICE_UNAVAILABLE = 503

    @property
    def description(self) -> str:
        return _STATUS_DESCRIPTIONS[self]

    @property
    def is_success(self) -> bool:
        return self is StatusCode.SUCCESS


_STATUS_DESCRIPTIONS: dict[StatusCode, str] = {
    StatusCode.SUCCESS: "Success",
    StatusCode.BAD_REQUEST: "Bad request",
    StatusCode.FORBIDDEN: (
        "There was an error with the certificate or with the provider "
        "authentication token."
    ),
    StatusCode.METHOD_NOT_ALLOWED: (
        "The request used a bad `:method` value. Only `POST` requests are "
        "supported."
    ),
    StatusCode.GONE: "The device token is no longer active for the topic.",
    StatusCode.PAYLOAD_TOO_LARGE: "The notification payload was too large.",
    StatusCode.TOO_MANY_REQUESTS: (
        "The server received too many requests for the same device token."
    ),
    StatusCode.INTERNAL_SERVER_ERROR: "Internal server error.",
    StatusCode.SERVICE_UNAVAILABLE: "The server is shutting down and unavailable.",
}

if set(StatusCode) != _STATUS_DESCRIPTIONS.keys():
    raise RuntimeError("Every StatusCode member needs a description")
