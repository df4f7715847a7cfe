from apns_contract.enums import ALL_REASONS, ErrorReason, StatusCode, describe_reason
from apns_contract.errors import (
    MalformedBodyError,
    MissingFieldError,
    ParseError,
    TypeMismatchError,
    UnknownReasonError,
)
from apns_contract.response import DeliveryResult, ErrorDetail, parse_error_body

__all__ = [
    "ALL_REASONS",
    "ErrorReason",
    "StatusCode",
    "describe_reason",
    "ParseError",
    "UnknownReasonError",
    "MissingFieldError",
    "TypeMismatchError",
    "MalformedBodyError",
    "ErrorDetail",
    "DeliveryResult",
    "parse_error_body",
]
