import pytest

from apns_contract.enums import ALL_REASONS, ErrorReason, StatusCode, describe_reason
from apns_contract.errors import ParseError, UnknownReasonError

WIRE_REASONS = [
    "BadCollapseId",
    "BadDeviceToken",
    "BadExpirationDate",
    "BadMessageId",
    "BadPriority",
    "BadTopic",
    "DeviceTokenNotForTopic",
    "DuplicateHeaders",
    "IdleTimeout",
    "MissingDeviceToken",
    "MissingTopic",
    "PayloadEmpty",
    "TopicDisallowed",
    "BadCertificate",
    "BadCertificateEnvironment",
    "ExpiredProviderToken",
    "Forbidden",
    "InvalidProviderToken",
    "MissingProviderToken",
    "BadPath",
    "MethodNotAllowed",
    "Unregistered",
    "PayloadTooLarge",
    "TooManyProviderTokenUpdates",
    "TooManyRequests",
    "InternalServerError",
    "ServiceUnavailable",
    "Shutdown",
]


class TestErrorReason:
    def test_members_in_wire_order(self):
        assert [r.value for r in ErrorReason] == WIRE_REASONS

    def test_members_count(self):
        assert len(ErrorReason) == 28

    def test_all_reasons_set(self):
        assert ALL_REASONS == set(WIRE_REASONS)

    def test_is_string(self):
        assert isinstance(ErrorReason.UNREGISTERED, str)
        assert str(ErrorReason.UNREGISTERED) == "Unregistered"

    @pytest.mark.parametrize("reason", list(ErrorReason))
    def test_parse_wire_value_returns_member(self, reason):
        assert ErrorReason.parse(reason.value) is reason

    def test_parse_is_case_sensitive(self):
        with pytest.raises(UnknownReasonError):
            ErrorReason.parse("unregistered")

    def test_parse_unknown_carries_value(self):
        with pytest.raises(UnknownReasonError) as exc_info:
            ErrorReason.parse("NotARealReason")
        assert exc_info.value.value == "NotARealReason"
        assert "NotARealReason" in str(exc_info.value)

    def test_parse_non_string_rejected(self):
        with pytest.raises(UnknownReasonError):
            ErrorReason.parse(410)

    def test_unknown_reason_is_parse_error_and_value_error(self):
        with pytest.raises(ParseError):
            ErrorReason.parse("")
        with pytest.raises(ValueError):
            ErrorReason.parse("Gone")


class TestReasonDescriptions:
    def test_every_member_has_non_empty_description(self):
        for reason in ErrorReason:
            assert reason.description
            assert describe_reason(reason) == reason.description

    def test_descriptions_are_distinct(self):
        descriptions = [r.description for r in ErrorReason]
        assert len(set(descriptions)) == len(descriptions)

    def test_unregistered_text(self):
        assert ErrorReason.UNREGISTERED.description == (
            "The device token is inactive for the specified topic. "
            "You should stop sending notifications to this token."
        )

    def test_missing_topic_text(self):
        assert ErrorReason.MISSING_TOPIC.description == (
            "The `apns_topic` of the `NotificationOptions` was not specified and "
            "was required. The `apns_topic` header is mandatory when the client "
            "is connected using the `CertificateConnector` and the included "
            "PKCS12 file includes multiple topics, or when using the "
            "`TokenConnector`."
        )

    def test_payload_too_large_has_no_trailing_period(self):
        assert (
            ErrorReason.PAYLOAD_TOO_LARGE.description
            == "The message payload was too large (4096 bytes)"
        )

    def test_short_texts(self):
        assert ErrorReason.IDLE_TIMEOUT.description == "Idle time out."
        assert ErrorReason.SHUTDOWN.description == "The server is shutting down."
        assert (
            ErrorReason.METHOD_NOT_ALLOWED.description
            == "The request method was not `POST`."
        )


class TestStatusCode:
    def test_values(self):
        assert [int(s) for s in StatusCode] == [
            200, 400, 403, 405, 410, 413, 429, 500, 503,
        ]

    def test_only_200_is_success(self):
        assert StatusCode.SUCCESS.is_success is True
        assert not any(s.is_success for s in StatusCode if s != 200)

    def test_descriptions(self):
        assert StatusCode.GONE.description == (
            "The device token is no longer active for the topic."
        )
        assert all(s.description for s in StatusCode)
