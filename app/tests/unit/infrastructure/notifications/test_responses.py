"""Unit tests for gateway response decoding and classification."""

import pytest

from infrastructure.notifications.responses import (
    MAX_DIAGNOSTIC_LENGTH,
    RawResponse,
    StructuredResponse,
    classify_send_response,
    decode_response,
    is_restricted,
)
from infrastructure.operations import OperationStatus


@pytest.mark.unit
class TestDecodeResponse:
    def test_json_object_is_structured(self):
        response = decode_response('{"status": "success", "message": "queued"}')

        assert isinstance(response, StructuredResponse)
        assert response.fields["message"] == "queued"

    def test_plain_text_is_raw(self):
        response = decode_response("Message sent")

        assert isinstance(response, RawResponse)
        assert response.text == "Message sent"

    def test_json_list_is_raw(self):
        assert isinstance(decode_response('["ok"]'), RawResponse)

    def test_empty_body_is_raw(self):
        assert decode_response("") == RawResponse(text="")
        assert decode_response(None) == RawResponse(text="")


@pytest.mark.unit
class TestSuccessSignals:
    @pytest.mark.parametrize(
        "fields",
        [
            {"status": "success"},
            {"status": "SUCCESS"},
            {"status": True},
            {"success": True},
        ],
    )
    def test_structured_success(self, fields):
        assert StructuredResponse(fields=fields).signals_success is True

    @pytest.mark.parametrize(
        "fields",
        [
            {"status": "failed"},
            {"status": False},
            {"success": "true"},
            {},
        ],
    )
    def test_structured_not_success(self, fields):
        assert StructuredResponse(fields=fields).signals_success is False

    @pytest.mark.parametrize(
        "text", ["sent", "success", " OK ", "Terkirim.", "berhasil!"]
    )
    def test_raw_success(self, text):
        assert RawResponse(text=text).signals_success is True

    @pytest.mark.parametrize(
        "text",
        ["Failed to send", "error: number invalid", "Gagal terkirim", "<html></html>"],
    )
    def test_raw_not_success(self, text):
        assert RawResponse(text=text).signals_success is False

    @pytest.mark.parametrize(
        "text",
        [
            "Message not sent",
            "Pesan tidak terkirim",
            "Sent: 0",
            "Nomor tidak berhasil dikirim",
            "Pesan belum terkirim",
            "Message sent",
        ],
    )
    def test_raw_reply_that_is_not_a_bare_success_token(self, text):
        assert RawResponse(text=text).signals_success is False


@pytest.mark.unit
class TestDiagnostics:
    def test_structured_prefers_message_then_error_then_reason(self):
        assert StructuredResponse({"message": "m", "error": "e"}).diagnostic == "m"
        assert StructuredResponse({"error": "e", "reason": "r"}).diagnostic == "e"
        assert StructuredResponse({"reason": "r"}).diagnostic == "r"
        assert StructuredResponse({"status": "failed"}).diagnostic == ""

    def test_raw_diagnostic_is_truncated(self):
        text = "x" * (MAX_DIAGNOSTIC_LENGTH + 100)
        assert len(RawResponse(text=text).diagnostic) == MAX_DIAGNOSTIC_LENGTH


@pytest.mark.unit
class TestIsRestricted:
    def test_gateway_spelling(self):
        assert is_restricted("<h1>Restrcited Area</h1>") is True

    def test_correct_spelling_any_case(self):
        assert is_restricted("RESTRICTED AREA") is True

    def test_normal_body(self):
        assert is_restricted('{"status":"success"}') is False
        assert is_restricted(None) is False


@pytest.mark.unit
class TestClassifySendResponse:
    def test_success_requires_2xx_and_signal(self):
        result = classify_send_response(200, '{"status": "success"}')

        assert result.is_success
        assert isinstance(result.data, StructuredResponse)

    def test_2xx_without_signal_is_rejected(self):
        result = classify_send_response(200, '{"status": "failed", "message": "Nomor tidak terdaftar"}')

        assert result.status == OperationStatus.PERMANENT_ERROR
        assert result.error_code == "GATEWAY_REJECTED"
        assert result.message == "Nomor tidak terdaftar"

    def test_2xx_empty_body_is_rejected(self):
        result = classify_send_response(200, "")

        assert result.error_code == "GATEWAY_REJECTED"
        assert result.message == "Gateway did not confirm the message"

    def test_restricted_marker_wins_over_success(self):
        result = classify_send_response(200, "success Restrcited Area")

        assert result.status == OperationStatus.PERMANENT_ERROR
        assert result.error_code == "ACCOUNT_RESTRICTED"
        assert "Restricted Area" in result.message

    def test_non_2xx_with_success_body_fails(self):
        result = classify_send_response(500, '{"status": "success"}')

        assert not result.is_success
        assert result.error_code == "HTTP_500"
        assert result.status == OperationStatus.TRANSIENT_ERROR

    def test_non_2xx_carries_diagnostic(self):
        result = classify_send_response(400, '{"error": "invalid apikey"}')

        assert result.error_code == "HTTP_400"
        assert result.message == "Gateway returned HTTP 400: invalid apikey"

    @pytest.mark.parametrize(
        "text",
        ["Message not sent", "Pesan tidak terkirim", "Sent: 0", "Nomor tidak berhasil dikirim"],
    )
    def test_negated_plain_text_is_rejected(self, text):
        result = classify_send_response(200, text)

        assert not result.is_success
        assert result.error_code == "GATEWAY_REJECTED"
        assert result.message == text

    def test_bare_plain_text_token_is_accepted(self):
        result = classify_send_response(200, "Terkirim\n")

        assert result.is_success
        assert isinstance(result.data, RawResponse)
