"""Unit tests for response verification (infrastructure.captcha.recaptcha)."""

from __future__ import annotations

import httpx
import pytest

from http_mocks import (
    VERIFY_URL,
    RecordingTransport,
    failing_reply,
    json_reply,
    text_reply,
)
from recaptcha_v2.errors import NetworkError, RecaptchaError, ValidationError
from recaptcha_v2.infrastructure.captcha.recaptcha import (
    AsyncReCaptchaProvider,
    ReCaptchaProvider,
    build_verify_request,
)
from recaptcha_v2.infrastructure.http_client import AsyncHttpClient, HttpClient


def _sync_provider(settings, reply):
    transport = RecordingTransport(reply)
    http = HttpClient(user_agent=settings.user_agent, transport=transport)
    return ReCaptchaProvider(settings, http), transport


def _async_provider(settings, reply):
    transport = RecordingTransport(reply)
    http = AsyncHttpClient(user_agent=settings.user_agent, transport=transport)
    return AsyncReCaptchaProvider(settings, http), transport


# ── build_verify_request ──────────────────────────────────────────────────────


class TestBuildVerifyRequest:
    def test_without_remote_ip(self):
        assert build_verify_request("s3cret", "tok").to_form() == {
            "secret": "s3cret",
            "response": "tok",
        }

    def test_with_remote_ip(self):
        form = build_verify_request("s3cret", "tok", "203.0.113.7").to_form()
        assert form["remoteip"] == "203.0.113.7"

    @pytest.mark.parametrize("secret", [None, ""], ids=["none", "empty"])
    def test_missing_secret(self, secret):
        with pytest.raises(ValidationError) as exc_info:
            build_verify_request(secret, "tok")
        assert exc_info.value.field == "secret"

    @pytest.mark.parametrize("token", [None, ""], ids=["none", "empty"])
    def test_missing_token(self, token):
        with pytest.raises(ValidationError) as exc_info:
            build_verify_request("s3cret", token)
        assert exc_info.value.field == "response_token"

    @pytest.mark.parametrize(
        "secret, token, remote_ip, field",
        [
            (b"s3cret", "tok", None, "secret"),
            ("s3cret", 12345, None, "response_token"),
            ("s3cret", ["tok"], None, "response_token"),
            ("s3cret", "tok", 1234, "remote_ip"),
        ],
        ids=["bytes_secret", "int_token", "list_token", "int_remote_ip"],
    )
    def test_non_string_arguments(self, secret, token, remote_ip, field):
        with pytest.raises(ValidationError) as exc_info:
            build_verify_request(secret, token, remote_ip)
        assert exc_info.value.field == field

    def test_empty_remote_ip_dropped(self):
        assert "remoteip" not in build_verify_request("s3cret", "tok", "").to_form()


# ── ReCaptchaProvider (sync) ──────────────────────────────────────────────────


class TestReCaptchaProvider:
    def test_success(self, settings):
        provider, _ = _sync_provider(settings, json_reply({"success": True}))
        result = provider.verify("s3cret", "good-token")
        assert result.success is True
        assert result.error_codes == []
        assert result.error is None

    def test_rejection_returned_as_data(self, settings):
        provider, _ = _sync_provider(
            settings,
            json_reply({"success": False, "error-codes": ["invalid-input-response"]}),
        )
        result = provider.verify("s3cret", "bad-token")
        assert result.success is False
        assert "invalid-input-response" in result.error_codes
        assert result.error == "invalid-input-response"

    def test_rejection_keeps_all_error_codes(self, settings):
        codes = ["invalid-input-secret", "timeout-or-duplicate"]
        provider, _ = _sync_provider(
            settings, json_reply({"success": False, "error-codes": codes})
        )
        assert provider.verify("s3cret", "tok").error_codes == codes

    def test_extra_reply_fields_parsed(self, settings):
        provider, _ = _sync_provider(
            settings,
            json_reply(
                {
                    "success": True,
                    "challenge_ts": "2024-01-01T00:00:00Z",
                    "hostname": "example.com",
                }
            ),
        )
        result = provider.verify("s3cret", "tok")
        assert result.hostname == "example.com"
        assert result.challenge_ts == "2024-01-01T00:00:00Z"

    def test_posts_form_to_configured_endpoint(self, settings):
        provider, transport = _sync_provider(settings, json_reply({"success": True}))
        provider.verify("s3cret", "tok", "203.0.113.7")
        request = transport.requests[0]
        assert request.method == "POST"
        assert str(request.url) == VERIFY_URL
        assert request.headers["content-type"] == "application/x-www-form-urlencoded"
        assert transport.last_form == {
            "secret": ["s3cret"],
            "response": ["tok"],
            "remoteip": ["203.0.113.7"],
        }

    def test_remoteip_absent_when_omitted(self, settings):
        provider, transport = _sync_provider(settings, json_reply({"success": True}))
        provider.verify("s3cret", "tok")
        assert "remoteip" not in transport.last_form
        assert b"remoteip" not in transport.requests[0].content

    def test_remoteip_absent_when_empty(self, settings):
        provider, transport = _sync_provider(settings, json_reply({"success": True}))
        provider.verify("s3cret", "tok", "")
        assert b"remoteip" not in transport.requests[0].content

    def test_non_string_token_makes_no_request(self, settings):
        provider, transport = _sync_provider(settings, json_reply({"success": True}))
        with pytest.raises(RecaptchaError):
            provider.verify("s3cret", 12345)
        assert transport.requests == []

    def test_sends_user_agent(self, settings):
        provider, transport = _sync_provider(settings, json_reply({"success": True}))
        provider.verify("s3cret", "tok")
        assert transport.requests[0].headers["user-agent"] == "test-agent/1.0"

    @pytest.mark.parametrize(
        "secret, token",
        [(None, "tok"), ("", "tok"), ("s3cret", None), ("s3cret", "")],
        ids=["no_secret", "empty_secret", "no_token", "empty_token"],
    )
    def test_invalid_arguments_make_no_request(self, settings, secret, token):
        provider, transport = _sync_provider(settings, json_reply({"success": True}))
        with pytest.raises(ValidationError):
            provider.verify(secret, token)
        assert transport.requests == []

    @pytest.mark.parametrize(
        "exc_type",
        [httpx.ConnectError, httpx.ReadTimeout],
        ids=["connection_refused", "timeout"],
    )
    def test_transport_failure_raises_network_error(self, settings, exc_type):
        provider, _ = _sync_provider(settings, failing_reply(exc_type))
        with pytest.raises(NetworkError) as exc_info:
            provider.verify("s3cret", "tok")
        assert isinstance(exc_info.value.__cause__, exc_type)

    def test_http_error_status_raises_network_error(self, settings):
        provider, _ = _sync_provider(settings, text_reply("bad gateway", 502))
        with pytest.raises(NetworkError) as exc_info:
            provider.verify("s3cret", "tok")
        assert exc_info.value.details == {"status_code": 502}

    def test_null_error_codes_is_rejection(self, settings):
        provider, _ = _sync_provider(
            settings, json_reply({"success": False, "error-codes": None})
        )
        result = provider.verify("s3cret", "tok")
        assert result.success is False
        assert result.error_codes == []

    @pytest.mark.parametrize(
        "body", ["<html>oops</html>", "[1, 2]"], ids=["not_json", "not_object"]
    )
    def test_unreadable_body_raises_network_error(self, settings, body):
        provider, _ = _sync_provider(settings, text_reply(body))
        with pytest.raises(NetworkError):
            provider.verify("s3cret", "tok")


# ── AsyncReCaptchaProvider ────────────────────────────────────────────────────


class TestAsyncReCaptchaProvider:
    async def test_success(self, settings):
        provider, _ = _async_provider(settings, json_reply({"success": True}))
        result = await provider.verify("s3cret", "good-token")
        assert result.success is True
        assert result.error_codes == []

    async def test_rejection(self, settings):
        provider, _ = _async_provider(
            settings,
            json_reply({"success": False, "error-codes": ["invalid-input-response"]}),
        )
        result = await provider.verify("s3cret", "bad-token")
        assert result.success is False
        assert result.error_codes == ["invalid-input-response"]

    async def test_remoteip_only_when_given(self, settings):
        provider, transport = _async_provider(settings, json_reply({"success": True}))
        await provider.verify("s3cret", "tok")
        await provider.verify("s3cret", "tok", "198.51.100.1")
        assert b"remoteip" not in transport.requests[0].content
        assert transport.last_form["remoteip"] == ["198.51.100.1"]

    async def test_invalid_arguments_make_no_request(self, settings):
        provider, transport = _async_provider(settings, json_reply({"success": True}))
        with pytest.raises(ValidationError):
            await provider.verify("s3cret", "")
        assert transport.requests == []

    async def test_transport_failure_raises_network_error(self, settings):
        provider, _ = _async_provider(settings, failing_reply())
        with pytest.raises(NetworkError):
            await provider.verify("s3cret", "tok")
