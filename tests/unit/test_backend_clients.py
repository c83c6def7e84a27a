"""
Unit Tests for SummarizationClient and DispatchClient

Requests are answered by an httpx.MockTransport, so no network is used.
"""

import json

import httpx
import pytest

from services.backend_client import BackendError, DEFAULT_API_BASE_URL
from services.dispatch_client import DispatchClient
from services.summarization_client import SummarizationClient


class TestSummarizationClient:
    """Tests for POST /api/summarize."""

    @pytest.mark.asyncio
    async def test_success_returns_summary(self, summarization_client, fake_backend):
        result = await summarization_client.summarize("Transcript text", "Bullet points")

        assert result == "Team agreed on X"
        assert fake_backend.bodies("/api/summarize") == [
            {"transcript": "Transcript text", "prompt": "Bullet points"}
        ]

    @pytest.mark.asyncio
    async def test_request_is_json_post_to_endpoint(self, summarization_client, fake_backend):
        await summarization_client.summarize("t", "p")

        request = fake_backend.requests[0]
        assert request.method == "POST"
        assert str(request.url) == "http://backend.test/api/summarize"
        assert request.headers["content-type"] == "application/json"

    @pytest.mark.asyncio
    async def test_server_error_text_is_used(self, summarization_client, fake_backend):
        fake_backend.responses["/api/summarize"] = httpx.Response(
            500, json={"error": "Model overloaded"}
        )

        with pytest.raises(BackendError) as exc_info:
            await summarization_client.summarize("t", "p")

        assert str(exc_info.value) == "Model overloaded"

    @pytest.mark.asyncio
    async def test_missing_error_field_uses_fallback(self, summarization_client, fake_backend):
        fake_backend.responses["/api/summarize"] = httpx.Response(400, json={})

        with pytest.raises(BackendError) as exc_info:
            await summarization_client.summarize("t", "p")

        assert str(exc_info.value) == "Failed to generate summary"

    @pytest.mark.asyncio
    async def test_non_json_error_body_uses_fallback(self, summarization_client, fake_backend):
        fake_backend.responses["/api/summarize"] = httpx.Response(
            502, text="<html>Bad Gateway</html>"
        )

        with pytest.raises(BackendError) as exc_info:
            await summarization_client.summarize("t", "p")

        assert str(exc_info.value) == "Failed to generate summary"

    @pytest.mark.asyncio
    async def test_transport_failure_uses_fallback(self, summarization_client, fake_backend):
        fake_backend.responses["/api/summarize"] = httpx.ConnectError("Connection refused")

        with pytest.raises(BackendError) as exc_info:
            await summarization_client.summarize("t", "p")

        assert str(exc_info.value) == "Failed to generate summary"

    @pytest.mark.asyncio
    async def test_success_without_summary_field_is_error(self, summarization_client, fake_backend):
        fake_backend.responses["/api/summarize"] = httpx.Response(200, json={"text": "?"})

        with pytest.raises(BackendError) as exc_info:
            await summarization_client.summarize("t", "p")

        assert str(exc_info.value) == "Failed to generate summary"

    @pytest.mark.asyncio
    async def test_redirect_is_followed(self, summarization_client, fake_backend):
        fake_backend.responses["/api/summarize"] = httpx.Response(
            307, headers={"Location": "http://backend.test/v2/summarize"}
        )
        fake_backend.responses["/v2/summarize"] = httpx.Response(
            200, json={"summary": "Moved but fine"}
        )

        result = await summarization_client.summarize("t", "p")

        assert result == "Moved but fine"
        # 307 keeps the method and body
        assert fake_backend.bodies("/v2/summarize") == [{"transcript": "t", "prompt": "p"}]
        assert fake_backend.requests[-1].method == "POST"

    @pytest.mark.asyncio
    async def test_failure_logged_once_at_error(self, summarization_client, fake_backend, caplog):
        fake_backend.responses["/api/summarize"] = httpx.Response(500, json={"error": "boom"})

        with caplog.at_level("DEBUG"):
            with pytest.raises(BackendError):
                await summarization_client.summarize("t", "p")

        errors = [r for r in caplog.records if r.levelname == "ERROR"]
        assert len(errors) == 1
        assert "boom" in errors[0].getMessage()


class TestDispatchClient:
    """Tests for POST /api/send-email."""

    @pytest.mark.asyncio
    async def test_success_returns_message(self, dispatch_client, fake_backend):
        result = await dispatch_client.send(["a@x.com", "b@y.com"], "Summary body")

        assert result == "Email sent to 1 recipient"
        assert fake_backend.bodies("/api/send-email") == [{
            "emails": ["a@x.com", "b@y.com"],
            "summary": "Summary body",
            "subject": "Meeting Summary",
        }]

    @pytest.mark.asyncio
    async def test_server_error_text_is_used(self, dispatch_client, fake_backend):
        fake_backend.responses["/api/send-email"] = httpx.Response(
            500, json={"error": "SMTP timeout"}
        )

        with pytest.raises(BackendError) as exc_info:
            await dispatch_client.send(["a@x.com"], "body")

        assert str(exc_info.value) == "SMTP timeout"

    @pytest.mark.asyncio
    async def test_non_string_error_uses_fallback(self, dispatch_client, fake_backend):
        fake_backend.responses["/api/send-email"] = httpx.Response(
            500, json={"error": {"code": 42}}
        )

        with pytest.raises(BackendError) as exc_info:
            await dispatch_client.send(["a@x.com"], "body")

        assert str(exc_info.value) == "Failed to send email"

    @pytest.mark.asyncio
    async def test_timeout_uses_fallback(self, dispatch_client, fake_backend):
        fake_backend.responses["/api/send-email"] = httpx.ReadTimeout("timed out")

        with pytest.raises(BackendError) as exc_info:
            await dispatch_client.send(["a@x.com"], "body")

        assert str(exc_info.value) == "Failed to send email"


class TestClientConfiguration:
    """Tests for base URL resolution and client ownership."""

    def test_base_url_from_environment(self, monkeypatch, http_client):
        monkeypatch.setenv("API_BASE_URL", "https://notes.example.com/")

        client = SummarizationClient(http_client=http_client)

        assert client.url == "https://notes.example.com/api/summarize"

    def test_default_base_url(self, monkeypatch, http_client):
        monkeypatch.delenv("API_BASE_URL", raising=False)

        client = DispatchClient(http_client=http_client)

        assert client.url == f"{DEFAULT_API_BASE_URL}/api/send-email"

    def test_explicit_base_url_wins(self, monkeypatch, http_client):
        monkeypatch.setenv("API_BASE_URL", "https://ignored.example.com")

        client = DispatchClient(base_url="http://other:8080", http_client=http_client)

        assert client.url == "http://other:8080/api/send-email"

    @pytest.mark.asyncio
    async def test_injected_client_is_not_closed(self, http_client):
        client = SummarizationClient(base_url="http://backend.test", http_client=http_client)

        await client.aclose()

        assert not http_client.is_closed

    @pytest.mark.asyncio
    async def test_owned_client_is_closed(self):
        client = SummarizationClient(base_url="http://backend.test")

        await client.aclose()

        assert client.client.is_closed
