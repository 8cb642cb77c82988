"""Tests for the Graph API client adapter."""

import json

import httpx
import pytest
import pytest_asyncio

from metagate.connectors.meta.client import MetaClient
from metagate.core.errors import TransportError, UpstreamError

BASE_URL = "https://graph.facebook.com/v18.0"


@pytest_asyncio.fixture
async def meta_client(graph):
    client = MetaClient("secret-token", BASE_URL, transport=graph.transport)
    yield client
    await client.close()


class TestRequests:
    """Outbound request shape."""

    @pytest.mark.asyncio
    async def test_get_appends_access_token(self, meta_client, graph):
        graph.respond("/42", json={"id": "42"})

        result = await meta_client.get("/42", {"fields": "id,name"})

        assert result == {"id": "42"}
        params = graph.last.url.params
        assert params["access_token"] == "secret-token"
        assert params["fields"] == "id,name"
        assert graph.last.url.host == "graph.facebook.com"

    @pytest.mark.asyncio
    async def test_none_params_are_dropped(self, meta_client, graph):
        await meta_client.get("/42/tabs", {"fields": "id", "limit": None})

        assert "limit" not in graph.last.url.params

    @pytest.mark.asyncio
    async def test_post_sends_json_body(self, meta_client, graph):
        graph.respond("/act_1/reach_estimate", json={"data": {"users": 10}}, method="POST")
        body = {"targeting_spec": {"geo_locations": {"countries": ["US"]}}}

        result = await meta_client.post("/act_1/reach_estimate", body)

        assert result == {"data": {"users": 10}}
        assert graph.last.method == "POST"
        assert json.loads(graph.last.content) == body
        assert graph.last.url.params["access_token"] == "secret-token"

    @pytest.mark.asyncio
    async def test_response_returned_verbatim_with_paging(self, meta_client, graph):
        page = {"data": [{"id": "1"}], "paging": {"cursors": {"after": "abc"}}}
        graph.respond("/42/posts", json=page)

        assert await meta_client.get("/42/posts") == page


class TestErrors:
    """Transport and upstream failures."""

    @pytest.mark.asyncio
    async def test_structured_upstream_error(self, meta_client, graph):
        graph.respond(
            "/42",
            status=401,
            json={"error": {"type": "OAuthException", "message": "Invalid token", "code": 190, "fbtrace_id": "xyz"}},
        )

        with pytest.raises(UpstreamError) as exc_info:
            await meta_client.get("/42")

        error = exc_info.value
        assert error.status_code == 401
        assert error.error_type == "OAuthException"
        assert error.message == "Invalid token"
        assert error.code == 190
        assert error.fbtrace_id == "xyz"
        assert error.is_structured

    @pytest.mark.asyncio
    async def test_unstructured_upstream_error(self, meta_client, graph):
        graph.respond("/42", status=502, json={"unexpected": True})

        with pytest.raises(UpstreamError) as exc_info:
            await meta_client.get("/42")

        assert exc_info.value.status_code == 502
        assert not exc_info.value.is_structured

    @pytest.mark.asyncio
    async def test_dns_failure_is_unreachable(self, meta_client, graph):
        graph.fail_with(
            lambda request: httpx.ConnectError(
                "[Errno -2] Name or service not known", request=request
            )
        )

        with pytest.raises(TransportError) as exc_info:
            await meta_client.get("/42")

        assert exc_info.value.unreachable
        assert exc_info.value.host == "graph.facebook.com"
        assert isinstance(exc_info.value.cause, httpx.ConnectError)

    @pytest.mark.asyncio
    async def test_timeout_is_not_unreachable(self, meta_client, graph):
        graph.fail_with(lambda request: httpx.ReadTimeout("timed out", request=request))

        with pytest.raises(TransportError) as exc_info:
            await meta_client.get("/42")

        assert exc_info.value.timed_out
        assert not exc_info.value.unreachable
        assert exc_info.value.status_code == 504

    @pytest.mark.asyncio
    async def test_single_attempt_no_retry(self, meta_client, graph):
        graph.respond("/42", status=500, json={"error": {"message": "boom", "code": 1}})

        with pytest.raises(UpstreamError):
            await meta_client.get("/42")

        assert len(graph.requests) == 1


def test_default_timeout_is_thirty_seconds():
    client = MetaClient("t", BASE_URL)
    assert client.timeout == 30.0
