"""
HTTP client tests

The transport is replaced with mocks: a requests.Session for CodexClient and
an httpx.MockTransport for AsyncCodexClient.
"""

import json
from unittest.mock import MagicMock, patch

import httpx
import pytest
import requests

from ..config import CodexConfig
from ..data.documents import GET_NETWORKS
from ..data.graph_client import (
    AsyncCodexClient,
    CodexClient,
    CodexClientError,
    GraphQLResponseError,
    build_payload,
    parse_response,
)
from ..data.types import NumberFilter, TokenFilters, TokensPageVariables


def make_response(body=None, status=200):
    response = MagicMock()
    response.status_code = status
    response.json.return_value = body
    if status >= 400:
        error = requests.exceptions.HTTPError(f"{status} Error", response=response)
        response.raise_for_status.side_effect = error
    return response


@pytest.fixture
def config():
    return CodexConfig(api_key="test-key", max_retries=3, retry_delay=0)


class TestPayload:
    """build_payload / parse_response"""

    def test_dict_variables(self):
        assert build_payload("query", {"limit": 5}) == {"query": "query", "variables": {"limit": 5}}

    def test_dataclass_variables(self):
        variables = TokensPageVariables(filters=TokenFilters(network=[1], market_cap=NumberFilter(gte=10)), limit=15)
        assert build_payload("q", variables)["variables"] == {
            "filters": {"network": [1], "marketCap": {"gte": 10}},
            "limit": 15,
        }

    def test_no_variables(self):
        assert build_payload("q") == {"query": "q"}
        assert build_payload("q", {}) == {"query": "q"}

    def test_data_returned(self):
        assert parse_response({"data": {"getNetworks": []}}) == {"getNetworks": []}

    def test_errors_keep_partial_data(self):
        with pytest.raises(GraphQLResponseError) as excinfo:
            parse_response({"data": {"a": 1}, "errors": [{"message": "boom"}, {"message": "bang"}]})
        assert excinfo.value.data == {"a": 1}
        assert "boom; bang" in str(excinfo.value)

    def test_missing_data(self):
        with pytest.raises(CodexClientError):
            parse_response({})

    def test_not_an_object(self):
        with pytest.raises(CodexClientError):
            parse_response(["data"])


class TestCodexClient:
    """Blocking client"""

    def test_execute(self, config):
        session = MagicMock()
        session.post.return_value = make_response({"data": {"getNetworks": [{"id": 1, "name": "Ethereum"}]}})

        client = CodexClient(config, session=session)
        data = client.execute(GET_NETWORKS)

        assert data["getNetworks"][0]["name"] == "Ethereum"
        args, kwargs = session.post.call_args
        assert args[0] == config.api_url
        assert kwargs["json"] == {"query": GET_NETWORKS}
        assert kwargs["headers"]["Authorization"] == "test-key"
        assert kwargs["timeout"] == config.timeout

    def test_missing_api_key(self):
        client = CodexClient(CodexConfig(api_key=None), session=MagicMock())
        with pytest.raises(CodexClientError, match="API key"):
            client.execute(GET_NETWORKS)

    def test_retries_timeouts(self, config):
        session = MagicMock()
        session.post.side_effect = [
            requests.exceptions.Timeout(),
            requests.exceptions.ConnectionError("reset"),
            make_response({"data": {"ok": True}}),
        ]

        with patch("codex_sdk.data.graph_client.time.sleep") as sleep:
            assert CodexClient(config, session=session).execute("{ ok }") == {"ok": True}
        assert session.post.call_count == 3
        assert sleep.call_count == 2

    def test_gives_up_after_max_retries(self, config):
        session = MagicMock()
        session.post.side_effect = requests.exceptions.Timeout()

        with pytest.raises(CodexClientError, match="timed out"):
            CodexClient(config, session=session).execute("{ ok }")
        assert session.post.call_count == 3

    def test_server_errors_are_retried(self, config):
        session = MagicMock()
        session.post.side_effect = [make_response(status=502), make_response({"data": {"ok": 1}})]
        assert CodexClient(config, session=session).execute("{ ok }") == {"ok": 1}

    def test_client_errors_are_not_retried(self, config):
        session = MagicMock()
        session.post.return_value = make_response(status=401)

        with pytest.raises(CodexClientError, match="401"):
            CodexClient(config, session=session).execute("{ ok }")
        assert session.post.call_count == 1

    def test_graphql_errors_are_not_retried(self, config):
        session = MagicMock()
        session.post.return_value = make_response({"errors": [{"message": "Unauthorized"}]})

        with pytest.raises(GraphQLResponseError):
            CodexClient(config, session=session).execute("{ ok }")
        assert session.post.call_count == 1

    def test_invalid_json(self, config):
        response = make_response()
        response.json.side_effect = requests.exceptions.JSONDecodeError("Expecting value", "", 0)
        session = MagicMock()
        session.post.return_value = response

        with pytest.raises(CodexClientError, match="not valid JSON"):
            CodexClient(config, session=session).execute("{ ok }")
        assert session.post.call_count == 1

    def test_context_manager_closes_session(self, config):
        session = MagicMock()
        with CodexClient(config, session=session):
            pass
        session.close.assert_called_once()


class TestAsyncCodexClient:
    """httpx client"""

    @pytest.mark.asyncio
    async def test_execute(self, config):
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["auth"] = request.headers["Authorization"]
            seen["body"] = json.loads(request.content)
            return httpx.Response(200, json={"data": {"getNetworks": []}})

        transport = httpx.AsyncClient(transport=httpx.MockTransport(handler))
        async with AsyncCodexClient(config, client=transport) as client:
            assert await client.execute(GET_NETWORKS) == {"getNetworks": []}

        assert seen["auth"] == "test-key"
        assert seen["body"] == {"query": GET_NETWORKS}

    @pytest.mark.asyncio
    async def test_retries_server_errors(self, config):
        responses = iter([
            httpx.Response(503),
            httpx.Response(200, json={"data": {"ok": True}}),
        ])
        transport = httpx.AsyncClient(transport=httpx.MockTransport(lambda request: next(responses)))

        async with AsyncCodexClient(config, client=transport) as client:
            assert await client.execute("{ ok }") == {"ok": True}

    @pytest.mark.asyncio
    async def test_graphql_errors(self, config):
        transport = httpx.AsyncClient(transport=httpx.MockTransport(
            lambda request: httpx.Response(200, json={"errors": [{"message": "bad"}]})
        ))
        async with AsyncCodexClient(config, client=transport) as client:
            with pytest.raises(GraphQLResponseError, match="bad"):
                await client.execute("{ ok }")

    @pytest.mark.asyncio
    async def test_missing_api_key(self):
        async with AsyncCodexClient(CodexConfig(api_key=None), client=httpx.AsyncClient()) as client:
            with pytest.raises(CodexClientError):
                await client.execute("{ ok }")


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
