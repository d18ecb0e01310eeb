"""
Codex GraphQL HTTP client

Executes query and mutation documents against the Codex API.
- CodexClient: blocking client on a requests.Session
- AsyncCodexClient: httpx.AsyncClient twin for async applications

Network failures and timeouts are retried with linear back-off; GraphQL
errors returned by the server are raised immediately.
"""

import asyncio
import logging
import time
from typing import Any, Dict, List, Optional

import httpx
import requests

from ..config import CodexConfig

logger = logging.getLogger(__name__)


class CodexClientError(Exception):
    """Codex API error"""
    pass


class GraphQLResponseError(CodexClientError):
    """The response carried an errors[] array

    data holds whatever partial result the server returned alongside.
    """

    def __init__(self, errors: List[Dict[str, Any]], data: Optional[Dict[str, Any]] = None):
        self.errors = errors
        self.data = data
        messages = [e.get("message", str(e)) if isinstance(e, dict) else str(e) for e in errors]
        super().__init__(f"GraphQL error: {'; '.join(messages)}")


def build_payload(document: str, variables: Any = None) -> Dict[str, Any]:
    """Request body; variables may be a dict or an input dataclass"""
    payload: Dict[str, Any] = {"query": document}
    if variables is not None and hasattr(variables, "to_dict"):
        variables = variables.to_dict()
    if variables:
        payload["variables"] = variables
    return payload


def parse_response(body: Any) -> Dict[str, Any]:
    """Extract data from a GraphQL response body

    Raises:
        GraphQLResponseError: errors[] present
        CodexClientError: body has no data
    """
    if not isinstance(body, dict):
        raise CodexClientError("Response body is not a JSON object")
    if body.get("errors"):
        raise GraphQLResponseError(body["errors"], body.get("data"))
    if body.get("data") is None:
        raise CodexClientError("Response has no 'data' field")
    return body["data"]


class CodexClient:
    """Blocking Codex API client

    Usage:
        client = CodexClient(CodexConfig(api_key="..."))
        data = client.execute(GET_NETWORKS)
    """

    def __init__(self, config: Optional[CodexConfig] = None, session: Optional[requests.Session] = None):
        self.config = config or CodexConfig.from_env()
        self._session = session or requests.Session()

    @property
    def endpoint(self) -> str:
        return self.config.api_url

    def _headers(self) -> Dict[str, str]:
        if not self.config.api_key:
            raise CodexClientError(
                "An API key is required. Set the CODEX_API_KEY environment variable "
                "or pass api_key explicitly."
            )
        return {"Content-Type": "application/json", **self.config.auth_headers}

    def execute(self, document: str, variables: Any = None) -> Dict[str, Any]:
        """Execute a query or mutation

        Args:
            document: GraphQL document
            variables: Operation variables (dict or input dataclass)

        Returns:
            The response's data object

        Raises:
            GraphQLResponseError: The server returned GraphQL errors
            CodexClientError: Network failure after all retries, or a malformed response
        """
        payload = build_payload(document, variables)
        headers = self._headers()
        max_retries = max(1, self.config.max_retries)

        last_error: Optional[CodexClientError] = None
        for attempt in range(max_retries):
            try:
                response = self._session.post(
                    self.endpoint,
                    json=payload,
                    headers=headers,
                    timeout=self.config.timeout,
                )
                response.raise_for_status()
                body = response.json()
            except requests.exceptions.Timeout:
                last_error = CodexClientError(f"Request timed out ({self.config.timeout}s)")
            except requests.exceptions.HTTPError as e:
                status = e.response.status_code if e.response is not None else None
                if status is not None and 400 <= status < 500 and status != 429:
                    raise CodexClientError(f"HTTP {status}: {e}") from e
                last_error = CodexClientError(f"HTTP error: {e}")
            except requests.exceptions.JSONDecodeError as e:
                raise CodexClientError(f"Response is not valid JSON: {e}") from e
            except requests.exceptions.RequestException as e:
                last_error = CodexClientError(f"Network error: {e}")
            else:
                return parse_response(body)

            logger.warning("Request failed (attempt %d/%d): %s", attempt + 1, max_retries, last_error)
            if attempt < max_retries - 1:
                time.sleep(self.config.retry_delay * (attempt + 1))

        raise last_error

    def close(self):
        self._session.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()


class AsyncCodexClient:
    """Async Codex API client on httpx

    Usage:
        async with AsyncCodexClient(config) as client:
            data = await client.execute(TOKENS_PAGE, {"limit": 15})
    """

    def __init__(self, config: Optional[CodexConfig] = None, client: Optional[httpx.AsyncClient] = None):
        self.config = config or CodexConfig.from_env()
        self._client = client or httpx.AsyncClient(timeout=self.config.timeout)

    async def execute(self, document: str, variables: Any = None) -> Dict[str, Any]:
        """Async counterpart of CodexClient.execute"""
        if not self.config.api_key:
            raise CodexClientError(
                "An API key is required. Set the CODEX_API_KEY environment variable "
                "or pass api_key explicitly."
            )
        payload = build_payload(document, variables)
        headers = {"Content-Type": "application/json", **self.config.auth_headers}
        max_retries = max(1, self.config.max_retries)

        last_error: Optional[CodexClientError] = None
        for attempt in range(max_retries):
            try:
                response = await self._client.post(self.config.api_url, json=payload, headers=headers)
                response.raise_for_status()
                body = response.json()
            except httpx.TimeoutException:
                last_error = CodexClientError(f"Request timed out ({self.config.timeout}s)")
            except httpx.HTTPStatusError as e:
                status = e.response.status_code
                if 400 <= status < 500 and status != 429:
                    raise CodexClientError(f"HTTP {status}: {e}") from e
                last_error = CodexClientError(f"HTTP error: {e}")
            except httpx.HTTPError as e:
                last_error = CodexClientError(f"Network error: {e}")
            except ValueError as e:
                raise CodexClientError(f"Response is not valid JSON: {e}") from e
            else:
                return parse_response(body)

            logger.warning("Request failed (attempt %d/%d): %s", attempt + 1, max_retries, last_error)
            if attempt < max_retries - 1:
                await asyncio.sleep(self.config.retry_delay * (attempt + 1))

        raise last_error

    async def aclose(self):
        await self._client.aclose()

    async def __aenter__(self):
        return self

    async def __aexit__(self, *exc):
        await self.aclose()
