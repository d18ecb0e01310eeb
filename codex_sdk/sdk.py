"""
Codex SDK facade

    sdk = Codex(api_key="...")
    sdk.queries.get_networks()
    sdk.mutations.create_api_tokens({"input": {"expiresIn": 3600000}})
    async for result in sdk.subscriptions.on_price_updated({"address": ..., "networkId": 1}):
        ...

The queries / mutations / subscriptions namespaces are built from the
generated `.graphql` documents, one attribute per document. Arbitrary
documents can be run with query(), mutation() and subscribe().
"""

import logging
from pathlib import Path
from typing import Any, AsyncIterator, Callable, Dict, List, Optional, Union

import requests

from .config import CodexConfig
from .constants import OPERATION_DIRECTORIES, RESOURCES_DIR
from .data.documents import CREATE_API_TOKENS, GET_NETWORKS, LAUNCHPAD_TOKENS, ON_LAUNCHPAD_TOKEN_EVENT_BATCH, TOKENS_PAGE
from .data.graph_client import CodexClient, GraphQLResponseError
from .data.subscriptions import ExecutionResult, Sink, SubscriptionClient
from .data.types import (
    ApiToken,
    CreateApiTokensInput,
    LaunchpadTokenEvent,
    LaunchpadTokensVariables,
    Network,
    OnLaunchpadTokenEventBatchVariables,
    TokenFilterConnection,
    TokensPageVariables,
)
from .schema.generator import load_operations, operation_method_name

logger = logging.getLogger(__name__)


class OperationNamespace:
    """Generated operations of one kind, exposed as snake_case attributes

    Each attribute is a function taking the operation variables and handing
    the document to the executor (execute for queries and mutations,
    subscribe for subscriptions).
    """

    def __init__(self, kind: str, documents: Dict[str, str], executor: Callable):
        self.kind = kind
        self._executor = executor
        self._documents = {operation_method_name(name): doc for name, doc in documents.items()}

    def names(self) -> List[str]:
        return sorted(self._documents)

    def document(self, name: str) -> str:
        return self._documents[name]

    def __contains__(self, name: str) -> bool:
        return name in self._documents

    def __len__(self) -> int:
        return len(self._documents)

    def __dir__(self):
        return list(super().__dir__()) + self.names()

    def __getattr__(self, name: str):
        documents = self.__dict__.get("_documents", {})
        if name not in documents:
            raise AttributeError(f"No generated {self.__dict__.get('kind', '')} named '{name}'")
        document = documents[name]
        executor = self._executor

        def operation(variables: Any = None):
            return executor(document, variables)

        operation.__name__ = name
        operation.__doc__ = document
        return operation


class Codex:
    """Codex API client

    Args:
        api_key: API key or "Bearer <short-lived token>"; CODEX_API_KEY when omitted
        api_url: GraphQL HTTP endpoint
        ws_url: GraphQL WebSocket endpoint
        operations_dir: Directory holding generated_{queries,mutations,subscriptions}
        config: Complete config, overrides the arguments above
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        api_url: Optional[str] = None,
        ws_url: Optional[str] = None,
        operations_dir: Optional[Union[str, Path]] = None,
        config: Optional[CodexConfig] = None,
        session: Optional[requests.Session] = None,
        connect: Optional[Callable] = None,
    ):
        self.config = config or CodexConfig.from_env(api_key=api_key, api_url=api_url, ws_url=ws_url)
        self.client = CodexClient(self.config, session=session)
        self.subscription_client = SubscriptionClient(self.config, connect=connect)

        root = Path(operations_dir) if operations_dir else RESOURCES_DIR
        self.queries = OperationNamespace(
            "query", load_operations(root / OPERATION_DIRECTORIES["query"]), self.query
        )
        self.mutations = OperationNamespace(
            "mutation", load_operations(root / OPERATION_DIRECTORIES["mutation"]), self.mutation
        )
        self.subscriptions = OperationNamespace(
            "subscription", load_operations(root / OPERATION_DIRECTORIES["subscription"]), self.subscribe
        )
        logger.debug(
            "Loaded %d queries, %d mutations, %d subscriptions from %s",
            len(self.queries), len(self.mutations), len(self.subscriptions), root,
        )

    # ------------------------------------------------------------------
    # Raw execution
    # ------------------------------------------------------------------

    def query(self, document: str, variables: Any = None) -> Dict[str, Any]:
        return self.client.execute(document, variables)

    def mutation(self, document: str, variables: Any = None) -> Dict[str, Any]:
        return self.client.execute(document, variables)

    def subscribe(self, document: str, variables: Any = None) -> AsyncIterator[ExecutionResult]:
        return self.subscription_client.subscribe(document, variables)

    async def run_subscription(self, document: str, variables: Any, sink: Sink) -> None:
        await self.subscription_client.run(document, variables, sink)

    # ------------------------------------------------------------------
    # Typed helpers
    # ------------------------------------------------------------------

    def launchpad_tokens(self, variables: Optional[LaunchpadTokensVariables] = None) -> TokenFilterConnection:
        """Launchpad token page (filterTokens with count and page)"""
        data = self.query(LAUNCHPAD_TOKENS, variables or LaunchpadTokensVariables())
        return TokenFilterConnection.from_dict(data.get("filterTokens"))

    def tokens_page(self, variables: Optional[TokensPageVariables] = None) -> TokenFilterConnection:
        """Token list of a network (filterTokens results only)"""
        data = self.query(TOKENS_PAGE, variables or TokensPageVariables())
        return TokenFilterConnection.from_dict(data.get("filterTokens"))

    def get_networks(self) -> List[Network]:
        data = self.query(GET_NETWORKS)
        return [Network.from_dict(n) for n in data.get("getNetworks") or [] if n]

    def create_api_tokens(self, token_input: CreateApiTokensInput) -> List[ApiToken]:
        data = self.mutation(CREATE_API_TOKENS, {"input": token_input.to_dict()})
        return [ApiToken.from_dict(t) for t in data.get("createApiTokens") or [] if t]

    async def on_launchpad_token_event_batch(
        self,
        variables: Optional[OnLaunchpadTokenEventBatchVariables] = None,
    ) -> AsyncIterator[List[LaunchpadTokenEvent]]:
        """Yield each batch of launchpad token events

        Raises:
            GraphQLResponseError: A `next` payload carried errors
        """
        async for result in self.subscribe(ON_LAUNCHPAD_TOKEN_EVENT_BATCH, variables):
            if result.errors:
                raise GraphQLResponseError(result.errors, result.data)
            batch = (result.data or {}).get("onLaunchpadTokenEventBatch") or []
            yield [LaunchpadTokenEvent.from_dict(event) for event in batch if event]

    def close(self):
        self.client.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()
