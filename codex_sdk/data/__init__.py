"""
Data layer for the Codex SDK

HTTP and WebSocket clients, shipped operation documents and their data types
"""

from .types import (
    ApiToken,
    EnhancedToken,
    LaunchpadData,
    LaunchpadTokenEvent,
    LaunchpadTokenEventType,
    Network,
    NumberFilter,
    RankingDirection,
    TokenFilterConnection,
    TokenFilterResult,
    TokenFilters,
    TokenRanking,
    TokenRankingAttribute,
)
from .graph_client import AsyncCodexClient, CodexClient, CodexClientError, GraphQLResponseError
from .subscriptions import ExecutionResult, Sink, SubscriptionClient, SubscriptionError
