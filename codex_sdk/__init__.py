"""
Codex SDK

Python client for the Codex GraphQL market-data API: generated operation
documents for every root field, typed helpers for the launchpad and token
list operations, subscriptions over WebSocket and short-lived API tokens.
"""

__version__ = "0.1.0"

from .log import LOG_FORMAT, configure_logging
from .config import CodexConfig
from .constants import NETWORK_IDS
from .data.graph_client import AsyncCodexClient, CodexClient, CodexClientError, GraphQLResponseError
from .data.subscriptions import ExecutionResult, Sink, SubscriptionError
from .sdk import Codex, OperationNamespace
from .auth import ShortLivedTokenManager
from .launchpad import ColumnFilters, FilterBounds, LaunchpadColumn, LaunchpadFeed
