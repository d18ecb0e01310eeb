"""
GraphQL schema types

Generated from the Codex introspection schema by codex_sdk.schema.type_generator.
Do not edit by hand; run scripts/build_types.py instead.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, List, Optional, Union

from codex_sdk.schema.runtime import GraphQLInput, GraphQLObject


# Scalars
ID = str
String = str
Boolean = bool
Int = int
Float = float
JSON = Any
Void = None
join__FieldSet = str
link__Import = str


# Enumerations
class LaunchpadTokenEventType(str, Enum):
    """Type of a launchpad token event."""
    CREATED = "Created"
    DEPLOYED = "Deployed"
    UPDATED = "Updated"
    COMPLETED = "Completed"
    MIGRATED = "Migrated"
    UNCONFIRMED_DEPLOYED = "UnconfirmedDeployed"
    UNCONFIRMED_METADATA = "UnconfirmedMetadata"


class RankingDirection(str, Enum):
    ASC = "ASC"
    DESC = "DESC"


class TokenRankingAttribute(str, Enum):
    CREATED_AT = "createdAt"
    GRADUATION_PERCENT = "graduationPercent"
    LAUNCHPAD_MIGRATED_AT = "launchpadMigratedAt"
    MARKET_CAP = "marketCap"
    HOLDERS = "holders"
    LIQUIDITY = "liquidity"
    VOLUME24 = "volume24"
    CHANGE1 = "change1"
    TXN_COUNT1 = "txnCount1"
    TRENDING_SCORE = "trendingScore"


# Inputs
@dataclass
class CreateApiTokensInput(GraphQLInput):
    expiresIn: Optional[int] = None
    count: Optional[int] = None
    requestLimit: Optional[str] = None


@dataclass
class NumberFilter(GraphQLInput):
    """Input type of `NumberFilter`."""
    gt: Optional[float] = None
    gte: Optional[float] = None
    lt: Optional[float] = None
    lte: Optional[float] = None


@dataclass
class OnLaunchpadTokenEventBatchInput(GraphQLInput):
    networkId: Optional[int] = None
    protocol: Optional[str] = None


@dataclass
class TokenFilters(GraphQLInput):
    network: Optional[List[Optional[int]]] = None
    launchpadName: Optional[List[Optional[str]]] = None
    launchpadProtocol: Optional[List[Optional[str]]] = None
    launchpadCompleted: Optional[bool] = None
    launchpadMigrated: Optional[bool] = None
    launchpadGraduationPercent: Optional[NumberFilter] = None
    change1: Optional[NumberFilter] = None
    change24: Optional[NumberFilter] = None
    holders: Optional[NumberFilter] = None
    marketCap: Optional[NumberFilter] = None
    txnCount1: Optional[NumberFilter] = None
    txnCount24: Optional[NumberFilter] = None
    liquidity: Optional[NumberFilter] = None
    volume24: Optional[NumberFilter] = None
    createdAt: Optional[NumberFilter] = None


@dataclass
class TokenInput(GraphQLInput):
    address: str
    networkId: int


@dataclass
class TokenRanking(GraphQLInput):
    attribute: Optional[TokenRankingAttribute] = None
    direction: Optional[RankingDirection] = None


# Objects
@dataclass
class ApiToken(GraphQLObject):
    """A short-lived API token."""
    id: Optional[str] = None
    token: Optional[str] = None
    expiresTimeString: Optional[str] = None
    requestLimit: Optional[str] = None
    remaining: Optional[str] = None


@dataclass
class EnhancedToken(GraphQLObject):
    """Metadata for a token."""
    id: Optional[str] = None
    address: Optional[str] = None
    networkId: Optional[int] = None
    name: Optional[str] = None
    symbol: Optional[str] = None
    decimals: Optional[int] = None
    createdAt: Optional[int] = None
    info: Optional[TokenInfo] = None
    launchpad: Optional[LaunchpadData] = None


@dataclass
class LaunchpadData(GraphQLObject):
    """Launchpad state of a token."""
    graduationPercent: Optional[float] = None
    poolAddress: Optional[str] = None
    launchpadProtocol: Optional[str] = None
    launchpadName: Optional[str] = None
    completed: Optional[bool] = None
    completedAt: Optional[int] = None
    migrated: Optional[bool] = None
    migratedAt: Optional[int] = None


@dataclass
class LaunchpadTokenEventOutput(GraphQLObject):
    address: Optional[str] = None
    networkId: Optional[int] = None
    protocol: Optional[str] = None
    eventType: Optional[LaunchpadTokenEventType] = None
    marketCap: Optional[str] = None
    price: Optional[float] = None
    liquidity: Optional[str] = None
    holders: Optional[int] = None
    volume1: Optional[str] = None
    transactions1: Optional[int] = None
    buyCount1: Optional[int] = None
    sellCount1: Optional[int] = None
    token: Optional[EnhancedToken] = None


@dataclass
class Mutation(GraphQLObject):
    createApiTokens: Optional[List[ApiToken]] = None
    deleteApiToken: Optional[str] = None


@dataclass
class Network(GraphQLObject):
    """Metadata for a network supported on Codex."""
    id: Optional[int] = None
    name: Optional[str] = None


@dataclass
class Price(GraphQLObject):
    address: Optional[str] = None
    networkId: Optional[int] = None
    priceUsd: Optional[float] = None
    timestamp: Optional[int] = None


@dataclass
class Query(GraphQLObject):
    getNetworks: Optional[List[Network]] = None
    filterTokens: Optional[TokenFilterConnection] = None
    token: Optional[EnhancedToken] = None


@dataclass
class Subscription(GraphQLObject):
    onLaunchpadTokenEventBatch: Optional[List[LaunchpadTokenEventOutput]] = None
    onPriceUpdated: Optional[Price] = None


@dataclass
class TokenFilterConnection(GraphQLObject):
    results: Optional[List[Optional[TokenFilterResult]]] = None
    count: Optional[int] = None
    page: Optional[int] = None


@dataclass
class TokenFilterResult(GraphQLObject):
    token: Optional[EnhancedToken] = None
    priceUSD: Optional[str] = None
    change1: Optional[str] = None
    change24: Optional[str] = None
    holders: Optional[int] = None
    marketCap: Optional[str] = None
    liquidity: Optional[str] = None
    txnCount1: Optional[int] = None
    txnCount24: Optional[int] = None
    volume24: Optional[str] = None
    createdAt: Optional[int] = None


@dataclass
class TokenInfo(GraphQLObject):
    imageThumbUrl: Optional[str] = None
