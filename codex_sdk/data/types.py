"""
Codex data types

Python shapes of the inputs and results of the shipped operations
(LaunchpadTokens, TokensPage, OnLaunchpadTokenEventBatch) and the SDK helper
operations. Results are built from the JSON payload with from_dict; inputs
serialise with to_dict, omitting unset (None) fields.

Enums and the schema-named inputs come from the generated module; the inputs
here are snake_case views on the same GraphQLInput base.

Several numeric fields (marketCap, liquidity, volume) arrive as strings, so
they are converted to float on the way in.
"""

from dataclasses import Field, dataclass, field
from enum import Enum
from typing import Any, List, Optional, Type, TypeVar, Union

from .. import generated_types
from ..generated_types import LaunchpadTokenEventType, RankingDirection, TokenRankingAttribute
from ..schema.runtime import GRAPHQL_NAME, GraphQLInput, serialize

E = TypeVar("E", bound=Enum)


def camel_case(name: str) -> str:
    """launchpad_graduation_percent -> launchpadGraduationPercent"""
    head, *rest = name.split("_")
    return head + "".join(part[:1].upper() + part[1:] for part in rest)


def to_float(value: Any) -> Optional[float]:
    """Parse numbers that may be sent as strings; None when not numeric"""
    if value is None or isinstance(value, bool):
        return None
    try:
        return float(value)
    except (TypeError, ValueError):
        return None


def to_int(value: Any) -> Optional[int]:
    number = to_float(value)
    return int(number) if number is not None else None


def parse_enum(enum_cls: Type[E], value: Any) -> Union[E, str, None]:
    """Enum member, or the raw value for members added upstream later"""
    if value is None:
        return None
    try:
        return enum_cls(value)
    except ValueError:
        return value


class InputMixin(GraphQLInput):
    """Input dataclasses with snake_case attributes and camelCase keys"""

    @classmethod
    def field_graphql_name(cls, f: Field) -> str:
        return f.metadata.get(GRAPHQL_NAME, camel_case(f.name))


# ---------------------------------------------------------------------------
# Inputs
# ---------------------------------------------------------------------------

class NumberFilter(generated_types.NumberFilter):
    """Numeric range filter"""

    @property
    def is_empty(self) -> bool:
        return all(v is None for v in (self.gt, self.gte, self.lt, self.lte))


@dataclass
class TokenFilters(InputMixin):
    """Subset of the filterTokens TokenFilters input"""
    network: Optional[List[int]] = None
    launchpad_name: Optional[List[str]] = None
    launchpad_protocol: Optional[List[str]] = None
    launchpad_completed: Optional[bool] = None
    launchpad_migrated: Optional[bool] = None
    launchpad_graduation_percent: Optional[NumberFilter] = None
    change1: Optional[NumberFilter] = None
    change24: Optional[NumberFilter] = None
    holders: Optional[NumberFilter] = None
    market_cap: Optional[NumberFilter] = None
    txn_count1: Optional[NumberFilter] = None
    txn_count24: Optional[NumberFilter] = None
    liquidity: Optional[NumberFilter] = None
    volume24: Optional[NumberFilter] = None
    created_at: Optional[NumberFilter] = None


@dataclass
class TokenRanking(generated_types.TokenRanking):
    """Ranking that defaults to descending order"""
    attribute: Optional[TokenRankingAttribute] = None
    direction: Optional[RankingDirection] = RankingDirection.DESC


@dataclass
class OnLaunchpadTokenEventBatchInput(InputMixin):
    network_id: Optional[int] = None
    protocol: Optional[str] = None


@dataclass
class LaunchpadTokensVariables(InputMixin):
    filters: Optional[TokenFilters] = None
    rankings: Optional[List[TokenRanking]] = None
    limit: Optional[int] = None
    offset: Optional[int] = None


@dataclass
class TokensPageVariables(InputMixin):
    filters: Optional[TokenFilters] = None
    rankings: Optional[List[TokenRanking]] = None
    limit: Optional[int] = None


@dataclass
class OnLaunchpadTokenEventBatchVariables(InputMixin):
    input: Optional[OnLaunchpadTokenEventBatchInput] = None


@dataclass
class CreateApiTokensInput(InputMixin):
    """expires_in is in milliseconds"""
    expires_in: Optional[int] = None
    count: Optional[int] = None
    request_limit: Optional[str] = None


# ---------------------------------------------------------------------------
# Results
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class LaunchpadData:
    """Launchpad state of a token (bonding curve progress and migration)"""
    graduation_percent: Optional[float] = None
    pool_address: Optional[str] = None
    launchpad_protocol: Optional[str] = None
    launchpad_name: Optional[str] = None
    completed: Optional[bool] = None
    completed_at: Optional[int] = None
    migrated: Optional[bool] = None
    migrated_at: Optional[int] = None

    @classmethod
    def from_dict(cls, data: Optional[dict]) -> Optional["LaunchpadData"]:
        if not data:
            return None
        return cls(
            graduation_percent=to_float(data.get("graduationPercent")),
            pool_address=data.get("poolAddress"),
            launchpad_protocol=data.get("launchpadProtocol"),
            launchpad_name=data.get("launchpadName"),
            completed=data.get("completed"),
            completed_at=to_int(data.get("completedAt")),
            migrated=data.get("migrated"),
            migrated_at=to_int(data.get("migratedAt")),
        )


@dataclass(frozen=True)
class EnhancedToken:
    """Token metadata; id is `<address>:<networkId>`"""
    id: Optional[str] = None
    address: Optional[str] = None
    network_id: Optional[int] = None
    name: Optional[str] = None
    symbol: Optional[str] = None
    decimals: Optional[int] = None
    created_at: Optional[int] = None
    image_thumb_url: Optional[str] = None
    launchpad: Optional[LaunchpadData] = None

    @classmethod
    def from_dict(cls, data: Optional[dict]) -> Optional["EnhancedToken"]:
        if not data:
            return None
        info = data.get("info") or {}
        return cls(
            id=data.get("id"),
            address=data.get("address"),
            network_id=to_int(data.get("networkId")),
            name=data.get("name"),
            symbol=data.get("symbol"),
            decimals=to_int(data.get("decimals")),
            created_at=to_int(data.get("createdAt")),
            image_thumb_url=info.get("imageThumbUrl"),
            launchpad=LaunchpadData.from_dict(data.get("launchpad")),
        )


@dataclass(frozen=True)
class LaunchpadTokenEvent:
    """One entry of an onLaunchpadTokenEventBatch payload"""
    address: str
    network_id: int
    event_type: Union[LaunchpadTokenEventType, str, None] = None
    protocol: Optional[str] = None
    market_cap: Optional[float] = None
    price: Optional[float] = None
    liquidity: Optional[float] = None
    holders: Optional[int] = None
    volume1: Optional[float] = None
    transactions1: Optional[int] = None
    buy_count1: Optional[int] = None
    sell_count1: Optional[int] = None
    token: Optional[EnhancedToken] = None

    @classmethod
    def from_dict(cls, data: dict) -> "LaunchpadTokenEvent":
        return cls(
            address=data["address"],
            network_id=int(data["networkId"]),
            event_type=parse_enum(LaunchpadTokenEventType, data.get("eventType")),
            protocol=data.get("protocol"),
            market_cap=to_float(data.get("marketCap")),
            price=to_float(data.get("price")),
            liquidity=to_float(data.get("liquidity")),
            holders=to_int(data.get("holders")),
            volume1=to_float(data.get("volume1")),
            transactions1=to_int(data.get("transactions1")),
            buy_count1=to_int(data.get("buyCount1")),
            sell_count1=to_int(data.get("sellCount1")),
            token=EnhancedToken.from_dict(data.get("token")),
        )

    @property
    def token_id(self) -> str:
        if self.token and self.token.id:
            return self.token.id
        return f"{self.address}:{self.network_id}"


@dataclass(frozen=True)
class TokenFilterResult:
    """Token row returned by filterTokens"""
    token: Optional[EnhancedToken] = None
    price_usd: Optional[float] = None
    change1: Optional[float] = None
    change24: Optional[float] = None
    holders: Optional[int] = None
    market_cap: Optional[float] = None
    liquidity: Optional[float] = None
    txn_count1: Optional[int] = None
    txn_count24: Optional[int] = None
    volume24: Optional[float] = None
    created_at: Optional[int] = None

    @classmethod
    def from_dict(cls, data: dict) -> "TokenFilterResult":
        return cls(
            token=EnhancedToken.from_dict(data.get("token")),
            price_usd=to_float(data.get("priceUSD")),
            change1=to_float(data.get("change1")),
            change24=to_float(data.get("change24")),
            holders=to_int(data.get("holders")),
            market_cap=to_float(data.get("marketCap")),
            liquidity=to_float(data.get("liquidity")),
            txn_count1=to_int(data.get("txnCount1")),
            txn_count24=to_int(data.get("txnCount24")),
            volume24=to_float(data.get("volume24")),
            created_at=to_int(data.get("createdAt")),
        )

    @classmethod
    def from_event(cls, event: LaunchpadTokenEvent) -> "TokenFilterResult":
        """Row view of a launchpad event, used to merge live updates into lists"""
        token = event.token or EnhancedToken(
            id=event.token_id, address=event.address, network_id=event.network_id
        )
        return cls(
            token=token,
            price_usd=event.price,
            holders=event.holders,
            market_cap=event.market_cap,
            liquidity=event.liquidity,
            txn_count1=event.transactions1,
            created_at=token.created_at,
        )

    @property
    def token_id(self) -> Optional[str]:
        return self.token.id if self.token else None

    @property
    def launchpad(self) -> Optional[LaunchpadData]:
        return self.token.launchpad if self.token else None


@dataclass(frozen=True)
class TokenFilterConnection:
    """filterTokens result page"""
    results: List[TokenFilterResult] = field(default_factory=list)
    count: Optional[int] = None
    page: Optional[int] = None

    @classmethod
    def from_dict(cls, data: Optional[dict]) -> "TokenFilterConnection":
        data = data or {}
        return cls(
            results=[TokenFilterResult.from_dict(r) for r in data.get("results") or [] if r],
            count=data.get("count"),
            page=data.get("page"),
        )


@dataclass(frozen=True)
class Network:
    id: int
    name: str

    @classmethod
    def from_dict(cls, data: dict) -> "Network":
        return cls(id=int(data["id"]), name=data["name"])


@dataclass(frozen=True)
class ApiToken:
    """Short-lived API token"""
    id: str
    token: str
    expires_time_string: Optional[str] = None
    request_limit: Optional[str] = None
    remaining: Optional[str] = None

    @classmethod
    def from_dict(cls, data: dict) -> "ApiToken":
        return cls(
            id=data["id"],
            token=data["token"],
            expires_time_string=data.get("expiresTimeString"),
            request_limit=data.get("requestLimit"),
            remaining=data.get("remaining"),
        )
