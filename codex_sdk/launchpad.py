"""
Launchpad feed

Keeps three live columns of launchpad tokens:
- new:        freshly deployed tokens, newest first
- completing: tokens still on the bonding curve, highest graduation first
- completed:  tokens migrated to a DEX pool, most recently migrated first

Each column is seeded with the LaunchpadTokens query and then kept current by
merging OnLaunchpadTokenEventBatch events. Per-column min/max filters are sent
to the API for the initial load and applied locally to incoming events.
"""

import dataclasses
import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Dict, Iterable, Iterator, List, Optional

from .constants import LAUNCHPAD_COLUMN_CAP, LAUNCHPAD_PAGE_SIZE
from .data.graph_client import CodexClientError
from .data.types import (
    LaunchpadTokenEvent,
    LaunchpadTokenEventType,
    LaunchpadTokensVariables,
    NumberFilter,
    TokenFilterResult,
    TokenFilters,
    TokenRanking,
    TokenRankingAttribute,
    to_float,
)
from .sdk import Codex

logger = logging.getLogger(__name__)


class LaunchpadColumn(str, Enum):
    NEW = "new"
    COMPLETING = "completing"
    COMPLETED = "completed"


@dataclass
class FilterBounds:
    """User-entered bounds; blank or non-numeric text means unbounded"""
    min: str = ""
    max: str = ""

    def number_filter(self) -> Optional[NumberFilter]:
        bounds = NumberFilter(gte=to_float(self.min or None), lte=to_float(self.max or None))
        return None if bounds.is_empty else bounds


@dataclass
class ColumnFilters:
    graduation_percent: FilterBounds = field(default_factory=FilterBounds)
    price_change_1h: FilterBounds = field(default_factory=FilterBounds)
    holders: FilterBounds = field(default_factory=FilterBounds)
    market_cap: FilterBounds = field(default_factory=FilterBounds)
    transactions_1h: FilterBounds = field(default_factory=FilterBounds)


# ColumnFilters field -> TokenFilters field
GQL_FILTER_FIELDS: Dict[str, str] = {
    "graduation_percent": "launchpad_graduation_percent",
    "price_change_1h": "change1",
    "holders": "holders",
    "market_cap": "market_cap",
    "transactions_1h": "txn_count1",
}

# ColumnFilters field -> attribute path on LaunchpadTokenEvent
EVENT_FILTER_PATHS: Dict[str, tuple] = {
    "graduation_percent": ("token", "launchpad", "graduation_percent"),
    "price_change_1h": ("change1",),
    "holders": ("holders",),
    "market_cap": ("market_cap",),
    "transactions_1h": ("transactions1",),
}


@dataclass(frozen=True)
class ColumnSpec:
    base_filters: TokenFilters
    ranking: TokenRankingAttribute
    admits: Callable[[LaunchpadTokenEvent], bool]
    sort_key: Callable[[TokenFilterResult], float]
    keep: Callable[[TokenFilterResult], bool] = lambda row: True


def _launchpad_flag(item, name: str) -> bool:
    launchpad = item.token.launchpad if item.token else None
    return bool(launchpad and getattr(launchpad, name))


def _launchpad_value(row: TokenFilterResult, name: str) -> float:
    launchpad = row.launchpad
    return (getattr(launchpad, name) if launchpad else None) or 0


COLUMNS: Dict[LaunchpadColumn, ColumnSpec] = {
    LaunchpadColumn.NEW: ColumnSpec(
        base_filters=TokenFilters(launchpad_migrated=False, launchpad_completed=False),
        ranking=TokenRankingAttribute.CREATED_AT,
        admits=lambda e: (
            e.event_type in (
                LaunchpadTokenEventType.DEPLOYED,
                LaunchpadTokenEventType.CREATED,
                LaunchpadTokenEventType.UPDATED,
            )
            and not _launchpad_flag(e, "migrated")
            and not _launchpad_flag(e, "completed")
        ),
        sort_key=lambda row: (row.token.created_at if row.token else None) or 0,
    ),
    LaunchpadColumn.COMPLETING: ColumnSpec(
        base_filters=TokenFilters(launchpad_migrated=False, launchpad_completed=False),
        ranking=TokenRankingAttribute.GRADUATION_PERCENT,
        admits=lambda e: (
            e.event_type in (LaunchpadTokenEventType.UPDATED, LaunchpadTokenEventType.COMPLETED)
            and not _launchpad_flag(e, "migrated")
        ),
        sort_key=lambda row: _launchpad_value(row, "graduation_percent"),
        keep=lambda row: not _launchpad_flag(row, "migrated") and not _launchpad_flag(row, "completed"),
    ),
    LaunchpadColumn.COMPLETED: ColumnSpec(
        base_filters=TokenFilters(launchpad_migrated=True),
        ranking=TokenRankingAttribute.LAUNCHPAD_MIGRATED_AT,
        admits=lambda e: _launchpad_flag(e, "migrated"),
        sort_key=lambda row: _launchpad_value(row, "migrated_at"),
    ),
}


def build_gql_filters(base: TokenFilters, column_filters: ColumnFilters) -> TokenFilters:
    """Add the parseable column bounds to the base filters as gte/lte ranges"""
    updates = {}
    for name, gql_name in GQL_FILTER_FIELDS.items():
        bounds = getattr(column_filters, name).number_filter()
        if bounds is not None:
            updates[gql_name] = bounds
    return dataclasses.replace(base, **updates)


def _event_value(event: LaunchpadTokenEvent, path: tuple):
    value = event
    for part in path:
        value = getattr(value, part, None)
        if value is None:
            return None
    return value


def check_client_filters(event: LaunchpadTokenEvent, column_filters: ColumnFilters) -> bool:
    """Whether an event satisfies the column bounds

    Missing or non-numeric event values pass; only values that are present
    and outside a bound reject the event.
    """
    for name, path in EVENT_FILTER_PATHS.items():
        value = to_float(_event_value(event, path))
        if value is None:
            continue

        bounds = getattr(column_filters, name)
        low, high = to_float(bounds.min or None), to_float(bounds.max or None)
        if low is not None and value < low:
            return False
        if high is not None and value > high:
            return False
    return True


def merge_events(
    column: LaunchpadColumn,
    rows: List[TokenFilterResult],
    events: Iterable[Optional[LaunchpadTokenEvent]],
    column_filters: Optional[ColumnFilters] = None,
    network_id: Optional[int] = None,
    cap: int = LAUNCHPAD_COLUMN_CAP,
) -> List[TokenFilterResult]:
    """Merge an event batch into a column

    Every accepted event first removes the token's current row; the event is
    then added back as a row if it belongs in this column. The result is
    sorted by the column's key (descending) and capped.
    """
    spec = COLUMNS[column]
    column_filters = column_filters or ColumnFilters()
    updated = list(rows)

    for event in events:
        if event is None:
            continue
        if network_id and event.network_id != network_id:
            continue
        if not check_client_filters(event, column_filters):
            continue

        token_id = event.token_id
        updated = [row for row in updated if row.token_id != token_id]
        if spec.admits(event):
            updated.append(TokenFilterResult.from_event(event))

    updated = [row for row in updated if spec.keep(row)]
    updated.sort(key=spec.sort_key, reverse=True)
    return updated[:cap]


class LaunchpadFeed:
    """Three launchpad columns kept current from the event subscription

    Usage:
        feed = LaunchpadFeed(sdk, network_id=1399811149)
        feed.load()
        await feed.follow(on_update=render)
    """

    def __init__(
        self,
        sdk: Codex,
        network_id: Optional[int] = None,
        filters: Optional[Dict[LaunchpadColumn, ColumnFilters]] = None,
        page_size: int = LAUNCHPAD_PAGE_SIZE,
        cap: int = LAUNCHPAD_COLUMN_CAP,
    ):
        self.sdk = sdk
        self.network_id = network_id
        self.page_size = page_size
        self.cap = cap
        filters = filters or {}
        self.filters: Dict[LaunchpadColumn, ColumnFilters] = {
            column: filters.get(column) or ColumnFilters() for column in LaunchpadColumn
        }
        self.columns: Dict[LaunchpadColumn, List[TokenFilterResult]] = {column: [] for column in LaunchpadColumn}
        self.errors: Dict[LaunchpadColumn, Exception] = {}

    @property
    def new_tokens(self) -> List[TokenFilterResult]:
        return self.columns[LaunchpadColumn.NEW]

    @property
    def completing_tokens(self) -> List[TokenFilterResult]:
        return self.columns[LaunchpadColumn.COMPLETING]

    @property
    def completed_tokens(self) -> List[TokenFilterResult]:
        return self.columns[LaunchpadColumn.COMPLETED]

    def variables(self, column: LaunchpadColumn) -> LaunchpadTokensVariables:
        spec = COLUMNS[column]
        return LaunchpadTokensVariables(
            filters=build_gql_filters(spec.base_filters, self.filters[column]),
            rankings=[TokenRanking(attribute=spec.ranking)],
            limit=self.page_size,
            offset=0,
        )

    def load_column(self, column: LaunchpadColumn) -> List[TokenFilterResult]:
        """Fetch the initial rows of one column

        The network is filtered locally since the query is not scoped to one.
        """
        rows = self.sdk.launchpad_tokens(self.variables(column)).results
        rows = self._on_network(rows)
        if column is LaunchpadColumn.COMPLETING:
            rows = [r for r in rows if not _launchpad_flag(r, "completed")]

        self.columns[column] = rows
        self.errors.pop(column, None)
        return rows

    def iter_pages(self, column: LaunchpadColumn, max_pages: int) -> Iterator[List[TokenFilterResult]]:
        """Yield up to max_pages pages of one column, filtered to the feed's network

        Paging stops after the first page the API returns short; page length is
        taken before the network filter.
        """
        variables = self.variables(column)
        for page in range(max_pages):
            variables.offset = page * self.page_size
            rows = self.sdk.launchpad_tokens(variables).results
            full = len(rows) >= self.page_size
            yield self._on_network(rows)
            if not full:
                return

    def load(self) -> Dict[LaunchpadColumn, List[TokenFilterResult]]:
        """Load every column; a failing column is recorded in errors and left empty"""
        for column in LaunchpadColumn:
            try:
                self.load_column(column)
            except CodexClientError as e:
                logger.error("Error fetching %s tokens: %s", column.value, e)
                self.errors[column] = e
                self.columns[column] = []
        return self.columns

    def _on_network(self, rows: List[TokenFilterResult]) -> List[TokenFilterResult]:
        if not self.network_id:
            return rows
        return [r for r in rows if r.token and r.token.network_id == self.network_id]

    def set_filters(self, column: LaunchpadColumn, column_filters: ColumnFilters) -> List[TokenFilterResult]:
        self.filters[column] = column_filters
        return self.load_column(column)

    def apply_batch(self, events: Iterable[Optional[LaunchpadTokenEvent]]) -> None:
        events = list(events)
        for column in LaunchpadColumn:
            self.columns[column] = merge_events(
                column,
                self.columns[column],
                events,
                self.filters[column],
                network_id=self.network_id,
                cap=self.cap,
            )

    async def follow(
        self,
        on_update: Optional[Callable[["LaunchpadFeed"], None]] = None,
        max_batches: Optional[int] = None,
    ) -> int:
        """Apply subscription batches until the stream ends

        Args:
            on_update: Called after each applied batch
            max_batches: Stop after this many batches

        Returns:
            Number of batches applied
        """
        applied = 0
        stream = self.sdk.on_launchpad_token_event_batch()
        try:
            async for batch in stream:
                self.apply_batch(batch)
                applied += 1
                if on_update is not None:
                    on_update(self)
                if max_batches is not None and applied >= max_batches:
                    break
        finally:
            await stream.aclose()
        logger.info("Launchpad subscription ended after %d batches", applied)
        return applied
