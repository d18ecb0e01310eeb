"""
GraphQL document definitions

Pre-built operations shipped with the SDK:
- OnLaunchpadTokenEventBatch (subscription): live launchpad token events
- LaunchpadTokens (query): launchpad columns (new / completing / completed)
- TokensPage (query): token list of a network
- GetNetworks / CreateApiTokens: used by the explorer API and token refresh

Each operation constant already contains the fragments it spreads.
"""

# Launchpad state and display fields shared by the fragments below
_TOKEN_FIELDS = """
    id
    address
    networkId
    name
    symbol
    decimals
    createdAt
    info {
      imageThumbUrl
    }
    launchpad {
      graduationPercent
      poolAddress
      launchpadProtocol
      launchpadName
      completed
      completedAt
      migrated
      migratedAt
    }"""

LAUNCHPAD_TOKEN_EVENT_FRAGMENT = """
fragment LaunchpadTokenEvent on LaunchpadTokenEventOutput {
  address
  networkId
  protocol
  eventType
  marketCap
  price
  liquidity
  holders
  volume1
  transactions1
  buyCount1
  sellCount1
  token {%s
  }
}
""" % _TOKEN_FIELDS

LAUNCHPAD_FILTER_TOKEN_RESULT_FRAGMENT = """
fragment LaunchpadFilterTokenResult on TokenFilterResult {
  priceUSD
  change1
  holders
  marketCap
  liquidity
  txnCount1
  volume24
  createdAt
  token {%s
  }
}
""" % _TOKEN_FIELDS

TOKEN_PAGE_ITEM_FRAGMENT = """
fragment TokenPageItem on TokenFilterResult {
  priceUSD
  change1
  change24
  holders
  marketCap
  liquidity
  txnCount24
  volume24
  createdAt
  token {
    id
    address
    networkId
    name
    symbol
    decimals
    info {
      imageThumbUrl
    }
  }
}
"""

ON_LAUNCHPAD_TOKEN_EVENT_BATCH = """
subscription OnLaunchpadTokenEventBatch($input: OnLaunchpadTokenEventBatchInput) {
  onLaunchpadTokenEventBatch(input: $input) {
    ...LaunchpadTokenEvent
  }
}
""" + LAUNCHPAD_TOKEN_EVENT_FRAGMENT

LAUNCHPAD_TOKENS = """
query LaunchpadTokens($filters: TokenFilters, $rankings: [TokenRanking], $limit: Int, $offset: Int) {
  filterTokens(filters: $filters, rankings: $rankings, limit: $limit, offset: $offset) {
    count
    page
    results {
      ...LaunchpadFilterTokenResult
    }
  }
}
""" + LAUNCHPAD_FILTER_TOKEN_RESULT_FRAGMENT

TOKENS_PAGE = """
query TokensPage($filters: TokenFilters, $rankings: [TokenRanking], $limit: Int) {
  filterTokens(filters: $filters, rankings: $rankings, limit: $limit) {
    results {
      ...TokenPageItem
    }
  }
}
""" + TOKEN_PAGE_ITEM_FRAGMENT

GET_NETWORKS = """
query GetNetworks {
  getNetworks {
    id
    name
  }
}
"""

CREATE_API_TOKENS = """
mutation CreateApiTokens($input: CreateApiTokensInput!) {
  createApiTokens(input: $input) {
    id
    token
    expiresTimeString
    requestLimit
    remaining
  }
}
"""

DOCUMENTS = {
    "OnLaunchpadTokenEventBatch": ON_LAUNCHPAD_TOKEN_EVENT_BATCH,
    "LaunchpadTokens": LAUNCHPAD_TOKENS,
    "TokensPage": TOKENS_PAGE,
    "GetNetworks": GET_NETWORKS,
    "CreateApiTokens": CREATE_API_TOKENS,
}
