"""
Network Endpoints

Lists Codex networks and the trending tokens of one network.
"""
import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from codex_sdk import Codex, CodexClientError
from codex_sdk.data.types import (
    Network,
    RankingDirection,
    TokenFilters,
    TokenRanking,
    TokenRankingAttribute,
    TokensPageVariables,
)

from app.api.schemas import ErrorResponse, NetworkResponse, NetworkTokensResponse, TokenRow
from app.config import settings
from app.dependencies import get_sdk

logger = logging.getLogger(__name__)

router = APIRouter()


def _network_name(sdk: Codex, network_id: int) -> Optional[str]:
    """Name lookup; a failure only costs the display name"""
    try:
        networks = sdk.get_networks()
    except CodexClientError as e:
        logger.error("Error fetching all networks: %s", e)
        return None
    return next((n.name for n in networks if n.id == network_id), None)


@router.get("/networks", response_model=List[NetworkResponse], responses={502: {"model": ErrorResponse}})
def list_networks(sdk: Codex = Depends(get_sdk)):
    """
    Networks supported by Codex, sorted by name
    """
    try:
        networks: List[Network] = sdk.get_networks()
    except CodexClientError as e:
        logger.error("Error fetching networks: %s", e)
        raise HTTPException(status_code=502, detail=f"Failed to load networks: {e}")

    return [NetworkResponse(id=n.id, name=n.name) for n in sorted(networks, key=lambda n: n.name.lower())]


@router.get(
    "/networks/{network_id}/tokens",
    response_model=NetworkTokensResponse,
    responses={400: {"model": ErrorResponse}, 502: {"model": ErrorResponse}},
)
def network_tokens(
    network_id: str,
    limit: int = Query(default=settings.DEFAULT_TOKEN_LIMIT, ge=1, le=settings.MAX_TOKEN_LIMIT),
    sdk: Codex = Depends(get_sdk),
):
    """
    Trending tokens of a network

    Args:
        network_id: Codex network ID
        limit: Number of tokens to return

    Returns:
        NetworkTokensResponse ranked by trending score, highest first
    """
    try:
        network_id_num = int(network_id)
    except ValueError:
        raise HTTPException(status_code=400, detail=f"Invalid network ID: {network_id}")

    variables = TokensPageVariables(
        filters=TokenFilters(network=[network_id_num]),
        rankings=[TokenRanking(TokenRankingAttribute.TRENDING_SCORE, RankingDirection.DESC)],
        limit=limit,
    )
    try:
        connection = sdk.tokens_page(variables)
    except CodexClientError as e:
        logger.error("Error fetching tokens for network %s: %s", network_id_num, e)
        raise HTTPException(status_code=502, detail=f"Failed to load tokens for network {network_id_num}.")

    network_name = _network_name(sdk, network_id_num)
    if not network_name:
        logger.warning("Could not find network name for ID %s", network_id_num)
        network_name = f"Network {network_id_num}"

    return NetworkTokensResponse(
        network_id=network_id_num,
        network_name=network_name,
        tokens=[TokenRow.from_result(r) for r in connection.results],
    )
