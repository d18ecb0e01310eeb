"""
Launchpad Endpoints

Snapshot of the three launchpad columns (new, completing, completed).
"""
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException

from codex_sdk import Codex, LaunchpadColumn, LaunchpadFeed

from app.api.schemas import ErrorResponse, LaunchpadsResponse, TokenRow
from app.dependencies import get_sdk

router = APIRouter()


@router.get("/launchpads", response_model=LaunchpadsResponse, responses={502: {"model": ErrorResponse}})
def launchpads(network_id: Optional[int] = None, sdk: Codex = Depends(get_sdk)):
    """
    Launchpad columns, optionally scoped to one network

    A column that fails to load is returned empty and listed in `errors`;
    the request fails only when every column does.
    """
    feed = LaunchpadFeed(sdk, network_id=network_id)
    feed.load()

    if len(feed.errors) == len(LaunchpadColumn):
        raise HTTPException(status_code=502, detail="Failed to load launchpad tokens.")

    return LaunchpadsResponse(
        network_id=network_id,
        new=[TokenRow.from_result(r) for r in feed.new_tokens],
        completing=[TokenRow.from_result(r) for r in feed.completing_tokens],
        completed=[TokenRow.from_result(r) for r in feed.completed_tokens],
        errors={column.value: str(error) for column, error in feed.errors.items()},
    )
