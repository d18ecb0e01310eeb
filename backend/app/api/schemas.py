"""
API Request/Response Schemas using Pydantic

Defines data models for the explorer API endpoints.
"""
from pydantic import BaseModel, Field
from typing import Dict, List, Optional
from datetime import datetime

from codex_sdk.data.types import TokenFilterResult


class NetworkResponse(BaseModel):
    """A network supported by Codex"""
    id: int = Field(..., description="Codex network ID")
    name: str = Field(..., description="Network display name")

    class Config:
        json_schema_extra = {
            "example": {
                "id": 1399811149,
                "name": "Solana"
            }
        }


class TokenRow(BaseModel):
    """One row of a token list or launchpad column"""
    id: Optional[str] = Field(None, description="Token ID (<address>:<networkId>)")
    address: Optional[str] = Field(None, description="Token contract address")
    network_id: Optional[int] = Field(None, description="Codex network ID")
    name: Optional[str] = Field(None, description="Token name")
    symbol: Optional[str] = Field(None, description="Token symbol")
    image_thumb_url: Optional[str] = Field(None, description="Thumbnail image URL")
    price_usd: Optional[float] = Field(None, description="Price in USD")
    change1: Optional[float] = Field(None, description="Price change over 1h (fraction)")
    change24: Optional[float] = Field(None, description="Price change over 24h (fraction)")
    holders: Optional[int] = Field(None, description="Holder count")
    market_cap: Optional[float] = Field(None, description="Market cap in USD")
    liquidity: Optional[float] = Field(None, description="Liquidity in USD")
    volume24: Optional[float] = Field(None, description="24h volume in USD")
    txn_count1: Optional[int] = Field(None, description="Transactions in the last hour")
    txn_count24: Optional[int] = Field(None, description="Transactions in the last 24h")
    created_at: Optional[int] = Field(None, description="Creation time (unix seconds)")
    graduation_percent: Optional[float] = Field(None, description="Launchpad bonding curve progress")
    migrated_at: Optional[int] = Field(None, description="Launchpad migration time (unix seconds)")

    class Config:
        json_schema_extra = {
            "example": {
                "id": "So11111111111111111111111111111111111111112:1399811149",
                "address": "So11111111111111111111111111111111111111112",
                "network_id": 1399811149,
                "name": "Wrapped SOL",
                "symbol": "SOL",
                "price_usd": 142.3,
                "change24": 0.031,
                "market_cap": 68000000000.0,
                "created_at": 1700000000
            }
        }

    @classmethod
    def from_result(cls, result: TokenFilterResult) -> "TokenRow":
        token = result.token
        launchpad = result.launchpad
        return cls(
            id=result.token_id,
            address=token.address if token else None,
            network_id=token.network_id if token else None,
            name=token.name if token else None,
            symbol=token.symbol if token else None,
            image_thumb_url=token.image_thumb_url if token else None,
            price_usd=result.price_usd,
            change1=result.change1,
            change24=result.change24,
            holders=result.holders,
            market_cap=result.market_cap,
            liquidity=result.liquidity,
            volume24=result.volume24,
            txn_count1=result.txn_count1,
            txn_count24=result.txn_count24,
            created_at=result.created_at,
            graduation_percent=launchpad.graduation_percent if launchpad else None,
            migrated_at=launchpad.migrated_at if launchpad else None,
        )


class NetworkTokensResponse(BaseModel):
    """Response payload for GET /api/v1/networks/{network_id}/tokens"""
    network_id: int = Field(..., description="Codex network ID")
    network_name: str = Field(..., description="Network name, or 'Network <id>' when unknown")
    tokens: List[TokenRow] = Field(..., description="Tokens ranked by trending score")
    timestamp: datetime = Field(default_factory=datetime.utcnow, description="Response timestamp")

    class Config:
        json_schema_extra = {
            "example": {
                "network_id": 1399811149,
                "network_name": "Solana",
                "tokens": [],
                "timestamp": "2026-01-15T10:30:00Z"
            }
        }


class LaunchpadsResponse(BaseModel):
    """Response payload for GET /api/v1/launchpads"""
    network_id: Optional[int] = Field(None, description="Network the columns are scoped to")
    new: List[TokenRow] = Field(..., description="Newly created tokens, newest first")
    completing: List[TokenRow] = Field(..., description="Tokens close to graduation")
    completed: List[TokenRow] = Field(..., description="Migrated tokens, most recent first")
    errors: Dict[str, str] = Field(default_factory=dict, description="Columns that failed to load")
    timestamp: datetime = Field(default_factory=datetime.utcnow, description="Response timestamp")

    class Config:
        json_schema_extra = {
            "example": {
                "network_id": 1399811149,
                "new": [],
                "completing": [],
                "completed": [],
                "errors": {},
                "timestamp": "2026-01-15T10:30:00Z"
            }
        }


class HealthCheckResponse(BaseModel):
    """Response payload for GET /api/v1/health endpoint"""
    status: str = Field(..., description="Health status (healthy or unhealthy)")
    version: str = Field(..., description="API version")
    sdk_version: str = Field(..., description="codex_sdk version")
    api_key_configured: bool = Field(..., description="Whether CODEX_API_KEY is set")
    timestamp: datetime = Field(default_factory=datetime.utcnow, description="Health check timestamp")

    class Config:
        json_schema_extra = {
            "example": {
                "status": "healthy",
                "version": "0.1.0",
                "sdk_version": "0.1.0",
                "api_key_configured": True,
                "timestamp": "2026-01-15T10:30:00Z"
            }
        }


class ErrorResponse(BaseModel):
    """Error response payload"""
    detail: str = Field(..., description="Error message")

    class Config:
        json_schema_extra = {
            "example": {
                "detail": "Failed to load tokens for network 1399811149."
            }
        }
