"""
Shared FastAPI dependencies
"""
from functools import lru_cache

from codex_sdk import Codex

from app.config import settings


@lru_cache(maxsize=1)
def get_sdk() -> Codex:
    """One SDK instance per process; overridden in tests"""
    return Codex(
        api_key=settings.CODEX_API_KEY or None,
        api_url=settings.CODEX_API_URL,
        ws_url=settings.CODEX_WS_URL,
    )
