"""
Client configuration

Loads environment variables (and a local .env file) and provides the
settings shared by the HTTP and WebSocket clients.
"""
import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

from .constants import DEFAULT_API_URL, DEFAULT_WS_URL


@dataclass
class CodexConfig:
    """Codex client settings"""
    api_key: Optional[str] = None
    api_url: str = DEFAULT_API_URL
    ws_url: str = DEFAULT_WS_URL
    timeout: float = 30.0
    max_retries: int = 3
    retry_delay: float = 1.0

    @classmethod
    def from_env(cls, **overrides) -> "CodexConfig":
        """Build a config from CODEX_* environment variables.

        Keyword arguments that are not None take precedence over the
        environment.
        """
        load_dotenv()

        config = cls(
            api_key=os.getenv("CODEX_API_KEY") or None,
            api_url=os.getenv("CODEX_API_URL") or DEFAULT_API_URL,
            ws_url=os.getenv("CODEX_WS_URL") or DEFAULT_WS_URL,
            timeout=float(os.getenv("CODEX_TIMEOUT", 30)),
            max_retries=int(os.getenv("CODEX_MAX_RETRIES", 3)),
        )
        for key, value in overrides.items():
            if value is not None:
                setattr(config, key, value)
        return config

    @property
    def auth_headers(self) -> dict:
        """Authorization header; empty for anonymous access"""
        if not self.api_key:
            return {}
        return {"Authorization": self.api_key}
