"""
Short-lived API tokens

A server holding the real API key can mint short-lived tokens with the
createApiTokens mutation and hand them to untrusted clients. The manager
caches the current token and mints a new one shortly before it expires.
"""

import logging
import time
from dataclasses import dataclass
from typing import Callable, Optional

from .constants import REFRESH_BUFFER_MS, TOKEN_EXPIRY_MS
from .data.graph_client import CodexClientError
from .data.types import CreateApiTokensInput
from .sdk import Codex

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ShortLivedToken:
    value: str  # "Bearer <token>"
    expires_at: int  # epoch milliseconds


class ShortLivedTokenManager:
    """Cache and refresh a short-lived token

    Args:
        sdk: Codex client authenticated with the long-lived API key
        expiry_ms: Lifetime requested for each token
        refresh_buffer_ms: Refresh when less than this remains
        clock: Returns the current time in seconds
    """

    def __init__(
        self,
        sdk: Codex,
        expiry_ms: int = TOKEN_EXPIRY_MS,
        refresh_buffer_ms: int = REFRESH_BUFFER_MS,
        clock: Callable[[], float] = time.time,
    ):
        self.sdk = sdk
        self.expiry_ms = expiry_ms
        self.refresh_buffer_ms = refresh_buffer_ms
        self._clock = clock
        self._current: Optional[ShortLivedToken] = None

    def _now_ms(self) -> int:
        return int(self._clock() * 1000)

    @property
    def current(self) -> Optional[ShortLivedToken]:
        return self._current

    def is_valid(self) -> bool:
        return self._current is not None and self._current.expires_at > self._now_ms() + self.refresh_buffer_ms

    def token(self) -> str:
        """Authorization value for the short-lived token, minted when needed

        Raises:
            CodexClientError: The mutation failed or returned no token
        """
        if self.is_valid():
            logger.debug("Using existing short-lived token")
            return self._current.value

        logger.info("Generating new short-lived token")
        now = self._now_ms()
        self._current = None
        tokens = self.sdk.create_api_tokens(CreateApiTokensInput(expires_in=self.expiry_ms))
        if not tokens or not tokens[0].token:
            raise CodexClientError("createApiTokens returned no token")

        self._current = ShortLivedToken(value=f"Bearer {tokens[0].token}", expires_at=now + self.expiry_ms)
        return self._current.value

    def invalidate(self) -> None:
        self._current = None

    def client(self, **kwargs) -> Codex:
        """Codex client authenticated with the current short-lived token"""
        return Codex(
            api_key=self.token(),
            api_url=self.sdk.config.api_url,
            ws_url=self.sdk.config.ws_url,
            **kwargs,
        )
