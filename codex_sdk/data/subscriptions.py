"""
GraphQL subscriptions over WebSocket

Implements the client side of the graphql-transport-ws protocol:

    client                         server
    connection_init {Authorization} ->
                                   <- connection_ack
    subscribe {id, payload}         ->
                                   <- next {id, payload}   (repeated)
                                   <- error / complete {id}
    complete {id}                   ->   (when the client stops early)

ping messages are answered with pong at any time.
"""

import asyncio
import json
import logging
import uuid
from dataclasses import dataclass, field
from typing import Any, AsyncIterator, Callable, Dict, List, Optional

import websockets
from websockets.asyncio.client import connect as ws_connect

from ..config import CodexConfig
from .graph_client import CodexClientError, GraphQLResponseError, build_payload

logger = logging.getLogger(__name__)

PROTOCOL = "graphql-transport-ws"


class SubscriptionError(CodexClientError):
    """WebSocket protocol failure"""
    pass


@dataclass
class ExecutionResult:
    """Payload of a `next` message"""
    data: Optional[Dict[str, Any]] = None
    errors: Optional[List[Dict[str, Any]]] = None

    @classmethod
    def from_dict(cls, payload: dict) -> "ExecutionResult":
        return cls(data=payload.get("data"), errors=payload.get("errors"))


def _noop(*args):
    return None


@dataclass
class Sink:
    """Callbacks receiving a subscription's results"""
    next: Callable[[ExecutionResult], Any]
    error: Callable[[Exception], Any] = field(default=_noop)
    complete: Callable[[], Any] = field(default=_noop)


class SubscriptionClient:
    """graphql-transport-ws client

    Each subscribe() call opens its own connection, which is closed when the
    iteration ends or is abandoned.
    """

    def __init__(
        self,
        config: Optional[CodexConfig] = None,
        connect: Optional[Callable] = None,
        ack_timeout: float = 10.0,
    ):
        self.config = config or CodexConfig.from_env()
        self._connect = connect or ws_connect
        self.ack_timeout = ack_timeout

    async def _initialize(self, ws) -> None:
        await ws.send(json.dumps({"type": "connection_init", "payload": self.config.auth_headers}))
        try:
            raw = await asyncio.wait_for(ws.recv(), self.ack_timeout)
        except asyncio.TimeoutError as e:
            raise SubscriptionError(f"No connection_ack within {self.ack_timeout}s") from e

        message = json.loads(raw)
        if message.get("type") != "connection_ack":
            raise SubscriptionError(f"Connection rejected: {message}")

    async def subscribe(self, document: str, variables: Any = None) -> AsyncIterator[ExecutionResult]:
        """Yield the results of a subscription until the server completes it

        Raises:
            GraphQLResponseError: The server sent an `error` message
            SubscriptionError: WebSocket transport or protocol failure
        """
        op_id = str(uuid.uuid4())
        completed = False

        try:
            async with self._connect(self.config.ws_url, subprotocols=[PROTOCOL]) as ws:
                await self._initialize(ws)
                await ws.send(json.dumps({
                    "id": op_id,
                    "type": "subscribe",
                    "payload": build_payload(document, variables),
                }))
                logger.debug("Subscription %s started", op_id)

                try:
                    async for raw in ws:
                        message = json.loads(raw)
                        kind = message.get("type")

                        if kind == "ping":
                            await ws.send(json.dumps({"type": "pong"}))
                            continue
                        if kind == "pong" or message.get("id") != op_id:
                            continue

                        if kind == "next":
                            yield ExecutionResult.from_dict(message.get("payload") or {})
                        elif kind == "error":
                            completed = True
                            raise GraphQLResponseError(message.get("payload") or [])
                        elif kind == "complete":
                            completed = True
                            logger.debug("Subscription %s completed", op_id)
                            return
                finally:
                    if not completed:
                        await self._send_complete(ws, op_id)
        except websockets.exceptions.ConnectionClosedError as e:
            raise SubscriptionError(f"Connection lost: {e}") from e
        except (OSError, websockets.exceptions.WebSocketException, ValueError) as e:
            raise SubscriptionError(f"Subscription failed: {e}") from e

        raise SubscriptionError("Connection closed before the subscription completed")

    async def _send_complete(self, ws, op_id: str) -> None:
        try:
            await ws.send(json.dumps({"id": op_id, "type": "complete"}))
        except websockets.exceptions.ConnectionClosed:
            logger.debug("Connection already closed; complete for %s not sent", op_id)

    async def run(self, document: str, variables: Any, sink: Sink) -> None:
        """Deliver a subscription to a sink (graphql-ws style)

        Errors are passed to sink.error instead of being raised.
        """
        try:
            async for result in self.subscribe(document, variables):
                sink.next(result)
        except CodexClientError as e:
            logger.error("Subscription error: %s", e)
            sink.error(e)
            return
        sink.complete()

    def start(self, document: str, variables: Any, sink: Sink) -> Callable[[], None]:
        """Run a subscription in the background of the running event loop

        Returns:
            Cleanup function that cancels the subscription
        """
        task = asyncio.get_running_loop().create_task(self.run(document, variables, sink))

        def cleanup() -> None:
            if not task.done():
                task.cancel()

        return cleanup
