# app/services/live_registry.py

import asyncio
import json
import threading
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Dict, Optional, Set

from app.core.config import settings
from app.core.logger import logger

HEARTBEAT_FRAME = ":heartbeat\n\n"
CONNECTED_EVENT = {"type": "connection", "message": "Connected to message stream"}


def format_event(event: dict) -> str:
    """Serialize an event as a single SSE `data:` frame."""
    return f"data: {json.dumps(event, default=str)}\n\n"


class ChannelClosedError(Exception):
    pass


class QueueChannel:
    """
    In-memory channel between the registry and one open SSE response.
    Frames are queued by the registry and drained by the response generator.
    """

    def __init__(self, maxsize: int = 100):
        self._queue: asyncio.Queue = asyncio.Queue(maxsize=maxsize)
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    def write(self, frame: str) -> None:
        if self._closed:
            raise ChannelClosedError("Channel is closed")
        try:
            self._queue.put_nowait(frame)
        except asyncio.QueueFull:
            raise ChannelClosedError("Channel backlog is full") from None

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        if self._queue.full():
            self._queue.get_nowait()
        self._queue.put_nowait(None)

    async def frames(self):
        while True:
            frame = await self._queue.get()
            if frame is None:
                return
            yield frame


@dataclass
class LiveConnection:
    user_id: str
    channel: Any
    registered_at: datetime


class LiveDeliveryRegistry:
    """
    Process-wide map of user id -> open live channel.

    Delivery is best effort: a failed write is treated as a disconnect, closes
    the channel and never reaches the caller. All map mutations happen under one re-entrant
    lock so request handlers and the heartbeat task can share the registry.
    """

    def __init__(self, heartbeat_interval: float = 30.0):
        self.heartbeat_interval = heartbeat_interval
        self._connections: Dict[str, LiveConnection] = {}
        self._lock = threading.RLock()
        self._heartbeat_task: Optional[asyncio.Task] = None

    def register(self, user_id: str, channel) -> Optional[Any]:
        """Bind `channel` to `user_id` and acknowledge it. Returns the replaced channel, if any."""
        connection = LiveConnection(user_id, channel, datetime.now(timezone.utc))
        with self._lock:
            previous = self._connections.get(user_id)
            self._connections[user_id] = connection
            self._write(connection, format_event(CONNECTED_EVENT))
        logger.info(f"Client connected: {user_id}")
        return previous.channel if previous else None

    def unregister(self, user_id: str, channel=None) -> bool:
        """
        Drop the connection for `user_id`. Safe to call repeatedly.
        With `channel`, only drops the entry while it still belongs to that channel.
        """
        with self._lock:
            current = self._connections.get(user_id)
            if current is None:
                return False
            if channel is not None and current.channel is not channel:
                return False
            del self._connections[user_id]
        logger.info(f"Client disconnected: {user_id}")
        return True

    def push(self, user_id: str, event: dict) -> bool:
        frame = format_event(event)
        with self._lock:
            connection = self._connections.get(user_id)
            if connection is None:
                return False
            return self._write(connection, frame)

    def list_connected(self) -> Set[str]:
        with self._lock:
            return set(self._connections)

    def heartbeat(self) -> int:
        """Send a keepalive comment to every channel. Returns how many were still alive."""
        with self._lock:
            connections = list(self._connections.values())
            return sum(1 for connection in connections if self._write(connection, HEARTBEAT_FRAME))

    def _write(self, connection: LiveConnection, frame: str) -> bool:
        try:
            connection.channel.write(frame)
            return True
        except Exception as e:
            logger.warning(f"Live delivery to {connection.user_id} failed: {e}")
            self.unregister(connection.user_id, connection.channel)
            connection.channel.close()
            return False

    # ---------------------
    # Heartbeat lifecycle
    # ---------------------

    def start(self) -> None:
        """Start the periodic heartbeat on the running event loop."""
        if self._heartbeat_task is None or self._heartbeat_task.done():
            self._heartbeat_task = asyncio.create_task(self._run_heartbeat())

    async def stop(self) -> None:
        """Cancel the heartbeat and close every open channel."""
        task, self._heartbeat_task = self._heartbeat_task, None
        if task is not None:
            task.cancel()
            try:
                await task
            except asyncio.CancelledError:
                pass
        with self._lock:
            connections = list(self._connections.values())
            self._connections.clear()
        for connection in connections:
            connection.channel.close()

    async def _run_heartbeat(self) -> None:
        while True:
            await asyncio.sleep(self.heartbeat_interval)
            self.heartbeat()


live_registry = LiveDeliveryRegistry(heartbeat_interval=settings.SSE_HEARTBEAT_SECONDS)
