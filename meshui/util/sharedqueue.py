"""Pair of packet queues shared between a server and a client task."""

from __future__ import annotations

from collections import deque
from typing import Any, Deque, Optional


class SharedQueue:
    """The server sends into one queue and receives from the other; the client mirrors it."""

    def __init__(self) -> None:
        self._server_queue: Deque[Any] = deque()
        self._client_queue: Deque[Any] = deque()

    @staticmethod
    def _try_pop(queue: Deque[Any]) -> Optional[Any]:
        try:
            return queue.popleft()
        except IndexError:
            return None

    def server_send(self, packet: Any) -> bool:
        self._server_queue.append(packet)
        return True

    def server_receive(self) -> Optional[Any]:
        """Return the oldest packet sent by the client, or None."""
        return self._try_pop(self._client_queue)

    def server_queue_size(self) -> int:
        return len(self._server_queue)

    def client_send(self, packet: Any) -> bool:
        self._client_queue.append(packet)
        return True

    def client_receive(self) -> Optional[Any]:
        """Return the oldest packet sent by the server, or None."""
        return self._try_pop(self._server_queue)

    def client_queue_size(self) -> int:
        return len(self._client_queue)