"""Bounded, thread-safe byte FIFO shared between a producer and a consumer."""

from __future__ import annotations

import threading

BUFFER_SIZE = 64 * 1024
READ_CHUNK = 4096


class RingBuffer:
    """Fixed-capacity byte queue.

    Writers block while the buffer is full; readers block while it is empty.
    """

    def __init__(self, capacity: int = BUFFER_SIZE) -> None:
        if capacity <= 0:
            raise ValueError("capacity must be positive")
        self.capacity = capacity
        self._data = bytearray()
        self._lock = threading.Lock()
        self._not_empty = threading.Condition(self._lock)
        self._not_full = threading.Condition(self._lock)

    def __len__(self) -> int:
        with self._lock:
            return len(self._data)

    def write(self, data: bytes | bytearray | memoryview) -> None:
        """Append all of ``data``, waiting for free space as needed."""
        view = memoryview(data).cast("B")
        with self._lock:
            while view:
                self._not_full.wait_for(lambda: len(self._data) < self.capacity)
                space = self.capacity - len(self._data)
                chunk, view = view[:space], view[space:]
                self._data += chunk
                self._not_empty.notify()

    def read(self, maxlen: int = READ_CHUNK) -> bytes:
        """Wait until data is available and return up to ``maxlen`` bytes."""
        if maxlen < 0:
            raise ValueError("maxlen must not be negative")
        with self._lock:
            self._not_empty.wait_for(lambda: len(self._data) > 0)
            chunk = bytes(self._data[:maxlen])
            del self._data[:maxlen]
            self._not_full.notify()
            return chunk