"""TCP stream endpoint that either connects to a server or waits for a peer."""

from __future__ import annotations

import socket
import time

LISTEN_BACKLOG = 16
RETRY_DELAY = 1.0


class TcpSocket:
    """A connected TCP stream.

    With a non-empty ``server_ip`` this connects to that IPv4 address as a
    client; with an empty one it listens on all interfaces and waits for a
    peer, which :meth:`reconnect` can later replace.
    """

    def __init__(self, server_ip: str, port: int) -> None:
        self._listener: socket.socket | None = None
        if server_ip:
            self._conn = self._connect(server_ip, port)
            print(f"[+] Initialized connection on: {self._conn.fileno()}", flush=True)
        else:
            self._listener = self._listen(port)
            self._conn = self._accept("[!] Searching for connection on: ")
            print(f"[+] Initialized connection on: {self._listener.fileno()}", flush=True)

    @staticmethod
    def _connect(server_ip: str, port: int) -> socket.socket:
        try:
            socket.inet_pton(socket.AF_INET, server_ip)
        except OSError:
            raise ValueError(f"pton failed: invalid IPv4 address {server_ip!r}") from None
        sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
        try:
            sock.connect((server_ip, port))
        except BaseException:
            sock.close()
            raise
        return sock

    @staticmethod
    def _listen(port: int) -> socket.socket:
        sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
        try:
            sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
            if hasattr(socket, "SO_REUSEPORT"):
                sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEPORT, 1)
            sock.bind(("", port))
            sock.listen(LISTEN_BACKLOG)
        except BaseException:
            sock.close()
            raise
        return sock

    def _accept(self, message: str) -> socket.socket:
        listener = self._listener
        while True:
            print(f"{message}{listener.fileno()}", flush=True)
            try:
                conn, _ = listener.accept()
                return conn
            except OSError:
                if listener.fileno() < 0:
                    raise
                time.sleep(RETRY_DELAY)

    def read(self, maxlen: int) -> bytes:
        """Receive up to ``maxlen`` bytes; ``b""`` means the peer closed."""
        return self._conn.recv(maxlen)

    def write(self, data: bytes) -> int:
        """Send ``data`` and return how many bytes were sent."""
        return self._conn.send(data)

    def reconnect(self) -> None:
        """Drop the current peer and wait for a new one (server side only)."""
        if self._listener is None:
            return
        self._conn.close()
        self._conn = self._accept("[!] Attempting reconnect on: ")
        print(f"[+] reconnect on: {self._listener.fileno()}", flush=True)

    def close(self) -> None:
        self._conn.close()
        if self._listener is not None:
            self._listener.close()

    def __enter__(self) -> TcpSocket:
        return self

    def __exit__(self, *args) -> None:
        self.close()