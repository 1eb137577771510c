"""Command line entry point: pump bytes from a serial line or TCP peer to stdout."""

from __future__ import annotations

import argparse
import sys
import threading
from contextlib import suppress
from typing import BinaryIO, Protocol

from linkbridge.ringbuffer import READ_CHUNK, RingBuffer
from linkbridge.serialport import SerialPort
from linkbridge.tcp import TcpSocket

DEFAULT_BAUD = 115200
DEFAULT_TCP_PORT = 5700


class _Source(Protocol):
    def read(self, maxlen: int) -> bytes: ...


def read_into(source: _Source, ring_buffer: RingBuffer, chunk_size: int = READ_CHUNK) -> None:
    """Copy everything ``source`` yields into ``ring_buffer``.

    Returns once the source reports end of stream with an empty read.
    """
    while chunk := source.read(chunk_size):
        ring_buffer.write(chunk)


def drain_to(ring_buffer: RingBuffer, stream: BinaryIO, chunk_size: int = READ_CHUNK) -> None:
    """Forever move chunks from ``ring_buffer`` to ``stream``, one per line."""
    while True:
        chunk = ring_buffer.read(chunk_size)
        stream.write(chunk)
        stream.write(b"\n")
        stream.flush()


def _pump(source: _Source, ring_buffer: RingBuffer) -> None:
    # The endpoint is closed under the reader on shutdown; that is expected.
    with suppress(OSError):
        read_into(source, ring_buffer)


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="linkbridge",
        description="Relay bytes from a serial line or a TCP peer to standard output. "
        "Press Enter to stop.",
    )
    parser.add_argument("--serial", action="store_true", help="read from a serial line instead of TCP")
    parser.add_argument("--device", help="serial device path or pyserial URL")
    parser.add_argument("--baud", type=int, default=DEFAULT_BAUD, help="serial baud rate")
    parser.add_argument(
        "--host",
        default="",
        help="IPv4 address to connect to; leave empty to listen for a peer",
    )
    parser.add_argument("--port", type=int, default=DEFAULT_TCP_PORT, help="TCP port")
    args = parser.parse_args(argv)
    if args.serial and not args.device:
        parser.error("--device is required with --serial")
    return args


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)
    try:
        endpoint: SerialPort | TcpSocket
        if args.serial:
            endpoint = SerialPort(args.device, args.baud)
        else:
            endpoint = TcpSocket(args.host, args.port)
    except (ValueError, OSError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    ring_buffer = RingBuffer()
    with endpoint:
        threading.Thread(target=_pump, args=(endpoint, ring_buffer), daemon=True).start()
        threading.Thread(
            target=drain_to, args=(ring_buffer, sys.stdout.buffer), daemon=True
        ).start()
        sys.stdin.readline()
    return 0


if __name__ == "__main__":
    sys.exit(main())