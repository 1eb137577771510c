import io
import socket

import pytest

from linkbridge.cli import drain_to, main, read_into
from linkbridge.ringbuffer import RingBuffer


class _ListSource:
    def __init__(self, chunks):
        self._chunks = list(chunks)
        self.requested = []

    def read(self, maxlen):
        self.requested.append(maxlen)
        return self._chunks.pop(0) if self._chunks else b""


class _Stop(Exception):
    pass


class _StoppingStream(io.BytesIO):
    def __init__(self, flushes):
        super().__init__()
        self._remaining = flushes

    def flush(self):
        super().flush()
        self._remaining -= 1
        if self._remaining <= 0:
            raise _Stop


def test_read_into_copies_all_chunks_in_order():
    ring = RingBuffer(64)
    source = _ListSource([b"abc", b"def", b"gh"])
    read_into(source, ring, 16)
    assert ring.read(64) == b"abcdefgh"


def test_read_into_passes_chunk_size_to_source():
    ring = RingBuffer(64)
    source = _ListSource([b"x", b"y"])
    read_into(source, ring, 7)
    assert source.requested == [7, 7, 7]


def test_read_into_stops_on_empty_read():
    ring = RingBuffer(16)
    read_into(_ListSource([]), ring, 4)
    assert len(ring) == 0


def test_drain_to_writes_each_chunk_on_its_own_line():
    ring = RingBuffer(64)
    ring.write(b"hello")
    stream = _StoppingStream(flushes=2)
    with pytest.raises(_Stop):
        drain_to(ring, stream, 4)
    assert stream.getvalue() == b"hell\no\n"
    assert len(ring) == 0


def test_drain_to_single_chunk():
    ring = RingBuffer(64)
    ring.write(b"data")
    stream = _StoppingStream(flushes=1)
    with pytest.raises(_Stop):
        drain_to(ring, stream, 4096)
    assert stream.getvalue() == b"data\n"


def test_main_serial_requires_device():
    with pytest.raises(SystemExit) as excinfo:
        main(["--serial"])
    assert excinfo.value.code == 2


def test_main_rejects_unsupported_baud(capsys):
    assert main(["--serial", "--device", "loop://", "--baud", "1234"]) == 1
    assert "Unsupported baud rate" in capsys.readouterr().err


def test_main_rejects_invalid_ip(capsys):
    assert main(["--host", "not-an-ip", "--port", "5700"]) == 1
    assert "pton failed" in capsys.readouterr().err


def test_main_serial_loopback_stops_on_input(monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("\n"))
    assert main(["--serial", "--device", "loop://"]) == 0


def test_main_tcp_client_connects_and_closes(monkeypatch, capsys):
    server = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    server.bind(("127.0.0.1", 0))
    server.listen(1)
    port = server.getsockname()[1]
    monkeypatch.setattr("sys.stdin", io.StringIO("\n"))
    try:
        assert main(["--host", "127.0.0.1", "--port", str(port)]) == 0
        server.settimeout(5)
        conn, _ = server.accept()
        with conn:
            conn.settimeout(5)
            assert conn.recv(16) == b""
    finally:
        server.close()
    assert "[+] Initialized connection on:" in capsys.readouterr().out