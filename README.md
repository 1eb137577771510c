# linkbridge

linkbridge reads bytes from a serial line or a TCP connection on one thread
and hands them through a bounded, thread-safe ring buffer to a second thread,
which writes them to standard output.

## Installing

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Command line

```
linkbridge [--serial --device DEVICE [--baud BAUD]] [--host HOST] [--port PORT]
```

| Option | Meaning | Default |
| --- | --- | --- |
| `--serial` | read from a serial line instead of TCP | off |
| `--device` | serial device path or pyserial URL (required with `--serial`) | none |
| `--baud` | serial baud rate | 115200 |
| `--host` | IPv4 address to connect to; empty means listen for a peer | empty |
| `--port` | TCP port | 5700 |

Without `--serial` the command uses TCP. With no `--host` it listens on every
interface at `--port` and waits for a peer to connect, printing a
`[!] Searching for connection on: ...` line for each attempt; with `--host` it
connects to that address as a client.

Each chunk received is written to standard output followed by a newline. The
command keeps running until a line is entered on standard input, then closes
the endpoint and exits with status 0. If the endpoint cannot be opened (an
unsupported baud rate, an invalid address, a refused connection, a missing
device) it prints `error: ...` to standard error and exits with status 1.

## Library use

### RingBuffer

`linkbridge.ringbuffer.RingBuffer(capacity=65536)` is a fixed-capacity byte
queue shared between a producer and a consumer. `write(data)` blocks while the
buffer is full until every byte has been stored; `read(maxlen=4096)` blocks
until at least one byte is available and returns up to `maxlen` bytes, in the
order they were written. `len()` gives the number of bytes held. A capacity
that is not positive, or a negative `maxlen`, raises `ValueError`.

```python
from linkbridge.ringbuffer import RingBuffer

ring = RingBuffer(64 * 1024)
ring.write(b"hello")
assert len(ring) == 5
assert ring.read(4096) == b"hello"
```

### SerialPort

`linkbridge.serialport.SerialPort(port_name, baud_rate)` opens a serial line
at 8 data bits, no parity, one stop bit, and discards any input already
waiting. `port_name` may be a device path or any URL pyserial understands.
Supported baud rates are 9600, 19200, 38400, 57600 and 115200; any other rate
raises `ValueError`.

`read(maxlen)` blocks until at least one byte arrives and returns up to
`maxlen` bytes. `write(data)` raises `OSError` if not every byte was written.
The port is closed by `close()` or by leaving a `with` block.

```python
from linkbridge.serialport import SerialPort

with SerialPort("/dev/ttyUSB0", 115200) as port:
    port.write(b"ping")
    reply = port.read(4096)
```

### TcpSocket

`linkbridge.tcp.TcpSocket(server_ip, port)` connects to `server_ip` as a
client when it is non-empty; an address that is not IPv4 raises `ValueError`.
With an empty `server_ip` it listens on every interface at `port` and waits
until a peer connects; `reconnect()` then drops the current peer and waits
for the next one (on a client it does nothing). Progress lines are printed to
standard output.

`read(maxlen)` returns up to `maxlen` bytes, and `b""` once the peer has
closed. `write(data)` returns the number of bytes sent. `close()`, or leaving
a `with` block, closes the connection and any listening socket.

```python
from linkbridge.tcp import TcpSocket

with TcpSocket("127.0.0.1", 5700) as conn:
    conn.write(b"ping")
    data = conn.read(4096)
```

### Pumping data

`linkbridge.cli.read_into(source, ring_buffer, chunk_size=4096)` copies what
`source.read` yields into a ring buffer and returns when a read comes back
empty. `drain_to(ring_buffer, stream, chunk_size=4096)` runs forever, writing
each chunk it takes from the ring buffer to a binary stream followed by
`b"\n"` and flushing. Each is meant to run on its own thread.

```python
import sys
import threading

from linkbridge.cli import drain_to, read_into
from linkbridge.ringbuffer import RingBuffer
from linkbridge.tcp import TcpSocket

ring = RingBuffer(64 * 1024)
conn = TcpSocket("127.0.0.1", 5700)
threading.Thread(target=read_into, args=(conn, ring, 4096), daemon=True).start()
threading.Thread(target=drain_to, args=(ring, sys.stdout.buffer, 4096), daemon=True).start()
```

## What it does not do

The bridge runs one way only: the command never sends anything to the serial
line or the TCP peer, and it does not reconnect when a TCP peer goes away;
reading simply stops. Received data goes only to standard output; there is no
option to write it to a file or to another endpoint.