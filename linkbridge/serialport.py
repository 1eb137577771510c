"""Raw 8N1 serial port with blocking reads."""

from __future__ import annotations

import serial

SUPPORTED_BAUD_RATES = (9600, 19200, 38400, 57600, 115200)


class SerialPort:
    """A serial line opened raw at 8 data bits, no parity, one stop bit.

    ``port_name`` may be a device path or any URL understood by pyserial.
    """

    def __init__(self, port_name: str, baud_rate: int) -> None:
        if baud_rate not in SUPPORTED_BAUD_RATES:
            raise ValueError(f"Unsupported baud rate: {baud_rate}")
        self._port = serial.serial_for_url(
            port_name,
            baudrate=baud_rate,
            bytesize=serial.EIGHTBITS,
            parity=serial.PARITY_NONE,
            stopbits=serial.STOPBITS_ONE,
            timeout=None,
        )
        self._port.reset_input_buffer()

    def read(self, maxlen: int) -> bytes:
        """Block until at least one byte arrives; return up to ``maxlen`` bytes."""
        if maxlen < 0:
            raise ValueError("maxlen must not be negative")
        if maxlen == 0:
            return b""
        data = self._port.read(1)
        waiting = min(self._port.in_waiting, maxlen - len(data))
        if waiting > 0:
            data += self._port.read(waiting)
        return data

    def write(self, data: bytes) -> None:
        """Send ``data``, raising if it could not all be written."""
        sent = self._port.write(data)
        if sent is not None and sent != len(data):
            raise OSError("incomplete write")

    def close(self) -> None:
        self._port.close()

    def __enter__(self) -> SerialPort:
        return self

    def __exit__(self, *args) -> None:
        self.close()