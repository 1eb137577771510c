"""Relay bytes from a serial line or TCP peer through a ring buffer to a stream."""

__version__ = "0.1.0"