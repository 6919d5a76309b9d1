"""Reliable file transfer client: datagrams, timer, UDP transport and a Go-Back-N sender."""

__version__ = "0.1.0"
__all__ = ["client", "datagram", "log", "timer", "transport"]