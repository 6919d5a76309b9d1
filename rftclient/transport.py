"""Datagram transport over plain UDP, with no delivery guarantees."""

from __future__ import annotations

import select
import socket

from .datagram import DATAGRAM_SIZE, Datagram
from .log import TRACE, get_logger


class UnreliableTransport:
    """A UDP socket aimed at one server address."""

    def __init__(self, hostname: str, port: int) -> None:
        logger = get_logger()
        logger.log(TRACE, "Creating an unreliable transport for a client.")
        if not 0 <= port <= 0xFFFF:
            raise ValueError(f"port must be between 0 and 65535, got {port}")

        self._socket = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
        try:
            results = socket.getaddrinfo(
                hostname, None, socket.AF_INET, socket.SOCK_DGRAM
            )
        except OSError as exc:
            logger.critical("Error looking up IPv4 address for %s: %s", hostname, exc)
            self._socket.close()
            raise
        ip = results[0][4][0]
        logger.debug("Found IPv4 address for %s as %s", hostname, ip)
        self.address = (ip, port)

    @property
    def local_address(self) -> tuple[str, int]:
        return self._socket.getsockname()

    def send(self, datagram: Datagram) -> None:
        """Send one datagram to the server."""
        logger = get_logger()
        logger.debug("Sending datagram to %s:%d", *self.address)
        logger.log(TRACE, "Sending: %s", datagram)
        try:
            sent = self._socket.sendto(datagram.pack(), self.address)
        except OSError:
            logger.critical("Error sending datagram.")
            self.close()
            raise
        logger.debug("Successfully sent %d bytes.", sent)

    def receive(self) -> Datagram | None:
        """Return a waiting datagram, or None when nothing has arrived."""
        logger = get_logger()
        logger.log(TRACE, "In receive()")
        try:
            readable, _, _ = select.select([self._socket], [], [], 0)
        except OSError:
            logger.critical("Error in select.")
            raise
        if not readable:
            return None
        try:
            raw, _ = self._socket.recvfrom(DATAGRAM_SIZE)
        except OSError:
            logger.critical("Error when calling recvfrom().")
            self.close()
            raise
        logger.debug("Received %d bytes.", len(raw))
        datagram = Datagram.unpack(raw)
        logger.log(TRACE, "Received: %s", datagram)
        return datagram

    def close(self) -> None:
        self._socket.close()

    def __enter__(self) -> UnreliableTransport:
        return self

    def __exit__(self, *args) -> None:
        self.close()