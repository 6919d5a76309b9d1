"""Command-line client that sends a file over UDP with a Go-Back-N window.

Data datagrams carry sequence numbers starting at 1; a datagram with an empty
payload marks the end of the file. The server acknowledges cumulatively: an
``ack_num`` of n confirms every datagram up to and including n.
"""

from __future__ import annotations

import getopt
import sys
import time
from collections import deque
from dataclasses import dataclass
from typing import BinaryIO

from .datagram import MAX_PAYLOAD_LENGTH, Datagram, compute_checksum, validate_checksum
from .log import DEFAULT_LEVEL, TRACE, configure, get_logger
from .timer import Timer
from .transport import UnreliableTransport

WINDOW_SIZE = 10
TIMEOUT_MS = 15
DEFAULT_PORT = 12345
USAGE = "Usage: rft-client -f filename -h hostname [-p port] [-d debug_level]"

_SEQ_MASK = 0xFFFF


class UsageError(ValueError):
    """The command line could not be used."""


@dataclass
class Options:
    hostname: str = ""
    filename: str = ""
    port: int = DEFAULT_PORT
    log_level: int = DEFAULT_LEVEL


def parse_args(argv: list[str]) -> Options:
    """Parse ``-f filename -h hostname [-p port] [-d debug_level]``."""
    try:
        pairs, _ = getopt.gnu_getopt(argv, "f:h:p:d:")
    except getopt.GetoptError as exc:
        raise UsageError(str(exc)) from exc

    options = Options()
    required = 0
    try:
        for flag, value in pairs:
            if flag == "-p":
                options.port = int(value)
                if not 0 <= options.port <= 0xFFFF:
                    raise ValueError(f"port out of range: {value}")
            elif flag == "-h":
                options.hostname = value
                required += 1
            elif flag == "-d":
                options.log_level = int(value)
            elif flag == "-f":
                options.filename = value
                required += 1
    except ValueError as exc:
        raise UsageError(f"Invalid command line arguments: {exc}") from exc

    if required != 2:
        raise UsageError("hostname and filename are required.")
    return options


def _make_datagram(seq: int, chunk: bytes) -> Datagram:
    datagram = Datagram(seq_num=seq & _SEQ_MASK, payload_length=len(chunk), data=chunk)
    datagram.checksum = compute_checksum(datagram)
    return datagram


def _send_stream(
    transport: UnreliableTransport,
    stream: BinaryIO,
    timer: Timer,
    window: int = WINDOW_SIZE,
) -> None:
    """Send the whole stream and return once every datagram is acknowledged."""
    log = get_logger()
    base = next_seq = 1
    unacked: deque[Datagram] = deque()
    eof_sent = False

    while not eof_sent or unacked:
        while len(unacked) < window and not eof_sent:
            chunk = stream.read(MAX_PAYLOAD_LENGTH)
            datagram = _make_datagram(next_seq, chunk)
            transport.send(datagram)
            unacked.append(datagram)
            if not timer.running:
                timer.start()
            next_seq += 1
            eof_sent = not chunk

        reply = transport.receive()
        if reply is not None:
            if not validate_checksum(reply):
                log.debug("Dropping corrupted acknowledgment.")
                continue
            acked = base + ((reply.ack_num - base) & _SEQ_MASK)
            if acked < next_seq:
                while base <= acked:
                    unacked.popleft()
                    base += 1
                timer.stop()
                if unacked:
                    timer.start()
            continue

        if timer.timeout():
            log.debug("Timeout; resending %d datagrams.", len(unacked))
            for datagram in unacked:
                transport.send(datagram)
            timer.start()
        else:
            time.sleep(0.0005)


def main(argv: list[str] | None = None) -> int:
    """Run the client; returns the process exit status."""
    args = sys.argv[1:] if argv is None else argv
    try:
        options = parse_args(args)
    except UsageError as exc:
        print(USAGE)
        print(exc, file=sys.stderr)
        return 1

    logger = configure(options.log_level)
    logger.log(TRACE, "Command line arguments parsed.")
    logger.log(TRACE, "\tServername: %s", options.hostname)
    logger.log(TRACE, "\tPort number: %d", options.port)
    logger.log(TRACE, "\tDebug Level: %d", options.log_level)
    logger.log(TRACE, "\tInput file name: %s", options.filename)

    try:
        with open(options.filename, "rb") as stream:
            logger.debug("File opened")
            with UnreliableTransport(options.hostname, options.port) as transport:
                _send_stream(transport, stream, Timer(TIMEOUT_MS))
    except (OSError, ValueError, RuntimeError) as exc:
        logger.critical("Error: %s", exc)
        return 1
    return 0