"""Connect to a stream server and print what it sends first."""

from __future__ import annotations

import socket
import sys

from netwalk.netutil import host_of

PORT = "3490"
MAXDATASIZE = 100


def connect(host: str, port=PORT) -> socket.socket:
    """Connect to the first reachable address of host:port.

    Raises socket.gaierror if the name cannot be resolved and
    ConnectionError if no address accepts the connection.
    """
    infos = socket.getaddrinfo(host, port, socket.AF_UNSPEC, socket.SOCK_STREAM)
    last_error: OSError | None = None
    for family, socktype, proto, _, sockaddr in infos:
        try:
            sock = socket.socket(family, socktype, proto)
        except OSError as exc:
            last_error = exc
            continue
        try:
            sock.connect(sockaddr)
        except OSError as exc:
            sock.close()
            last_error = exc
            continue
        return sock
    raise ConnectionError("client: failed to connect") from last_error


def _receive(sock: socket.socket, max_size: int) -> bytes:
    if max_size < 2:
        raise ValueError("max_size must be at least 2")
    return sock.recv(max_size - 1)


def fetch(host: str, port=PORT, max_size: int = MAXDATASIZE) -> bytes:
    """Connect, read a single chunk of at most max_size - 1 bytes and disconnect."""
    with connect(host, port) as sock:
        return _receive(sock, max_size)


def main(argv=None) -> int:
    """Connect to the host named on the command line and print its greeting."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 1:
        print("usage:client hostname", file=sys.stderr)
        return 1
    try:
        sock = connect(args[0])
    except socket.gaierror as exc:
        print(f"getaddrinfo: {exc.strerror}", file=sys.stderr)
        return 1
    except ConnectionError as exc:
        print(exc, file=sys.stderr)
        return 2

    with sock:
        print(f"client: connecting to {host_of(sock.getpeername())}")
        try:
            data = _receive(sock, MAXDATASIZE)
        except OSError as exc:
            print(f"recv: {exc}", file=sys.stderr)
            return 1

    text = data.split(b"\0", 1)[0].decode(errors="replace")
    print(f"client: received'{text}'")
    return 0


if __name__ == "__main__":
    sys.exit(main())