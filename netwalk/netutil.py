"""Small socket helpers shared by the command-line tools."""

from __future__ import annotations

import socket

DEFAULT_BACKLOG = 10


def host_of(sockaddr) -> str:
    """Return the textual host part of an IPv4 or IPv6 socket address tuple."""
    if not isinstance(sockaddr, tuple) or not sockaddr or not isinstance(sockaddr[0], str):
        raise ValueError(f"not an internet socket address: {sockaddr!r}")
    return sockaddr[0]


def open_listener(host=None, port=0, backlog=DEFAULT_BACKLOG) -> socket.socket:
    """Bind a listening TCP socket to the first usable address for host and port.

    Each candidate address is tried in resolver order with SO_REUSEADDR set;
    OSError is raised when none of them can be bound.
    """
    infos = socket.getaddrinfo(
        host, port, socket.AF_UNSPEC, socket.SOCK_STREAM, 0, socket.AI_PASSIVE
    )
    last_error: OSError | None = None
    for family, socktype, proto, _, sockaddr in infos:
        try:
            sock = socket.socket(family, socktype, proto)
        except OSError as exc:
            last_error = exc
            continue
        try:
            sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
            sock.bind(sockaddr)
        except OSError as exc:
            sock.close()
            last_error = exc
            continue
        break
    else:
        raise OSError(f"failed to bind to {host!r} port {port!r}") from last_error

    try:
        sock.listen(backlog)
    except OSError:
        sock.close()
        raise
    return sock