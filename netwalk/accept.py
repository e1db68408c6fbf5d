"""Accept a single connection on a listening socket and report it."""

from __future__ import annotations

import socket
import sys

from netwalk.netutil import open_listener

PORT = "3490"
BACKLOG = 10


def accept_one(listener: socket.socket):
    """Block until one client connects; return (connection, address)."""
    return listener.accept()


def main(argv=None) -> int:
    """Listen on the fixed port, accept one client and print the descriptors."""
    with open_listener(None, PORT, BACKLOG) as listener:
        sys.stdout.write(str(listener.fileno()))
        conn, _ = accept_one(listener)
        with conn:
            sys.stdout.write(str(conn.fileno()))
        sys.stdout.write("SUCCESS")
        sys.stdout.flush()
    return 0


if __name__ == "__main__":
    sys.exit(main())