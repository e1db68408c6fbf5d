"""A stream server that greets every client and hangs up."""

from __future__ import annotations

import socket
import sys
import threading

from netwalk.netutil import host_of, open_listener

PORT = "3490"
BACKLOG = 10
GREETING = b"Hello world from server....\0"
_POLL_INTERVAL = 0.2


def greet(conn: socket.socket) -> None:
    """Send the greeting on conn and close it."""
    try:
        conn.sendall(GREETING)
    except OSError as exc:
        print(f"send: {exc}", file=sys.stderr)
    finally:
        conn.close()


def serve(listener: socket.socket, stop=None) -> int:
    """Accept connections until stop is set, greeting each in its own thread.

    Returns the number of connections accepted.
    """
    stop = stop if stop is not None else threading.Event()
    served = 0
    listener.settimeout(_POLL_INTERVAL)
    while not stop.is_set():
        try:
            conn, addr = listener.accept()
        except TimeoutError:
            continue
        except OSError as exc:
            if listener.fileno() < 0:
                break
            print(f"accept: {exc}", file=sys.stderr)
            continue
        print(f"server:got connection from {host_of(addr)}")
        threading.Thread(target=greet, args=(conn,), daemon=True).start()
        served += 1
    return served


def main(argv=None) -> int:
    """Run the greeting server on its fixed port until interrupted."""
    try:
        listener = open_listener(None, PORT, BACKLOG)
    except OSError:
        print("server: failed to bind", file=sys.stderr)
        return 1
    print("server: waiting for connections...")
    with listener:
        try:
            serve(listener)
        except KeyboardInterrupt:
            pass
    return 0


if __name__ == "__main__":
    sys.exit(main())