"""A single-threaded chat relay built on readiness polling."""

from __future__ import annotations

import argparse
import selectors
import socket
import sys

from netwalk.netutil import host_of, open_listener

PORT = "9034"
BACKLOG = 10
MAX_CLIENTS = 64
_RECV_SIZE = 256
_MESSAGE_LIMIT = 511


def format_tagged(ip, data: bytes) -> bytes:
    """Prefix data with the sender's address as "[ip]: ".

    The body stops at the first NUL byte and the whole message is capped
    at 511 bytes.
    """
    prefix = f"[{ip if ip is not None else '(null)'}]: ".encode()
    body = data.split(b"\0", 1)[0]
    return (prefix + body)[:_MESSAGE_LIMIT]


class ChatServer:
    """Relays what each client sends to every other connected client."""

    def __init__(self, listener: socket.socket, tag_sender: bool = False):
        self._listener = listener
        self._tag_sender = tag_sender
        self._selector = selectors.DefaultSelector()
        self._selector.register(listener, selectors.EVENT_READ)
        self._clients: dict[socket.socket, str | None] = {}

    def __enter__(self) -> ChatServer:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def poll_once(self, timeout=None) -> int:
        """Wait up to timeout seconds and handle every ready socket.

        Returns the number of sockets that were ready.
        """
        events = self._selector.select(timeout)
        for key, _ in events:
            sock = key.fileobj
            if sock is self._listener:
                self._accept()
            elif sock in self._clients:
                self._receive(sock)
        return len(events)

    def serve_forever(self) -> None:
        """Relay messages until interrupted."""
        while True:
            self.poll_once(None)

    def close(self) -> None:
        """Close every client, the listener and the selector."""
        for sock in list(self._clients):
            self._drop(sock)
        try:
            self._selector.unregister(self._listener)
        except (KeyError, ValueError):
            pass
        self._selector.close()
        self._listener.close()

    def _accept(self) -> None:
        try:
            conn, addr = self._listener.accept()
        except OSError as exc:
            print(f"accept: {exc}", file=sys.stderr)
            return
        ip = host_of(addr)
        known = sum(1 for value in self._clients.values() if value is not None)
        self._clients[conn] = ip if known < MAX_CLIENTS else None
        self._selector.register(conn, selectors.EVENT_READ)
        print(f"pollserver: new connection from {ip} on socket {conn.fileno()}")

    def _drop(self, sock: socket.socket) -> None:
        self._clients.pop(sock, None)
        try:
            self._selector.unregister(sock)
        except (KeyError, ValueError):
            pass
        sock.close()

    def _receive(self, sender: socket.socket) -> None:
        sender_fd = sender.fileno()
        try:
            data = sender.recv(_RECV_SIZE)
        except OSError as exc:
            print(f"recv: {exc}", file=sys.stderr)
            self._drop(sender)
            return
        if not data:
            print(f"pollserver: socket {sender_fd} hung up")
            self._drop(sender)
            return

        if self._tag_sender:
            message = format_tagged(self._clients.get(sender), data)
            print(message.decode(errors="replace"))
        else:
            message = data

        for dest in list(self._clients):
            if dest is sender:
                continue
            try:
                dest.sendall(message)
            except OSError as exc:
                print(f"send: {exc}", file=sys.stderr)


def main(argv=None) -> int:
    """Run the chat relay on its fixed port."""
    parser = argparse.ArgumentParser(prog="chat", description="Relay chat messages between clients.")
    parser.add_argument(
        "--tag", action="store_true", help="prefix each relayed message with the sender's address"
    )
    args = parser.parse_args(argv)
    try:
        listener = open_listener(None, PORT, BACKLOG)
    except OSError:
        print("error getting listening socket", file=sys.stderr)
        return 1
    print("Waiting for multiple connections......")
    with ChatServer(listener, tag_sender=args.tag) as server:
        try:
            server.serve_forever()
        except KeyboardInterrupt:
            pass
    return 0


if __name__ == "__main__":
    sys.exit(main())