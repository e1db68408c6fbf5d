import socket
import threading

import pytest

from netwalk.client import connect, fetch, main
from netwalk.netutil import open_listener


def _serve_once(listener, payload):
    def run():
        conn, _ = listener.accept()
        with conn:
            conn.sendall(payload)

    thread = threading.Thread(target=run, daemon=True)
    thread.start()
    return thread


def test_fetch_returns_payload():
    with open_listener("127.0.0.1", 0, 5) as listener:
        port = listener.getsockname()[1]
        thread = _serve_once(listener, b"Hello world from server....\0")
        data = fetch("127.0.0.1", port)
        thread.join(2)
    assert data == b"Hello world from server....\0"


def test_fetch_reads_at_most_max_size_minus_one():
    payload = b"x" * 200
    with open_listener("127.0.0.1", 0, 5) as listener:
        port = listener.getsockname()[1]
        thread = _serve_once(listener, payload)
        data = fetch("127.0.0.1", port, 10)
        thread.join(2)
    assert 0 < len(data) <= 9
    assert payload.startswith(data)


def test_fetch_rejects_tiny_buffer():
    with open_listener("127.0.0.1", 0, 5) as listener:
        port = listener.getsockname()[1]
        thread = _serve_once(listener, b"data")
        with pytest.raises(ValueError):
            fetch("127.0.0.1", port, 1)
        thread.join(2)


def test_connect_reaches_listener():
    with open_listener("127.0.0.1", 0, 5) as listener:
        port = listener.getsockname()[1]
        with connect("127.0.0.1", port) as sock:
            assert sock.getpeername()[:2] == ("127.0.0.1", port)


def test_connect_refused_raises_connection_error():
    probe = socket.socket()
    probe.bind(("127.0.0.1", 0))
    port = probe.getsockname()[1]
    probe.close()
    with pytest.raises(ConnectionError, match="failed to connect"):
        connect("127.0.0.1", port)


def test_main_usage(capsys):
    assert main([]) == 1
    assert "usage:client hostname" in capsys.readouterr().err