import socket

import pytest

from netwalk.netutil import host_of, open_listener


def test_host_of_ipv4_tuple():
    assert host_of(("127.0.0.1", 80)) == "127.0.0.1"


def test_host_of_ipv6_tuple():
    assert host_of(("::1", 80, 0, 0)) == "::1"


@pytest.mark.parametrize("bad", [(), "/tmp/sock", (b"raw", 1)])
def test_host_of_rejects_non_inet_addresses(bad):
    with pytest.raises(ValueError):
        host_of(bad)


def test_open_listener_accepts_connections():
    listener = open_listener("127.0.0.1", 0, 5)
    with listener:
        host, port = listener.getsockname()[:2]
        assert host == "127.0.0.1"
        assert port > 0
        assert listener.getsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR) > 0
        with socket.create_connection((host, port), timeout=2) as client:
            conn, addr = listener.accept()
            with conn:
                assert addr[:2] == client.getsockname()[:2]


def test_open_listener_fails_on_port_in_use():
    first = open_listener("127.0.0.1", 0, 5)
    with first:
        port = first.getsockname()[1]
        with pytest.raises(OSError):
            open_listener("127.0.0.1", port, 5)