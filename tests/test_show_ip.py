import socket
from unittest import mock

from netwalk.show_ip import format_report, lookup, main


def test_lookup_numeric_ipv4():
    assert lookup("127.0.0.1") == [("IPv4", "127.0.0.1")]


def test_format_report_layout():
    report = format_report("example.com", [("IPv4", "192.0.2.1"), ("IPv6", "2001:db8::1")])
    assert report == "IP address for example.com:\n\n IPv4:192.0.2.1\n IPv6:2001:db8::1\n"


def test_format_report_without_entries():
    assert format_report("example.com", []) == "IP address for example.com:\n\n"


def test_main_requires_exactly_one_argument(capsys):
    assert main([]) == 1
    assert capsys.readouterr().out == "Error not passed 2 args"


def test_main_prints_report(capsys):
    assert main(["127.0.0.1"]) == 0
    out = capsys.readouterr().out
    assert out.startswith("IP address for 127.0.0.1:\n\n")
    assert " IPv4:127.0.0.1\n" in out


def test_main_reports_resolver_failure(capsys):
    error = socket.gaierror(socket.EAI_NONAME, "Name or service not known")
    with mock.patch("socket.getaddrinfo", side_effect=error):
        assert main(["nowhere.example.com"]) == 2
    assert "getaddrinfo error: Name or service not known" in capsys.readouterr().err