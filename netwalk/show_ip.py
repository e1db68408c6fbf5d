"""Print every address a host name resolves to."""

from __future__ import annotations

import socket
import sys

from netwalk.netutil import host_of


def lookup(hostname: str) -> list[tuple[str, str]]:
    """Resolve hostname and return (version, address) pairs in resolver order."""
    infos = socket.getaddrinfo(hostname, None, socket.AF_UNSPEC, socket.SOCK_STREAM)
    return [
        ("IPv4" if family == socket.AF_INET else "IPv6", host_of(sockaddr))
        for family, _, _, _, sockaddr in infos
    ]


def format_report(hostname: str, entries) -> str:
    """Render the resolved addresses the way the tool prints them."""
    lines = [f"IP address for {hostname}:\n\n"]
    lines.extend(f" {version}:{address}\n" for version, address in entries)
    return "".join(lines)


def main(argv=None) -> int:
    """Resolve the single host name given on the command line."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 1:
        print("Error not passed 2 args", end="")
        return 1
    hostname = args[0]
    try:
        entries = lookup(hostname)
    except socket.gaierror as exc:
        print(f"getaddrinfo error: {exc.strerror}", file=sys.stderr)
        return 2
    print(format_report(hostname, entries), end="")
    return 0


if __name__ == "__main__":
    sys.exit(main())