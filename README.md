# netwalk

Small TCP networking tools built only on the standard library's `socket`,
`selectors` and `threading` modules.

## Installation

    pip install .

To run the tests:

    pip install ".[test]"
    pytest

## Commands

- `netwalk-showip HOSTNAME` looks up a host name and prints every address it
  resolves to, each marked `IPv4` or `IPv6`. It exits with status 1 when not
  given exactly one argument and 2 when the name cannot be resolved.
- `netwalk-server` listens on port 3490 on every local address. For each
  client that connects it prints `server:got connection from ADDRESS`, sends
  the greeting `Hello world from server....` from a separate thread and
  closes the connection. Stop it with Ctrl-C.
- `netwalk-client HOSTNAME` connects to port 3490 on the given host, trying
  each resolved address in turn, receives one chunk of up to 99 bytes and
  prints it as `client: received'...'`. It exits with status 2 if no address
  accepts the connection.
- `netwalk-accept` listens on port 3490, accepts a single connection, and
  writes the listening and accepted socket numbers followed by `SUCCESS`.
- `netwalk-chat` starts a chat relay on port 9034. Whatever one client sends
  is passed on to every other connected client. Pass `--tag` to prefix each
  relayed message with the sender's address, as in `[127.0.0.1]: hello`;
  tagged messages are also printed on the server and are capped at 511
  bytes.

For example, in one terminal:

    netwalk-server

and in another:

    netwalk-client localhost

## Library use

- `netwalk.netutil.open_listener(host, port, backlog)` returns a bound,
  listening TCP socket with `SO_REUSEADDR` set, trying each resolved address
  in order and raising `OSError` when none can be bound.
  `netwalk.netutil.host_of(sockaddr)` gives the host part of a socket
  address tuple and raises `ValueError` for anything else.
- `netwalk.show_ip.lookup(hostname)` returns `(version, address)` pairs in
  resolver order; `format_report(hostname, entries)` renders them as the
  command prints them.
- `netwalk.client.connect(host, port)` returns a connected socket, raising
  `socket.gaierror` or `ConnectionError`; `fetch(host, port, max_size)`
  connects, reads at most `max_size - 1` bytes and disconnects.
- `netwalk.server.greet(conn)` sends the greeting and closes the connection;
  `serve(listener, stop)` accepts connections until the `threading.Event`
  `stop` is set and returns how many it accepted.
- `netwalk.accept.accept_one(listener)` waits for a single connection and
  returns `(connection, address)`.
- `netwalk.chat.ChatServer(listener, tag_sender)` is the chat relay and a
  context manager, with `poll_once(timeout)` (returns the number of ready
  sockets), `serve_forever()` and `close()`. `format_tagged(ip, data)` builds
  a tagged message.

## Limitations

- The commands take no port option: the server, client and accept tools use
  port 3490 and the chat relay uses port 9034.
- There is no interactive chat client; connect to the relay with any
  line-oriented TCP tool. `netwalk-client` reads only one message.
- The chat relay remembers addresses for at most 64 clients; messages from
  further clients are tagged `[(null)]`.