"""Small TCP networking tools: address lookup, greeting server and client, chat relay."""

__version__ = "0.1.0"