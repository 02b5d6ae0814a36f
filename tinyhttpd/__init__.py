"""A small threaded HTTP/1.1 server with echo, user-agent and file endpoints."""

__version__ = "0.1.0"
__all__ = ["helpers", "request", "response", "server"]