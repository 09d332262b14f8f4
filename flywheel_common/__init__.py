"""Change-tracking containers, wrapping counters, small vectors, socket address lists and asyncio task helpers."""

__version__ = "0.1.0"

__all__ = ["dirty", "ordered", "increment", "vector", "socket_addrs", "manually_poll", "tasks"]