"""Lists of socket addresses parsed from comma-separated host:port text."""

from __future__ import annotations

import errno
import ipaddress
import re
import socket
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Iterable, Iterator, List, Optional, Union, overload

IPAddress = Union[ipaddress.IPv4Address, ipaddress.IPv6Address]

_DIGITS = re.compile(r"[0-9]+")
_LOOKUP_PORT = re.compile(r"\+?[0-9]+")
_PORT_MAX = 0xFFFF


@dataclass(frozen=True)
class SocketAddr:
    """An IP address together with a port."""

    ip: IPAddress
    port: int

    def __post_init__(self) -> None:
        if not isinstance(self.ip, (ipaddress.IPv4Address, ipaddress.IPv6Address)):
            object.__setattr__(self, "ip", ipaddress.ip_address(self.ip))
        if isinstance(self.port, bool) or not isinstance(self.port, int):
            raise TypeError(f"port must be an int, not {type(self.port).__name__}")
        if not 0 <= self.port <= _PORT_MAX:
            raise ValueError(f"port out of range: {self.port}")

    def __str__(self) -> str:
        if self.ip.version == 6:
            return f"[{self.ip}]:{self.port}"
        return f"{self.ip}:{self.port}"


def _invalid(message: str) -> OSError:
    return OSError(errno.EINVAL, message)


def _parse_literal(spec: str) -> Optional[SocketAddr]:
    """Parse ``a.b.c.d:port`` or ``[v6]:port``; return ``None`` if it is not one."""
    if spec.startswith("["):
        host, sep, port_text = spec[1:].partition("]:")
        if not sep:
            return None
        version = 6
    else:
        host, sep, port_text = spec.rpartition(":")
        if not sep or ":" in host:
            return None
        version = 4
    if not _DIGITS.fullmatch(port_text):
        return None
    port = int(port_text)
    if port > _PORT_MAX:
        return None
    try:
        ip = ipaddress.ip_address(host)
    except ValueError:
        return None
    if ip.version != version:
        return None
    return SocketAddr(ip, port)


def resolve(spec: str) -> List[SocketAddr]:
    """Resolve one ``host:port`` string into the addresses it names.

    A literal socket address is returned as is; anything else is split at its
    last colon and the host looked up. Raises :class:`OSError` when the text
    is malformed or the lookup fails.
    """
    literal = _parse_literal(spec)
    if literal is not None:
        return [literal]

    host, sep, port_text = spec.rpartition(":")
    if not sep:
        raise _invalid("invalid socket address")
    if not _LOOKUP_PORT.fullmatch(port_text) or int(port_text) > _PORT_MAX:
        raise _invalid("invalid port value")
    port = int(port_text)

    try:
        infos = socket.getaddrinfo(host, port, type=socket.SOCK_STREAM)
    except UnicodeError as exc:
        raise _invalid(f"invalid host name: {host!r}") from exc

    return [
        SocketAddr(ipaddress.ip_address(sockaddr[0]), sockaddr[1])
        for family, _type, _proto, _name, sockaddr in infos
        if family in (socket.AF_INET, socket.AF_INET6)
    ]


class SocketAddrs(Sequence):
    """An immutable, ordered list of socket addresses."""

    __slots__ = ("_addrs",)

    EMPTY: "SocketAddrs"

    def __init__(self, addrs: Iterable[SocketAddr] = ()) -> None:
        items = tuple(addrs)
        for addr in items:
            if not isinstance(addr, SocketAddr):
                raise TypeError(f"expected SocketAddr, not {type(addr).__name__}")
        self._addrs = items

    @classmethod
    def parse(cls, text: str) -> SocketAddrs:
        """Resolve every comma-separated ``host:port`` in ``text``, in order."""
        return cls(addr for spec in text.split(",") for addr in resolve(spec))

    @property
    def addrs(self) -> List[SocketAddr]:
        """The addresses as a new list."""
        return list(self._addrs)

    def __str__(self) -> str:
        return ",".join(map(str, self._addrs))

    def __iter__(self) -> Iterator[SocketAddr]:
        return iter(self._addrs)

    def __len__(self) -> int:
        return len(self._addrs)

    @overload
    def __getitem__(self, index: int) -> SocketAddr: ...

    @overload
    def __getitem__(self, index: slice) -> SocketAddrs: ...

    def __getitem__(self, index):
        if isinstance(index, slice):
            return type(self)(self._addrs[index])
        return self._addrs[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SocketAddrs):
            return NotImplemented
        return self._addrs == other._addrs

    def __hash__(self) -> int:
        return hash(self._addrs)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self._addrs)!r})"


SocketAddrs.EMPTY = SocketAddrs()