import ipaddress
import socket
from unittest import mock

import pytest

from flywheel_common.socket_addrs import SocketAddr, SocketAddrs, resolve


def test_single_ipv4_round_trip():
    addrs = SocketAddrs.parse("127.0.0.1:25565")
    assert len(addrs) == 1
    assert addrs[0] == SocketAddr(ipaddress.ip_address("127.0.0.1"), 25565)
    assert str(addrs) == "127.0.0.1:25565"


def test_multiple_addresses_keep_order_and_round_trip():
    text = "127.0.0.1:1,[::1]:2,10.1.2.3:3"
    addrs = SocketAddrs.parse(text)
    assert [a.port for a in addrs] == [1, 2, 3]
    assert str(addrs) == text
    assert SocketAddrs.parse(str(addrs)) == addrs


def test_ipv6_literal():
    addrs = SocketAddrs.parse("[::1]:80")
    assert addrs[0].ip == ipaddress.ip_address("::1")
    assert addrs[0].port == 80


def test_ipv6_display_uses_brackets():
    assert str(SocketAddr(ipaddress.ip_address("::1"), 8080)) == "[::1]:8080"


def test_socket_addr_accepts_text_ip():
    addr = SocketAddr("192.168.0.1", 443)
    assert addr.ip == ipaddress.IPv4Address("192.168.0.1")
    assert str(addr) == "192.168.0.1:443"


@pytest.mark.parametrize("port", [-1, 65536])
def test_socket_addr_port_out_of_range(port):
    with pytest.raises(ValueError):
        SocketAddr("127.0.0.1", port)


def test_empty_text_is_an_error():
    with pytest.raises(OSError):
        SocketAddrs.parse("")


def test_missing_port_is_an_error():
    with pytest.raises(OSError):
        SocketAddrs.parse("127.0.0.1")


def test_invalid_port_is_an_error():
    with pytest.raises(OSError):
        resolve("example.invalid:99999")


def test_non_numeric_port_is_an_error():
    with pytest.raises(OSError):
        resolve("example.invalid:http")


def test_one_bad_entry_fails_the_whole_list():
    with pytest.raises(OSError):
        SocketAddrs.parse("127.0.0.1:1,nonsense")


def test_hostname_lookup_returns_all_results():
    infos = [
        (socket.AF_INET, socket.SOCK_STREAM, 6, "", ("10.0.0.1", 25565)),
        (socket.AF_INET6, socket.SOCK_STREAM, 6, "", ("::1", 25565, 0, 0)),
    ]
    with mock.patch("socket.getaddrinfo", return_value=infos) as lookup:
        addrs = SocketAddrs.parse("game.example.com:25565")
    assert lookup.call_args.args[:2] == ("game.example.com", 25565)
    assert [str(a) for a in addrs] == ["10.0.0.1:25565", "[::1]:25565"]


def test_lookup_failure_raises_oserror():
    with mock.patch("socket.getaddrinfo", side_effect=socket.gaierror("no such host")):
        with pytest.raises(OSError):
            resolve("missing.example.com:80")


def test_empty_constant():
    empty = SocketAddrs([])
    assert empty == SocketAddrs.EMPTY
    assert str(empty) == ""
    assert list(empty) == []


def test_sequence_behaviour():
    addrs = SocketAddrs.parse("127.0.0.1:1,127.0.0.1:2")
    first = SocketAddr("127.0.0.1", 1)
    assert first in addrs
    assert addrs.index(first) == 0
    assert addrs[1:] == SocketAddrs([SocketAddr("127.0.0.1", 2)])
    assert addrs.addrs == list(addrs)


def test_addrs_list_is_a_copy():
    addrs = SocketAddrs.parse("127.0.0.1:1")
    inner = addrs.addrs
    inner.clear()
    assert len(addrs) == 1


def test_rejects_non_address_items():
    with pytest.raises(TypeError):
        SocketAddrs(["127.0.0.1:1"])