import socket
from unittest import mock

from infrakit import dns
from infrakit.ipaddr import IpAddress


def _fake_entries():
    return [
        (socket.AF_INET, socket.SOCK_STREAM, 6, "", ("10.12.16.56", 0)),
        (socket.AF_INET6, socket.SOCK_STREAM, 6, "", ("::1", 0, 0, 0)),
    ]


def test_literal_v4_address_is_not_resolved():
    with mock.patch("socket.getaddrinfo") as lookup:
        result = dns.get_ip_address("192.168.0.1")
    assert result == [IpAddress.try_parse("192.168.0.1")]
    lookup.assert_not_called()


def test_literal_v6_address():
    assert dns.get_ip_address("::1") == [IpAddress.try_parse("::1")]


def test_name_is_resolved():
    with mock.patch("socket.getaddrinfo", return_value=_fake_entries()) as lookup:
        result = dns.get_ip_address("host.example.com")
    assert result == [IpAddress.from_octets(10, 12, 16, 56), IpAddress.try_parse("::1")]
    assert lookup.call_args.args[0] == "host.example.com"


def test_scope_suffix_is_dropped():
    entries = [(socket.AF_INET6, socket.SOCK_DGRAM, 17, "", ("fe80::1%eth0", 0, 0, 2))]
    with mock.patch("socket.getaddrinfo", return_value=entries):
        result = dns.get_ip_address("host.example.com")
    assert result == [IpAddress.try_parse("fe80::1")]


def test_lookup_failure_gives_empty_list():
    with mock.patch("socket.getaddrinfo", side_effect=socket.gaierror("no such host")):
        assert dns.get_ip_address("missing.example.com") == []


def test_host_name_from_socket():
    with mock.patch("socket.gethostname", return_value="machine-one"):
        assert dns.get_host_name() == "machine-one"


def test_host_name_failure():
    with mock.patch("socket.gethostname", side_effect=OSError("failed")):
        assert dns.get_host_name() == ""


def test_local_ip_address_resolves_host_name():
    with mock.patch("socket.gethostname", return_value="machine-one"), \
            mock.patch("socket.getaddrinfo", return_value=_fake_entries()) as lookup:
        result = dns.get_local_ip_address()
    assert lookup.call_args.args[0] == "machine-one"
    assert result[0] == IpAddress.try_parse("10.12.16.56")
    assert len(result) == 2