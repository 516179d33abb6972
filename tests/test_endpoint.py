import pytest

from infrakit.endpoint import EndPoint
from infrakit.ipaddr import Family, IpAddress


TARGET = IpAddress.try_parse("10.12.16.56")


def test_fields_and_family():
    endpoint = EndPoint(TARGET, 4869)
    assert endpoint.ip == TARGET
    assert endpoint.port == 4869
    assert endpoint.v6_scope_id == 0
    assert endpoint.address_family is Family.IPV4


def test_equal_endpoints():
    assert EndPoint(TARGET, 4869) == EndPoint(IpAddress.from_octets(10, 12, 16, 56), 4869)


def test_different_port():
    assert EndPoint(TARGET, 4869) != EndPoint(TARGET, 6666)


def test_different_ip():
    assert EndPoint(TARGET, 4869) != EndPoint(IpAddress.V4_LOCAL_HOST, 4869)


def test_scope_ignored_for_v4():
    first = EndPoint(TARGET, 4869, 1)
    second = EndPoint(TARGET, 4869, 2)
    assert first == second
    assert hash(first) == hash(second)


def test_scope_matters_for_v6():
    address = IpAddress.try_parse("::1")
    assert EndPoint(address, 80, 1) != EndPoint(address, 80, 2)
    assert EndPoint(address, 80, 3) == EndPoint(address, 80, 3)
    assert EndPoint(address, 80).address_family is Family.IPV6


def test_set_deduplicates():
    endpoints = {EndPoint(TARGET, 4869), EndPoint(TARGET, 4869), EndPoint(TARGET, 6666)}
    assert len(endpoints) == 2


@pytest.mark.parametrize("port", [-1, 65536])
def test_port_out_of_range(port):
    with pytest.raises(ValueError):
        EndPoint(TARGET, port)


def test_scope_out_of_range():
    with pytest.raises(ValueError):
        EndPoint(IpAddress.try_parse("::1"), 80, -1)