# tests/test_domain.py

import pytest

from urlspecs.errors import InvalidHostError
from urlspecs.preprocessing.domain import DomainInfo, decompose, is_ip_literal


@pytest.mark.parametrize("host", ["192.168.1.1", "0.0.0.0", "255.255.255.255", "::1", "2001:db8::1"])
def test_ip_literals(host):
    info = decompose(host)
    assert info == DomainInfo(domain=host, tld="", subdomain_count=0, is_ip=True)


@pytest.mark.parametrize("host", ["256.1.1.1", "01.2.3.4", "1.2.3", "1.2.3.4.5"])
def test_not_ipv4(host):
    assert not is_ip_literal(host)
    assert not decompose(host).is_ip


def test_simple_domain():
    info = decompose("ipfs.io")
    assert info.tld == "io"
    assert info.subdomain_count == 0
    assert info.domain == "ipfs.io"
    assert info.registrable_domain == "ipfs.io"
    assert not info.is_ip


def test_www_counts_as_subdomain_and_is_kept_in_domain():
    info = decompose("www.example.com")
    assert info.domain == "www.example.com"
    assert info.tld == "com"
    assert info.subdomain_count == 1


def test_multi_label_public_suffix():
    info = decompose("a.b.c.example.co.uk")
    assert info.tld == "co.uk"
    assert info.registrable_domain == "example.co.uk"
    assert info.subdomain_count == 3


def test_registrable_policy():
    info = decompose("www.example.co.uk", policy="registrable")
    assert info.domain == "example.co.uk"
    assert info.subdomain_count == 1


def test_naive_fallback_when_suffix_list_disabled():
    info = decompose("a.b.c.example.co.uk", use_suffix_list=False)
    assert info.tld == "uk"
    assert info.subdomain_count == 4


def test_unknown_suffix_uses_last_label():
    info = decompose("a.b.notarealtld")
    assert info.tld == "notarealtld"
    assert info.subdomain_count == 1


@pytest.mark.parametrize("use_list", [True, False])
def test_single_label_host(use_list):
    info = decompose("localhost", use_suffix_list=use_list)
    assert info.tld == ""
    assert info.subdomain_count == 0
    assert info.domain == "localhost"


def test_trailing_dot_ignored_for_labels():
    assert decompose("www.example.com.", use_suffix_list=False).subdomain_count == 1


@pytest.mark.parametrize("host", ["", "..."])
def test_empty_host_raises(host):
    with pytest.raises(InvalidHostError):
        decompose(host)


def test_unknown_policy_raises():
    with pytest.raises(ValueError):
        decompose("example.com", policy="apex")
