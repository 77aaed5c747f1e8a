# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

from types import SimpleNamespace

import dns.exception
import dns.resolver
import pytest

from viascan.errors import ConfigurationError, ResolutionError
from viascan.resolver import Resolver, ResolverConfig, is_ip_literal


def install_fake_dns(monkeypatch, answers):
    """Replace dnspython's Resolver; `answers` maps (name, rdtype) to addresses or an exception."""
    created = []

    class FakeDnsResolver:
        def __init__(self, configure=True):
            self.configure = configure
            self.nameservers = []
            self.port = 53
            self.timeout = None
            self.lifetime = None
            self.queries = []
            created.append(self)

        def resolve(self, name, rdtype, search=None):
            self.queries.append((name, rdtype, search))
            answer = answers.get((name, rdtype), dns.resolver.NXDOMAIN())
            if isinstance(answer, Exception):
                raise answer
            return [SimpleNamespace(address=address) for address in answer]

    monkeypatch.setattr(dns.resolver, "Resolver", FakeDnsResolver)
    return created


def test_is_ip_literal():
    assert is_ip_literal("192.0.2.1")
    assert is_ip_literal("2001:db8::1")
    assert not is_ip_literal("origin.example")
    assert not is_ip_literal("")


def test_resolver_config_parse_variants():
    assert ResolverConfig.parse("8.8.8.8") == ResolverConfig("8.8.8.8", 53, 5.0)
    assert ResolverConfig.parse("127.0.0.1:5353", timeout=1.0) == ResolverConfig("127.0.0.1", 5353, 1.0)
    assert ResolverConfig.parse("::1").nameserver == "::1"
    assert ResolverConfig.parse("::1").port == 53
    assert ResolverConfig.parse("[2001:db8::53]:5300") == ResolverConfig("2001:db8::53", 5300, 5.0)


@pytest.mark.parametrize("endpoint", ["", "resolver.example", "1.2.3.4:dns", "1.2.3.4:70000", "[::1", "[::1]x"])
def test_resolver_config_parse_rejects_invalid(endpoint):
    with pytest.raises(ConfigurationError):
        ResolverConfig.parse(endpoint)


def test_ip_literal_never_queries_network(monkeypatch):
    created = install_fake_dns(monkeypatch, {})
    resolver = Resolver(ResolverConfig("192.0.2.53"))

    assert resolver.resolve("192.0.2.7") == ("192.0.2.7",)
    assert resolver.select_address("2001:db8::7") == "2001:db8::7"
    resolver.exists("192.0.2.7")
    assert created == []


def test_resolve_uses_only_configured_endpoint(monkeypatch):
    created = install_fake_dns(monkeypatch, {("origin.example", "A"): ["192.0.2.10", "192.0.2.11"]})
    resolver = Resolver(ResolverConfig("192.0.2.53", port=5353, timeout=2.0))

    assert resolver.resolve("origin.example") == ("192.0.2.10", "192.0.2.11")

    lookup = created[0]
    assert lookup.configure is False
    assert lookup.nameservers == ["192.0.2.53"]
    assert lookup.port == 5353
    assert lookup.lifetime == 2.0
    assert lookup.queries == [("origin.example", "A", False)]


def test_select_address_takes_first_answer(monkeypatch):
    install_fake_dns(monkeypatch, {("origin.example", "A"): ["192.0.2.20", "192.0.2.21"]})
    assert Resolver().select_address("origin.example") == "192.0.2.20"


def test_resolve_falls_back_to_aaaa(monkeypatch):
    install_fake_dns(
        monkeypatch,
        {
            ("v6only.example", "A"): dns.resolver.NoAnswer(),
            ("v6only.example", "AAAA"): ["2001:db8::80"],
        },
    )
    assert Resolver().resolve("v6only.example") == ("2001:db8::80",)


def test_resolution_failures_raise_resolution_error(monkeypatch):
    install_fake_dns(
        monkeypatch,
        {
            ("slow.example", "A"): dns.exception.Timeout(),
            ("empty.example", "A"): [],
        },
    )
    resolver = Resolver()

    with pytest.raises(ResolutionError) as excinfo:
        resolver.exists("nosuch.invalid")
    assert excinfo.value.name == "nosuch.invalid"

    with pytest.raises(ResolutionError):
        resolver.resolve("slow.example")
    with pytest.raises(ResolutionError, match="no addresses"):
        resolver.select_address("empty.example")
    with pytest.raises(ResolutionError):
        resolver.resolve("")
