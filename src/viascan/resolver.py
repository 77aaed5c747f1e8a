# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Name resolution through a single configured DNS resolver endpoint.

The operating system resolver is never consulted: every lookup goes to the
endpoint supplied at startup so a scan can be pointed at a test resolver.
"""

from __future__ import annotations

import ipaddress
import logging
from dataclasses import dataclass

import dns.exception
import dns.resolver

from .errors import ConfigurationError, ResolutionError

logger = logging.getLogger(__name__)

DEFAULT_DNS_PORT = 53


def is_ip_literal(name: str) -> bool:
    try:
        ipaddress.ip_address(name)
    except ValueError:
        return False
    return True


@dataclass(frozen=True)
class ResolverConfig:
    nameserver: str = "127.0.0.1"
    port: int = DEFAULT_DNS_PORT
    timeout: float = 5.0

    @classmethod
    def parse(cls, endpoint: str, *, timeout: float = 5.0) -> ResolverConfig:
        """
        Parse `addr`, `addr:port` or `[v6addr]:port` into a ResolverConfig.

        Raises ConfigurationError when the endpoint is not an IP address.
        """
        raw = (endpoint or "").strip()
        host, port = raw, DEFAULT_DNS_PORT
        if raw.startswith("["):
            inner, sep, rest = raw[1:].partition("]")
            if not sep or (rest and not rest.startswith(":")):
                raise ConfigurationError(f"Invalid resolver address: {endpoint!r}")
            host = inner
            if rest:
                port = _parse_port(rest[1:], endpoint)
        elif raw.count(":") == 1:
            host, _, port_text = raw.partition(":")
            port = _parse_port(port_text, endpoint)

        if not is_ip_literal(host):
            raise ConfigurationError(f"Invalid resolver address: {endpoint!r}")
        return cls(nameserver=host, port=port, timeout=timeout)


def _parse_port(text: str, endpoint: str) -> int:
    try:
        port = int(text)
    except ValueError:
        raise ConfigurationError(f"Invalid resolver port in {endpoint!r}") from None
    if not 0 < port < 65536:
        raise ConfigurationError(f"Invalid resolver port in {endpoint!r}")
    return port


class Resolver:
    """Resolve names through the configured endpoint; safe to share between threads."""

    def __init__(self, config: ResolverConfig | None = None):
        self.config = config or ResolverConfig()

    def _new_lookup(self) -> dns.resolver.Resolver:
        # One dnspython resolver per lookup keeps concurrent workers independent.
        lookup = dns.resolver.Resolver(configure=False)
        lookup.nameservers = [self.config.nameserver]
        lookup.port = self.config.port
        lookup.timeout = self.config.timeout
        lookup.lifetime = self.config.timeout
        return lookup

    def resolve(self, name: str) -> tuple[str, ...]:
        """Return the addresses for `name`, in the order the resolver sent them."""
        if is_ip_literal(name):
            return (name,)
        if not name:
            raise ResolutionError(name, "empty name")

        lookup = self._new_lookup()
        try:
            try:
                answer = lookup.resolve(name, "A", search=False)
            except dns.resolver.NoAnswer:
                logger.debug("No A records for %s, trying AAAA", name)
                answer = lookup.resolve(name, "AAAA", search=False)
        except dns.exception.DNSException as exc:
            raise ResolutionError(name, str(exc) or type(exc).__name__) from exc

        addresses = tuple(rdata.address for rdata in answer)
        if not addresses:
            raise ResolutionError(name, "no addresses returned")
        return addresses

    def exists(self, name: str) -> None:
        """Existence check: raises ResolutionError when `name` does not resolve."""
        self.resolve(name)

    def select_address(self, name: str) -> str:
        """Pick the connection address for `name` (always the first one)."""
        return self.resolve(name)[0]


__all__ = ["Resolver", "ResolverConfig", "is_ip_literal"]
