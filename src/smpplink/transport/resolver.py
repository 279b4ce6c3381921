"""
Host Resolution

This module turns the configured (hostname, port) pairs into a pool of
candidate IPv6 and IPv4 addresses, honoring the address family preference
of the transport configuration.
"""

import logging
import random
import socket
from dataclasses import dataclass
from ipaddress import IPv4Address, IPv6Address, ip_address
from typing import Callable, Iterable, List, Optional, Sequence, Tuple, Union

from ..config import DEFAULT_TRANSPORT_CONFIG, ConfigValidator, TransportConfig
from ..exceptions import SMPPNoHostsAvailableException, SMPPValidationException

logger = logging.getLogger(__name__)

DebugHandler = Callable[[str], None]


@dataclass(frozen=True)
class HostEntry:
    """One host of the connection pool with its resolved addresses."""

    hostname: str
    port: int
    ipv6: Tuple[str, ...] = ()
    ipv4: Tuple[str, ...] = ()

    @property
    def address_count(self) -> int:
        return len(self.ipv6) + len(self.ipv4)


def _unique(addresses: Iterable[str]) -> List[str]:
    seen: List[str] = []
    for address in addresses:
        if address not in seen:
            seen.append(address)
    return seen


class HostResolver:
    """
    Resolve hostnames into a connection pool.

    Literal IP addresses are used as-is. Other names are looked up for AAAA
    records unless IPv4 is forced, and for A records plus the system resolver
    unless IPv6 is forced. Hosts left without a usable address are dropped.
    """

    def __init__(
        self,
        config: TransportConfig = DEFAULT_TRANSPORT_CONFIG,
        debug_handler: Optional[DebugHandler] = None,
    ):
        self.config = config
        self.debug_handler = debug_handler

    def _debug(self, message: str) -> None:
        logger.debug(message)
        if self.config.debug and self.debug_handler:
            self.debug_handler(message)

    def resolve(
        self, hosts: Sequence[str], ports: Union[int, Sequence[int]]
    ) -> List[HostEntry]:
        """
        Build the connection pool.

        Args:
            hosts: Hostnames or IP literals, in order of preference
            ports: One port for all hosts, or one port per host

        Returns:
            Pool entries, in order of preference

        Raises:
            SMPPNoHostsAvailableException: If no host has a usable address
            SMPPValidationException: If the ports do not match the hosts
        """
        pairs = self._pair(hosts, ports)

        if self.config.random_host:
            random.shuffle(pairs)

        pool: List[HostEntry] = []
        for hostname, port in pairs:
            entry = self._resolve_host(hostname, port)
            if entry is not None:
                pool.append(entry)

        total = sum(entry.address_count for entry in pool)
        self._debug(
            f'Built connection pool of {len(pool)} host(s) with {total} ip(s) in total'
        )

        if not pool:
            raise SMPPNoHostsAvailableException(
                'No valid hosts was found', operation='resolve'
            )

        return pool

    @staticmethod
    def _pair(
        hosts: Sequence[str], ports: Union[int, Sequence[int]]
    ) -> List[Tuple[str, int]]:
        if isinstance(ports, int):
            port_list = [ports] * len(hosts)
        else:
            port_list = list(ports)
            if len(port_list) != len(hosts):
                raise SMPPValidationException(
                    f'Got {len(port_list)} ports for {len(hosts)} hosts',
                    field_name='ports',
                    validation_rule='one_port_per_host',
                )

        for port in port_list:
            result = ConfigValidator.validate_port(port)
            if not result.is_valid:
                raise SMPPValidationException(
                    result.errors[0],
                    field_name='ports',
                    field_value=str(port),
                    validation_rule='port_range',
                )

        return list(zip(hosts, port_list))

    def _resolve_host(self, hostname: str, port: int) -> Optional[HostEntry]:
        ip6s: List[str] = []
        ip4s: List[str] = []

        try:
            literal = ip_address(hostname)
        except ValueError:
            literal = None

        if isinstance(literal, IPv4Address):
            ip4s.append(hostname)
        elif isinstance(literal, IPv6Address):
            ip6s.append(hostname)
        elif ConfigValidator.validate_host(hostname).is_valid:
            if not self.config.force_ipv4:
                ip6s = self._lookup(hostname, socket.AF_INET6, 'AAAA')
                self._debug(f'IPv6 addresses for {hostname}: {", ".join(ip6s)}')

            if not self.config.force_ipv6:
                ip4s = self._lookup(hostname, socket.AF_INET, 'A')
                # the system resolver also knows names such as "localhost"
                try:
                    ip = socket.gethostbyname(hostname)
                except (OSError, UnicodeError):
                    ip = None
                if ip and ip != hostname and ip not in ip4s:
                    ip4s.append(ip)
                self._debug(f'IPv4 addresses for {hostname}: {", ".join(ip4s)}')

        if (
            (self.config.force_ipv4 and not ip4s)
            or (self.config.force_ipv6 and not ip6s)
            or (not ip4s and not ip6s)
        ):
            self._debug(f'No usable addresses for {hostname!r}, skipping')
            return None

        return HostEntry(hostname, port, tuple(ip6s), tuple(ip4s))

    def _lookup(self, hostname: str, family: int, record: str) -> List[str]:
        try:
            infos = socket.getaddrinfo(hostname, None, family, socket.SOCK_STREAM)
        except (OSError, UnicodeError) as e:
            self._debug(f'DNS lookup for {record} records for: {hostname} failed; {e}')
            return []

        return _unique(info[4][0] for info in infos if info[0] == family)
