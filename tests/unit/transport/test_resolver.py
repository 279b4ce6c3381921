"""
Unit tests for host resolution.

Tests literal address handling, DNS lookups per address family, host
dropping rules, shuffling and debug output. DNS is mocked throughout.
"""

import socket
from unittest.mock import MagicMock, patch

import pytest

from smpplink.config import TransportConfig
from smpplink.exceptions import SMPPNoHostsAvailableException, SMPPValidationException
from smpplink.transport.resolver import HostEntry, HostResolver

DNS = {
    ('smsc.example.com', socket.AF_INET6): ['2001:db8::1', '2001:db8::2'],
    ('smsc.example.com', socket.AF_INET): ['192.0.2.1', '192.0.2.2'],
    ('v4only.example.com', socket.AF_INET): ['192.0.2.10'],
    ('v6only.example.com', socket.AF_INET6): ['2001:db8::10'],
}


def fake_getaddrinfo(host, port, family=0, type=0, *args):
    addresses = DNS.get((host, family))
    if addresses is None:
        raise socket.gaierror(socket.EAI_NONAME, 'Name or service not known')
    info = []
    for address in addresses + addresses[:1]:  # duplicates are collapsed
        sockaddr = (address, 0, 0, 0) if family == socket.AF_INET6 else (address, 0)
        info.append((family, socket.SOCK_STREAM, 6, '', sockaddr))
    return info


def fake_gethostbyname(host):
    addresses = DNS.get((host, socket.AF_INET))
    if addresses is None:
        raise socket.gaierror(socket.EAI_NONAME, 'Name or service not known')
    return addresses[0]


@pytest.fixture
def mock_dns():
    with patch('socket.getaddrinfo', side_effect=fake_getaddrinfo) as getaddrinfo, patch(
        'socket.gethostbyname', side_effect=fake_gethostbyname
    ):
        yield getaddrinfo


class TestLiteralAddresses:
    """Test IP literals skip DNS"""

    def test_ipv4_literal(self, mock_dns):
        pool = HostResolver().resolve(['127.0.0.1'], 2775)

        assert pool == [HostEntry('127.0.0.1', 2775, (), ('127.0.0.1',))]
        mock_dns.assert_not_called()

    def test_ipv6_literal(self, mock_dns):
        pool = HostResolver().resolve(['::1'], 2775)

        assert pool == [HostEntry('::1', 2775, ('::1',), ())]
        mock_dns.assert_not_called()

    def test_ipv4_literal_dropped_when_forcing_ipv6(self, mock_dns):
        resolver = HostResolver(TransportConfig(force_ipv6=True))

        with pytest.raises(SMPPNoHostsAvailableException):
            resolver.resolve(['127.0.0.1'], 2775)

    def test_ipv6_literal_dropped_when_forcing_ipv4(self, mock_dns):
        resolver = HostResolver(TransportConfig(force_ipv4=True))

        with pytest.raises(SMPPNoHostsAvailableException):
            resolver.resolve(['::1'], 2775)


class TestLookups:
    """Test DNS lookups"""

    def test_both_families(self, mock_dns):
        pool = HostResolver().resolve(['smsc.example.com'], 2775)

        assert pool == [
            HostEntry(
                'smsc.example.com',
                2775,
                ('2001:db8::1', '2001:db8::2'),
                ('192.0.2.1', '192.0.2.2'),
            )
        ]
        assert pool[0].address_count == 4

    def test_force_ipv4_skips_aaaa(self, mock_dns):
        pool = HostResolver(TransportConfig(force_ipv4=True)).resolve(
            ['smsc.example.com'], 2775
        )

        assert pool[0].ipv6 == ()
        assert pool[0].ipv4 == ('192.0.2.1', '192.0.2.2')
        families = [call.args[2] for call in mock_dns.call_args_list]
        assert socket.AF_INET6 not in families

    def test_force_ipv6_skips_a(self, mock_dns):
        with patch('socket.gethostbyname') as gethostbyname:
            pool = HostResolver(TransportConfig(force_ipv6=True)).resolve(
                ['smsc.example.com'], 2775
            )

        assert pool[0].ipv4 == ()
        assert pool[0].ipv6 == ('2001:db8::1', '2001:db8::2')
        gethostbyname.assert_not_called()

    def test_system_resolver_fallback(self):
        """Test names only known to the system resolver are kept"""
        with patch(
            'socket.getaddrinfo', side_effect=socket.gaierror('no records')
        ), patch('socket.gethostbyname', return_value='127.0.0.1'):
            pool = HostResolver().resolve(['localhost'], 2775)

        assert pool[0].ipv4 == ('127.0.0.1',)
        assert pool[0].ipv6 == ()

    def test_single_family_hosts(self, mock_dns):
        pool = HostResolver().resolve(['v4only.example.com', 'v6only.example.com'], 2775)

        assert pool[0].ipv4 == ('192.0.2.10',)
        assert pool[0].ipv6 == ()
        assert pool[1].ipv6 == ('2001:db8::10',)
        assert pool[1].ipv4 == ()

    def test_force_ipv4_drops_ipv6_only_host(self, mock_dns):
        pool = HostResolver(TransportConfig(force_ipv4=True)).resolve(
            ['v6only.example.com', 'v4only.example.com'], 2775
        )

        assert [entry.hostname for entry in pool] == ['v4only.example.com']

    def test_unresolvable_host_dropped(self, mock_dns):
        pool = HostResolver().resolve(['missing.example.com', '127.0.0.1'], 2775)

        assert [entry.hostname for entry in pool] == ['127.0.0.1']

    def test_invalid_hostname_dropped(self, mock_dns):
        pool = HostResolver().resolve(['not a host', '127.0.0.1'], 2775)

        assert [entry.hostname for entry in pool] == ['127.0.0.1']
        mock_dns.assert_not_called()

    def test_no_hosts_available(self, mock_dns):
        with pytest.raises(SMPPNoHostsAvailableException, match='No valid hosts'):
            HostResolver().resolve(['missing.example.com'], 2775)

    def test_empty_host_list(self, mock_dns):
        with pytest.raises(SMPPNoHostsAvailableException):
            HostResolver().resolve([], 2775)


class TestPorts:
    """Test port assignment"""

    def test_port_per_host(self, mock_dns):
        pool = HostResolver().resolve(['127.0.0.1', '::1'], [2775, 2776])

        assert [(entry.hostname, entry.port) for entry in pool] == [
            ('127.0.0.1', 2775),
            ('::1', 2776),
        ]

    def test_port_count_mismatch(self, mock_dns):
        with pytest.raises(SMPPValidationException, match='ports'):
            HostResolver().resolve(['127.0.0.1', '::1'], [2775])

    def test_invalid_port(self, mock_dns):
        with pytest.raises(SMPPValidationException):
            HostResolver().resolve(['127.0.0.1'], 0)


class TestOrdering:
    """Test pool ordering"""

    def test_order_preserved(self, mock_dns):
        hosts = ['10.0.0.3', '10.0.0.1', '10.0.0.2']

        pool = HostResolver().resolve(hosts, 2775)

        assert [entry.hostname for entry in pool] == hosts

    def test_random_host_shuffles(self, mock_dns):
        hosts = ['10.0.0.1', '10.0.0.2', '10.0.0.3']

        with patch('random.shuffle', side_effect=lambda items: items.reverse()) as shuffle:
            pool = HostResolver(TransportConfig(random_host=True)).resolve(hosts, 2775)

        shuffle.assert_called_once()
        assert [entry.hostname for entry in pool] == list(reversed(hosts))


class TestDebugOutput:
    """Test diagnostic output"""

    def test_handler_called_when_debug_enabled(self, mock_dns):
        handler = MagicMock()

        HostResolver(TransportConfig(debug=True), handler).resolve(
            ['missing.example.com', '127.0.0.1'], 2775
        )

        messages = [call.args[0] for call in handler.call_args_list]
        assert any('DNS lookup for AAAA records for: missing.example.com' in m for m in messages)
        assert any('Built connection pool of 1 host(s) with 1 ip(s)' in m for m in messages)

    def test_handler_silent_without_debug(self, mock_dns):
        handler = MagicMock()

        HostResolver(TransportConfig(), handler).resolve(['127.0.0.1'], 2775)

        handler.assert_not_called()
