"""
Shared test fixtures and configuration for smpplink tests.
"""

import socket
from unittest.mock import MagicMock

import pytest

from smpplink.config import TransportConfig
from smpplink.protocol import Address, Pdu, Sms
from smpplink.protocol.constants import EsmClass


@pytest.fixture
def mock_logger():
    """Mock logger for testing log output."""
    return MagicMock()


@pytest.fixture
def sample_host_port():
    """Sample host and port for testing."""
    return {'host': 'localhost', 'port': 2775}


@pytest.fixture
def fast_config():
    """Transport configuration with short timeouts for tests."""
    return TransportConfig(
        send_timeout_ms=200,
        recv_timeout_ms=200,
        connect_timeout_ms=500,
        close_timeout_ms=100,
        force_ipv4=True,
    )


# Common test data
@pytest.fixture
def sample_receipt_text():
    """A well formed delivery receipt body."""
    return (
        'id:c449ab9744f47b6af1879e49e75e4f40 sub:001 dlvrd:001 '
        'submit date:0610191018 done date:0610191018 stat:DELIVRD err:000 '
        'text:Hello world'
    )


@pytest.fixture
def make_sms():
    """Factory for Sms values carried in a deliver_sm."""

    def _make(message, esm_class=EsmClass.DELIVERY_RECEIPT, body=b'\x00\x01'):
        return Sms(
            pdu=Pdu(command_id=0x00000005, sequence_number=7, body=body),
            source=Address('4512345678'),
            destination=Address('SMSC'),
            message=message,
            esm_class=esm_class,
        )

    return _make


@pytest.fixture
def unused_port():
    """A loopback TCP port with nothing listening on it."""
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as sock:
        sock.bind(('127.0.0.1', 0))
        return sock.getsockname()[1]
