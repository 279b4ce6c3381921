"""
smpplink - SMPP Client Transport and Message Encoding

The lower layers of an SMPP v3.4 client (ESME):

- A blocking stream transport with host failover, IPv6/IPv4 preference,
  optional TLS and timeout-bounded exact-length reads and writes
- A GSM 03.38 text codec with 7-bit septet packing
- The Pdu, Sms and DeliveryReceipt data model and a delivery receipt parser

Quick Start:
    from smpplink import Stream, TransportConfig

    config = TransportConfig(recv_timeout_ms=5000)
    with Stream(['smsc1.example.com', 'smsc2.example.com'], 2775, config=config) as stream:
        stream.write(bind_transceiver_pdu)
        header = stream.read_all(16)
"""

# Configuration management
from .config import (
    DEFAULT_TRANSPORT_CONFIG,
    ENV_PREFIX,
    LoggingConfig,
    TransportConfig,
)

# Exception classes
from .exceptions import (
    ErrorCategory,
    SMPPConfigLockedException,
    SMPPConfigurationException,
    SMPPConnectFailedException,
    SMPPConnectionException,
    SMPPEncodingException,
    SMPPErrorCode,
    SMPPException,
    SMPPInvalidStateException,
    SMPPMalformedDeliveryReceiptException,
    SMPPNoHostsAvailableException,
    SMPPProbeFailedException,
    SMPPProtocolException,
    SMPPReadFailedException,
    SMPPReadTimeoutException,
    SMPPStreamException,
    SMPPTimeoutException,
    SMPPValidationException,
    SMPPWriteFailedException,
    SMPPWriteTimeoutException,
)

# Protocol constants, codecs and data model
from .protocol import (
    RECEIPT_STATES,
    Address,
    DataCoding,
    DeliveryReceipt,
    EsmClass,
    GsmCodec,
    MessageState,
    NpiType,
    Pdu,
    PriorityFlag,
    RegisteredDelivery,
    ReplaceIfPresentFlag,
    Sms,
    SubmitOptions,
    Tag,
    TonType,
    decode_message,
    encode_message,
    parse_delivery_receipt,
)

# Transport layer
from .transport import HostEntry, HostResolver, Stream, StreamState
from .utils import setup_logging

# Package metadata
__all__ = [
    # Transport
    'Stream',
    'StreamState',
    'HostEntry',
    'HostResolver',
    # Configuration
    'TransportConfig',
    'LoggingConfig',
    'DEFAULT_TRANSPORT_CONFIG',
    'ENV_PREFIX',
    'setup_logging',
    # Protocol constants
    'DataCoding',
    'EsmClass',
    'MessageState',
    'NpiType',
    'PriorityFlag',
    'RegisteredDelivery',
    'ReplaceIfPresentFlag',
    'TonType',
    'RECEIPT_STATES',
    # Codecs
    'GsmCodec',
    'encode_message',
    'decode_message',
    # Data model
    'Pdu',
    'Tag',
    'Address',
    'Sms',
    'SubmitOptions',
    'DeliveryReceipt',
    'parse_delivery_receipt',
    # Exceptions
    'SMPPErrorCode',
    'ErrorCategory',
    'SMPPException',
    'SMPPConnectionException',
    'SMPPNoHostsAvailableException',
    'SMPPConnectFailedException',
    'SMPPProbeFailedException',
    'SMPPReadFailedException',
    'SMPPWriteFailedException',
    'SMPPStreamException',
    'SMPPTimeoutException',
    'SMPPReadTimeoutException',
    'SMPPWriteTimeoutException',
    'SMPPInvalidStateException',
    'SMPPConfigLockedException',
    'SMPPProtocolException',
    'SMPPMalformedDeliveryReceiptException',
    'SMPPEncodingException',
    'SMPPValidationException',
    'SMPPConfigurationException',
]

# Module-level configuration
import logging  # noqa: E402

# Set up default logging to reduce noise unless explicitly configured
logging.getLogger(__name__).addHandler(logging.NullHandler())
