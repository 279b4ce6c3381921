"""
SMPP PDU Base Types

This module contains the value types shared by every message view:

- Pdu: the generic protocol message as it crosses the transport
- Tag: a Tag-Length-Value optional parameter
- Address: an SMPP address (type of number, numbering plan, digits)

All of them are immutable once constructed. Framing and parsing of the outer
PDU header belong to the session layer built on top of the transport.
"""

import struct
from dataclasses import dataclass
from typing import Optional

from ...exceptions import SMPPValidationException
from ..constants import NpiType, TonType


@dataclass(frozen=True)
class Tag:
    """
    Tag-Length-Value optional parameter.

    Attributes:
        tag: The parameter tag identifier (0-65535)
        value: The parameter value as bytes
    """

    tag: int
    value: bytes = b''

    def __post_init__(self) -> None:
        if not (0 <= self.tag <= 0xFFFF):
            raise SMPPValidationException(
                f'Invalid TLV tag: {self.tag}',
                field_name='tag',
                field_value=str(self.tag),
                validation_rule='uint16',
            )
        if len(self.value) > 0xFFFF:
            raise SMPPValidationException(
                f'TLV value too long: {len(self.value)} bytes',
                field_name='value',
                validation_rule='max_length',
            )

    @property
    def length(self) -> int:
        return len(self.value)

    def encode(self) -> bytes:
        """Encode the parameter as tag, length and value."""
        return struct.pack('>HH', self.tag, self.length) + self.value

    def __repr__(self) -> str:
        return f'Tag(tag=0x{self.tag:04X}, length={self.length}, value={self.value!r})'


@dataclass(frozen=True)
class Address:
    """SMPP source or destination address."""

    value: str
    ton: int = TonType.UNKNOWN
    npi: int = NpiType.UNKNOWN

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Pdu:
    """
    Generic SMPP protocol data unit.

    Attributes:
        command_id: The SMPP command identifier
        status: Result code, 0 for success
        sequence_number: Correlates requests and responses within a session
        body: Raw body bytes, if any
    """

    command_id: int
    status: int = 0
    sequence_number: int = 0
    body: Optional[bytes] = None

    @property
    def is_response(self) -> bool:
        """Check if the command ID represents a response PDU"""
        return bool(self.command_id & 0x80000000)

    def __repr__(self) -> str:
        body_len = len(self.body) if self.body is not None else 0
        return (
            f'Pdu(command_id=0x{self.command_id:08X}, status=0x{self.status:08X}, '
            f'sequence_number={self.sequence_number}, body_len={body_len})'
        )
