"""
SMPP v3.4 Protocol Constants and Enumerations

This module contains the enumerations needed to describe short messages and
delivery receipts as defined in the SMPP v3.4 specification.
"""

from enum import IntEnum
from typing import Dict


class TonType(IntEnum):
    """Type of Number (TON) values"""

    UNKNOWN = 0x00
    INTERNATIONAL = 0x01
    NATIONAL = 0x02
    NETWORK_SPECIFIC = 0x03
    SUBSCRIBER = 0x04
    ALPHANUMERIC = 0x05
    ABBREVIATED = 0x06


class NpiType(IntEnum):
    """Numbering Plan Indicator (NPI) values"""

    UNKNOWN = 0x00
    ISDN = 0x01  # ISDN (E163/E164)
    DATA = 0x03  # Data (X.121)
    TELEX = 0x04  # Telex (F.69)
    LAND_MOBILE = 0x06  # Land Mobile (E.212)
    NATIONAL = 0x08
    PRIVATE = 0x09
    ERMES = 0x0A
    INTERNET = 0x0E  # Internet (IP)
    WAP_CLIENT_ID = 0x12  # WAP Client Id (to be defined by WAP Forum)


class DataCoding(IntEnum):
    """Data Coding Scheme values"""

    DEFAULT = 0x00  # SMSC Default Alphabet
    IA5_ASCII = 0x01  # IA5 (CCITT T.50)/ASCII (ANSI X3.4)
    OCTET_UNSPECIFIED_1 = 0x02  # Octet unspecified (8-bit binary)
    LATIN_1 = 0x03  # Latin 1 (ISO-8859-1)
    OCTET_UNSPECIFIED_2 = 0x04  # Octet unspecified (8-bit binary)
    JIS = 0x05  # JIS (X 0208-1990)
    CYRILLIC = 0x06  # Cyrillic (ISO-8859-5)
    LATIN_HEBREW = 0x07  # Latin/Hebrew (ISO-8859-8)
    UCS2 = 0x08  # UCS2 (ISO/IEC-10646)


class EsmClass(IntEnum):
    """ESM Class values - Messaging Mode and Message Type"""

    DEFAULT = 0x00  # Default SMSC Mode
    DATAGRAM = 0x01  # Datagram mode
    FORWARD = 0x02  # Forward (i.e. Transaction) mode
    STORE_FORWARD = 0x03  # Store and Forward mode
    DELIVERY_RECEIPT = 0x04  # Short Message contains SMSC Delivery Receipt


# Bits 5-2 of esm_class carry the message type
ESM_CLASS_TYPE_MASK = 0x3C


class PriorityFlag(IntEnum):
    """Priority Flag values"""

    LEVEL_0 = 0x00  # Level 0 (lowest) priority
    LEVEL_1 = 0x01  # Level 1 priority
    LEVEL_2 = 0x02  # Level 2 priority
    LEVEL_3 = 0x03  # Level 3 (highest) priority


class RegisteredDelivery(IntEnum):
    """Registered Delivery values"""

    NO_RECEIPT = 0x00  # No SMSC Delivery Receipt requested
    SUCCESS_FAILURE = 0x01  # SMSC Delivery Receipt requested where final delivery outcome is delivery success or failure
    FAILURE_ONLY = 0x02  # SMSC Delivery Receipt requested where the final delivery outcome is delivery failure


class ReplaceIfPresentFlag(IntEnum):
    """Replace If Present Flag values"""

    DONT_REPLACE = 0x00  # Don't replace
    REPLACE = 0x01  # Replace


class MessageState(IntEnum):
    """Message State values for delivery receipts"""

    ENROUTE = 0x01  # The message is in enroute state
    DELIVERED = 0x02  # Message is delivered to destination
    EXPIRED = 0x03  # Message expired before delivery
    DELETED = 0x04  # Message has been deleted
    UNDELIVERABLE = 0x05  # Message is undeliverable
    ACCEPTED = 0x06  # Message is in accepted state
    UNKNOWN = 0x07  # Message is invalid state
    REJECTED = 0x08  # Message is in a rejected state


# Delivery receipt "stat:" values (SMPP v3.4 Appendix B)
RECEIPT_STATES: Dict[str, MessageState] = {
    'ENROUTE': MessageState.ENROUTE,
    'DELIVRD': MessageState.DELIVERED,
    'EXPIRED': MessageState.EXPIRED,
    'DELETED': MessageState.DELETED,
    'UNDELIV': MessageState.UNDELIVERABLE,
    'ACCEPTD': MessageState.ACCEPTED,
    'UNKNOWN': MessageState.UNKNOWN,
    'REJECTD': MessageState.REJECTED,
}

# Default Values
DEFAULT_SERVICE_TYPE = ''
DEFAULT_ESM_CLASS = EsmClass.DEFAULT
DEFAULT_PROTOCOL_ID = 0
DEFAULT_PRIORITY_FLAG = PriorityFlag.LEVEL_0
DEFAULT_REGISTERED_DELIVERY = RegisteredDelivery.NO_RECEIPT
DEFAULT_DATA_CODING = DataCoding.DEFAULT
