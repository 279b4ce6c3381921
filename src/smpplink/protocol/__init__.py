"""
SMPP Protocol Layer

This package holds the protocol constants, the GSM 03.38 codec, message text
encoding by data coding, and the PDU data model.
"""

from .codec import decode_message, encode_message
from .constants import (
    RECEIPT_STATES,
    DataCoding,
    EsmClass,
    MessageState,
    NpiType,
    PriorityFlag,
    RegisteredDelivery,
    ReplaceIfPresentFlag,
    TonType,
)
from .gsm import GSM0338_MAP, GsmCodec
from .pdu import (
    Address,
    DeliveryReceipt,
    Pdu,
    Sms,
    SubmitOptions,
    Tag,
    parse_delivery_receipt,
)

__all__ = [
    # Constants
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
    'GSM0338_MAP',
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
]
