"""
SMPP PDU Data Model

This package provides the immutable message values exchanged over a Stream:
the generic Pdu, the Sms view over it, and DeliveryReceipt parsing.
"""

from .base import Address, Pdu, Tag
from .message import Sms, SubmitOptions
from .receipt import RECEIPT_PATTERN, DeliveryReceipt, parse_delivery_receipt

__all__ = [
    # Base types
    'Pdu',
    'Tag',
    'Address',
    # Messages
    'Sms',
    'SubmitOptions',
    # Delivery receipts
    'DeliveryReceipt',
    'parse_delivery_receipt',
    'RECEIPT_PATTERN',
]
