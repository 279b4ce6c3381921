"""
SMPP Short Message View

This module contains the Sms view over a Pdu. An Sms wraps the Pdu it was
carried in instead of extending it, and keeps the fields that only make sense
for outbound submissions in a separate SubmitOptions value.
"""

from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

from ..codec import decode_message
from ..constants import (
    DEFAULT_DATA_CODING,
    DEFAULT_ESM_CLASS,
    DEFAULT_PRIORITY_FLAG,
    DEFAULT_PROTOCOL_ID,
    DEFAULT_REGISTERED_DELIVERY,
    DEFAULT_SERVICE_TYPE,
    ESM_CLASS_TYPE_MASK,
    EsmClass,
    ReplaceIfPresentFlag,
)
from .base import Address, Pdu, Tag


@dataclass(frozen=True)
class SubmitOptions:
    """Fields of an outbound submission, meaningless on deliver_sm."""

    schedule_delivery_time: str = ''
    validity_period: str = ''
    sm_default_msg_id: int = 0
    replace_if_present_flag: int = ReplaceIfPresentFlag.DONT_REPLACE


@dataclass(frozen=True)
class Sms:
    """
    A short message carried in a Pdu.

    Attributes:
        pdu: The Pdu the message was carried in
        source: Originating address
        destination: Recipient address
        message: Decoded message text
        tags: Optional TLV parameters, in wire order
        submit_options: Outbound-only fields, None on received messages
    """

    pdu: Pdu
    source: Address
    destination: Address
    message: str
    service_type: str = DEFAULT_SERVICE_TYPE
    esm_class: int = DEFAULT_ESM_CLASS
    protocol_id: int = DEFAULT_PROTOCOL_ID
    priority_flag: int = DEFAULT_PRIORITY_FLAG
    registered_delivery: int = DEFAULT_REGISTERED_DELIVERY
    data_coding: int = DEFAULT_DATA_CODING
    tags: Optional[Tuple[Tag, ...]] = None
    submit_options: Optional[SubmitOptions] = None

    def __post_init__(self) -> None:
        if self.tags is not None and not isinstance(self.tags, tuple):
            object.__setattr__(self, 'tags', tuple(self.tags))

    @classmethod
    def from_short_message(
        cls,
        pdu: Pdu,
        source: Address,
        destination: Address,
        short_message: bytes,
        data_coding: int = DEFAULT_DATA_CODING,
        tags: Optional[Sequence[Tag]] = None,
        **fields,
    ) -> 'Sms':
        """Build an Sms, decoding the raw short message by its data coding."""
        return cls(
            pdu=pdu,
            source=source,
            destination=destination,
            message=decode_message(short_message, data_coding),
            data_coding=data_coding,
            tags=tuple(tags) if tags is not None else None,
            **fields,
        )

    @property
    def command_id(self) -> int:
        return self.pdu.command_id

    @property
    def status(self) -> int:
        return self.pdu.status

    @property
    def sequence_number(self) -> int:
        return self.pdu.sequence_number

    @property
    def body(self) -> Optional[bytes]:
        return self.pdu.body

    @property
    def is_delivery_receipt(self) -> bool:
        """Check if esm_class flags the message as an SMSC delivery receipt"""
        return self.esm_class & ESM_CLASS_TYPE_MASK == EsmClass.DELIVERY_RECEIPT

    def get_tag(self, tag: int) -> Optional[Tag]:
        """Return the first TLV parameter with the given tag, if any."""
        for param in self.tags or ():
            if param.tag == tag:
                return param
        return None
