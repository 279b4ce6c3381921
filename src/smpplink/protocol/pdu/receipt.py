"""
SMPP Delivery Receipts

This module parses delivery receipts formatted as specified in SMPP v3.4
Appendix B. A DeliveryReceipt only exists once its Sms body has been parsed
successfully; a body that does not match the grammar yields an exception and
no partially populated receipt.
"""

import logging
import re
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ...exceptions import SMPPMalformedDeliveryReceiptException
from ...utils import parse_receipt_date
from ..constants import RECEIPT_STATES, MessageState
from .base import Pdu
from .message import Sms

logger = logging.getLogger(__name__)

# Any character except space is accepted as the message id
RECEIPT_PATTERN = re.compile(
    r'^id:([^ ]+) sub:(\d{1,3}) dlvrd:(\d{3}) submit date:(\d{10,12})'
    r' done date:(\d{10,12}) stat:([A-Z ]{7}) err:(\d{2,3}) text:(.*)$',
    re.IGNORECASE | re.DOTALL | re.ASCII,
)


@dataclass(frozen=True)
class DeliveryReceipt:
    """
    A delivery receipt extracted from the text of an Sms.

    Attributes:
        sms: The message the receipt was carried in
        id: Message identifier the receipt refers to
        sub: Number of short messages originally submitted
        dlvrd: Number of short messages delivered
        submit_date: When the original message was submitted (UTC)
        done_date: When the message reached its final state (UTC)
        stat: Final message state, 7 characters
        err: Network specific error code, leading zeros preserved
        text: First characters of the original message, may span lines
    """

    sms: Sms
    id: str
    sub: str
    dlvrd: str
    submit_date: datetime
    done_date: datetime
    stat: str
    err: str
    text: str

    @classmethod
    def parse(cls, sms: Sms) -> 'DeliveryReceipt':
        """
        Parse the message text of an Sms as a delivery receipt.

        Raises:
            SMPPMalformedDeliveryReceiptException: If the text does not match
                the receipt grammar or carries an impossible date
        """
        match = RECEIPT_PATTERN.match(sms.message)
        if match is None:
            raise SMPPMalformedDeliveryReceiptException(
                f'Could not parse delivery receipt: {sms.message}',
                text=sms.message,
                body=sms.body,
            )

        msg_id, sub, dlvrd, submit_date, done_date, stat, err, text = match.groups()

        try:
            submitted = parse_receipt_date(submit_date)
            done = parse_receipt_date(done_date)
        except ValueError as e:
            raise SMPPMalformedDeliveryReceiptException(
                f'Invalid date in delivery receipt: {e}',
                text=sms.message,
                body=sms.body,
                original_error=e,
            ) from e

        receipt = cls(
            sms=sms,
            id=msg_id,
            sub=sub,
            dlvrd=dlvrd,
            submit_date=submitted,
            done_date=done,
            stat=stat,
            err=err,
            text=text,
        )
        logger.debug(f'Parsed delivery receipt for {msg_id}: {stat} err={err}')
        return receipt

    @property
    def pdu(self) -> Pdu:
        return self.sms.pdu

    @property
    def message(self) -> str:
        return self.sms.message

    @property
    def message_state(self) -> Optional[MessageState]:
        """The stat field as a MessageState, None for non-standard values."""
        return RECEIPT_STATES.get(self.stat.upper())

    @property
    def is_delivered(self) -> bool:
        return self.message_state is MessageState.DELIVERED


def parse_delivery_receipt(sms: Sms) -> DeliveryReceipt:
    """Parse an Sms as a delivery receipt, see DeliveryReceipt.parse."""
    return DeliveryReceipt.parse(sms)
