"""
SMPP Utilities Module

This module provides small helpers shared by the transport and protocol
layers: logging setup, millisecond conversions and SMPP time parsing.
"""

import logging
from datetime import datetime, timezone
from typing import TYPE_CHECKING, Union

if TYPE_CHECKING:
    from .config import LoggingConfig

DEFAULT_LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def setup_logging(level: Union[int, 'LoggingConfig'] = logging.INFO) -> None:
    """Set up basic logging configuration."""
    if isinstance(level, int):
        logging.basicConfig(level=level, format=DEFAULT_LOG_FORMAT)
        return

    level.validate()
    logging.basicConfig(level=level.level.upper(), format=level.format)


def millis_to_seconds(milliseconds: int) -> float:
    """Convert milliseconds into (fractional) seconds."""
    return milliseconds / 1000


def parse_receipt_date(digits: str) -> datetime:
    """
    Parse a delivery receipt date of the form YYMMDDhhmm[ss].

    The year is taken as 2000+YY and the result is an aware UTC datetime.
    Seconds default to zero for the 10-digit short form; an 11-digit
    value carries a single seconds digit.

    Raises:
        ValueError: If the digits do not form a valid calendar date
    """
    if not digits.isdigit() or len(digits) not in (10, 11, 12):
        raise ValueError(f'Invalid receipt date: {digits!r}')

    parts = [int(digits[i : i + 2]) for i in range(0, len(digits), 2)]
    year, month, day, hour, minute = parts[:5]
    second = parts[5] if len(parts) > 5 else 0

    return datetime(
        2000 + year, month, day, hour, minute, second, tzinfo=timezone.utc
    )


__all__ = [
    # Logging
    'DEFAULT_LOG_FORMAT',
    'setup_logging',
    # Time handling
    'millis_to_seconds',
    'parse_receipt_date',
]
