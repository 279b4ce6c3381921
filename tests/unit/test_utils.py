"""
Unit tests for smpplink utility helpers.
"""

import logging
from datetime import datetime, timezone
from unittest.mock import patch

import pytest

from smpplink.config import LoggingConfig
from smpplink.exceptions import SMPPValidationException
from smpplink.utils import (
    DEFAULT_LOG_FORMAT,
    millis_to_seconds,
    parse_receipt_date,
    setup_logging,
)


class TestParseReceiptDate:
    """Tests for parse_receipt_date"""

    def test_ten_digits(self):
        """Test the short form without seconds"""
        result = parse_receipt_date('0610191018')

        assert result == datetime(2006, 10, 19, 10, 18, 0, tzinfo=timezone.utc)

    def test_twelve_digits(self):
        """Test the long form with seconds"""
        result = parse_receipt_date('2401311559' + '42')

        assert result == datetime(2024, 1, 31, 15, 59, 42, tzinfo=timezone.utc)

    def test_eleven_digits_single_seconds_digit(self):
        """Test an 11 digit value takes its last digit as seconds"""
        result = parse_receipt_date('24013115597')

        assert result.second == 7

    def test_result_is_utc(self):
        """Test the result is timezone aware"""
        assert parse_receipt_date('0610191018').tzinfo == timezone.utc

    @pytest.mark.parametrize('digits', ['061019101', '0610191018123', 'abcdefghij', ''])
    def test_invalid_length_or_characters(self, digits):
        """Test malformed values are rejected"""
        with pytest.raises(ValueError):
            parse_receipt_date(digits)

    def test_impossible_date(self):
        """Test calendar validation"""
        with pytest.raises(ValueError):
            parse_receipt_date('2413011200')


class TestMillisToSeconds:
    """Tests for millis_to_seconds"""

    def test_conversion(self):
        assert millis_to_seconds(750) == 0.75
        assert millis_to_seconds(1000) == 1.0


class TestSetupLogging:
    """Tests for setup_logging"""

    def test_level(self):
        """Test setup with a numeric level"""
        with patch('logging.basicConfig') as basic_config:
            setup_logging(logging.DEBUG)

        basic_config.assert_called_once_with(level=logging.DEBUG, format=DEFAULT_LOG_FORMAT)

    def test_logging_config(self):
        """Test setup from a LoggingConfig"""
        config = LoggingConfig(level='debug', format='%(message)s')

        with patch('logging.basicConfig') as basic_config:
            setup_logging(config)

        basic_config.assert_called_once_with(level='DEBUG', format='%(message)s')

    def test_invalid_logging_config(self):
        """Test an invalid level is rejected"""
        with pytest.raises(SMPPValidationException):
            setup_logging(LoggingConfig(level='LOUD'))
