"""
Unit tests for smpplink exception classes.

Tests error codes, categories, retryability and the context carried by
each exception family.
"""

import pytest

from smpplink.exceptions import (
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


class TestSMPPException:
    """Test the base exception"""

    def test_message_only(self):
        """Test exception with a message only"""
        exc = SMPPException('Something happened')

        assert str(exc) == 'Something happened'
        assert exc.error_code is None
        assert exc.context == {}
        assert exc.category is None
        assert not exc.retryable

    def test_string_error_code(self):
        """Test a free-form error code is shown but has no category"""
        exc = SMPPException('Oops', error_code='E42')

        assert 'Error Code: E42' in str(exc)
        assert exc.category is None

    def test_str_includes_code_and_context(self):
        """Test string representation with error code and context"""
        exc = SMPPException(
            'Failed',
            error_code=SMPPErrorCode.READ_FAILED,
            context={'host': 'smsc1'},
        )

        text = str(exc)
        assert text.startswith('Failed')
        assert 'Error Code: READ_FAILED (1004)' in text
        assert 'Context: host=smsc1' in text

    def test_original_error_kept(self):
        """Test the wrapped error is preserved"""
        cause = OSError('boom')
        exc = SMPPException('Failed', original_error=cause)

        assert exc.original_error is cause


class TestErrorCategories:
    """Test error codes and categories per exception type"""

    @pytest.mark.parametrize(
        'exc_class, code',
        [
            (SMPPNoHostsAvailableException, SMPPErrorCode.NO_HOSTS_AVAILABLE),
            (SMPPConnectFailedException, SMPPErrorCode.CONNECT_FAILED),
            (SMPPProbeFailedException, SMPPErrorCode.PROBE_FAILED),
            (SMPPReadFailedException, SMPPErrorCode.READ_FAILED),
            (SMPPWriteFailedException, SMPPErrorCode.WRITE_FAILED),
            (SMPPStreamException, SMPPErrorCode.STREAM_ERROR),
            (SMPPReadTimeoutException, SMPPErrorCode.READ_TIMEOUT),
            (SMPPWriteTimeoutException, SMPPErrorCode.WRITE_TIMEOUT),
        ],
    )
    def test_connectivity_errors_are_retryable(self, exc_class, code):
        """Test connectivity failures are retryable"""
        exc = exc_class('failure')

        assert exc.error_code == code
        assert exc.category == ErrorCategory.CONNECTIVITY
        assert exc.retryable

    @pytest.mark.parametrize(
        'exc_class, code',
        [
            (SMPPMalformedDeliveryReceiptException, SMPPErrorCode.MALFORMED_DELIVERY_RECEIPT),
            (SMPPEncodingException, SMPPErrorCode.ENCODING_ERROR),
        ],
    )
    def test_protocol_errors(self, exc_class, code):
        """Test payload errors are not retryable"""
        exc = exc_class('bad payload')

        assert exc.error_code == code
        assert exc.category == ErrorCategory.PROTOCOL
        assert not exc.retryable
        assert isinstance(exc, SMPPProtocolException)

    @pytest.mark.parametrize(
        'exc_class, code',
        [
            (SMPPInvalidStateException, SMPPErrorCode.INVALID_STATE),
            (SMPPConfigLockedException, SMPPErrorCode.CONFIG_LOCKED),
            (SMPPValidationException, SMPPErrorCode.VALIDATION_ERROR),
            (SMPPConfigurationException, SMPPErrorCode.CONFIGURATION_ERROR),
        ],
    )
    def test_misuse_errors(self, exc_class, code):
        """Test API misuse errors are not retryable"""
        exc = exc_class('misuse')

        assert exc.error_code == code
        assert exc.category == ErrorCategory.MISUSE
        assert not exc.retryable

    def test_explicit_error_code_wins(self):
        """Test an explicit error code overrides the class default"""
        exc = SMPPConnectFailedException('x', error_code=SMPPErrorCode.UNKNOWN)

        assert exc.error_code == SMPPErrorCode.UNKNOWN

    def test_hierarchy(self):
        """Test exception inheritance"""
        assert issubclass(SMPPReadFailedException, SMPPConnectionException)
        assert issubclass(SMPPReadTimeoutException, SMPPTimeoutException)
        assert issubclass(SMPPConfigLockedException, SMPPInvalidStateException)
        assert issubclass(SMPPMalformedDeliveryReceiptException, SMPPException)


class TestExceptionContext:
    """Test context captured by each exception family"""

    def test_connection_context(self):
        """Test connection exception context"""
        exc = SMPPConnectFailedException(
            'Could not connect', host='smsc1', port=2775, operation='open'
        )

        assert exc.host == 'smsc1'
        assert exc.port == 2775
        assert exc.operation == 'open'
        assert exc.context == {'host': 'smsc1', 'port': '2775', 'operation': 'open'}

    def test_timeout_context(self):
        """Test timeout exception context"""
        exc = SMPPReadTimeoutException('Timed out', timeout_duration=0.75, operation='read_all')

        assert exc.timeout_duration == 0.75
        assert exc.context['timeout_duration'] == '0.75'
        assert exc.context['operation'] == 'read_all'

    def test_invalid_state_context(self):
        """Test invalid state exception context"""
        exc = SMPPConfigLockedException(
            'Locked', current_state='OPEN', expected_state='UNOPENED', operation='use_tls'
        )

        assert exc.current_state == 'OPEN'
        assert exc.expected_state == 'UNOPENED'
        assert exc.context['operation'] == 'use_tls'

    def test_malformed_receipt_keeps_body(self):
        """Test malformed receipt keeps text and raw body"""
        exc = SMPPMalformedDeliveryReceiptException(
            'Could not parse', text='garbage', body=b'\x01\xff'
        )

        assert exc.text == 'garbage'
        assert exc.body == b'\x01\xff'
        assert exc.context['body'] == '01ff'

    def test_encoding_context(self):
        """Test encoding exception context"""
        exc = SMPPEncodingException('No mapping', character='☃', position=3)

        assert exc.character == '☃'
        assert exc.position == 3
        assert exc.context['position'] == '3'

    def test_validation_context(self):
        """Test validation exception context"""
        exc = SMPPValidationException(
            'Bad port', field_name='port', field_value='0', validation_rule='port_range'
        )

        assert exc.context == {
            'field_name': 'port',
            'field_value': '0',
            'validation_rule': 'port_range',
        }

    def test_configuration_context(self):
        """Test configuration exception context"""
        exc = SMPPConfigurationException(
            'Conflict', config_section='transport', config_key='force_ipv4'
        )

        assert exc.config_section == 'transport'
        assert exc.context['config_key'] == 'force_ipv4'
