"""
SMPP Exception Classes

This module defines all exception classes raised by the transport and codec
layers. Every exception carries an explicit error code and category so callers
can tell retryable connectivity failures from bad payloads and from misuse of
the API without inspecting exception types.
"""

from enum import Enum, IntEnum
from typing import Any, Dict, Optional, Union


class SMPPErrorCode(IntEnum):
    """Error kinds reported by the library."""

    UNKNOWN = 0
    NO_HOSTS_AVAILABLE = 1000
    CONNECT_FAILED = 1001
    CONFIG_LOCKED = 1002
    PROBE_FAILED = 1003
    READ_FAILED = 1004
    READ_TIMEOUT = 1005
    WRITE_FAILED = 1006
    WRITE_TIMEOUT = 1007
    STREAM_ERROR = 1008
    MALFORMED_DELIVERY_RECEIPT = 1009
    INVALID_STATE = 1010
    ENCODING_ERROR = 1011
    VALIDATION_ERROR = 1012
    CONFIGURATION_ERROR = 1013


class ErrorCategory(Enum):
    """What the caller should do about an error."""

    CONNECTIVITY = 'connectivity'  # retry elsewhere or later
    PROTOCOL = 'protocol'  # inspect the payload
    MISUSE = 'misuse'  # fix the calling code


_CATEGORIES: Dict[SMPPErrorCode, ErrorCategory] = {
    SMPPErrorCode.NO_HOSTS_AVAILABLE: ErrorCategory.CONNECTIVITY,
    SMPPErrorCode.CONNECT_FAILED: ErrorCategory.CONNECTIVITY,
    SMPPErrorCode.PROBE_FAILED: ErrorCategory.CONNECTIVITY,
    SMPPErrorCode.READ_FAILED: ErrorCategory.CONNECTIVITY,
    SMPPErrorCode.READ_TIMEOUT: ErrorCategory.CONNECTIVITY,
    SMPPErrorCode.WRITE_FAILED: ErrorCategory.CONNECTIVITY,
    SMPPErrorCode.WRITE_TIMEOUT: ErrorCategory.CONNECTIVITY,
    SMPPErrorCode.STREAM_ERROR: ErrorCategory.CONNECTIVITY,
    SMPPErrorCode.MALFORMED_DELIVERY_RECEIPT: ErrorCategory.PROTOCOL,
    SMPPErrorCode.ENCODING_ERROR: ErrorCategory.PROTOCOL,
    SMPPErrorCode.CONFIG_LOCKED: ErrorCategory.MISUSE,
    SMPPErrorCode.INVALID_STATE: ErrorCategory.MISUSE,
    SMPPErrorCode.VALIDATION_ERROR: ErrorCategory.MISUSE,
    SMPPErrorCode.CONFIGURATION_ERROR: ErrorCategory.MISUSE,
}


class SMPPException(Exception):
    """Base exception for all SMPP-related errors."""

    def __init__(
        self,
        message: str,
        error_code: Optional[Union[str, SMPPErrorCode]] = None,
        context: Optional[Dict[str, Any]] = None,
        original_error: Optional[Exception] = None,
        **kwargs,
    ):
        super().__init__(message)
        self.error_code = error_code
        self.context = context or {}
        self.original_error = original_error
        self.details = kwargs

    @property
    def category(self) -> Optional[ErrorCategory]:
        """Category derived from the error code, if known."""
        if isinstance(self.error_code, SMPPErrorCode):
            return _CATEGORIES.get(self.error_code)
        return None

    @property
    def retryable(self) -> bool:
        """True when retrying against another host or later may succeed."""
        return self.category is ErrorCategory.CONNECTIVITY

    def __str__(self) -> str:
        """Enhanced string representation with context."""
        parts = [super().__str__()]

        if self.error_code:
            if isinstance(self.error_code, SMPPErrorCode):
                parts.append(
                    f'Error Code: {self.error_code.name} ({self.error_code.value})'
                )
            else:
                parts.append(f'Error Code: {self.error_code}')

        if self.context:
            context_str = ', '.join(f'{k}={v}' for k, v in self.context.items())
            parts.append(f'Context: {context_str}')

        return ' | '.join(parts)


class SMPPConnectionException(SMPPException):
    """Exception raised for connection-related errors."""

    default_code = SMPPErrorCode.CONNECT_FAILED

    def __init__(
        self,
        message: str,
        host: Optional[str] = None,
        port: Optional[int] = None,
        operation: Optional[str] = None,
        original_error: Optional[Exception] = None,
        **kwargs,
    ):
        context = {}
        if host:
            context['host'] = host
        if port:
            context['port'] = str(port)
        if operation:
            context['operation'] = operation

        kwargs.setdefault('error_code', self.default_code)

        super().__init__(
            message,
            context=context,
            original_error=original_error,
            **kwargs,
        )
        self.host = host
        self.port = port
        self.operation = operation


class SMPPNoHostsAvailableException(SMPPConnectionException):
    """No configured host resolved to a usable address."""

    default_code = SMPPErrorCode.NO_HOSTS_AVAILABLE


class SMPPConnectFailedException(SMPPConnectionException):
    """Every address of every host refused or timed out."""

    default_code = SMPPErrorCode.CONNECT_FAILED


class SMPPProbeFailedException(SMPPConnectionException):
    """The readiness check on the socket itself failed."""

    default_code = SMPPErrorCode.PROBE_FAILED


class SMPPReadFailedException(SMPPConnectionException):
    default_code = SMPPErrorCode.READ_FAILED


class SMPPWriteFailedException(SMPPConnectionException):
    default_code = SMPPErrorCode.WRITE_FAILED


class SMPPStreamException(SMPPConnectionException):
    """The OS signalled an exceptional condition on the socket."""

    default_code = SMPPErrorCode.STREAM_ERROR


class SMPPTimeoutException(SMPPException):
    """Exception raised when operations timeout."""

    default_code = SMPPErrorCode.READ_TIMEOUT

    def __init__(
        self,
        message: str,
        timeout_duration: Optional[float] = None,
        operation: Optional[str] = None,
        original_error: Optional[Exception] = None,
        **kwargs,
    ):
        context = {}
        if timeout_duration is not None:
            context['timeout_duration'] = str(timeout_duration)
        if operation:
            context['operation'] = operation

        kwargs.setdefault('error_code', self.default_code)

        super().__init__(
            message,
            context=context,
            original_error=original_error,
            **kwargs,
        )
        self.timeout_duration = timeout_duration
        self.operation = operation


class SMPPReadTimeoutException(SMPPTimeoutException):
    default_code = SMPPErrorCode.READ_TIMEOUT


class SMPPWriteTimeoutException(SMPPTimeoutException):
    default_code = SMPPErrorCode.WRITE_TIMEOUT


class SMPPInvalidStateException(SMPPException):
    """Exception raised when operation is attempted in invalid state."""

    default_code = SMPPErrorCode.INVALID_STATE

    def __init__(
        self,
        message: str,
        current_state: Optional[str] = None,
        expected_state: Optional[str] = None,
        operation: Optional[str] = None,
        original_error: Optional[Exception] = None,
        **kwargs,
    ):
        context = {}
        if current_state:
            context['current_state'] = current_state
        if expected_state:
            context['expected_state'] = expected_state
        if operation:
            context['operation'] = operation

        kwargs.setdefault('error_code', self.default_code)

        super().__init__(
            message,
            context=context,
            original_error=original_error,
            **kwargs,
        )
        self.current_state = current_state
        self.expected_state = expected_state
        self.operation = operation


class SMPPConfigLockedException(SMPPInvalidStateException):
    """Configuration was changed while the stream is open."""

    default_code = SMPPErrorCode.CONFIG_LOCKED


class SMPPProtocolException(SMPPException):
    """Exception raised for malformed protocol payloads."""

    default_code = SMPPErrorCode.UNKNOWN

    def __init__(
        self,
        message: str,
        original_error: Optional[Exception] = None,
        **kwargs,
    ):
        kwargs.setdefault('error_code', self.default_code)
        super().__init__(message, original_error=original_error, **kwargs)


class SMPPMalformedDeliveryReceiptException(SMPPProtocolException):
    """
    A delivery receipt body did not match the SMPP v3.4 Appendix B grammar.

    The original message text and raw body bytes are kept for diagnostics.
    """

    default_code = SMPPErrorCode.MALFORMED_DELIVERY_RECEIPT

    def __init__(
        self,
        message: str,
        text: str = '',
        body: Optional[bytes] = None,
        **kwargs,
    ):
        super().__init__(message, **kwargs)
        self.text = text
        self.body = body
        self.context['body'] = body.hex() if body else ''


class SMPPEncodingException(SMPPProtocolException):
    """Text could not be mapped onto the requested alphabet."""

    default_code = SMPPErrorCode.ENCODING_ERROR

    def __init__(
        self,
        message: str,
        character: Optional[str] = None,
        position: Optional[int] = None,
        **kwargs,
    ):
        super().__init__(message, **kwargs)
        self.character = character
        self.position = position
        if position is not None:
            self.context['position'] = str(position)


class SMPPValidationException(SMPPException):
    """Exception raised for validation errors."""

    def __init__(
        self,
        message: str,
        field_name: Optional[str] = None,
        field_value: Optional[str] = None,
        validation_rule: Optional[str] = None,
        original_error: Optional[Exception] = None,
        **kwargs,
    ):
        context = {}
        if field_name:
            context['field_name'] = field_name
        if field_value:
            context['field_value'] = field_value
        if validation_rule:
            context['validation_rule'] = validation_rule

        kwargs.setdefault('error_code', SMPPErrorCode.VALIDATION_ERROR)

        super().__init__(
            message,
            context=context,
            original_error=original_error,
            **kwargs,
        )
        self.field_name = field_name
        self.field_value = field_value
        self.validation_rule = validation_rule


class SMPPConfigurationException(SMPPException):
    """Exception raised for configuration-related errors."""

    def __init__(
        self,
        message: str,
        config_section: Optional[str] = None,
        config_key: Optional[str] = None,
        config_value: Optional[str] = None,
        original_error: Optional[Exception] = None,
        **kwargs,
    ):
        context = {}
        if config_section:
            context['config_section'] = config_section
        if config_key:
            context['config_key'] = config_key
        if config_value:
            context['config_value'] = config_value

        kwargs.setdefault('error_code', SMPPErrorCode.CONFIGURATION_ERROR)

        super().__init__(
            message,
            context=context,
            original_error=original_error,
            **kwargs,
        )
        self.config_section = config_section
        self.config_key = config_key
        self.config_value = config_value
