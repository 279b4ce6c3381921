"""Configuration validation utilities for the transport layer."""

import re
from ipaddress import AddressValueError, IPv4Address, IPv6Address
from typing import Any, Dict, List, Optional


class ValidationResult:
    """Result of configuration validation."""

    def __init__(
        self,
        is_valid: bool = True,
        errors: Optional[List[str]] = None,
        warnings: Optional[List[str]] = None,
    ):
        self.is_valid = is_valid
        self.errors = errors or []
        self.warnings = warnings or []

    def add_error(self, message: str) -> None:
        """Add validation error."""
        self.errors.append(message)
        self.is_valid = False

    def add_warning(self, message: str) -> None:
        """Add validation warning."""
        self.warnings.append(message)

    def merge(self, other: 'ValidationResult') -> None:
        """Merge another validation result."""
        self.errors.extend(other.errors)
        self.warnings.extend(other.warnings)
        if not other.is_valid:
            self.is_valid = False


class ConfigValidator:
    """Configuration validator for hosts, ports and timeouts."""

    # Port ranges
    MIN_PORT = 1
    MAX_PORT = 65535

    # Timeout ranges (milliseconds)
    MIN_TIMEOUT_MS = 1
    MAX_TIMEOUT_MS = 3_600_000

    HOSTNAME_LABEL = re.compile(r'^[a-zA-Z0-9_]([a-zA-Z0-9_-]{0,61}[a-zA-Z0-9_])?$')

    @classmethod
    def validate_host(cls, host: str) -> ValidationResult:
        """Validate host address."""
        result = ValidationResult()

        if not isinstance(host, str) or not host.strip():
            result.add_error('Host cannot be empty')
            return result

        host = host.strip()

        # Check if it's an IP address
        try:
            IPv4Address(host)
            return result
        except AddressValueError:
            pass

        try:
            IPv6Address(host)
            return result
        except AddressValueError:
            pass

        # Check if it's a valid hostname
        if not cls._is_valid_hostname(host):
            result.add_error(f'Invalid hostname format: {host}')

        return result

    @classmethod
    def validate_port(cls, port: int) -> ValidationResult:
        """Validate port number."""
        result = ValidationResult()

        if not isinstance(port, int) or isinstance(port, bool):
            result.add_error('Port must be an integer')
            return result

        if port < cls.MIN_PORT or port > cls.MAX_PORT:
            result.add_error(f'Port must be between {cls.MIN_PORT} and {cls.MAX_PORT}')
        elif port < 1024:
            result.add_warning('Using privileged port (< 1024)')

        return result

    @classmethod
    def validate_timeout(cls, timeout_ms: int, name: str = 'timeout') -> ValidationResult:
        """Validate a timeout given in milliseconds."""
        result = ValidationResult()

        if not isinstance(timeout_ms, int) or isinstance(timeout_ms, bool):
            result.add_error(f'{name} must be an integer number of milliseconds')
            return result

        if timeout_ms < cls.MIN_TIMEOUT_MS or timeout_ms > cls.MAX_TIMEOUT_MS:
            result.add_error(
                f'{name} must be between {cls.MIN_TIMEOUT_MS} and {cls.MAX_TIMEOUT_MS} ms'
            )
        elif timeout_ms > 300_000:  # 5 minutes
            result.add_warning(f'Long {name} ({timeout_ms}ms) may stall the session')

        return result

    @classmethod
    def validate_transport_config(cls, config_dict: Dict[str, Any]) -> ValidationResult:
        """Validate transport configuration."""
        result = ValidationResult()

        timeout_fields = [
            'send_timeout_ms',
            'recv_timeout_ms',
            'connect_timeout_ms',
            'close_timeout_ms',
        ]
        for field in timeout_fields:
            if field in config_dict:
                result.merge(cls.validate_timeout(config_dict[field], field))

        if config_dict.get('force_ipv4') and config_dict.get('force_ipv6'):
            result.add_error('force_ipv4 and force_ipv6 are mutually exclusive')

        return result

    @classmethod
    def _is_valid_hostname(cls, hostname: str) -> bool:
        """Check if hostname is valid."""
        if len(hostname) > 255:
            return False

        if hostname[-1] == '.':
            hostname = hostname[:-1]

        return all(cls.HOSTNAME_LABEL.match(part) for part in hostname.split('.'))
