"""
SMPP Configuration Settings

This module defines the transport and logging configuration values. Both are
immutable: a Stream keeps the value it was built with, and changing a setting
means building a new value.
"""

from dataclasses import dataclass

from ..exceptions import SMPPConfigurationException, SMPPValidationException
from .base import BaseConfig
from .validation import ConfigValidator

ENV_PREFIX = 'SMPP_TRANSPORT_'


@dataclass(frozen=True)
class TransportConfig(BaseConfig):
    """Settings for one Stream, frozen once the stream is opened."""

    use_tls: bool = False
    send_timeout_ms: int = 100
    recv_timeout_ms: int = 750
    connect_timeout_ms: int = 750
    close_timeout_ms: int = 1000
    force_ipv4: bool = False
    force_ipv6: bool = False
    random_host: bool = False
    debug: bool = False
    tcp_nodelay: bool = True

    def validate(self) -> None:
        """Validate transport configuration"""
        result = ConfigValidator.validate_transport_config(self.to_dict())
        if result.is_valid:
            return

        if self.force_ipv4 and self.force_ipv6:
            raise SMPPConfigurationException(
                'force_ipv4 and force_ipv6 are mutually exclusive',
                config_section='transport',
                config_key='force_ipv4',
            )
        raise SMPPValidationException(
            f'Invalid transport configuration: {"; ".join(result.errors)}',
            validation_rule='transport_config',
        )

    @classmethod
    def from_env(cls, prefix: str = ENV_PREFIX) -> 'TransportConfig':
        return super().from_env(prefix)


@dataclass(frozen=True)
class LoggingConfig(BaseConfig):
    """Logging configuration settings"""

    level: str = 'INFO'
    format: str = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

    def validate(self) -> None:
        """Validate logging configuration"""
        valid_levels = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']
        if self.level.upper() not in valid_levels:
            raise SMPPValidationException(
                f'Invalid log level: {self.level}',
                field_name='level',
                field_value=self.level,
                validation_rule='log_level',
            )
