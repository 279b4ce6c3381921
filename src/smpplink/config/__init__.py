"""
SMPP Configuration Management

This module provides centralized configuration management for the SMPP
transport, including default values, validation, and environment-based
configuration.
"""

from .base import BaseConfig
from .defaults import DEFAULT_LOGGING_CONFIG, DEFAULT_TRANSPORT_CONFIG
from .settings import ENV_PREFIX, LoggingConfig, TransportConfig
from .validation import ConfigValidator, ValidationResult

__all__ = [
    # Configuration classes
    'BaseConfig',
    'TransportConfig',
    'LoggingConfig',
    'ENV_PREFIX',
    # Validation
    'ValidationResult',
    'ConfigValidator',
    # Default configurations
    'DEFAULT_TRANSPORT_CONFIG',
    'DEFAULT_LOGGING_CONFIG',
]
