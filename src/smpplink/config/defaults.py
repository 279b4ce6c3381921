"""
SMPP Configuration Defaults

This module provides default configuration values for the transport layer,
ensuring consistent behavior across the library.
"""

from .settings import LoggingConfig, TransportConfig

# Default transport configuration
DEFAULT_TRANSPORT_CONFIG = TransportConfig(
    use_tls=False,
    send_timeout_ms=100,
    recv_timeout_ms=750,
    connect_timeout_ms=750,
    close_timeout_ms=1000,
    force_ipv4=False,
    force_ipv6=False,
    random_host=False,
    debug=False,
    tcp_nodelay=True,
)

# Default logging configuration
DEFAULT_LOGGING_CONFIG = LoggingConfig(
    level='INFO',
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
)
