"""
SMPP Transport Layer

This module provides the blocking byte stream SMPP sessions run on,
including host resolution, connection failover, TLS and timeout-bounded
reads and writes.
"""

from .resolver import DebugHandler, HostEntry, HostResolver
from .stream import Stream, StreamState

__all__ = [
    # Stream classes
    'Stream',
    'StreamState',
    # Host resolution
    'HostEntry',
    'HostResolver',
    'DebugHandler',
]
