"""
SMPP Stream Transport

This module provides the blocking, synchronous byte stream an SMPP session
runs on: host failover across a resolved connection pool, optional TLS,
readiness probing, and exact-length reads and writes bounded by timeouts.

Once open, the socket is non-blocking and every wait goes through
select(), so a silent peer can never stall the caller for longer than the
configured timeout.
"""

import dataclasses
import logging
import select
import socket
import ssl
from enum import Enum
from typing import Callable, List, Optional, Sequence, Tuple, Union

from ..config import DEFAULT_TRANSPORT_CONFIG, TransportConfig
from ..exceptions import (
    SMPPConfigLockedException,
    SMPPConnectFailedException,
    SMPPInvalidStateException,
    SMPPProbeFailedException,
    SMPPReadFailedException,
    SMPPReadTimeoutException,
    SMPPStreamException,
    SMPPValidationException,
    SMPPWriteFailedException,
    SMPPWriteTimeoutException,
)
from ..utils import millis_to_seconds
from .resolver import DebugHandler, HostEntry, HostResolver

logger = logging.getLogger(__name__)

# Nothing to do right now, retry once the socket is ready
_RETRY_ERRORS = (
    BlockingIOError,
    InterruptedError,
    ssl.SSLWantReadError,
    ssl.SSLWantWriteError,
)


class StreamState(Enum):
    """Stream lifecycle states"""

    UNOPENED = 'UNOPENED'
    OPEN = 'OPEN'
    CLOSED = 'CLOSED'


class Stream:
    """
    Blocking SMPP byte stream with host failover.

    The connection pool is resolved when the stream is built. ``open`` then
    tries every address of every host in order, IPv6 before IPv4, and keeps
    the first connection that succeeds. A stream is opened at most once.

    Example Usage:

        with Stream(['smsc1.example.com', 'smsc2.example.com'], 2775) as stream:
            stream.write(bind_pdu)
            header = stream.read_all(16)
    """

    def __init__(
        self,
        hosts: Union[str, Sequence[str]],
        ports: Union[int, Sequence[int]],
        persist: bool = False,
        debug_handler: Optional[DebugHandler] = None,
        config: Optional[TransportConfig] = None,
    ):
        """
        Initialize the stream and resolve its connection pool

        Args:
            hosts: Hostnames or IP literals, in order of preference
            ports: One port for all hosts, or one port per host
            persist: Whether the caller intends to keep the session alive
            debug_handler: Receives diagnostic messages when debug is enabled
            config: Transport settings, defaults to DEFAULT_TRANSPORT_CONFIG

        Raises:
            SMPPNoHostsAvailableException: If no host has a usable address
        """
        config = config or DEFAULT_TRANSPORT_CONFIG
        config.validate()

        if isinstance(hosts, str):
            hosts = [hosts]

        self._config = config
        self.persist = persist
        self.debug_handler = debug_handler

        self._socket: Optional[socket.socket] = None
        self._state = StreamState.UNOPENED
        self._connected_host: Optional[Tuple[str, str, int]] = None

        # Event callbacks
        self.on_state_changed: Optional[
            Callable[[StreamState, StreamState], None]
        ] = None

        resolver = HostResolver(config, debug_handler)
        self._hosts: Tuple[HostEntry, ...] = tuple(resolver.resolve(hosts, ports))

    @property
    def state(self) -> StreamState:
        """Get current stream state"""
        return self._state

    @property
    def config(self) -> TransportConfig:
        return self._config

    @property
    def hosts(self) -> Tuple[HostEntry, ...]:
        """The resolved connection pool, in connection order"""
        return self._hosts

    @property
    def connected_host(self) -> Optional[Tuple[str, str, int]]:
        """(hostname, ip, port) of the current connection, if any"""
        return self._connected_host

    def get_socket(self) -> Optional[socket.socket]:
        """Get the underlying socket, None unless the stream is open"""
        return self._socket

    def _debug(self, message: str) -> None:
        logger.debug(message)
        if self._config.debug and self.debug_handler:
            self.debug_handler(message)

    def _set_state(self, new_state: StreamState) -> None:
        """Set stream state and trigger state change event"""
        old_state = self._state
        if old_state != new_state:
            self._state = new_state
            logger.debug(f'Stream state changed: {old_state.value} -> {new_state.value}')
            if self.on_state_changed:
                try:
                    self.on_state_changed(old_state, new_state)
                except Exception as e:
                    logger.exception(f'Error in state change handler: {e}')

    # Configuration

    def _replace_config(self, operation: str, **changes) -> None:
        if self._state is StreamState.OPEN:
            raise SMPPConfigLockedException(
                f'Cannot {operation} while the stream is open',
                current_state=self._state.value,
                operation=operation,
            )
        config = dataclasses.replace(self._config, **changes)
        config.validate()
        self._config = config

    def use_tls(self, enabled: bool) -> None:
        """Enable or disable TLS for the next open"""
        self._replace_config('change TLS mode', use_tls=enabled)

    def set_send_timeout(self, timeout_ms: int) -> None:
        self._replace_config('change send timeout', send_timeout_ms=timeout_ms)

    def set_recv_timeout(self, timeout_ms: int) -> None:
        self._replace_config('change receive timeout', recv_timeout_ms=timeout_ms)

    # Lifecycle

    def open(self) -> None:
        """
        Connect to the first reachable address of the connection pool

        Raises:
            SMPPInvalidStateException: If the stream was opened before
            SMPPConnectFailedException: If no address accepted the connection
        """
        if self._state is not StreamState.UNOPENED:
            raise SMPPInvalidStateException(
                'A stream can only be opened once',
                current_state=self._state.value,
                expected_state=StreamState.UNOPENED.value,
                operation='open',
            )

        ssl_context = self._create_ssl_context() if self._config.use_tls else None

        for entry in self._hosts:
            candidates: List[Tuple[str, int]] = []
            if not self._config.force_ipv4:
                candidates += [(ip, socket.AF_INET6) for ip in entry.ipv6]
            if not self._config.force_ipv6:
                candidates += [(ip, socket.AF_INET) for ip in entry.ipv4]

            for ip, family in candidates:
                label = (
                    f'[{ip}]:{entry.port}'
                    if family == socket.AF_INET6
                    else f'{ip}:{entry.port}'
                )
                self._debug(f'Connecting to {entry.hostname} ({label})...')
                try:
                    sock = self._connect(entry, ip, family, ssl_context)
                except OSError as e:
                    self._debug(f'Socket connect to {entry.hostname} ({label}) failed; {e}')
                    continue

                self._socket = sock
                self._connected_host = (entry.hostname, ip, entry.port)
                self._set_state(StreamState.OPEN)
                logger.info(f'Connected to {entry.hostname} ({label})')
                return

        raise SMPPConnectFailedException(
            'Could not connect to any of the specified hosts', operation='open'
        )

    @staticmethod
    def _create_ssl_context() -> ssl.SSLContext:
        # SMSC certificates are commonly self-signed
        context = ssl.SSLContext(ssl.PROTOCOL_TLS_CLIENT)
        context.check_hostname = False
        context.verify_mode = ssl.CERT_NONE
        return context

    def _connect(
        self,
        entry: HostEntry,
        ip: str,
        family: int,
        ssl_context: Optional[ssl.SSLContext],
    ) -> socket.socket:
        sock = socket.socket(family, socket.SOCK_STREAM)
        try:
            sock.settimeout(millis_to_seconds(self._config.connect_timeout_ms))
            sock.connect((ip, entry.port))
            if self._config.tcp_nodelay:
                sock.setsockopt(socket.IPPROTO_TCP, socket.TCP_NODELAY, 1)
            if ssl_context is not None:
                sock = ssl_context.wrap_socket(sock, server_hostname=entry.hostname)
            sock.setblocking(False)
        except OSError:
            sock.close()
            raise
        return sock

    def close(self) -> None:
        """
        Close the stream

        Waits up to the close timeout for pending output to drain. Failures
        while shutting down are logged and never raised. Safe to call more
        than once.
        """
        sock = self._socket
        if sock is None:
            if self._state is StreamState.OPEN:
                self._set_state(StreamState.CLOSED)
            return

        try:
            select.select([], [sock], [], millis_to_seconds(self._config.close_timeout_ms))
            sock.shutdown(socket.SHUT_RDWR)
        except (OSError, ValueError) as e:
            logger.debug(f'Error shutting down stream: {e}')
        finally:
            try:
                sock.close()
            except OSError as e:
                logger.debug(f'Error closing socket: {e}')
            self._socket = None
            self._set_state(StreamState.CLOSED)

        if self._connected_host:
            logger.info(f'Disconnected from {self._connected_host[0]}')

    def __enter__(self) -> 'Stream':
        self.open()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    # Probing

    def _select(
        self,
        readable: List[socket.socket],
        writable: List[socket.socket],
        exceptional: List[socket.socket],
        timeout: float,
        operation: str,
    ) -> Tuple[list, list, list]:
        try:
            return select.select(readable, writable, exceptional, timeout)
        except (OSError, ValueError) as e:
            raise SMPPProbeFailedException(
                'Could not examine stream', operation=operation, original_error=e
            ) from e

    def _require_open(self, operation: str) -> socket.socket:
        if self._state is not StreamState.OPEN or self._socket is None:
            raise SMPPInvalidStateException(
                f'Cannot {operation}: stream is not open',
                current_state=self._state.value,
                expected_state=StreamState.OPEN.value,
                operation=operation,
            )
        return self._socket

    def is_open(self) -> bool:
        """
        Check if the stream is open and healthy

        A peer that shut the connection down is detected once its end of
        stream reaches the socket. Over TLS that means every record, including
        the close_notify alert, has been read; until then the stream still
        reports open and the next read observes the shutdown.

        Raises:
            SMPPProbeFailedException: If the socket could not be examined
        """
        sock = self._socket
        if self._state is not StreamState.OPEN or sock is None or sock.fileno() == -1:
            return False

        readable, _, exceptional = self._select([sock], [], [sock], 0, 'is_open')
        if exceptional:
            return False
        if readable and self._peer_closed(sock):
            return False
        return True

    @staticmethod
    def _peer_closed(sock: socket.socket) -> bool:
        try:
            if isinstance(sock, ssl.SSLSocket):
                if sock.pending():
                    return False
                # TLS records cannot be peeked at, the TCP stream below can
                return socket.socket.recv(sock, 1, socket.MSG_PEEK) == b''
            return sock.recv(1, socket.MSG_PEEK) == b''
        except _RETRY_ERRORS:
            return False
        except OSError:
            return True

    def has_data(self) -> bool:
        """
        Check if data can be read without blocking

        Raises:
            SMPPInvalidStateException: If the stream is not open
            SMPPProbeFailedException: If the socket could not be examined
        """
        sock = self._require_open('check for data')
        if isinstance(sock, ssl.SSLSocket) and sock.pending():
            return True
        readable, _, _ = self._select([sock], [], [], 0, 'has_data')
        return bool(readable)

    # Reading and writing

    def read(self, length: int) -> bytes:
        """
        Read up to ``length`` bytes without waiting

        Returns:
            The bytes available, empty if there were none or the peer closed
        """
        sock = self._require_open('read')
        try:
            return sock.recv(length)
        except _RETRY_ERRORS:
            return b''
        except OSError as e:
            raise SMPPReadFailedException(
                f'Could not read {length} bytes from stream',
                operation='read',
                original_error=e,
            ) from e

    def read_all(self, length: int) -> bytes:
        """
        Read exactly ``length`` bytes

        Each wait for more data is bounded by the receive timeout.

        Raises:
            SMPPReadFailedException: If reading fails or the peer closes
            SMPPReadTimeoutException: If no data arrives within the timeout
            SMPPStreamException: If the socket reports an exceptional condition
        """
        sock = self._require_open('read')
        timeout = millis_to_seconds(self._config.recv_timeout_ms)
        buffer = bytearray()

        while len(buffer) < length:
            try:
                chunk = sock.recv(length - len(buffer))
            except _RETRY_ERRORS:
                chunk = None
            except OSError as e:
                raise SMPPReadFailedException(
                    f'Could not read {length} bytes from stream',
                    operation='read_all',
                    original_error=e,
                ) from e

            if chunk is not None:
                if not chunk:
                    raise SMPPReadFailedException(
                        'Connection closed by peer', operation='read_all'
                    )
                buffer += chunk
                if len(buffer) >= length:
                    break

            if isinstance(sock, ssl.SSLSocket) and sock.pending():
                continue

            readable, _, exceptional = self._select(
                [sock], [], [sock], timeout, 'read_all'
            )
            if exceptional:
                raise SMPPStreamException(
                    'Socket exception while waiting for data', operation='read_all'
                )
            if not readable:
                raise SMPPReadTimeoutException(
                    'Timed out waiting for data on stream',
                    timeout_duration=timeout,
                    operation='read_all',
                )

        return bytes(buffer)

    def write(self, buffer: bytes, length: Optional[int] = None) -> None:
        """
        Write ``buffer``, or its first ``length`` bytes, to the stream

        Each wait for the socket to accept more data is bounded by the send
        timeout.

        Raises:
            SMPPValidationException: If ``length`` exceeds the buffer
            SMPPWriteFailedException: If writing fails
            SMPPWriteTimeoutException: If the peer stops accepting data
            SMPPStreamException: If the socket reports an exceptional condition
        """
        sock = self._require_open('write')
        data = memoryview(bytes(buffer))

        if length is None:
            length = len(data)
        elif length < 0 or length > len(data):
            raise SMPPValidationException(
                f'Cannot write {length} bytes from a {len(data)} byte buffer',
                field_name='length',
                field_value=str(length),
                validation_rule='buffer_bounds',
            )

        data = data[:length]
        timeout = millis_to_seconds(self._config.send_timeout_ms)
        offset = 0

        while offset < length:
            try:
                offset += sock.send(data[offset:])
            except _RETRY_ERRORS:
                pass
            except OSError as e:
                raise SMPPWriteFailedException(
                    f'Could not write {length} bytes to stream',
                    operation='write',
                    original_error=e,
                ) from e

            if offset >= length:
                break

            _, writable, exceptional = self._select([], [sock], [sock], timeout, 'write')
            if exceptional:
                raise SMPPStreamException(
                    'Socket exception while waiting to write data', operation='write'
                )
            if not writable:
                raise SMPPWriteTimeoutException(
                    'Timed out waiting to write data on stream',
                    timeout_duration=timeout,
                    operation='write',
                )

    def __repr__(self) -> str:
        hosts = ', '.join(f'{entry.hostname}:{entry.port}' for entry in self._hosts)
        return f'Stream(hosts=[{hosts}], state={self._state.value}, tls={self._config.use_tls})'
