"""
Errors raised by the Transmission session client.

Every failure a caller can see derives from TransmissionError. Transport
problems, bad credentials and protocol violations get their own subclasses;
a duplicate torrent is a ProtocolError that callers usually treat as benign.
"""

from typing import Any, Dict, Optional


class TransmissionError(Exception):
    """Base class for all client errors."""
    pass


class TransportError(TransmissionError):
    """Network failure, or an HTTP status the handshake does not interpret."""

    def __init__(self, message: str, status_code: Optional[int] = None, body: Optional[str] = None):
        super().__init__(message)
        self.status_code = status_code
        self.body = body


class AuthError(TransmissionError):
    """The daemon rejected the configured credentials (HTTP 401)."""
    pass


class ProtocolError(TransmissionError):
    """The daemon answered, but not in a way the protocol allows."""
    pass


class DuplicateTorrentError(ProtocolError):
    """The torrent being added is already present on the daemon."""

    def __init__(self, message: str = "duplicate torrent", torrent: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.torrent = torrent
