"""
Transmission Session - talk to a Transmission daemon over JSON-RPC.

Handles the daemon's session-token handshake transparently and exposes
torrent add, get and remove operations plus session queries.
"""

from .config import ClientConfig, Config
from .exceptions import (
    AuthError,
    DuplicateTorrentError,
    ProtocolError,
    TransmissionError,
    TransportError,
)
from .fields import DEFAULT_FIELDS
from .session import SessionClient
from .transmission import Transmission

__version__ = "0.1.0"
__all__ = [
    "Transmission",
    "SessionClient",
    "ClientConfig",
    "Config",
    "DEFAULT_FIELDS",
    "TransmissionError",
    "TransportError",
    "AuthError",
    "ProtocolError",
    "DuplicateTorrentError",
]
