import os
from dataclasses import dataclass, field
from typing import Optional, Tuple

import dotenv


dotenv.load_dotenv()


# Defaults
DEBUG = False
VERBOSE = False
LOG_PATH = "transmission_session.log"
LOG_LEVEL = "INFO"
LOG_ROTATION = "1 week"
LOG_RETENTION = "1 month"

# Transmission defaults
TRANSMISSION_HOST = "127.0.0.1"
TRANSMISSION_PORT = 9091
TRANSMISSION_ENDPOINT = "/transmission/rpc"
TRANSMISSION_USERNAME = ""
TRANSMISSION_PASSWORD = ""
TRANSMISSION_TIMEOUT = 10
TRANSMISSION_FIELDS = ""

SESSION_HEADER = "X-Transmission-Session-Id"


def _as_bool(value) -> bool:
    return str(value).lower() in ("1", "true", "yes", "on")


def _as_fields(value: str) -> Tuple[str, ...]:
    return tuple(name.strip() for name in value.split(",") if name.strip())


class Config:
    DEBUG = _as_bool(os.getenv("DEBUG", DEBUG))
    VERBOSE = _as_bool(os.getenv("VERBOSE", VERBOSE))

    LOG_PATH = os.getenv("LOG_PATH", LOG_PATH)
    LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG" if DEBUG else LOG_LEVEL)
    LOG_ROTATION = os.getenv("LOG_ROTATION", LOG_ROTATION)
    LOG_RETENTION = os.getenv("LOG_RETENTION", LOG_RETENTION)

    # Transmission Configuration
    TRANSMISSION_HOST = os.getenv("TRANSMISSION_HOST", TRANSMISSION_HOST)
    TRANSMISSION_PORT = int(os.getenv("TRANSMISSION_PORT", TRANSMISSION_PORT))
    TRANSMISSION_ENDPOINT = os.getenv("TRANSMISSION_ENDPOINT", TRANSMISSION_ENDPOINT)
    TRANSMISSION_USERNAME = os.getenv("TRANSMISSION_USERNAME", TRANSMISSION_USERNAME)
    TRANSMISSION_PASSWORD = os.getenv("TRANSMISSION_PASSWORD", TRANSMISSION_PASSWORD)
    TRANSMISSION_TIMEOUT = float(os.getenv("TRANSMISSION_TIMEOUT", TRANSMISSION_TIMEOUT))
    TRANSMISSION_DEBUG = _as_bool(os.getenv("TRANSMISSION_DEBUG", DEBUG))
    TRANSMISSION_FIELDS = _as_fields(os.getenv("TRANSMISSION_FIELDS", TRANSMISSION_FIELDS))

    SESSION_HEADER = os.getenv("TRANSMISSION_SESSION_HEADER", SESSION_HEADER)


def normalize_host(host: str) -> str:
    """Prefix a bare host with http://, leave explicit schemes alone."""
    if host.startswith("http://") or host.startswith("https://"):
        return host
    return "http://" + host


@dataclass(frozen=True)
class ClientConfig:
    """
    Connection settings for one daemon, fixed at construction.

    ``fields`` replaces the built-in torrent-get field list for this client
    only; leave it empty to use the defaults.
    """

    host: str = TRANSMISSION_HOST
    port: int = TRANSMISSION_PORT
    endpoint: str = TRANSMISSION_ENDPOINT
    username: Optional[str] = None
    password: Optional[str] = None
    debug: bool = False
    fields: Tuple[str, ...] = field(default_factory=tuple)
    timeout: float = TRANSMISSION_TIMEOUT
    session_header: str = SESSION_HEADER

    def __post_init__(self):
        object.__setattr__(self, "host", normalize_host(self.host))
        object.__setattr__(self, "fields", tuple(self.fields or ()))

    @property
    def url(self) -> str:
        return f"{self.host}:{self.port}{self.endpoint}"

    @property
    def auth(self) -> Optional[Tuple[str, str]]:
        if self.username and self.password:
            return (self.username, self.password)
        return None

    @classmethod
    def from_env(cls, **overrides) -> "ClientConfig":
        """Build a config from the environment, with keyword overrides on top."""
        values = {
            "host": Config.TRANSMISSION_HOST,
            "port": Config.TRANSMISSION_PORT,
            "endpoint": Config.TRANSMISSION_ENDPOINT,
            "username": Config.TRANSMISSION_USERNAME or None,
            "password": Config.TRANSMISSION_PASSWORD or None,
            "debug": Config.TRANSMISSION_DEBUG,
            "fields": Config.TRANSMISSION_FIELDS,
            "timeout": Config.TRANSMISSION_TIMEOUT,
            "session_header": Config.SESSION_HEADER,
        }
        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**values)
