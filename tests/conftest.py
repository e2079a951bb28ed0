import json
import os
import tempfile
from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest
import requests

# The logger opens its file sink on import
os.environ.setdefault("LOG_PATH", os.path.join(tempfile.gettempdir(), "transmission_session_test.log"))

from transmission_session.config import ClientConfig
from transmission_session.transmission import Transmission


SESSION_HEADER = "X-Transmission-Session-Id"


def make_response(status_code=200, payload=None, headers=None, content=None):
    """Build a real requests.Response without touching the network."""
    response = requests.Response()
    response.status_code = status_code
    response.headers.update(headers or {})
    if content is not None:
        response._content = content
    elif payload is not None:
        response._content = json.dumps(payload).encode("utf-8")
    else:
        response._content = b""
    response.encoding = "utf-8"
    response.url = "http://localhost:9091/transmission/rpc"
    return response


def handshake(token="abc123"):
    return make_response(409, headers={SESSION_HEADER: token}, content=b"<h1>409: Conflict</h1>")


def success(arguments=None):
    return make_response(200, {"result": "success", "arguments": arguments or {}})


@pytest.fixture
def http():
    return MagicMock(spec=requests.Session)


@pytest.fixture
def config():
    return ClientConfig(host="localhost")


@pytest.fixture
def client(config, http):
    return Transmission(config, session=http)


@pytest.fixture
def reply():
    """Factories for daemon replies: handshake(token), success(arguments), make(status, ...)."""
    return SimpleNamespace(handshake=handshake, success=success, make=make_response)
