"""
JSON-RPC session client for the Transmission daemon.

Provides the SessionClient class, which owns the daemon's CSRF-style session
token and sends every RPC envelope through one requests.Session. The token
lifecycle is:

    no token -> handshake (GET answered with 409 + session header) -> token
    token rejected (409 on a POST) -> one handshake -> one retried POST

A second rejection after renewal is reported as a ProtocolError rather than
retried again. Token acquisition is serialized so threads sharing a client
wait on a single handshake instead of each running their own.
"""

import threading
from typing import Any, Dict, Optional

import requests

from .config import ClientConfig
from .exceptions import AuthError, DuplicateTorrentError, ProtocolError, TransportError
from .logger import logger


SESSION_CONFLICT = 409
UNAUTHORIZED = 401

RESULT_SUCCESS = "success"
RESULT_DUPLICATE = "duplicate torrent"


def _is_success(status_code: int) -> bool:
    return 200 <= status_code < 300


class SessionClient:
    def __init__(self, config: Optional[ClientConfig] = None, session: Optional[requests.Session] = None):
        self.config = config or ClientConfig.from_env()
        self.session = session or requests.Session()
        self.session_id: Optional[str] = None
        self._token_lock = threading.RLock()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()

    @property
    def url(self) -> str:
        return self.config.url

    def close(self):
        self.session.close()

    def _request(self, method: str, **kwargs) -> requests.Response:
        try:
            return self.session.request(
                method,
                self.url,
                auth=self.config.auth,
                timeout=self.config.timeout,
                **kwargs
            )
        except requests.exceptions.RequestException as e:
            raise TransportError(f"Could not connect to Transmission at {self.url}: {e}") from e

    def acquire_token(self) -> str:
        """
        Run the handshake probe and cache the session token it yields.

        The daemon answers a bare GET with 409 Conflict and the token in the
        session header; that conflict is the expected reply, not a failure.

        Returns:
            The new session token

        Raises:
            AuthError: The daemon rejected the credentials
            ProtocolError: The reply carried no session header
            TransportError: Network failure or any other HTTP status
        """
        with self._token_lock:
            response = self._request("GET")

            if response.status_code == SESSION_CONFLICT or _is_success(response.status_code):
                token = response.headers.get(self.config.session_header)
                if not token:
                    raise ProtocolError("missing session token header")
                self.session_id = token
                logger.info(f"Acquired Transmission session token from {self.url}")
                return token

            if response.status_code == UNAUTHORIZED:
                logger.error(f"Transmission at {self.url} rejected the credentials")
                raise AuthError("invalid credentials")

            raise TransportError(
                f"Handshake with {self.url} failed with {response.status_code}",
                status_code=response.status_code,
                body=response.text,
            )

    def _ensure_token(self, rejected: Optional[str] = None) -> str:
        # A caller holding a rejected token reuses a replacement another
        # thread already fetched instead of starting a second handshake.
        with self._token_lock:
            if self.session_id is not None and self.session_id != rejected:
                return self.session_id
            self.session_id = None
            return self.acquire_token()

    def _post(self, envelope: Dict[str, Any], token: str) -> requests.Response:
        if self.config.debug:
            logger.debug(f"Transmission request: {envelope}")
        response = self._request(
            "POST",
            json=envelope,
            headers={self.config.session_header: token},
        )
        if self.config.debug:
            logger.debug(f"Transmission response ({response.status_code}): {response.text}")
        return response

    def call(self, method: str, arguments: Optional[Dict[str, Any]] = None) -> Any:
        """
        Invoke an RPC method and return its arguments payload.

        Args:
            method: Protocol method name, e.g. "torrent-get"
            arguments: Method arguments; an empty object when omitted

        Returns:
            The "arguments" object of a successful reply

        Raises:
            DuplicateTorrentError: The daemon reported "duplicate torrent"
            ProtocolError: Any other non-success result, a malformed reply, or
                a token rejected again right after renewal
            AuthError: The daemon rejected the credentials
            TransportError: Network failure or an unexpected HTTP status
        """
        if not method:
            raise ValueError("method must be a non-empty string")

        envelope = {"method": method, "arguments": arguments or {}}

        token = self._ensure_token()
        response = self._post(envelope, token)

        if response.status_code == SESSION_CONFLICT:
            logger.warning(f"Session token rejected during {method}, renewing")
            token = self._ensure_token(rejected=token)
            response = self._post(envelope, token)
            if response.status_code == SESSION_CONFLICT:
                raise ProtocolError(f"session token rejected again after renewal during {method}")

        return self._decode(method, response)

    def _decode(self, method: str, response: requests.Response) -> Any:
        if response.status_code == UNAUTHORIZED:
            raise AuthError("invalid credentials")

        if not _is_success(response.status_code):
            raise TransportError(
                f"{method} failed with {response.status_code}",
                status_code=response.status_code,
                body=response.text,
            )

        try:
            data = response.json()
        except ValueError as e:
            raise ProtocolError(f"{method} returned invalid JSON: {e}") from e

        if not isinstance(data, dict) or not isinstance(data.get("result"), str):
            raise ProtocolError(f"{method} returned a malformed response")

        result = data["result"]
        if result == RESULT_SUCCESS:
            return data.get("arguments") or {}
        if result == RESULT_DUPLICATE:
            raise DuplicateTorrentError(result)

        logger.error(f"Transmission {method} failed: {result}")
        raise ProtocolError(result)
