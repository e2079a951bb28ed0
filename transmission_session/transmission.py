"""
Torrent operations on top of the session client.

Provides the Transmission class: adding torrents by URL or magnet link,
querying torrents and session variables, and removing torrents.
"""

from typing import Any, Dict, Iterable, List, Optional, Sequence, Union

from .exceptions import DuplicateTorrentError, ProtocolError
from .fields import DEFAULT_FIELDS
from .session import SessionClient


TorrentIds = Union[int, str, Iterable[Union[int, str]]]


def _as_list(ids: TorrentIds) -> List[Union[int, str]]:
    if isinstance(ids, (str, bytes, int)):
        return [ids]
    return list(ids)


class Transmission(SessionClient):

    @property
    def fields(self) -> List[str]:
        """Fields torrent-get asks for when the caller names none."""
        return list(self.config.fields or DEFAULT_FIELDS)

    def add(self, url: str, options: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        """
        Add a torrent from a URL or magnet link.

        Args:
            url: Torrent URL, magnet URI, or a path readable by the daemon
            options: Extra torrent-add arguments (paused, download-dir, ...)

        Returns:
            The torrent-added object (id, name, hashString)

        Raises:
            DuplicateTorrentError: The torrent is already on the daemon
        """
        arguments = dict(options or {})
        arguments["filename"] = url

        response = self.call("torrent-add", arguments)

        # Newer daemons answer "success" and name the existing torrent
        if "torrent-duplicate" in response:
            raise DuplicateTorrentError(torrent=response["torrent-duplicate"])
        if "torrent-added" not in response:
            raise ProtocolError("torrent-add response has no torrent-added object")
        return response["torrent-added"]

    def get(self, ids: Optional[TorrentIds] = None, fields: Optional[Sequence[str]] = None) -> List[Dict[str, Any]]:
        """
        Get torrent info.

        Args:
            ids: A torrent id, hash, or a list of them; None for every torrent
            fields: Fields to return; the configured defaults when empty

        Returns:
            List of torrent dicts
        """
        arguments: Dict[str, Any] = {"fields": list(fields) if fields else self.fields}
        if ids is not None:
            arguments["ids"] = _as_list(ids)

        response = self.call("torrent-get", arguments)
        return response.get("torrents", [])

    def only(self, torrent_id: Union[int, str], fields: Optional[Sequence[str]] = None) -> Optional[Dict[str, Any]]:
        """Get a single torrent, or None if the daemon does not know it."""
        torrents = self.get(torrent_id, fields)
        return torrents[0] if torrents else None

    def delete(self, ids: TorrentIds, delete_data: bool = False) -> bool:
        """Remove torrents and optionally their downloaded data."""
        self.call("torrent-remove", {
            "ids": _as_list(ids),
            "delete-local-data": delete_data,
        })
        return True

    def get_session(self, keys: Optional[Union[str, Sequence[str]]] = None) -> Any:
        """
        Get session variables.

        Args:
            keys: None or an empty list for the whole session, a list of keys
                for a projection (missing keys map to None), or a single key

        Returns:
            The session dict, the projected dict, or the single value
        """
        response = self.call("session-get")

        if keys is None:
            return response
        if isinstance(keys, str):
            return response.get(keys)

        keys = list(keys)
        if not keys:
            return response
        return {key: response.get(key) for key in keys}
