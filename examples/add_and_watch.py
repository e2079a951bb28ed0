"""
Add a torrent and print its progress until it finishes.

Connection settings come from the environment or a .env file:

    export TRANSMISSION_HOST="192.168.1.10"
    export TRANSMISSION_USERNAME="admin"
    export TRANSMISSION_PASSWORD="secret"

Example usage:
    python examples/add_and_watch.py "magnet:?xt=urn:btih:..."
"""

import sys
import time

from transmission_session import DuplicateTorrentError, Transmission


def main(url):
    with Transmission() as client:
        try:
            torrent = client.add(url, {"paused": False})
        except DuplicateTorrentError as e:
            torrent = e.torrent
            if torrent is None:
                print("Torrent already added")
                return
            print(f"Already added: {torrent['name']}")

        while True:
            info = client.only(torrent["id"], ["name", "percentDone", "rateDownload"])
            if info is None:
                print("Torrent was removed")
                return
            print(f"{info['name']}: {info['percentDone'] * 100:.1f}% ({info['rateDownload']} B/s)")
            if info["percentDone"] >= 1:
                return
            time.sleep(5)


if __name__ == "__main__":
    main(sys.argv[1])
