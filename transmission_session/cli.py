"""
Command-line interface for the Transmission session client.

Usage:
    transmission-session add <url> [--paused] [--download-dir DIR]
    transmission-session list [ids ...] [--fields a,b,c]
    transmission-session info <id>
    transmission-session remove <ids ...> [--delete-data]
    transmission-session session [keys ...]

Connection options default to the TRANSMISSION_* environment variables.
"""

import argparse
import json
import sys

from .config import ClientConfig, Config
from .exceptions import DuplicateTorrentError, TransmissionError
from .transmission import Transmission


STATUS_NAMES = {
    0: "stopped",
    1: "check-wait",
    2: "checking",
    3: "dl-wait",
    4: "download",
    5: "seed-wait",
    6: "seeding",
}


def format_bytes(size):
    """Format bytes as human-readable string."""
    if size is None:
        return "N/A"
    for unit in ['B', 'KB', 'MB', 'GB', 'TB']:
        if size < 1024:
            return f"{size:.2f} {unit}"
        size /= 1024
    return f"{size:.2f} PB"


def parse_id(value):
    """Torrent ids are integers, anything else is treated as a hash string."""
    try:
        return int(value)
    except ValueError:
        return value


def build_parser():
    parser = argparse.ArgumentParser(
        prog="transmission-session",
        description="Transmission RPC client",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s add magnet:?xt=... --paused
  %(prog)s list
  %(prog)s list 1 2 --fields id,name,percentDone
  %(prog)s info 7
  %(prog)s remove 7 --delete-data
  %(prog)s session version download-dir
"""
    )
    parser.add_argument("--host", default=Config.TRANSMISSION_HOST, help="Daemon host")
    parser.add_argument("--port", type=int, default=Config.TRANSMISSION_PORT, help="RPC port")
    parser.add_argument("--endpoint", default=Config.TRANSMISSION_ENDPOINT, help="RPC path")
    parser.add_argument("--username", default=Config.TRANSMISSION_USERNAME or None, help="RPC username")
    parser.add_argument("--password", default=Config.TRANSMISSION_PASSWORD or None, help="RPC password")
    parser.add_argument("--debug", action="store_true", default=Config.TRANSMISSION_DEBUG,
                        help="Log request and response bodies")

    subparsers = parser.add_subparsers(dest="command", help="Commands")

    add_parser = subparsers.add_parser("add", help="Add a torrent")
    add_parser.add_argument("url", help="Magnet URI or torrent URL")
    add_parser.add_argument("--paused", action="store_true", help="Don't start immediately")
    add_parser.add_argument("--download-dir", help="Download directory on the daemon")

    list_parser = subparsers.add_parser("list", help="List torrents")
    list_parser.add_argument("ids", nargs="*", type=parse_id, help="Torrent ids or hashes")
    list_parser.add_argument("--fields", help="Comma-separated fields to print as JSON")

    info_parser = subparsers.add_parser("info", help="Show torrent details")
    info_parser.add_argument("id", type=parse_id, help="Torrent id or hash")

    rm_parser = subparsers.add_parser("remove", help="Remove torrents")
    rm_parser.add_argument("ids", nargs="+", type=parse_id, help="Torrent ids or hashes")
    rm_parser.add_argument("--delete-data", action="store_true", help="Delete downloaded data")

    session_parser = subparsers.add_parser("session", help="Show session variables")
    session_parser.add_argument("keys", nargs="*", help="Only show these keys")

    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    config = ClientConfig.from_env(
        host=args.host,
        port=args.port,
        endpoint=args.endpoint,
        username=args.username,
        password=args.password,
        debug=args.debug,
    )

    try:
        with Transmission(config) as client:
            if args.command == "add":
                options = {"paused": args.paused}
                if args.download_dir:
                    options["download-dir"] = args.download_dir
                torrent = client.add(args.url, options)
                print(f"Added torrent {torrent.get('name', '')} (ID: {torrent.get('id')})")

            elif args.command == "list":
                if args.fields:
                    fields = [f.strip() for f in args.fields.split(",") if f.strip()]
                    torrents = client.get(args.ids or None, fields)
                    print(json.dumps(torrents, indent=2))
                else:
                    fields = ["id", "name", "status", "percentDone", "totalSize"]
                    torrents = client.get(args.ids or None, fields)
                    if not torrents:
                        print("No torrents found.")
                    else:
                        print(f"{'ID':<6} {'STATE':<12} {'PROGRESS':<10} {'SIZE':<12} {'NAME'}")
                        print("-" * 80)
                        for t in torrents:
                            state = STATUS_NAMES.get(t.get('status'), 'unknown')
                            progress = f"{t.get('percentDone', 0) * 100:.1f}%"
                            size = format_bytes(t.get('totalSize', 0))
                            name = t.get('name', 'Unknown')[:40]
                            print(f"{t.get('id', ''):<6} {state:<12} {progress:<10} {size:<12} {name}")

            elif args.command == "info":
                torrent = client.only(args.id)
                if torrent is None:
                    print(f"Torrent {args.id} not found.")
                    return 1
                print(json.dumps(torrent, indent=2))

            elif args.command == "remove":
                client.delete(args.ids, delete_data=args.delete_data)
                print(f"Removed {len(args.ids)} torrent(s)")

            elif args.command == "session":
                print(json.dumps(client.get_session(args.keys), indent=2))

    except DuplicateTorrentError as e:
        existing = e.torrent or {}
        print(f"Torrent already added {existing.get('name', '')}".rstrip())
    except TransmissionError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
