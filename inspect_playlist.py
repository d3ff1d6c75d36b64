#!/usr/bin/env python3
"""
Inspect an HLS master playlist from a URL or a local file.
"""

import argparse
import logging
import sys
from pathlib import Path

from hlsmaster import __version__
from hlsmaster import fetch
from hlsmaster import playlist_parser
from hlsmaster import quality_selector
from hlsmaster import url_utils
from hlsmaster.errors import ParseError


def load_playlist(source: str):
    """
    Parse a local file when the path exists, otherwise fetch it as a URL.
    Local files are decoded the same way as fetched bodies.
    """
    path = Path(source)
    if path.is_file():
        return playlist_parser.parse(fetch.decode_body(path.read_bytes()))
    return playlist_parser.from_uri(source)


def print_records(title: str, records: list) -> None:
    print(f"{title} ({len(records)}):")
    for idx, record in enumerate(records, 1):
        attributes = ', '.join(f"{key}={value}" for key, value in record.items())
        print(f"  [{idx}] {attributes}")
    print()


def main(argv=None) -> int:
    """
    Load a playlist and print its contents.
    """
    parser = argparse.ArgumentParser(
        description='Inspect an HLS master playlist',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python inspect_playlist.py "https://.../master.m3u8"
  python inspect_playlist.py master.m3u8 --sort-by RESOLUTION
  python inspect_playlist.py "https://.../master.m3u8" --best
        """
    )
    parser.add_argument('source', help='master playlist URL or local file')
    parser.add_argument('-s', '--sort-by', default='BANDWIDTH', help='attribute to sort records by')
    parser.add_argument('-b', '--best', action='store_true', help='print only the highest bandwidth variant URI')
    parser.add_argument('-v', '--verbose', action='store_true', help='enable debug logging')
    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')

    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)

    try:
        playlist = load_playlist(args.source)
    except ParseError as e:
        print(f"ERROR: Failed to parse playlist: {e}")
        return 1

    if args.best:
        best_stream = quality_selector.get_highest_quality_stream(playlist)
        if not best_stream:
            print("ERROR: No streams found in master playlist")
            return 1
        uri = best_stream['uri']
        if url_utils.is_absolute_url(args.source):
            uri = url_utils.resolve_variant_uri(args.source, uri)
        print(uri)
        return 0

    print(f"Version: {playlist.version}")
    print(f"Independent segments: {'yes' if playlist.independent_segments else 'no'}")
    print()
    print_records("Media tags", playlist.get_media_tags(args.sort_by))
    print_records("Variant streams", playlist.get_variant_streams(args.sort_by))
    print_records("Media resources", playlist.get_media_resources(args.sort_by))
    return 0


if __name__ == "__main__":
    sys.exit(main())
