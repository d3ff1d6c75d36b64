"""
Parse HLS master playlists into queryable attribute records.
"""

from hlsmaster.errors import FetchFailed, InvalidFormat, ParseError
from hlsmaster.playlist import Playlist
from hlsmaster.playlist_parser import from_uri, parse

__version__ = "0.1.0"

__all__ = [
    "FetchFailed",
    "InvalidFormat",
    "ParseError",
    "Playlist",
    "from_uri",
    "parse",
]
