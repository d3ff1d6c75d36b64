"""
Validate and parse master playlist text into a Playlist.
"""

import logging

from hlsmaster import fetch
from hlsmaster.attributes import parse_attribute_list, split_tag
from hlsmaster.errors import FetchFailed, InvalidFormat
from hlsmaster.playlist import Playlist
from hlsmaster.tags import Tag, classify_line

logger = logging.getLogger(__name__)

URI_KEY = "uri"


def normalize_lines(text: str) -> list:
    """
    Split raw text on LF only, dropping empty lines.
    One trailing CR per line is removed. Other control characters such as
    form feed or NEL stay part of the line.
    """
    lines = []
    for line in text.split("\n"):
        if line.endswith("\r"):
            line = line[:-1]
        if line:
            lines.append(line)
    return lines


def validate_lines(lines: list) -> None:
    """
    Check the document before parsing.
    Raise InvalidFormat for an empty document, a missing #EXTM3U header
    or more than one #EXT-X-VERSION tag.
    """
    if not lines:
        raise InvalidFormat("Invalid M3U8 format")

    if lines[0] != Tag.HEADER.value:
        raise InvalidFormat(f"Missing {Tag.HEADER.value}")

    versions = sum(1 for line in lines if classify_line(line) is Tag.VERSION)
    if versions > 1:
        raise InvalidFormat("Invalid M3U8, multiple version tags found.")


class LineCursor:
    """
    Forward-only cursor over the normalized lines.
    """

    def __init__(self, lines: list):
        self._lines = lines
        self._position = 0

    def __iter__(self):
        return self

    def __next__(self) -> str:
        if self._position >= len(self._lines):
            raise StopIteration
        line = self._lines[self._position]
        self._position += 1
        return line

    def peek(self, default: str = ''):
        if self._position >= len(self._lines):
            return default
        return self._lines[self._position]

    def take_next(self, default: str = '') -> str:
        """
        Consume and return the next line, or default at end of input.
        """
        line = self.peek(default=None)
        if line is None:
            return default
        self._position += 1
        return line


class PlaylistBuilder:
    """
    Drives one pass over the lines and fills a Playlist.
    """

    def __init__(self, lines: list):
        self.cursor = LineCursor(lines)
        self.playlist = Playlist()
        self._handlers = {
            Tag.HEADER: self._on_header,
            Tag.INDEPENDENT_SEGMENTS: self._on_independent_segments,
            Tag.VERSION: self._on_version,
            Tag.MEDIA: self._on_media,
            Tag.I_FRAME_STREAM_INF: self._on_i_frame_stream_inf,
            Tag.STREAM_INF: self._on_stream_inf,
            Tag.UNRECOGNIZED: self._on_unrecognized,
        }

    def build(self) -> Playlist:
        for line in self.cursor:
            self._handlers[classify_line(line)](line)
        return self.playlist

    def _on_header(self, line: str) -> None:
        pass

    def _on_independent_segments(self, line: str) -> None:
        self.playlist.independent_segments = True

    def _on_version(self, line: str) -> None:
        _, data = split_tag(line)
        self.playlist.version = data

    def _on_media(self, line: str) -> None:
        _, data = split_tag(line)
        self.playlist.media_tags.append(parse_attribute_list(data))

    def _on_i_frame_stream_inf(self, line: str) -> None:
        _, data = split_tag(line)
        self.playlist.media_resources.append(parse_attribute_list(data))

    def _on_stream_inf(self, line: str) -> None:
        _, data = split_tag(line)
        attributes = parse_attribute_list(data)
        # The URI line belongs to this tag, even when it is missing.
        attributes[URI_KEY] = self.cursor.take_next(default='')
        self.playlist.variant_streams.append(attributes)

    def _on_unrecognized(self, line: str) -> None:
        logger.debug("Unhandled: %s", line)


def parse(raw_text: str) -> Playlist:
    """
    Parse master playlist text.
    Raise InvalidFormat when the document fails validation.
    """
    lines = normalize_lines(raw_text)
    validate_lines(lines)
    return PlaylistBuilder(lines).build()


def from_uri(uri: str, session=None) -> Playlist:
    """
    Fetch a master playlist and parse it.
    Transport failures are raised as FetchFailed with the original error.
    """
    try:
        body = fetch.fetch_playlist_text(uri, session=session)
    except fetch.FetchError as e:
        raise FetchFailed(e) from e
    return parse(body)
