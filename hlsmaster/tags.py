"""
Classify playlist lines into the master-playlist tags we handle.
"""

from enum import Enum


class Tag(Enum):
    HEADER = "#EXTM3U"
    INDEPENDENT_SEGMENTS = "#EXT-X-INDEPENDENT-SEGMENTS"
    VERSION = "#EXT-X-VERSION"
    MEDIA = "#EXT-X-MEDIA"
    I_FRAME_STREAM_INF = "#EXT-X-I-FRAME-STREAM-INF"
    STREAM_INF = "#EXT-X-STREAM-INF"
    UNRECOGNIZED = None


_TAGS_BY_NAME = {tag.value: tag for tag in Tag if tag is not Tag.UNRECOGNIZED}


def tag_name(line: str) -> str:
    """
    Return the token before the first ':' (the whole line if there is none).
    """
    return line.split(':', 1)[0]


def classify_line(line: str) -> Tag:
    """
    Map a line to its Tag.
    Exact match only, so '#EXT-X-MEDIA-SEQUENCE' is not '#EXT-X-MEDIA'.
    """
    return _TAGS_BY_NAME.get(tag_name(line), Tag.UNRECOGNIZED)
