"""
The parsed master playlist and its sorted accessors.
"""

from dataclasses import dataclass, field
from typing import Dict, List

DEFAULT_VERSION = "2"

AttributeRecord = Dict[str, str]


def sort_records(records: List[AttributeRecord], sort_by: str) -> List[AttributeRecord]:
    """
    Return copies of records ordered ascending by the string at sort_by.
    Records without the key sort as ''.
    The input list is left in its original order.
    """
    copied = [dict(record) for record in records]
    copied.sort(key=lambda record: record.get(sort_by, ''))
    return copied


@dataclass
class Playlist:
    independent_segments: bool = False
    version: str = DEFAULT_VERSION
    media_tags: List[AttributeRecord] = field(default_factory=list)
    variant_streams: List[AttributeRecord] = field(default_factory=list)
    media_resources: List[AttributeRecord] = field(default_factory=list)

    def get_media_tags(self, sort_by: str) -> List[AttributeRecord]:
        """#EXT-X-MEDIA records sorted by sort_by."""
        return sort_records(self.media_tags, sort_by)

    def get_variant_streams(self, sort_by: str) -> List[AttributeRecord]:
        """#EXT-X-STREAM-INF records (with 'uri') sorted by sort_by."""
        return sort_records(self.variant_streams, sort_by)

    def get_media_resources(self, sort_by: str) -> List[AttributeRecord]:
        """#EXT-X-I-FRAME-STREAM-INF records sorted by sort_by."""
        return sort_records(self.media_resources, sort_by)
