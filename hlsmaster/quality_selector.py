"""
Select streams from a parsed master playlist.
"""

from hlsmaster.playlist import Playlist


def _bandwidth(record: dict) -> int:
    try:
        return int(record.get('BANDWIDTH', 0))
    except ValueError:
        return 0


def get_highest_quality_stream(playlist: Playlist) -> dict:
    """
    Find the variant stream with the highest BANDWIDTH.
    Return a copy of its record, or None without variant streams.
    Missing or non-numeric bandwidths count as 0; the first wins a tie.
    """
    best_stream = None
    highest_bandwidth = -1

    for record in playlist.variant_streams:
        bandwidth = _bandwidth(record)
        if bandwidth > highest_bandwidth:
            highest_bandwidth = bandwidth
            best_stream = record

    if best_stream is None:
        return None
    return dict(best_stream)


def get_stream_info(playlist: Playlist) -> list:
    """
    Summarize every variant stream in document order.
    """
    return [
        {
            'bandwidth': _bandwidth(record),
            'resolution': record.get('RESOLUTION'),
            'codecs': record.get('CODECS'),
            'uri': record.get('uri', ''),
        }
        for record in playlist.variant_streams
    ]
