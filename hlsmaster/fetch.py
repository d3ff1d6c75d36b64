"""
Fetch playlist text over HTTP with zstd decompression support.
"""

import logging
import os

import requests
import zstandard as zstd

logger = logging.getLogger(__name__)

TIMEOUT_SECONDS = float(os.getenv("HLSMASTER_TIMEOUT_SECONDS", "30"))
USER_AGENT = os.getenv(
    "HLSMASTER_USER_AGENT",
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/130.0.0.0 Safari/537.36",
)
MAX_BODY_BYTES = int(os.getenv("HLSMASTER_MAX_BODY_BYTES", str(10 * 1024 * 1024)))

ZSTD_MAGIC = b'\x28\xb5\x2f\xfd'


class FetchError(Exception):
    """The playlist body could not be retrieved or decoded."""

    def __init__(self, uri: str, reason: str):
        super().__init__(f"Failed to fetch {uri}: {reason}")
        self.uri = uri
        self.reason = reason


def get_request_headers() -> dict:
    """
    Get browser-like headers for playlist requests.
    """
    return {
        'accept': '*/*',
        'accept-encoding': 'gzip, deflate, br, zstd',
        'accept-language': 'en-US,en;q=0.9',
        'cache-control': 'no-cache',
        'pragma': 'no-cache',
        'user-agent': USER_AGENT,
    }


def decompress_zstd(raw_bytes: bytes, max_output_size: int = None) -> bytes:
    """
    Decompress zstd-compressed content.
    Bodies without the zstd magic bytes are returned unchanged.
    Raise ValueError for corrupt frames or output over max_output_size
    (HLSMASTER_MAX_BODY_BYTES by default).
    """
    if len(raw_bytes) < 4 or raw_bytes[:4] != ZSTD_MAGIC:
        return raw_bytes

    if max_output_size is None:
        max_output_size = MAX_BODY_BYTES

    logger.warning("zstd-compressed playlist body, decompressing")
    try:
        content_size = zstd.frame_content_size(raw_bytes)
    except zstd.ZstdError as e:
        raise ValueError(f"Failed to decompress zstd content: {e}") from e
    if content_size > max_output_size:
        raise ValueError(f"zstd content size {content_size} exceeds limit of {max_output_size} bytes")

    try:
        return zstd.ZstdDecompressor().decompress(raw_bytes, max_output_size=max_output_size)
    except zstd.ZstdError as e:
        # Frames without a content size only decompress through the stream API.
        try:
            decompressed = bytearray()
            with zstd.ZstdDecompressor().stream_reader(raw_bytes) as reader:
                while True:
                    chunk = reader.read(8192)
                    if not chunk:
                        break
                    decompressed.extend(chunk)
                    if len(decompressed) > max_output_size:
                        raise ValueError(f"zstd content exceeds limit of {max_output_size} bytes")
            return bytes(decompressed)
        except zstd.ZstdError as e2:
            raise ValueError(f"Failed to decompress zstd content: {e}, stream failed: {e2}") from e2


def decode_body(raw_bytes: bytes) -> str:
    """
    Decode a playlist body.
    Try utf-8 (dropping a BOM) first, then latin-1 which never fails.
    """
    try:
        return raw_bytes.decode('utf-8-sig')
    except UnicodeDecodeError:
        return raw_bytes.decode('latin-1')


def fetch_playlist_text(uri: str, session: requests.Session = None, headers: dict = None,
                        timeout: float = TIMEOUT_SECONDS) -> str:
    """
    Fetch a playlist and return its text.
    Raise FetchError on transport, HTTP status or decompression failures.
    """
    http = session or requests
    logger.debug("Fetching playlist %s", uri)
    try:
        response = http.get(uri, headers=headers or get_request_headers(), timeout=timeout)
        response.raise_for_status()
    except requests.RequestException as e:
        raise FetchError(uri, str(e)) from e

    try:
        raw_bytes = decompress_zstd(response.content)
    except ValueError as e:
        raise FetchError(uri, str(e)) from e
    return decode_body(raw_bytes)
