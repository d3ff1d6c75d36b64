"""
URL helpers for resolving variant stream URIs.
"""

from urllib.parse import urljoin, urlparse


def get_base_url(url: str) -> str:
    """
    Return the directory of a master playlist URL, with a trailing '/'.
    Query string and fragment are dropped.
    """
    parsed = urlparse(url)
    return f"{parsed.scheme}://{parsed.netloc}{parsed.path.rsplit('/', 1)[0]}/"


def build_absolute_url(base_url: str, relative_url: str) -> str:
    return urljoin(base_url, relative_url)


def is_absolute_url(url: str) -> bool:
    return bool(urlparse(url).scheme)


def resolve_variant_uri(playlist_url: str, uri: str) -> str:
    """
    Resolve a variant 'uri' against the master playlist URL.
    Absolute and empty URIs are returned unchanged.
    """
    if not uri or is_absolute_url(uri):
        return uri
    return build_absolute_url(get_base_url(playlist_url), uri)
