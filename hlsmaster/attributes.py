"""
Tokenize tag payloads and attribute lists.

The attribute-list split is deliberately naive: it splits on every ','
without looking at quotes. A value such as CODECS="avc1.4d401f,mp4a.40.2"
therefore comes back as CODECS=avc1.4d401f, and the trailing `mp4a.40.2"`
item has no '=' and is dropped. RFC 8216 quoted-string grammar is not
implemented.
"""

QUOTE_CHARS = ('"', "'")


def split_tag(line: str) -> tuple:
    """
    Split a tag line on the first ':'.
    Return (tag, payload); payload is '' when the line has no ':'.
    """
    tag, _, payload = line.partition(':')
    return tag, payload


def strip_quotes(value: str) -> str:
    for quote in QUOTE_CHARS:
        value = value.replace(quote, '')
    return value


def get_key_value_pair(item: str):
    """
    Split one KEY=VALUE item on the first '='.
    Return None for items without '='.
    """
    key, sep, value = item.partition('=')
    if not sep:
        return None
    return key, strip_quotes(value)


def parse_attribute_list(payload: str) -> dict:
    """
    Parse a comma-separated KEY=VALUE payload into a dict.
    Later duplicates overwrite earlier ones.
    """
    attributes = {}
    for item in payload.split(','):
        pair = get_key_value_pair(item)
        if pair is None:
            continue
        key, value = pair
        attributes[key] = value
    return attributes
