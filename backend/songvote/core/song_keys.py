"""Song key encoding shared with the browser client.

The player page builds keys with ``btoa(unescape(encodeURIComponent(artist +
"|||" + title)))``, i.e. standard base64 over the UTF-8 bytes. Both the vote
submission path and the lookup path must use exactly this encoding or votes
for the same song end up under different keys.
"""

import base64
import binascii
from typing import Tuple

from songvote.core.exceptions import InvalidRequestError

SONG_KEY_SEPARATOR = "|||"


def encode_song_key(artist: str, title: str) -> str:
    """Encode an (artist, title) pair into its song key."""
    raw = f"{artist}{SONG_KEY_SEPARATOR}{title}".encode("utf-8")
    return base64.b64encode(raw).decode("ascii")


def decode_song_key(song_key: str) -> Tuple[str, str]:
    """Decode a song key back into (artist, title).

    Splits on the first separator occurrence. The concatenation is ambiguous
    when the artist ends with "|" or the title starts with "|": ("a|", "b")
    and ("a", "|b") share a key, and decoding yields the latter.

    Raises:
        InvalidRequestError: If the key is not valid base64/UTF-8 or
            does not contain the separator.
    """
    try:
        raw = base64.b64decode(song_key.encode("ascii"), validate=True)
        text = raw.decode("utf-8")
    except (binascii.Error, UnicodeError, ValueError) as e:
        raise InvalidRequestError(f"Malformed song key: {song_key!r}") from e

    artist, sep, title = text.partition(SONG_KEY_SEPARATOR)
    if not sep:
        raise InvalidRequestError(f"Song key has no separator: {song_key!r}")
    return artist, title
