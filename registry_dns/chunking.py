"""Splitting of long text into DNS character-strings."""
from typing import Generator, List


# Maximum length of a single DNS character-string in bytes
TXT_CHUNK_LIMIT = 255

# Widest UTF-8 encoding of a single character
MAX_CHAR_WIDTH = 4


def iter_chunks(s: str, limit: int = TXT_CHUNK_LIMIT) -> Generator[str, None, None]:
    """Yield consecutive pieces of s, each at most limit bytes of UTF-8.

    A multi-byte character is never split across two pieces, so a piece
    may come out shorter than limit when the next character would not fit.

    Args:
        s: Text to split
        limit: Maximum encoded size of each piece in bytes

    Yields:
        Substrings of s in order

    Raises:
        ValueError: If limit is smaller than MAX_CHAR_WIDTH
    """
    if limit < MAX_CHAR_WIDTH:
        raise ValueError(f"Chunk limit must be at least {MAX_CHAR_WIDTH} bytes, got {limit}")

    if len(s.encode('utf-8')) < limit:
        yield s
        return

    start = 0
    size = 0
    for i, char in enumerate(s):
        width = len(char.encode('utf-8'))
        if size and size + width > limit:
            yield s[start:i]
            start = i
            size = 0
        size += width

    if start < len(s):
        yield s[start:]


def split_into_chunks(s: str, limit: int = TXT_CHUNK_LIMIT) -> List[str]:
    """Split s into a list of character-strings of at most limit bytes."""
    return list(iter_chunks(s, limit))
