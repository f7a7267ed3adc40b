"""Helpers for working with presentation-format domain names."""
from typing import List, Tuple


def is_fqdn(name: str) -> bool:
    """Check if name ends with an unescaped dot."""
    if not name.endswith('.'):
        return False
    # Count backslashes in front of the final dot
    backslashes = len(name[:-1]) - len(name[:-1].rstrip('\\'))
    return backslashes % 2 == 0


def fqdn(name: str) -> str:
    """Return name in fully qualified (trailing dot) form."""
    if is_fqdn(name):
        return name
    return name + '.'


def _is_separator(name: str, i: int) -> bool:
    """Check if the dot at position i is a label separator (not escaped)."""
    j = i - 1
    while j >= 0 and name[j] == '\\':
        j -= 1
    return (i - j) % 2 == 1


def next_label(name: str, offset: int) -> Tuple[int, bool]:
    """Find the start of the label following the one at offset.

    Args:
        name: Domain name, usually fully qualified
        offset: Index where the current label starts

    Returns:
        Tuple of (index of the next label, end flag). The end flag is True
        when there is no next label; the index then points past the name.
    """
    if not name:
        return 0, True

    i = offset
    while i < len(name) - 1:
        if name[i] == '.' and _is_separator(name, i):
            return i + 1, False
        i += 1
    return i + 1, True


def split_domain_name(name: str) -> List[str]:
    """Split a domain name into its labels.

    The root label is dropped, so both "a.b." and "a.b" give ["a", "b"].
    Escaped dots stay part of their label. The root name gives [].
    """
    labels: List[str] = []
    if name in ('', '.'):
        return labels

    start = 0
    for i, char in enumerate(name):
        if char == '.' and _is_separator(name, i):
            labels.append(name[start:i])
            start = i + 1
    if start < len(name):
        labels.append(name[start:])
    return labels
