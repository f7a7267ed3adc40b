"""Mapping between registry keys and DNS domain names."""
import logging
from typing import List, Tuple

from registry_dns.names import fqdn, split_domain_name


logger = logging.getLogger(__name__)


DEFAULT_PREFIX = "skydns"

WILDCARD = "*"


class KeyMapper:
    """Converts domain names to registry keys and back.

    Registry keys order components from the root down while domain names
    order them from the leaf up, so service.staging.skydns.local. lives
    under /skydns/local/skydns/staging/service.
    """

    def __init__(self, prefix: str = DEFAULT_PREFIX):
        """Initialize mapper.

        Args:
            prefix: Root path segment all keys live under
        """
        self.prefix = prefix.strip("/")

    def _join(self, labels: List[str]) -> str:
        # Empty labels (from "a..b") would give "//" segments
        return "/" + "/".join([self.prefix] + [label for label in labels if label])

    def path(self, name: str) -> str:
        """Convert a domain name to a registry key.

        Args:
            name: Domain name, fully qualified or not

        Returns:
            Registry key
        """
        labels = split_domain_name(name)
        labels.reverse()
        return self._join(labels)

    def path_with_wildcard(self, name: str) -> Tuple[str, bool]:
        """As path, but chop the key off before the first wildcard label.

        So service.*.skydns.local. gives /skydns/local/skydns and the
        caller searches everything below it, later keeping only names that
        match with is_wildcard_match.

        Args:
            name: Domain name, possibly containing "*" labels

        Returns:
            Tuple of (registry key, whether a wildcard was found)
        """
        labels = split_domain_name(name)
        labels.reverse()
        for i, label in enumerate(labels):
            if label == WILDCARD:
                logger.debug(f"Wildcard in {name}, searching from label {i}")
                return self._join(labels[:i]), True
        return self._join(labels), False

    def domain(self, key: str) -> str:
        """Convert a registry key back to a fully qualified domain name.

        The first path segment is taken as the prefix and dropped
        without being checked.
        """
        segments = key.split("/")[2:]
        segments.reverse()
        return fqdn(".".join(segments))


def is_wildcard_match(pattern: str, name: str) -> bool:
    """Check if name lies under a domain pattern, comparing labels from the root.

    A "*" label in pattern matches any single label. name may have extra
    labels on the left, as keys found below a matching key do.
    Comparison is case-insensitive.
    """
    pattern_labels = split_domain_name(pattern)
    name_labels = split_domain_name(name)
    if len(name_labels) < len(pattern_labels):
        return False
    pattern_labels.reverse()
    name_labels.reverse()
    for want, have in zip(pattern_labels, name_labels):
        if want != WILDCARD and want.lower() != have.lower():
            return False
    return True


_default_mapper = KeyMapper()


def path(name: str) -> str:
    """Convert name to a key under the default prefix."""
    return _default_mapper.path(name)


def path_with_wildcard(name: str) -> Tuple[str, bool]:
    """Convert name to a key under the default prefix, stopping at a wildcard."""
    return _default_mapper.path_with_wildcard(name)


def domain(key: str) -> str:
    """Convert a key under the default prefix to a domain name."""
    return _default_mapper.domain(key)
