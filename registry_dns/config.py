"""Configuration module for registry-dns.

Reads configuration from environment variables with validation.
"""
import logging
import os
from dataclasses import dataclass

from registry_dns.services.key_mapper import DEFAULT_PREFIX


class ConfigurationError(Exception):
    """Raised when configuration is invalid."""
    pass


MAX_TTL = 2 ** 32 - 1

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class Config:
    """Application configuration loaded from environment variables."""

    # Root path segment of registry keys
    prefix: str = DEFAULT_PREFIX

    # Logging
    log_level: str = "INFO"

    # TTL for PTR answers, 0 means use the service TTL
    ptr_ttl: int = 0

    @property
    def log_level_value(self) -> int:
        """Numeric logging level."""
        return getattr(logging, self.log_level)

    @classmethod
    def from_env(cls) -> "Config":
        """Load configuration from environment variables.

        Optional environment variables:
        - REGISTRY_DNS_PREFIX: Root path segment (default: skydns)
        - REGISTRY_DNS_LOG_LEVEL: Logging level (default: INFO)
        - REGISTRY_DNS_PTR_TTL: TTL for PTR records (default: 0)

        Returns:
            Config: Configuration object

        Raises:
            ConfigurationError: If any variable has an invalid value
        """
        invalid = []

        prefix = os.environ.get("REGISTRY_DNS_PREFIX", DEFAULT_PREFIX).strip("/")
        if not prefix or "/" in prefix:
            invalid.append("REGISTRY_DNS_PREFIX")

        log_level = os.environ.get("REGISTRY_DNS_LOG_LEVEL", "INFO").upper()
        if log_level not in LOG_LEVELS:
            invalid.append("REGISTRY_DNS_LOG_LEVEL")

        ptr_ttl = 0
        raw_ttl = os.environ.get("REGISTRY_DNS_PTR_TTL", "0")
        try:
            ptr_ttl = int(raw_ttl)
        except ValueError:
            invalid.append("REGISTRY_DNS_PTR_TTL")
        else:
            if not 0 <= ptr_ttl <= MAX_TTL:
                invalid.append("REGISTRY_DNS_PTR_TTL")

        if invalid:
            raise ConfigurationError(
                f"Invalid environment variables: {', '.join(invalid)}"
            )

        return cls(prefix=prefix, log_level=log_level, ptr_ttl=ptr_ttl)

