"""Service data model."""
import json
import logging
from dataclasses import dataclass
from ipaddress import IPv4Address, IPv6Address
from typing import Any, Optional

from registry_dns.chunking import split_into_chunks
from registry_dns.models.records import (
    AAAARecord,
    ARecord,
    CNAMERecord,
    NSRecord,
    PTRRecord,
    RecordType,
    RRHeader,
    SRVRecord,
    TXTRecord,
)
from registry_dns.names import fqdn, next_label


logger = logging.getLogger(__name__)


class ServiceDecodeError(Exception):
    """Raised when a registry value cannot be decoded into a Service."""
    pass


# Largest value of the 16 bit SRV fields
MAX_UINT16 = 2 ** 16 - 1

MAX_TTL = 2 ** 32 - 1

# JSON field name -> (attribute name, expected type, (min, max) or None)
_JSON_FIELDS = {
    "host": ("host", str, None),
    "port": ("port", int, (0, MAX_UINT16)),
    "priority": ("priority", int, (0, MAX_UINT16)),
    "weight": ("weight", int, (0, MAX_UINT16)),
    "text": ("text", str, None),
    "ttl": ("ttl", int, (0, MAX_TTL)),
    "targetstrip": ("target_strip", int, (0, None)),
    "group": ("group", str, None),
}


@dataclass(frozen=True)
class Service:
    """A service entry as stored in the registry.

    Host is the target of SRV records and must be a domain name, but when
    it looks like an IPv4 or IPv6 address the caller treats it as one.

    Attributes:
        host: Domain name or literal IP address
        port: Port number (0 when unset)
        priority: SRV priority
        weight: SRV weight
        text: Payload for TXT records
        ttl: Time to live in seconds (0 when unset)
        target_strip: Number of leftmost labels stripped from a
            synthesized SRV target
        group: Group tag; services with identical groups are answered together
        key: Registry key this service was read from; never serialized
    """
    host: str = ""
    port: int = 0
    priority: int = 0
    weight: int = 0
    text: str = ""
    ttl: int = 0
    target_strip: int = 0
    group: str = ""
    key: str = ""

    def new_srv(self, name: str, weight: int) -> SRVRecord:
        """Build an SRV record for this service.

        The target is the fully qualified host with target_strip labels
        removed from the left. When that would strip every label the
        host is used unchanged.

        Args:
            name: Owner name of the record
            weight: Weight to put in the record, overriding self.weight

        Returns:
            SRVRecord
        """
        host = fqdn(self.host)

        offset, end = 0, False
        for _ in range(self.target_strip):
            offset, end = next_label(host, offset)
        if end:
            logger.debug(f"Target strip {self.target_strip} overshoots {host}, using full name")
            offset = 0

        return SRVRecord(
            hdr=RRHeader(name=name, rtype=RecordType.SRV, ttl=self.ttl),
            priority=self.priority,
            weight=weight,
            port=self.port,
            target=host[offset:],
        )

    def new_a(self, name: str, address: IPv4Address) -> ARecord:
        """Build an A record for an already parsed address."""
        return ARecord(hdr=RRHeader(name=name, rtype=RecordType.A, ttl=self.ttl), address=address)

    def new_aaaa(self, name: str, address: IPv6Address) -> AAAARecord:
        """Build an AAAA record for an already parsed address."""
        return AAAARecord(hdr=RRHeader(name=name, rtype=RecordType.AAAA, ttl=self.ttl), address=address)

    def new_cname(self, name: str, target: str) -> CNAMERecord:
        """Build a CNAME record pointing at target."""
        return CNAMERecord(hdr=RRHeader(name=name, rtype=RecordType.CNAME, ttl=self.ttl), target=target)

    def new_ns(self, name: str, target: str) -> NSRecord:
        """Build an NS record pointing at target."""
        return NSRecord(hdr=RRHeader(name=name, rtype=RecordType.NS, ttl=self.ttl), ns=target)

    def new_txt(self, name: str) -> TXTRecord:
        """Build a TXT record from text, split into 255 byte strings."""
        return TXTRecord(
            hdr=RRHeader(name=name, rtype=RecordType.TXT, ttl=self.ttl),
            txt=tuple(split_into_chunks(self.text)),
        )

    def new_ptr(self, name: str, ttl: int) -> PTRRecord:
        """Build a PTR record pointing at the fully qualified host.

        Args:
            name: Owner name (the reverse lookup name)
            ttl: TTL to use instead of self.ttl

        Returns:
            PTRRecord
        """
        return PTRRecord(hdr=RRHeader(name=name, rtype=RecordType.PTR, ttl=ttl), ptr=fqdn(self.host))

    def to_dict(self) -> dict:
        """Convert to the dictionary stored in the registry.

        Zero-valued fields are left out, except targetstrip which is
        always written. The key is never included.
        """
        data = {}
        for json_name, (attr, _, _) in _JSON_FIELDS.items():
            value = getattr(self, attr)
            if value or json_name == "targetstrip":
                data[json_name] = value
        return data

    def to_json(self) -> str:
        """Serialize to the JSON document stored in the registry."""
        return json.dumps(self.to_dict())

    @classmethod
    def from_dict(cls, data: Any, key: str = "") -> "Service":
        """Create Service from a decoded registry value.

        Args:
            data: Decoded JSON value
            key: Registry key the value was read from

        Returns:
            Service

        Raises:
            ServiceDecodeError: If data is not an object or a field has the wrong type or range
        """
        if not isinstance(data, dict):
            raise ServiceDecodeError(f"{key or 'value'}: expected JSON object, got {type(data).__name__}")

        kwargs = {"key": key}
        for json_name, (attr, expected, bounds) in _JSON_FIELDS.items():
            value = data.get(json_name)
            if value is None:
                continue
            # bool is an int subclass, reject it explicitly
            if not isinstance(value, expected) or isinstance(value, bool):
                raise ServiceDecodeError(
                    f"{key or 'value'}: field '{json_name}' must be {expected.__name__}, "
                    f"got {type(value).__name__}"
                )
            if bounds is not None:
                low, high = bounds
                if value < low or (high is not None and value > high):
                    raise ServiceDecodeError(
                        f"{key or 'value'}: field '{json_name}' out of range: {value}"
                    )
            kwargs[attr] = value
        return cls(**kwargs)

    @classmethod
    def from_json(cls, document: str, key: Optional[str] = None) -> "Service":
        """Create Service from a JSON document read from the registry.

        Raises:
            ServiceDecodeError: If the document is not valid JSON or not a service
        """
        try:
            data = json.loads(document)
        except ValueError as e:
            raise ServiceDecodeError(f"{key or 'value'}: invalid JSON: {e}") from e
        return cls.from_dict(data, key=key or "")
