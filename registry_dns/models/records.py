"""DNS resource record data models."""
from dataclasses import dataclass
from enum import Enum
from ipaddress import IPv4Address, IPv6Address
from typing import Tuple, Union

from dnslib import A, AAAA, CLASS, CNAME, NS, PTR, QTYPE, RR, SRV, TXT


class RecordType(str, Enum):
    """DNS record types synthesized from services."""
    SRV = 'SRV'
    A = 'A'
    AAAA = 'AAAA'
    CNAME = 'CNAME'
    NS = 'NS'
    TXT = 'TXT'
    PTR = 'PTR'

    @property
    def code(self) -> int:
        """Numeric type code used on the wire."""
        return getattr(QTYPE, self.value)


# Internet class
CLASS_INET = CLASS.IN


@dataclass(frozen=True)
class RRHeader:
    """Common header shared by every resource record.

    Attributes:
        name: Owner name of the record
        rtype: Record type
        ttl: Time to live in seconds
        rclass: Record class (always IN for synthesized records)
    """
    name: str
    rtype: RecordType
    ttl: int
    rclass: int = CLASS_INET

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "name": self.name,
            "type": self.rtype.value,
            "class": self.rclass,
            "ttl": self.ttl,
        }

    def to_rr(self, rdata) -> RR:
        """Wrap rdata into a dnslib resource record carrying this header."""
        return RR(
            rname=self.name,
            rtype=self.rtype.code,
            rclass=self.rclass,
            ttl=self.ttl,
            rdata=rdata,
        )


@dataclass(frozen=True)
class SRVRecord:
    """Service locator record."""
    hdr: RRHeader
    priority: int
    weight: int
    port: int
    target: str

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            **self.hdr.to_dict(),
            "priority": self.priority,
            "weight": self.weight,
            "port": self.port,
            "target": self.target,
        }

    def to_rr(self) -> RR:
        """Convert to a dnslib resource record."""
        return self.hdr.to_rr(SRV(self.priority, self.weight, self.port, self.target))


@dataclass(frozen=True)
class ARecord:
    """IPv4 address record."""
    hdr: RRHeader
    address: IPv4Address

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {**self.hdr.to_dict(), "address": str(self.address)}

    def to_rr(self) -> RR:
        """Convert to a dnslib resource record."""
        return self.hdr.to_rr(A(str(self.address)))


@dataclass(frozen=True)
class AAAARecord:
    """IPv6 address record."""
    hdr: RRHeader
    address: IPv6Address

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {**self.hdr.to_dict(), "address": str(self.address)}

    def to_rr(self) -> RR:
        """Convert to a dnslib resource record."""
        return self.hdr.to_rr(AAAA(str(self.address)))


@dataclass(frozen=True)
class CNAMERecord:
    """Canonical name record."""
    hdr: RRHeader
    target: str

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {**self.hdr.to_dict(), "target": self.target}

    def to_rr(self) -> RR:
        """Convert to a dnslib resource record."""
        return self.hdr.to_rr(CNAME(self.target))


@dataclass(frozen=True)
class NSRecord:
    """Name server record."""
    hdr: RRHeader
    ns: str

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {**self.hdr.to_dict(), "ns": self.ns}

    def to_rr(self) -> RR:
        """Convert to a dnslib resource record."""
        return self.hdr.to_rr(NS(self.ns))


@dataclass(frozen=True)
class TXTRecord:
    """Text record.

    Attributes:
        hdr: Record header
        txt: Character-strings in wire order, each at most 255 bytes
    """
    hdr: RRHeader
    txt: Tuple[str, ...]

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {**self.hdr.to_dict(), "txt": list(self.txt)}

    def to_rr(self) -> RR:
        """Convert to a dnslib resource record."""
        return self.hdr.to_rr(TXT([chunk.encode('utf-8') for chunk in self.txt]))


@dataclass(frozen=True)
class PTRRecord:
    """Pointer record for reverse lookups."""
    hdr: RRHeader
    ptr: str

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {**self.hdr.to_dict(), "ptr": self.ptr}

    def to_rr(self) -> RR:
        """Convert to a dnslib resource record."""
        return self.hdr.to_rr(PTR(self.ptr))


Record = Union[SRVRecord, ARecord, AAAARecord, CNAMERecord, NSRecord, TXTRecord, PTRRecord]
