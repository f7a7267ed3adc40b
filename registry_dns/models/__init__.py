# Data Models Package
from .service import Service, ServiceDecodeError
from .records import (
    RecordType,
    RRHeader,
    Record,
    SRVRecord,
    ARecord,
    AAAARecord,
    CNAMERecord,
    NSRecord,
    TXTRecord,
    PTRRecord,
)

__all__ = [
    'Service',
    'ServiceDecodeError',
    'RecordType',
    'RRHeader',
    'Record',
    'SRVRecord',
    'ARecord',
    'AAAARecord',
    'CNAMERecord',
    'NSRecord',
    'TXTRecord',
    'PTRRecord',
]
