# Services Package
from registry_dns.services.key_mapper import KeyMapper, path, path_with_wildcard, domain, is_wildcard_match
from registry_dns.services.grouping import group, GroupState
from registry_dns.services.synthesizer import RecordSynthesizer

__all__ = [
    'KeyMapper',
    'path',
    'path_with_wildcard',
    'domain',
    'is_wildcard_match',
    'group',
    'GroupState',
    'RecordSynthesizer',
]
