"""Record synthesis for lists of services read from the registry."""
import ipaddress
import logging
import math
from dataclasses import replace
from typing import Dict, List, Optional, Sequence, Tuple, Union

from registry_dns.models import Record, Service
from registry_dns.names import fqdn
from registry_dns.services.grouping import group
from registry_dns.services.key_mapper import KeyMapper


logger = logging.getLogger(__name__)


# Weight given to services that do not set one
DEFAULT_WEIGHT = 100


def _effective_weight(service: Service) -> int:
    return service.weight if service.weight > 0 else DEFAULT_WEIGHT


def parse_ip(host: str) -> Optional[Union[ipaddress.IPv4Address, ipaddress.IPv6Address]]:
    """Parse host as an IP address literal.

    Returns:
        The address, or None when host is a domain name
    """
    try:
        return ipaddress.ip_address(host)
    except ValueError:
        return None


class RecordSynthesizer:
    """Turns the services found for a name into answer records.

    The services passed in are expected in registry order (shallow keys
    first), as group() requires.
    """

    def __init__(self, mapper: Optional[KeyMapper] = None, ptr_ttl: int = 0):
        """Initialize synthesizer.

        Args:
            mapper: Key mapper used to derive SRV targets for IP hosts
            ptr_ttl: TTL for PTR records, 0 to use the service TTL
        """
        self.mapper = mapper or KeyMapper()
        self.ptr_ttl = ptr_ttl

    @staticmethod
    def weights(services: Sequence[Service]) -> List[int]:
        """Compute SRV weights as percentages within each priority.

        A service without a positive weight counts as DEFAULT_WEIGHT, so
        every priority total is positive.

        Args:
            services: Services that go into one answer

        Returns:
            Weight for each service, in the same order
        """
        totals: Dict[int, int] = {}
        for service in services:
            totals[service.priority] = totals.get(service.priority, 0) + _effective_weight(service)

        return [
            int(math.floor(100 * _effective_weight(service) / totals[service.priority]))
            for service in services
        ]

    def srv_records(self, name: str, services: Sequence[Service]) -> Tuple[List[Record], List[Record]]:
        """Build SRV answers for name.

        Services whose host is an IP address get a target synthesized from
        their registry key, and an address record for that target is
        returned in the extra section.

        Args:
            name: Query name
            services: Services found for name

        Returns:
            Tuple of (answer records, extra records)
        """
        selected = group(services)
        answers: List[Record] = []
        extras: List[Record] = []

        for service, weight in zip(selected, self.weights(selected)):
            ip = parse_ip(service.host)
            if ip is None:
                answers.append(service.new_srv(name, weight))
                continue

            synthesized = replace(service, host=self.mapper.domain(service.key))
            srv = synthesized.new_srv(name, weight)
            answers.append(srv)
            if ip.version == 4:
                extras.append(synthesized.new_a(srv.target, ip))
            else:
                extras.append(synthesized.new_aaaa(srv.target, ip))

        logger.debug(f"{name}: {len(answers)} SRV answers, {len(extras)} extra records")
        return answers, extras

    def address_records(self, name: str, services: Sequence[Service]) -> List[Record]:
        """Build A/AAAA answers for name, or CNAMEs for hosts that are names."""
        records: List[Record] = []
        for service in group(services):
            ip = parse_ip(service.host)
            if ip is None:
                records.append(service.new_cname(name, fqdn(service.host)))
            elif ip.version == 4:
                records.append(service.new_a(name, ip))
            else:
                records.append(service.new_aaaa(name, ip))
        return records

    def txt_records(self, name: str, services: Sequence[Service]) -> List[Record]:
        """Build TXT answers for the services that carry text."""
        return [service.new_txt(name) for service in group(services) if service.text]

    def ptr_records(self, name: str, services: Sequence[Service]) -> List[Record]:
        """Build PTR answers pointing at each service host."""
        return [service.new_ptr(name, self.ptr_ttl or service.ttl) for service in services]
