"""Group selection for services found under a common key prefix."""
import logging
from enum import Enum
from typing import List, Sequence

from registry_dns.models import Service


logger = logging.getLogger(__name__)


class GroupState(Enum):
    """States of the group selection scan."""
    NO_GROUP = "no_group"
    SCANNING_TOP = "scanning_top"
    FILTERING = "filtering"


def _depth(service: Service) -> int:
    return service.key.count("/")


def group(services: Sequence[Service]) -> Sequence[Service]:
    """Select the services that belong to the group of the topmost services.

    The services must be ordered so that entries with the same key depth
    are contiguous, starting with the shallowest. The top depth entries
    decide the group: empty groups are ignored, and if two of them carry
    different groups, grouping does not apply and services is returned
    as is. Once past the top depth, all top depth entries are kept and
    deeper entries are kept only when their group is empty or matches.

    Args:
        services: Ordered services

    Returns:
        The filtered list, or services itself when grouping does not apply
    """
    if not services:
        return services

    slashes = _depth(services[0])
    state = GroupState.NO_GROUP
    current = ""
    result: List[Service] = []

    for i, service in enumerate(services):
        if state != GroupState.FILTERING and _depth(service) == slashes:
            if not service.group:
                continue
            if state == GroupState.NO_GROUP:
                current = service.group
                state = GroupState.SCANNING_TOP
                continue
            if service.group != current:
                logger.debug(
                    f"Groups '{current}' and '{service.group}' disagree at depth {slashes}, not grouping"
                )
                return services
            continue

        if state == GroupState.NO_GROUP:
            return services

        if state == GroupState.SCANNING_TOP:
            result = list(services[:i])
            state = GroupState.FILTERING
            logger.debug(f"Selecting group '{current}' from {len(services)} services")

        if not service.group or service.group == current:
            result.append(service)

    if state != GroupState.FILTERING:
        return services
    return result
