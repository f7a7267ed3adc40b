"""Command line entry point for registry-dns.

Answers a single query offline from a registry dump: a JSON object that
maps registry keys to service documents.
"""
import json
import logging
import sys
from typing import Dict, List

import click

from registry_dns.config import Config, ConfigurationError
from registry_dns.models import Record, Service, ServiceDecodeError
from registry_dns.services import KeyMapper, RecordSynthesizer, is_wildcard_match


logger = logging.getLogger(__name__)


QUERY_TYPES = ("SRV", "A", "TXT", "PTR")


def setup_logging(level: int) -> None:
    """Configure logging to stderr, keeping stdout for records."""
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[
            logging.StreamHandler(sys.stderr)
        ]
    )


def load_registry(registry_file: str) -> Dict[str, str]:
    """Load a registry dump.

    Values may be service objects or JSON documents in string form, the
    way they are stored in the registry.

    Raises:
        ServiceDecodeError: If the file is not a JSON object
    """
    with open(registry_file, 'r', encoding='utf-8') as f:
        try:
            data = json.load(f)
        except ValueError as e:
            raise ServiceDecodeError(f"{registry_file}: invalid JSON: {e}") from e

    if not isinstance(data, dict):
        raise ServiceDecodeError(f"{registry_file}: expected a JSON object of keys")

    return {
        key: value if isinstance(value, str) else json.dumps(value)
        for key, value in data.items()
    }


def select_services(registry: Dict[str, str], name: str, mapper: KeyMapper) -> List[Service]:
    """Find the services for name, ordered shallowest key first.

    Args:
        registry: Registry key -> JSON document
        name: Query name, possibly with wildcard labels
        mapper: Key mapper for the registry prefix

    Returns:
        Services ordered by key depth, then key

    Raises:
        ServiceDecodeError: If a matching value is not a valid service
    """
    prefix, wildcard = mapper.path_with_wildcard(name)

    keys = [key for key in registry if key == prefix or key.startswith(prefix + "/")]
    if wildcard:
        keys = [key for key in keys if is_wildcard_match(name, mapper.domain(key))]

    keys.sort(key=lambda key: (key.count("/"), key))
    logger.debug(f"{len(keys)} keys under {prefix} for {name}")

    return [Service.from_json(registry[key], key=key) for key in keys]


def synthesize(synthesizer: RecordSynthesizer, name: str, qtype: str, services: List[Service]) -> List[Record]:
    """Build the answer (and extra) records for a query."""
    if qtype == "SRV":
        answers, extras = synthesizer.srv_records(name, services)
        return answers + extras
    if qtype == "A":
        return synthesizer.address_records(name, services)
    if qtype == "TXT":
        return synthesizer.txt_records(name, services)
    return synthesizer.ptr_records(name, services)


@click.command()
@click.argument('registry_file', type=click.Path(exists=True, dir_okay=False))
@click.argument('name')
@click.option('--type', 'qtype', type=click.Choice(QUERY_TYPES, case_sensitive=False),
              default='SRV', show_default=True, help='Record type to synthesize')
def main(registry_file, name, qtype):
    """Print the records answering NAME from the REGISTRY_FILE dump."""
    try:
        config = Config.from_env()
    except ConfigurationError as e:
        setup_logging(logging.INFO)
        logger.error(f"Configuration error: {e}")
        sys.exit(1)

    setup_logging(config.log_level_value)

    mapper = KeyMapper(prefix=config.prefix)
    synthesizer = RecordSynthesizer(mapper=mapper, ptr_ttl=config.ptr_ttl)

    try:
        registry = load_registry(registry_file)
        services = select_services(registry, name, mapper)
    except ServiceDecodeError as e:
        logger.error(f"Failed to read registry: {e}")
        sys.exit(1)

    records = synthesize(synthesizer, name, qtype.upper(), services)
    logger.info(f"{name} {qtype.upper()}: {len(records)} records from {len(services)} services")

    for record in records:
        click.echo(record.to_rr().toZone())


if __name__ == '__main__':
    main()
