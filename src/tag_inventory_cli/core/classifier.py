# src/tag_inventory_cli/core/classifier.py
"""
Service classification.

Each service identifier maps to one ServiceKind. Every kind turns a short ARN
into a ResourceRecord:

  - GENERIC                 : identifier = whole short ARN, no product.
  - COMPUTE_INSTANCE (ec2)  : "<product>/<identifier>", e.g. instance/i-0123abcd
  - CONTAINER_ORCHESTRATION : same split for ecs, e.g. cluster/prod

Adding a dedicated strategy for another service:
  1. Add a ServiceKind member.
  2. Map the service identifier to it in config.SPECIALIZED_SERVICES.
  3. Register its decomposition function in STRATEGIES.
"""

from types import MappingProxyType
from typing import Callable, Optional

from tag_inventory_cli.config import SPECIALIZED_SERVICES
from tag_inventory_cli.core.arn import decompose_arn
from tag_inventory_cli.core.errors import MalformedResourcePath
from tag_inventory_cli.core.models import ResourceRecord, ServiceKind


def build_record(
    short_arn: str,
    service: str,
    region: str,
    identifier: str,
    product: Optional[str] = None,
    tags: Optional[dict[str, str]] = None,
) -> ResourceRecord:
    """Assembles the final record from the parsed fields and the query region."""
    return ResourceRecord(
        region=region,
        service=service,
        product=product,
        identifier=identifier,
        arn=short_arn,
        tags=MappingProxyType(dict(tags or {})),
    )


def _generic(short_arn: str, service: str, region: str, tags=None) -> ResourceRecord:
    return build_record(short_arn, service, region, identifier=short_arn, tags=tags)


def _product_and_identifier(short_arn: str, service: str, region: str, tags=None) -> ResourceRecord:
    product, _, identifier = short_arn.partition("/")
    if not product or not identifier:
        raise MalformedResourcePath(short_arn, service)
    return build_record(short_arn, service, region, identifier=identifier, product=product, tags=tags)


STRATEGIES: dict[ServiceKind, Callable[..., ResourceRecord]] = {
    ServiceKind.GENERIC: _generic,
    ServiceKind.COMPUTE_INSTANCE: _product_and_identifier,
    ServiceKind.CONTAINER_ORCHESTRATION: _product_and_identifier,
}


def strategy_for(service: str) -> ServiceKind:
    """Unknown services fall back to GENERIC so every resource is still listed."""
    kind = SPECIALIZED_SERVICES.get(service)
    return ServiceKind(kind) if kind else ServiceKind.GENERIC


def classify(
    short_arn: str,
    service: str,
    region: str,
    tags: Optional[dict[str, str]] = None,
) -> ResourceRecord:
    return STRATEGIES[strategy_for(service)](short_arn, service, region, tags)


def classify_arn(arn: str, region: str, tags: Optional[dict[str, str]] = None) -> ResourceRecord:
    """Full ARN -> ResourceRecord. Raises InvalidArnFormat or MalformedResourcePath."""
    service, short = decompose_arn(arn)
    try:
        return classify(short, service, region, tags)
    except MalformedResourcePath as e:
        raise MalformedResourcePath(arn, service) from e
