import logging

from .constants import DEFAULT_ROUTE_CIDR_BLOCK
from .event import SubnetCreationEvent
from .network_provider import NetworkProvider

logger = logging.getLogger(__name__)


def ensure_internet_gateway(*, provider: NetworkProvider, vpc_id: str) -> str:
    """Return the gateway attached to the VPC, creating and attaching one if there isn't one yet."""
    internet_gateway_id = provider.find_internet_gateway(vpc_id=vpc_id)
    if internet_gateway_id is not None:
        logger.info("Reusing internet gateway %s already attached to %s", internet_gateway_id, vpc_id)
        return internet_gateway_id
    internet_gateway_id = provider.create_internet_gateway()
    # a gateway that fails to attach is left in place, the error goes back to the requester
    provider.attach_internet_gateway(internet_gateway_id=internet_gateway_id, vpc_id=vpc_id)
    logger.info("Created internet gateway %s and attached it to %s", internet_gateway_id, vpc_id)
    return internet_gateway_id


def ensure_route_table(*, provider: NetworkProvider, vpc_id: str, subnet_id: str) -> str:
    """Return the route table associated with the subnet, creating and associating one if needed."""
    route_table_id = provider.find_route_table(subnet_id=subnet_id)
    if route_table_id is not None:
        logger.info("Reusing route table %s already associated with %s", route_table_id, subnet_id)
        return route_table_id
    route_table_id = provider.create_route_table(vpc_id=vpc_id)
    provider.associate_route_table(route_table_id=route_table_id, subnet_id=subnet_id)
    logger.info("Created route table %s and associated it with %s", route_table_id, subnet_id)
    return route_table_id


def provision_subnet(*, event: SubnetCreationEvent, provider: NetworkProvider) -> str:
    """Create the requested subnet and, for public subnets, its route to the internet.

    Returns the ID of the new subnet. Any provider error propagates immediately and nothing already created is
    rolled back, so a failure after the subnet exists leaves that subnet behind.
    """
    subnet_id = provider.create_subnet(
        vpc_id=event.vpc_id,
        cidr_block=event.cidr_block,
        availability_zone=event.availability_zone,
        name=event.name,
    )
    logger.info("Created subnet %s (%s) in %s", subnet_id, event.cidr_block, event.vpc_id)
    if not event.is_public:
        return subnet_id

    # TODO: two concurrent public requests for the same VPC can both miss the gateway lookup; add a per-VPC lock around it
    internet_gateway_id = ensure_internet_gateway(provider=provider, vpc_id=event.vpc_id)
    route_table_id = ensure_route_table(provider=provider, vpc_id=event.vpc_id, subnet_id=subnet_id)
    # no pre-check for an existing default route, the provider rejects duplicates itself
    provider.create_route(
        route_table_id=route_table_id,
        destination_cidr_block=DEFAULT_ROUTE_CIDR_BLOCK,
        gateway_id=internet_gateway_id,
    )
    logger.info("Routed %s to %s via %s", DEFAULT_ROUTE_CIDR_BLOCK, internet_gateway_id, route_table_id)
    provider.set_map_public_ip_on_launch(subnet_id=subnet_id, enabled=True)
    logger.info("Enabled public IP assignment on launch for %s", subnet_id)
    return subnet_id
