import logging
from typing import TYPE_CHECKING
from typing import Any
from typing import Protocol

import boto3

if TYPE_CHECKING:
    from mypy_boto3_ec2 import EC2Client

logger = logging.getLogger(__name__)


class NetworkProvider(Protocol):
    """The cloud operations needed to create a subnet and give it a path to the internet."""

    def create_subnet(self, *, vpc_id: str, cidr_block: str, availability_zone: str = "", name: str = "") -> str: ...

    def find_internet_gateway(self, *, vpc_id: str) -> str | None: ...

    def create_internet_gateway(self) -> str: ...

    def attach_internet_gateway(self, *, internet_gateway_id: str, vpc_id: str) -> None: ...

    def find_route_table(self, *, subnet_id: str) -> str | None: ...

    def create_route_table(self, *, vpc_id: str) -> str: ...

    def associate_route_table(self, *, route_table_id: str, subnet_id: str) -> None: ...

    def create_route(self, *, route_table_id: str, destination_cidr_block: str, gateway_id: str) -> None: ...

    def set_map_public_ip_on_launch(self, *, subnet_id: str, enabled: bool) -> None: ...


class Ec2NetworkProvider:
    def __init__(self, *, ec2_client: "EC2Client"):
        self._ec2 = ec2_client

    def create_subnet(self, *, vpc_id: str, cidr_block: str, availability_zone: str = "", name: str = "") -> str:
        subnet_kwargs: dict[str, Any] = {"VpcId": vpc_id, "CidrBlock": cidr_block}
        if availability_zone:
            subnet_kwargs["AvailabilityZone"] = availability_zone
        if name:
            subnet_kwargs["TagSpecifications"] = [{"ResourceType": "subnet", "Tags": [{"Key": "Name", "Value": name}]}]
        subnet = self._ec2.create_subnet(**subnet_kwargs)["Subnet"]
        assert "SubnetId" in subnet, f"Expected 'SubnetId' in {subnet}"
        return subnet["SubnetId"]

    def find_internet_gateway(self, *, vpc_id: str) -> str | None:
        gateways = self._ec2.describe_internet_gateways(
            Filters=[{"Name": "attachment.vpc-id", "Values": [vpc_id]}]
        ).get("InternetGateways", [])
        if not gateways:
            return None
        assert "InternetGatewayId" in gateways[0], f"Expected 'InternetGatewayId' in {gateways[0]}"
        return gateways[0]["InternetGatewayId"]

    def create_internet_gateway(self) -> str:
        gateway = self._ec2.create_internet_gateway()["InternetGateway"]
        assert "InternetGatewayId" in gateway, f"Expected 'InternetGatewayId' in {gateway}"
        return gateway["InternetGatewayId"]

    def attach_internet_gateway(self, *, internet_gateway_id: str, vpc_id: str) -> None:
        _ = self._ec2.attach_internet_gateway(InternetGatewayId=internet_gateway_id, VpcId=vpc_id)

    def find_route_table(self, *, subnet_id: str) -> str | None:
        route_tables = self._ec2.describe_route_tables(
            Filters=[{"Name": "association.subnet-id", "Values": [subnet_id]}]
        ).get("RouteTables", [])
        if not route_tables:
            return None
        assert "RouteTableId" in route_tables[0], f"Expected 'RouteTableId' in {route_tables[0]}"
        return route_tables[0]["RouteTableId"]

    def create_route_table(self, *, vpc_id: str) -> str:
        route_table = self._ec2.create_route_table(VpcId=vpc_id)["RouteTable"]
        assert "RouteTableId" in route_table, f"Expected 'RouteTableId' in {route_table}"
        return route_table["RouteTableId"]

    def associate_route_table(self, *, route_table_id: str, subnet_id: str) -> None:
        _ = self._ec2.associate_route_table(RouteTableId=route_table_id, SubnetId=subnet_id)

    def create_route(self, *, route_table_id: str, destination_cidr_block: str, gateway_id: str) -> None:
        _ = self._ec2.create_route(
            RouteTableId=route_table_id, DestinationCidrBlock=destination_cidr_block, GatewayId=gateway_id
        )

    def set_map_public_ip_on_launch(self, *, subnet_id: str, enabled: bool) -> None:
        _ = self._ec2.modify_subnet_attribute(SubnetId=subnet_id, MapPublicIpOnLaunch={"Value": enabled})


def create_ec2_network_provider(*, region: str, access_key_id: str, secret_access_key: str) -> Ec2NetworkProvider:
    # credentials arrive with each request, so every request gets its own session
    session = boto3.Session(
        aws_access_key_id=access_key_id,
        aws_secret_access_key=secret_access_key,
        region_name=region,
    )
    logger.debug("Created EC2 session for region %s", region)
    return Ec2NetworkProvider(ec2_client=session.client("ec2"))
