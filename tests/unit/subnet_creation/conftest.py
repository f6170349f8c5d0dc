import pytest
from botocore.exceptions import ClientError


def provider_error(operation_name: str) -> ClientError:
    return ClientError(
        {"Error": {"Code": "InvalidParameterValue", "Message": f"{operation_name} was rejected"}},
        operation_name,
    )


class FakeNetworkProvider:
    """In-memory stand-in for EC2 that records each call made against it."""

    def __init__(self):
        self.calls: list[str] = []
        self.gateways_by_vpc: dict[str, str] = {}
        self.route_tables_by_subnet: dict[str, str] = {}
        self.routes: list[tuple[str, str, str]] = []
        self.public_ip_on_launch: dict[str, bool] = {}
        self.subnet_ids_to_create: list[str] = []
        self.failing_call: str | None = None
        self.raised_error: ClientError | None = None
        self._counter = 0

    def _record(self, call_name: str) -> None:
        self.calls.append(call_name)
        if call_name == self.failing_call:
            self.raised_error = provider_error(call_name)
            raise self.raised_error

    def _next_id(self, prefix: str) -> str:
        self._counter += 1
        return f"{prefix}-{self._counter}"

    def create_subnet(self, *, vpc_id: str, cidr_block: str, availability_zone: str = "", name: str = "") -> str:
        self._record("create_subnet")
        if self.subnet_ids_to_create:
            return self.subnet_ids_to_create.pop(0)
        return self._next_id("subnet")

    def find_internet_gateway(self, *, vpc_id: str) -> str | None:
        self._record("find_internet_gateway")
        return self.gateways_by_vpc.get(vpc_id)

    def create_internet_gateway(self) -> str:
        self._record("create_internet_gateway")
        return self._next_id("igw")

    def attach_internet_gateway(self, *, internet_gateway_id: str, vpc_id: str) -> None:
        self._record("attach_internet_gateway")
        self.gateways_by_vpc[vpc_id] = internet_gateway_id

    def find_route_table(self, *, subnet_id: str) -> str | None:
        self._record("find_route_table")
        return self.route_tables_by_subnet.get(subnet_id)

    def create_route_table(self, *, vpc_id: str) -> str:
        self._record("create_route_table")
        return self._next_id("rtb")

    def associate_route_table(self, *, route_table_id: str, subnet_id: str) -> None:
        self._record("associate_route_table")
        self.route_tables_by_subnet[subnet_id] = route_table_id

    def create_route(self, *, route_table_id: str, destination_cidr_block: str, gateway_id: str) -> None:
        self._record("create_route")
        self.routes.append((route_table_id, destination_cidr_block, gateway_id))

    def set_map_public_ip_on_launch(self, *, subnet_id: str, enabled: bool) -> None:
        self._record("set_map_public_ip_on_launch")
        self.public_ip_on_launch[subnet_id] = enabled


class FakePublisher:
    def __init__(self):
        self.messages: list[tuple[str, bytes]] = []

    def publish(self, subject: str, payload: bytes) -> None:
        self.messages.append((subject, payload))


@pytest.fixture
def fake_provider() -> FakeNetworkProvider:
    return FakeNetworkProvider()


@pytest.fixture
def fake_publisher() -> FakePublisher:
    return FakePublisher()
