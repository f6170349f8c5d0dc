from .bus import NatsPublisher
from .constants import CREATE_SUBNET_DONE_SUBJECT
from .constants import CREATE_SUBNET_ERROR_SUBJECT
from .constants import CREATE_SUBNET_SUBJECT
from .constants import DEFAULT_ROUTE_CIDR_BLOCK
from .event import EventValidationError
from .event import InvalidEventReason
from .event import SubnetCreationEvent
from .handler import NetworkProviderFactory
from .handler import SubnetCreationHandler
from .handler import ec2_provider_for_event
from .network_provider import Ec2NetworkProvider
from .network_provider import NetworkProvider
from .network_provider import create_ec2_network_provider
from .signaling import CompletionSignaler
from .signaling import Publisher
from .workflow import ensure_internet_gateway
from .workflow import ensure_route_table
from .workflow import provision_subnet
