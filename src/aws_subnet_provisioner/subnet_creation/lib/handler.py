import logging
from collections.abc import Callable

import pydantic

from .event import EventValidationError
from .event import SubnetCreationEvent
from .network_provider import NetworkProvider
from .network_provider import create_ec2_network_provider
from .signaling import CompletionSignaler
from .workflow import provision_subnet

logger = logging.getLogger(__name__)

type NetworkProviderFactory = Callable[[SubnetCreationEvent], NetworkProvider]


def ec2_provider_for_event(event: SubnetCreationEvent) -> NetworkProvider:
    return create_ec2_network_provider(
        region=event.region,
        access_key_id=event.access_key_id,
        secret_access_key=event.secret_access_key,
    )


class SubnetCreationHandler:
    """Runs one inbound message through decode, validation, provisioning and completion signaling.

    Every message results in exactly one published message, and no request-level failure escapes `handle`.
    """

    def __init__(
        self,
        *,
        signaler: CompletionSignaler,
        provider_factory: NetworkProviderFactory = ec2_provider_for_event,
    ):
        self._signaler = signaler
        self._provider_factory = provider_factory

    def handle(self, payload: bytes) -> None:
        try:
            event = SubnetCreationEvent.model_validate_json(payload)
        except pydantic.ValidationError:
            self._signaler.report_undecodable(payload=payload)
            return
        logger.info("Received subnet creation request %s for %s", event.request_id, event.vpc_id)

        try:
            event.ensure_valid()
        except EventValidationError as e:
            self._signaler.report_failure(event=event, error=e)
            return

        try:
            provider = self._provider_factory(event)
            subnet_id = provision_subnet(event=event, provider=provider)
        except Exception as e:  # noqa: BLE001 # every failure is reported on the error subject
            self._signaler.report_failure(event=event, error=e)
            return

        self._signaler.report_success(event=event, subnet_id=subnet_id)
