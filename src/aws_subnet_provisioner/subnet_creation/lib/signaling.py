import logging
from typing import Protocol

from pydantic_core import PydanticSerializationError

from .constants import CREATE_SUBNET_DONE_SUBJECT
from .constants import CREATE_SUBNET_ERROR_SUBJECT
from .event import SubnetCreationEvent

logger = logging.getLogger(__name__)


class Publisher(Protocol):
    def publish(self, subject: str, payload: bytes) -> None: ...


class CompletionSignaler:
    """Stamps the outcome of a request onto its event and publishes it on the matching subject."""

    def __init__(
        self,
        *,
        publisher: Publisher,
        done_subject: str = CREATE_SUBNET_DONE_SUBJECT,
        error_subject: str = CREATE_SUBNET_ERROR_SUBJECT,
    ):
        self._publisher = publisher
        self.done_subject = done_subject
        self.error_subject = error_subject

    def report_success(self, *, event: SubnetCreationEvent, subnet_id: str) -> None:
        event.created_subnet_id = subnet_id
        event.error_message = ""
        try:
            payload = event.to_json_bytes()
        except PydanticSerializationError as e:
            logger.exception("Unable to serialize completed event %s", event.request_id)
            event.created_subnet_id = ""
            self.report_failure(event=event, error=e)
            return
        logger.info("Subnet creation %s completed with %s", event.request_id, subnet_id)
        self._publisher.publish(self.done_subject, payload)

    def report_failure(self, *, event: SubnetCreationEvent, error: Exception) -> None:
        # the text of e.g. a bare TimeoutError() is empty
        event.error_message = str(error) or type(error).__name__
        logger.warning("Subnet creation %s failed: %s", event.request_id, event.error_message)
        try:
            payload = event.to_json_bytes()
        except PydanticSerializationError:
            logger.exception("Unable to serialize failed event %s, no error will be published", event.request_id)
            return
        self._publisher.publish(self.error_subject, payload)

    def report_undecodable(self, *, payload: bytes) -> None:
        logger.warning("Unable to decode subnet creation request, returning it unchanged on %s", self.error_subject)
        self._publisher.publish(self.error_subject, payload)
