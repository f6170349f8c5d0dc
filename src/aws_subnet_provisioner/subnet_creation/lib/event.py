from enum import StrEnum
from typing import Any

from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field
from pydantic import ValidationInfo
from pydantic import field_validator


class InvalidEventReason(StrEnum):
    INVALID_VPC_ID = "Datacenter VPC ID invalid"
    INVALID_REGION = "Datacenter Region invalid"
    INVALID_CREDENTIALS = "Datacenter credentials invalid"
    INVALID_SUBNET_RANGE = "Network subnet invalid"


class EventValidationError(Exception):
    def __init__(self, *, reason: InvalidEventReason):
        super().__init__(reason.value)
        self.reason = reason


class SubnetCreationEvent(BaseModel):
    """A single subnet creation request, and (once processed) its outcome.

    Field aliases are the JSON keys used on the message bus. Missing keys decode to empty values so that
    `ensure_valid` reports them, rather than the decoder.
    """

    request_id: str = Field(default="", alias="_uuid")
    batch_id: str = Field(default="", alias="_batch_id")
    provider_type: str = Field(default="", alias="_type")
    region: str = Field(default="", alias="datacenter_region")
    access_key_id: str = Field(default="", alias="datacenter_secret")
    secret_access_key: str = Field(default="", alias="datacenter_token")
    vpc_id: str = ""
    created_subnet_id: str = Field(default="", alias="network_aws_id")
    name: str = ""
    cidr_block: str = Field(default="", alias="range")
    is_public: bool = False
    availability_zone: str = ""
    error_message: str = ""

    model_config = ConfigDict(populate_by_name=True, extra="ignore", strict=True)

    @field_validator("*", mode="before")
    @classmethod
    def _null_to_default(cls, value: Any, info: ValidationInfo) -> Any:
        # a JSON null leaves the field at its empty value, like a missing key
        if value is None and info.field_name is not None:
            return cls.model_fields[info.field_name].default
        return value

    def ensure_valid(self) -> None:
        """Raise on the first missing required field, checked in a fixed order."""
        if not self.vpc_id:
            raise EventValidationError(reason=InvalidEventReason.INVALID_VPC_ID)
        if not self.region:
            raise EventValidationError(reason=InvalidEventReason.INVALID_REGION)
        if not self.access_key_id or not self.secret_access_key:
            raise EventValidationError(reason=InvalidEventReason.INVALID_CREDENTIALS)
        if not self.cidr_block:
            raise EventValidationError(reason=InvalidEventReason.INVALID_SUBNET_RANGE)

    def to_json_bytes(self) -> bytes:
        # the outcome fields are only emitted once they hold a value
        exclude = {
            field_name
            for field_name in ("created_subnet_id", "error_message")
            if not getattr(self, field_name)
        }
        return self.model_dump_json(by_alias=True, exclude=exclude).encode()
