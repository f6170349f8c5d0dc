import os
from collections.abc import Mapping
from typing import Any
from typing import Literal

from pydantic import BaseModel
from pydantic import field_validator

DEFAULT_NATS_URI = "nats://localhost:4222"
NATS_URI_ENV_VAR = "NATS_URI"
LOG_LEVEL_ENV_VAR = "LOG_LEVEL"

type LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class WorkerConfig(BaseModel):
    nats_uri: str = DEFAULT_NATS_URI
    log_level: LogLevel = "INFO"

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_log_level(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.upper()
        return value


def load_worker_config(environ: Mapping[str, str] | None = None) -> WorkerConfig:
    """Read the worker settings from the environment, ignoring variables that are set but empty."""
    if environ is None:
        environ = os.environ
    values: dict[str, str] = {}
    for field_name, env_var_name in (("nats_uri", NATS_URI_ENV_VAR), ("log_level", LOG_LEVEL_ENV_VAR)):
        if environ.get(env_var_name):
            values[field_name] = environ[env_var_name]
    return WorkerConfig.model_validate(values)
