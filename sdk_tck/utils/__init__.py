"""Utility functions for sdk_tck."""

from sdk_tck.utils.exceptions import (
    ConfigError,
    ErrorKind,
    JsonRpcError,
    ReservedErrorCode,
    TckError,
    TransportError,
)
from sdk_tck.utils.naming import consensus_to_mirror_name, to_env_format
from sdk_tck.utils.retry import RetryPolicy, retry_on_error, with_retry

__all__ = [
    "ConfigError",
    "ErrorKind",
    "JsonRpcError",
    "ReservedErrorCode",
    "TckError",
    "TransportError",
    "consensus_to_mirror_name",
    "to_env_format",
    "RetryPolicy",
    "retry_on_error",
    "with_retry",
]
