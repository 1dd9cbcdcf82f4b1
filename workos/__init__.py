"""
WorkOS Python SDK

A Python SDK for the WorkOS identity API: SSO authorization URLs,
authorization code exchange and multi-factor authentication.
"""

from .client import WorkOSClient, SSONamespace, MFANamespace, create_workos_client, serialize_state
from .types import (
    WorkOSConfig,
    Provider,
    FactorType,
    Profile,
    Factor,
    Challenge,
    VerifyFactorResult,
    DEFAULT_API_HOSTNAME,
)
from .errors import (
    WorkOSError,
    ArgumentError,
    ConfigurationError,
    APIError,
    AuthenticationError,
    InvalidRequestError,
    NetworkError,
    is_workos_error,
)
from .version import __version__

API_HOSTNAME = DEFAULT_API_HOSTNAME

__all__ = [
    # Client
    "WorkOSClient",
    "SSONamespace",
    "MFANamespace",
    "create_workos_client",
    "serialize_state",
    # Types
    "WorkOSConfig",
    "Provider",
    "FactorType",
    "Profile",
    "Factor",
    "Challenge",
    "VerifyFactorResult",
    "API_HOSTNAME",
    # Errors
    "WorkOSError",
    "ArgumentError",
    "ConfigurationError",
    "APIError",
    "AuthenticationError",
    "InvalidRequestError",
    "NetworkError",
    "is_workos_error",
]
