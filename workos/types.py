"""
WorkOS SDK Type Definitions

Configuration plus the typed records returned by the SSO and MFA
endpoints. Records are immutable and built from decoded JSON bodies with
``from_dict``; unknown keys are ignored.
"""

import os
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional


DEFAULT_API_HOSTNAME = "api.workos.com"


def _require_bool(data: Dict[str, Any], key: str) -> bool:
    value = data[key]
    if not isinstance(value, bool):
        raise TypeError(f"{key!r} must be a boolean, got {type(value).__name__}")
    return value


class Provider(str, Enum):
    """SSO providers accepted by the authorization URL."""

    GOOGLE_OAUTH = "GoogleOAuth"

    @classmethod
    def values(cls) -> List[str]:
        return [member.value for member in cls]


class FactorType(str, Enum):
    """Second-factor methods that can be enrolled."""

    SMS = "sms"
    TOTP = "totp"
    GENERIC_OTP = "generic_otp"

    @classmethod
    def values(cls) -> List[str]:
        return [member.value for member in cls]


@dataclass
class WorkOSConfig:
    """SDK configuration options."""

    # Secret API key (sk_xxx); only needed for authenticated calls
    api_key: Optional[str] = None
    # API hostname, without scheme (default: api.workos.com)
    api_hostname: str = DEFAULT_API_HOSTNAME
    # Request timeout in seconds (default: None, the transport default)
    timeout: Optional[float] = None
    # Enable debug logging (default: False)
    debug: bool = False
    # Custom headers to include in requests
    headers: Optional[Dict[str, str]] = None

    @classmethod
    def from_env(cls, **overrides: Any) -> "WorkOSConfig":
        """Build a configuration from WORKOS_API_KEY and WORKOS_API_HOSTNAME."""
        values: Dict[str, Any] = {
            "api_key": os.environ.get("WORKOS_API_KEY"),
            "api_hostname": os.environ.get("WORKOS_API_HOSTNAME") or DEFAULT_API_HOSTNAME,
        }
        values.update(overrides)
        return cls(**values)


@dataclass(frozen=True)
class Profile:
    """Identity returned by the SSO code exchange."""

    id: str
    email: str
    connection_type: str
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    idp_id: Optional[str] = None
    connection_id: Optional[str] = None
    organization_id: Optional[str] = None
    raw_attributes: Dict[str, Any] = field(default_factory=dict)

    @property
    def full_name(self) -> str:
        return " ".join(part for part in (self.first_name, self.last_name) if part)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Profile":
        """Create from dictionary."""
        return cls(
            id=data["id"],
            email=data["email"],
            connection_type=data["connection_type"],
            first_name=data.get("first_name"),
            last_name=data.get("last_name"),
            idp_id=data.get("idp_id"),
            connection_id=data.get("connection_id"),
            organization_id=data.get("organization_id"),
            raw_attributes=data.get("raw_attributes") or {},
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "email": self.email,
            "first_name": self.first_name,
            "last_name": self.last_name,
            "connection_type": self.connection_type,
            "idp_id": self.idp_id,
            "connection_id": self.connection_id,
            "organization_id": self.organization_id,
            "raw_attributes": self.raw_attributes,
        }


@dataclass(frozen=True)
class Factor:
    """An enrolled authentication factor."""

    id: str
    type: str
    object: str = "authentication_factor"
    created_at: Optional[str] = None
    updated_at: Optional[str] = None
    # TOTP details: qr_code, secret, uri
    totp: Optional[Dict[str, Any]] = None
    # SMS details: phone_number
    sms: Optional[Dict[str, Any]] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Factor":
        return cls(
            id=data["id"],
            type=data["type"],
            object=data.get("object", "authentication_factor"),
            created_at=data.get("created_at"),
            updated_at=data.get("updated_at"),
            totp=data.get("totp"),
            sms=data.get("sms"),
        )


@dataclass(frozen=True)
class Challenge:
    """A challenge issued against a factor."""

    id: str
    authentication_factor_id: str
    object: str = "authentication_challenge"
    expires_at: Optional[str] = None
    code: Optional[str] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Challenge":
        return cls(
            id=data["id"],
            authentication_factor_id=data["authentication_factor_id"],
            object=data.get("object", "authentication_challenge"),
            expires_at=data.get("expires_at"),
            code=data.get("code"),
            created_at=data.get("created_at"),
            updated_at=data.get("updated_at"),
        )


@dataclass(frozen=True)
class VerifyFactorResult:
    """Outcome of verifying a challenge code."""

    valid: bool
    challenge: Optional[Dict[str, Any]] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "VerifyFactorResult":
        return cls(
            valid=_require_bool(data, "valid"),
            challenge=data.get("challenge"),
        )
