"""
Shared fixtures for the WorkOS SDK tests.
"""

from typing import Any, Dict

import pytest

from workos import WorkOSClient, WorkOSConfig


API_URL = "https://api.workos.com"


@pytest.fixture
def config() -> WorkOSConfig:
    """Valid configuration for testing."""
    return WorkOSConfig(api_key="api-key", debug=True)


@pytest.fixture
def client(config: WorkOSConfig) -> WorkOSClient:
    """Client bound to the default API host."""
    with WorkOSClient(config) as client:
        yield client


@pytest.fixture
def keyless_client() -> WorkOSClient:
    """Client with no API key configured."""
    with WorkOSClient(WorkOSConfig()) as client:
        yield client


@pytest.fixture
def profile_response() -> Dict[str, Any]:
    """Body returned by the token endpoint for a successful exchange."""
    return {
        "profile": {
            "object": "profile",
            "id": "prof_01DWAS7ZQWM70PV93BFV1V78QV",
            "email": "demo@workos-okta.com",
            "first_name": "WorkOS",
            "last_name": "Demo",
            "connection_type": "OktaSAML",
            "connection_id": "conn_01E0CG2C820RP4VS50PRJF8YPX",
            "idp_id": "00u1klkowm8EGah2H357",
            "raw_attributes": {
                "email": "demo@workos-okta.com",
                "first_name": "WorkOS",
                "last_name": "Demo",
                "groups": ["Admins", "Developers"],
            },
        },
        "access_token": "01DVX6QBS3EG6FHY2ESAA5Q65X",
    }


@pytest.fixture
def totp_factor_response() -> Dict[str, Any]:
    """Body returned when enrolling a TOTP factor."""
    return {
        "object": "authentication_factor",
        "id": "auth_factor_1234",
        "created_at": "2022-02-17T22:39:26.616Z",
        "updated_at": "2022-02-17T22:39:26.616Z",
        "type": "totp",
        "totp": {
            "qr_code": "data:image/png;base64,iVBORw0KGgoAAAANSUhEUgAAAPAAAADwCAYAAAA+",
            "secret": "JJWBEBTUDRDFIRQ3",
            "uri": "otpauth://totp/FooCorp:test@example.com?secret=JJWBEBTUDRDFIRQ3&issuer=FooCorp",
        },
        "environment_id": "environment_01FPXYZ",
    }


@pytest.fixture
def challenge_response() -> Dict[str, Any]:
    """Body returned when challenging a factor."""
    return {
        "object": "authentication_challenge",
        "id": "auth_challenge_1234",
        "created_at": "2022-02-17T22:39:26.616Z",
        "updated_at": "2022-02-17T22:39:26.616Z",
        "expires_at": "2022-02-17T22:49:26.616Z",
        "code": "12345",
        "authentication_factor_id": "auth_factor_1234",
    }
