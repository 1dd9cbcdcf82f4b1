"""
WorkOS SDK Client

Synchronous client for the WorkOS SSO and MFA endpoints. Builds
authorization URLs, exchanges authorization codes for profiles and drives
second-factor enrollment and verification. Failed responses are turned
into APIError subclasses carrying the server message and request id.
"""

import json
import logging
import re
from typing import Any, Dict, Literal, Optional, Type, TypeVar, Union
from urllib.parse import quote, urlencode

import requests
from requests.exceptions import RequestException, Timeout

from .errors import (
    APIError,
    ArgumentError,
    AuthenticationError,
    ConfigurationError,
    InvalidRequestError,
    NetworkError,
)
from .types import (
    Challenge,
    Factor,
    FactorType,
    Profile,
    Provider,
    VerifyFactorResult,
    WorkOSConfig,
)
from .version import __version__


logger = logging.getLogger("workos")

T = TypeVar("T")

USER_AGENT = f"workos-python/{__version__}"
REQUEST_ID_HEADER = "X-Request-ID"
DEFAULT_ERROR_MESSAGE = "Something went wrong"

# host or host:port, no scheme and no path
HOSTNAME_REGEX = re.compile(r"^[A-Za-z0-9.-]+(:[0-9]+)?$")

ERROR_CLASSES: Dict[int, Type[APIError]] = {
    400: InvalidRequestError,
    401: AuthenticationError,
    404: InvalidRequestError,
    422: InvalidRequestError,
}


def serialize_state(state: Any) -> str:
    """
    Encode the opaque ``state`` value carried through the SSO redirect.

    Strings are passed through untouched. Anything else is encoded as
    compact JSON, keeping mapping order so the same input always yields
    the same query string.
    """
    if state is None:
        state = {}
    if isinstance(state, str):
        return state
    try:
        return json.dumps(state, separators=(",", ":"))
    except (TypeError, ValueError) as e:
        raise ArgumentError(f"state must be JSON serializable: {e}") from e


def _require(name: str, value: Optional[str]) -> str:
    if not value:
        raise ArgumentError(f"Incomplete arguments: '{name}' is a required argument")
    return value


class SSONamespace:
    """SSO operations namespace."""

    def __init__(self, client: "WorkOSClient") -> None:
        self._client = client

    def authorization_url(
        self,
        *,
        project_id: str,
        redirect_uri: str,
        state: Any = None,
        domain: Optional[str] = None,
        provider: Optional[Union[Provider, str]] = None,
    ) -> str:
        """
        Build the URL a user is redirected to in order to start SSO.

        Args:
            project_id: WorkOS project identifier, sent as ``client_id``
            redirect_uri: Where the user returns with an authorization code
            state: Opaque value echoed back to the redirect URI
            domain: Organization domain whose connection should be used
            provider: OAuth provider to use instead of a domain

        Returns:
            The authorization URL on the configured API host

        Raises:
            ArgumentError: If neither or both of domain and provider are
                given, or the provider is not supported
        """
        if not domain and not provider:
            raise ArgumentError("Either domain or provider is required.")
        if domain and provider:
            raise ArgumentError("Specify either domain or provider, not both.")
        _require("project_id", project_id)
        _require("redirect_uri", redirect_uri)

        query: Dict[str, str] = {
            "client_id": project_id,
            "redirect_uri": redirect_uri,
            "response_type": "code",
            "state": serialize_state(state),
        }
        if domain:
            query["domain"] = domain
        else:
            query["provider"] = self._validate_provider(provider)

        return f"{self._client.base_url}/sso/authorize?{urlencode(query)}"

    def profile(self, *, code: str, project_id: str) -> Profile:
        """
        Exchange an authorization code for the user's profile.

        Args:
            code: Authorization code received on the redirect URI
            project_id: WorkOS project identifier

        Returns:
            Profile of the authenticated user

        Raises:
            APIError: If the code is expired or invalid, or the API fails
        """
        _require("code", code)
        _require("project_id", project_id)

        response = self._client._request(
            "/sso/token",
            method="POST",
            form={
                "client_id": project_id,
                "client_secret": self._client._require_api_key(),
                "code": code,
                "grant_type": "authorization_code",
            },
            requires_auth=False,
            expect="profile",
        )
        return self._client._build(Profile, response["profile"])

    @staticmethod
    def _validate_provider(provider: Union[Provider, str, None]) -> str:
        value = provider.value if isinstance(provider, Provider) else provider
        if value not in Provider.values():
            raise ArgumentError(
                f"{value} is not a valid value. "
                f"`provider` must be in {json.dumps(Provider.values())}"
            )
        return value


class MFANamespace:
    """MFA operations namespace."""

    def __init__(self, client: "WorkOSClient") -> None:
        self._client = client

    def enroll_factor(
        self,
        type: Union[FactorType, str],
        totp_issuer: Optional[str] = None,
        totp_user: Optional[str] = None,
        phone_number: Optional[str] = None,
    ) -> Factor:
        """
        Enroll a new authentication factor.

        Args:
            type: One of sms, totp, generic_otp
            totp_issuer: Issuer shown in the authenticator app (totp only)
            totp_user: Account name shown in the authenticator app (totp only)
            phone_number: Number that receives codes (sms only)
        """
        try:
            factor_type = FactorType(type)
        except ValueError:
            raise ArgumentError(
                f"Type argument must be one of: {', '.join(FactorType.values())}"
            ) from None

        if factor_type is FactorType.TOTP and not (totp_issuer and totp_user):
            raise ArgumentError(
                "Incomplete arguments. Need to specify both totp_issuer "
                "and totp_user when type is totp"
            )
        if factor_type is FactorType.SMS and not phone_number:
            raise ArgumentError(
                "Incomplete arguments. Need to specify phone_number when type is sms"
            )

        body: Dict[str, Any] = {"type": factor_type.value}
        if totp_issuer is not None:
            body["totp_issuer"] = totp_issuer
        if totp_user is not None:
            body["totp_user"] = totp_user
        if phone_number is not None:
            body["phone_number"] = phone_number

        response = self._client._request(
            "/auth/factors/enroll",
            method="POST",
            body=body,
            expect="id",
        )
        return self._client._build(Factor, response)

    def get_factor(self, id: str) -> Factor:
        """Fetch an enrolled factor."""
        _require("id", id)
        response = self._client._request(
            f"/auth/factors/{quote(id, safe='')}",
            method="GET",
            expect="id",
        )
        return self._client._build(Factor, response)

    def delete_factor(self, id: str) -> bool:
        """Delete an enrolled factor."""
        _require("id", id)
        self._client._request(
            f"/auth/factors/{quote(id, safe='')}",
            method="DELETE",
        )
        return True

    def challenge_factor(
        self,
        authentication_factor_id: str,
        sms_template: Optional[str] = None,
    ) -> Challenge:
        """
        Issue a challenge against a factor.

        For sms factors the code is texted to the enrolled number;
        ``sms_template`` may contain a ``{{code}}`` placeholder.
        """
        _require("authentication_factor_id", authentication_factor_id)

        body: Dict[str, Any] = {"authentication_factor_id": authentication_factor_id}
        if sms_template is not None:
            body["sms_template"] = sms_template

        response = self._client._request(
            "/auth/factors/challenge",
            method="POST",
            body=body,
            expect="id",
        )
        return self._client._build(Challenge, response)

    def verify_factor(self, authentication_challenge_id: str, code: str) -> VerifyFactorResult:
        """Verify the code a user entered for a challenge."""
        _require("authentication_challenge_id", authentication_challenge_id)
        _require("code", code)

        response = self._client._request(
            "/auth/factors/verify",
            method="POST",
            body={
                "authentication_challenge_id": authentication_challenge_id,
                "code": code,
            },
            expect="valid",
        )
        return self._client._build(VerifyFactorResult, response)


class WorkOSClient:
    """
    WorkOS Client - SDK entry point.

    Holds the configuration and one HTTP session. SSO operations live on
    ``client.sso`` and factor operations on ``client.mfa``.
    """

    def __init__(self, config: WorkOSConfig) -> None:
        """Initialize the WorkOS client."""
        self._validate_config(config)

        self._api_key = config.api_key
        self._api_hostname = config.api_hostname
        self._timeout = config.timeout
        self._debug = config.debug

        self._session = requests.Session()
        self._session.headers.update(config.headers or {})
        self._session.headers["User-Agent"] = USER_AGENT

        # Namespaces
        self.sso = SSONamespace(self)
        self.mfa = MFANamespace(self)

        self._log("WorkOSClient initialized (host=%s)", self._api_hostname)

    def _validate_config(self, config: WorkOSConfig) -> None:
        """Validate configuration."""
        if not config.api_hostname:
            raise ConfigurationError("api_hostname is required")
        if not HOSTNAME_REGEX.match(config.api_hostname):
            raise ConfigurationError(
                "api_hostname must be a bare host name such as api.workos.com",
                {"api_hostname": config.api_hostname},
            )

    def _log(self, message: str, *args: Any) -> None:
        """Log debug message."""
        if self._debug:
            logger.debug(f"[WorkOS] {message}", *args)

    @property
    def api_hostname(self) -> str:
        return self._api_hostname

    @property
    def base_url(self) -> str:
        return f"https://{self._api_hostname}"

    def get_config(self) -> Dict[str, Any]:
        """Get SDK configuration (read-only, without the API key)."""
        return {
            "api_hostname": self._api_hostname,
            "api_key_set": bool(self._api_key),
            "timeout": self._timeout,
            "debug": self._debug,
        }

    def close(self) -> None:
        """Close the underlying HTTP session."""
        self._session.close()

    def __enter__(self) -> "WorkOSClient":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    # =========================================================================
    # Internal Methods
    # =========================================================================

    def _require_api_key(self) -> str:
        if not self._api_key:
            raise ConfigurationError(
                "api_key is required. Set it on WorkOSConfig or in WORKOS_API_KEY."
            )
        return self._api_key

    def _build(self, model: Type[T], data: Any) -> T:
        """Map a decoded body onto a record, refusing incomplete bodies."""
        try:
            return model.from_dict(data)  # type: ignore[attr-defined]
        except (KeyError, TypeError) as e:
            raise APIError(
                f"Malformed {model.__name__} in API response: {e}",
                details={"body": data},
            ) from e

    def _request(
        self,
        endpoint: str,
        method: Literal["GET", "POST", "DELETE"],
        body: Optional[Dict[str, Any]] = None,
        form: Optional[Dict[str, str]] = None,
        requires_auth: bool = True,
        expect: Optional[str] = None,
    ) -> Dict[str, Any]:
        """
        Make a single HTTP request and decode the result.

        Args:
            endpoint: API endpoint path
            method: HTTP method
            body: JSON request body
            form: Form-encoded request body
            requires_auth: Send the API key as a bearer token
            expect: Member a successful body must contain

        Returns:
            Response data dictionary
        """
        # None drops any Authorization inherited from the session headers
        headers: Dict[str, Optional[str]] = {"Authorization": None}
        if requires_auth:
            headers["Authorization"] = f"Bearer {self._require_api_key()}"

        self._log("%s %s", method, endpoint)

        try:
            response = self._session.request(
                method=method,
                url=f"{self.base_url}{endpoint}",
                headers=headers,
                json=body,
                data=form,
                timeout=self._timeout,
            )
        except Timeout as e:
            raise NetworkError("Request timeout", {"timeout": self._timeout}) from e
        except RequestException as e:
            raise NetworkError(str(e)) from e

        self._log(
            "%s %s -> %s (request ID: %s)",
            method,
            endpoint,
            response.status_code,
            response.headers.get(REQUEST_ID_HEADER),
        )
        return self._handle_response(response, expect)

    def _handle_response(
        self, response: requests.Response, expect: Optional[str] = None
    ) -> Dict[str, Any]:
        """Handle HTTP response and convert to result data or an error."""
        request_id = response.headers.get(REQUEST_ID_HEADER)
        data = self._decode(response)

        if not 200 <= response.status_code < 300:
            self._raise_api_error(response.status_code, data, request_id)

        # A success status with an error-shaped body is still a failure
        if expect is None:
            if isinstance(data, dict) and "message" in data:
                self._raise_api_error(response.status_code, data, request_id)
        elif not isinstance(data, dict) or expect not in data:
            self._raise_api_error(response.status_code, data, request_id)

        return data if isinstance(data, dict) else {}

    @staticmethod
    def _decode(response: requests.Response) -> Any:
        if not response.content:
            return None
        try:
            return response.json()
        except ValueError:
            return None

    @staticmethod
    def _raise_api_error(status_code: int, data: Any, request_id: Optional[str]) -> None:
        message = DEFAULT_ERROR_MESSAGE
        if isinstance(data, dict) and data.get("message"):
            message = str(data["message"])

        error_class = ERROR_CLASSES.get(status_code, APIError)
        raise error_class(
            message,
            http_status=status_code,
            request_id=request_id,
            details=data if isinstance(data, dict) else None,
        )


def create_workos_client(config: Optional[WorkOSConfig] = None) -> WorkOSClient:
    """
    Create a new WorkOS client instance.

    Args:
        config: SDK configuration; read from the environment when omitted

    Returns:
        WorkOSClient instance
    """
    return WorkOSClient(config if config is not None else WorkOSConfig.from_env())
