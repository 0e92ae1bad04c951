"""
Base HTTP transport for the DocuSign REST API.

Bound to one host; handles the requests session, optional retries,
JSON decoding and error responses.
"""

import logging
from typing import Optional, Dict, Any

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from .. import __version__
from ..config import DocuSignConfig
from ..exceptions import (
    APIError,
    AuthenticationError,
    NotFoundError,
    PermissionDeniedError,
    ValidationError,
)

logger = logging.getLogger(__name__)


class HTTPClient:
    """
    HTTP transport bound to a single DocuSign host.

    Handles:
    - Session management with optional retry logic
    - JSON decoding
    - Error response handling
    """

    def __init__(self, host: str, config: Optional[DocuSignConfig] = None):
        """
        Initialize the transport.

        Args:
            host: Versioned API root, e.g. https://demo.docusign.net/restapi/v2
            config: Optional configuration for timeout, SSL and retries.
        """
        self.host = host
        self.config = config or DocuSignConfig()
        self._session: Optional[requests.Session] = None

    @property
    def session(self) -> requests.Session:
        """Get or create HTTP session."""
        if self._session is None:
            self._session = requests.Session()

            if self.config.max_retries > 0:
                retry_strategy = Retry(
                    total=self.config.max_retries,
                    backoff_factor=1,
                    status_forcelist=[429, 502, 503, 504],
                    allowed_methods=["HEAD", "GET", "OPTIONS"],
                    respect_retry_after_header=True,
                    raise_on_status=False,
                )
                adapter = HTTPAdapter(max_retries=retry_strategy)
                self._session.mount("http://", adapter)
                self._session.mount("https://", adapter)

            self._session.headers.update({
                "User-Agent": f"docusign-wrapper/{__version__}",
                "Accept": "application/json",
            })

        return self._session

    def build_url(self, endpoint: str) -> str:
        """Append an endpoint path to the host, keeping the version prefix."""
        return self.host.rstrip("/") + "/" + endpoint.lstrip("/")

    def _handle_response(self, response: requests.Response) -> Dict[str, Any]:
        """Decode a response body and raise for error statuses."""
        logger.debug(f"Request: {response.request.method} {response.request.url}")
        logger.debug(f"Response: {response.status_code}")

        if 200 <= response.status_code < 300:
            if response.status_code == 204 or not response.content:
                return {}
            try:
                return response.json()
            except ValueError as e:
                raise APIError(
                    f"Invalid JSON in response: {e}",
                    status_code=response.status_code
                )

        try:
            error_data = response.json()
            error_msg = self._extract_error_message(error_data)
        except ValueError:
            error_data = {}
            error_msg = response.text or f"HTTP {response.status_code}"

        logger.error(
            "API error [%s %s] status=%d",
            response.request.method,
            response.request.url,
            response.status_code,
        )

        if response.status_code == 401:
            raise AuthenticationError(
                "Authentication failed: " + (error_msg or "Check username, password and integrator key."),
                response_data=error_data
            )
        elif response.status_code == 403:
            raise PermissionDeniedError(
                "Permission denied: " + (error_msg or "You don't have access to this resource."),
                status_code=response.status_code,
                response_data=error_data
            )
        elif response.status_code == 404:
            raise NotFoundError(
                "Resource not found: " + (error_msg or "The requested resource does not exist."),
                status_code=response.status_code,
                response_data=error_data
            )
        elif response.status_code in (400, 422):
            raise ValidationError(
                f"Invalid request: {error_msg}",
                status_code=response.status_code,
                response_data=error_data
            )
        else:
            raise APIError(
                f"API request failed: {error_msg}",
                status_code=response.status_code,
                response_data=error_data
            )

    def _extract_error_message(self, error_data: Any) -> str:
        """Extract the message from a DocuSign error body."""
        if not isinstance(error_data, dict):
            return str(error_data)

        code = error_data.get("errorCode")
        message = error_data.get("message")
        if code and message:
            return f"[{code}] {message}"
        return message or code or str(error_data)

    def request(
        self,
        method: str,
        endpoint: str,
        params: Optional[Dict[str, Any]] = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> Dict[str, Any]:
        """
        Make an API request.

        Args:
            method: HTTP method
            endpoint: Path relative to the host
            params: Query parameters
            headers: Request headers

        Returns:
            Decoded JSON body
        """
        url = self.build_url(endpoint)

        if params:
            params = {k: v for k, v in params.items() if v is not None}

        try:
            response = self.session.request(
                method=method.upper(),
                url=url,
                params=params or None,
                headers=headers,
                timeout=self.config.timeout,
                verify=self.config.verify_ssl,
            )
        except requests.exceptions.ConnectionError as e:
            raise APIError(f"Connection failed: {e}")
        except requests.exceptions.Timeout as e:
            raise APIError(f"Request timed out: {e}")
        except requests.exceptions.RequestException as e:
            raise APIError(f"Request failed: {e}")

        return self._handle_response(response)

    def close(self) -> None:
        """Close the HTTP session."""
        if self._session:
            self._session.close()
            self._session = None

    def __enter__(self) -> "HTTPClient":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()
