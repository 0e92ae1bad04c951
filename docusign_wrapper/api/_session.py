"""
Account-scoped request layer.

Owns the Session and the transport bound to the session's host. Every
API call goes through AccountSession.call().
"""

import logging
from typing import Optional, Dict, Any, Callable

from ..auth import Session, LOGIN_PASSES, find_login_account, regional_host
from ..config import DocuSignConfig
from ..exceptions import AccountNotAccessibleError
from ._http import HTTPClient

logger = logging.getLogger(__name__)

TransportFactory = Callable[[str, DocuSignConfig], HTTPClient]


class AccountSession:
    """
    Request helper bound to one authenticated DocuSign account.

    Handles:
    - Two-pass login and regional host redirect
    - Account path prefixing
    - Merging auth headers into each request
    """

    def __init__(
        self,
        session: Session,
        config: Optional[DocuSignConfig] = None,
        transport_factory: Optional[TransportFactory] = None,
    ):
        """
        Initialize the account session.

        Args:
            session: Session holding the starting host and auth headers
            config: Transport settings
            transport_factory: Builds a transport for a host. Defaults to HTTPClient.
        """
        self.session = session
        self.config = config or DocuSignConfig()
        self._transport_factory = transport_factory or HTTPClient
        self._http = self._transport_factory(session.host, self.config)

    @property
    def host(self) -> str:
        return self.session.host

    @property
    def account_id(self) -> str:
        return self.session.account_id

    def call(
        self,
        method: str,
        url: str,
        params: Optional[Dict[str, Any]] = None,
        headers: Optional[Dict[str, str]] = None,
        include_account: bool = True,
    ) -> Dict[str, Any]:
        """
        Send a request and return the decoded JSON body.

        Args:
            method: HTTP verb
            url: Endpoint path, without host or version prefix
            params: Query parameters
            headers: Extra headers, overriding the auth headers on collision
            include_account: Prefix the path with accounts/{accountId}/

        Returns:
            Decoded response, unvalidated
        """
        if include_account:
            url = self.session.account_path() + url.lstrip("/")

        url = "/" + url.lstrip("/")

        merged_headers = dict(self.session.headers)
        if headers:
            merged_headers.update(headers)

        return self._http.request(method, url, params=params, headers=merged_headers)

    def _rebind(self, host: str) -> None:
        """Point the session and a fresh transport at host."""
        self.session.host = host
        self._http.close()
        self._http = self._transport_factory(host, self.config)

    def login(self, account_id: str) -> None:
        """
        Authenticate and settle on the account's regional host.

        The first pass runs against the configured host and the second
        against the host named in the account's baseUrl.

        Raises:
            AccountNotAccessibleError: If account_id is not in loginAccounts
        """
        for attempt in range(1, LOGIN_PASSES + 1):
            logger.debug(f"Login pass {attempt} against {self.session.host}")
            result = self.call("GET", "login_information", include_account=False)

            login_account = find_login_account(result, account_id)
            if login_account is None:
                raise AccountNotAccessibleError(account_id)

            self.session.account_id = account_id
            host = regional_host(login_account["baseUrl"])
            if host != self.session.host:
                logger.info(f"Account {account_id} is served from {host}")
            self._rebind(host)

    def close(self) -> None:
        """Close the transport."""
        self._http.close()
