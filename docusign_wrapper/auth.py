"""
Authentication helpers for DocuSign Wrapper.

DocuSign's legacy header authentication sends the credentials as a JSON
document in the X-DocuSign-Authentication header. Login is a two-step
affair: the login_information call on the public host names the regional
host (e.g. na3.docusign.net) that actually serves the account.
"""

import json
import logging
from dataclasses import dataclass, field
from typing import Optional, Dict, Any
from urllib.parse import urlparse

logger = logging.getLogger(__name__)

AUTH_HEADER = "X-DocuSign-Authentication"
API_ROOT = "/restapi/v2/"

# login_information is called on the given host, then once more on the
# regional host it points to.
LOGIN_PASSES = 2


@dataclass
class Session:
    """Authenticated session state owned by one client."""

    host: str
    headers: Dict[str, str] = field(default_factory=dict)
    account_id: str = ""

    def account_path(self) -> str:
        """Path segment that scopes a request to the session's account."""
        return f"accounts/{self.account_id}/"


def build_auth_headers(username: str, password: str, integrator_key: str) -> Dict[str, str]:
    """
    Build the headers DocuSign expects on every request.

    Args:
        username: Account email address or username
        password: Account password
        integrator_key: Integration key of the calling application

    Returns:
        Content-Type and X-DocuSign-Authentication headers
    """
    credentials = json.dumps(
        {
            "Username": username,
            "Password": password,
            "IntegratorKey": integrator_key,
        },
        separators=(",", ":"),
    )
    return {
        "Content-Type": "application/json",
        AUTH_HEADER: credentials,
    }


def regional_host(base_url: str) -> str:
    """
    Versioned API root for the host named in an account's baseUrl.

    >>> regional_host("https://na3.docusign.net/restapi/v2/accounts/123")
    'https://na3.docusign.net/restapi/v2/'
    """
    return "https://" + urlparse(base_url).hostname + API_ROOT


def find_login_account(
    login_information: Dict[str, Any],
    account_id: str
) -> Optional[Dict[str, Any]]:
    """Find the entry for account_id in a login_information response."""
    for login_account in login_information["loginAccounts"]:
        if str(login_account["accountId"]) == str(account_id):
            return login_account
    return None
