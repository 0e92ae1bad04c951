"""
DocuSign API Client - Main facade for all API operations.

Logs in on construction, then exposes the read operations either through
domain-specific sub-clients or as flat methods.
"""

from datetime import date
from typing import Optional, Dict, Any, Union

from ..auth import Session, build_auth_headers
from ..config import DocuSignConfig, get_config
from ..exceptions import ConfigurationError
from ._session import AccountSession, TransportFactory
from .envelopes import EnvelopesAPI, DEFAULT_FROM_DATE
from .folders import FoldersAPI
from .users import UsersAPI


class DocuSignClient:
    """
    Client for the DocuSign REST API.
    
    This is a facade that provides both:
    - Domain-specific sub-clients (client.envelopes, client.folders, client.users)
    - Flat methods (client.get_envelopes(), client.get_folders(), etc.)
    
    Usage:
        client = DocuSignClient(
            "https://demo.docusign.net/restapi/v2",
            "me@example.com", "secret", "integrator-key", "1234567",
        )
        folders = client.folders.list()
        envelopes = client.get_envelopes("2024-01-01")
    """
    
    def __init__(
        self,
        host: str,
        username: str,
        password: str,
        integrator_key: str,
        account_id: str,
        config: Optional[DocuSignConfig] = None,
        transport_factory: Optional[TransportFactory] = None,
    ):
        """
        Initialize the client and log in.
        
        Args:
            host: DocuSign API root, e.g. https://demo.docusign.net/restapi/v2
                for the demo environment or https://www.docusign.net/restapi/v2
                for production.
            username: Account email address or username
            password: Account password
            integrator_key: Integration key of the calling application
            account_id: Account to work with
            config: Optional transport settings (timeout, SSL, retries)
            transport_factory: Optional transport constructor, mainly for tests
        
        Raises:
            AccountNotAccessibleError: If the credentials cannot reach account_id
        """
        session = Session(
            host=host,
            headers=build_auth_headers(username, password, integrator_key),
        )
        self._account = AccountSession(session, config, transport_factory)
        
        # Domain-specific API modules
        self.envelopes = EnvelopesAPI(self._account)
        self.folders = FoldersAPI(self._account)
        self.users = UsersAPI(self._account)
        
        try:
            self._account.login(account_id)
        except Exception:
            self._account.close()
            raise
    
    @property
    def session(self) -> Session:
        """Get the authenticated session."""
        return self._account.session
    
    @property
    def host(self) -> str:
        """Get the regional API root the account is served from."""
        return self._account.host
    
    @property
    def account_id(self) -> str:
        """Get the account ID all requests are scoped to."""
        return self._account.account_id
    
    # ========== Envelope Methods ==========
    
    def get_envelopes(self, from_date: Union[str, date] = DEFAULT_FROM_DATE) -> Dict[str, Dict[str, Any]]:
        """List envelope IDs changed since from_date (default: all time)."""
        return self.envelopes.list(from_date)
    
    def get_recipients_for_envelope(self, envelope_id: str) -> Dict[str, Dict[str, Any]]:
        """List the signers of an envelope."""
        return self.envelopes.recipients(envelope_id)
    
    def get_tabs_for_recipient_for_envelope(
        self,
        envelope_id: str,
        recipient_id: str
    ) -> Dict[str, Dict[str, Dict[str, Any]]]:
        """Get a recipient's tabs grouped by category."""
        return self.envelopes.tabs(envelope_id, recipient_id)
    
    # ========== Folder Methods ==========
    
    def get_folders(self) -> Dict[str, str]:
        """List all folders as a flat {folderId: name} mapping."""
        return self.folders.list()
    
    def get_folder_contents(self, folder_id: str, include_status: bool = False) -> Dict[str, str]:
        """List envelopes in a folder as {envelopeId: subject}."""
        return self.folders.contents(folder_id, include_status)
    
    # ========== User Methods ==========
    
    def get_users(self, active_only: bool = False) -> Dict[str, str]:
        """List users as {userId: userName}."""
        return self.users.list(active_only)
    
    def get_user_groups(self, user_id: str) -> Dict[str, str]:
        """List a user's groups as {groupId: groupName}."""
        return self.users.groups(user_id)
    
    # ========== Context Manager ==========
    
    def close(self) -> None:
        """Close the HTTP session."""
        self._account.close()
    
    def __enter__(self) -> "DocuSignClient":
        return self
    
    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()


def get_client(config: Optional[DocuSignConfig] = None) -> DocuSignClient:
    """
    Get a logged-in client from configuration.
    
    Args:
        config: Optional configuration. Uses global config if not provided.
    
    Returns:
        DocuSignClient instance
    
    Raises:
        ConfigurationError: If login settings are missing
    """
    config = config or get_config()
    
    if not config.is_configured():
        raise ConfigurationError(
            "DocuSign Wrapper is not configured.",
            details="Missing: " + ", ".join(config.missing_fields())
        )
    
    return DocuSignClient(
        config.host,
        config.username,
        config.password,
        config.integrator_key,
        config.account_id,
        config=config,
    )
