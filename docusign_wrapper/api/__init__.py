"""
DocuSign API Client Package.

Structure:
    - client.py: Main DocuSignClient facade
    - _session.py: Account-scoped request helper and login handshake
    - _http.py: Base HTTP transport with session and error handling
    - envelopes.py: Envelopes, recipients and tabs
    - folders.py: Folder tree and folder contents
    - users.py: Users and group membership

Usage:
    from docusign_wrapper.api import DocuSignClient, get_client
    
    client = get_client()
    
    # Domain-specific
    folders = client.folders.list()
    
    # Flat methods
    folders = client.get_folders()
"""

from .client import DocuSignClient, get_client
from ._http import HTTPClient
from ._session import AccountSession
from .envelopes import EnvelopesAPI
from .folders import FoldersAPI
from .users import UsersAPI

__all__ = [
    # Main client
    "DocuSignClient",
    "get_client",
    # HTTP layer
    "HTTPClient",
    "AccountSession",
    # Domain APIs
    "EnvelopesAPI",
    "FoldersAPI",
    "UsersAPI",
]
