"""
DocuSign Wrapper - read-only client for the DocuSign REST API.

Flattens envelopes, recipients, tabs, folders, users and groups into
simple identifier-keyed dictionaries.
"""

__version__ = "1.0.0"
__prog_name__ = "docusign"
__author__ = "DocuSign Wrapper Contributors"

from .api import DocuSignClient, get_client
from .config import DocuSignConfig
from .exceptions import DocuSignError, AccountNotAccessibleError

__all__ = [
    "__version__",
    "__prog_name__",
    "DocuSignClient",
    "get_client",
    "DocuSignConfig",
    "DocuSignError",
    "AccountNotAccessibleError",
]
