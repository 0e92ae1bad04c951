"""
Envelopes API - envelopes, their recipients and recipient tabs.
"""

from datetime import date
from typing import Any, Dict, Union

from ._session import AccountSession

DEFAULT_FROM_DATE = "1970-01-01"

SIGN_HERE_TABS = "signHereTabs"


def tab_value(category: str, tab: Dict[str, Any]) -> Any:
    """
    Value reported for a single tab.

    Sign-here tabs report their status, or False while unsigned. Every
    other category reports its value, or "" when empty.
    """
    if category == SIGN_HERE_TABS:
        return tab.get("status") or False
    return tab.get("value") or ""


class EnvelopesAPI:
    """
    API for envelope operations.

    Handles:
    - Envelope listing
    - Signers of an envelope
    - Tab (field) values for a recipient
    """

    def __init__(self, account: AccountSession):
        """
        Initialize Envelopes API.

        Args:
            account: Authenticated account session
        """
        self._account = account

    def list(self, from_date: Union[str, date] = DEFAULT_FROM_DATE) -> Dict[str, Dict[str, Any]]:
        """
        List envelope IDs changed since a date.

        Only the first page of results is returned.

        Args:
            from_date: YYYY-MM-DD string or date. Defaults to 1970-01-01 (all envelopes).

        Returns:
            {envelopeId: {}}
        """
        if isinstance(from_date, date):
            from_date = from_date.strftime("%Y-%m-%d")

        result = self._account.call("GET", "envelopes", params={"from_date": from_date})

        envelopes: Dict[str, Dict[str, Any]] = {}
        for envelope in result["envelopes"]:
            envelopes[envelope["envelopeId"]] = {}
        return envelopes

    def recipients(self, envelope_id: str) -> Dict[str, Dict[str, Any]]:
        """
        List the signers of an envelope.

        Other recipient types (carbon copies, editors, ...) are ignored.

        Returns:
            {recipientId: {}}
        """
        result = self._account.call("GET", f"envelopes/{envelope_id}/recipients")

        recipients: Dict[str, Dict[str, Any]] = {}
        for signer in result["signers"]:
            recipients[signer["recipientId"]] = {}
        return recipients

    def tabs(self, envelope_id: str, recipient_id: str) -> Dict[str, Dict[str, Dict[str, Any]]]:
        """
        Get the tabs of a recipient, grouped by category.

        Tabs are DocuSign's form fields. The result looks like::

            {
                "textTabs": {"tabId": {"tabLabel": "value"}},
                "signHereTabs": {"tabId": {"SignHere": "signed"},
                                 "tabId2": {"SignHere": False}},
            }

        Args:
            envelope_id: Envelope ID
            recipient_id: Recipient ID within the envelope

        Returns:
            {category: {tabId: {tabLabel: value}}}
        """
        url = f"envelopes/{envelope_id}/recipients/{recipient_id}/tabs"
        result = self._account.call("GET", url)

        tabs: Dict[str, Dict[str, Dict[str, Any]]] = {}
        for category, records in result.items():
            entries = tabs.setdefault(category, {})
            for tab in records:
                entries[tab["tabId"]] = {tab["tabLabel"]: tab_value(category, tab)}
        return tabs
