"""
Folders API - folder tree and folder contents.
"""

from typing import Any, Dict, Iterator, List

from ._session import AccountSession


def walk_folders(folders: List[Dict[str, Any]]) -> Iterator[Dict[str, Any]]:
    """
    Yield every folder in a tree, depth first, parents before children.

    Children keep the order DocuSign returned them in. A folder without
    a "folders" key has no children.
    """
    stack = list(reversed(folders))
    while stack:
        folder = stack.pop()
        yield folder
        stack.extend(reversed(folder.get("folders") or []))


def flatten_folders(folders: List[Dict[str, Any]]) -> Dict[str, str]:
    """Flatten a folder tree into {folderId: name}."""
    return {folder["folderId"]: folder["name"] for folder in walk_folders(folders)}


class FoldersAPI:
    """
    API for folder operations.

    Handles:
    - Flattened folder listing
    - Envelopes inside a folder
    """

    def __init__(self, account: AccountSession):
        """
        Initialize Folders API.

        Args:
            account: Authenticated account session
        """
        self._account = account

    def list(self) -> Dict[str, str]:
        """
        List all accessible folders, hierarchy discarded.

        Returns:
            {folderId: name}
        """
        result = self._account.call("GET", "folders")
        return flatten_folders(result["folders"])

    def contents(self, folder_id: str, include_status: bool = False) -> Dict[str, str]:
        """
        List the envelopes in a folder.

        Only the first page is read; DocuSign returns at most 100 items.

        Args:
            folder_id: Folder ID
            include_status: Append " (status)" to each subject

        Returns:
            {envelopeId: subject}
        """
        result = self._account.call("GET", f"folders/{folder_id}")

        envelopes: Dict[str, str] = {}
        for item in result["folderItems"]:
            subject = item["subject"] or ""
            if include_status:
                subject += f" ({item['status'] or ''})"
            envelopes[item["envelopeId"]] = subject
        return envelopes
