"""
Users API - account users and their groups.
"""

from typing import Any, Dict

from ._session import AccountSession


class UsersAPI:
    """
    API for user operations.

    Handles:
    - User listing
    - Group membership of a user
    """

    def __init__(self, account: AccountSession):
        """
        Initialize Users API.

        Args:
            account: Authenticated account session
        """
        self._account = account

    def list(self, active_only: bool = False) -> Dict[str, str]:
        """
        List account users.

        Args:
            active_only: Only return users with status Active

        Returns:
            {userId: userName}
        """
        params: Dict[str, Any] = {}
        if active_only:
            params["status"] = "Active"

        result = self._account.call("GET", "users", params=params)

        users: Dict[str, str] = {}
        for user in result["users"]:
            users[user["userId"]] = user["userName"]
        return users

    def groups(self, user_id: str) -> Dict[str, str]:
        """
        List the groups a user belongs to.

        Returns:
            {groupId: groupName}
        """
        result = self._account.call("GET", f"users/{user_id}")

        groups: Dict[str, str] = {}
        for group in result["groupList"]:
            groups[group["groupId"]] = group["groupName"]
        return groups
