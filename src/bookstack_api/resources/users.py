"""Users resource for BookStack API."""

from __future__ import annotations

import json

from bookstack_api.common.errors import ValidationError
from bookstack_api.models import User
from bookstack_api.resources.base import BaseResource, drop_none


class UsersResource(BaseResource[User, User]):
    """Manage BookStack users.

    Requires permission to manage users.
    """

    ENDPOINT = "users"
    LIST_SHAPE = User
    ITEM_SHAPE = User

    PASSWORD_MIN_LENGTH = 8

    def create(
        self,
        name: str,
        email: str,
        roles: list[int] | None = None,
        password: str | None = None,
        language: str | None = None,
        external_auth_id: str | None = None,
        send_invite: bool = False,
    ) -> User:
        """Create a new user.

        Args:
            name: User's display name (max 100 characters)
            email: User's email address
            roles: List of role IDs to assign
            password: User's password (min 8 characters)
            language: Language code (e.g., 'en', 'fr')
            external_auth_id: External authentication ID
            send_invite: Whether to send invite email

        Returns:
            Created user

        Raises:
            ValidationError: If the password is too short
        """
        if password is not None and len(password) < self.PASSWORD_MIN_LENGTH:
            raise ValidationError(f"Password must be at least {self.PASSWORD_MIN_LENGTH} characters")

        data = drop_none(
            {
                "name": name,
                "email": email,
                "roles": roles or None,
                "password": password,
                "language": language,
                "external_auth_id": external_auth_id,
            }
        )
        if send_invite:
            data["send_invite"] = True

        return self._write("POST", self.ENDPOINT, data)

    def update(
        self,
        user_id: int,
        name: str | None = None,
        email: str | None = None,
        roles: list[int] | None = None,
        password: str | None = None,
        language: str | None = None,
        external_auth_id: str | None = None,
    ) -> User:
        """Update an existing user. Only the given fields are sent."""
        data = drop_none(
            {
                "name": name,
                "email": email,
                "roles": roles,
                "password": password,
                "language": language,
                "external_auth_id": external_auth_id,
            }
        )
        return self._write("PUT", self._get_endpoint(user_id), data)

    def delete(self, user_id: int, migrate_ownership_id: int | None = None) -> None:
        """Delete a user.

        Args:
            user_id: ID of user to delete
            migrate_ownership_id: ID of user to transfer content ownership to
        """
        data = json.dumps({"migrate_ownership_id": migrate_ownership_id}) if migrate_ownership_id is not None else None
        self.client.request("DELETE", self._get_endpoint(user_id), data=data)
