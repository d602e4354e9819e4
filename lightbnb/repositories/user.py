"""
User repository for account lookups and registration.
"""

from typing import Any, Dict, List, Mapping, Optional, Union
import logging

from lightbnb.repositories.base import BaseRepository, QueryResult
from lightbnb.schemas.user import UserCreate

logger = logging.getLogger(__name__)

SELECT_USER_BY_EMAIL = "SELECT * FROM users WHERE email = $1"
SELECT_USER_BY_ID = "SELECT * FROM users WHERE id = $1"
INSERT_USER = "INSERT INTO users (name, email, password) VALUES ($1, $2, $3) RETURNING *"


class UserRepository(BaseRepository):
    """Repository for user rows."""

    async def get_by_email_result(self, email: str) -> QueryResult:
        return await self.run(SELECT_USER_BY_EMAIL, [email], f"get user by email {email}")

    async def get_by_email(self, email: str) -> Optional[Dict[str, Any]]:
        """
        Get user by email address.

        Args:
            email: Exact email to match

        Returns:
            User row if found, None if missing or the query failed
        """
        result = await self.get_by_email_result(email)
        user = result.first()
        if user is None and not result.failed:
            logger.debug(f"User with email {email} not found")
        return user

    async def get_by_id_result(self, user_id: Any) -> QueryResult:
        return await self.run(SELECT_USER_BY_ID, [user_id], f"get user by id {user_id}")

    async def get_by_id(self, user_id: Any) -> Optional[Dict[str, Any]]:
        """Get user by id, None if missing or the query failed."""
        return (await self.get_by_id_result(user_id)).first()

    async def create_user_result(self, user: Union[UserCreate, Mapping[str, Any]]) -> QueryResult:
        """
        Insert a new user.

        Args:
            user: UserCreate instance or mapping with name, email and password

        Returns:
            QueryResult holding the inserted row with its generated id

        Raises:
            pydantic.ValidationError: If the user data is invalid
        """
        if not isinstance(user, UserCreate):
            user = UserCreate.model_validate(dict(user))

        result = await self.run(
            INSERT_USER,
            [user.name, user.email, user.password],
            f"create user {user.email}"
        )
        if result.found:
            logger.info(f"Created user: {user.email} (ID: {result.rows[0].get('id')})")
        return result

    async def create_user(self, user: Union[UserCreate, Mapping[str, Any]]) -> Optional[List[Dict[str, Any]]]:
        """Insert a new user and return the inserted rows, None if the insert failed."""
        result = await self.create_user_result(user)
        if result.failed:
            return None
        return result.rows
