"""
app/services/user_service.py

Purpose: User business logic

- Validates payloads before they reach the store
- Translates store outcomes into ServiceResult envelopes
- Never lets store exceptions escape
- User statistics
"""

from typing import Any, Dict, Optional

from app.core.logging import get_logger, LogContext
from app.db.store import UserStore
from app.schemas.response import ServiceResult
from app.schemas.user import UserStats
from utils.validation_utils import validate_for_create, validate_for_update

logger = get_logger(__name__)

USER_ID_REQUIRED = "User ID is required"
USER_NOT_FOUND = "User not found"
DUPLICATE_EMAIL = "User with this email already exists"


def _invalid_id() -> ServiceResult:
    return ServiceResult.fail(USER_ID_REQUIRED, "Invalid input")


def _not_found() -> ServiceResult:
    return ServiceResult.fail(USER_NOT_FOUND, "User with the specified ID does not exist")


class UserService:
    """
    Orchestrates validation and store calls for the users resource.

    Every method returns a ServiceResult; store failures are caught and
    reported through ``error`` with a fixed per-operation ``message``.
    """

    def __init__(self, store: UserStore):
        self.store = store

    async def get_all_users(self) -> ServiceResult:
        try:
            users = await self.store.list_all()
            return ServiceResult.ok("Users retrieved successfully", users)
        except Exception as e:
            logger.error(f"Failed to list users: {e}")
            return ServiceResult.fail(str(e), "Failed to retrieve users")

    async def get_user_by_id(self, user_id: Optional[str]) -> ServiceResult:
        """
        Retrieves a single user.

        Args:
            user_id: User ID

        Returns:
            Envelope with the user, or a not-found / invalid-input failure
        """
        if not user_id:
            return _invalid_id()

        try:
            user = await self.store.find_by_id(user_id)
            if not user:
                return _not_found()
            return ServiceResult.ok("User retrieved successfully", user)
        except Exception as e:
            logger.error(f"Failed to retrieve user: {e}", extra={"user_id": user_id})
            return ServiceResult.fail(str(e), "Failed to retrieve user")

    async def create_user(self, data: Dict[str, Any]) -> ServiceResult:
        """
        Creates a user after validation and a duplicate-email check.

        Validation failures never reach the store; a known email is reported
        without attempting the insert.
        """
        errors = validate_for_create(data)
        if errors:
            return ServiceResult.fail(", ".join(errors), "Validation failed")

        with LogContext(operation="create_user"):
            try:
                existing = await self.store.find_by_email(data["email"])
                if existing:
                    logger.warning("Duplicate email on create")
                    return ServiceResult.fail(DUPLICATE_EMAIL, "Duplicate email address")

                user = await self.store.create(data)
                logger.info("User created", extra={"user_id": user.id})
                return ServiceResult.ok("User created successfully", user)
            except Exception as e:
                logger.error(f"Failed to create user: {e}")
                return ServiceResult.fail(str(e), "Failed to create user")

    async def update_user(self, user_id: Optional[str], patch: Dict[str, Any]) -> ServiceResult:
        """
        Applies a partial update.

        The patch is validated before existence is checked, so an invalid patch
        for an unknown id reports the validation failure.
        """
        if not user_id:
            return _invalid_id()

        errors = validate_for_update(patch)
        if errors:
            return ServiceResult.fail(", ".join(errors), "Validation failed")

        with LogContext(user_id=user_id, operation="update_user"):
            try:
                existing = await self.store.find_by_id(user_id)
                if not existing:
                    return _not_found()

                user = await self.store.update(user_id, patch)
                logger.info("User updated", extra={"fields": sorted(patch)})
                return ServiceResult.ok("User updated successfully", user)
            except Exception as e:
                logger.error(f"Failed to update user: {e}")
                return ServiceResult.fail(str(e), "Failed to update user")

    async def delete_user(self, user_id: Optional[str]) -> ServiceResult:
        if not user_id:
            return _invalid_id()

        with LogContext(user_id=user_id, operation="delete_user"):
            try:
                existing = await self.store.find_by_id(user_id)
                if not existing:
                    return _not_found()

                await self.store.delete(user_id)
                logger.info("User deleted")
                return ServiceResult.ok("User deleted successfully")
            except Exception as e:
                logger.error(f"Failed to delete user: {e}")
                return ServiceResult.fail(str(e), "Failed to delete user")

    async def get_user_stats(self) -> ServiceResult:
        """
        Computes count, mean age and age range over all users.
        Every value is 0 when there are no users.
        """
        try:
            users = await self.store.list_all()
            ages = [user.age for user in users]
            stats = UserStats(
                total_users=len(ages),
                average_age=sum(ages) / len(ages) if ages else 0,
                youngest_user=min(ages) if ages else 0,
                oldest_user=max(ages) if ages else 0,
            )
            return ServiceResult.ok("User statistics retrieved successfully", stats)
        except Exception as e:
            logger.error(f"Failed to compute user statistics: {e}")
            return ServiceResult.fail(str(e), "Failed to retrieve user statistics")
