"""
app/db/store.py

Purpose: In-memory user store

- Keyed collection of user records (insertion ordered)
- Simulated connection lifecycle and I/O latency
- Email uniqueness enforced on create and update
- Seeded with two sample users on construction
"""

import asyncio
import uuid
from typing import Any, Dict, List, Optional

from app.core.config import settings
from app.core.exceptions import DuplicateEmailError, NotConnectedError, ResourceNotFoundError
from app.core.logging import get_logger
from app.models.user import User
from utils.time_utils import utc_date, utc_now

logger = get_logger(__name__)

# Fields a patch may change; id and timestamps are owned by the store
MUTABLE_FIELDS = ("name", "email", "age")

SAMPLE_USERS = [
    {"name": "John Doe", "email": "john@example.com", "age": 30, "created": utc_date(2023, 1, 1)},
    {"name": "Jane Smith", "email": "jane@example.com", "age": 25, "created": utc_date(2023, 1, 2)},
]


class UserStore:
    """
    Mock database holding users in process memory.

    Every data operation awaits its simulated latency first and then mutates
    the collection without yielding, so concurrent requests only interleave
    between operations, never inside one.
    """

    def __init__(
        self,
        latency: Optional[float] = None,
        connect_latency: Optional[float] = None,
        seed: Optional[bool] = None,
    ):
        self.latency = settings.STORE_LATENCY_SECONDS if latency is None else latency
        self.connect_latency = (
            settings.STORE_CONNECT_LATENCY_SECONDS if connect_latency is None else connect_latency
        )
        self._users: Dict[str, User] = {}
        self._connected = False

        if settings.SEED_SAMPLE_USERS if seed is None else seed:
            self.seed_data()

    @property
    def is_connected(self) -> bool:
        return self._connected

    async def connect(self) -> bool:
        """
        Opens the simulated connection.
        Called during application startup.
        """
        if self._connected:
            logger.warning("User store already connected")
            return True

        logger.info("Connecting to user store...")
        await asyncio.sleep(self.connect_latency)
        self._connected = True
        logger.info(f"✅ User store connected ({len(self._users)} users)")
        return True

    async def disconnect(self) -> bool:
        """
        Closes the simulated connection.
        Called during application shutdown.
        """
        await asyncio.sleep(self.connect_latency / 2)
        self._connected = False
        logger.info("User store disconnected")
        return True

    def seed_data(self) -> None:
        """
        Inserts the sample users with fresh ids.
        """
        for sample in SAMPLE_USERS:
            user = User(
                id=str(uuid.uuid4()),
                name=sample["name"],
                email=sample["email"],
                age=sample["age"],
                created_at=sample["created"],
                updated_at=sample["created"],
            )
            self._users[user.id] = user

    async def _io(self) -> None:
        if not self._connected:
            raise NotConnectedError()
        await asyncio.sleep(self.latency)

    def _email_taken(self, email: Any) -> bool:
        return any(user.email == email for user in self._users.values())

    async def list_all(self) -> List[User]:
        """
        Returns every user in insertion order.
        """
        await self._io()
        return [user.model_copy() for user in self._users.values()]

    async def find_by_id(self, user_id: str) -> Optional[User]:
        await self._io()
        user = self._users.get(user_id)
        return user.model_copy() if user else None

    async def find_by_email(self, email: str) -> Optional[User]:
        """
        Exact-match email lookup.
        """
        await self._io()
        for user in self._users.values():
            if user.email == email:
                return user.model_copy()
        return None

    async def create(self, data: Dict[str, Any]) -> User:
        """
        Stores a new user with a generated id and timestamps.

        Args:
            data: Validated name, email and age

        Returns:
            The created user

        Raises:
            DuplicateEmailError: If another user has the same email
        """
        await self._io()

        if self._email_taken(data.get("email")):
            raise DuplicateEmailError()

        now = utc_now()
        user = User(
            id=str(uuid.uuid4()),
            name=data["name"],
            email=data["email"],
            age=data["age"],
            created_at=now,
            updated_at=now,
        )
        self._users[user.id] = user
        logger.debug(f"User record created: {user.id}")
        return user.model_copy()

    async def update(self, user_id: str, patch: Dict[str, Any]) -> User:
        """
        Merges the patch over an existing user and refreshes updated_at.
        Fields absent from the patch are left untouched.

        Raises:
            ResourceNotFoundError: If the user does not exist
            DuplicateEmailError: If a changed email belongs to another user
        """
        await self._io()

        user = self._users.get(user_id)
        if user is None:
            raise ResourceNotFoundError()

        new_email = patch.get("email")
        if new_email and new_email != user.email and self._email_taken(new_email):
            raise DuplicateEmailError()

        changes = {field: patch[field] for field in MUTABLE_FIELDS if field in patch}
        changes["updated_at"] = utc_now()

        updated = user.model_copy(update=changes)
        self._users[user_id] = updated
        logger.debug(f"User record updated: {user_id}")
        return updated.model_copy()

    async def delete(self, user_id: str) -> bool:
        """
        Removes a user permanently.

        Raises:
            ResourceNotFoundError: If the user does not exist
        """
        await self._io()

        if user_id not in self._users:
            raise ResourceNotFoundError()

        del self._users[user_id]
        logger.debug(f"User record deleted: {user_id}")
        return True

    async def clear(self) -> bool:
        """
        Removes every user.
        """
        await self._io()
        self._users.clear()
        return True
