# app/core/user_store.py
"""
User store abstraction.

The credential, device and notification services only talk to this
interface. TortoiseUserStore is the database-backed implementation used by
the application; tests may plug in anything that honours the same contract.
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

from tortoise.exceptions import BaseORMException, IntegrityError

from app.models.user import User


@dataclass
class UserRecord:
    """Plain view of a stored user, detached from the ORM."""
    user_id: str
    password_hash: str
    nickname: str
    device_address: Optional[str] = None


class UserStoreError(Exception):
    """The backing store failed (connection lost, bad query, ...)."""


class UserAlreadyExistsError(UserStoreError):
    """create() found a record with the same user_id."""

    def __init__(self, user_id: str):
        super().__init__(f"user {user_id!r} already exists")
        self.user_id = user_id


class UserStore(ABC):
    """
    Keyed record store for users.

    Guarantees expected from implementations:
    - get/update are atomic per key
    - create is an atomic create-if-absent: it raises UserAlreadyExistsError
      instead of overwriting an existing record
    """

    @abstractmethod
    async def get(self, user_id: str) -> Optional[UserRecord]:
        """Return the record for user_id, or None."""

    @abstractmethod
    async def create(self, record: UserRecord) -> None:
        """Insert a new record; raise UserAlreadyExistsError if one exists."""

    @abstractmethod
    async def update(self, user_id: str, **fields) -> bool:
        """Overwrite the given fields; return False when no record matched."""


class TortoiseUserStore(UserStore):
    """UserStore on top of the Tortoise ORM `users` table."""

    _UPDATABLE = frozenset({"password_hash", "device_address"})

    async def get(self, user_id: str) -> Optional[UserRecord]:
        try:
            u = await User.get_or_none(user_id=user_id)
        except BaseORMException as e:
            raise UserStoreError(f"get failed for {user_id!r}") from e
        if u is None:
            return None
        return UserRecord(
            user_id=u.user_id,
            password_hash=u.password_hash,
            nickname=u.nickname,
            device_address=u.device_address,
        )

    async def create(self, record: UserRecord) -> None:
        # Primary-key insert: the database rejects a second row for the same id
        try:
            await User.create(
                user_id=record.user_id,
                password_hash=record.password_hash,
                nickname=record.nickname,
                device_address=record.device_address,
            )
        except IntegrityError as e:
            raise UserAlreadyExistsError(record.user_id) from e
        except BaseORMException as e:
            raise UserStoreError(f"create failed for {record.user_id!r}") from e

    async def update(self, user_id: str, **fields) -> bool:
        unknown = set(fields) - self._UPDATABLE
        if unknown:
            raise ValueError(f"fields not updatable: {sorted(unknown)}")
        try:
            updated = await User.filter(user_id=user_id).update(**fields)
        except BaseORMException as e:
            raise UserStoreError(f"update failed for {user_id!r}") from e
        return updated > 0
