import os
from typing import Optional

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from tortoise import Tortoise

TEST_DB_URL = "sqlite://:memory:"
os.environ["DATABASE_URL"] = TEST_DB_URL
os.environ.setdefault("PASSWORD_HASH_ROUNDS", "1")  # Keep Argon2 cheap in tests
os.environ.setdefault("PUSH_BACKEND", "log")

from app.api.v1.deps import get_push_gateway, get_user_store
from app.core import db as db_module
from app.core.security import hash_password
from app.core.user_store import TortoiseUserStore, UserAlreadyExistsError, UserRecord, UserStore
from app.main import app
from app.services.push_base import PushGateway, PushGatewayError, PushMessage

db_module.DB_URL = TEST_DB_URL
db_module.TORTOISE_ORM["connections"]["default"] = TEST_DB_URL


class MemoryUserStore(UserStore):
    """Dict-backed UserStore with the same create-if-absent contract."""

    def __init__(self):
        self.records: dict[str, UserRecord] = {}
        self.calls: list[str] = []

    async def get(self, user_id: str) -> Optional[UserRecord]:
        self.calls.append("get")
        record = self.records.get(user_id)
        if record is None:
            return None
        return UserRecord(record.user_id, record.password_hash, record.nickname, record.device_address)

    async def create(self, record: UserRecord) -> None:
        self.calls.append("create")
        if record.user_id in self.records:
            raise UserAlreadyExistsError(record.user_id)
        self.records[record.user_id] = record

    async def update(self, user_id: str, **fields) -> bool:
        self.calls.append("update")
        record = self.records.get(user_id)
        if record is None:
            return False
        for key, value in fields.items():
            setattr(record, key, value)
        return True


class RecordingPushGateway(PushGateway):
    """PushGateway that remembers every send and can be told to fail."""

    def __init__(self):
        self.sent: list[tuple[str, PushMessage]] = []
        self.fail_with: Optional[Exception] = None

    @property
    def name(self) -> str:
        return "recording"

    async def send(self, address: str, message: PushMessage) -> str:
        if self.fail_with is not None:
            raise self.fail_with
        self.sent.append((address, message))
        return f"projects/test/messages/{len(self.sent)}"


async def _init_test_db() -> None:
    """
    Initialize a clean in-memory SQLite database for every test.
    Ensures tables are recreated from scratch.
    """
    if Tortoise._inited:
        await Tortoise.close_connections()
    await db_module.init_db(create_tables=True)


@pytest.fixture
def memory_store() -> MemoryUserStore:
    return MemoryUserStore()


@pytest.fixture
def push_gateway() -> RecordingPushGateway:
    return RecordingPushGateway()


@pytest.fixture
def gateway_error() -> PushGatewayError:
    return PushGatewayError("provider unavailable")


@pytest_asyncio.fixture
async def db():
    """
    Fresh in-memory database for tests that use the ORM directly.
    """
    await _init_test_db()
    yield
    await db_module.close_db()


@pytest_asyncio.fixture
async def client(db, push_gateway):
    """
    Provide an HTTPX AsyncClient bound to the FastAPI app with a fresh DB.
    The Tortoise store and a recording push gateway replace the startup-built collaborators.
    """
    store = TortoiseUserStore()
    app.dependency_overrides[get_user_store] = lambda: store
    app.dependency_overrides[get_push_gateway] = lambda: push_gateway
    # Use ASGITransport without lifespan parameter (not supported in all httpx versions)
    try:
        transport = ASGITransport(app=app, lifespan="off")
    except TypeError:
        # Fallback for httpx versions that don't support lifespan parameter
        transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as async_client:
        yield async_client
    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def create_user():
    """
    Factory fixture to create users directly via ORM.
    """
    from app.models.user import User

    async def _create_user(user_id: str, password: str = "UserPass!23", nickname: Optional[str] = None,
                           device_address: Optional[str] = None) -> tuple[User, str]:
        user = await User.create(
            user_id=user_id,
            password_hash=hash_password(password),
            nickname=nickname or user_id.title(),
            device_address=device_address,
        )
        return user, password

    return _create_user
