from dataclasses import dataclass, field
from typing import List

import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

from tripmate.adapter.services.secret_service import SecretService
from tripmate.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from tripmate.app.services.email_sender import IEmailSender
from tripmate.depends import get_email_sender, get_secret_service, get_unit_of_work
from tripmate.libs.result import Result, Return


@dataclass
class SentEmail:
    recipient: str
    token: str
    password: str


@dataclass
class RecordingEmailSender(IEmailSender):
    """Keeps every verification email instead of delivering it"""

    sent: List[SentEmail] = field(default_factory=list)

    async def send_verification_email(
        self, recipient_email: str, raw_token: str, raw_password: str
    ) -> Result[None]:
        self.sent.append(SentEmail(recipient_email, raw_token, raw_password))
        return Return.ok(None)

    @property
    def last(self) -> SentEmail:
        return self.sent[-1]


@pytest_asyncio.fixture
async def engine(tmp_path):
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'test.db'}")
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.drop_all)
    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(engine):
    Session = sessionmaker(
        engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
    )
    async with Session() as session:
        yield session


@pytest_asyncio.fixture
async def email_outbox():
    return RecordingEmailSender()


@pytest_asyncio.fixture
async def client(db_session, email_outbox):
    from tripmate.api.app import create_app
    from config import ApplicationConfig

    app = create_app(ApplicationConfig)

    async def override_get_unit_of_work():
        yield SqlAlchemyUnitOfWork(db_session)

    app.dependency_overrides[get_unit_of_work] = override_get_unit_of_work
    app.dependency_overrides[get_email_sender] = lambda: email_outbox
    app.dependency_overrides[get_secret_service] = lambda: SecretService(bcrypt_rounds=4)

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest_asyncio.fixture
async def register_user(client, email_outbox):
    """Signup + verify an account; returns the emailed initial password"""

    async def _register(name: str, email: str) -> str:
        response = await client.post("/signup", json={"name": name, "email": email})
        assert response.status_code == 201
        sent = email_outbox.last

        response = await client.post(f"/users/verify/{sent.token}")
        assert response.status_code == 200
        return sent.password

    return _register


@pytest_asyncio.fixture
async def login(client):
    """Log in and return bearer headers"""

    async def _login(email: str, password: str) -> dict:
        response = await client.post("/login", json={"email": email, "password": password})
        assert response.status_code == 200
        return {"Authorization": f"Bearer {response.json()['access_token']}"}

    return _login


@pytest_asyncio.fixture
async def alice_headers(register_user, login):
    password = await register_user("Alice", "alice@example.com")
    return await login("alice@example.com", password)


@pytest_asyncio.fixture
async def bob_headers(register_user, login):
    password = await register_user("Bob", "bob@example.com")
    return await login("bob@example.com", password)
