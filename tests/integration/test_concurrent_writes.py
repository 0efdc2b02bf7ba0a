"""
First writes that lose a unique-key race, against a real database

The losing request is replayed deterministically: its first lookup misses the
row the winning request has already committed, so its insert hits the
constraint exactly as it would under true concurrency.
"""
from datetime import date

import pytest
import pytest_asyncio
from sqlalchemy.orm import sessionmaker
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from tripmate.adapter.services.secret_service import SecretService
from tripmate.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from tripmate.adapter.services.user_validator import PydanticUserValidator
from tripmate.app.use_cases.auth import SignupCommand, SignupUseCase, VerifyEmailUseCase
from tripmate.app.use_cases.share_links import CreateShareLinkUseCase
from tripmate.domain.entities import ShareLink, Trip, User


def _miss_first_call(repository, name):
    real = getattr(repository, name)
    calls = []

    async def lookup(*args):
        calls.append(args)
        if len(calls) == 1:
            return None
        return await real(*args)

    setattr(repository, name, lookup)


class LateReaderUnitOfWork(SqlAlchemyUnitOfWork):
    """Unit of work whose first lookup does not see a concurrent commit"""

    async def __aenter__(self):
        await super().__aenter__()
        _miss_first_call(self.share_links, "get_by_trip_id")
        _miss_first_call(self.users, "get_by_email")
        return self


@pytest_asyncio.fixture
async def session_factory(engine):
    return sessionmaker(engine, class_=AsyncSession, expire_on_commit=False, autoflush=False)


@pytest_asyncio.fixture
async def secret_service():
    return SecretService(bcrypt_rounds=4)


@pytest_asyncio.fixture
async def trip(session_factory, secret_service):
    async with session_factory() as session:
        owner = User(
            name="Alice",
            email="alice@example.com",
            password_hash=secret_service.hash_password("pw"),
            is_active=True,
        )
        session.add(owner)
        await session.flush()
        trip = Trip(
            user_id=owner.id,
            title="Lisbon",
            start_date=date(2026, 5, 1),
            end_date=date(2026, 5, 7),
        )
        session.add(trip)
        await session.commit()
        return trip


async def _issue(session_factory, secret_service, trip_id, regenerate=False, uow_class=None):
    uow_class = uow_class or SqlAlchemyUnitOfWork
    async with session_factory() as session:
        use_case = CreateShareLinkUseCase(uow_class(session), secret_service)
        return await use_case.execute(trip_id, regenerate=regenerate)


async def _signup(session_factory, secret_service, email_outbox, uow_class=None):
    uow_class = uow_class or SqlAlchemyUnitOfWork
    async with session_factory() as session:
        use_case = SignupUseCase(
            uow_class(session), secret_service, email_outbox, PydanticUserValidator()
        )
        return await use_case.execute(SignupCommand(name="Carol", email="carol@example.com"))


async def _all(session_factory, statement):
    async with session_factory() as session:
        return (await session.exec(statement)).all()


@pytest.mark.asyncio
async def test_losing_share_issue_conflicts(session_factory, secret_service, trip):
    first = await _issue(session_factory, secret_service, trip.id)
    second = await _issue(
        session_factory, secret_service, trip.id, uow_class=LateReaderUnitOfWork
    )

    assert first.is_ok()
    assert second.is_err()
    assert second.error.code == "SHARE_LINK_CONFLICT"

    links = await _all(session_factory, select(ShareLink).where(ShareLink.trip_id == trip.id))
    assert len(links) == 1
    assert links[0].token_hash == secret_service.hash_for_lookup(first.value.share_token)


@pytest.mark.asyncio
async def test_losing_regenerate_rotates_winner(session_factory, secret_service, trip):
    first = await _issue(session_factory, secret_service, trip.id, regenerate=True)
    second = await _issue(
        session_factory,
        secret_service,
        trip.id,
        regenerate=True,
        uow_class=LateReaderUnitOfWork,
    )

    assert first.is_ok()
    assert second.is_ok()
    links = await _all(session_factory, select(ShareLink))
    assert len(links) == 1
    assert links[0].token_hash == secret_service.hash_for_lookup(second.value.share_token)


@pytest.mark.asyncio
async def test_losing_signup_reactivates_pending_winner(
    session_factory, secret_service, email_outbox
):
    first = await _signup(session_factory, secret_service, email_outbox)
    second = await _signup(
        session_factory, secret_service, email_outbox, uow_class=LateReaderUnitOfWork
    )

    assert first.is_ok()
    assert second.is_ok()
    assert second.value.id == first.value.id

    users = await _all(session_factory, select(User).where(User.email == "carol@example.com"))
    assert len(users) == 1
    # Only the most recent email carries working credentials
    assert users[0].verification_token_hash == secret_service.hash_for_lookup(
        email_outbox.last.token
    )
    assert len(email_outbox.sent) == 2


@pytest.mark.asyncio
async def test_losing_signup_to_active_account_conflicts(
    session_factory, secret_service, email_outbox
):
    first = await _signup(session_factory, secret_service, email_outbox)
    assert first.is_ok()
    async with session_factory() as session:
        verified = await VerifyEmailUseCase(SqlAlchemyUnitOfWork(session), secret_service).execute(
            email_outbox.last.token
        )
    assert verified.is_ok()

    second = await _signup(
        session_factory, secret_service, email_outbox, uow_class=LateReaderUnitOfWork
    )

    assert second.is_err()
    assert second.error.code == "EMAIL_CONFLICT"
    assert len(email_outbox.sent) == 1
