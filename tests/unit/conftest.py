import pytest
from unittest.mock import AsyncMock, MagicMock

from tripmate.adapter.services.secret_service import SecretService
from tripmate.adapter.services.user_validator import PydanticUserValidator
from tripmate.libs.result import Return


@pytest.fixture
def mock_uow():
    uow = MagicMock()
    uow.__aenter__ = AsyncMock(return_value=uow)
    uow.__aexit__ = AsyncMock(return_value=False)  # Must return False to not suppress exceptions
    uow.commit = AsyncMock()
    uow.rollback = AsyncMock()

    uow.users = MagicMock()
    uow.users.get_by_email = AsyncMock(return_value=None)
    uow.users.get_by_id = AsyncMock(return_value=None)
    uow.users.get_by_verification_token_hash = AsyncMock(return_value=None)
    uow.users.create = AsyncMock(side_effect=lambda user: user)
    uow.users.update = AsyncMock(side_effect=lambda user: user)

    uow.trips = MagicMock()
    uow.trips.get_by_id = AsyncMock(return_value=None)

    uow.share_links = MagicMock()
    uow.share_links.get_by_trip_id = AsyncMock(return_value=None)
    uow.share_links.get_by_token_hash = AsyncMock(return_value=None)
    uow.share_links.create = AsyncMock(side_effect=lambda link: link)
    uow.share_links.update = AsyncMock(side_effect=lambda link: link)
    return uow


@pytest.fixture
def secret_service():
    # Lowest bcrypt cost keeps hashing fast in tests
    return SecretService(bcrypt_rounds=4)


@pytest.fixture
def validator():
    return PydanticUserValidator()


@pytest.fixture
def email_sender():
    sender = MagicMock()
    sender.send_verification_email = AsyncMock(return_value=Return.ok(None))
    return sender
