"""
Unit tests for VerifyEmailUseCase
"""
from datetime import timedelta

import pytest

from tripmate.app.use_cases.auth import VerifyEmailUseCase
from tripmate.domain.base import utc_now
from tripmate.domain.entities import User


def _pending_user(secret_service, raw_token, expires_in=timedelta(minutes=20)):
    return User(
        name="Alice",
        email="alice@example.com",
        password_hash=secret_service.hash_password("initial-password"),
        is_active=False,
        verification_token_hash=secret_service.hash_for_lookup(raw_token),
        verification_token_expires_at=utc_now() + expires_in,
    )


@pytest.mark.asyncio
async def test_successful_email_verification(mock_uow, secret_service):
    user = _pending_user(secret_service, "raw-token")
    mock_uow.users.get_by_verification_token_hash.return_value = user

    result = await VerifyEmailUseCase(mock_uow, secret_service).execute("raw-token")

    assert result.is_ok()
    assert result.value.status == "verified"
    assert "successfully" in result.value.message.lower()

    # Looked up by hash, never by the raw token
    mock_uow.users.get_by_verification_token_hash.assert_called_once_with(
        secret_service.hash_for_lookup("raw-token")
    )

    updated_user = mock_uow.users.update.call_args[0][0]
    assert updated_user.is_active is True
    assert updated_user.verification_token_hash is None
    assert updated_user.verification_token_expires_at is None
    mock_uow.commit.assert_called_once()


@pytest.mark.asyncio
async def test_unknown_token_is_invalid(mock_uow, secret_service):
    result = await VerifyEmailUseCase(mock_uow, secret_service).execute("never-issued")

    assert result.is_err()
    assert result.error.code == "INVALID_TOKEN"
    mock_uow.users.update.assert_not_called()


@pytest.mark.asyncio
async def test_expired_token_leaves_user_pending(mock_uow, secret_service):
    user = _pending_user(secret_service, "raw-token", expires_in=timedelta(seconds=-1))
    token_hash = user.verification_token_hash
    mock_uow.users.get_by_verification_token_hash.return_value = user

    result = await VerifyEmailUseCase(mock_uow, secret_service).execute("raw-token")

    assert result.is_err()
    assert result.error.code == "TOKEN_EXPIRED"
    assert user.is_active is False
    assert user.verification_token_hash == token_hash
    mock_uow.users.update.assert_not_called()
    mock_uow.commit.assert_not_called()


@pytest.mark.asyncio
async def test_missing_expiry_counts_as_expired(mock_uow, secret_service):
    user = _pending_user(secret_service, "raw-token")
    user.verification_token_expires_at = None
    mock_uow.users.get_by_verification_token_hash.return_value = user

    result = await VerifyEmailUseCase(mock_uow, secret_service).execute("raw-token")

    assert result.is_err()
    assert result.error.code == "TOKEN_EXPIRED"
