from functools import lru_cache

from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel.ext.asyncio.session import AsyncSession

from config import ApplicationConfig
from tripmate.adapter.services.email_sender import LoggingEmailSender, ResendEmailSender
from tripmate.adapter.services.jwt_signer import JwtCredentialSigner
from tripmate.adapter.services.secret_service import SecretService
from tripmate.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from tripmate.adapter.services.user_validator import PydanticUserValidator
from tripmate.app.services.credential_signer import ICredentialSigner
from tripmate.app.services.email_sender import IEmailSender
from tripmate.app.services.secret_service import ISecretService
from tripmate.app.services.user_validator import IUserValidator

engine = create_async_engine(ApplicationConfig.DB_URI, echo=False, future=True)

AsyncSessionLocal = sessionmaker(
    engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
)


async def get_unit_of_work():
    async with AsyncSessionLocal() as session:
        yield SqlAlchemyUnitOfWork(session)


# Stateless collaborators, shared across requests


@lru_cache
def get_secret_service() -> ISecretService:
    return SecretService(bcrypt_rounds=ApplicationConfig.BCRYPT_ROUNDS)


@lru_cache
def get_credential_signer() -> ICredentialSigner:
    return JwtCredentialSigner(
        ApplicationConfig.JWT_SECRET,
        ttl_minutes=ApplicationConfig.ACCESS_TOKEN_TTL_MINUTES,
    )


@lru_cache
def get_user_validator() -> IUserValidator:
    return PydanticUserValidator()


@lru_cache
def get_email_sender() -> IEmailSender:
    if ApplicationConfig.EMAIL_BACKEND == "resend":
        return ResendEmailSender(
            api_key=ApplicationConfig.RESEND_API_KEY,
            from_email=ApplicationConfig.EMAIL_FROM,
            token_ttl_minutes=ApplicationConfig.VERIFICATION_TOKEN_TTL_MINUTES,
            timeout_seconds=ApplicationConfig.EMAIL_SEND_TIMEOUT_SECONDS,
        )
    return LoggingEmailSender()
