# services/user_management/identity.py
import logging
from typing import Optional, Protocol

from fastapi import Depends
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select

from services.user_management.models.accounts import AuthAccount
from shared.auth import Identity, create_access_token, decode_token, get_password_hash, verify_password
from shared.db import get_db
from shared.errors import Unauthenticated, UpstreamError

logger = logging.getLogger(__name__)


class IdentityProvider(Protocol):
    async def create_user(self, email: str, password: str, name: Optional[str]) -> Identity: ...

    async def delete_user(self, user_id: str) -> None: ...

    async def get_user(self, token: str) -> Identity: ...

    async def sign_in(self, email: str, password: str) -> str: ...

    async def ensure_user(self, email: str, password: str, name: Optional[str]) -> Identity: ...


def _to_identity(account: AuthAccount) -> Identity:
    return Identity(id=account.id, email=account.email, name=account.name)


class LocalIdentityProvider:
    """Accounts in ``auth_accounts``, bcrypt password hashes, HS256 access tokens."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def _find_by_email(self, email: str) -> Optional[AuthAccount]:
        result = await self.db.execute(select(AuthAccount).where(AuthAccount.email == email.lower()))
        return result.scalars().first()

    async def create_user(self, email: str, password: str, name: Optional[str]) -> Identity:
        if await self._find_by_email(email):
            raise UpstreamError(
                "A user with this email address has already been registered",
                status_code=400,
            )
        account = AuthAccount(email=email.lower(), name=name, hashed_password=get_password_hash(password))
        self.db.add(account)
        try:
            await self.db.commit()
        except IntegrityError:
            await self.db.rollback()
            raise UpstreamError(
                "A user with this email address has already been registered",
                status_code=400,
            )
        await self.db.refresh(account)
        logger.info("Created account %s", account.id)
        return _to_identity(account)

    async def delete_user(self, user_id: str) -> None:
        account = await self.db.get(AuthAccount, user_id)
        if account is None:
            raise UpstreamError("User not found", status_code=404)
        await self.db.delete(account)
        await self.db.commit()

    async def get_user(self, token: str) -> Identity:
        payload = decode_token(token)
        if not payload or not payload.get("sub"):
            raise Unauthenticated()
        account = await self.db.get(AuthAccount, payload["sub"])
        if account is None:
            raise Unauthenticated()
        return _to_identity(account)

    async def sign_in(self, email: str, password: str) -> str:
        account = await self._find_by_email(email)
        if not account or not verify_password(password, account.hashed_password):
            raise Unauthenticated("Invalid login credentials")
        return create_access_token({"sub": account.id, "email": account.email})

    async def ensure_user(self, email: str, password: str, name: Optional[str]) -> Identity:
        account = await self._find_by_email(email)
        if account is not None:
            return _to_identity(account)
        return await self.create_user(email, password, name)


def get_identity_provider(db: AsyncSession = Depends(get_db)) -> IdentityProvider:
    return LocalIdentityProvider(db)
