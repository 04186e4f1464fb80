# services/user_management/profiles.py
"""Profile records and the hidden super-admin convention.

Profiles live in the key-value store under ``user_profile_{userId}``. One
configured email address owns a hidden super-admin profile: it is written
back on every resolution so it survives store resets, and it never shows up
in listings or in the visible super-admin check.
"""
import logging
from datetime import datetime, timezone
from typing import List, Optional

from services.user_management.models.users import UserRole
from services.user_management.schemas.users import UserProfile
from shared.auth import Identity
from shared.config import settings
from shared.kv_store import KeyValueStore

logger = logging.getLogger(__name__)

PROFILE_PREFIX = "user_profile_"
HIDDEN_ADMIN_NAME = "System Administrator"


def profile_key(user_id: str) -> str:
    return f"{PROFILE_PREFIX}{user_id}"


def utc_now() -> str:
    return datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")


def is_hidden_super_admin(email: Optional[str], hidden_email: Optional[str] = None) -> bool:
    hidden_email = hidden_email if hidden_email is not None else settings.hidden_super_admin_email
    if not email or not hidden_email:
        return False
    return email.strip().lower() == hidden_email.strip().lower()


class ProfileStore:
    def __init__(self, store: KeyValueStore, hidden_email: Optional[str] = None):
        self.store = store
        self.hidden_email = hidden_email if hidden_email is not None else settings.hidden_super_admin_email

    def is_hidden_email(self, email: Optional[str]) -> bool:
        return is_hidden_super_admin(email, self.hidden_email or "")

    async def get(self, user_id: str) -> Optional[UserProfile]:
        data = await self.store.get(profile_key(user_id))
        return UserProfile.model_validate(data) if data else None

    async def save(self, profile: UserProfile) -> UserProfile:
        await self.store.set(profile_key(profile.user_id), profile.to_store())
        return profile

    async def delete(self, user_id: str) -> None:
        await self.store.delete(profile_key(user_id))

    async def all(self) -> List[UserProfile]:
        return [UserProfile.model_validate(data) for data in await self.store.get_by_prefix(PROFILE_PREFIX)]

    async def visible(self) -> List[UserProfile]:
        return [profile for profile in await self.all() if not profile.hidden]

    async def resolve(self, identity: Identity) -> Optional[UserProfile]:
        """Profile for ``identity``.

        Side effect: for the hidden email the super-admin profile is upserted
        on every call, keeping the first ``createdAt``.
        """
        if self.is_hidden_email(identity.email):
            existing = await self.get(identity.id)
            profile = UserProfile(
                user_id=identity.id,
                email=identity.email,
                name=HIDDEN_ADMIN_NAME,
                role=UserRole.SUPER_ADMIN.value,
                created_at=existing.created_at if existing else utc_now(),
                created_by="system",
                hidden=True,
            )
            if existing is None:
                logger.info("Provisioning hidden super admin profile %s", identity.id)
            return await self.save(profile)
        return await self.get(identity.id)

    async def has_visible_super_admin(self) -> bool:
        return any(profile.role == UserRole.SUPER_ADMIN.value for profile in await self.visible())
