# services/user_management/controllers/user_service.py
import logging
from typing import List, Tuple

from services.user_management.identity import IdentityProvider
from services.user_management.models.users import UserRole
from services.user_management.permissions import Caller
from services.user_management.profiles import ProfileStore, utc_now
from services.user_management.schemas.users import UserCreate, UserProfile, UserUpdate
from shared.auth import Identity
from shared.errors import (
    EmailUnavailable,
    Forbidden,
    NotFound,
    SelfDeleteForbidden,
    UpstreamError,
)

logger = logging.getLogger(__name__)


async def list_users(profiles: ProfileStore) -> List[UserProfile]:
    return await profiles.visible()


# --- CREATE USER ---
async def create_user(
    payload: UserCreate,
    caller: Caller,
    identity_provider: IdentityProvider,
    profiles: ProfileStore,
) -> Tuple[Identity, UserProfile]:
    if profiles.is_hidden_email(payload.email):
        raise EmailUnavailable()

    if payload.role == UserRole.SUPER_ADMIN:
        raise Forbidden("Cannot create another super admin")

    identity = await identity_provider.create_user(payload.email, payload.password, payload.name)

    profile = UserProfile(
        user_id=identity.id,
        email=identity.email,
        name=payload.name,
        role=payload.role.value,
        created_at=utc_now(),
        created_by=caller.identity.id,
    )
    await profiles.save(profile)
    logger.info("User %s created by %s with role %s", identity.id, caller.identity.id, payload.role.value)
    return identity, profile


# --- UPDATE USER ---
async def update_user(user_id: str, payload: UserUpdate, profiles: ProfileStore) -> UserProfile:
    existing = await profiles.get(user_id)
    if existing is None:
        raise NotFound("User not found")

    if existing.is_protected:
        raise Forbidden("Cannot modify super admin")

    if payload.role == UserRole.SUPER_ADMIN:
        raise Forbidden("Cannot assign super admin role")

    updated = existing.model_copy(update={"name": payload.name, "role": payload.role.value, "updated_at": utc_now()})
    await profiles.save(updated)
    return updated


# --- DELETE USER ---
async def delete_user(
    user_id: str,
    caller: Caller,
    identity_provider: IdentityProvider,
    profiles: ProfileStore,
) -> None:
    if user_id == caller.identity.id:
        raise SelfDeleteForbidden()

    existing = await profiles.get(user_id)
    if existing is None:
        raise NotFound("User not found")

    if existing.is_protected:
        raise Forbidden("Cannot delete super admin")

    try:
        await identity_provider.delete_user(user_id)
    except UpstreamError as e:
        # The profile is removed regardless so the account loses all access
        logger.warning("Delete user %s from identity provider failed: %s", user_id, e.detail)

    await profiles.delete(user_id)
    logger.info("User %s deleted by %s", user_id, caller.identity.id)
