# services/user_management/permissions.py
import logging
from dataclasses import dataclass
from typing import Optional

from fastapi import Depends

from services.user_management.identity import IdentityProvider, get_identity_provider
from services.user_management.models.users import UserRole, role_level
from services.user_management.profiles import ProfileStore
from services.user_management.schemas.users import UserProfile
from shared.auth import Identity, get_bearer_token
from shared.errors import InsufficientRole, NoProfile
from shared.kv_store import KeyValueStore, get_kv_store

logger = logging.getLogger(__name__)


@dataclass
class Caller:
    identity: Identity
    profile: UserProfile


def get_profile_store(store: KeyValueStore = Depends(get_kv_store)) -> ProfileStore:
    return ProfileStore(store)


def authorize(profile: Optional[UserProfile], minimum_role: UserRole) -> None:
    if profile is None:
        raise NoProfile()
    if role_level(profile.role) < role_level(minimum_role):
        logger.info("Denied %s (role=%s, required=%s)", profile.user_id, profile.role, minimum_role.value)
        raise InsufficientRole()


def authorize_super_admin_only(profile: Optional[UserProfile]) -> None:
    if profile is None:
        raise NoProfile()
    if profile.role != UserRole.SUPER_ADMIN.value:
        logger.info("Denied %s: super admin only", profile.user_id)
        raise InsufficientRole("Access denied - super admin only")


# --- AUTHENTICATION ---
async def require_auth(
    token: str = Depends(get_bearer_token),
    identity_provider: IdentityProvider = Depends(get_identity_provider),
    profiles: ProfileStore = Depends(get_profile_store),
) -> Caller:
    identity = await identity_provider.get_user(token)
    profile = await profiles.resolve(identity)
    if profile is None:
        raise NoProfile()
    return Caller(identity=identity, profile=profile)


# --- ROLE GATES ---
def require_role(minimum_role: UserRole):
    async def dependency(caller: Caller = Depends(require_auth)) -> Caller:
        authorize(caller.profile, minimum_role)
        return caller

    return dependency


async def require_super_admin(caller: Caller = Depends(require_auth)) -> Caller:
    authorize_super_admin_only(caller.profile)
    return caller
