# services/user_management/controllers/super_admin_service.py
import logging

from services.user_management.identity import IdentityProvider
from services.user_management.models.users import UserRole
from services.user_management.profiles import ProfileStore, utc_now
from services.user_management.schemas.super_admin import SuperAdminCreate
from services.user_management.schemas.users import LoginRequest, LoginResponse, UserOut, UserProfile
from shared.auth import Identity
from shared.errors import AlreadyExists, EmailUnavailable

logger = logging.getLogger(__name__)


async def check_super_admin_exists(profiles: ProfileStore) -> bool:
    # The hidden account never counts, so first-run setup stays available
    return await profiles.has_visible_super_admin()


# --- FIRST-RUN SUPER ADMIN SETUP ---
async def setup_super_admin(
    payload: SuperAdminCreate,
    identity_provider: IdentityProvider,
    profiles: ProfileStore,
) -> Identity:
    if profiles.is_hidden_email(payload.email):
        raise EmailUnavailable()

    if await check_super_admin_exists(profiles):
        logger.warning("Rejected super admin setup: one already exists")
        raise AlreadyExists()

    identity = await identity_provider.create_user(payload.email, payload.password, payload.name)

    await profiles.save(
        UserProfile(
            user_id=identity.id,
            email=identity.email,
            name=payload.name,
            role=UserRole.SUPER_ADMIN.value,
            created_at=utc_now(),
            created_by="system",
        )
    )
    logger.info("Super admin %s created", identity.id)
    return identity


# --- LOGIN ---
async def login(payload: LoginRequest, identity_provider: IdentityProvider) -> LoginResponse:
    access_token = await identity_provider.sign_in(payload.email, payload.password)
    identity = await identity_provider.get_user(access_token)
    return LoginResponse(
        access_token=access_token,
        user=UserOut(id=identity.id, email=identity.email, name=identity.name),
    )
