# services/user_management/api/super_admin_router.py
from fastapi import APIRouter, Depends

from services.user_management.controllers.super_admin_service import check_super_admin_exists, login, setup_super_admin
from services.user_management.identity import IdentityProvider, get_identity_provider
from services.user_management.permissions import Caller, get_profile_store, require_auth
from services.user_management.profiles import ProfileStore
from services.user_management.schemas.super_admin import SuperAdminCreate, SuperAdminStatus
from services.user_management.schemas.users import LoginRequest, LoginResponse, UserOut

router = APIRouter(tags=["SuperAdmin"])


@router.post("/setup-super-admin")
async def register_super_admin(
    payload: SuperAdminCreate,
    identity_provider: IdentityProvider = Depends(get_identity_provider),
    profiles: ProfileStore = Depends(get_profile_store),
):
    """
    First-time setup, only while no visible super admin exists
    """
    identity = await setup_super_admin(payload, identity_provider, profiles)
    user = UserOut(id=identity.id, email=identity.email, name=identity.name)
    return {"message": "Super admin created successfully", "user": user.model_dump()}


@router.get("/check-super-admin", response_model=SuperAdminStatus)
async def super_admin_status(profiles: ProfileStore = Depends(get_profile_store)):
    return SuperAdminStatus(hasSuperAdmin=await check_super_admin_exists(profiles))


@router.post("/auth/login", response_model=LoginResponse)
async def login_user(
    payload: LoginRequest,
    identity_provider: IdentityProvider = Depends(get_identity_provider),
):
    return await login(payload, identity_provider)


@router.get("/profile")
async def get_profile(caller: Caller = Depends(require_auth)):
    return {"profile": caller.profile.to_store()}
