# services/user_management/api/user_router.py
from fastapi import APIRouter, Depends

from services.user_management.controllers import user_service
from services.user_management.identity import IdentityProvider, get_identity_provider
from services.user_management.permissions import Caller, get_profile_store, require_super_admin
from services.user_management.profiles import ProfileStore
from services.user_management.schemas.users import UserCreate, UserOut, UserUpdate

router = APIRouter(prefix="/admin/users", tags=["User Management"])


@router.get("")
async def get_users(
    profiles: ProfileStore = Depends(get_profile_store),
    caller: Caller = Depends(require_super_admin),
):
    users = await user_service.list_users(profiles)
    return {"users": [profile.to_store() for profile in users]}


@router.post("")
async def create_user(
    payload: UserCreate,
    identity_provider: IdentityProvider = Depends(get_identity_provider),
    profiles: ProfileStore = Depends(get_profile_store),
    caller: Caller = Depends(require_super_admin),
):
    identity, profile = await user_service.create_user(payload, caller, identity_provider, profiles)
    return {
        "message": "User created successfully",
        "user": UserOut(id=identity.id, email=identity.email, name=identity.name).model_dump(),
        "profile": profile.to_store(),
    }


@router.put("/{user_id}")
async def update_user(
    user_id: str,
    payload: UserUpdate,
    profiles: ProfileStore = Depends(get_profile_store),
    caller: Caller = Depends(require_super_admin),
):
    profile = await user_service.update_user(user_id, payload, profiles)
    return {"message": "User updated successfully", "profile": profile.to_store()}


@router.delete("/{user_id}")
async def delete_user(
    user_id: str,
    identity_provider: IdentityProvider = Depends(get_identity_provider),
    profiles: ProfileStore = Depends(get_profile_store),
    caller: Caller = Depends(require_super_admin),
):
    await user_service.delete_user(user_id, caller, identity_provider, profiles)
    return {"message": "User deleted successfully"}
