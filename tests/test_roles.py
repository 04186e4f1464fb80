import itertools

import pytest

from services.user_management.models.users import ROLE_HIERARCHY, UserRole, role_level
from services.user_management.permissions import authorize, authorize_super_admin_only
from services.user_management.schemas.users import UserProfile
from shared.errors import InsufficientRole, NoProfile

ROLES_LOW_TO_HIGH = [UserRole.VIEWER, UserRole.USER, UserRole.ADMIN, UserRole.SUPER_ADMIN]


def profile_with(role):
    return UserProfile(
        user_id="u-1",
        email="someone@example.com",
        name="Someone",
        role=role,
        created_at="2024-01-01T00:00:00Z",
        created_by="system",
    )


def test_hierarchy_is_strict_total_order():
    levels = [ROLE_HIERARCHY[role] for role in ROLES_LOW_TO_HIGH]
    assert levels == [1, 2, 3, 4]


@pytest.mark.parametrize("value", [None, "", "owner", "SUPER_ADMIN"])
def test_unknown_roles_rank_zero(value):
    assert role_level(value) == 0


def test_role_level_accepts_enum_and_string():
    assert role_level(UserRole.ADMIN) == role_level("admin") == 3


@pytest.mark.parametrize("lower,higher", list(itertools.combinations(ROLES_LOW_TO_HIGH, 2)))
def test_lower_role_rejected_higher_role_accepted(lower, higher):
    with pytest.raises(InsufficientRole):
        authorize(profile_with(lower.value), higher)

    authorize(profile_with(higher.value), higher)
    authorize(profile_with(higher.value), lower)


@pytest.mark.parametrize("role", ROLES_LOW_TO_HIGH)
def test_role_satisfies_its_own_minimum(role):
    authorize(profile_with(role.value), role)


def test_missing_profile_is_rejected():
    with pytest.raises(NoProfile):
        authorize(None, UserRole.VIEWER)


def test_unrecognized_role_always_rejected():
    with pytest.raises(InsufficientRole):
        authorize(profile_with("owner"), UserRole.VIEWER)


def test_super_admin_only_requires_exact_role():
    authorize_super_admin_only(profile_with("super_admin"))
    for role in (UserRole.ADMIN, UserRole.USER, UserRole.VIEWER):
        with pytest.raises(InsufficientRole):
            authorize_super_admin_only(profile_with(role.value))
