# services/user_management/models/users.py
import enum
from typing import Optional, Union


class UserRole(str, enum.Enum):
    SUPER_ADMIN = "super_admin"
    ADMIN = "admin"
    USER = "user"
    VIEWER = "viewer"


ROLE_HIERARCHY = {
    UserRole.SUPER_ADMIN: 4,
    UserRole.ADMIN: 3,
    UserRole.USER: 2,
    UserRole.VIEWER: 1,
}


def role_level(role: Optional[Union[UserRole, str]]) -> int:
    """Privilege level of ``role``; unknown or missing roles rank 0."""
    if role is None:
        return 0
    try:
        return ROLE_HIERARCHY[UserRole(role)]
    except ValueError:
        return 0
