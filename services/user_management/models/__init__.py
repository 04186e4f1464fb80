from .accounts import AuthAccount
from .users import UserRole, ROLE_HIERARCHY, role_level
