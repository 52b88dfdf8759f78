"""Role-based access checks for the client modules.

The current role comes from the signed-in user's token; this service only
answers whether that role may see or modify a module.
"""

import logging
from enum import Enum
from typing import Dict, List, Optional

logger = logging.getLogger(__name__)


class UserRole(str, Enum):
    SUPER_ADMIN = "super_admin"
    COLLEGE_ADMIN = "college_admin"
    TEACHER = "teacher"
    STAFF = "staff"
    GUEST = "guest"

    @classmethod
    def from_string(cls, value: Optional[str]) -> Optional["UserRole"]:
        if not value:
            return None
        try:
            return cls(value.lower())
        except ValueError:
            return None

    @property
    def display_name(self) -> str:
        return self.value.replace("_", " ").title()

    @property
    def is_admin(self) -> bool:
        return self in (UserRole.SUPER_ADMIN, UserRole.COLLEGE_ADMIN)


class AccessModule(str, Enum):
    DASHBOARD = "dashboard"
    USERS = "users"
    STUDENTS = "students"
    COLLEGES = "colleges"
    BOOKS = "books"
    AUTH_LOGS = "auth_logs"
    REPORTS = "reports"
    SETTINGS = "settings"

    @classmethod
    def from_string(cls, value: Optional[str]) -> Optional["AccessModule"]:
        if not value:
            return None
        try:
            return cls(value.lower())
        except ValueError:
            return None


ROLE_MODULES: Dict[UserRole, List[AccessModule]] = {
    UserRole.SUPER_ADMIN: list(AccessModule),
    UserRole.COLLEGE_ADMIN: [AccessModule.DASHBOARD, AccessModule.STUDENTS, AccessModule.BOOKS],
    UserRole.TEACHER: [AccessModule.DASHBOARD, AccessModule.STUDENTS],
    UserRole.STAFF: [AccessModule.DASHBOARD],
    UserRole.GUEST: [AccessModule.DASHBOARD],
}

SUPER_ADMIN_ONLY = {AccessModule.USERS, AccessModule.COLLEGES, AccessModule.SETTINGS}
ADMIN_WRITABLE = {AccessModule.STUDENTS, AccessModule.BOOKS}


def role_can_modify(role: UserRole, module: AccessModule) -> bool:
    if module in SUPER_ADMIN_ONLY:
        return role == UserRole.SUPER_ADMIN
    if module in ADMIN_WRITABLE:
        return role.is_admin
    # dashboard, reports and auth logs are read-only
    return False


class RoleAccessService:
    def __init__(self, role: Optional[UserRole] = None):
        self._current_role = role
        self._access_cache: Dict[str, bool] = {}

    @property
    def current_role(self) -> Optional[UserRole]:
        return self._current_role

    @property
    def has_role(self) -> bool:
        return self._current_role is not None

    @property
    def is_admin(self) -> bool:
        return self.has_role and self._current_role.is_admin

    @property
    def is_super_admin(self) -> bool:
        return self._current_role == UserRole.SUPER_ADMIN

    def set_role(self, role: UserRole | str) -> None:
        if isinstance(role, str) and not isinstance(role, UserRole):
            parsed = UserRole.from_string(role)
            if parsed is None:
                raise ValueError(f"Unknown role: {role}")
            role = parsed
        self._current_role = role
        self._access_cache.clear()
        logger.info("Role set to %s", role.display_name)

    def clear_role(self) -> None:
        self._current_role = None
        self._access_cache.clear()
        logger.info("Role data cleared")

    def has_access(self, module_name: str) -> bool:
        if not self.has_role:
            logger.warning("No role assigned, denying access to %s", module_name)
            return False

        cache_key = f"{self._current_role.value}_{module_name}"
        if cache_key in self._access_cache:
            return self._access_cache[cache_key]

        module = AccessModule.from_string(module_name)
        if module is None:
            logger.warning("Invalid module name: %s", module_name)
            allowed = False
        else:
            allowed = module in ROLE_MODULES.get(self._current_role, [])
        self._access_cache[cache_key] = allowed
        logger.debug("Access check: %s -> %s = %s", self._current_role.display_name, module_name, allowed)
        return allowed

    def can_modify(self, module_name: str) -> bool:
        if not self.has_role:
            return False
        module = AccessModule.from_string(module_name)
        if module is None:
            return False
        return role_can_modify(self._current_role, module)

    def navigation_modules(self) -> List[AccessModule]:
        if not self.has_role:
            return []
        return [module for module in ROLE_MODULES[self._current_role] if module != AccessModule.SETTINGS]

    def access_denied_message(self, module_name: str) -> str:
        if not self.has_role:
            return "Please sign in to access this feature."
        module = AccessModule.from_string(module_name)
        label = module.value.replace("_", " ") if module else module_name
        return f"Your role ({self._current_role.display_name}) does not have access to {label}."
