"""
Role capabilities. Each gated endpoint names a capability; the roles allowed
through are the ones holding it here.
"""
from enum import Enum
from typing import FrozenSet

from talentviz.models.user import UserRole


class Capability(str, Enum):
    VIEW_USERS = "view_users"
    MANAGE_USERS = "manage_users"
    MANAGE_REQUIREMENTS = "manage_requirements"
    ASSIGN_RECRUITERS = "assign_recruiters"
    MANAGE_STAGES = "manage_stages"


ROLE_CAPABILITIES = {
    UserRole.admin: frozenset(Capability),
    UserRole.manager: frozenset({
        Capability.VIEW_USERS,
        Capability.MANAGE_REQUIREMENTS,
        Capability.ASSIGN_RECRUITERS,
        Capability.MANAGE_STAGES,
    }),
    UserRole.recruiter: frozenset(),
}


def roles_with(capability: Capability) -> FrozenSet[UserRole]:
    return frozenset(role for role, caps in ROLE_CAPABILITIES.items() if capability in caps)
