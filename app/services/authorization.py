# app/services/authorization.py
"""Role gate applied at the top of every operation, before any entity lookup."""

from typing import Iterable

from app.models.user import Role, User
from app.services.errors import Forbidden
from app.utils.logger import get_logger

logger = get_logger(__name__)

ADMIN_ONLY = frozenset({Role.ADMIN})
DISPATCHER_ONLY = frozenset({Role.DISPATCHER})
DRIVER_ONLY = frozenset({Role.DRIVER})
STAFF = frozenset({Role.ADMIN, Role.DISPATCHER})


def require_role(identity: User, allowed_roles: Iterable[Role]) -> User:
    allowed = {Role(r) for r in allowed_roles}
    if Role(identity.role) not in allowed:
        logger.warning(f"Role {identity.role} denied (needs one of {sorted(r.value for r in allowed)})")
        raise Forbidden()
    return identity


def is_driver(identity: User) -> bool:
    return Role(identity.role) is Role.DRIVER
