# app/services/identity_service.py
"""
Identity store: login, token → user resolution, and the public user view.

Access tokens are opaque strings handed out and resolved by a TokenResolver.
The default resolver uses the user id itself as the token. That scheme is a
placeholder with no expiry or signing; swap the resolver to change it.
"""

from typing import Optional, Protocol

from sqlalchemy.orm import Session

from app.database import serialized
from app.models.user import User
from app.schemas.auth import LoginResponse
from app.schemas.user import UserOut
from app.services.authorization import STAFF, require_role
from app.services.errors import InvalidCredentials, InvalidToken, Unauthenticated
from app.services.repositories import Store
from app.utils.logger import get_logger

logger = get_logger(__name__)


class TokenResolver(Protocol):
    def issue_token(self, user: User) -> str: ...

    def resolve(self, store: Store, token: str) -> Optional[User]: ...


class UserIdTokenResolver:
    """Token is exactly the user id (case-sensitive)."""

    def issue_token(self, user: User) -> str:
        return user.id

    def resolve(self, store: Store, token: str) -> Optional[User]:
        return store.users.get(token)


token_resolver: TokenResolver = UserIdTokenResolver()


def public_user(user: User) -> UserOut:
    """User view without the password. Used for every user embedded in a response."""
    return UserOut.model_validate(user)


def resolve_identity(store: Store, token: Optional[str], resolver: Optional[TokenResolver] = None) -> User:
    if token is None or not token.strip():
        raise Unauthenticated()
    user = (resolver or token_resolver).resolve(store, token)
    if user is None:
        logger.warning("Rejected request with unknown access token")
        raise InvalidToken()
    return user


def authenticate(store: Store, username: str, password: str) -> User:
    """Case-insensitive username, case-sensitive password. One error for every mismatch."""
    wanted = (username or "").lower()
    for candidate in store.users.list():
        if candidate.username.lower() == wanted and candidate.password == password:
            return candidate
    logger.warning("Failed login attempt")
    raise InvalidCredentials()


def login(db: Session, username: str, password: str) -> LoginResponse:
    with serialized(db):
        store = Store(db)
        user = authenticate(store, username, password)
        logger.info(f"User {user.id} ({user.role}) logged in")
        return LoginResponse(access_token=token_resolver.issue_token(user), user=public_user(user))


def get_me(db: Session, token: Optional[str]) -> UserOut:
    with serialized(db):
        return public_user(resolve_identity(Store(db), token))


def list_users(db: Session, token: Optional[str]) -> list[UserOut]:
    with serialized(db):
        store = Store(db)
        require_role(resolve_identity(store, token), STAFF)
        return [public_user(u) for u in store.users.list()]
