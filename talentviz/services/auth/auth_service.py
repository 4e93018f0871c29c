from typing import Iterable, Optional
from fastapi import HTTPException, status, Depends, Request
from talentviz.core.config import settings
from talentviz.core.permissions import Capability, roles_with
from talentviz.core.security import (
    verify_password, new_session_id, session_expiry, create_session_cookie, decode_session_cookie,
)
from talentviz.core.timeutils import as_utc, utcnow
from talentviz.db.database import get_storage
from talentviz.models.session import UserSession
from talentviz.models.user import User, UserRole
from talentviz.repositories.StorageInterface import IStorage
from talentviz.services.auth.AuthInterface import IAuthService
import logging

logger = logging.getLogger(__name__)


def _unauthorized():
    return HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Not authenticated")


class AuthService(IAuthService):
    async def login(self, username: str, password: str, storage: IStorage):
        """Check credentials and open a session.

        Returns the user and the signed cookie value for the new session.
        """
        user = await storage.get_user_by_username(username)
        if not user or not verify_password(password, user.hashed_password):
            logger.warning(f"Failed login for username {username!r}")
            raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid username or password")
        expires_at = session_expiry()
        session = await storage.create_session({
            "sid": new_session_id(),
            "user_id": user.id,
            "role": user.role,
            "expires_at": expires_at,
        })
        logger.info(f"User {user.id} logged in")
        return {
            "user": user,
            "cookie": create_session_cookie(session.sid, expires_at),
        }

    async def logout(self, token: Optional[str], storage: IStorage):
        sid = decode_session_cookie(token) if token else None
        if sid:
            await storage.delete_session(sid)
        return {"message": "Logout successful"}


async def get_current_session(request: Request, storage: IStorage = Depends(get_storage)) -> UserSession:
    """Resolve the session cookie to a live session whose user still exists."""
    token = request.cookies.get(settings.SESSION_COOKIE_NAME)
    sid = decode_session_cookie(token) if token else None
    if not sid:
        raise _unauthorized()
    session = await storage.get_session(sid)
    if not session:
        raise _unauthorized()
    if as_utc(session.expires_at) <= utcnow():
        await storage.delete_session(sid)
        raise _unauthorized()
    user = await storage.get_user(session.user_id)
    if not user:
        await storage.delete_session(sid)
        raise _unauthorized()
    request.state.user = user
    return session


async def get_current_user(
    request: Request, session: UserSession = Depends(get_current_session)
) -> User:
    return request.state.user


def role_gate(allowed_roles: Iterable[UserRole]):
    """Dependency letting through only sessions whose role is in allowed_roles."""
    allowed = frozenset(UserRole(role).value for role in allowed_roles)

    def checker(session: UserSession = Depends(get_current_session)) -> UserSession:
        if session.role not in allowed:
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail="Forbidden: Insufficient permissions"
            )
        return session

    return checker


def require(capability: Capability):
    return role_gate(roles_with(capability))
