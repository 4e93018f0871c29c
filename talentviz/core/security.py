from passlib.context import CryptContext
from datetime import datetime, timedelta, timezone
from jose import jwt, JWTError
import secrets
from talentviz.core.config import settings

pwd_context = CryptContext(
    schemes=["bcrypt"], deprecated="auto", bcrypt__rounds=settings.BCRYPT_ROUNDS
)

def verify_password(plain_password, hashed_password):
    return pwd_context.verify(plain_password, hashed_password)

def get_password_hash(password):
    return pwd_context.hash(password)

def new_session_id() -> str:
    return secrets.token_urlsafe(32)

def session_expiry() -> datetime:
    return datetime.now(timezone.utc) + timedelta(
        minutes=settings.SESSION_MAX_AGE_MINUTES
    )

def create_session_cookie(sid: str, expires_at: datetime) -> str:
    """Sign the server-side session id so the cookie cannot be forged."""
    to_encode = {"sid": sid, "exp": expires_at}
    return jwt.encode(to_encode, settings.SECRET_KEY, algorithm=settings.JWT_ALGORITHM)

def decode_session_cookie(token: str):
    try:
        payload = jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.JWT_ALGORITHM])
    except JWTError:
        return None
    return payload.get("sid")
