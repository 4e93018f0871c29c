from fastapi import APIRouter, Depends, Request, Response
from talentviz.core.config import settings
from talentviz.db.database import get_storage
from talentviz.repositories.StorageInterface import IStorage
from talentviz.services.auth.AuthInterface import IAuthService
from talentviz.services.auth.auth_service import AuthService, get_current_user
import talentviz.schemas.user_schema as user_schema

router = APIRouter()
auth_service: IAuthService = AuthService()


@router.post("/login", response_model=user_schema.UserResponse)
async def login(data: user_schema.UserLogin, response: Response, storage: IStorage = Depends(get_storage)):
    result = await auth_service.login(data.username, data.password, storage)
    response.set_cookie(
        key=settings.SESSION_COOKIE_NAME,
        value=result["cookie"],
        max_age=settings.SESSION_MAX_AGE_MINUTES * 60,
        httponly=True,
        samesite="lax",
        secure=settings.SESSION_COOKIE_SECURE,
    )
    return result["user"]


@router.post("/logout")
async def logout(request: Request, response: Response, storage: IStorage = Depends(get_storage)):
    result = await auth_service.logout(request.cookies.get(settings.SESSION_COOKIE_NAME), storage)
    response.delete_cookie(settings.SESSION_COOKIE_NAME)
    return result


@router.get("/me", response_model=user_schema.UserResponse)
async def read_current_user(current_user=Depends(get_current_user)):
    """Get current user information"""
    return current_user
