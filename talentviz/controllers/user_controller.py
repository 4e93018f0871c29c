from fastapi import APIRouter, Depends, status
from typing import List
from talentviz.core.permissions import Capability
from talentviz.db.database import get_storage
from talentviz.models.session import UserSession
from talentviz.repositories.StorageInterface import IStorage
from talentviz.schemas.user_schema import UserCreate, UserUpdate, UserResponse
from talentviz.services.auth.auth_service import require
from talentviz.services.user_service import UserService

router = APIRouter()
user_service = UserService()


@router.get("", response_model=List[UserResponse])
async def list_users(
    session: UserSession = Depends(require(Capability.VIEW_USERS)),
    storage: IStorage = Depends(get_storage)
):
    return await user_service.list_users(storage)


@router.post("", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
async def create_user(
    user_data: UserCreate,
    session: UserSession = Depends(require(Capability.MANAGE_USERS)),
    storage: IStorage = Depends(get_storage)
):
    return await user_service.create_user(user_data, storage)


@router.patch("/{user_id}", response_model=UserResponse)
async def update_user(
    user_id: int,
    update_data: UserUpdate,
    session: UserSession = Depends(require(Capability.MANAGE_USERS)),
    storage: IStorage = Depends(get_storage)
):
    return await user_service.update_user(user_id, update_data, storage)


@router.delete("/{user_id}")
async def delete_user(
    user_id: int,
    session: UserSession = Depends(require(Capability.MANAGE_USERS)),
    storage: IStorage = Depends(get_storage)
):
    """Delete a user; an admin cannot delete their own account"""
    return await user_service.delete_user(user_id, session.user_id, storage)
