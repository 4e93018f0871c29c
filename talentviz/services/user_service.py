from typing import List
from fastapi import HTTPException, status
from talentviz.core.security import get_password_hash
from talentviz.models.user import User
from talentviz.repositories.StorageInterface import IStorage
from talentviz.schemas.user_schema import UserCreate, UserUpdate
import logging

logger = logging.getLogger(__name__)


class UserService:

    async def list_users(self, storage: IStorage) -> List[User]:
        return await storage.get_users()

    async def create_user(self, user_data: UserCreate, storage: IStorage) -> User:
        """Create a user with a hashed password; usernames are unique"""
        if await storage.get_user_by_username(user_data.username):
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="Username already exists"
            )
        data = user_data.model_dump(exclude={"password"})
        data["hashed_password"] = get_password_hash(user_data.password)
        user = await storage.create_user(data)
        logger.info(f"Created user {user.id} ({user.username}, {user.role})")
        return user

    async def update_user(self, user_id: int, update_data: UserUpdate, storage: IStorage) -> User:
        user = await storage.get_user(user_id)
        if not user:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="User not found"
            )

        changes = update_data.model_dump(exclude_unset=True)
        for field in ("username", "full_name", "email", "role"):
            if field in changes and changes[field] is None:
                raise HTTPException(
                    status_code=status.HTTP_400_BAD_REQUEST,
                    detail=f"{field} cannot be null"
                )

        new_username = changes.get("username")
        if new_username and new_username != user.username:
            if await storage.get_user_by_username(new_username):
                raise HTTPException(
                    status_code=status.HTTP_400_BAD_REQUEST,
                    detail="Username already exists"
                )

        if "password" in changes:
            password = changes.pop("password")
            if password:
                changes["hashed_password"] = get_password_hash(password)

        previous_role = user.role
        updated = await storage.update_user(user_id, changes)
        # Sessions carry the role they were opened with
        if "role" in changes and changes["role"] != previous_role:
            await storage.delete_user_sessions(user_id)
            logger.info(f"User {user_id} role changed to {changes['role']}, sessions revoked")
        return updated

    async def delete_user(self, user_id: int, acting_user_id: int, storage: IStorage) -> dict:
        # Admins cannot remove the account they are signed in with
        if user_id == acting_user_id:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="Cannot delete your own account"
            )
        if not await storage.delete_user(user_id):
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="User not found"
            )
        await storage.delete_user_sessions(user_id)
        logger.info(f"User {acting_user_id} deleted user {user_id}")
        return {"message": "User deleted successfully"}
