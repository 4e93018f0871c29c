from typing import List
from fastapi import HTTPException, status
from talentviz.models.requirement import Requirement, RequirementRecruiter
from talentviz.models.user import User
from talentviz.repositories.StorageInterface import IStorage
from talentviz.schemas.requirement_schema import RequirementCreate
import logging

logger = logging.getLogger(__name__)


class RequirementService:

    async def list_requirements(self, storage: IStorage) -> List[Requirement]:
        return await storage.get_requirements()

    async def get_requirement(self, requirement_id: int, storage: IStorage) -> Requirement:
        requirement = await storage.get_requirement(requirement_id)
        if not requirement:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Requirement not found"
            )
        return requirement

    async def create_requirement(self, requirement_data: RequirementCreate, created_by: int, storage: IStorage) -> Requirement:
        data = requirement_data.model_dump()
        data["created_by"] = created_by
        requirement = await storage.create_requirement(data)
        logger.info(f"User {created_by} created requirement {requirement.id}")
        return requirement

    async def set_status(self, requirement_id: int, new_status: str, storage: IStorage) -> Requirement:
        """Set the requirement status.

        Any of the four statuses may follow any other; the draft -> pending ->
        approved -> closed progression is a client convention only.
        """
        requirement = await storage.update_requirement_status(requirement_id, new_status)
        if not requirement:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Requirement not found"
            )
        logger.info(f"Requirement {requirement_id} status set to {new_status}")
        return requirement

    async def list_recruiters(self, requirement_id: int, storage: IStorage) -> List[User]:
        await self.get_requirement(requirement_id, storage)
        return await storage.get_requirement_recruiters(requirement_id)

    async def assign_recruiter(self, requirement_id: int, recruiter_id: int, storage: IStorage) -> RequirementRecruiter:
        await self.get_requirement(requirement_id, storage)
        if not await storage.get_user(recruiter_id):
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="Invalid recruiter ID"
            )
        assigned = await storage.get_requirement_recruiters(requirement_id)
        if any(user.id == recruiter_id for user in assigned):
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="Recruiter is already assigned to this requirement"
            )
        assignment = await storage.create_requirement_recruiter(requirement_id, recruiter_id)
        logger.info(f"Recruiter {recruiter_id} assigned to requirement {requirement_id}")
        return assignment

    async def unassign_recruiter(self, requirement_id: int, recruiter_id: int, storage: IStorage) -> dict:
        await storage.delete_requirement_recruiter(requirement_id, recruiter_id)
        logger.info(f"Recruiter {recruiter_id} unassigned from requirement {requirement_id}")
        return {"message": "Recruiter unassigned successfully"}
