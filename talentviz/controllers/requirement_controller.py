from fastapi import APIRouter, Depends, status
from typing import List
from talentviz.core.permissions import Capability
from talentviz.db.database import get_storage
from talentviz.models.session import UserSession
from talentviz.repositories.StorageInterface import IStorage
from talentviz.schemas.requirement_schema import (
    RequirementCreate, RequirementResponse, RequirementStatusUpdate,
    RecruiterAssign, RequirementRecruiterResponse,
)
from talentviz.schemas.user_schema import UserResponse
from talentviz.services.auth.auth_service import get_current_session, require
from talentviz.services.requirement_service import RequirementService

router = APIRouter()
requirement_service = RequirementService()


@router.get("", response_model=List[RequirementResponse])
async def list_requirements(
    session: UserSession = Depends(get_current_session),
    storage: IStorage = Depends(get_storage)
):
    return await requirement_service.list_requirements(storage)


@router.get("/{requirement_id}", response_model=RequirementResponse)
async def get_requirement(
    requirement_id: int,
    session: UserSession = Depends(get_current_session),
    storage: IStorage = Depends(get_storage)
):
    return await requirement_service.get_requirement(requirement_id, storage)


@router.post("", response_model=RequirementResponse, status_code=status.HTTP_201_CREATED)
async def create_requirement(
    requirement_data: RequirementCreate,
    session: UserSession = Depends(require(Capability.MANAGE_REQUIREMENTS)),
    storage: IStorage = Depends(get_storage)
):
    return await requirement_service.create_requirement(requirement_data, session.user_id, storage)


@router.patch("/{requirement_id}/status", response_model=RequirementResponse)
async def update_requirement_status(
    requirement_id: int,
    data: RequirementStatusUpdate,
    session: UserSession = Depends(require(Capability.MANAGE_REQUIREMENTS)),
    storage: IStorage = Depends(get_storage)
):
    return await requirement_service.set_status(requirement_id, data.status, storage)


@router.get("/{requirement_id}/recruiters", response_model=List[UserResponse])
async def list_requirement_recruiters(
    requirement_id: int,
    session: UserSession = Depends(get_current_session),
    storage: IStorage = Depends(get_storage)
):
    return await requirement_service.list_recruiters(requirement_id, storage)


@router.post(
    "/{requirement_id}/recruiters",
    response_model=RequirementRecruiterResponse,
    status_code=status.HTTP_201_CREATED,
)
async def assign_recruiter(
    requirement_id: int,
    data: RecruiterAssign,
    session: UserSession = Depends(require(Capability.ASSIGN_RECRUITERS)),
    storage: IStorage = Depends(get_storage)
):
    return await requirement_service.assign_recruiter(requirement_id, data.recruiter_id, storage)


@router.delete("/{requirement_id}/recruiters/{recruiter_id}")
async def unassign_recruiter(
    requirement_id: int,
    recruiter_id: int,
    session: UserSession = Depends(require(Capability.ASSIGN_RECRUITERS)),
    storage: IStorage = Depends(get_storage)
):
    return await requirement_service.unassign_recruiter(requirement_id, recruiter_id, storage)
