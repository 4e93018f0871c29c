from fastapi import APIRouter, Depends, status
from typing import List
from talentviz.core.permissions import Capability
from talentviz.db.database import get_storage
from talentviz.models.session import UserSession
from talentviz.repositories.StorageInterface import IStorage
from talentviz.schemas.stage_schema import StageCreate, StageResponse
from talentviz.services.auth.auth_service import get_current_session, require
from talentviz.services.stage_service import StageService

router = APIRouter()
stage_service = StageService()


@router.get("", response_model=List[StageResponse])
async def list_stages(
    session: UserSession = Depends(get_current_session),
    storage: IStorage = Depends(get_storage)
):
    """Pipeline stages in order"""
    return await stage_service.list_stages(storage)


@router.post("", response_model=StageResponse, status_code=status.HTTP_201_CREATED)
async def create_stage(
    stage_data: StageCreate,
    session: UserSession = Depends(require(Capability.MANAGE_STAGES)),
    storage: IStorage = Depends(get_storage)
):
    return await stage_service.create_stage(stage_data, storage)
