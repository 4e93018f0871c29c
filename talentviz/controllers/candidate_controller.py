from fastapi import APIRouter, Depends, Query, status
from typing import List, Optional
from talentviz.db.database import get_storage
from talentviz.models.session import UserSession
from talentviz.repositories.StorageInterface import IStorage
from talentviz.schemas.candidate_schema import (
    CandidateCreate, CandidateResponse, CommentCreate, CommentResponse,
)
from talentviz.schemas.stage_schema import StageMove, StageHistoryResponse
from talentviz.services.auth.auth_service import get_current_session
from talentviz.services.candidate_service import CandidateService

router = APIRouter()
comment_router = APIRouter()
candidate_service = CandidateService()


@router.get("", response_model=List[CandidateResponse])
async def list_candidates(
    requirement_id: Optional[int] = Query(None, alias="requirementId"),
    stage_id: Optional[int] = Query(None, alias="stageId"),
    session: UserSession = Depends(get_current_session),
    storage: IStorage = Depends(get_storage)
):
    """List candidates, optionally for one requirement or one stage"""
    return await candidate_service.list_candidates(storage, requirement_id, stage_id)


@router.get("/{candidate_id}", response_model=CandidateResponse)
async def get_candidate(
    candidate_id: int,
    session: UserSession = Depends(get_current_session),
    storage: IStorage = Depends(get_storage)
):
    return await candidate_service.get_candidate(candidate_id, storage)


@router.post("", response_model=CandidateResponse, status_code=status.HTTP_201_CREATED)
async def create_candidate(
    candidate_data: CandidateCreate,
    session: UserSession = Depends(get_current_session),
    storage: IStorage = Depends(get_storage)
):
    return await candidate_service.create_candidate(candidate_data, session.user_id, storage)


@router.patch("/{candidate_id}/stage", response_model=CandidateResponse)
async def move_candidate_stage(
    candidate_id: int,
    data: StageMove,
    session: UserSession = Depends(get_current_session),
    storage: IStorage = Depends(get_storage)
):
    return await candidate_service.move_candidate_stage(
        candidate_id, data.stage_id, session.user_id, storage, comments=data.comments
    )


@router.get("/{candidate_id}/history", response_model=List[StageHistoryResponse])
async def get_stage_history(
    candidate_id: int,
    session: UserSession = Depends(get_current_session),
    storage: IStorage = Depends(get_storage)
):
    return await candidate_service.get_history(candidate_id, storage)


@router.get("/{candidate_id}/comments", response_model=List[CommentResponse])
async def get_comments(
    candidate_id: int,
    session: UserSession = Depends(get_current_session),
    storage: IStorage = Depends(get_storage)
):
    return await candidate_service.get_comments(candidate_id, storage)


@comment_router.post("", response_model=CommentResponse, status_code=status.HTTP_201_CREATED)
async def add_comment(
    comment_data: CommentCreate,
    session: UserSession = Depends(get_current_session),
    storage: IStorage = Depends(get_storage)
):
    return await candidate_service.add_comment(comment_data, session.user_id, storage)
