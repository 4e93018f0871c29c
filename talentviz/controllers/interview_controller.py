from fastapi import APIRouter, Depends, Query, status
from typing import List, Optional
from talentviz.db.database import get_storage
from talentviz.models.session import UserSession
from talentviz.repositories.StorageInterface import IStorage
from talentviz.schemas.interview_schema import (
    InterviewCreate, InterviewResponse, InterviewStatusUpdate, FeedbackCreate, FeedbackResponse,
)
from talentviz.services.auth.auth_service import get_current_session
from talentviz.services.interview_service import InterviewService

router = APIRouter()
feedback_router = APIRouter()
interview_service = InterviewService()


@router.get("", response_model=List[InterviewResponse])
async def list_interviews(
    upcoming: bool = False,
    candidate_id: Optional[int] = Query(None, alias="candidateId"),
    session: UserSession = Depends(get_current_session),
    storage: IStorage = Depends(get_storage)
):
    return await interview_service.list_interviews(storage, upcoming, candidate_id)


@router.post("", response_model=InterviewResponse, status_code=status.HTTP_201_CREATED)
async def schedule_interview(
    interview_data: InterviewCreate,
    session: UserSession = Depends(get_current_session),
    storage: IStorage = Depends(get_storage)
):
    return await interview_service.schedule_interview(interview_data, storage)


@router.patch("/{interview_id}/status", response_model=InterviewResponse)
async def update_interview_status(
    interview_id: int,
    data: InterviewStatusUpdate,
    session: UserSession = Depends(get_current_session),
    storage: IStorage = Depends(get_storage)
):
    return await interview_service.set_status(interview_id, data.status, storage)


@router.get("/{interview_id}/feedback", response_model=List[FeedbackResponse])
async def get_interview_feedback(
    interview_id: int,
    session: UserSession = Depends(get_current_session),
    storage: IStorage = Depends(get_storage)
):
    return await interview_service.get_feedback(interview_id, storage)


@feedback_router.post("", response_model=FeedbackResponse, status_code=status.HTTP_201_CREATED)
async def submit_feedback(
    feedback_data: FeedbackCreate,
    session: UserSession = Depends(get_current_session),
    storage: IStorage = Depends(get_storage)
):
    return await interview_service.submit_feedback(feedback_data, session.user_id, storage)
