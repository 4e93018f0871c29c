from typing import List, Optional
from fastapi import HTTPException, status
from talentviz.models.interview import Interview, Feedback
from talentviz.repositories.StorageInterface import IStorage
from talentviz.schemas.interview_schema import InterviewCreate, FeedbackCreate
import logging

logger = logging.getLogger(__name__)


class InterviewService:

    async def list_interviews(
        self, storage: IStorage, upcoming: bool = False, candidate_id: Optional[int] = None
    ) -> List[Interview]:
        if upcoming:
            return await storage.get_upcoming_interviews()
        if candidate_id is not None:
            return await storage.get_interviews_by_candidate(candidate_id)
        return await storage.get_interviews()

    async def schedule_interview(self, interview_data: InterviewCreate, storage: IStorage) -> Interview:
        if not await storage.get_candidate(interview_data.candidate_id):
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="Invalid candidate ID"
            )
        if not await storage.get_requirement(interview_data.requirement_id):
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="Invalid requirement ID"
            )
        interview = await storage.create_interview(interview_data.model_dump())
        logger.info(
            f"Scheduled {interview.type} interview {interview.id} for candidate "
            f"{interview.candidate_id} at {interview.scheduled_time.isoformat()}"
        )
        return interview

    async def set_status(self, interview_id: int, new_status: str, storage: IStorage) -> Interview:
        """Set the interview status; any status may follow any other."""
        interview = await storage.update_interview_status(interview_id, new_status)
        if not interview:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Interview not found"
            )
        logger.info(f"Interview {interview_id} status set to {new_status}")
        return interview

    async def get_feedback(self, interview_id: int, storage: IStorage) -> List[Feedback]:
        return await storage.get_feedback_by_interview(interview_id)

    async def submit_feedback(self, feedback_data: FeedbackCreate, provided_by: int, storage: IStorage) -> Feedback:
        if not await storage.get_interview(feedback_data.interview_id):
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="Invalid interview ID"
            )
        data = feedback_data.model_dump()
        data["provided_by"] = provided_by
        return await storage.create_feedback(data)
