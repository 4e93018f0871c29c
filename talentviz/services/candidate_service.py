from typing import List, Optional
from fastapi import HTTPException, status
from talentviz.models.candidate import Candidate
from talentviz.models.comment import Comment
from talentviz.models.stage import StageHistory
from talentviz.repositories.StorageInterface import IStorage
from talentviz.schemas.candidate_schema import CandidateCreate, CommentCreate
import logging

logger = logging.getLogger(__name__)

INITIAL_HISTORY_COMMENT = "Initial application"


class CandidateService:

    async def list_candidates(
        self, storage: IStorage, requirement_id: Optional[int] = None, stage_id: Optional[int] = None
    ) -> List[Candidate]:
        """List candidates, filtered by requirement or else by stage"""
        if requirement_id is not None:
            return await storage.get_candidates_by_requirement(requirement_id)
        if stage_id is not None:
            return await storage.get_candidates_by_stage(stage_id)
        return await storage.get_candidates()

    async def get_candidate(self, candidate_id: int, storage: IStorage) -> Candidate:
        candidate = await storage.get_candidate(candidate_id)
        if not candidate:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Candidate not found"
            )
        return candidate

    async def create_candidate(self, candidate_data: CandidateCreate, created_by: int, storage: IStorage) -> Candidate:
        """Add a candidate to a requirement's pipeline.

        The initial placement is recorded as a history row with no source stage.
        """
        if not await storage.get_requirement(candidate_data.requirement_id):
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="Invalid requirement ID"
            )
        if not await storage.get_stage(candidate_data.current_stage_id):
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="Invalid stage ID"
            )
        if await storage.get_candidate_by_email(candidate_data.email):
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="Candidate with this email already exists"
            )

        candidate = await storage.create_candidate(
            candidate_data.model_dump(), created_by, comments=INITIAL_HISTORY_COMMENT
        )
        logger.info(
            f"User {created_by} added candidate {candidate.id} to requirement "
            f"{candidate.requirement_id} at stage {candidate.current_stage_id}"
        )
        return candidate

    async def move_candidate_stage(
        self, candidate_id: int, stage_id: int, moved_by: int, storage: IStorage, comments: Optional[str] = None
    ) -> Candidate:
        """Move a candidate to another stage and record the move.

        Any stage may follow any other, including the current one.
        """
        if not await storage.get_stage(stage_id):
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="Stage not found"
            )
        candidate = await storage.update_candidate_stage(candidate_id, stage_id, moved_by, comments)
        if not candidate:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Candidate not found"
            )
        logger.info(f"User {moved_by} moved candidate {candidate_id} to stage {stage_id}")
        return candidate

    async def get_history(self, candidate_id: int, storage: IStorage) -> List[StageHistory]:
        return await storage.get_stage_history(candidate_id)

    async def get_comments(self, candidate_id: int, storage: IStorage) -> List[Comment]:
        return await storage.get_comments_by_candidate(candidate_id)

    async def add_comment(self, comment_data: CommentCreate, user_id: int, storage: IStorage) -> Comment:
        if not await storage.get_candidate(comment_data.candidate_id):
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="Invalid candidate ID"
            )
        data = comment_data.model_dump()
        data["user_id"] = user_id
        return await storage.create_comment(data)
