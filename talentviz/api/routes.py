from fastapi import APIRouter
from talentviz.controllers import auth_controller
from talentviz.controllers import user_controller
from talentviz.controllers import requirement_controller
from talentviz.controllers import stage_controller
from talentviz.controllers import candidate_controller
from talentviz.controllers import interview_controller
from talentviz.controllers import dashboard_controller


router = APIRouter(prefix="/api")


router.include_router(auth_controller.router, prefix="/auth", tags=["auth"])
router.include_router(user_controller.router, prefix="/users", tags=["users"])
router.include_router(requirement_controller.router, prefix="/requirements", tags=["requirements"])
router.include_router(stage_controller.router, prefix="/stages", tags=["stages"])
router.include_router(candidate_controller.router, prefix="/candidates", tags=["candidates"])
router.include_router(candidate_controller.comment_router, prefix="/comments", tags=["comments"])
router.include_router(interview_controller.router, prefix="/interviews", tags=["interviews"])
router.include_router(interview_controller.feedback_router, prefix="/feedback", tags=["feedback"])
router.include_router(dashboard_controller.router, prefix="", tags=["dashboard"])
