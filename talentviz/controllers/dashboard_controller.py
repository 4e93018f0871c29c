from fastapi import APIRouter, Depends
from talentviz.db.database import get_storage
from talentviz.models.session import UserSession
from talentviz.repositories.StorageInterface import IStorage
from talentviz.services.auth.auth_service import get_current_session
from talentviz.services.dashboard_service import get_dashboard_stats

router = APIRouter()

@router.get("/dashboard/stats")
async def dashboard_stats(
    session: UserSession = Depends(get_current_session),
    storage: IStorage = Depends(get_storage)
):
    return await get_dashboard_stats(storage)
