from typing import List
from talentviz.models.stage import Stage
from talentviz.repositories.StorageInterface import IStorage
from talentviz.schemas.stage_schema import StageCreate
import logging

logger = logging.getLogger(__name__)


class StageService:

    async def list_stages(self, storage: IStorage) -> List[Stage]:
        return await storage.get_stages()

    async def create_stage(self, stage_data: StageCreate, storage: IStorage) -> Stage:
        stage = await storage.create_stage(stage_data.model_dump())
        logger.info(f"Created stage {stage.id} ({stage.name}) at position {stage.order}")
        return stage
