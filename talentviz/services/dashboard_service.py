from talentviz.core.timeutils import as_utc, utcnow
from talentviz.models.candidate import CandidateStatus
from talentviz.models.requirement import RequirementPriority, RequirementStatus
from talentviz.repositories.StorageInterface import IStorage


async def get_dashboard_stats(storage: IStorage):
    # Full reads on every call; counts are derived in memory
    candidates = await storage.get_candidates()
    requirements = await storage.get_requirements()
    stages = await storage.get_stages()
    interviews = await storage.get_interviews()
    upcoming = await storage.get_upcoming_interviews()

    by_stage = [
        {
            "stageId": stage.id,
            "stageName": stage.name,
            "count": sum(1 for c in candidates if c.current_stage_id == stage.id),
        }
        for stage in stages
    ]

    active_candidates = sum(1 for c in candidates if c.status == CandidateStatus.ACTIVE.value)
    hired_candidates = sum(1 for c in candidates if c.status == CandidateStatus.HIRED.value)
    rejected_candidates = sum(1 for c in candidates if c.status == CandidateStatus.REJECTED.value)

    # Open = approved
    open_requirements = [r for r in requirements if r.status == RequirementStatus.APPROVED.value]
    urgent_requirements = sum(1 for r in open_requirements if r.priority == RequirementPriority.URGENT.value)

    today = utcnow().date()
    today_interviews = sum(1 for i in upcoming if as_utc(i.scheduled_time).date() == today)

    return {
        "candidates": {
            "total": len(candidates),
            "active": active_candidates,
            "hired": hired_candidates,
            "rejected": rejected_candidates,
            "byStage": by_stage,
        },
        "requirements": {
            "total": len(requirements),
            "open": len(open_requirements),
            "urgent": urgent_requirements,
        },
        "interviews": {
            "total": len(interviews),
            "upcoming": len(upcoming),
            "today": today_interviews,
        },
    }
