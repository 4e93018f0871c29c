"""
Default pipeline stages and accounts for an empty store
"""
from talentviz.core.security import get_password_hash
from talentviz.models.user import UserRole
from talentviz.repositories.StorageInterface import IStorage
import logging

logger = logging.getLogger(__name__)

DEFAULT_STAGES = [
    {"name": "Applied", "order": 1, "is_default": True},
    {"name": "Screening", "order": 2, "is_default": False},
    {"name": "Interview", "order": 3, "is_default": False},
    {"name": "Offer", "order": 4, "is_default": False},
    {"name": "Hired", "order": 5, "is_default": False},
    {"name": "Rejected", "order": 6, "is_default": False},
]

DEFAULT_USERS = [
    {
        "username": "admin",
        "password": "admin123",
        "full_name": "Admin User",
        "email": "admin@talentviz.com",
        "role": UserRole.admin.value,
    },
    {
        "username": "manager",
        "password": "manager123",
        "full_name": "Alex Morgan",
        "email": "alex@talentviz.com",
        "role": UserRole.manager.value,
    },
    {
        "username": "recruiter",
        "password": "recruiter123",
        "full_name": "Robin Taylor",
        "email": "robin@talentviz.com",
        "role": UserRole.recruiter.value,
    },
]


async def seed_defaults(storage: IStorage) -> None:
    """Insert default stages and users, each only when none exist yet."""
    if await storage.get_stages():
        logger.info("Skipping stages seed, stages already exist")
    else:
        for stage in DEFAULT_STAGES:
            await storage.create_stage(dict(stage))
        logger.info(f"Added {len(DEFAULT_STAGES)} default recruitment stages")

    if await storage.get_users():
        logger.info("Skipping users seed, users already exist")
    else:
        for user in DEFAULT_USERS:
            data = {k: v for k, v in user.items() if k != "password"}
            data["hashed_password"] = get_password_hash(user["password"])
            await storage.create_user(data)
        logger.info(f"Added {len(DEFAULT_USERS)} default users")
