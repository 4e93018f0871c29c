import logging
from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from dotenv import load_dotenv
load_dotenv()

from talentviz.api.routes import router
from talentviz.core.config import settings
from talentviz.db.base import Base
from talentviz.db.database import engine, AsyncSessionLocal
from talentviz.repositories.db_storage import DatabaseStorage
from talentviz.repositories.mem_storage import MemStorage
from talentviz.services.seed_service import seed_defaults
import talentviz.models  # noqa: F401


logging.basicConfig(level=logging.INFO)

app = FastAPI(title="TalentViz ATS")

logger = logging.getLogger(__name__)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PATCH", "DELETE", "OPTIONS"],
    allow_headers=["*"],
)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": "Validation error", "errors": jsonable_encoder(exc.errors())},
    )


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Internal server error"},
    )


@app.on_event("startup")
async def on_startup():
    if settings.STORAGE_BACKEND == "memory":
        logger.info("Using in-memory storage")
        app.state.memory_storage = MemStorage()
        if settings.SEED_DEFAULTS:
            await seed_defaults(app.state.memory_storage)
        return

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    if settings.SEED_DEFAULTS:
        async with AsyncSessionLocal() as session:
            await seed_defaults(DatabaseStorage(session))

app.include_router(router)


@app.get("/")
async def root():
    return {"status": "healthy", "message": "TalentViz ATS backend is running"}


@app.get("/health")
async def health_check():
    return {"status": "healthy"}
