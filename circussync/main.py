# circussync/main.py
from contextlib import asynccontextmanager
import logging

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from circussync.core.config import get_settings
from circussync.core.errors import (
    AuthenticationError,
    AuthorizationError,
    CircusSyncError,
    NotFoundError,
    StorageError,
)
from circussync.database import get_database
from circussync.mock_data import seed_mock_data

# Routers
from circussync.routers.agents import router as agents_router
from circussync.routers.clients import router as clients_router
from circussync.routers.documents import router as documents_router
from circussync.routers.events import router as events_router
from circussync.routers.notifications import router as notifications_router
from circussync.routers.performers import router as performers_router
from circussync.routers.tasks import router as tasks_router
from circussync.routers.users import router as users_router

settings = get_settings()

logging.basicConfig(level=settings.LOG_LEVEL)
logger = logging.getLogger("uvicorn")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    Startup:
      - Select the database backend; seed sample data in mock mode.

    Shutdown:
      - Release the backend client.
    """
    db = get_database()
    if settings.USE_MOCK_DATA:
        logger.info("Startup: using in-memory mock database")
        if settings.SEED_MOCK_DATA:
            await seed_mock_data(db)
    else:
        logger.info("Startup: using Supabase at %s", settings.SUPABASE_URL)
    yield
    await db.close()


app = FastAPI(
    title=settings.PROJECT_NAME,
    version="0.1.0",
    lifespan=lifespan,
)


app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# --- Domain errors -> HTTP ---

_STATUS_FOR_ERROR: list[tuple[type[CircusSyncError], int]] = [
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (AuthorizationError, status.HTTP_403_FORBIDDEN),
    (AuthenticationError, status.HTTP_401_UNAUTHORIZED),
    (StorageError, status.HTTP_503_SERVICE_UNAVAILABLE),
]


@app.exception_handler(CircusSyncError)
async def circussync_error_handler(request: Request, exc: CircusSyncError) -> JSONResponse:
    code = next(
        (c for cls, c in _STATUS_FOR_ERROR if isinstance(exc, cls)),
        status.HTTP_500_INTERNAL_SERVER_ERROR,
    )
    if code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
    return JSONResponse(status_code=code, content={"detail": exc.message})


# Versioned API prefix, e.g. /api/v1
app.include_router(users_router, prefix=settings.API_V1_STR)
app.include_router(clients_router, prefix=settings.API_V1_STR)
app.include_router(performers_router, prefix=settings.API_V1_STR)
app.include_router(events_router, prefix=settings.API_V1_STR)
app.include_router(agents_router, prefix=settings.API_V1_STR)
app.include_router(tasks_router, prefix=settings.API_V1_STR)
app.include_router(notifications_router, prefix=settings.API_V1_STR)
app.include_router(documents_router, prefix=settings.API_V1_STR)


@app.get("/")
def root():
    """Health check endpoint."""
    return {"status": "ok", "service": "circussync-backend"}
