"""IdeaHub FastAPI application."""

import logging

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from ideahub.api.drafts import router as drafts_router
from ideahub.api.evaluations import router as evaluations_router
from ideahub.api.health import router as health_router
from ideahub.api.i18n import router as i18n_router
from ideahub.api.profiles import router as profiles_router
from ideahub.api.search import router as search_router
from ideahub.config import settings
from ideahub.exceptions import IdeaHubError

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

ERROR_STATUS = {
    "NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "FORBIDDEN": status.HTTP_403_FORBIDDEN,
    "FETCH_FAILED": status.HTTP_502_BAD_GATEWAY,
    "UNSUPPORTED_TYPE": status.HTTP_422_UNPROCESSABLE_ENTITY,
    "FILE_TOO_LARGE": status.HTTP_422_UNPROCESSABLE_ENTITY,
}

app = FastAPI(
    title="IdeaHub - Innovation Ideas Service",
    description="Submits, evaluates and tracks innovation ideas with bilingual support",
    version="0.1.0",
    docs_url="/docs",
    redoc_url="/redoc",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health_router, tags=["Health"])
app.include_router(drafts_router, prefix="/v1", tags=["Drafts"])
app.include_router(search_router, prefix="/v1", tags=["Search"])
app.include_router(evaluations_router, prefix="/v1", tags=["Evaluations"])
app.include_router(profiles_router, prefix="/v1", tags=["Profiles"])
app.include_router(i18n_router, prefix="/v1", tags=["I18n"])


@app.exception_handler(IdeaHubError)
async def ideahub_error_handler(request: Request, exc: IdeaHubError):
    """Domain errors become JSON responses; the UI shows them as a toast."""
    status_code = ERROR_STATUS.get(exc.code, status.HTTP_500_INTERNAL_SERVER_ERROR)
    logger.info("%s %s -> %s %s", request.method, request.url.path, status_code, exc.code)
    return JSONResponse(status_code=status_code, content={"detail": exc.to_dict()})


@app.exception_handler(SQLAlchemyError)
async def store_error_handler(request: Request, exc: SQLAlchemyError):
    logger.error("Data store error on %s %s", request.method, request.url.path, exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_502_BAD_GATEWAY,
        content={"detail": {"code": "FETCH_FAILED", "message": "Data store request failed", "details": {}}},
    )


@app.get("/")
async def root():
    """Root endpoint."""
    return {"service": "IdeaHub", "version": "0.1.0", "docs": "/docs"}
