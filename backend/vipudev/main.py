"""Main FastAPI application."""

import logging
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from vipudev.api.deps import require_session
from vipudev.api.routes import (
    assistant,
    auth,
    chat,
    executions,
    projects,
    sandbox,
    tools,
    config as config_routes,
)
from vipudev.core.config import settings
from vipudev.core.storage.database import close_db, init_db

logging.basicConfig(
    level=logging.DEBUG if settings.debug else logging.INFO,
    format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    logger.info("Initializing database...")
    await init_db()
    if not settings.llm_configured:
        logger.warning("OPENAI_API_KEY is not set; assistant and image routes will return 500")

    yield

    logger.info("Closing database connections...")
    await close_db()
    logger.info("Application shutdown complete")


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Report malformed request data as 400 with the field errors."""
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": jsonable_encoder(exc.errors())},
    )


async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Internal server error"},
    )


def create_app() -> FastAPI:
    app = FastAPI(
        title=settings.app_name,
        description="Backend API for the VipuDev.AI dashboard",
        version="0.1.0",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)

    app.include_router(auth.router, prefix="/api")

    protected = [Depends(require_session)]
    for module in (projects, chat, executions, config_routes, assistant, sandbox, tools):
        app.include_router(module.router, prefix="/api", dependencies=protected)

    @app.get("/health")
    async def health():
        """Health check endpoint."""
        return {"status": "healthy"}

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "vipudev.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )
