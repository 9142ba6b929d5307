# api/app.py

"""
Trade-log Dashboard FastAPI Application Factory
-----------------------------------------------
Builds the app, applies CORS from settings and registers routes.

The API is a thin shell: every request reads the configured source,
runs the loader and the analytics engines, and serializes the result.
"""

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from api.deps.settings import Settings, get_settings
from api.routes import router as api_router
from core.errors import SourceError
from utils.logger import get_logger, log_extra

log = get_logger("tradelog.api")


def create_app(settings: Settings | None = None) -> FastAPI:
    """
    App factory with CORS + router loading.
    """
    settings = settings or get_settings()
    app = FastAPI(
        title="Trade-log Dashboard API",
        version="1.0.0",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_origin_regex=settings.CORS_ORIGIN_REGEX or None,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(SourceError)
    async def source_error_handler(request: Request, exc: SourceError) -> JSONResponse:
        log.error("trade source unavailable", **log_extra(path=request.url.path, reason=str(exc)))
        return JSONResponse(status_code=503, content={"success": False, "error": str(exc)})

    app.include_router(api_router)
    return app


# CLI execution / uvicorn entrypoint
app = create_app()
