# service/app.py

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from typing import Optional
import logging

from resume_builder import __version__
from resume_builder.importer import ResumeImportError
from resume_builder.ai.client import AITextClient
from resume_builder.ai.exceptions import AIError, ModelNotFoundError
from service.config import Settings, settings as default_settings
from service.api import ats, ai

logger = logging.getLogger(__name__)


def create_app(
    settings: Optional[Settings] = None,
    ai_client: Optional[AITextClient] = None
) -> FastAPI:
    """
    Build the API application

    Args:
        settings: Service settings (module defaults if None)
        ai_client: Shared AI client (built from settings if None)
    """
    settings = settings or default_settings

    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format='%(asctime)s %(levelname)s %(name)s: %(message)s'
    )

    app = FastAPI(
        title=settings.app_name,
        version=__version__,
        debug=settings.debug,
        docs_url="/api/docs" if settings.debug else None,
        redoc_url="/api/redoc" if settings.debug else None,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origin_list,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # One AI configuration and client for the life of the process
    ai_config = settings.ai_config()
    app.state.settings = settings
    app.state.ai_client = ai_client or AITextClient(ai_config)
    logger.info(f"AI provider: {ai_config.provider}, model: {ai_config.resolved_model()}")

    app.include_router(ats.router, prefix="/api", tags=["ats"])
    app.include_router(ai.router, prefix="/api", tags=["ai"])

    # ============= Health Check =============

    @app.get("/health")
    async def health_check():
        """Health check endpoint"""
        return {
            "status": "healthy",
            "app": settings.app_name,
            "version": __version__,
            "ai_provider": app.state.ai_client.config.provider,
        }

    # ============= Error Handlers =============

    @app.exception_handler(AIError)
    async def ai_error_handler(request: Request, exc: AIError):
        """Report AI failures with their status"""
        logger.error(f"Error in {request.url.path}: {exc.message}")
        content = {"error": exc.message}
        if isinstance(exc, ModelNotFoundError):
            content["availableModels"] = exc.available_models
        return JSONResponse(status_code=exc.status_code, content=content)

    @app.exception_handler(ResumeImportError)
    async def import_error_handler(request: Request, exc: ResumeImportError):
        logger.error(f"Error in {request.url.path}: {exc}")
        return JSONResponse(status_code=400, content={"error": str(exc)})

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "service.app:app",
        host=default_settings.host,
        port=default_settings.port,
        reload=default_settings.debug
    )
