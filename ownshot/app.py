# FILE: ownshot/app.py
"""
FastAPI application entry point for OwnShot enhance backend
Upload, configure per domain, enhance through the image model
"""
import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from ownshot.config import APP_VERSION, get_settings
from ownshot.errors import EnhanceError, ImageGenerationError
from ownshot.middleware.body_limit import BodySizeLimitMiddleware
from ownshot.models.enhance import ErrorResponse
from ownshot.routes import analyze, enhance, health, options, prompt

logger = logging.getLogger(__name__)
settings = get_settings()

logging.basicConfig(
    level=settings.log_level,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for startup/shutdown"""
    logger.info(f"Starting OwnShot enhance backend v{APP_VERSION} ({settings.environment})")

    if not settings.gemini_api_key:
        logger.warning("GEMINI_API_KEY is not set: /enhance and /analyze will answer 503")
    else:
        logger.info(f"Image model: {settings.gemini_image_model}")

    yield

    # Shutdown
    logger.info("Shutting down OwnShot enhance backend")


app = FastAPI(
    title="OwnShot Enhance API",
    description="Domain-aware photo enhancement through a multimodal image model",
    version=APP_VERSION,
    lifespan=lifespan
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
    expose_headers=["X-Correlation-ID"],
)

# Body size limit
app.add_middleware(BodySizeLimitMiddleware, max_size=settings.body_size_limit_mb * 1024 * 1024)


@app.exception_handler(EnhanceError)
async def enhance_error_handler(request: Request, exc: EnhanceError):
    message = exc.message
    if isinstance(exc, ImageGenerationError):
        logger.error(f"Image generation failed: {exc.detail}")
        message = f"{exc.message}: {exc.detail}"
    else:
        logger.warning(f"{exc.category}: {exc.message}")

    return JSONResponse(
        status_code=exc.status_code,
        content=ErrorResponse(error=exc.category, message=message).model_dump()
    )


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    problems = "; ".join(
        f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}"
        for error in exc.errors()
    )
    logger.warning(f"Invalid request to {request.url.path}: {problems}")
    return JSONResponse(
        status_code=400,
        content=ErrorResponse(error="invalid_request", message=problems).model_dump()
    )


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    logger.error(f"Unhandled exception: {exc}", exc_info=True)
    return JSONResponse(
        status_code=500,
        content=ErrorResponse(error="internal_error", message="Internal server error").model_dump()
    )


# Include routers
app.include_router(health.router, prefix="/health", tags=["health"])
app.include_router(enhance.router, prefix="/enhance", tags=["enhance"])
app.include_router(prompt.router, prefix="/prompt", tags=["prompt"])
app.include_router(options.router, prefix="/options", tags=["options"])
app.include_router(analyze.router, prefix="/analyze", tags=["analyze"])


@app.get("/")
async def root():
    """Root endpoint"""
    return {
        "service": "OwnShot Enhance",
        "version": APP_VERSION,
        "status": "active"
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "ownshot.app:app",
        host=settings.backend_host,
        port=settings.backend_port,
        reload=settings.environment == "development"
    )
