from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from engines.risk_matrix import RiskMatrixError
from swms.api import router
from swms.core import get_logger, settings
from swms.core.exceptions import AssessmentProcessingError, InvalidRecordPayloadError
from swms.schemas import HealthResponse

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info(f"Starting SWMS Risk Engine [{settings.app_env}]")
    yield
    logger.info("Shutting down SWMS Risk Engine")


app = FastAPI(
    title="SWMS Risk Assessment Engine",
    version="0.1.0",
    lifespan=lifespan,
)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(InvalidRecordPayloadError)
async def payload_exception_handler(request: Request, exc: InvalidRecordPayloadError):
    logger.warning(f"Rejected payload on {request.url.path}: {exc.message}")
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={"detail": exc.message, "recordIndex": exc.record_index, "errors": exc.errors},
    )


@app.exception_handler(RiskMatrixError)
async def matrix_exception_handler(request: Request, exc: RiskMatrixError):
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={"detail": str(exc)},
    )


@app.exception_handler(AssessmentProcessingError)
async def processing_exception_handler(request: Request, exc: AssessmentProcessingError):
    logger.error(f"Review failed at {exc.stage}: {exc}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Assessment review failed", "stage": exc.stage},
    )


# Global exception handler
@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    logger.error(f"Unhandled exception: {type(exc).__name__}: {exc}")
    content = {"detail": "Internal server error"}
    if settings.is_development:
        content["error"] = type(exc).__name__
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=content,
    )


# Routes
app.include_router(router, prefix="/api")


@app.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    return HealthResponse(status="ok", env=settings.app_env)
