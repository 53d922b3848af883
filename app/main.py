from fastapi import FastAPI, Request, Depends, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from datetime import datetime, timezone
from app.utils.logging_config import setup_logging
from app.utils.logger import get_logger
from app.middleware.logging_middleware import log_requests
from app.exceptions import InvalidInputError, CollaboratorError, TalentScopeException
from app.config import get_settings
from app.dependencies import get_interview_data_client
from app.services.interview_data_client import InterviewDataClient

# Setup logging configuration
setup_logging()
# Get logger instance
logger = get_logger(__name__)

APP_VERSION = "1.0.0"

app = FastAPI(
    title="TalentScope Analytics API",
    description="""
    ## TalentScope Analytics API

    Scoring and analytics engine behind the interview dashboards.

    ### Key Features
    - **Result Scoring**: Time efficiency and weighted composite scores for completed interviews
    - **Interview Analytics**: Interviews by day, status and type with completion rates per type
    - **Results Dashboard**: Scored results, top candidates and headline stats per company
    - **Approval Workflow**: Approve, reject, advance or contact candidates
    """,
    version=APP_VERSION
)

settings = get_settings()

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=settings.cors_config["allow_credentials"],
    allow_methods=settings.cors_config["allow_methods"],
    allow_headers=settings.cors_config["allow_headers"],
    expose_headers=settings.cors_config["expose_headers"],
    max_age=settings.cors_config["max_age"]
)

def load_routers():
    """Load API routers."""
    from app.routers import scoring, analytics, dashboard

    routers = [
        ("scoring", scoring.router),
        ("analytics", analytics.router),
        ("dashboard", dashboard.router)
    ]

    for router_name, router in routers:
        app.include_router(router)
        logger.info(f"Loaded {router_name} router")

load_routers()

@app.middleware("http")
async def logging_middleware(request: Request, call_next):
    return await log_requests(request, call_next)

@app.exception_handler(InvalidInputError)
async def invalid_input_handler(request: Request, exc: InvalidInputError):
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={"detail": str(exc)}
    )

@app.exception_handler(CollaboratorError)
async def collaborator_error_handler(request: Request, exc: CollaboratorError):
    logger.error(f"Collaborator failure on {request.url.path}: {exc}")
    return JSONResponse(
        status_code=status.HTTP_502_BAD_GATEWAY,
        content={"detail": "Upstream interview data service failed, please retry"}
    )

@app.exception_handler(TalentScopeException)
async def talentscope_error_handler(request: Request, exc: TalentScopeException):
    logger.error(f"Unhandled application error on {request.url.path}: {exc}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": str(exc)}
    )

for issue in settings.validate_configuration():
    logger.warning(f"Configuration issue: {issue}")

@app.get("/")
async def root():
    return {
        "message": "TalentScope Analytics API",
        "version": APP_VERSION,
        "docs": "/docs",
        "features": "Interview result scoring and dashboard analytics"
    }

@app.get("/health")
async def health_check():
    """Liveness check; reports configuration problems without calling collaborators."""
    issues = settings.validate_configuration()
    return {
        "status": "healthy" if not issues else "degraded",
        "service": "TalentScope Analytics API",
        "version": APP_VERSION,
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "configuration_issues": issues
    }

@app.get("/ready")
async def readiness_check(client: InterviewDataClient = Depends(get_interview_data_client)):
    """Readiness check: the interview data service must be reachable."""
    reachable = await client.health_check()
    return {
        "ready": reachable,
        "interview_data_service": "healthy" if reachable else "unreachable",
        "timestamp": datetime.now(timezone.utc).isoformat()
    }

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
