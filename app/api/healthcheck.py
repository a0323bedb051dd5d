from fastapi import APIRouter
from app.core.config import settings
from app.models.schemas import SetupStatus

router = APIRouter(tags=["Health"])


@router.get("/health")
def healthcheck():
    return {"status": "ok", "message": "AI Trip Planner backend running"}


@router.get("/setup-status", response_model=SetupStatus)
def setup_status():
    """
    Reports which required environment variables are still missing.
    """
    missing = settings.missing_settings()
    return SetupStatus(is_configured=not missing, missing_vars=missing)
