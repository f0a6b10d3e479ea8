# expense_api/api/v1/health.py
from fastapi import APIRouter
from expense_api import __version__
from expense_api.schemas.simple import Health

router = APIRouter(tags=["health"])


@router.get("/health", response_model=Health)
def health():
    """Liveness check; reports the running API version."""
    return Health(status="ok", version=__version__)
