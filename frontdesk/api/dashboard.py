"""Dashboard API endpoint"""

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from frontdesk.api.deps import get_frontdesk
from frontdesk.errors import TransportFailure
from frontdesk.schemas.dashboard import DashboardSummary
from frontdesk.services import Frontdesk

router = APIRouter()


@router.get("", response_model=DashboardSummary)
async def dashboard(frontdesk: Frontdesk = Depends(get_frontdesk)):
    """Today's metrics and recent activity"""
    try:
        return await frontdesk.dashboard.refresh()
    except TransportFailure as e:
        return JSONResponse(
            status_code=503,
            content={"detail": e.message, "retry": "/dashboard"},
        )
