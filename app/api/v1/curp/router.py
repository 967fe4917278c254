from fastapi import APIRouter, Depends, HTTPException, status

from app.core.config import Settings, get_settings
from app.core.exceptions import ServiceError
from app.curp.differentiator import Differentiator, get_differentiator

from .schemas import CurpRequest, CurpResponse
from . import service

router = APIRouter(tags=["curp"])


@router.post(
    "/generate_curp",
    response_model=CurpResponse,
    status_code=status.HTTP_200_OK,
)
async def generate_curp(
    payload: CurpRequest,
    differentiator: Differentiator = Depends(get_differentiator),
    app_settings: Settings = Depends(get_settings),
) -> CurpResponse:
    """Derive an 18-character CURP from the submitted personal data."""
    try:
        return service.create_curp(payload, differentiator, app_settings)
    except ServiceError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)
