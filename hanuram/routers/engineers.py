"""
Engineer directory routes
"""
import logging
from pathlib import Path
from typing import List

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse, PlainTextResponse
from fastapi.templating import Jinja2Templates

from hanuram.config import get_settings
from hanuram.dependencies import get_engineer_directory, get_profile_cache
from hanuram.exceptions import NotFoundError
from hanuram.schemas.engineer import EngineerSummary
from hanuram.services.engineer_directory import EngineerDirectory
from hanuram.services.profile_cache import ProfileCache

router = APIRouter()
summary_router = APIRouter()
logger = logging.getLogger(__name__)

templates = Jinja2Templates(directory=str(Path(__file__).resolve().parents[1] / "templates"))


@router.get("/api/main", response_model=List[EngineerSummary])
@summary_router.get("/api/main", response_model=List[EngineerSummary])
async def list_engineers(directory: EngineerDirectory = Depends(get_engineer_directory)):
    """Engineer cards for the listing page"""
    return directory.list_summaries()


@router.get("/{engineer_id}", response_class=HTMLResponse)
async def engineer_detail(
    engineer_id: str,
    request: Request,
    cache: ProfileCache = Depends(get_profile_cache),
):
    """Render one engineer profile"""
    try:
        engineer = await cache.get_detail(engineer_id)
    except NotFoundError as exc:
        return PlainTextResponse(exc.message, status_code=exc.status_code)

    return templates.TemplateResponse(
        request,
        "engineer.html",
        {"engineer": engineer, "site_name": get_settings().site_name},
    )
