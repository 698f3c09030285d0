# app/entrypoints/api/routers/dashboard.py
from __future__ import annotations

from datetime import date
from typing import Literal

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.ext.asyncio import AsyncSession

from ..deps import require_api_key
from ....db import get_session
from ....config import settings
from ....domain.errors import ValidationError
from ....schemas import DashboardRow
from ....service_layer.dashboard import DashboardFilters, distinct_tags, fetch_dashboard

router = APIRouter(tags=["dashboard"], dependencies=[Depends(require_api_key)])


@router.get("/dashboard", response_model=list[DashboardRow])
async def dashboard(
    date_from: date | None = Query(None),
    date_to: date | None = Query(None),
    tags: list[str] | None = Query(None),
    should_contact_only: bool = Query(False),
    score_op: Literal[">", ">=", "=", "<=", "<"] | None = Query(None),
    score_value: float | None = Query(None),
    location: str | None = Query(None, description="Case-insensitive substring"),
    sort_dir: Literal["asc", "desc"] = Query("desc"),
    page: int = Query(1, ge=1),
    page_size: int = Query(settings.DASHBOARD_PAGE_SIZE, ge=1, le=1000),
    session: AsyncSession = Depends(get_session),
) -> list[DashboardRow]:
    filters = DashboardFilters(
        date_from=date_from,
        date_to=date_to,
        tags=tags or None,
        should_contact_only=should_contact_only,
        score_op=score_op,
        score_value=score_value,
        location_substr=location,
        sort_dir=sort_dir,
        page=page,
        page_size=page_size,
    )
    try:
        rows = await fetch_dashboard(session, filters)
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return [DashboardRow(**r) for r in rows]


@router.get("/dashboard/tags", response_model=list[str])
async def dashboard_tags(
    date_from: date | None = Query(None),
    date_to: date | None = Query(None),
    session: AsyncSession = Depends(get_session),
) -> list[str]:
    return await distinct_tags(session, date_from, date_to)
