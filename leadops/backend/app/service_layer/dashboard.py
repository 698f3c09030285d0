# app/service_layer/dashboard.py
from __future__ import annotations

import operator
from dataclasses import dataclass, field
from datetime import date, datetime, time, timedelta
from typing import Any, Literal

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from ..adapters.repos.leads import SqlLeadSource
from ..adapters.rpc import RpcRegistry
from ..config import settings
from ..domain.errors import ValidationError
from ..models import LeadRecord, LlmResponse

_SCORE_OPS = {
    ">": operator.gt,
    ">=": operator.ge,
    "=": operator.eq,
    "<=": operator.le,
    "<": operator.lt,
}

_END_OF_DAY = time(23, 59, 59)


def default_window(today: date | None = None, days: int | None = None) -> tuple[date, date]:
    """Last N days ending today (UTC), inclusive."""
    today = today or datetime.utcnow().date()
    days = days or settings.DASHBOARD_WINDOW_DAYS
    return today - timedelta(days=days - 1), today


@dataclass
class DashboardFilters:
    date_from: date | None = None
    date_to: date | None = None
    tags: list[str] | None = None
    should_contact_only: bool = False
    score_op: Literal[">", ">=", "=", "<=", "<"] | None = None
    score_value: float | None = None
    location_substr: str | None = None
    sort_dir: Literal["asc", "desc"] = "desc"
    page: int = 1
    page_size: int = field(default_factory=lambda: settings.DASHBOARD_PAGE_SIZE)

    def window(self) -> tuple[datetime, datetime]:
        start, end = default_window()
        d_from = self.date_from or start
        d_to = self.date_to or end
        return datetime.combine(d_from, time.min), datetime.combine(d_to, _END_OF_DAY)

    def check(self) -> None:
        if self.score_op is not None and self.score_op not in _SCORE_OPS:
            raise ValidationError(f"Invalid score operator: {self.score_op}")
        if self.sort_dir not in ("asc", "desc"):
            raise ValidationError(f"Invalid sort direction: {self.sort_dir}")
        if self.page < 1 or self.page_size < 1:
            raise ValidationError("page and page_size must be >= 1")


def _row(resp: LlmResponse, lead: LeadRecord | None) -> dict[str, Any]:
    return {
        "created_at": resp.created_at,
        "lead_id": resp.lead_id,
        "tag": lead.tag if lead else None,
        "name": lead.name if lead else None,
        "title": lead.title if lead else None,
        "company_name": lead.company_name if lead else None,
        "location": lead.location if lead else None,
        "score": resp.score,
        "should_contact": resp.should_contact,
        "subject": resp.subject,
        "message": resp.message,
        "linkedin_url": lead.linkedin_url if lead else None,
    }


async def fetch_dashboard(session: AsyncSession, filters: DashboardFilters) -> list[dict[str, Any]]:
    filters.check()
    start, end = filters.window()

    stmt = (
        select(LlmResponse, LeadRecord)
        .outerjoin(LeadRecord, LeadRecord.lead_id == LlmResponse.lead_id)
        .where(LlmResponse.created_at >= start)
        .where(LlmResponse.created_at <= end)
    )

    if filters.tags:
        stmt = stmt.where(LeadRecord.tag.in_(filters.tags))
    if filters.should_contact_only:
        stmt = stmt.where(LlmResponse.should_contact.is_(True))
    if filters.score_op is not None and filters.score_value is not None:
        stmt = stmt.where(_SCORE_OPS[filters.score_op](LlmResponse.score, filters.score_value))
    if filters.location_substr and filters.location_substr.strip():
        stmt = stmt.where(LeadRecord.location.ilike(f"%{filters.location_substr.strip()}%"))

    if filters.sort_dir == "asc":
        stmt = stmt.order_by(LlmResponse.created_at.asc(), LlmResponse.id.asc())
    else:
        stmt = stmt.order_by(LlmResponse.created_at.desc(), LlmResponse.id.desc())

    stmt = stmt.offset((filters.page - 1) * filters.page_size).limit(filters.page_size)

    rows = (await session.execute(stmt)).all()
    return [_row(resp, lead) for resp, lead in rows]


async def distinct_tags(session: AsyncSession, date_from: date | None = None, date_to: date | None = None) -> list[str]:
    """Tags of leads that got a response inside the window, sorted."""
    start, end = DashboardFilters(date_from=date_from, date_to=date_to).window()
    stmt = (
        select(LeadRecord.tag)
        .join(LlmResponse, LlmResponse.lead_id == LeadRecord.lead_id)
        .where(LlmResponse.created_at >= start)
        .where(LlmResponse.created_at <= end)
        .distinct()
    )
    tags = (await session.execute(stmt)).scalars().all()
    return sorted({t.strip() for t in tags if t is not None and t.strip()})


async def count_unsent(session: AsyncSession, rpc: RpcRegistry, user_id: str) -> int:
    leads = await SqlLeadSource(session, rpc).fetch_unsent_leads(user_id)
    return len(leads)
