# app/service_layer/requests.py
from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from ..config import settings
from ..domain.errors import ValidationError
from ..domain.policies import RequestDraft, validate_request_draft
from ..models import ScrapeRequest


async def submit_request(session: AsyncSession, user_id: str, draft: RequestDraft) -> ScrapeRequest:
    """
    Validate and store a scraping request.
    Does NOT commit (caller controls transaction boundaries).
    """
    if not (user_id or "").strip():
        raise ValidationError("You must be logged in.")

    clean = validate_request_draft(draft)
    req = ScrapeRequest(
        keywords=clean.keywords,
        search_url=clean.search_url,
        request_by=user_id,
        tag=clean.tag,
        load_time=clean.load_time,
        scrape_likes=clean.scrape_likes,
    )
    session.add(req)
    await session.flush()
    return req


async def list_requests(session: AsyncSession, user_id: str, limit: int | None = None) -> list[ScrapeRequest]:
    stmt = (
        select(ScrapeRequest)
        .where(ScrapeRequest.request_by == user_id)
        .order_by(ScrapeRequest.created_at.desc())
        .limit(limit or settings.REQUEST_HISTORY_LIMIT)
    )
    return list((await session.execute(stmt)).scalars().all())
