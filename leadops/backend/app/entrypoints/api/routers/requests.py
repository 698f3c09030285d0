# app/entrypoints/api/routers/requests.py
from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession

from ..deps import require_api_key, require_user_id
from ....db import get_session
from ....domain.errors import ValidationError
from ....domain.policies import RequestDraft
from ....models import ScrapeRequest
from ....schemas import RequestCreate, RequestOut
from ....service_layer.requests import list_requests, submit_request

router = APIRouter(tags=["requests"], dependencies=[Depends(require_api_key)])


def _out(r: ScrapeRequest) -> RequestOut:
    return RequestOut(
        request_id=r.request_id,
        created_at=r.created_at,
        keywords=r.keywords,
        search_url=r.search_url,
        tag=r.tag,
        load_time=r.load_time,
        is_fulfilled=r.is_fulfilled,
        scrape_likes=r.scrape_likes,
    )


@router.post("/requests", response_model=RequestOut)
async def create_request(
    body: RequestCreate,
    user_id: str = Depends(require_user_id),
    session: AsyncSession = Depends(get_session),
) -> RequestOut:
    draft = RequestDraft(
        keywords=body.keywords,
        search_url=body.search_url,
        tag=body.tag,
        load_time=body.load_time,
        scrape_likes=body.scrape_likes,
    )
    try:
        req = await submit_request(session, user_id, draft)
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))
    await session.commit()
    return _out(req)


@router.get("/requests", response_model=list[RequestOut])
async def request_history(
    user_id: str = Depends(require_user_id),
    session: AsyncSession = Depends(get_session),
) -> list[RequestOut]:
    rows = await list_requests(session, user_id)
    return [_out(r) for r in rows]
