# app/entrypoints/api/routers/leads.py
from __future__ import annotations

from fastapi import APIRouter, Depends, File, Form, HTTPException, UploadFile
from sqlalchemy.ext.asyncio import AsyncSession

from ..deps import get_rpc, require_api_key, require_user_id
from ....db import get_session
from ....adapters.rpc import RpcRegistry
from ....domain.errors import SourceError, ValidationError
from ....schemas import IngestOut, UnsentCountOut
from ....service_layer.dashboard import count_unsent
from ....service_layer.ingest import ingest_csv

router = APIRouter(tags=["leads"], dependencies=[Depends(require_api_key)])


@router.post("/leads/upload", response_model=IngestOut)
async def upload_leads(
    file: UploadFile = File(...),
    tag: str = Form(""),
    user_id: str = Depends(require_user_id),
    session: AsyncSession = Depends(get_session),
) -> IngestOut:
    if not (file.filename or "").lower().endswith(".csv"):
        raise HTTPException(
            status_code=400,
            detail="Only CSV is supported at the moment. Please upload a .csv file.",
        )

    raw = await file.read()
    try:
        text = raw.decode("utf-8-sig")
    except UnicodeDecodeError:
        raise HTTPException(status_code=400, detail="CSV must be UTF-8 encoded")

    try:
        res = await ingest_csv(session, text, tag=tag, user_id=user_id)
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))

    return IngestOut(total=res.total, success=res.success, failed=res.failed, last_error=res.last_error)


@router.get("/leads/unsent/count", response_model=UnsentCountOut)
async def unsent_count(
    user_id: str = Depends(require_user_id),
    rpc: RpcRegistry = Depends(get_rpc),
    session: AsyncSession = Depends(get_session),
) -> UnsentCountOut:
    try:
        n = await count_unsent(session, rpc, user_id)
    except SourceError as e:
        raise HTTPException(status_code=502, detail=str(e))
    return UnsentCountOut(user_id=user_id, unsent=n)
