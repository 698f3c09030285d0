# app/entrypoints/api/routers/credentials.py
from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession

from ..deps import require_api_key
from ....db import get_session
from ....adapters.repos.credentials import add_credential
from ....domain.errors import ValidationError
from ....schemas import CredentialCreate, CredentialOut

router = APIRouter(tags=["credentials"], dependencies=[Depends(require_api_key)])


@router.post("/credentials", response_model=CredentialOut)
async def create_credential(
    body: CredentialCreate,
    session: AsyncSession = Depends(get_session),
) -> CredentialOut:
    try:
        cred = await add_credential(session, body.api_key)
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))
    await session.commit()
    # never echo the key back
    return CredentialOut(id=cred.id)
