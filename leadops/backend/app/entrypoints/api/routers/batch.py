# app/entrypoints/api/routers/batch.py
from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession

from ..deps import get_processor, get_rpc, require_api_key, require_user_id
from ....db import get_session
from ....adapters.clients.processor import ProcessorClient
from ....adapters.repos.credentials import SqlCredentialSelector
from ....adapters.repos.leads import SqlLeadSource
from ....adapters.rpc import RpcRegistry
from ....domain.errors import NoCredentialError, SourceError, ValidationError
from ....domain.types import PromptConfig
from ....schemas import BatchResultOut, BatchRunIn
from ....service_layer.batch import run_batch
from ....service_layer.prompts import get_prompt, to_prompt_config

router = APIRouter(tags=["batch"], dependencies=[Depends(require_api_key)])


@router.post("/batch/run", response_model=BatchResultOut)
async def batch_run(
    body: BatchRunIn,
    user_id: str = Depends(require_user_id),
    rpc: RpcRegistry = Depends(get_rpc),
    processor: ProcessorClient = Depends(get_processor),
    session: AsyncSession = Depends(get_session),
) -> BatchResultOut:
    if body.prompt_id is not None:
        rec = await get_prompt(session, user_id, body.prompt_id)
        if rec is None:
            raise HTTPException(status_code=404, detail="Prompt not found")
        prompt = to_prompt_config(rec)
    else:
        prompt = PromptConfig(
            wildnet_data=body.wildnet_data,
            scoring_criteria_and_icp=body.scoring_criteria_and_icp,
            message_prompt=body.message_prompt,
        )

    try:
        run = await run_batch(
            user_id,
            prompt,
            lead_source=SqlLeadSource(session, rpc),
            credentials=SqlCredentialSelector(session),
            processor=processor,
        )
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except NoCredentialError as e:
        raise HTTPException(status_code=409, detail=str(e))
    except SourceError as e:
        raise HTTPException(status_code=502, detail=str(e))

    return BatchResultOut(**run.as_dict())
