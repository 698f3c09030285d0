# app/entrypoints/api/routers/prompts.py
from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession

from ..deps import require_api_key, require_user_id
from ....db import get_session
from ....domain.errors import ValidationError
from ....domain.presets import PRESETS
from ....domain.types import PromptConfig
from ....models import PromptRecord
from ....schemas import PresetOut, PromptCreate, PromptOut
from ....service_layer.prompts import list_prompts, save_prompt

router = APIRouter(tags=["prompts"], dependencies=[Depends(require_api_key)])


def _out(p: PromptRecord) -> PromptOut:
    return PromptOut(
        id=p.id,
        tag=p.tag,
        name=p.name,
        wildnet_data=p.wildnet_data,
        scoring_criteria_and_icp=p.scoring_criteria_and_icp,
        message_prompt=p.message_prompt,
        created_at=p.created_at,
    )


@router.get("/prompts/presets", response_model=list[PresetOut])
def prompt_presets() -> list[PresetOut]:
    return [
        PresetOut(
            key=p.key,
            label=p.label,
            wildnet_data=p.prompt.wildnet_data,
            scoring_criteria_and_icp=p.prompt.scoring_criteria_and_icp,
            message_prompt=p.prompt.message_prompt,
        )
        for p in PRESETS.values()
    ]


@router.post("/prompts", response_model=PromptOut)
async def create_prompt(
    body: PromptCreate,
    user_id: str = Depends(require_user_id),
    session: AsyncSession = Depends(get_session),
) -> PromptOut:
    prompt = PromptConfig(
        wildnet_data=body.wildnet_data,
        scoring_criteria_and_icp=body.scoring_criteria_and_icp,
        message_prompt=body.message_prompt,
    )
    try:
        rec = await save_prompt(session, user_id, prompt, tag=body.tag, name=body.name)
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))
    await session.commit()
    return _out(rec)


@router.get("/prompts", response_model=list[PromptOut])
async def saved_prompts(
    user_id: str = Depends(require_user_id),
    session: AsyncSession = Depends(get_session),
) -> list[PromptOut]:
    return [_out(p) for p in await list_prompts(session, user_id)]
