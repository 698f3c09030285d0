# app/service_layer/prompts.py
from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from ..domain.types import PromptConfig
from ..models import PromptRecord


async def save_prompt(
    session: AsyncSession,
    user_id: str,
    prompt: PromptConfig,
    *,
    tag: str | None = None,
    name: str | None = None,
) -> PromptRecord:
    prompt.validate()
    prompt = prompt.trimmed()

    rec = PromptRecord(
        user_id=user_id,
        tag=(tag or "").strip() or None,
        name=(name or "").strip() or None,
        wildnet_data=prompt.wildnet_data,
        scoring_criteria_and_icp=prompt.scoring_criteria_and_icp,
        message_prompt=prompt.message_prompt,
    )
    session.add(rec)
    await session.flush()
    return rec


async def list_prompts(session: AsyncSession, user_id: str) -> list[PromptRecord]:
    stmt = (
        select(PromptRecord)
        .where(PromptRecord.user_id == user_id)
        .order_by(PromptRecord.created_at.desc(), PromptRecord.id.desc())
    )
    return list((await session.execute(stmt)).scalars().all())


async def get_prompt(session: AsyncSession, user_id: str, prompt_id: int) -> PromptRecord | None:
    stmt = select(PromptRecord).where(PromptRecord.id == prompt_id).where(PromptRecord.user_id == user_id)
    return (await session.execute(stmt)).scalars().first()


def to_prompt_config(rec: PromptRecord) -> PromptConfig:
    return PromptConfig(
        wildnet_data=rec.wildnet_data,
        scoring_criteria_and_icp=rec.scoring_criteria_and_icp,
        message_prompt=rec.message_prompt,
    )
