from datetime import datetime

import pytest

from app.domain.errors import ValidationError
from app.domain.presets import CUSTOM, LEAD_BASIC, PRESETS, get_preset
from app.domain.types import PromptConfig
from app.service_layer.prompts import get_prompt, list_prompts, save_prompt, to_prompt_config

PROMPT = PromptConfig(" about us ", "icp", "write it\n")


@pytest.mark.asyncio
async def test_save_trims_and_get_round_trip(session):
    rec = await save_prompt(session, "u1", PROMPT, tag=" q3 ", name="")
    await session.commit()

    got = await get_prompt(session, "u1", rec.id)

    assert got is not None
    assert got.tag == "q3"
    assert got.name is None
    assert to_prompt_config(got) == PromptConfig("about us", "icp", "write it")


@pytest.mark.asyncio
async def test_prompts_are_scoped_to_their_owner(session):
    rec = await save_prompt(session, "u1", PROMPT)
    await session.commit()
    assert await get_prompt(session, "u2", rec.id) is None
    assert await list_prompts(session, "u2") == []


@pytest.mark.asyncio
async def test_list_newest_first(session):
    first = await save_prompt(session, "u1", PROMPT, name="first")
    second = await save_prompt(session, "u1", PROMPT, name="second")
    first.created_at = datetime(2025, 1, 1)
    second.created_at = datetime(2025, 1, 2)
    await session.commit()

    assert [p.name for p in await list_prompts(session, "u1")] == ["second", "first"]


@pytest.mark.asyncio
async def test_blank_field_is_rejected(session):
    with pytest.raises(ValidationError, match="message_prompt"):
        await save_prompt(session, "u1", PromptConfig("a", "b", "  "))


def test_presets():
    assert set(PRESETS) == {"lead_basic", "lead_firmo_techno", "custom"}
    assert get_preset("lead_basic") is LEAD_BASIC
    assert get_preset("nope") is CUSTOM
    LEAD_BASIC.prompt.validate()
    with pytest.raises(ValidationError):
        CUSTOM.prompt.validate()
