import random
from datetime import datetime

import pytest

from app.adapters.repos.credentials import SqlCredentialSelector, add_credential
from app.adapters.repos.leads import SqlLeadSource
from app.adapters.rpc import RpcError, RpcRegistry, build_store_registry
from app.domain.errors import NoCredentialError, SourceError, ValidationError


@pytest.fixture
async def seeded(session, make_lead, make_response):
    session.add_all(
        [
            make_lead("newer", created_at=datetime(2025, 1, 2)),
            make_lead("older", created_at=datetime(2025, 1, 1), name="Old Lead"),
            make_lead("answered", created_at=datetime(2025, 1, 1)),
            make_lead("someone-else", user_id="u2"),
            make_response("answered", created_at=datetime(2025, 1, 3), score=80.0),
        ]
    )
    await session.commit()
    return session


@pytest.mark.asyncio
async def test_primary_procedure_returns_unsent_leads_oldest_first(seeded):
    source = SqlLeadSource(seeded, build_store_registry("fetch_unsent_leads_by_user"))

    leads = await source.fetch_unsent_leads("u1")

    assert [l.lead_id for l in leads] == ["older", "newer"]
    assert leads[0].name == "Old Lead"
    assert leads[0].company_name is None


@pytest.mark.asyncio
async def test_store_with_only_the_alternate_name_still_serves_leads(seeded):
    source = SqlLeadSource(seeded, build_store_registry("fetch_unsent_leads"))

    leads = await source.fetch_unsent_leads("u1")

    assert [l.lead_id for l in leads] == ["older", "newer"]


@pytest.mark.asyncio
async def test_fallback_runs_when_primary_errors(seeded):
    calls = []

    async def broken(session, params):
        calls.append("primary")
        raise RpcError("boom")

    async def alternate(session, params):
        calls.append("fallback")
        return [{"lead_id": "x", "tag": "t"}]

    reg = RpcRegistry()
    reg.register("fetch_unsent_leads_by_user", broken)
    reg.register("fetch_unsent_leads", alternate)

    leads = await SqlLeadSource(seeded, reg).fetch_unsent_leads("u1")

    assert calls == ["primary", "fallback"]
    assert [l.lead_id for l in leads] == ["x"]


@pytest.mark.asyncio
async def test_both_procedures_missing_raises_source_error(seeded):
    source = SqlLeadSource(seeded, build_store_registry("some_other_name"))
    with pytest.raises(SourceError):
        await source.fetch_unsent_leads("u1")


@pytest.mark.asyncio
async def test_user_without_leads_gets_empty_list(seeded):
    source = SqlLeadSource(seeded, build_store_registry("fetch_unsent_leads_by_user"))
    assert await source.fetch_unsent_leads("nobody") == []


@pytest.mark.asyncio
async def test_empty_credential_pool(session):
    with pytest.raises(NoCredentialError):
        await SqlCredentialSelector(session).select_credential()


@pytest.mark.asyncio
async def test_credential_is_drawn_from_the_pool(session):
    for key in ("k1", "k2", "k3"):
        await add_credential(session, key)
    await session.commit()

    selector = SqlCredentialSelector(session, rng=random.Random(7))
    picks = {await selector.select_credential() for _ in range(50)}

    assert picks <= {"k1", "k2", "k3"}
    assert len(picks) > 1


@pytest.mark.asyncio
async def test_add_credential_is_idempotent_and_rejects_blank(session):
    a = await add_credential(session, "k1")
    b = await add_credential(session, " k1 ")
    assert a.id == b.id
    with pytest.raises(ValidationError):
        await add_credential(session, "   ")
