# app/adapters/rpc.py
from __future__ import annotations

from typing import Any, Awaitable, Callable

from sqlalchemy import exists, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from ..models import LeadRecord, LlmResponse

Procedure = Callable[[AsyncSession, dict[str, Any]], Awaitable[list[dict[str, Any]]]]


class RpcError(RuntimeError):
    pass


class RpcRegistry:
    """
    Named stored procedures, the way the hosted store exposes them.
    Which names exist depends on the deployment.
    """

    def __init__(self) -> None:
        self._procs: dict[str, Procedure] = {}

    def register(self, name: str, proc: Procedure) -> None:
        self._procs[name] = proc

    def names(self) -> list[str]:
        return sorted(self._procs)

    async def call(self, session: AsyncSession, name: str, params: dict[str, Any]) -> list[dict[str, Any]]:
        proc = self._procs.get(name)
        if proc is None:
            raise RpcError(f"Could not find the function {name}")
        try:
            return await proc(session, params)
        except SQLAlchemyError as e:
            raise RpcError(f"{name} failed: {e}") from e


def lead_row(lead: LeadRecord) -> dict[str, Any]:
    return {
        "lead_id": lead.lead_id,
        "tag": lead.tag,
        "name": lead.name,
        "title": lead.title,
        "location": lead.location,
        "company_name": lead.company_name,
        "experience": lead.experience,
        "skills": lead.skills,
        "bio": lead.bio,
        "profile_url": lead.profile_url,
        "linkedin_url": lead.linkedin_url,
        "company_page_url": lead.company_page_url,
        "user_id": lead.user_id,
    }


async def unsent_leads_for_user(session: AsyncSession, params: dict[str, Any]) -> list[dict[str, Any]]:
    """Leads of _user_id with no llm_response row yet, oldest first."""
    user_id = params.get("_user_id")
    answered = exists().where(LlmResponse.lead_id == LeadRecord.lead_id)
    stmt = (
        select(LeadRecord)
        .where(LeadRecord.user_id == user_id)
        .where(~answered)
        .order_by(LeadRecord.created_at.asc(), LeadRecord.id.asc())
    )
    rows = (await session.execute(stmt)).scalars().all()
    return [lead_row(r) for r in rows]


def build_store_registry(unsent_leads_name: str) -> RpcRegistry:
    reg = RpcRegistry()
    reg.register(unsent_leads_name, unsent_leads_for_user)
    return reg
