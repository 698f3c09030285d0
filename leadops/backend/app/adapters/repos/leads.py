# app/adapters/repos/leads.py
from __future__ import annotations

import logging
from typing import Any

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from ...config import settings
from ...domain.errors import SourceError, RowIngestError
from ...domain.types import Lead
from ...models import LeadRecord
from ..rpc import RpcError, RpcRegistry

log = logging.getLogger(__name__)


class LeadRepository:
    def __init__(self, session: AsyncSession):
        self.session = session

    async def insert_lead(self, *, row_number: int, **fields: Any) -> LeadRecord:
        """
        Insert and commit one lead on its own, like a single store insert call.
        A rejected row is rolled back alone and surfaces as RowIngestError.
        """
        rec = LeadRecord(**fields)
        self.session.add(rec)
        try:
            await self.session.commit()
        except IntegrityError as e:
            await self.session.rollback()
            raise RowIngestError(row_number, f"Lead {fields.get('lead_id')} already exists") from e
        except SQLAlchemyError as e:
            await self.session.rollback()
            raise RowIngestError(row_number, str(getattr(e, "orig", None) or e) or "Insert failed") from e
        return rec


class SqlLeadSource:
    """
    Unsent leads for a user through the store's named procedure.

    The procedure name differs between deployments, so the documented name is
    tried first and the alternate one only if the store rejects it.
    """

    def __init__(
        self,
        session: AsyncSession,
        rpc: RpcRegistry,
        *,
        primary: str | None = None,
        fallback: str | None = None,
    ) -> None:
        self.session = session
        self.rpc = rpc
        self.primary = primary or settings.UNSENT_LEADS_RPC
        self.fallback = fallback or settings.UNSENT_LEADS_RPC_FALLBACK

    async def fetch_unsent_leads(self, user_id: str) -> list[Lead]:
        params = {"_user_id": user_id}
        try:
            rows = await self.rpc.call(self.session, self.primary, params)
        except RpcError as first:
            log.warning("unsent leads: %s failed (%s), trying %s", self.primary, first, self.fallback)
            await self.session.rollback()
            try:
                rows = await self.rpc.call(self.session, self.fallback, params)
            except RpcError as second:
                raise SourceError(str(second)) from second

        return [Lead.from_row(r) for r in rows or []]
