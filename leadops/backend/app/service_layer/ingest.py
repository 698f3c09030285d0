# app/service_layer/ingest.py
from __future__ import annotations

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from ..adapters.repos.leads import LeadRepository
from ..domain.errors import RowIngestError, ValidationError
from ..domain.lead_ids import extract_lead_id
from ..domain.parsing import clean_text, normalize_record, parse_csv, require_headers
from ..domain.types import IngestResult

log = logging.getLogger(__name__)


async def ingest_csv(session: AsyncSession, text: str, *, tag: str, user_id: str) -> IngestResult:
    """
    Bulk-load leads from CSV text (headers: linkedin_url, bio).

    The whole file is rejected up front for a missing tag/user or missing
    headers. After that each row is stored on its own; a bad row is counted
    and the upload carries on.
    """
    tag = (tag or "").strip()
    if not (user_id or "").strip():
        raise ValidationError("You must be logged in.")
    if not tag:
        raise ValidationError("Tag is required for bulk upload.")

    records = parse_csv(text or "")
    require_headers(records)

    repo = LeadRepository(session)
    result = IngestResult(total=len(records))

    for n, rec in enumerate(records, start=1):
        r = normalize_record(rec)
        linkedin_url = clean_text(r.get("linkedin_url"))
        bio = clean_text(r.get("bio"))
        try:
            if not linkedin_url:
                raise RowIngestError(n, "Missing linkedin_url in a row")
            lead_id = extract_lead_id(linkedin_url)
            if not lead_id:
                raise RowIngestError(n, "missing identifier")

            await repo.insert_lead(
                row_number=n,
                lead_id=lead_id,
                linkedin_url=linkedin_url,
                bio=bio,
                tag=tag,
                user_id=user_id,
            )
        except RowIngestError as e:
            log.warning("csv ingest row=%d failed: %s", e.row_number, e.message)
            result.record_failure(e.message)
        else:
            result.success += 1

    log.info(
        "csv ingest user=%s tag=%s: total=%d success=%d failed=%d",
        user_id,
        tag,
        result.total,
        result.success,
        result.failed,
    )
    return result
