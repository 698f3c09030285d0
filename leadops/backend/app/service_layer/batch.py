# app/service_layer/batch.py
from __future__ import annotations

import logging
from typing import Any, Callable, Protocol

from ..adapters.clients.processor import DEFAULT_LEAD_ERROR, ProcessOutcome
from ..domain.errors import PerLeadError, ValidationError
from ..domain.types import BatchRun, Lead, PromptConfig

log = logging.getLogger(__name__)

NOTHING_TO_DO = "No unsent leads for this user."


class LeadSource(Protocol):
    async def fetch_unsent_leads(self, user_id: str) -> list[Lead]:
        ...


class CredentialSelector(Protocol):
    async def select_credential(self) -> str:
        ...


class LeadProcessor(Protocol):
    async def process_lead(self, payload: dict[str, Any]) -> ProcessOutcome:
        ...


def build_payload(api_key: str, prompt: PromptConfig, lead: Lead) -> dict[str, Any]:
    return {
        "api_key": api_key,
        "wildnet_data": prompt.wildnet_data,
        "scoring_criteria_and_icp": prompt.scoring_criteria_and_icp,
        "message_prompt": prompt.message_prompt,
        "lead": lead.to_payload(),
    }


async def _process_one(processor: LeadProcessor, payload: dict[str, Any], lead: Lead) -> dict[str, Any]:
    outcome = await processor.process_lead(payload)
    if not outcome.ok or outcome.body is None:
        raise PerLeadError(lead.lead_id, outcome.error or DEFAULT_LEAD_ERROR)
    return outcome.body


async def run_batch(
    user_id: str,
    prompt: PromptConfig,
    *,
    lead_source: LeadSource,
    credentials: CredentialSelector,
    processor: LeadProcessor,
    on_progress: Callable[[BatchRun], None] | None = None,
) -> BatchRun:
    """
    Send every unsent lead of user_id to the processor, one at a time.

    Fatal (raised before any lead is sent): ValidationError, SourceError,
    NoCredentialError. A failing lead is counted and the loop moves on.
    """
    if not (user_id or "").strip():
        raise ValidationError("Not signed in.")
    prompt.validate()
    prompt = prompt.trimmed()

    run = BatchRun()

    leads = await lead_source.fetch_unsent_leads(user_id)
    if not leads:
        run.info = NOTHING_TO_DO
        log.info("batch user=%s: nothing to do", user_id)
        return run
    run.total = len(leads)

    api_key = await credentials.select_credential()
    log.info("batch user=%s: processing %d leads", user_id, run.total)

    for lead in leads:
        payload = build_payload(api_key, prompt, lead)
        try:
            body = await _process_one(processor, payload, lead)
        except PerLeadError as e:
            log.warning("batch user=%s lead=%s failed: %s", user_id, e.lead_id, e.message)
            run.record_failure(e.message)
        except Exception as e:
            log.exception("batch user=%s lead=%s raised", user_id, lead.lead_id)
            run.record_failure(str(e) or DEFAULT_LEAD_ERROR)
        else:
            run.record_success(body)

        if on_progress is not None:
            on_progress(run)

    log.info(
        "batch user=%s done: total=%d success=%d failed=%d",
        user_id,
        run.total,
        run.success,
        run.failed,
    )
    return run
