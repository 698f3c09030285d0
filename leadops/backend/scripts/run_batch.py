from __future__ import annotations

import argparse
import asyncio
import logging
import sys

from app.adapters.clients.processor import ProcessorClient
from app.adapters.repos.credentials import SqlCredentialSelector
from app.adapters.repos.leads import SqlLeadSource
from app.adapters.rpc import build_store_registry
from app.config import settings
from app.db import async_session
from app.domain.errors import LeadOpsError
from app.domain.presets import PRESETS, get_preset
from app.domain.types import BatchRun
from app.service_layer.batch import run_batch
from app.service_layer.prompts import get_prompt, to_prompt_config


def _quiet_logging() -> None:
    # Root defaults
    logging.basicConfig(
        level=logging.INFO,
        format="%(levelname)s:%(name)s:%(message)s",
    )

    # Quiet the usual offenders
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy").setLevel(logging.WARNING)


def _print_progress(run: BatchRun) -> None:
    print(f"Total: {run.total} | Success: {run.success} | Failed: {run.failed}", flush=True)


async def main() -> int:
    parser = argparse.ArgumentParser(description="Send a user's unsent leads to the scoring/messaging processor")
    parser.add_argument("--user", required=True)
    src = parser.add_mutually_exclusive_group(required=True)
    src.add_argument("--preset", choices=[k for k in PRESETS if k != "custom"])
    src.add_argument("--prompt-id", type=int, help="Saved prompt configuration id")
    parser.add_argument("--processor-url", default=None, help=f"default: {settings.PROCESSOR_BASE_URL}")
    args = parser.parse_args()

    _quiet_logging()
    log = logging.getLogger(__name__)

    async with async_session() as session:
        if args.prompt_id is not None:
            rec = await get_prompt(session, args.user, args.prompt_id)
            if rec is None:
                log.error("prompt %s not found for user %s", args.prompt_id, args.user)
                return 2
            prompt = to_prompt_config(rec)
        else:
            prompt = get_preset(args.preset).prompt

        try:
            run = await run_batch(
                args.user,
                prompt,
                lead_source=SqlLeadSource(session, build_store_registry(settings.STORE_UNSENT_LEADS_RPC)),
                credentials=SqlCredentialSelector(session),
                processor=ProcessorClient(base_url=args.processor_url),
                on_progress=_print_progress,
            )
        except LeadOpsError as e:
            log.error("batch aborted: %s", e)
            return 1

    if run.info:
        print(run.info)
    _print_progress(run)
    if run.last_error:
        print(f"Last error: {run.last_error}")
    return 0


if __name__ == "__main__":
    sys.exit(asyncio.run(main()))
