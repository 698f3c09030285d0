# app/entrypoints/api/routers/health.py
from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends

from ..deps import get_rpc, require_api_key
from ....adapters.rpc import RpcRegistry
from ....config import settings

router = APIRouter(tags=["health"])


@router.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


@router.get("/debug/config", dependencies=[Depends(require_api_key)])
def debug_config(rpc: RpcRegistry = Depends(get_rpc)) -> dict[str, Any]:
    return {
        "ENV": settings.ENV,
        "LEADOPS_DB_URL": settings.LEADOPS_DB_URL,
        "PROCESSOR_URL": settings.PROCESSOR_BASE_URL.rstrip("/") + settings.PROCESSOR_PATH,
        "PROCESSOR_TIMEOUT_S": settings.PROCESSOR_TIMEOUT_S,
        "UNSENT_LEADS_RPC": settings.UNSENT_LEADS_RPC,
        "UNSENT_LEADS_RPC_FALLBACK": settings.UNSENT_LEADS_RPC_FALLBACK,
        "STORE_PROCEDURES": rpc.names(),
        "API_KEY_SET": bool(settings.API_KEY),
    }
