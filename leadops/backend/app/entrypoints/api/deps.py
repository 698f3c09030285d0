# app/entrypoints/api/deps.py
from __future__ import annotations

from fastapi import Header, HTTPException

from ...adapters.clients.processor import ProcessorClient
from ...adapters.rpc import RpcRegistry, build_store_registry
from ...config import settings

_STORE_RPC: RpcRegistry | None = None


def require_api_key(x_api_key: str | None = Header(default=None, alias="X-API-Key")) -> None:
    if settings.API_KEY:
        if not x_api_key or x_api_key != settings.API_KEY:
            raise HTTPException(status_code=401, detail="Invalid API key")


def require_user_id(x_user_id: str | None = Header(default=None, alias="X-User-Id")) -> str:
    # identity comes from the caller on every request, never from process state
    if not x_user_id or not x_user_id.strip():
        raise HTTPException(status_code=401, detail="Not signed in.")
    return x_user_id.strip()


def get_rpc() -> RpcRegistry:
    global _STORE_RPC
    if _STORE_RPC is None:
        _STORE_RPC = build_store_registry(settings.STORE_UNSENT_LEADS_RPC)
    return _STORE_RPC


def get_processor() -> ProcessorClient:
    return ProcessorClient()
