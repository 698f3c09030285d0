# app/entrypoints/fastapi_app.py
from __future__ import annotations

from fastapi import FastAPI

from ..db import engine
from ..models import Base
from .api.routers import batch, credentials, dashboard, health, leads, prompts, requests


def create_app() -> FastAPI:
    app = FastAPI(title="LeadOps - Lead Scoring & Messaging Backend")

    @app.on_event("startup")
    async def _startup() -> None:
        # Single place where DB tables are created in dev.
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    # Routers
    app.include_router(health.router)
    app.include_router(requests.router)
    app.include_router(leads.router)
    app.include_router(batch.router)
    app.include_router(prompts.router)
    app.include_router(dashboard.router)
    app.include_router(credentials.router)

    return app
