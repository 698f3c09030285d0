# app/adapters/repos/credentials.py
from __future__ import annotations

import random

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from ...domain.errors import NoCredentialError, ValidationError
from ...models import ApiCredential


class SqlCredentialSelector:
    """Uniform random pick from the gemini_api pool. Keeps no state between calls."""

    def __init__(self, session: AsyncSession, rng: random.Random | None = None) -> None:
        self.session = session
        self.rng = rng or random.Random()

    async def select_credential(self) -> str:
        keys = (await self.session.execute(select(ApiCredential.api_key))).scalars().all()
        usable = [k for k in keys if k and k.strip()]
        if not usable:
            raise NoCredentialError("No API keys found in gemini_api")
        return self.rng.choice(usable)


async def add_credential(session: AsyncSession, api_key: str) -> ApiCredential:
    """
    Does NOT commit (caller controls transaction boundaries).
    """
    key = (api_key or "").strip()
    if not key:
        raise ValidationError("api_key is required")

    existing = (await session.execute(select(ApiCredential).where(ApiCredential.api_key == key))).scalars().first()
    if existing:
        return existing

    cred = ApiCredential(api_key=key)
    session.add(cred)
    await session.flush()
    return cred
