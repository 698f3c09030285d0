from __future__ import annotations

import argparse
import asyncio

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.adapters.repos.credentials import add_credential
from app.db import AsyncSessionLocal, engine
from app.domain.lead_ids import extract_lead_id
from app.models import Base, LeadRecord

DEMO_LEADS = [
    {
        "linkedin_url": "https://www.linkedin.com/in/janedoe123?trk=demo",
        "name": "Jane Doe",
        "title": "Founder & CEO",
        "company_name": "ExampleCorp",
        "location": "Austin, TX",
        "bio": "Founder at ExampleCorp; building AI tools.",
    },
    {
        "linkedin_url": "https://www.linkedin.com/in/sam-growth/",
        "name": "Sam Rivera",
        "title": "VP Growth",
        "company_name": "B2B SaaS Co",
        "location": "London, UK",
        "bio": "VP Growth at B2B SaaS; RevOps background.",
    },
]


async def _ensure_schema() -> None:
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def _upsert_lead(session: AsyncSession, user_id: str, tag: str, data: dict) -> None:
    # naive idempotent behavior: uniqueness on lead_id
    lead_id = extract_lead_id(data["linkedin_url"])
    existing = (await session.execute(select(LeadRecord).where(LeadRecord.lead_id == lead_id))).scalars().first()
    if existing:
        existing.user_id = user_id
        existing.tag = tag
        return
    session.add(LeadRecord(lead_id=lead_id, user_id=user_id, tag=tag, **data))
    await session.flush()


async def main() -> None:
    parser = argparse.ArgumentParser()
    parser.add_argument("--user", required=True, help="User id that owns the demo leads")
    parser.add_argument("--tag", default="demo", help="Campaign tag for the demo leads")
    parser.add_argument("--api-key", action="append", default=[], help="Processor API key (repeatable)")
    args = parser.parse_args()

    await _ensure_schema()

    async with AsyncSessionLocal() as session:
        for key in args.api_key:
            await add_credential(session, key)
        for data in DEMO_LEADS:
            await _upsert_lead(session, args.user, args.tag, data)
        await session.commit()

    print(f"Seeded {len(DEMO_LEADS)} demo leads for user={args.user} tag={args.tag}, keys={len(args.api_key)}")


if __name__ == "__main__":
    asyncio.run(main())
