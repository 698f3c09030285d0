from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from pathlib import Path

from app.db import async_session
from app.domain.errors import ValidationError
from app.service_layer.ingest import ingest_csv


def _quiet_logging() -> None:
    logging.basicConfig(
        level=logging.INFO,
        format="%(levelname)s:%(name)s:%(message)s",
    )
    logging.getLogger("sqlalchemy").setLevel(logging.WARNING)


async def main() -> int:
    parser = argparse.ArgumentParser(description="Bulk-load leads from a CSV (linkedin_url, bio)")
    parser.add_argument("--file", required=True, type=Path)
    parser.add_argument("--tag", required=True)
    parser.add_argument("--user", required=True)
    args = parser.parse_args()

    _quiet_logging()

    text = args.file.read_text(encoding="utf-8-sig")
    async with async_session() as session:
        try:
            res = await ingest_csv(session, text, tag=args.tag, user_id=args.user)
        except ValidationError as e:
            logging.getLogger(__name__).error("%s", e)
            return 2

    print(f"Upload complete. Inserted: {res.success}, Failed: {res.failed}.")
    if res.last_error:
        print(f"Last error: {res.last_error}")
    return 0


if __name__ == "__main__":
    sys.exit(asyncio.run(main()))
