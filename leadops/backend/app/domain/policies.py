# app/domain/policies.py
from __future__ import annotations

import math
import re
from dataclasses import dataclass

from .errors import ValidationError

_KEYWORD_BREAKS = re.compile(r"[,\n]")
_KEYWORD_GAPS = re.compile(r"\s{2,}")


@dataclass(frozen=True)
class RequestDraft:
    keywords: str | None = None
    search_url: str | None = None
    tag: str | None = None
    load_time: float | int | None = 3
    scrape_likes: bool = True


@dataclass(frozen=True)
class CleanRequest:
    keywords: str | None
    search_url: str | None
    tag: str
    load_time: int
    scrape_likes: bool


def validate_request_draft(draft: RequestDraft) -> CleanRequest:
    """
    Rules for a scraping request:
    - keywords XOR LinkedIn search URL
    - keywords are single-space separated, no commas / line breaks
    - tag required, load_time >= 1
    """
    kw = (draft.keywords or "").strip()
    su = (draft.search_url or "").strip()

    if (kw and su) or (not kw and not su):
        raise ValidationError("Fill either Keywords or LinkedIn Search URL (one only).")
    if kw:
        if _KEYWORD_BREAKS.search(kw):
            raise ValidationError("Remove commas / line breaks. Use single spaces.")
        if _KEYWORD_GAPS.search(kw):
            raise ValidationError("Collapse multiple spaces between keywords.")

    tag = (draft.tag or "").strip()
    if not tag:
        raise ValidationError("Tag is required.")

    try:
        num = float(draft.load_time) if draft.load_time is not None else math.nan
    except (TypeError, ValueError):
        num = math.nan
    if not math.isfinite(num) or num < 1:
        raise ValidationError("Duration must be a number >= 1.")

    return CleanRequest(
        keywords=kw or None,
        search_url=su or None,
        tag=tag,
        load_time=int(num),
        scrape_likes=bool(draft.scrape_likes),
    )
