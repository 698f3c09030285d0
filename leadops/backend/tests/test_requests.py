from datetime import datetime

import pytest

from app.domain.errors import ValidationError
from app.domain.policies import RequestDraft, validate_request_draft
from app.service_layer.requests import list_requests, submit_request


@pytest.mark.parametrize(
    "draft, message",
    [
        (RequestDraft(keywords="ai", search_url="https://linkedin.com/search", tag="t"), "one only"),
        (RequestDraft(keywords="  ", search_url=None, tag="t"), "one only"),
        (RequestDraft(keywords="ai, ml", tag="t"), "commas"),
        (RequestDraft(keywords="ai\nml", tag="t"), "commas"),
        (RequestDraft(keywords="ai  ml", tag="t"), "Collapse"),
        (RequestDraft(keywords="ai", tag=" "), "Tag is required"),
        (RequestDraft(keywords="ai", tag="t", load_time=0), "Duration"),
        (RequestDraft(keywords="ai", tag="t", load_time=None), "Duration"),
        (RequestDraft(keywords="ai", tag="t", load_time=float("inf")), "Duration"),
    ],
)
def test_invalid_drafts(draft, message):
    with pytest.raises(ValidationError, match=message):
        validate_request_draft(draft)


def test_valid_draft_is_trimmed():
    clean = validate_request_draft(RequestDraft(keywords=" salesforce ai architect ", tag=" q3 ", load_time=5))
    assert clean.keywords == "salesforce ai architect"
    assert clean.search_url is None
    assert clean.tag == "q3"
    assert clean.load_time == 5
    assert clean.scrape_likes is True


@pytest.mark.asyncio
async def test_submit_and_list_newest_first(session):
    first = await submit_request(session, "u1", RequestDraft(keywords="ai", tag="t1"))
    second = await submit_request(
        session, "u1", RequestDraft(search_url="https://www.linkedin.com/search/results/people/", tag="t2", scrape_likes=False)
    )
    await submit_request(session, "u2", RequestDraft(keywords="other", tag="t3"))
    first.created_at = datetime(2025, 1, 1)
    second.created_at = datetime(2025, 1, 2)
    await session.commit()

    rows = await list_requests(session, "u1")

    assert [r.tag for r in rows] == ["t2", "t1"]
    assert rows[0].is_fulfilled is False
    assert rows[0].scrape_likes is False
    assert len(rows[0].request_id) == 36


@pytest.mark.asyncio
async def test_submit_requires_user(session):
    with pytest.raises(ValidationError):
        await submit_request(session, "", RequestDraft(keywords="ai", tag="t"))
