from datetime import date, datetime

import pytest

from app.adapters.rpc import build_store_registry
from app.domain.errors import ValidationError
from app.service_layer.dashboard import (
    DashboardFilters,
    count_unsent,
    default_window,
    distinct_tags,
    fetch_dashboard,
)

WINDOW = {"date_from": date(2025, 3, 1), "date_to": date(2025, 3, 31)}


@pytest.fixture
async def scored(session, make_lead, make_response):
    session.add_all(
        [
            make_lead("a", tag="alpha", location="Berlin, Germany", name="Ann"),
            make_lead("b", tag="beta", location="Austin, TX"),
            make_lead("c", tag="alpha", location="berlin"),
            make_lead("unsent", tag="alpha"),
            make_response("a", datetime(2025, 3, 1, 0, 0, 0), score=90.0, should_contact=True, subject="Hi"),
            make_response("b", datetime(2025, 3, 15, 9, 0, 0), score=40.0, should_contact=False),
            make_response("c", datetime(2025, 3, 31, 23, 59, 59), score=70.0, should_contact=True),
            make_response("old", datetime(2025, 2, 1), score=99.0, should_contact=True),
        ]
    )
    await session.commit()
    return session


@pytest.mark.asyncio
async def test_window_is_inclusive_and_newest_first(scored):
    rows = await fetch_dashboard(scored, DashboardFilters(**WINDOW))

    assert [r["lead_id"] for r in rows] == ["c", "b", "a"]
    assert rows[-1]["name"] == "Ann"
    assert rows[-1]["subject"] == "Hi"
    assert rows[-1]["linkedin_url"] == "https://www.linkedin.com/in/a"


@pytest.mark.asyncio
async def test_ascending_sort(scored):
    rows = await fetch_dashboard(scored, DashboardFilters(sort_dir="asc", **WINDOW))
    assert [r["lead_id"] for r in rows] == ["a", "b", "c"]


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "extra, expected",
    [
        ({"tags": ["alpha"]}, ["c", "a"]),
        ({"should_contact_only": True}, ["c", "a"]),
        ({"score_op": ">=", "score_value": 70}, ["c", "a"]),
        ({"score_op": "<", "score_value": 70}, ["b"]),
        ({"score_op": "=", "score_value": 40}, ["b"]),
        ({"location_substr": " BERLIN "}, ["c", "a"]),
        ({"tags": ["beta"], "should_contact_only": True}, []),
    ],
)
async def test_filters(scored, extra, expected):
    rows = await fetch_dashboard(scored, DashboardFilters(**WINDOW, **extra))
    assert [r["lead_id"] for r in rows] == expected


@pytest.mark.asyncio
async def test_pagination(scored):
    first = await fetch_dashboard(scored, DashboardFilters(page=1, page_size=2, **WINDOW))
    second = await fetch_dashboard(scored, DashboardFilters(page=2, page_size=2, **WINDOW))
    assert [r["lead_id"] for r in first] == ["c", "b"]
    assert [r["lead_id"] for r in second] == ["a"]


@pytest.mark.asyncio
async def test_response_without_lead_still_listed(scored):
    rows = await fetch_dashboard(scored, DashboardFilters(date_from=date(2025, 2, 1), date_to=date(2025, 2, 1)))
    assert len(rows) == 1
    assert rows[0]["lead_id"] == "old"
    assert rows[0]["tag"] is None


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "bad",
    [{"score_op": "!="}, {"sort_dir": "up"}, {"page": 0}, {"page_size": 0}],
)
async def test_invalid_filters(session, bad):
    with pytest.raises(ValidationError):
        await fetch_dashboard(session, DashboardFilters(**bad))


@pytest.mark.asyncio
async def test_distinct_tags_in_window(scored):
    assert await distinct_tags(scored, **WINDOW) == ["alpha", "beta"]
    assert await distinct_tags(scored, date(2025, 3, 2), date(2025, 3, 20)) == ["beta"]


@pytest.mark.asyncio
async def test_count_unsent(scored):
    rpc = build_store_registry("fetch_unsent_leads_by_user")
    assert await count_unsent(scored, rpc, "u1") == 1
    assert await count_unsent(scored, rpc, "u2") == 0


def test_default_window_spans_n_days():
    start, end = default_window(date(2025, 3, 14), 14)
    assert (start, end) == (date(2025, 3, 1), date(2025, 3, 14))
