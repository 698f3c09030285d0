import pytest

from app.domain.lead_ids import extract_lead_id


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("https://www.linkedin.com/in/janedoe123?trk=x", "janedoe123"),
        ("https://www.linkedin.com/in/sam-growth/", "sam-growth"),
        ("https://www.linkedin.com/in/ACoAAB52FMgB3mqH5YbMWQTwnJnYxyBzqr72gdE", "ACoAAB52FMgB3mqH5YbMWQTwnJnYxyBzqr72gdE"),
        ("  ACoAAB52FMgB?trk=example  ", "ACoAAB52FMgB"),
        ("jane_doe-99", "jane_doe-99"),
        ("https://www.linkedin.com/company/acme/", "acme"),
        ("linkedin.com/in/abc?x=1", "abc"),
        ("www.linkedin.com/in/abc", "abc"),
        ("not a url?x=1", "not a url"),
        ("http:foo", ""),
        ("https:www.linkedin.com/in/jane?trk=x", "jane"),
        ("", ""),
        ("   ", ""),
        (None, ""),
    ],
)
def test_extract_lead_id(raw, expected):
    assert extract_lead_id(raw) == expected


@pytest.mark.parametrize(
    "raw",
    [
        "https://www.linkedin.com/in/janedoe123?trk=x",
        "https://www.linkedin.com/in/sam-growth/",
        "ACoAAB52FMgB?trk=example",
        "linkedin.com/in/abc?x=1",
    ],
)
def test_derived_id_is_a_fixed_point(raw):
    lead_id = extract_lead_id(raw)
    assert extract_lead_id(lead_id) == lead_id
