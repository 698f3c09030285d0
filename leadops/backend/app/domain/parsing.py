# app/domain/parsing.py
from __future__ import annotations

from typing import Any, Iterable

from .errors import ValidationError

REQUIRED_LEAD_HEADERS: tuple[str, ...] = ("linkedin_url", "bio")


def split_csv_rows(text: str) -> list[list[str]]:
    """
    Character-level CSV splitter.

    - "..." quotes may hold commas and newlines, "" is a literal quote
    - rows end at \\n, \\r\\n or a bare \\r
    - a trailing newline does not produce an empty last row
    """
    rows: list[list[str]] = []
    row: list[str] = []
    field: list[str] = []
    in_quotes = False
    i = 0
    n = len(text)

    while i < n:
        ch = text[i]
        if in_quotes:
            if ch == '"':
                if i + 1 < n and text[i + 1] == '"':
                    field.append('"')
                    i += 2
                    continue
                in_quotes = False
            else:
                field.append(ch)
            i += 1
            continue

        if ch == '"':
            in_quotes = True
        elif ch == ",":
            row.append("".join(field))
            field = []
        elif ch == "\n" or ch == "\r":
            if ch == "\r" and i + 1 < n and text[i + 1] == "\n":
                i += 1
            row.append("".join(field))
            field = []
            rows.append(row)
            row = []
        else:
            field.append(ch)
        i += 1

    row.append("".join(field))
    if len(row) > 1 or row[0] != "":
        rows.append(row)
    return rows


def parse_csv(text: str) -> list[dict[str, str]]:
    """Map every data row onto the (trimmed) header row."""
    rows = split_csv_rows(text)
    if not rows:
        return []

    header = [(h or "").strip() for h in rows[0]]
    out: list[dict[str, str]] = []
    for line in rows[1:]:
        rec: dict[str, str] = {}
        for idx, h in enumerate(header):
            rec[h] = line[idx] if idx < len(line) else ""
        out.append(rec)
    return out


def normalize_record(rec: dict[str, Any]) -> dict[str, Any]:
    return {str(k).lower(): v for k, v in rec.items()}


def require_headers(records: list[dict[str, Any]], required: Iterable[str] = REQUIRED_LEAD_HEADERS) -> None:
    required = tuple(required)
    if not records:
        raise ValidationError("CSV appears empty or invalid. Ensure a header row exists.")

    present = {str(k).lower() for k in records[0].keys()}
    if any(r not in present for r in required):
        raise ValidationError(f"CSV must include headers: {', '.join(required)}")


def clean_text(x: Any) -> str:
    if x is None:
        return ""
    return str(x).strip()
