# app/domain/lead_ids.py
from __future__ import annotations

import re
from urllib.parse import urlsplit

_BARE_ID = re.compile(r"[A-Za-z0-9_-]+(\?.*)?")
_SCHEME = re.compile(r"^[A-Za-z][A-Za-z0-9+.-]*:")
_IN_SEGMENT = re.compile(r"/in/([^/?#]+)(?:[/?#]|$)")
_SEGMENT_END = re.compile(r"[/?#]")

# schemes that are only valid URLs with a host
_HOST_SCHEMES = {"http", "https", "ftp", "ws", "wss"}


def _url_path(raw: str) -> str | None:
    """Path of an absolute URL, or None if raw does not parse as one."""
    if not _SCHEME.match(raw):
        return None
    try:
        parts = urlsplit(raw)
    except ValueError:
        return None
    if parts.scheme.lower() in _HOST_SCHEMES and not parts.netloc:
        # 'http:host/path' reads as 'http://host/path'
        rest = raw[len(parts.scheme) + 1 :].lstrip("/\\")
        if not rest:
            return None
        try:
            parts = urlsplit(f"{parts.scheme}://{rest}")
        except ValueError:
            return None
        if not parts.netloc:
            return None
    return parts.path


def extract_lead_id(linkedin: str | None) -> str:
    """
    Canonical lead id from a LinkedIn profile URL or a bare id.

    'https://www.linkedin.com/in/janedoe123?trk=x' -> 'janedoe123'
    'ACoAAB52FMgB?trk=example'                      -> 'ACoAAB52FMgB'
    Empty input gives ''.
    """
    raw = (linkedin or "").strip()
    if not raw:
        return ""

    if "/" not in raw and not raw.startswith("http") and _BARE_ID.fullmatch(raw):
        return raw.split("?")[0]

    path = _url_path(raw)
    if path is not None:
        idx = path.find("/in/")
        if idx >= 0:
            return _SEGMENT_END.split(path[idx + 4 :])[0]
        segments = [s for s in path.split("/") if s]
        last = segments[-1] if segments else ""
        return last.split("?")[0]

    m = _IN_SEGMENT.search(raw)
    if m:
        return m.group(1)
    return raw.split("?")[0]
