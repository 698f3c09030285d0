# app/adapters/clients/processor.py
from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import Any

import httpx

from ...config import settings

log = logging.getLogger(__name__)

INVALID_JSON = "Invalid JSON response"
DEFAULT_LEAD_ERROR = "Failed for a lead"


@dataclass(frozen=True)
class ProcessOutcome:
    ok: bool
    body: dict[str, Any] | None = None
    error: str | None = None
    status_code: int | None = None


def _parse_body(resp: httpx.Response) -> dict[str, Any] | None:
    try:
        data = resp.json()
    except (json.JSONDecodeError, UnicodeDecodeError):
        return None
    return data if isinstance(data, dict) else None


class ProcessorClient:
    """
    POSTs one lead at a time to the scoring/messaging service.

    No retries. A timeout is only set when PROCESSOR_TIMEOUT_S is configured,
    otherwise the httpx default applies.
    """

    def __init__(
        self,
        base_url: str | None = None,
        path: str | None = None,
        *,
        timeout_s: float | None = None,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self.base_url = (base_url or settings.PROCESSOR_BASE_URL).rstrip("/")
        self.path = "/" + (path or settings.PROCESSOR_PATH).lstrip("/")
        self.timeout_s = timeout_s if timeout_s is not None else settings.PROCESSOR_TIMEOUT_S
        self._client = client

    @property
    def url(self) -> str:
        return f"{self.base_url}{self.path}"

    async def _post(self, payload: dict[str, Any]) -> httpx.Response:
        headers = {"Content-Type": "application/json"}
        if self._client is not None:
            return await self._client.post(self.url, json=payload, headers=headers)

        kwargs: dict[str, Any] = {}
        if self.timeout_s is not None:
            kwargs["timeout"] = httpx.Timeout(float(self.timeout_s))
        async with httpx.AsyncClient(**kwargs) as client:
            return await client.post(self.url, json=payload, headers=headers)

    async def process_lead(self, payload: dict[str, Any]) -> ProcessOutcome:
        try:
            resp = await self._post(payload)
        except Exception as e:
            log.warning("process-lead request failed: %r", e)
            return ProcessOutcome(ok=False, error=str(e) or DEFAULT_LEAD_ERROR)

        body = _parse_body(resp)
        if not resp.is_success:
            if body is None:
                err = INVALID_JSON
            else:
                err = str(body.get("error") or "") or f"HTTP {resp.status_code}"
            return ProcessOutcome(ok=False, body=body, error=err, status_code=resp.status_code)

        if body is None:
            return ProcessOutcome(ok=False, error=INVALID_JSON, status_code=resp.status_code)

        return ProcessOutcome(ok=True, body=body, status_code=resp.status_code)
