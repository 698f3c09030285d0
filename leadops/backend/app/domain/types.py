# app/domain/types.py
from __future__ import annotations

from dataclasses import dataclass, fields, replace
from typing import Any

from .errors import ValidationError

LEAD_FIELDS: tuple[str, ...] = (
    "lead_id",
    "tag",
    "name",
    "title",
    "location",
    "company_name",
    "experience",
    "skills",
    "bio",
    "profile_url",
    "linkedin_url",
    "company_page_url",
)


@dataclass(frozen=True)
class Lead:
    lead_id: str | None
    tag: str | None = None
    name: str | None = None
    title: str | None = None
    location: str | None = None
    company_name: str | None = None
    experience: str | None = None
    skills: str | None = None
    bio: str | None = None
    profile_url: str | None = None
    linkedin_url: str | None = None
    company_page_url: str | None = None

    @classmethod
    def from_row(cls, row: dict[str, Any]) -> "Lead":
        return cls(**{k: row.get(k) for k in LEAD_FIELDS})

    def to_payload(self) -> dict[str, Any]:
        # every key present, absent values as None
        return {k: getattr(self, k) for k in LEAD_FIELDS}


@dataclass(frozen=True)
class PromptConfig:
    wildnet_data: str
    scoring_criteria_and_icp: str
    message_prompt: str

    def validate(self) -> None:
        missing = [f.name for f in fields(self) if not (getattr(self, f.name) or "").strip()]
        if missing:
            raise ValidationError(f"Fill all text fields first (missing: {', '.join(missing)}).")

    def trimmed(self) -> "PromptConfig":
        return replace(
            self,
            wildnet_data=self.wildnet_data.strip(),
            scoring_criteria_and_icp=self.scoring_criteria_and_icp.strip(),
            message_prompt=self.message_prompt.strip(),
        )


@dataclass
class BatchRun:
    """
    In-memory progress of one batch run. Only the last error/response is kept.
    """
    total: int = 0
    success: int = 0
    failed: int = 0
    last_error: str | None = None
    last_response: dict[str, Any] | None = None
    info: str | None = None

    def record_success(self, response: dict[str, Any]) -> None:
        self.success += 1
        self.last_response = response

    def record_failure(self, message: str) -> None:
        self.failed += 1
        self.last_error = message

    def as_dict(self) -> dict[str, Any]:
        return {
            "total": self.total,
            "success": self.success,
            "failed": self.failed,
            "last_error": self.last_error,
            "last_response": self.last_response,
            "info": self.info,
        }


@dataclass
class IngestResult:
    total: int = 0
    success: int = 0
    failed: int = 0
    last_error: str | None = None

    def record_failure(self, message: str) -> None:
        self.failed += 1
        self.last_error = message
