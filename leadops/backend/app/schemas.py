from pydantic import BaseModel, Field
from datetime import datetime
from typing import Any


class RequestCreate(BaseModel):
    keywords: str | None = None
    search_url: str | None = None
    tag: str = ""
    load_time: float = 3
    scrape_likes: bool = True


class RequestOut(BaseModel):
    request_id: str
    created_at: datetime
    keywords: str | None = None
    search_url: str | None = None
    tag: str
    load_time: int
    is_fulfilled: bool
    scrape_likes: bool


class IngestOut(BaseModel):
    total: int = Field(..., ge=0)
    success: int = Field(..., ge=0)
    failed: int = Field(..., ge=0)
    last_error: str | None = None


class UnsentCountOut(BaseModel):
    user_id: str
    unsent: int = Field(..., ge=0)


class PromptIn(BaseModel):
    # blank values are rejected by the service (400), not by schema validation
    wildnet_data: str = ""
    scoring_criteria_and_icp: str = ""
    message_prompt: str = ""


class PromptCreate(PromptIn):
    tag: str | None = None
    name: str | None = None


class PromptOut(BaseModel):
    id: int
    tag: str | None = None
    name: str | None = None
    wildnet_data: str
    scoring_criteria_and_icp: str
    message_prompt: str
    created_at: datetime


class PresetOut(BaseModel):
    key: str
    label: str
    wildnet_data: str
    scoring_criteria_and_icp: str
    message_prompt: str


class BatchRunIn(PromptIn):
    # either the three text blocks or a saved prompt
    prompt_id: int | None = None


class BatchResultOut(BaseModel):
    total: int
    success: int
    failed: int
    last_error: str | None = None
    last_response: dict[str, Any] | None = None
    info: str | None = None


class DashboardRow(BaseModel):
    created_at: datetime
    lead_id: str
    tag: str | None = None
    name: str | None = None
    title: str | None = None
    company_name: str | None = None
    location: str | None = None
    score: float | None = None
    should_contact: bool | None = None
    subject: str | None = None
    message: str | None = None
    linkedin_url: str | None = None


class CredentialCreate(BaseModel):
    api_key: str


class CredentialOut(BaseModel):
    id: int
