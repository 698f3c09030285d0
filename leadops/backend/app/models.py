# app/models.py
from __future__ import annotations

import uuid
from datetime import datetime

from sqlalchemy import (
    Boolean,
    DateTime,
    Float,
    Integer,
    String,
    Text,
    UniqueConstraint,
)
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    pass


def _new_request_id() -> str:
    return str(uuid.uuid4())


class ScrapeRequest(Base):
    """
    A scraping request submitted by a user. An external scraper picks these up
    and flips is_fulfilled once the leads land in all_leads.
    """
    __tablename__ = "requests"

    request_id: Mapped[str] = mapped_column(String(36), primary_key=True, default=_new_request_id)
    created_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow, index=True)

    # exactly one of keywords / search_url is set
    keywords: Mapped[str | None] = mapped_column(Text, nullable=True)
    search_url: Mapped[str | None] = mapped_column(Text, nullable=True)

    request_by: Mapped[str] = mapped_column(String(64), index=True)
    tag: Mapped[str] = mapped_column(String(255))
    load_time: Mapped[int] = mapped_column(Integer, default=3)
    is_fulfilled: Mapped[bool] = mapped_column(Boolean, default=False)
    # True = likes pipeline, False = posts pipeline
    scrape_likes: Mapped[bool] = mapped_column(Boolean, default=True)


class LeadRecord(Base):
    __tablename__ = "all_leads"
    __table_args__ = (UniqueConstraint("lead_id", name="uq_all_leads_lead_id"),)

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    lead_id: Mapped[str] = mapped_column(String(255))
    user_id: Mapped[str | None] = mapped_column(String(64), index=True, nullable=True)
    tag: Mapped[str | None] = mapped_column(String(255), index=True, nullable=True)

    name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    title: Mapped[str | None] = mapped_column(String(255), nullable=True)
    location: Mapped[str | None] = mapped_column(String(255), nullable=True)
    company_name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    experience: Mapped[str | None] = mapped_column(Text, nullable=True)
    skills: Mapped[str | None] = mapped_column(Text, nullable=True)
    bio: Mapped[str | None] = mapped_column(Text, nullable=True)
    profile_url: Mapped[str | None] = mapped_column(Text, nullable=True)
    linkedin_url: Mapped[str | None] = mapped_column(Text, nullable=True)
    company_page_url: Mapped[str | None] = mapped_column(Text, nullable=True)

    created_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow, index=True)


class LlmResponse(Base):
    """
    Written by the external processor, one row per processed lead.
    This service only reads it (dashboard + unsent filter).
    """
    __tablename__ = "llm_response"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    lead_id: Mapped[str] = mapped_column(String(255), index=True)

    score: Mapped[float | None] = mapped_column(Float, nullable=True)
    should_contact: Mapped[bool | None] = mapped_column(Boolean, nullable=True)
    subject: Mapped[str | None] = mapped_column(Text, nullable=True)
    message: Mapped[str | None] = mapped_column(Text, nullable=True)

    created_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow, index=True)


class ApiCredential(Base):
    __tablename__ = "gemini_api"
    __table_args__ = (UniqueConstraint("api_key", name="uq_gemini_api_key"),)

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    api_key: Mapped[str] = mapped_column(String(255))


class PromptRecord(Base):
    __tablename__ = "prompts"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    user_id: Mapped[str] = mapped_column(String(64), index=True)
    tag: Mapped[str | None] = mapped_column(String(255), nullable=True)
    name: Mapped[str | None] = mapped_column(String(255), nullable=True)

    wildnet_data: Mapped[str] = mapped_column(Text)
    scoring_criteria_and_icp: Mapped[str] = mapped_column(Text)
    message_prompt: Mapped[str] = mapped_column(Text)

    created_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow, index=True)
