# app/domain/presets.py
from __future__ import annotations

from dataclasses import dataclass

from .types import PromptConfig


@dataclass(frozen=True)
class PromptPreset:
    key: str
    label: str
    prompt: PromptConfig


_OUTPUT_FORMAT = """{
  "should_contact": true|false,
  "score": 0-100,
  "subject": "short subject",
  "message": "2-4 sentence DM/email with 1 relevant hook"
}"""

LEAD_BASIC = PromptPreset(
    key="lead_basic",
    label="Lead filtration",
    prompt=PromptConfig(
        wildnet_data=(
            "About Wildnet Technologies:\n"
            "- We help B2B companies accelerate outbound by identifying high-intent prospects "
            "and crafting tailored first-touch messages.\n"
            "- Core value prop: Higher reply rates through precise ICP matching and relevant personalization.\n\n"
            "Context:\n"
            "- Use LinkedIn and public data only.\n"
            "- Avoid making assumptions not supported by the data."
        ),
        scoring_criteria_and_icp=(
            "Scoring Criteria (0-100):\n"
            "- Relevance to ICP (industry, role seniority, function) - 40\n"
            "- Clear buying signals (keywords in bio/experience) - 30\n"
            "- Company fit (size/stage, geography if available) - 20\n"
            "- Data confidence/clarity - 10\n\n"
            "Ideal Customer Profile (ICP):\n"
            "- Roles: Founders, CEOs, Heads of Growth/Marketing/Sales\n"
            "- Industries: SaaS, B2B services\n"
            "- Company size: 10-500\n\n"
            "Eligibility Rules:\n"
            "- If role or company context is too generic or missing, mark ineligible.\n"
            "- If misaligned industry/function, mark ineligible."
        ),
        message_prompt=(
            "Task:\n"
            "1) Decide if the lead matches the ICP.\n"
            "2) If eligible, generate a concise, personalized first-touch message.\n\n"
            f"Output format (JSON):\n{_OUTPUT_FORMAT}\n\n"
            "Guidelines:\n"
            "- Personalize using title, company, and visible achievements.\n"
            "- Avoid fluff; be specific and value-driven.\n"
            "- No fake familiarity; use only provided data."
        ),
    ),
)

LEAD_FIRMO_TECHNO = PromptPreset(
    key="lead_firmo_techno",
    label="Lead filtration + Firmographics/Technographics",
    prompt=PromptConfig(
        wildnet_data=(
            "About Wildnet Technologies:\n"
            "- We provide outbound ops: prospecting, enrichment, scoring, and messaging at scale.\n\n"
            "Target Firmographics:\n"
            "- Industries: SaaS, B2B services\n"
            "- Company size: 20-1000 employees\n"
            "- Regions: North America, Europe (if visible)\n\n"
            "Target Technographics (if visible):\n"
            "- CRM/Marketing tools (e.g., HubSpot, Salesforce, Marketo)\n"
            "- Sales tools (e.g., Outreach, Salesloft)\n"
            "- Data tools (e.g., Snowflake, BigQuery)\n\n"
            "Notes:\n"
            "- Use only explicit data; do not infer missing technographics."
        ),
        scoring_criteria_and_icp=(
            "Scoring Criteria (0-100):\n"
            "- Role/Function Relevance - 25\n"
            "- Industry/Company Size Fit - 25\n"
            "- Technographic Fit - 25\n"
            "- Observable Buying Signals - 15\n"
            "- Data Confidence - 10\n\n"
            "Eligibility Rules:\n"
            "- Missing role and company context -> ineligible.\n"
            "- Clear mismatch in industry/function -> ineligible.\n\n"
            "ICP Summary:\n"
            "- Roles: Founders, RevOps, Growth/Marketing/Sales leaders\n"
            "- Industries: SaaS, B2B services\n"
            "- Size: 20-1000 employees"
        ),
        message_prompt=(
            "Task:\n"
            "1) Evaluate lead against firmographic and technographic fit.\n"
            "2) If eligible, produce a short, tailored first-touch message.\n\n"
            f"Output (JSON):\n{_OUTPUT_FORMAT}\n\n"
            "Messaging Tips:\n"
            "- Reference any visible tools, growth indicators, or relevant initiatives.\n"
            "- Keep it helpful and specific; avoid generic claims.\n"
            "- No hallucinations; use only provided data."
        ),
    ),
)

CUSTOM = PromptPreset(
    key="custom",
    label="Custom",
    prompt=PromptConfig(wildnet_data="", scoring_criteria_and_icp="", message_prompt=""),
)

PRESETS: dict[str, PromptPreset] = {p.key: p for p in (LEAD_BASIC, LEAD_FIRMO_TECHNO, CUSTOM)}


def get_preset(key: str | None) -> PromptPreset:
    """Unknown keys fall back to the empty custom preset."""
    return PRESETS.get(key or "", CUSTOM)
