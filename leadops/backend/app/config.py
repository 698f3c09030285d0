from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # --- Runtime ---
    ENV: str = "dev"  # dev|prod
    LEADOPS_DB_URL: str = "sqlite+aiosqlite:///./leadops.db"

    # --- Minimal B2B Auth (API key) ---
    # Send: X-API-Key: <key>
    API_KEY: str | None = None

    # --- Scoring/messaging processor ---
    PROCESSOR_BASE_URL: str = "http://localhost:8000"
    PROCESSOR_PATH: str = "/process-lead"
    # None keeps the httpx transport default
    PROCESSOR_TIMEOUT_S: float | None = None

    # --- Unsent-leads procedure names ---
    # The orchestrator tries the documented name first, then the alternate one.
    UNSENT_LEADS_RPC: str = "fetch_unsent_leads_by_user"
    UNSENT_LEADS_RPC_FALLBACK: str = "fetch_unsent_leads"
    # Name under which this deployment's store actually exposes the query
    STORE_UNSENT_LEADS_RPC: str = "fetch_unsent_leads_by_user"

    # --- Dashboard / history ---
    DASHBOARD_PAGE_SIZE: int = 200
    DASHBOARD_WINDOW_DAYS: int = 14
    REQUEST_HISTORY_LIMIT: int = 200


settings = Settings()
