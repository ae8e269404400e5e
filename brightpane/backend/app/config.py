from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

DATA_DIR = Path(__file__).parent / "data"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # --- Runtime ---
    ENV: str = "dev"  # dev|prod
    LOG_LEVEL: str = "INFO"

    # --- Minimal auth for debug routes (API key) ---
    # Send: X-API-Key: <key>
    API_KEY: str | None = None

    # --- Pricing knobs (whole pounds) ---
    CONSERVATORY_SURCHARGE: int = 5
    EXTENSION_SURCHARGE: int = 5

    # --- Availability ---
    BOOKING_HORIZON_DAYS: int = 42  # six weeks, tomorrow..today+42
    SCHEDULE_DATA_PATH: Path = DATA_DIR / "schedule.json"
    BANK_HOLIDAYS_PATH: Path = DATA_DIR / "bank_holidays.json"

    # --- Bank holiday feed (gov.uk) ---
    BANK_HOLIDAYS_URL: str = "https://www.gov.uk/bank-holidays.json"
    BANK_HOLIDAYS_DIVISION: str = "england-and-wales"
    HTTP_TIMEOUT_S: int = 20


settings = Settings()
