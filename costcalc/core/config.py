from functools import lru_cache
from pathlib import Path
from typing import Optional
from pydantic_settings import BaseSettings, SettingsConfigDict

from costcalc.models.constants import PERIOD_EDITIONS


class Settings(BaseSettings):
    """Application settings loaded from environment with defaults.

    Environment variable mapping follows pydantic's rules (e.g., APP_NAME, DEBUG, DATA_DIR, DB_FILENAME, PERIOD_EDITION).
    """

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Basic app metadata
    app_name: str = "Cost Period Calculator"
    debug: bool = False
    version: str = "0.1.0"

    # Data & persistence (used currency preferences)
    data_dir: Path = Path("data")
    db_filename: str = "costcalc.sqlite3"
    db_path: Optional[Path] = None  # derived if not provided

    # Calculator behaviour
    # Allowed: 'basic' (once/daily/weekly/monthly/yearly), 'extended' (no once, adds biweekly etc.)
    period_edition: str = "basic"
    default_period: str = "daily"

    # Display formatting (digits after the decimal point)
    period_decimals: int = 0
    currency_decimals: int = 2

    def init_post_load(self) -> None:
        """Finalize derived fields and ensure directories exist."""
        if self.db_path is None:
            self.db_path = self.data_dir / self.db_filename
        self.db_path.parent.mkdir(parents=True, exist_ok=True)
        if self.period_edition not in PERIOD_EDITIONS:
            raise ValueError(
                f"Unsupported period_edition '{self.period_edition}'. Allowed: {set(PERIOD_EDITIONS)}"
            )
        if self.default_period not in {p.value for p in PERIOD_EDITIONS[self.period_edition]}:
            raise ValueError(
                f"default_period '{self.default_period}' is not part of edition '{self.period_edition}'"
            )
        if not (0 <= self.period_decimals <= 6 and 0 <= self.currency_decimals <= 6):
            raise ValueError("Display decimals must be between 0 and 6")


@lru_cache
def get_settings() -> Settings:
    settings = Settings()
    settings.init_post_load()
    return settings
