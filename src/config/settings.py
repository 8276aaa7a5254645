from typing import List

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Denominations held by the machine, largest first
    TELLER_DENOMINATIONS: List[int] = [20, 10, 5, 1]

    LOG_LEVEL: str = "INFO"

    # Observability toggles
    TELLER_EVENT_LOGGING: bool = True
    TELLER_JOURNAL_ENABLED: bool = True


settings = Settings()
