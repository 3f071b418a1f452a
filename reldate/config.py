import os
from dataclasses import dataclass
from typing import Optional
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()


def _optional_int(name: str) -> Optional[int]:
    value = os.getenv(name)
    if value is None or value.strip() == "":
        return None
    return int(value)


@dataclass
class Config:
    # Locale used when neither options nor defaults name one
    DEFAULT_LOCALE: str = os.getenv("RELDATE_LOCALE", "en-US")

    # Week settings (None = take them from the locale)
    WEEK_STARTS_ON: Optional[int] = _optional_int("RELDATE_WEEK_STARTS_ON")
    FIRST_WEEK_CONTAINS_DATE: Optional[int] = _optional_int("RELDATE_FIRST_WEEK_CONTAINS_DATE")

    # Calendar in which day boundaries are counted
    TIME_ZONE: str = os.getenv("RELDATE_TIME_ZONE", "UTC")

    # Logging
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()


config = Config()
