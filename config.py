# config.py
"""Application configuration"""
from pydantic_settings import BaseSettings
from utils.common import get_log_file_path

class Settings(BaseSettings):
    """Application configuration"""

    # Logger configuration
    LOG_FILE_PATH: str = get_log_file_path()
    LOGGER_NAME: str = "hotel_ai"
    LOG_LEVEL: str = "INFO"  # file handler threshold
    LOG_MAX_BYTES: int = 5 * 1024 * 1024
    LOG_BACKUP_COUNT: int = 5

    # Database
    DATABASE_URL: str = "sqlite+aiosqlite:///./hotels.db"
    DB_ECHO: bool = False

    # API settings
    API_PREFIX: str = "/api/ai"
    OWNER_ID_HEADER: str = "X-Owner-Id"

    # App metadata
    APP_TITLE: str = "Hotel AI Service"
    APP_VERSION: str = "1.0.0"

    # ============= Lexical search =============
    SEARCH_TOP_K: int = 10
    TEXT_MATCH_SCORE: float = 1.0
    TITLE_MATCH_BONUS: float = 1.5  # added on top of TEXT_MATCH_SCORE

    # ============= Housekeeping planner =============
    # Minutes of labour per event
    CHECKOUT_CLEAN_MIN: int = 60
    STAYOVER_CLEAN_MIN: int = 20
    CHECKIN_PREP_MIN: int = 10
    STAFF_SHIFT_MIN: int = 480  # one staff member per 8h shift

    PLAN_MIN_DAYS: int = 1
    PLAN_MAX_DAYS: int = 31
    PLAN_DEFAULT_DAYS: int = 7

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"

settings = Settings()
