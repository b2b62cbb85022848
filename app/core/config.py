from pydantic_settings import BaseSettings
from typing import Dict, List
import os
from dotenv import load_dotenv

load_dotenv()

# 요일 라벨 (0=일 ... 6=토)
DAY_OF_WEEK_LABEL: Dict[int, str] = {
    0: "일",
    1: "월",
    2: "화",
    3: "수",
    4: "목",
    5: "금",
    6: "토",
}

class Settings(BaseSettings):
    # App Settings
    APP_NAME: str = os.getenv("APP_NAME", "Marketplace Admin")
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    # MongoDB Settings
    MONGO_URI: str = os.getenv("MONGO_URI", "mongodb://localhost:27017")
    DB_NAME: str = os.getenv("DB_NAME", "marketplace_admin")

    # CORS
    CORS_ORIGINS: List[str] = [
        "http://localhost:3000",  # admin frontend
        "http://localhost:5173",  # vite dev server
    ]

    # Operating schedule defaults
    SCHEDULE_DEFAULT_START: str = os.getenv("SCHEDULE_DEFAULT_START", "09:00")
    SCHEDULE_DEFAULT_END: str = os.getenv("SCHEDULE_DEFAULT_END", "18:00")
    SCHEDULE_DEFAULT_INTERVAL: int = int(os.getenv("SCHEDULE_DEFAULT_INTERVAL", "60"))
    SCHEDULE_INTERVAL_OPTIONS: List[int] = [15, 30, 60, 90, 120]
    SCHEDULE_PREVIEW_LIMIT: int = int(os.getenv("SCHEDULE_PREVIEW_LIMIT", "6"))

    class Config:
        env_file = ".env"
        case_sensitive = True
        extra = "ignore"

settings = Settings()
