# concertdraft/core/config.py
# 환경변수(.env 포함) → 설정값
import os
from dataclasses import dataclass

from dotenv import load_dotenv

load_dotenv()


@dataclass(frozen=True)
class Settings:
    data_dir: str = os.getenv("DATA_DIR", os.path.join("data", "user"))
    concerts_store: str = os.getenv("CONCERTS_STORE", "user-concerts")
    store_backups: int = int(os.getenv("STORE_BACKUPS", "3"))
    fetch_timeout: float = float(os.getenv("FETCH_TIMEOUT", "10"))
    oembed_timeout: float = float(os.getenv("OEMBED_TIMEOUT", "8"))
    user_agent: str = os.getenv("USER_AGENT", "Mozilla/5.0")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")


settings = Settings()
