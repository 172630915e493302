import os
from typing import List

class Settings:
    GITHUB_TOKEN: str = os.getenv("GITHUB_TOKEN", "")
    GITHUB_API: str = "https://api.github.com"
    GITHUB_TIMEOUT: float = float(os.getenv("GITHUB_TIMEOUT", "20"))
    GITHUB_MAX_WORKERS: int = int(os.getenv("GITHUB_MAX_WORKERS", "8"))
    CORS_ORIGINS: List[str] = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",")]
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()

settings = Settings()
