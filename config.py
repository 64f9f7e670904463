"""
Configuration for the resume enhancer API
Loads settings from .env and the environment with typed defaults
"""

import os
from typing import List

from dotenv import load_dotenv

load_dotenv()


class Settings:
    """Runtime settings read from environment variables"""

    def __init__(self):
        # Upload limits (5MB by default)
        self.max_upload_bytes = int(os.getenv("MAX_UPLOAD_BYTES", str(5 * 1024 * 1024)))
        self.upload_dir = os.getenv("UPLOAD_DIR", "uploads")

        # Cosmetic pause before analysis results are returned; 0 disables it
        self.analysis_delay_seconds = float(os.getenv("ANALYSIS_DELAY_SECONDS", "2.0"))
        # "token" (whole-word) or "substring"
        self.keyword_matching = os.getenv("KEYWORD_MATCHING", "token").lower()

        # Idle sessions expire after this long; the store never holds more than max_sessions
        self.session_ttl_seconds = float(os.getenv("SESSION_TTL_SECONDS", "3600"))
        self.max_sessions = int(os.getenv("MAX_SESSIONS", "1000"))

        self.log_level =os.getenv("LOG_LEVEL", "INFO").upper()
        self.cors_origins = self._split_list(os.getenv("CORS_ORIGINS", "*"))

        self.host = os.getenv("HOST", "0.0.0.0")
        self.port = int(os.getenv("PORT", "8000"))

    @staticmethod
    def _split_list(value: str) -> List[str]:
        return [item.strip() for item in value.split(",") if item.strip()]


settings = Settings()
