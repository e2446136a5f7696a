"""
Application settings.

Values are read from environment variables once, when the application
is created, and passed around as a ``Settings`` instance instead of
being looked up ad hoc.
"""

import os
from dataclasses import dataclass, field
from typing import List


def _split_csv(raw: str) -> List[str]:
    return [part.strip() for part in raw.split(",") if part.strip()]


@dataclass
class Settings:
    project_name: str = "Product API"
    host: str = "127.0.0.1"
    port: int = 3000
    api_key: str = "12345"
    log_level: str = "INFO"
    cors_origins: List[str] = field(default_factory=lambda: ["*"])

    @classmethod
    def from_env(cls) -> "Settings":
        """Build settings from the environment, falling back to defaults."""
        return cls(
            project_name=os.getenv("PROJECT_NAME", "Product API"),
            host=os.getenv("HOST", "127.0.0.1"),
            port=int(os.getenv("PORT", "3000")),
            api_key=os.getenv("API_KEY", "12345"),
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            cors_origins=_split_csv(os.getenv("CORS_ORIGINS", "*")),
        )
