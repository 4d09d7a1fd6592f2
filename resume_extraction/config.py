"""
Heuristic constants for the extraction core and settings for the HTTP service.
"""
import os
from dataclasses import dataclass, field
from typing import List

from dotenv import load_dotenv


@dataclass(frozen=True)
class ExtractionConfig:
    """Tunable limits used by the extractors"""
    max_skills: int = 20
    skill_min_length: int = 2
    skill_max_length: int = 30  # exclusive
    name_scan_lines: int = 10
    name_min_length: int = 5
    name_max_length: int = 50
    summary_min_length: int = 20  # exclusive
    summary_zone_min_length: int = 50
    summary_zone_max_length: int = 500  # exclusive


DEFAULT_CONFIG = ExtractionConfig()


def _split_origins(raw: str) -> List[str]:
    return [origin.strip() for origin in raw.split(",") if origin.strip()]


@dataclass
class Settings:
    """Service settings, read from the environment (and `.env`)"""
    max_upload_mb: int = 10
    log_level: str = "INFO"
    cors_origins: List[str] = field(default_factory=lambda: ["*"])
    host: str = "0.0.0.0"
    port: int = 5000

    @property
    def max_content_length(self) -> int:
        return self.max_upload_mb * 1024 * 1024

    @classmethod
    def from_env(cls) -> "Settings":
        load_dotenv()
        return cls(
            max_upload_mb=int(os.getenv("RESUME_MAX_UPLOAD_MB", "10")),
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
            cors_origins=_split_origins(os.getenv("CORS_ORIGINS", "*")),
            host=os.getenv("HOST", "0.0.0.0"),
            port=int(os.getenv("PORT", "5000")),
        )
