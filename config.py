from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Tuple

from dotenv import load_dotenv


def _env_flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


@dataclass(frozen=True)
class Settings:
    gemini_api_key: str
    gemini_model: str
    use_vertexai: bool
    google_cloud_project: Optional[str]
    google_cloud_location: Optional[str]
    gcs_bucket_name: Optional[str]
    downloads_dir: Path
    request_timeout_seconds: float
    temperature: float
    max_output_tokens: int
    top_p: float
    log_level: str
    cors_origins: Tuple[str, ...]


def load_settings() -> Settings:
    load_dotenv()

    cors_origins = tuple(
        origin.strip() for origin in os.getenv("CORS_ORIGINS", "*").split(",") if origin.strip()
    )

    return Settings(
        gemini_api_key=os.getenv("GEMINI_API_KEY", "").strip(),
        gemini_model=os.getenv("GEMINI_MODEL", "gemini-2.5-flash"),
        use_vertexai=_env_flag("GOOGLE_GENAI_USE_VERTEXAI"),
        google_cloud_project=os.getenv("GOOGLE_CLOUD_PROJECT"),
        google_cloud_location=os.getenv("GOOGLE_CLOUD_LOCATION"),
        gcs_bucket_name=os.getenv("GCS_BUCKET_NAME") or None,
        downloads_dir=Path(os.getenv("DOWNLOADS_DIR", "downloads")).resolve(),
        request_timeout_seconds=float(os.getenv("GENAI_TIMEOUT_SECONDS", "30")),
        temperature=float(os.getenv("GENAI_TEMPERATURE", "0.7")),
        max_output_tokens=int(os.getenv("GENAI_MAX_OUTPUT_TOKENS", "4000")),
        top_p=float(os.getenv("GENAI_TOP_P", "0.9")),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        cors_origins=cors_origins or ("*",),
    )
