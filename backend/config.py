# backend/config.py
from __future__ import annotations
from pathlib import Path
import os
from dotenv import load_dotenv

# Load exactly backend/.env (do NOT call load_dotenv() without a path)
ENV_FILE = Path(__file__).with_name(".env")
load_dotenv(ENV_FILE, override=False)


def get_factors_file() -> Path | None:
    # Empty means "use the built-in seed table"
    raw = os.getenv("EMISSION_FACTORS_FILE", "").strip()
    return Path(raw).resolve() if raw else None


def get_settings():
    return Settings


class Settings:
    OSRM_BASE_URL: str = os.getenv("OSRM_BASE_URL", "http://router.project-osrm.org")
    NOMINATIM_BASE_URL: str = os.getenv(
        "NOMINATIM_BASE_URL", "https://nominatim.openstreetmap.org"
    )
    # Nominatim refuses anonymous clients
    GEOCODER_USER_AGENT: str = os.getenv(
        "GEOCODER_USER_AGENT", "Carbon-Aware-Route-Planner/1.0"
    )
    HTTP_TIMEOUT_S: float = float(os.getenv("HTTP_TIMEOUT_S", "15.0"))
    ROUTING_MAX_ALTERNATIVES: int = int(os.getenv("ROUTING_MAX_ALTERNATIVES", "3"))
    GEOCODE_CACHE_TTL_S: int = int(os.getenv("GEOCODE_CACHE_TTL_S", "300"))
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
    CORS_ALLOW_ORIGINS: str = os.getenv("CORS_ALLOW_ORIGINS", "http://localhost:3000")


settings = Settings
