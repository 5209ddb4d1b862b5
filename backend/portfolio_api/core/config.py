from __future__ import annotations

import os
from pathlib import Path

from dotenv import load_dotenv


# Load backend/.env if it exists so DATABASE_URL, PORT etc. can be set locally
# without exporting them in the shell.
BASE_DIR = Path(__file__).resolve().parents[2]
env_path = BASE_DIR / ".env"
if env_path.exists():
    load_dotenv(env_path)


def _int_env(key: str, default: int) -> int:
    try:
        return int(os.getenv(key, str(default)))
    except ValueError:
        return default


class Settings:
    PROJECT_NAME = "Portfolio API"
    API_V1_STR = "/api"

    DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./portfolio.db")

    HOST = os.getenv("HOST", "0.0.0.0")
    PORT = _int_env("PORT", 2022)

    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
    LOG_FILE = os.getenv("LOG_FILE", "")

    _cors_origins = os.getenv("CORS_ORIGINS", "*")

    # If wildcard is present, treat as allow-all for local development
    if "*" in _cors_origins:
        CORS_ORIGINS = ["*"]
    else:
        CORS_ORIGINS = [o.strip() for o in _cors_origins.split(",") if o.strip()]


settings = Settings()
