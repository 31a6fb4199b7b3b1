"""
Clinical Calculator Service — Configuration
===========================================
Centralised settings for logging, the audit trail and the HTTP surface.
Loads overrides from the project-level .env file.
"""

import os
from pathlib import Path
from typing import List

from dotenv import load_dotenv

# ── Paths ───────────────────────────────────────────────────────────────
PROJECT_ROOT = Path(__file__).resolve().parent.parent          # repository root
PACKAGE_DIR = Path(__file__).resolve().parent                  # medcalc/

# ── Load .env ───────────────────────────────────────────────────────────
load_dotenv(PROJECT_ROOT / ".env")


def _env_bool(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


def _env_list(name: str, default: str) -> List[str]:
    raw = os.getenv(name, default)
    return [item.strip() for item in raw.split(",") if item.strip()]


# ── Logging ─────────────────────────────────────────────────────────────
LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
LOG_FILE: str = os.getenv("LOG_FILE", "")                      # empty = console only

# ── Audit trail ─────────────────────────────────────────────────────────
AUDIT_LOG_CAPACITY: int = int(os.getenv("AUDIT_LOG_CAPACITY", "1000"))
AUDIT_LOG_DEFAULT_LIMIT: int = int(os.getenv("AUDIT_LOG_DEFAULT_LIMIT", "100"))
AUDIT_ECHO: bool = _env_bool("AUDIT_ECHO", False)               # echo entries at DEBUG

# ── HTTP surface ────────────────────────────────────────────────────────
CORS_ALLOW_ORIGINS: List[str] = _env_list("CORS_ALLOW_ORIGINS", "*")
HOST: str = os.getenv("HOST", "127.0.0.1")
PORT: int = int(os.getenv("PORT", "8000"))

API_TITLE = "Clinical Calculator Service"
API_VERSION = "1.0.0"
