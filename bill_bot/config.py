"""
Configuration Module for Bill Bot
=================================

This module centralizes the configuration settings, environment variables and
constants used throughout the Bill Bot application. Values are parsed once at
import time; `.env` files are loaded by main.py before this module is imported.

Configuration Categories:
-------------------------
- **Database**: Connection URL for the menu and bill store.

- **Order Parsing**: Character windows used by the deterministic parser when
  looking for quantities and qualifier words around an item mention. These
  were chosen by ear and should be tuned against real transcripts.

- **LLM Fallback**: Whether the paid parser is tried when the deterministic
  parser recognizes nothing, which model it uses, and how many results are
  cached.

- **Billing**: Tax rate applied to the bill subtotal.

- **Rate Limiting / Input Validation / CORS / Admin**: Same meaning as in any
  of our FastAPI services.

Environment Variables:
----------------------
- DATABASE_URL: SQLAlchemy URL (default: "sqlite:///./bill_bot.db")
- QUANTITY_WINDOW_BEFORE: Chars searched before an item (default: 14)
- QUANTITY_WINDOW_AFTER: Chars searched after an item (default: 10)
- QUALIFIER_WINDOW: Chars searched before an item for qualifiers (default: 14)
- LLM_FALLBACK_ENABLED: Enable the LLM fallback parser (default: "true")
- OPENAI_API_KEY: API key for the fallback parser (optional)
- OPENAI_MODEL: Model for the fallback parser (default: "gpt-4o-mini")
- LLM_CACHE_MAX_SIZE: Cached fallback results (default: 500)
- TAX_RATE: Fraction of subtotal charged as tax (default: 0.0)
- MAX_VOICE_INPUT_LENGTH: Max transcript length (default: 2000)
- RATE_LIMIT_BILL: Bill generation rate limit (default: "30 per minute")
- RATE_LIMIT_ENABLED: Enable/disable rate limiting (default: "true")
- CORS_ORIGINS: Comma-separated allowed origins (default: "*")
- ADMIN_USERNAME: Admin username (default: "admin")
- ADMIN_PASSWORD: Admin password (required for admin access)
- SEED_MENU_ON_STARTUP: Seed the default menu into an empty DB (default: "true")

Usage:
------
    from bill_bot.config import (
        QUANTITY_WINDOW_BEFORE,
        RATE_LIMIT_BILL,
        TAX_RATE,
    )
"""

import os
from typing import List


def _env_bool(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() == "true"


# =============================================================================
# Database Configuration
# =============================================================================

DATABASE_URL: str = os.getenv("DATABASE_URL", "sqlite:///./bill_bot.db")


# =============================================================================
# Order Parsing Configuration
# =============================================================================
# Window sizes in characters of normalized text.

QUANTITY_WINDOW_BEFORE: int = int(os.getenv("QUANTITY_WINDOW_BEFORE", "14"))
QUANTITY_WINDOW_AFTER: int = int(os.getenv("QUANTITY_WINDOW_AFTER", "10"))
QUALIFIER_WINDOW: int = int(os.getenv("QUALIFIER_WINDOW", "14"))


# =============================================================================
# LLM Fallback Configuration
# =============================================================================
# The fallback is only called when deterministic parsing finds nothing.

LLM_FALLBACK_ENABLED: bool = _env_bool("LLM_FALLBACK_ENABLED", "true")
OPENAI_MODEL: str = os.getenv("OPENAI_MODEL", "gpt-4o-mini")
LLM_CACHE_MAX_SIZE: int = int(os.getenv("LLM_CACHE_MAX_SIZE", "500"))


# =============================================================================
# Billing Configuration
# =============================================================================

TAX_RATE: float = float(os.getenv("TAX_RATE", "0.0"))


# =============================================================================
# Rate Limiting Configuration
# =============================================================================
# Rate limit format: "X per Y" where Y is second, minute, hour, or day

RATE_LIMIT_BILL: str = os.getenv("RATE_LIMIT_BILL", "30 per minute")
RATE_LIMIT_ENABLED: bool = _env_bool("RATE_LIMIT_ENABLED", "true")


def get_rate_limit_bill() -> str:
    """
    Return the current bill generation rate limit.

    Read at request time so tests can override the module-level constant.
    """
    return RATE_LIMIT_BILL


# =============================================================================
# Input Validation Configuration
# =============================================================================

MAX_VOICE_INPUT_LENGTH: int = int(os.getenv("MAX_VOICE_INPUT_LENGTH", "2000"))


# =============================================================================
# CORS Configuration
# =============================================================================
# Format: comma-separated list of origins. Default "*" is for development only.

_cors_origins_env = os.getenv("CORS_ORIGINS", "")
CORS_ORIGINS: List[str] = [
    origin.strip()
    for origin in _cors_origins_env.split(",")
    if origin.strip()
] or ["*"]


# =============================================================================
# Admin Authentication Configuration
# =============================================================================

ADMIN_USERNAME: str = os.getenv("ADMIN_USERNAME", "admin")
ADMIN_PASSWORD: str = os.getenv("ADMIN_PASSWORD", "")


# =============================================================================
# Startup
# =============================================================================

SEED_MENU_ON_STARTUP: bool = _env_bool("SEED_MENU_ON_STARTUP", "true")
