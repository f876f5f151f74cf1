"""
Configuration for the live airport web service.

Everything is read from the environment once, at import time.
"""

import os
from typing import List, Optional


def _csv(name: str, default: str) -> List[str]:
    return [item.strip() for item in os.getenv(name, default).split(",") if item.strip()]


# Environment Configuration
ENVIRONMENT = os.getenv("ENVIRONMENT", "development")
FORCE_HTTPS = ENVIRONMENT == "production"

# CORS Configuration
ALLOWED_ORIGINS = _csv(
    "ALLOWED_ORIGINS",
    "http://localhost:3000,http://localhost:8000,http://127.0.0.1:8000",
)

# Trusted Hosts Configuration
ALLOWED_HOSTS = _csv("ALLOWED_HOSTS", "localhost,127.0.0.1")

# Rate Limiting Configuration
RATE_LIMIT_WINDOW = 60  # 1 minute
RATE_LIMIT_MAX_REQUESTS = int(os.getenv("RATE_LIMIT_MAX_REQUESTS", "120"))

# Input Validation Limits
ICAO_PATTERN = r"^[A-Za-z0-9]{4}$"
MAX_WORST_WEATHER_AIRPORTS = 20

# Airport data: SQLite database, else a JSON document
AIRPORTS_DB = os.getenv("AIRPORTS_DB", "airports.db")
AIRPORTS_JSON: Optional[str] = os.getenv("AIRPORTS_JSON") or None

# Live network
IVAO_API_BASE = os.getenv("IVAO_API_BASE", "https://api.ivao.aero")
IVAO_API_KEY = os.getenv("IVAO_API_KEY") or None
IVAO_CLIENT_ID = os.getenv("IVAO_CLIENT_ID") or None
IVAO_CLIENT_SECRET = os.getenv("IVAO_CLIENT_SECRET") or None
IVAO_OAUTH_SCOPE = os.getenv("IVAO_OAUTH_SCOPE", "openid profile email")

# Weather
AVIATION_WEATHER_BASE = os.getenv("AVIATION_WEATHER_BASE", "https://aviationweather.gov/api/data")
FEATURED_AIRPORTS = _csv("FEATURED_AIRPORTS", "")

# Per-poll deadline for the joined feeds
FEED_TIMEOUT_SECONDS = float(os.getenv("FEED_TIMEOUT_SECONDS", "2.5"))

# Security Headers
SECURITY_HEADERS = {
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "DENY",
    "X-XSS-Protection": "1; mode=block",
    "Referrer-Policy": "strict-origin-when-cross-origin",
}

# Logging Configuration
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
