"""
Configuration settings for the explorer API

Loads environment variables and provides application configuration.
"""
import os
from typing import List, Optional
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()


class Settings:
    """Application settings"""

    # API Configuration
    API_VERSION: str = "0.1.0"
    API_TITLE: str = "Codex Explorer API"
    API_DESCRIPTION: str = "Networks, token lists and launchpad columns served through the Codex SDK"

    # Codex API
    CODEX_API_KEY: str = os.getenv("CODEX_API_KEY", "")
    CODEX_API_URL: Optional[str] = os.getenv("CODEX_API_URL") or None
    CODEX_WS_URL: Optional[str] = os.getenv("CODEX_WS_URL") or None

    # CORS Configuration
    CORS_ORIGINS: List[str] = os.getenv(
        "CORS_ORIGINS",
        "http://localhost:3000"
    ).split(",")

    # Server Configuration
    HOST: str = os.getenv("HOST", "0.0.0.0")
    PORT: int = int(os.getenv("PORT", 8000))
    DEBUG: bool = os.getenv("DEBUG", "False").lower() == "true"

    # Request Limits
    DEFAULT_TOKEN_LIMIT: int = 15
    MAX_TOKEN_LIMIT: int = 200
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()


# Create global settings instance
settings = Settings()
