"""
Configuration settings for the TubeKit application.
"""

import os
from typing import Dict, Any
from pathlib import Path
from dotenv import load_dotenv


# Ensure environment variables are loaded
load_dotenv()


class Config:
    """Base configuration class."""

    # Application info
    APP_NAME = "TubeKit"
    APP_VERSION = "0.2.0"

    BASE_DIR = Path(__file__).resolve().parent.parent.absolute()
    LOG_DIR = Path(os.getenv("LOG_DIR", str(BASE_DIR / "logs")))

    # API keys
    GROQ_API_KEY = os.getenv("GROQ_API_KEY")

    # Text generation
    LLM_PROVIDER = os.getenv("LLM_PROVIDER", "groq")
    SUMMARY_MODEL = os.getenv("SUMMARY_MODEL", "llama-3.1-8b-instant")
    SUMMARY_TEMPERATURE = float(os.getenv("SUMMARY_TEMPERATURE", "0.5"))
    SUMMARY_MAX_TOKENS = int(os.getenv("SUMMARY_MAX_TOKENS", "1024"))
    SEO_MODEL = os.getenv("SEO_MODEL", "llama-3.3-70b-versatile")
    SEO_TEMPERATURE = float(os.getenv("SEO_TEMPERATURE", "0.7"))
    SEO_MAX_TOKENS = int(os.getenv("SEO_MAX_TOKENS", "1024"))
    SEO_MAX_ATTEMPTS = int(os.getenv("SEO_MAX_ATTEMPTS", "1"))

    # Outbound HTTP (oEmbed lookups, thumbnail downloads)
    REQUEST_TIMEOUT = float(os.getenv("REQUEST_TIMEOUT", "15"))

    TRANSCRIPT_LANGUAGES = tuple(
        lang.strip() for lang in os.getenv("TRANSCRIPT_LANGUAGES", "en").split(",") if lang.strip()
    )

    PUBLIC_URL = os.getenv("PUBLIC_URL", "http://localhost:8000")

    @classmethod
    def initialize(cls):
        """Initialize the application configuration."""
        cls.LOG_DIR.mkdir(parents=True, exist_ok=True)

    @classmethod
    def missing_settings(cls) -> Dict[str, Any]:
        """Return required settings that have no value."""
        required = {"GROQ_API_KEY": cls.GROQ_API_KEY}
        return {name: value for name, value in required.items() if not value}


class DevelopmentConfig(Config):
    """Development configuration."""

    DEBUG = True
    LOG_LEVEL = "DEBUG"


class ProductionConfig(Config):
    """Production configuration."""

    DEBUG = False
    LOG_LEVEL = "INFO"


# Determine which configuration to use based on environment
def get_config():
    """Get the appropriate configuration based on environment."""
    env = os.getenv("ENVIRONMENT", "development").lower()
    if env == "production":
        return ProductionConfig
    else:
        return DevelopmentConfig


# Create a config instance
config = get_config()
config.initialize()
