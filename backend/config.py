"""Configuration and settings for FleetSync AI.

Uses Pydantic Settings for fail-fast validation on startup.
All required environment variables are validated when settings are first loaded.
"""

import logging
import sys
from functools import lru_cache
from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


def setup_logging(level: str = "INFO") -> None:
    """Configure application logging.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR)
    """
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
    )

    # Reduce noise from third-party libraries
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("anthropic").setLevel(logging.WARNING)
    logging.getLogger("google").setLevel(logging.WARNING)
    logging.getLogger("urllib3").setLevel(logging.WARNING)


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    Raises ValidationError on startup if required variables are missing.
    """

    model_config = SettingsConfigDict(
        env_file=("../.env", ".env"),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # API Keys (required)
    anthropic_api_key: str = Field(..., description="Anthropic API key for Claude")

    # Firebase Configuration (required)
    # Can be a JSON string, a file path or base64-encoded JSON
    firebase_credentials: str = Field(
        ..., description="Firebase service account JSON string or path to JSON file"
    )
    firebase_storage_bucket: str | None = Field(
        default=None,
        description="Cloud Storage bucket for attachments (defaults to <project>.appspot.com)",
    )

    # Maps provider (optional, only used by the web client)
    maps_api_key: str | None = Field(default=None, description="Maps API key")

    # Application Settings
    environment: str = Field(default="development", description="Environment name")
    debug: bool = Field(default=False, description="Debug mode")
    log_level: str = Field(default="INFO", description="Root log level")

    # Accounts
    super_admin_email: str | None = Field(
        default=None, description="Email that is promoted to superAdmin on sign-in"
    )
    dev_company_id: str = Field(
        default="fleetsync_ai_dev", description="Company assigned to the super admin"
    )
    dev_company_name: str = Field(default="FleetSync AI (Dev)")

    # Jobs
    tracking_link_ttl_hours: int = Field(
        default=4, description="Validity of customer tracking links in hours"
    )
    triage_link_ttl_hours: int = Field(
        default=48, description="Validity of customer photo triage links in hours"
    )

    # Rate limiting
    trust_forwarded_for: bool = Field(
        default=False,
        description="Key rate limits on X-Forwarded-For (only behind a trusted proxy)",
    )

    # LLM Settings
    llm_model: str = Field(
        default="claude-sonnet-4-20250514", description="Claude model for flows"
    )
    llm_temperature: float = Field(
        default=0.2, description="LLM temperature for structured suggestions"
    )
    llm_max_tokens: int = Field(default=2048, description="Max tokens for generation")
    llm_timeout_seconds: float = Field(default=60.0, description="LLM request timeout")

    @field_validator("anthropic_api_key", "firebase_credentials")
    @classmethod
    def validate_not_empty(cls, v: str, info) -> str:
        """Ensure secrets are not empty strings."""
        if not v or not v.strip():
            raise ValueError(f"{info.field_name} cannot be empty")
        return v.strip()


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return Settings()


# CORS Configuration
CORS_CONFIG: dict[str, Any] = {
    "allow_origins": [
        "http://localhost:3000",
        "http://localhost:9002",
        "http://127.0.0.1:3000",
        "http://127.0.0.1:9002",
    ],
    "allow_credentials": True,
    "allow_methods": ["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"],
    "allow_headers": ["*"],
    "expose_headers": ["*"],
    "max_age": 600,
}

# FastAPI App Configuration
APP_CONFIG: dict[str, Any] = {
    "title": "FleetSync AI",
    "description": (
        "Field-service management API: technicians, jobs, scheduling, chat, "
        "invoicing and AI-assisted dispatch helpers."
    ),
    "version": "0.1.0",
    "docs_url": "/api/docs",
    "redoc_url": "/api/redoc",
    "openapi_url": "/api/openapi.json",
    "openapi_tags": [
        {"name": "Health", "description": "Health check and service status"},
        {"name": "Jobs", "description": "Job lifecycle, documentation and invoices"},
        {"name": "Technicians", "description": "Technician profiles"},
        {"name": "Companies", "description": "Company settings"},
        {"name": "Users", "description": "User accounts and roles"},
        {"name": "Onboarding", "description": "Company creation"},
        {"name": "Catalog", "description": "Parts and skills libraries"},
        {"name": "Chat", "description": "Job chat messages"},
        {"name": "Tracking", "description": "Public customer tracking"},
        {"name": "Triage", "description": "Public customer photo triage"},
        {"name": "Reports", "description": "AI report analysis"},
        {"name": "AI", "description": "AI-assisted dispatch helpers"},
    ],
}


def get_app_config() -> dict[str, Any]:
    """Get FastAPI application configuration."""
    return APP_CONFIG.copy()


def get_cors_config() -> dict[str, Any]:
    """Get CORS middleware configuration."""
    return CORS_CONFIG.copy()
