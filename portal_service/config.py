"""
Portal Service Configuration Module

Centralized configuration management with Pydantic validation.
All environment variables are validated at startup to catch misconfigurations early.
"""

import logging
from functools import lru_cache
from typing import List, Optional
from urllib.parse import quote_plus

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings


class PortalSettings(BaseSettings):
    """
    Portal service configuration with validation.

    All settings can be overridden via environment variables or a local .env file.
    Validation happens at startup to fail fast on misconfiguration.
    """

    # === Server ===
    port: int = Field(
        default=5000,
        ge=1,
        le=65535,
        description="HTTP listening port"
    )
    environment: str = Field(
        default="development",
        description="Environment: development, staging, production"
    )
    log_level: str = Field(
        default="INFO",
        description="Root logging level"
    )

    # === MongoDB ===
    db_user: Optional[str] = Field(
        default=None,
        description="Atlas database user"
    )
    db_pass: Optional[str] = Field(
        default=None,
        description="Atlas database password"
    )
    db_cluster_host: str = Field(
        default="cluster0.rwhf0.mongodb.net",
        description="Atlas cluster host used to build the SRV connection string"
    )
    mongodb_uri: Optional[str] = Field(
        default=None,
        description="Full MongoDB connection URI (overrides DB_USER/DB_PASS)"
    )
    mongo_db_name: str = Field(
        default="jobportal",
        description="MongoDB database name"
    )
    jobs_collection: str = Field(
        default="jobs",
        description="Collection holding job postings"
    )
    applications_collection: str = Field(
        default="job_applications",
        description="Collection holding job applications"
    )

    # === Security ===
    access_token_secret: Optional[str] = Field(
        default=None,
        min_length=16,
        description="JWT signing secret (min 16 chars)"
    )
    access_token_expire_minutes: int = Field(
        default=60,
        ge=1,
        le=1440,
        description="Token lifetime in minutes (1-1440)"
    )
    auth_enabled: bool = Field(
        default=True,
        description="Guard the applicant listing with the token cookie"
    )
    cookie_secure: bool = Field(
        default=False,
        description="Send the token cookie over HTTPS only"
    )
    cookie_samesite: str = Field(
        default="lax",
        description="SameSite attribute of the token cookie: lax, strict, none"
    )

    # === CORS ===
    cors_origins: str = Field(
        default="http://localhost:5173",
        description="Comma-separated list of allowed CORS origins"
    )

    @field_validator("environment")
    @classmethod
    def validate_environment(cls, v: str) -> str:
        """Validate environment is a known value."""
        allowed = {"development", "staging", "production"}
        v_lower = v.lower()
        if v_lower not in allowed:
            raise ValueError(f"environment must be one of: {', '.join(sorted(allowed))}")
        return v_lower

    @field_validator("access_token_secret")
    @classmethod
    def validate_secret_strength(cls, v: Optional[str]) -> Optional[str]:
        """Reject well-known placeholder secrets."""
        if v is None:
            return None
        weak_secrets = {"secretsecretsecret", "passwordpassword", "changemechangeme"}
        if v.lower() in weak_secrets or len(set(v)) < 4:
            raise ValueError("Access token secret is too weak - use a secure random string")
        return v

    @field_validator("mongodb_uri")
    @classmethod
    def validate_uri_format(cls, v: Optional[str]) -> Optional[str]:
        """Basic MongoDB URI format validation."""
        if v is None:
            return None
        if not v.startswith(("mongodb://", "mongodb+srv://")):
            raise ValueError(f"Invalid MongoDB URI format: {v[:20]}...")
        return v

    @field_validator("cookie_samesite")
    @classmethod
    def validate_samesite(cls, v: str) -> str:
        v_lower = v.lower()
        if v_lower not in {"lax", "strict", "none"}:
            raise ValueError("cookie_samesite must be one of: lax, strict, none")
        return v_lower

    @property
    def mongodb_connection_uri(self) -> str:
        """
        Resolve the MongoDB connection string.

        MONGODB_URI wins when set. Otherwise an Atlas SRV string is built from
        DB_USER/DB_PASS, falling back to a local server for development.
        """
        if self.mongodb_uri:
            return self.mongodb_uri
        if self.db_user and self.db_pass:
            return (
                f"mongodb+srv://{quote_plus(self.db_user)}:{quote_plus(self.db_pass)}"
                f"@{self.db_cluster_host}/?retryWrites=true&w=majority&appName=Cluster0"
            )
        return "mongodb://localhost:27017"

    @property
    def cors_origins_list(self) -> List[str]:
        """Parse CORS origins into a list."""
        if not self.cors_origins:
            return []
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]

    @property
    def is_production(self) -> bool:
        """Check if running in production mode."""
        return self.environment == "production"

    @property
    def auth_required(self) -> bool:
        """Check if the token guard is active."""
        # Production always guards, regardless of AUTH_ENABLED
        return self.is_production or self.auth_enabled

    def validate_production_config(self) -> List[str]:
        """
        Validate configuration is suitable for the current environment.

        Returns list of warning/error messages.
        """
        issues = []

        if self.auth_required and not self.access_token_secret:
            if self.is_production:
                issues.append("CRITICAL: ACCESS_TOKEN_SECRET required in production")
            else:
                issues.append("WARNING: ACCESS_TOKEN_SECRET not set, token endpoints will fail")

        if self.cookie_samesite == "none" and not self.cookie_secure:
            issues.append("WARNING: COOKIE_SAMESITE=none requires COOKIE_SECURE=true in browsers")

        if self.is_production:
            if not self.cookie_secure:
                issues.append("WARNING: COOKIE_SECURE is off in production")
            if not self.cors_origins:
                issues.append("WARNING: CORS_ORIGINS not configured")
            if "localhost" in self.mongodb_connection_uri:
                issues.append("WARNING: Using localhost MongoDB in production")

        return issues

    class Config:
        env_prefix = ""  # No prefix, use exact env var names
        case_sensitive = False  # ACCESS_TOKEN_SECRET = access_token_secret
        env_file = ".env"
        extra = "ignore"


@lru_cache()
def get_settings() -> PortalSettings:
    """
    Get cached settings instance.

    Settings are loaded once and cached for performance.
    Use this function to access configuration throughout the app.
    """
    return PortalSettings()


def validate_config_on_startup() -> None:
    """
    Validate configuration at application startup.

    Raises ValueError with details if config is invalid.
    Logs warnings for non-critical issues.
    """
    logger = logging.getLogger(__name__)

    try:
        settings = get_settings()
    except Exception as e:
        raise ValueError(f"Configuration validation failed: {e}")

    issues = settings.validate_production_config()

    for issue in issues:
        if issue.startswith("CRITICAL"):
            raise ValueError(issue)
        else:
            logger.warning(issue)

    # Log loaded configuration (redact secrets)
    uri = settings.mongodb_connection_uri
    logger.info(f"Configuration loaded: environment={settings.environment}")
    logger.info(f"  port={settings.port}")
    logger.info(f"  mongodb_uri={'*****' if 'localhost' not in uri else uri}")
    logger.info(f"  database={settings.mongo_db_name}")
    logger.info(f"  auth_required={settings.auth_required}")
    logger.info(f"  cookie_secure={settings.cookie_secure}")


# Convenience exports
settings = get_settings()
