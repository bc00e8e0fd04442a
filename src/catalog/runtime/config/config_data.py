"""Pydantic models for parsing the config.yaml configuration file.

This module contains Pydantic models that correspond to the structure of config.yaml.
These models handle validation and type conversion of the YAML configuration data.
"""

from __future__ import annotations

import os
from typing import Literal

from loguru import logger
from pydantic import BaseModel, Field
from sqlalchemy.engine import make_url


class CORSConfig(BaseModel):
    """CORS configuration for the application."""

    origins: list[str] = Field(
        default=["http://localhost:3000", "http://localhost:3001"]
    )
    allow_credentials: bool = True
    allow_methods: list[str] = Field(
        default=["GET", "POST", "PUT", "DELETE", "OPTIONS"]
    )
    allow_headers: list[str] = Field(default=["*"])


class LoggingConfig(BaseModel):
    """Logging configuration model."""

    level: str = Field(default="INFO", description="Logging level")
    format: Literal["json", "plain"] = Field(default="plain", description="Log format")
    file: str | None = Field(
        default=None, description="Log file path (no file sink when empty)"
    )
    max_size_mb: int = Field(default=10, description="Maximum log file size in MB")
    backup_count: int = Field(
        default=5, description="Number of backup log files to keep"
    )


class DatabaseConfig(BaseModel):
    """Database configuration model."""

    url: str = Field(
        default="sqlite:///./catalog.db",
        description="Database connection URL",
    )
    pool_size: int = Field(default=20, description="Connection pool size")
    max_overflow: int = Field(default=10, description="Maximum pool overflow")
    pool_timeout: int = Field(default=30, description="Pool timeout in seconds")
    pool_recycle: int = Field(default=1800, description="Pool recycle time in seconds")
    create_tables: bool = Field(
        default=True, description="Create missing tables on application startup"
    )
    environment_mode: Literal["development", "production", "test"] = Field(
        default="development", description="Environment mode"
    )
    password_env_var: str | None = Field(
        default=None,
        description="Environment variable name containing database password",
    )
    password_file: str | None = Field(
        default=None,
        description="Path to file containing database password",
    )

    @property
    def is_sqlite(self) -> bool:
        return self.url.startswith("sqlite")

    @property
    def password(self) -> str | None:
        """
        Get the database password from the appropriate source.
        1. In development and test mode, parse it from the URL if present
        2. In production mode, read it from the secrets file given by
           `password_file` or the environment variable named by `password_env_var`
        """
        if self.is_sqlite:
            return None

        if self.environment_mode in ("development", "test"):
            return make_url(self.url).password

        if self.password_file:
            try:
                with open(self.password_file) as f:
                    return f.read().strip()
            except OSError as e:
                raise ValueError("Failed to read database password from file.") from e
        if self.password_env_var:
            password = os.getenv(self.password_env_var)
            if password:
                return password
            raise ValueError(f"Environment variable {self.password_env_var} not set")
        raise ValueError(
            "In production mode, either password_file or password_env_var must be set"
        )

    @property
    def connection_string(self) -> str:
        """Construct the database connection string with the resolved password."""
        if self.is_sqlite:
            return self.url

        base_url = make_url(self.url)
        if base_url.password and self.environment_mode == "production":
            logger.warning(
                "Database URL contains a password in production mode; "
                "consider using a secrets file or environment variable."
            )

        resolved_password = self.password
        if resolved_password and resolved_password != base_url.password:
            base_url = base_url.set(password=resolved_password)

        # render_as_string keeps the password; str(url) masks it
        return base_url.render_as_string(hide_password=False)


class AppConfig(BaseModel):
    """Application configuration model."""

    name: str = Field(default="library-catalog", description="Service name")
    environment: Literal["development", "production", "test"] = Field(
        default="development", description="Application environment"
    )
    host: str = Field(default="localhost", description="Application host")
    port: int = Field(default=8000, description="Application port")
    cors: CORSConfig = Field(
        default_factory=CORSConfig, description="CORS configuration"
    )


class ConfigData(BaseModel):
    """Root configuration model that matches the config.yaml structure."""

    logging: LoggingConfig = Field(
        default_factory=LoggingConfig, description="Logging configuration"
    )
    database: DatabaseConfig = Field(
        default_factory=DatabaseConfig, description="Database configuration"
    )
    app: AppConfig = Field(
        default_factory=AppConfig, description="Application configuration"
    )
