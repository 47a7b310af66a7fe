"""Configuration management using Pydantic Settings.

This module handles loading configuration from environment variables
and provides type-safe configuration objects.
"""

from enum import Enum
from typing import Optional
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from src.core.constants import DEFAULT_AGENT_MODULE, ENV_PREFIX


class AgentBackend(str, Enum):
    """Agent backend enumeration."""

    NEWRELIC = "newrelic"  # Host-loaded New Relic agent
    RECORDING = "recording"  # In-memory recorder, no telemetry leaves the process
    DISABLED = "disabled"  # Agent always reported as not loaded


class Settings(BaseSettings):
    """Main application settings."""

    model_config = SettingsConfigDict(
        env_prefix=ENV_PREFIX,
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Environment
    environment: str = Field("dev", description="Environment (dev/staging/prod)")

    # Agent
    agent_backend: AgentBackend = Field(
        AgentBackend.NEWRELIC, description="Agent backend: newrelic|recording|disabled"
    )
    agent_module: str = Field(
        DEFAULT_AGENT_MODULE, description="Module probed in sys.modules to detect the agent"
    )
    agent_register_timeout: Optional[float] = Field(
        None, ge=0, description="Seconds start_transaction waits for app registration (None: agent startup_timeout)"
    )

    @field_validator("agent_backend", mode="before")
    @classmethod
    def normalize_agent_backend(cls, v):
        """Normalize agent backend (handle 'null'/'none'/'off' -> 'disabled')."""
        if isinstance(v, str):
            v = v.strip().lower()
            if v in ("null", "none", "off"):
                return AgentBackend.DISABLED
            if v == "new_relic":
                return AgentBackend.NEWRELIC
        return v

    @field_validator("agent_module", mode="after")
    @classmethod
    def validate_agent_module(cls, v: str) -> str:
        """Reject blank module names."""
        v = v.strip()
        if not v:
            raise ValueError("agent_module must not be empty")
        return v

    # Logging
    log_level: str = Field("INFO", description="Logging level")
    log_file: Optional[str] = Field(None, description="Log file path")

    @field_validator("log_level", mode="after")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        """Upper-case the level name."""
        return v.strip().upper()

    @classmethod
    def from_env(cls) -> "Settings":
        """Load settings from environment variables."""
        return cls()
