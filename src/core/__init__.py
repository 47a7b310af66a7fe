"""Core module for the monitoring facade.

This module contains the agent interface, domain models, configuration, and constants.
"""

from src.core.agent import IMonitoringAgent
from src.core.config import Settings, AgentBackend
from src.core.models import AgentCall, NoticeError
from src.core.constants import (
    DEFAULT_AGENT_MODULE,
    DEFAULT_PARAMETER_VALUE,
    ENV_PREFIX,
    JSON_SEPARATORS,
)

__all__ = [
    "IMonitoringAgent",
    "Settings",
    "AgentBackend",
    "AgentCall",
    "NoticeError",
    "DEFAULT_AGENT_MODULE",
    "DEFAULT_PARAMETER_VALUE",
    "ENV_PREFIX",
    "JSON_SEPARATORS",
]
